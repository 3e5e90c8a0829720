"""Strategy, analytics and SEO research templates."""
from __future__ import annotations

from marketgenius.prompts.content_types import ContentType
from marketgenius.prompts.registry import template
from marketgenius.prompts.templates import fenced


@template(ContentType.MARKETING_STRATEGY, topic="product", audience="audience", tone="duration", goal="goal")
def marketing_strategy(*, product: str, audience: str, duration: str, goal: str) -> str:
    return (
        "You are a Chief Marketing Officer (CMO) with 20 years of experience. Create a "
        "high-level, actionable marketing strategy.\n\n"
        f"**Product/Service Description:** {product}\n"
        f"**Target Audience:** {audience}\n"
        f"**Primary Campaign Goal:** {goal}\n"
        f"**Campaign Duration:** {duration}\n\n"
        "**Instructions:**\n"
        "Create a comprehensive marketing strategy in well-formatted Markdown. Structure your "
        "response with the following sections:\n\n"
        "1. **Campaign Name & Slogan:** Suggest 3 creative names and slogans.\n"
        "2. **Core Messaging & Value Proposition:** Define what the campaign will communicate and its key value.\n"
        "3. **Key Channels & Tactics:** Recommend the most effective marketing channels "
        "(e.g., Content Marketing, SEO, Paid Social, Email) and specific tactics.\n"
        "4. **Phased Rollout Plan:** Break down the campaign into phases based on the duration. "
        "Outline key activities and objectives for each phase.\n"
        "5. **Key Performance Indicators (KPIs):** List the most important metrics to track to "
        "measure success, tailored to the primary goal."
    )


@template(ContentType.CAMPAIGN_REPORT, topic="name", audience="metrics", tone="focus", goal="objective")
def campaign_report(*, name: str, metrics: str, focus: str, objective: str) -> str:
    return (
        "You are a senior marketing data analyst with a knack for storytelling. Your job is to "
        "analyze campaign performance data and present it as a clear, insightful narrative report.\n\n"
        f"**Campaign Name:** {name}\n"
        f"**Campaign Objective:** {objective}\n"
        "**Key Metrics Data:**\n"
        f"{fenced(metrics)}\n"
        f"**Requested Analysis Focus:** {focus}\n\n"
        "**Instructions:**\n"
        "Generate a comprehensive campaign performance report in well-formatted Markdown. "
        "Structure your response with the following sections:\n\n"
        "1. **Executive Summary:** Start with a brief, high-level summary of the campaign's "
        "performance against its stated objective.\n"
        "2. **Key Findings:** Present 3-5 bullet points highlighting the most important, data-backed insights.\n"
        "3. **Deep Dive Analysis:** Provide a more detailed analysis based on the 'Requested Analysis Focus'. "
        "Interpret the key metrics (e.g., CTR, CVR, CPA, ROAS) and explain what they mean in the "
        "context of the campaign.\n"
        "4. **What Went Well:** Identify the strengths and successful aspects of the campaign, "
        "citing specific data points.\n"
        "5. **Areas for Improvement:** Point out weaknesses or areas where performance can be "
        "optimized, citing specific data points.\n"
        "6. **Actionable Recommendations:** Conclude with a list of concrete, actionable steps to "
        "take to improve performance or apply learnings to future campaigns.\n\n"
        "Maintain a professional and data-driven tone throughout."
    )


@template(ContentType.SEO_META_DESCRIPTION, topic="title", audience="keywords")
def seo_meta_description(*, title: str, keywords: str) -> str:
    return (
        "Write a compelling, SEO-friendly meta description (120-160 characters) for a web page.\n\n"
        f"**Page Title/Topic:** {title}\n"
        f"**Primary Keywords:** {keywords}\n\n"
        "**Instructions:**\n"
        "- Include the primary keywords naturally.\n"
        "- Create a hook to encourage clicks from SERPs.\n"
        "- Adhere to the character limit."
    )


@template(ContentType.SEARCH_KEYWORDS, topic="theme", audience="industry", tone="audience")
def search_keywords(*, theme: str, industry: str, audience: str) -> str:
    return (
        "You are an SEO expert. Generate a list of relevant keywords for the given theme.\n\n"
        f"**Theme/Product/Service:** {theme}\n"
        f"**Industry:** {industry}\n"
        f"**Target Audience:** {audience}\n\n"
        "**Instructions:**\n"
        "- Provide a list of 5-7 Primary Keywords.\n"
        "- Provide a list of 10-15 Secondary/Long-tail Keywords.\n"
        "- Provide a list of 5-7 LSI (Latent Semantic Indexing) Keywords.\n"
        "- Format the output clearly using Markdown headings."
    )
