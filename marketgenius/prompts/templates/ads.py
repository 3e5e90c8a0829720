"""Advertising and video templates."""
from __future__ import annotations

from marketgenius.prompts.content_types import ContentType
from marketgenius.prompts.registry import template
from marketgenius.prompts.templates import fenced


@template(ContentType.GOOGLE_AD_COPY, topic="product", audience="keywords")
def google_ad_copy(*, product: str, keywords: str) -> str:
    return (
        "You are a Google Ads expert. Write ad copy for a product/service.\n"
        f"**Product/Service:** {product}\n"
        f"**Keywords to Target:** {keywords}\n"
        "**Instructions:**\n"
        "Generate 3 variations of Google Ad copy. For each variation, provide:\n"
        "- **Headline 1 (30 chars max):**\n"
        "- **Headline 2 (30 chars max):**\n"
        "- **Headline 3 (30 chars max):**\n"
        "- **Description 1 (90 chars max):**\n"
        "- **Description 2 (90 chars max):**\n"
        "Ensure the copy is compelling and includes a strong call to action."
    )


@template(ContentType.INSTAGRAM_FACEBOOK_AD_COPY, topic="product", audience="audience", tone="tone")
def instagram_facebook_ad_copy(*, product: str, audience: str, tone: str) -> str:
    return (
        "You are a social media ads specialist. Write ad copy for Instagram or Facebook.\n"
        f"**Product/Service:** {product}\n"
        f"**Target Audience:** {audience}\n"
        f"**Tone:** {tone}\n"
        "**Instructions:**\n"
        "1. **Primary Text:** Write compelling copy that stops the scroll and highlights benefits.\n"
        "2. **Headline:** Create a short, punchy headline.\n"
        '3. **Call to Action:** Suggest a CTA button (e.g., "Shop Now," "Learn More").\n'
        "Provide 2-3 variations."
    )


@template(ContentType.LINKEDIN_AD_COPY, topic="product", audience="audience", tone="tone")
def linkedin_ad_copy(*, product: str, audience: str, tone: str) -> str:
    return (
        "You are a B2B ad specialist. Write ad copy for LinkedIn.\n"
        f"**Product/Service:** {product}\n"
        f"**Target Audience:** {audience}\n"
        f"**Tone:** {tone}\n"
        "**Instructions:**\n"
        "1. **Introductory Text:** Write professional copy that highlights a pain point or benefit.\n"
        "2. **Headline:** Create a concise, powerful headline.\n"
        '3. **Call to Action:** Suggest a CTA button (e.g., "Request a Demo," "Download Whitepaper").\n'
        "4. Provide 2-3 variations."
    )


@template(ContentType.SHORT_AD_COPY, topic="product", audience="benefit")
def short_ad_copy(*, product: str, benefit: str) -> str:
    return (
        "Write 5 short, punchy ad copy variations (under 15 words).\n"
        f"**Product/Service:** {product}\n"
        f"**Key Benefit:** {benefit}\n"
        "**Instructions:**\n"
        "Focus on being concise, benefit-driven, and creating a strong hook. Output as a numbered list."
    )


@template(ContentType.CLASSIFIEDS_AD, topic="item", audience="details")
def classifieds_ad(*, item: str, details: str) -> str:
    return (
        "Write a classifieds ad.\n"
        f"**Item/Service for Sale:** {item}\n"
        "**Details (Condition, Price, Location):**\n"
        f"{fenced(details)}\n"
        "**Instructions:**\n"
        "1. Create a clear and descriptive title.\n"
        "2. Write a concise body with all necessary details.\n"
        "3. Include contact information or next steps."
    )


@template(ContentType.VIDEO_DESCRIPTION, topic="title", audience="keywords", tone="tone")
def video_description(*, title: str, keywords: str, tone: str) -> str:
    return (
        "Write an SEO-optimized video description.\n"
        f"**Video Title:** {title}\n"
        f"**Keywords:** {keywords}\n"
        f"**Tone:** {tone}\n"
        "**Instructions:**\n"
        "1. Write a 2-3 sentence summary of the video.\n"
        "2. Naturally include the keywords.\n"
        "3. Add relevant links (e.g., to your website, social media).\n"
        "4. Include 5-10 relevant hashtags."
    )


@template(ContentType.VIDEO_SCRIPT, topic="topic", audience="tone", tone="duration", goal="hosts")
def video_script(*, topic: str, tone: str, duration: str, hosts: str) -> str:
    return (
        "Write a script for a video.\n"
        f"**Topic:** {topic}\n"
        f"**Tone:** {tone}\n"
        f"**Desired Duration (in minutes):** {duration}\n"
        f"**Number of Hosts:** {hosts}\n"
        "**Instructions:**\n"
        "1. Start with a strong hook.\n"
        "2. Structure the script with clear sections (Intro, Main Points, Outro).\n"
        "3. Write conversational dialogue for the specified number of hosts.\n"
        '4. Include visual cues or on-screen text suggestions in parentheses (e.g., "(Show B-roll of...)").\n'
        "5. End with a clear call to action."
    )
