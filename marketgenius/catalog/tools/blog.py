"""Blog and long-form content tools."""
from __future__ import annotations

from marketgenius.catalog.metadata import ComponentType, ToolDescriptor, select, text, textarea
from marketgenius.prompts.content_types import CampaignGoal, ContentType, ToneOfVoice
from marketgenius.prompts.slots import SlotName

TOPIC, AUDIENCE, TONE, GOAL = SlotName.TOPIC, SlotName.AUDIENCE, SlotName.TONE, SlotName.GOAL
GENERIC = ComponentType.GENERIC

BLOG_TOOLS: list[ToolDescriptor] = [
    ToolDescriptor(
        100, "AI Topic Generator", "Generate topic ideas from a theme.", ("Blog",),
        component_type=GENERIC, content_type=ContentType.AI_TOPIC_GENERATOR,
        inputs=(text(TOPIC, "Theme or Category", 'e.g., "Sustainable fashion"'),),
    ),
    ToolDescriptor(
        101, "Long blog article from URLs or documents", "Generate a long blog article from reference URLs or documents.", ("Blog", "Repurpose"),
        component_type=GENERIC, content_type=ContentType.LONG_BLOG_FROM_URL_DOC,
        inputs=(
            textarea(TOPIC, "Pasted Content from URLs/Docs", "Paste the full text from your sources here...", rows=8),
            text(AUDIENCE, "Desired Tone", 'e.g., "Informative and authoritative"'),
            text(TONE, "Target Word Count", "e.g., 1500"),
        ),
    ),
    ToolDescriptor(
        102, "Blog article", "Create a short blog article for a topic in a specific tone.", ("Blog",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.SHORT_BLOG_ARTICLE,
        inputs=(
            text(TOPIC, "Topic", 'e.g., "Why every startup needs a content strategy"'),
            text(AUDIENCE, "Tone", 'e.g., "Casual and encouraging"'),
        ),
    ),
    ToolDescriptor(
        103, "Blog post outline", "Generate a blog post based on a specific title.", ("Blog",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.BLOG_POST_OUTLINE,
        inputs=(text(TOPIC, "Blog Title", 'e.g., "The Ultimate Guide to Digital Marketing in 2024"'),),
    ),
    ToolDescriptor(
        104, "Blog post introduction", "Generate an introductory paragraph based on a title, audience, and tone.", ("Blog",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.BLOG_POST_INTRODUCTION,
        inputs=(
            text(TOPIC, "Blog Title", 'e.g., "The Ultimate Guide to Digital Marketing in 2024"'),
            text(AUDIENCE, "Target Audience", 'e.g., "Small business owners"'),
            text(TONE, "Tone of Voice", 'e.g., "Authoritative yet accessible"'),
        ),
    ),
    ToolDescriptor(
        105, "Blog sectional content from topic", "Writes a blog section.", ("Blog",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.BLOG_SECTIONAL_CONTENT,
        inputs=(
            text(TOPIC, "Section Topic / Subheading", 'e.g., "Analyzing Competitor Backlinks"'),
            text(AUDIENCE, "Broader Article Context", 'e.g., "An ultimate guide to SEO for beginners"'),
            text(TONE, "Tone of Voice", 'e.g., "Informative"'),
        ),
    ),
    ToolDescriptor(
        106, "Blog article from outline", "Write an article based on a specific topic, tone, and outline.", ("Blog",),
        component_type=GENERIC, content_type=ContentType.BLOG_ARTICLE_FROM_OUTLINE,
        inputs=(
            textarea(TOPIC, "Article Outline", "Paste your full outline here...", rows=8),
            text(AUDIENCE, "Article Topic", 'e.g., "The History of AI"'),
            text(TONE, "Tone of Voice", 'e.g., "Academic and formal"'),
        ),
    ),
    ToolDescriptor(
        107, "Blog post conclusion", "Generate a concluding paragraph based on a title, audience, and tone.", ("Blog",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.BLOG_POST_CONCLUSION,
        inputs=(
            text(TOPIC, "Blog Title", 'e.g., "The Ultimate Guide to Digital Marketing in 2024"'),
            text(AUDIENCE, "Target Audience", 'e.g., "Small business owners"'),
            text(TONE, "Tone of Voice", 'e.g., "Inspirational"'),
        ),
    ),
    ToolDescriptor(
        700, "Complete blog post", "Write a full SEO-optimized blog post with title ideas and a call to action.", ("Blog", "SEO"),
        component_type=GENERIC, content_type=ContentType.BLOG_POST,
        inputs=(
            text(TOPIC, "Topic", 'e.g., "How to start composting at home"'),
            text(AUDIENCE, "Target Audience", 'e.g., "Urban apartment dwellers"'),
            select(TONE, "Tone of Voice", ToneOfVoice),
            select(GOAL, "Primary Goal", CampaignGoal),
        ),
    ),
    ToolDescriptor(
        701, "SEO content brief", "Create a writer's brief with keywords, search intent, outline and linking ideas.", ("SEO", "Blog"),
        component_type=GENERIC, content_type=ContentType.SEO_BRIEF,
        inputs=(
            text(TOPIC, "Main Topic or Keyword", 'e.g., "best running shoes for flat feet"'),
            text(AUDIENCE, "Target Audience", 'e.g., "Beginner runners"'),
            select(TONE, "Desired Tone", ToneOfVoice),
            text(GOAL, "Content Goal", 'e.g., "Rank for buying-intent searches"'),
        ),
    ),
]
