"""Copywriting, summary and SEO tools."""
from __future__ import annotations

from marketgenius.catalog.metadata import ComponentType, ToolDescriptor, text, textarea
from marketgenius.prompts.content_types import ContentType
from marketgenius.prompts.slots import SlotName

TOPIC, AUDIENCE, TONE = SlotName.TOPIC, SlotName.AUDIENCE, SlotName.TONE
GENERIC, TRANSFORMER = ComponentType.GENERIC, ComponentType.TRANSFORMER

_PRODUCT = 'e.g., "A new project management app"'
_TEAMS = 'e.g., "Freelancers and small teams"'

COPY_TOOLS: list[ToolDescriptor] = [
    ToolDescriptor(
        300, "Content improver", "Improves the given text and rewrites in a given tone.", ("Copy",),
        component_type=TRANSFORMER, content_type=ContentType.CONTENT_IMPROVER,
        inputs=(
            textarea(TOPIC, "Original Text", "Paste your content here...", rows=8),
            text(AUDIENCE, "Desired Tone", 'e.g., "More professional"'),
        ),
    ),
    ToolDescriptor(
        301, "Paraphrase or rewrite", "Paraphrase the given text.", ("Copy", "Repurpose"), bulk_enabled=True,
        component_type=TRANSFORMER, content_type=ContentType.PARAPHRASE_REWRITE,
        inputs=(textarea(TOPIC, "Original Text", "Paste content here to rewrite it...", rows=8),),
    ),
    ToolDescriptor(
        302, "AIDA copy", "Generate copy using the Attention, Interest, Desire and Action framework.", ("Copy", "Ads"), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.AIDA_COPY,
        inputs=(text(TOPIC, "Product/Service", _PRODUCT), text(AUDIENCE, "Target Audience", _TEAMS)),
    ),
    ToolDescriptor(
        303, "BAB copy", "Generate copy using the Before-After-Bridge framework.", ("Copy", "Ads"), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.BAB_COPY,
        inputs=(text(TOPIC, "Product/Service", _PRODUCT), text(AUDIENCE, "Target Audience", _TEAMS)),
    ),
    ToolDescriptor(
        304, "PAS copy", "Generate copy using the Problem-Agitate-Solution framework.", ("Copy", "Ads"), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.PAS_COPY,
        inputs=(text(TOPIC, "Product/Service", _PRODUCT), text(AUDIENCE, "Target Audience", _TEAMS)),
    ),
    ToolDescriptor(
        305, "Headlines", "Generates 10 headlines for a given product or service.", ("Copy", "Ads"), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.HEADLINES,
        inputs=(
            text(TOPIC, "Topic/Product", 'e.g., "AI-powered grammar checker"'),
            text(AUDIENCE, "Target Audience", 'e.g., "Students and professionals"'),
        ),
    ),
    ToolDescriptor(
        306, "CTAs", "Generates 10 CTAs for given information.", ("Copy", "Ads"), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.CTAS,
        inputs=(text(TOPIC, "Context / Goal for CTA", 'e.g., "To get users to sign up for a free trial"'),),
    ),
    ToolDescriptor(
        307, "Copy in bullets", "Creates bulleted copy with notes.", ("Copy",), bulk_enabled=True,
        component_type=TRANSFORMER, content_type=ContentType.COPY_IN_BULLETS,
        inputs=(textarea(TOPIC, "Notes or Paragraph", "Paste your notes or text here...", rows=8),),
    ),
]

SUMMARY_TOOLS: list[ToolDescriptor] = [
    ToolDescriptor(
        400, "Repurpose content", "Repurpose the content in videos, podcasts, documents, webpages and more.", ("Repurpose",),
        component_type=TRANSFORMER, content_type=ContentType.REPURPOSE_CONTENT,
        inputs=(
            textarea(TOPIC, "Original Content", "Paste your content here...", rows=8),
            text(AUDIENCE, "Desired New Format", 'e.g., "LinkedIn Article", "Key takeaways for a video script"'),
            text(TONE, "Tone", 'e.g., "Professional"'),
        ),
    ),
    ToolDescriptor(
        401, "Summarize text", "Create a summary of a long section of text.", ("Summary",), bulk_enabled=True,
        component_type=TRANSFORMER, content_type=ContentType.SUMMARIZE_TEXT,
        inputs=(
            textarea(TOPIC, "Original Text", "Paste text to summarize...", rows=8),
            text(AUDIENCE, "Desired Format", 'e.g., "a short paragraph" or "5 bullet points"'),
        ),
    ),
    ToolDescriptor(
        402, "Summary from notes", "Creates a summary from notes as bullets or a paragraph.", ("Summary",), bulk_enabled=True,
        component_type=TRANSFORMER, content_type=ContentType.SUMMARY_FROM_NOTES,
        inputs=(
            textarea(TOPIC, "Pasted Notes", "Paste your notes here...", rows=8),
            text(AUDIENCE, "Desired Format", 'e.g., "a paragraph" or "bullet points"'),
        ),
    ),
    ToolDescriptor(
        403, "Paragraphs to bullets", "Paraphrases the given text in the form of bullet points.", ("Summary", "Copy"), bulk_enabled=True,
        component_type=TRANSFORMER, content_type=ContentType.PARAGRAPHS_TO_BULLETS,
        inputs=(textarea(TOPIC, "Original Paragraph(s)", "Paste your text here to convert it into a bulleted list.", rows=8),),
    ),
]

SEO_TOOLS: list[ToolDescriptor] = [
    ToolDescriptor(
        500, "SEO meta description", "Writes an SEO meta description based on a page title and keywords.", ("SEO", "Descriptions"), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.SEO_META_DESCRIPTION,
        inputs=(
            text(TOPIC, "Page Title or Topic", 'e.g., "High-Quality Dog Food for Active Breeds"'),
            text(AUDIENCE, "Primary Keywords", 'e.g., "active dog food, high-protein kibble"'),
        ),
    ),
    ToolDescriptor(
        501, "Search keywords", "Generate keywords for a theme, product or service.", ("SEO",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.SEARCH_KEYWORDS,
        inputs=(
            text(TOPIC, "Theme / Product / Service", 'e.g., "eco-friendly cleaning supplies"'),
            text(AUDIENCE, "Industry", 'e.g., "Home Goods"'),
            text(TONE, "Target Audience", 'e.g., "Environmentally conscious homeowners"'),
        ),
    ),
]
