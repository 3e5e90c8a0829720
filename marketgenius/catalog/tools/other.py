"""General text tools, translation and strategy."""
from __future__ import annotations

from marketgenius.catalog.metadata import ComponentType, ToolDescriptor, select, text, textarea
from marketgenius.prompts.content_types import AnalysisFocus, CampaignGoal, ContentType
from marketgenius.prompts.slots import SlotName

TOPIC, AUDIENCE, TONE, GOAL = SlotName.TOPIC, SlotName.AUDIENCE, SlotName.TONE, SlotName.GOAL
GENERIC, TRANSFORMER = ComponentType.GENERIC, ComponentType.TRANSFORMER

CAMPAIGN_DURATIONS: list[str] = ["1 Month", "3 Months", "6 Months", "1 Year"]

OTHER_TOOLS: list[ToolDescriptor] = [
    ToolDescriptor(
        900, "FAQ", "Generates FAQs for a topic.", ("Other", "Blog"), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.FAQ_GENERATOR,
        inputs=(text(TOPIC, "Topic, Product, or Service", 'e.g., "Our new CRM software"'),),
    ),
    ToolDescriptor(
        901, "Q&A", "Answer a question with stated facts.", ("Other",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.QA_GENERATOR,
        inputs=(text(TOPIC, "Your Question", 'e.g., "What was the first social media platform?"'),),
    ),
    ToolDescriptor(
        902, "Sentence expander", "Expand a sentence into a paragraph.", ("Copy",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.SENTENCE_EXPANDER,
        inputs=(
            text(TOPIC, "Sentence to Expand", 'e.g., "AI is changing marketing."'),
            text(AUDIENCE, "Tone of Voice", 'e.g., "Detailed and professional"'),
        ),
    ),
    ToolDescriptor(
        903, "Correct spelling and grammar", "Correct spelling and grammar of given text.", ("Copy",), bulk_enabled=True,
        component_type=TRANSFORMER, content_type=ContentType.CORRECT_SPELLING_GRAMMAR,
        inputs=(textarea(TOPIC, "Text with Errors", "Paste your text here to correct it.", rows=8),),
    ),
    ToolDescriptor(
        904, "Simplify text", "Simplify the given text.", ("Copy",), bulk_enabled=True,
        component_type=TRANSFORMER, content_type=ContentType.SIMPLIFY_TEXT,
        inputs=(textarea(TOPIC, "Complex Text", "Paste your text here to simplify it.", rows=8),),
    ),
    ToolDescriptor(
        905, "Translate", "Translate the given text.", ("Translate",), bulk_enabled=True,
        component_type=TRANSFORMER, content_type=ContentType.TRANSLATE_TEXT,
        inputs=(
            textarea(TOPIC, "Text to Translate", "Enter text...", rows=6),
            text(AUDIENCE, "Translate to (Language)", 'e.g., "Spanish"'),
        ),
    ),
    ToolDescriptor(
        906, "Press release", "Creates press release from notes.", ("Other", "Copy"),
        component_type=GENERIC, content_type=ContentType.PRESS_RELEASE,
        inputs=(
            textarea(TOPIC, "Announcement / Key Information", 'e.g., "Launched new product X, secured $5M in funding"', rows=6),
            text(AUDIENCE, "Company Name", 'e.g., "Innovate Inc."'),
        ),
    ),
    ToolDescriptor(
        907, "Customer case study", "Creates customer case studies with notes.", ("Other", "Copy"),
        component_type=GENERIC, content_type=ContentType.CUSTOMER_CASE_STUDY,
        inputs=(
            text(TOPIC, "Customer Name", 'e.g., "Global Corp"'),
            text(AUDIENCE, "Product/Service Used", 'e.g., "Our enterprise analytics platform"'),
            textarea(TONE, "Key Results/Notes", "Problem: ... Solution: ... Results: 30% increase in ROI...", rows=6),
        ),
    ),
    ToolDescriptor(
        908, "Poem", "Creates a poem on a topic or theme.", ("Other",),
        component_type=GENERIC, content_type=ContentType.POEM,
        inputs=(
            text(TOPIC, "Topic / Theme", 'e.g., "The ocean at dawn"'),
            text(AUDIENCE, "Style / Tone", 'e.g., "Haiku", "Limerick", "Free verse"'),
        ),
    ),
    ToolDescriptor(
        909, "Product or business names", "Generate 10 name ideas for a product or service.", ("Other",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.PRODUCT_BUSINESS_NAMES,
        inputs=(
            textarea(TOPIC, "Product/Business Concept", 'e.g., "A subscription box for rare indoor plants"'),
            text(AUDIENCE, "Keywords to consider", 'e.g., "green, growth, urban"'),
        ),
    ),
    ToolDescriptor(
        910, "Job description", "Generates a job description based on inputs.", ("Descriptions",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.JOB_DESCRIPTION,
        inputs=(
            text(TOPIC, "Job Title", 'e.g., "Senior Product Manager"'),
            textarea(AUDIENCE, "Key Responsibilities", "Own the product roadmap, work with engineering...", rows=6),
            text(TONE, "Company Information", 'e.g., "We are a fast-growing SaaS startup..."'),
        ),
    ),
    ToolDescriptor(
        704, "Marketing strategy", "Draft a phased marketing strategy with channels, messaging and KPIs.", ("Other",),
        component_type=GENERIC, content_type=ContentType.MARKETING_STRATEGY,
        inputs=(
            textarea(TOPIC, "Product/Service Description", 'e.g., "A meal-kit service for busy parents"', rows=4),
            text(AUDIENCE, "Target Audience", 'e.g., "Working parents aged 30-45"'),
            select(TONE, "Campaign Duration", CAMPAIGN_DURATIONS),
            select(GOAL, "Primary Campaign Goal", CampaignGoal),
        ),
    ),
    ToolDescriptor(
        705, "Campaign performance report", "Analyze campaign metrics and get a narrative report with recommendations.", ("Other",),
        component_type=GENERIC, content_type=ContentType.CAMPAIGN_REPORT,
        inputs=(
            text(TOPIC, "Campaign Name", 'e.g., "Spring Sale 2024"'),
            textarea(AUDIENCE, "Key Metrics", "Impressions: 120,000\nClicks: 3,400\nConversions: 210\nSpend: $4,500", rows=6),
            select(TONE, "Analysis Focus", AnalysisFocus),
            select(GOAL, "Campaign Objective", CampaignGoal),
        ),
    ),
]
