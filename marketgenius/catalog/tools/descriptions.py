"""Description, page copy and brochure tools."""
from __future__ import annotations

from marketgenius.catalog.metadata import ComponentType, ToolDescriptor, select, text, textarea
from marketgenius.prompts.content_types import CampaignGoal, ContentType, ToneOfVoice
from marketgenius.prompts.slots import SlotName

TOPIC, AUDIENCE, TONE, GOAL = SlotName.TOPIC, SlotName.AUDIENCE, SlotName.TONE, SlotName.GOAL
GENERIC = ComponentType.GENERIC

DESCRIPTION_TOOLS: list[ToolDescriptor] = [
    ToolDescriptor(
        800, "Product description", "Write a benefit-led product description from a name and feature notes.", ("Descriptions",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.PRODUCT_DESCRIPTION,
        inputs=(
            text(TOPIC, "Product Name", 'e.g., "TrailLite 2 Hiking Backpack"'),
            textarea(AUDIENCE, "Features/Notes", "Waterproof, 28L, laptop sleeve, lifetime warranty...", rows=5),
            select(TONE, "Tone", ToneOfVoice),
        ),
    ),
    ToolDescriptor(
        801, "Property description", "Write an enticing real estate listing description.", ("Descriptions",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.PROPERTY_DESCRIPTION,
        inputs=(
            text(TOPIC, "Property Address/Type", 'e.g., "3-bed townhouse, Elm Street"'),
            textarea(AUDIENCE, "Key Features", "3 beds, 2 baths, 1,800 sqft, renovated kitchen...", rows=5),
            select(TONE, "Tone", ToneOfVoice),
        ),
    ),
    ToolDescriptor(
        802, "Webpage or landing page copy", "Write headline, intro and benefit-driven sections for a page.", ("Copy", "Descriptions"),
        component_type=GENERIC, content_type=ContentType.WEBPAGE_COPY,
        inputs=(
            text(TOPIC, "Page Topic/Goal", 'e.g., "Free trial signup for our invoicing app"'),
            textarea(AUDIENCE, "Key Points to Include", "Saves 5 hours a week, integrates with banks...", rows=5),
            select(TONE, "Tone", ToneOfVoice),
        ),
    ),
    ToolDescriptor(
        803, "Event promotion page", "Write copy for an event landing page that drives registrations.", ("Copy", "Descriptions"),
        component_type=GENERIC, content_type=ContentType.EVENT_PROMOTION_PAGE,
        inputs=(
            text(TOPIC, "Event Name/Topic", 'e.g., "Growth Marketing Summit"'),
            text(AUDIENCE, "Target Audience", 'e.g., "Startup founders"'),
            textarea(TONE, "Key Details (Date, Time, Venue, Price)", "June 12, 9am, Convention Center, $99", rows=4),
            select(GOAL, "Goal", CampaignGoal),
        ),
    ),
    ToolDescriptor(
        804, "Local business description", "Write a warm, welcoming description for a local business.", ("Descriptions",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.LOCAL_BUSINESS_DESCRIPTION,
        inputs=(
            text(TOPIC, "Business Name", 'e.g., "Sunrise Bakery"'),
            text(AUDIENCE, "Business Type/Services", 'e.g., "Artisan bakery and cafe"'),
            textarea(TONE, "Key Information", "Address, opening hours, what makes you unique...", rows=4),
        ),
    ),
    ToolDescriptor(
        805, "Event description", "Write a short, exciting description for an event listing.", ("Descriptions",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.EVENT_DESCRIPTION,
        inputs=(
            text(TOPIC, "Event Name", 'e.g., "Summer Jazz Night"'),
            textarea(AUDIENCE, "Key Details", "Speakers, activities, date and venue...", rows=4),
            select(TONE, "Tone", ToneOfVoice),
        ),
    ),
    ToolDescriptor(
        806, "Brochure", "Write copy for a tri-fold brochure, panel by panel.", ("Copy", "Descriptions"),
        component_type=GENERIC, content_type=ContentType.BROCHURE,
        inputs=(
            text(TOPIC, "Product/Business", 'e.g., "GreenLeaf Landscaping"'),
            textarea(AUDIENCE, "Key Information", "Services, service area, guarantees...", rows=5),
            select(TONE, "Tone", ToneOfVoice),
        ),
    ),
    ToolDescriptor(
        807, "Real estate property brochure", "Write aspirational copy for a high-end property brochure.", ("Descriptions",),
        component_type=GENERIC, content_type=ContentType.REAL_ESTATE_BROCHURE,
        inputs=(
            text(TOPIC, "Property Address/Type", 'e.g., "Oceanfront villa, Malibu"'),
            textarea(AUDIENCE, "Key Features & Amenities", "Infinity pool, wine cellar, private beach access...", rows=5),
            select(TONE, "Tone", ToneOfVoice),
        ),
    ),
    ToolDescriptor(
        808, "Website or landing page outline", "Plan the sections and key messages of a page before writing it.", ("Copy", "SEO"),
        component_type=GENERIC, content_type=ContentType.WEBPAGE_OUTLINE,
        inputs=(
            text(TOPIC, "Page Topic/Goal", 'e.g., "Pricing page for a SaaS product"'),
            textarea(AUDIENCE, "Key Information to Include", "Three tiers, annual discount, FAQ...", rows=5),
        ),
    ),
]
