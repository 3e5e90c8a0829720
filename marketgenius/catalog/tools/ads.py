"""Advertising and video tools."""
from __future__ import annotations

from marketgenius.catalog.metadata import ComponentType, ToolDescriptor, select, text, textarea
from marketgenius.prompts.content_types import ContentType, ToneOfVoice
from marketgenius.prompts.slots import SlotName

TOPIC, AUDIENCE, TONE, GOAL = SlotName.TOPIC, SlotName.AUDIENCE, SlotName.TONE, SlotName.GOAL
GENERIC = ComponentType.GENERIC

AD_TOOLS: list[ToolDescriptor] = [
    ToolDescriptor(
        1000, "Google ad copy", "Generate Google Ads headlines and descriptions within character limits.", ("Ads",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.GOOGLE_AD_COPY,
        inputs=(
            text(TOPIC, "Product/Service", 'e.g., "Online bookkeeping for freelancers"'),
            text(AUDIENCE, "Keywords to Target", 'e.g., "freelance bookkeeping, invoicing app"'),
        ),
    ),
    ToolDescriptor(
        1001, "Instagram or Facebook ad copy", "Write scroll-stopping primary text, headline and CTA for Meta ads.", ("Ads", "Social Media"), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.INSTAGRAM_FACEBOOK_AD_COPY,
        inputs=(
            text(TOPIC, "Product/Service", 'e.g., "Reusable coffee cups"'),
            text(AUDIENCE, "Target Audience", 'e.g., "Eco-conscious commuters"'),
            select(TONE, "Tone", ToneOfVoice),
        ),
    ),
    ToolDescriptor(
        1002, "LinkedIn ad copy", "Write B2B ad copy for LinkedIn campaigns.", ("Ads",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.LINKEDIN_AD_COPY,
        inputs=(
            text(TOPIC, "Product/Service", 'e.g., "HR onboarding platform"'),
            text(AUDIENCE, "Target Audience", 'e.g., "HR directors at mid-size companies"'),
            select(TONE, "Tone", ToneOfVoice),
        ),
    ),
    ToolDescriptor(
        1003, "Short ad copy", "Generate five punchy ad lines under 15 words.", ("Ads", "Copy"), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.SHORT_AD_COPY,
        inputs=(
            text(TOPIC, "Product/Service", 'e.g., "Noise-cancelling earbuds"'),
            text(AUDIENCE, "Key Benefit", 'e.g., "Silence on your commute"'),
        ),
    ),
    ToolDescriptor(
        1004, "Classifieds ad", "Write a clear classifieds listing for an item or service.", ("Ads",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.CLASSIFIEDS_AD,
        inputs=(
            text(TOPIC, "Item/Service for Sale", 'e.g., "Used road bike"'),
            textarea(AUDIENCE, "Details (Condition, Price, Location)", "Good condition, $400, Portland...", rows=4),
        ),
    ),
]

VIDEO_TOOLS: list[ToolDescriptor] = [
    ToolDescriptor(
        1100, "Video description", "Write an SEO-optimized description for a video.", ("Video", "Descriptions"), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.VIDEO_DESCRIPTION,
        inputs=(
            text(TOPIC, "Video Title", 'e.g., "5 Email Mistakes Killing Your Open Rate"'),
            text(AUDIENCE, "Keywords", 'e.g., "email marketing, open rate"'),
            select(TONE, "Tone", ToneOfVoice),
        ),
    ),
    ToolDescriptor(
        1101, "Video script", "Write a video script with hook, sections, visual cues and a call to action.", ("Video",),
        component_type=GENERIC, content_type=ContentType.VIDEO_SCRIPT,
        inputs=(
            text(TOPIC, "Topic", 'e.g., "How to brew pour-over coffee"'),
            select(AUDIENCE, "Tone", ToneOfVoice),
            text(TONE, "Desired Duration (minutes)", 'e.g., "3"'),
            text(GOAL, "Number of Hosts", 'e.g., "1"'),
        ),
    ),
]
