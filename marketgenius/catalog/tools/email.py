"""Email tools."""
from __future__ import annotations

from marketgenius.catalog.metadata import ComponentType, ToolDescriptor, text, textarea
from marketgenius.prompts.content_types import ContentType
from marketgenius.prompts.slots import SlotName

TOPIC, AUDIENCE, TONE, GOAL = SlotName.TOPIC, SlotName.AUDIENCE, SlotName.TONE, SlotName.GOAL
GENERIC = ComponentType.GENERIC

EMAIL_TOOLS: list[ToolDescriptor] = [
    ToolDescriptor(
        600, "Cold outreach email", "Write a personalized cold email about a specific product or service.", ("Email",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.COLD_OUTREACH_EMAIL,
        inputs=(
            text(TOPIC, "My Product/Service", "What I am offering"),
            text(AUDIENCE, "Recipient's Role/Company", 'e.g., "Marketing Manager at Acme Corp"'),
            text(TONE, "Goal of Email", 'e.g., "To schedule a 15-minute demo"'),
        ),
    ),
    ToolDescriptor(
        601, "Promotion or offer email", "Write a marketing campaign email to share a promotion or offer.", ("Email",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.PROMOTION_EMAIL,
        inputs=(
            text(TOPIC, "Promotion Details", 'e.g., "25% off all products for summer"'),
            text(AUDIENCE, "Target Audience", 'e.g., "Existing customers"'),
            text(TONE, "Tone", 'e.g., "Excited and urgent"'),
        ),
    ),
    ToolDescriptor(
        602, "Sales email sequence", "Generates a sales email sequence.", ("Email",),
        component_type=GENERIC, content_type=ContentType.SALES_EMAIL_SEQUENCE,
        inputs=(
            text(TOPIC, "Product/Service", 'e.g., "Our new CRM software"'),
            text(AUDIENCE, "Target Prospect", 'e.g., "Sales Directors"'),
            text(TONE, "Number of Emails", 'e.g., "3"'),
            text(GOAL, "Overall Goal", 'e.g., "Book a discovery call"'),
        ),
    ),
    ToolDescriptor(
        603, "Email subject line", "Generate email subject line ideas.", ("Email",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.EMAIL_SUBJECT_LINE,
        inputs=(
            text(TOPIC, "Email Content/Topic", 'e.g., "A new feature announcement"'),
            text(AUDIENCE, "Target Audience", 'e.g., "Power users"'),
        ),
    ),
    ToolDescriptor(
        604, "Email from outline", "Write an email based on a specific outline.", ("Email",),
        component_type=GENERIC, content_type=ContentType.EMAIL_FROM_OUTLINE,
        inputs=(
            textarea(TOPIC, "Email Outline", "Paste your email outline here...", rows=8),
            text(AUDIENCE, "Audience", 'e.g., "New subscribers"'),
            text(TONE, "Tone", 'e.g., "Welcoming and helpful"'),
        ),
    ),
    ToolDescriptor(
        605, "Newsletter", "Generate a newsletter outline, introduction, and call to action (CTA).", ("Email",),
        component_type=GENERIC, content_type=ContentType.NEWSLETTER,
        inputs=(
            textarea(TOPIC, "Newsletter Theme/Topics", 'e.g., "Monthly product updates, AI news, team spotlight"'),
            text(AUDIENCE, "Audience", 'e.g., "Investors and partners"'),
            text(TONE, "Tone", 'e.g., "Professional and informative"'),
        ),
    ),
    ToolDescriptor(
        606, "Event promotion email", "Write an email announcing an event and offering an invitation.", ("Email",), bulk_enabled=True,
        component_type=GENERIC, content_type=ContentType.EVENT_PROMOTION_EMAIL,
        inputs=(
            text(TOPIC, "Event Name and Details", 'e.g., "Webinar: The Future of Marketing, Dec 15th"'),
            text(AUDIENCE, "Target Audience", 'e.g., "Marketing professionals"'),
            text(TONE, "Tone", 'e.g., "Exciting and exclusive"'),
        ),
    ),
]
