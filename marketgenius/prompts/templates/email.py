"""Email templates."""
from __future__ import annotations

from marketgenius.prompts.content_types import ContentType
from marketgenius.prompts.registry import template
from marketgenius.prompts.templates import fenced


@template(ContentType.COLD_OUTREACH_EMAIL, topic="product", audience="recipient", tone="goal")
def cold_outreach_email(*, product: str, recipient: str, goal: str) -> str:
    return (
        "Write a personalized cold outreach email.\n"
        f"**My Product/Service:** {product}\n"
        f"**Recipient's Role/Company:** {recipient}\n"
        f"**Goal of Email:** {goal}\n"
        "**Instructions:**\n"
        "1. Write a compelling and non-generic subject line.\n"
        "2. Personalize the opening line based on the recipient's role.\n"
        "3. Clearly and concisely state your value proposition.\n"
        "4. End with a low-friction call to action (e.g., asking for a brief call, not a sale)."
    )


@template(ContentType.PROMOTION_EMAIL, topic="details", audience="audience", tone="tone")
def promotion_email(*, details: str, audience: str, tone: str) -> str:
    return (
        "Write a marketing email for a promotion or offer.\n"
        f"**Promotion Details:** {details}\n"
        f"**Target Audience:** {audience}\n"
        f"**Tone:** {tone}\n"
        "**Instructions:**\n"
        "1. Create a click-worthy subject line.\n"
        "2. Clearly state the offer in the email body.\n"
        "3. Highlight the benefits for the customer.\n"
        '4. Include a clear call-to-action button text (e.g., "Shop Now & Save 25%").\n'
        '5. Add a sense of urgency (e.g., "Offer ends Friday!").'
    )


@template(ContentType.SALES_EMAIL_SEQUENCE, topic="product", audience="prospect", tone="count", goal="goal")
def sales_email_sequence(*, product: str, prospect: str, count: str, goal: str) -> str:
    return (
        "You are a sales expert. Create a sequence of sales emails.\n"
        f"**Product/Service:** {product}\n"
        f"**Target Prospect:** {prospect}\n"
        f"**Number of Emails in Sequence:** {count}\n"
        f"**Goal:** {goal}\n"
        "**Instructions:**\n"
        f"1. Create a sequence of {count} emails (e.g., Intro, Follow-up, Breakup).\n"
        "2. Each email should have a clear subject line and call to action.\n"
        "3. The tone should be professional and value-driven.\n"
        "4. Format the output clearly, separating each email."
    )


@template(ContentType.EMAIL_SUBJECT_LINE, topic="topic", audience="audience")
def email_subject_line(*, topic: str, audience: str) -> str:
    return (
        "Generate 10 compelling email subject lines.\n"
        f"**Email Content/Topic:** {topic}\n"
        f"**Target Audience:** {audience}\n"
        "**Instructions:**\n"
        "1. Create a variety of subject lines (e.g., curiosity-driven, urgent, benefit-oriented).\n"
        "2. Keep them short and mobile-friendly.\n"
        "3. Output as a numbered list."
    )


@template(ContentType.EMAIL_FROM_OUTLINE, topic="outline", audience="audience", tone="tone")
def email_from_outline(*, outline: str, audience: str, tone: str) -> str:
    return (
        "Write a complete email based on the provided outline.\n"
        "**Email Outline:**\n"
        f"{fenced(outline)}\n"
        f"**Audience:** {audience}\n"
        f"**Tone:** {tone}\n"
        "**Instructions:**\n"
        "1. Flesh out each point in the outline into full sentences.\n"
        "2. Ensure a logical flow and a clear call to action.\n"
        "3. Write a compelling subject line.\n"
        "4. Output the full email text."
    )


@template(ContentType.NEWSLETTER, topic="topics", audience="audience", tone="tone")
def newsletter(*, topics: str, audience: str, tone: str) -> str:
    return (
        "You are a newsletter editor. Create content for a newsletter.\n"
        "**Newsletter Theme/Topics:**\n"
        f"{fenced(topics)}\n"
        f"**Audience:** {audience}\n"
        f"**Tone:** {tone}\n"
        "**Instructions:**\n"
        "1. Write a catchy subject line.\n"
        "2. Create a brief, engaging introduction.\n"
        '3. For each topic, write a short blurb (2-3 sentences) with a "Read More" link placeholder.\n'
        "4. Conclude with a final thought or call to action."
    )


@template(ContentType.EVENT_PROMOTION_EMAIL, topic="details", audience="audience", tone="tone")
def event_promotion_email(*, details: str, audience: str, tone: str) -> str:
    return (
        "Write an email to promote an upcoming event.\n"
        f"**Event Details:** {details}\n"
        f"**Target Audience:** {audience}\n"
        f"**Tone:** {tone}\n"
        "**Instructions:**\n"
        "1. Craft an exciting subject line.\n"
        "2. Clearly state the event's value proposition.\n"
        "3. Include key details (date, time, location/link).\n"
        "4. Have a clear call to action to register or learn more."
    )
