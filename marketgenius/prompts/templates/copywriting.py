"""Copywriting frameworks, descriptions and repurposing."""
from __future__ import annotations

from marketgenius.prompts.content_types import ContentType
from marketgenius.prompts.registry import template
from marketgenius.prompts.templates import fenced


def _framework(name: str, product: str, audience: str, sections: str) -> str:
    return (
        "You are an expert copywriter. Write copy for the following product/service "
        f"using the {name} framework.\n"
        f"**Product/Service:** {product}\n"
        f"**Target Audience:** {audience}\n"
        "**Instructions:**\n"
        f"{sections}"
    )


@template(ContentType.AIDA_COPY, topic="product", audience="audience")
def aida_copy(*, product: str, audience: str) -> str:
    return _framework(
        "AIDA (Attention, Interest, Desire, Action)",
        product,
        audience,
        "Structure your response with four sections, clearly labeled:\n"
        "- **Attention:** A powerful hook.\n"
        "- **Interest:** Engaging details and benefits.\n"
        "- **Desire:** Create an emotional connection and longing.\n"
        "- **Action:** A clear and compelling call to action.",
    )


@template(ContentType.BAB_COPY, topic="product", audience="audience")
def bab_copy(*, product: str, audience: str) -> str:
    return _framework(
        "BAB (Before-After-Bridge)",
        product,
        audience,
        "Structure your response with three sections, clearly labeled:\n"
        "- **Before:** Describe the customer's problem or pain point.\n"
        "- **After:** Paint a picture of their life after using your product.\n"
        "- **Bridge:** Explain how your product is the bridge to get them there.",
    )


@template(ContentType.PAS_COPY, topic="product", audience="audience")
def pas_copy(*, product: str, audience: str) -> str:
    return _framework(
        "PAS (Problem-Agitate-Solution)",
        product,
        audience,
        "Structure your response with three sections, clearly labeled:\n"
        "- **Problem:** State the customer's problem.\n"
        "- **Agitate:** Agitate the problem, making them feel the pain more acutely.\n"
        "- **Solution:** Present your product as the perfect solution.",
    )


@template(ContentType.REPURPOSE_CONTENT, topic="content", audience="output_format", tone="tone")
def repurpose_content(*, content: str, output_format: str, tone: str) -> str:
    return (
        "You are an expert content strategist. Repurpose the following text into a different format.\n"
        "**Original Content:**\n"
        f"{fenced(content)}\n"
        f"**Desired New Format:** {output_format} (e.g., LinkedIn Article, Email Newsletter, Key Takeaways for a Video)\n"
        f"**Tone:** {tone}\n"
        "**Instructions:**\n"
        "1. Analyze the original content and extract the core message.\n"
        "2. Rewrite and restructure it for the desired new format.\n"
        "3. Adapt the tone and style appropriately.\n"
        "4. Output the repurposed content in well-formatted Markdown."
    )


@template(ContentType.SUMMARIZE_TEXT, topic="text", audience="output_format")
def summarize_text(*, text: str, output_format: str) -> str:
    return (
        "Summarize the following text concisely.\n"
        "**Original Text:**\n"
        f"{fenced(text)}\n"
        f'**Desired Format:** {output_format} (e.g., "a short paragraph" or "5 bullet points")\n'
        "**Instructions:**\n"
        "Extract the most important points and present them in the desired format."
    )


@template(ContentType.SUMMARY_FROM_NOTES, topic="notes", audience="output_format")
def summary_from_notes(*, notes: str, output_format: str) -> str:
    return (
        "Create a cohesive summary from the following notes.\n"
        "**Notes:**\n"
        f"{fenced(notes)}\n"
        f'**Desired Format:** {output_format} (e.g., "a paragraph" or "bullet points")\n'
        "**Instructions:**\n"
        "Synthesize the notes into a coherent summary in the specified format."
    )


@template(ContentType.PRODUCT_DESCRIPTION, topic="name", audience="features", tone="tone")
def product_description(*, name: str, features: str, tone: str) -> str:
    return (
        "Write a compelling product description.\n"
        f"**Product Name:** {name}\n"
        "**Features/Notes:**\n"
        f"{fenced(features)}\n"
        f"**Tone:** {tone}\n"
        "**Instructions:**\n"
        "1. Start with a captivating hook.\n"
        "2. Translate features into benefits for the customer.\n"
        "3. Use bullet points for readability.\n"
        "4. End with a persuasive closing statement."
    )


@template(ContentType.PROPERTY_DESCRIPTION, topic="listing", audience="features", tone="tone")
def property_description(*, listing: str, features: str, tone: str) -> str:
    return (
        "You are a real estate copywriter. Write an enticing property description.\n"
        f"**Property Address/Type:** {listing}\n"
        "**Key Features (beds, baths, sqft, amenities):**\n"
        f"{fenced(features)}\n"
        f"**Tone:** {tone}\n"
        "**Instructions:**\n"
        "1. Create an attention-grabbing headline.\n"
        "2. Write a narrative that helps potential buyers envision living there.\n"
        "3. Highlight the most desirable features and benefits.\n"
        '4. End with a clear call to action (e.g., "Schedule your private tour today!").'
    )


@template(ContentType.WEBPAGE_COPY, topic="page", audience="points", tone="tone")
def webpage_copy(*, page: str, points: str, tone: str) -> str:
    return (
        "Write compelling copy for a webpage or landing page.\n"
        f"**Page Topic/Goal:** {page}\n"
        "**Key Points to Include:**\n"
        f"{fenced(points)}\n"
        f"**Tone:** {tone}\n"
        "**Instructions:**\n"
        "1. Write a clear and powerful headline (H1).\n"
        "2. Develop a persuasive introductory paragraph.\n"
        "3. Create subheadings (H2, H3) with benefit-driven body copy.\n"
        "4. Weave in a clear call-to-action throughout."
    )


@template(ContentType.EVENT_PROMOTION_PAGE, topic="event", audience="audience", tone="details", goal="goal")
def event_promotion_page(*, event: str, audience: str, details: str, goal: str) -> str:
    return (
        "You are a professional copywriter specializing in event marketing. Write compelling "
        "copy for an event promotion page.\n"
        f"**Event Name/Topic:** {event}\n"
        f"**Target Audience:** {audience}\n"
        "**Key Details (Date, Time, Venue, Price):**\n"
        f"{fenced(details)}\n"
        f"**Goal:** {goal}\n"
        "**Instructions:**\n"
        "1. Create a powerful headline.\n"
        "2. Write an engaging introduction to what the event is about.\n"
        "3. Detail the key benefits for attendees.\n"
        "4. End with a clear call to action that serves the goal."
    )


@template(ContentType.LOCAL_BUSINESS_DESCRIPTION, topic="name", audience="services", tone="info")
def local_business_description(*, name: str, services: str, info: str) -> str:
    return (
        "Write a friendly and inviting description for a local business.\n"
        f"**Business Name:** {name}\n"
        f"**Business Type/Services:** {services}\n"
        "**Key Information (Address, Hours, Unique Selling Points):**\n"
        f"{fenced(info)}\n"
        "**Instructions:**\n"
        "1. Write a warm and welcoming description.\n"
        "2. Highlight what makes the business unique.\n"
        '3. Include a call to action (e.g., "Visit us today!").'
    )


@template(ContentType.EVENT_DESCRIPTION, topic="name", audience="details", tone="tone")
def event_description(*, name: str, details: str, tone: str) -> str:
    return (
        "Write a concise and exciting description for an event listing.\n"
        f"**Event Name:** {name}\n"
        "**Key Details:**\n"
        f"{fenced(details)}\n"
        f"**Tone:** {tone}\n"
        "**Instructions:**\n"
        "1. Summarize the event in a compelling way.\n"
        "2. Highlight the key activities or speakers.\n"
        "3. Keep it brief and engaging for listings like Eventbrite or Facebook Events."
    )


@template(ContentType.JOB_DESCRIPTION, topic="title", audience="responsibilities", tone="company")
def job_description(*, title: str, responsibilities: str, company: str) -> str:
    return (
        "You are a professional recruiter. Write a clear, inclusive, and appealing job description.\n"
        f"**Job Title:** {title}\n"
        "**Key Responsibilities & Requirements:**\n"
        f"{fenced(responsibilities)}\n"
        f"**Company Information:** {company}\n"
        "**Instructions:**\n"
        "1. Start with a compelling summary of the role.\n"
        "2. Clearly list responsibilities and qualifications using bullet points.\n"
        "3. Include a section about the company culture and benefits.\n"
        "4. End with instructions on how to apply."
    )


@template(ContentType.HEADLINES, topic="product", audience="audience")
def headlines(*, product: str, audience: str) -> str:
    return (
        "Generate 10 compelling headlines for the following topic.\n"
        f"**Topic/Product:** {product}\n"
        f"**Target Audience:** {audience}\n"
        "**Instructions:**\n"
        "Create a variety of headlines (e.g., question-based, benefit-driven, controversial).\n"
        "Output as a numbered list."
    )


@template(ContentType.CTAS, topic="context")
def ctas(*, context: str) -> str:
    return (
        "Generate 10 clear and compelling Call to Actions (CTAs).\n"
        f"**Context/Goal:** {context}\n"
        "**Instructions:**\n"
        "Create a list of 10 varied CTAs. They can be for buttons, links, or email closers.\n"
        "Output as a numbered list."
    )


@template(ContentType.COPY_IN_BULLETS, topic="notes")
def copy_in_bullets(*, notes: str) -> str:
    return (
        "Convert the following notes or paragraph into a compelling bulleted list for use "
        "in marketing copy.\n"
        "**Notes/Paragraph:**\n"
        f"{fenced(notes)}\n"
        "**Instructions:**\n"
        "- Transform features into benefits.\n"
        "- Start each bullet with a strong action verb.\n"
        "- Keep bullets concise and scannable."
    )


@template(ContentType.BROCHURE, topic="business", audience="info", tone="tone")
def brochure(*, business: str, info: str, tone: str) -> str:
    return (
        "Write the copy for a tri-fold brochure.\n"
        f"**Product/Business:** {business}\n"
        "**Key Information:**\n"
        f"{fenced(info)}\n"
        f"**Tone:** {tone}\n"
        "**Instructions:**\n"
        "Structure the copy for a tri-fold layout:\n"
        "- **Front Panel:** Company name, logo, and tagline.\n"
        "- **Inside Flap:** Introduction or key problem.\n"
        "- **Inside Middle & Right Panels:** Detailed information, features, and benefits.\n"
        "- **Back Panel:** About Us, contact information, and call to action."
    )


@template(ContentType.REAL_ESTATE_BROCHURE, topic="listing", audience="features", tone="tone")
def real_estate_brochure(*, listing: str, features: str, tone: str) -> str:
    return (
        "You are a luxury real estate marketer. Write the copy for a high-end property brochure.\n"
        f"**Property Address/Type:** {listing}\n"
        "**Key Features & Amenities:**\n"
        f"{fenced(features)}\n"
        f"**Tone:** {tone}\n"
        "**Instructions:**\n"
        "1. Create an elegant and evocative headline.\n"
        "2. Write a compelling narrative that tells a story about the lifestyle.\n"
        "3. Use descriptive and aspirational language to describe features.\n"
        "4. Structure copy for different sections (e.g., The Residence, The Amenities, The Neighborhood)."
    )


@template(ContentType.PRODUCT_BUSINESS_NAMES, topic="concept", audience="keywords")
def product_business_names(*, concept: str, keywords: str) -> str:
    return (
        "You are a branding expert. Generate 10 creative name ideas.\n"
        "**Product/Business Concept:**\n"
        f"{fenced(concept)}\n"
        f"**Keywords to consider:** {keywords}\n"
        "**Instructions:**\n"
        "Provide a list of 10 unique and memorable names. Add a brief rationale for your top 3 choices."
    )


@template(ContentType.WEBPAGE_OUTLINE, topic="page", audience="info")
def webpage_outline(*, page: str, info: str) -> str:
    return (
        "You are a UX copywriter and information architect. Create a logical outline for a "
        "webpage or landing page.\n"
        f"**Page Topic/Goal:** {page}\n"
        "**Key Information to Include:**\n"
        f"{fenced(info)}\n"
        "**Instructions:**\n"
        "- Structure the outline with clear section headings (e.g., Hero, Features, Social Proof, CTA).\n"
        "- For each section, list the key messages and content elements.\n"
        "- Output as a Markdown list."
    )


@template(ContentType.PRESS_RELEASE, topic="announcement", audience="company")
def press_release(*, announcement: str, company: str) -> str:
    return (
        "You are a PR professional. Write a press release based on the following information.\n"
        "**Announcement/Key Information:**\n"
        f"{fenced(announcement)}\n"
        f"**Company:** {company}\n"
        "**Instructions:**\n"
        "Follow standard press release format:\n"
        "- FOR IMMEDIATE RELEASE\n"
        "- Compelling Headline\n"
        "- Dateline (City, State, Date)\n"
        "- Introduction (who, what, when, where, why)\n"
        "- Body paragraphs with more details and a quote.\n"
        "- Boilerplate about the company.\n"
        "- Media Contact information.\n"
        "- ### (at the end)."
    )


@template(ContentType.CUSTOMER_CASE_STUDY, topic="customer", audience="product", tone="notes")
def customer_case_study(*, customer: str, product: str, notes: str) -> str:
    return (
        "You are a marketing writer. Create a customer case study from the provided notes.\n"
        f"**Customer Name:** {customer}\n"
        f"**Product/Service Used:** {product}\n"
        "**Notes (Problem, Solution, Results):**\n"
        f"{fenced(notes)}\n"
        "**Instructions:**\n"
        "Structure the case study with the following sections:\n"
        "- A compelling headline.\n"
        "- **The Challenge:** Describe the customer's problem.\n"
        "- **The Solution:** Explain how your product/service helped.\n"
        "- **The Results:** Showcase the positive outcomes with data if possible.\n"
        "- Include a customer quote."
    )
