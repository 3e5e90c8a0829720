"""Blog and long-form article templates."""
from __future__ import annotations

from collections.abc import Mapping

from marketgenius.prompts.brief import coerce_word_count, parse_brief_payload, word_count_band
from marketgenius.prompts.content_types import ContentType
from marketgenius.prompts.registry import template
from marketgenius.prompts.slots import SlotName
from marketgenius.prompts.templates import fenced


@template(ContentType.BLOG_POST, topic="topic", audience="audience", tone="tone", goal="goal")
def blog_post(*, topic: str, audience: str, tone: str, goal: str) -> str:
    return (
        "You are a world-class content marketing expert specializing in writing "
        "engaging and SEO-optimized blog posts.\n"
        "Your task is to write a complete, high-quality blog post.\n\n"
        f"**Topic:** {topic}\n"
        f"**Target Audience:** {audience}\n"
        f"**Tone of Voice:** {tone}\n"
        f"**Primary Goal:** {goal}\n\n"
        "**Instructions:**\n"
        "1. Create 3-5 compelling, SEO-friendly title suggestions.\n"
        "2. Write a captivating introduction that hooks the reader.\n"
        "3. Structure the body with clear headings (H2) and subheadings (H3). "
        "Use bullet points and bold text to improve readability.\n"
        "4. Ensure the content is informative, well-researched, and provides real value to the reader.\n"
        "5. Conclude with a powerful summary and a clear call-to-action related to the goal.\n"
        "6. The entire output should be in well-formatted Markdown. Start with the title suggestions."
    )


@template(ContentType.BLOG_BRIEF_AND_OUTLINE, topic="topic")
def blog_brief_and_outline(*, topic: str) -> str:
    """Prompt for the structured brief call; the response schema is enforced by the client."""
    return (
        "You are an expert SEO strategist and content architect. Your task is to "
        "generate a comprehensive blog brief and outline based on a given topic.\n\n"
        f'**Topic:** "{topic}"\n\n'
        "**Instructions:**\n"
        "1. Create one, compelling, SEO-friendly title for the blog post.\n"
        "2. Identify 5-7 relevant primary and secondary keywords.\n"
        "3. Develop a logical and detailed content outline in Markdown format. "
        "The outline should include H2 and H3 headings to structure the article effectively.\n\n"
        "Return the response as a single, minified JSON object."
    )


def _brief_fields(slots: Mapping[SlotName, str]) -> dict[str, str]:
    # An untouched form (empty goal) renders with the default length.
    raw = slots.get(SlotName.GOAL, "")
    if raw.strip():
        payload = parse_brief_payload(raw)
        outline, word_count = payload.outline, payload.word_count
    else:
        outline, word_count = "", coerce_word_count("")
    return {
        "title": slots.get(SlotName.TOPIC, ""),
        "keywords": slots.get(SlotName.AUDIENCE, ""),
        "tone": slots.get(SlotName.TONE, ""),
        "outline": outline,
        "word_count": str(word_count),
    }


@template(
    ContentType.BLOG_POST_FROM_BRIEF,
    adapter=_brief_fields,
    extra_fields=("outline", "word_count"),
    topic="title",
    audience="keywords",
    tone="tone",
)
def blog_post_from_brief(*, title: str, keywords: str, tone: str, outline: str, word_count: str) -> str:
    """Article body prompt with an explicit ±10% word-count band."""
    low, high = word_count_band(coerce_word_count(word_count))
    return (
        "You are an expert content writer. Your task is to write a blog article "
        "that strictly follows all instructions.\n\n"
        "**PRIMARY GOAL: WORD COUNT**\n"
        "This is your most important instruction. The final article body MUST be between "
        f"**{low} and {high} words**. This is a non-negotiable requirement. Adjust content "
        "depth to fit these constraints precisely. Failure to meet this word count will "
        "result in an unsuccessful task.\n\n"
        f"**Blog Title:** {title}\n"
        f"**Keywords to include:** {keywords}\n"
        f"**Tone of Voice:** {tone}\n\n"
        "**Content Outline:**\n"
        f"{fenced(outline, 'markdown')}\n\n"
        "**Instructions:**\n"
        f"1. **Word Count:** The absolute priority is to ensure the final output is between {low} and {high} words.\n"
        "2. **Outline:** Follow the provided outline strictly. Do not add, remove, or reorder sections.\n"
        "3. **Keywords:** Integrate the specified keywords naturally.\n"
        f"4. **Tone:** Write in a {tone} tone.\n"
        "5. **Image Placeholders:** Strategically place 2-3 relevant image placeholders within "
        "the content. Each placeholder must be on its own line and formatted as: "
        "`[A descriptive prompt for an AI image generator]`. For example: "
        "`[A happy customer unboxing a beautifully packaged product from an online store.]`.\n"
        "6. **Output:** Provide ONLY the complete article body in well-formatted Markdown. "
        "Do not include the H1 title or any other text before or after the article."
    )


@template(ContentType.SEO_BRIEF, topic="topic", audience="audience", tone="tone", goal="goal")
def seo_brief(*, topic: str, audience: str, tone: str, goal: str) -> str:
    return (
        "You are a senior SEO strategist. Create a comprehensive content brief for a writer.\n\n"
        f"**Main Topic/Keyword:** {topic}\n"
        f"**Target Audience:** {audience}\n"
        f"**Desired Tone:** {tone}\n"
        f"**Content Goal:** {goal}\n\n"
        "**Instructions:**\n"
        "1. **Primary Keyword:** Suggest the primary keyword.\n"
        "2. **Secondary Keywords:** List 5-10 related LSI (Latent Semantic Indexing) keywords.\n"
        "3. **Search Intent:** Define the user's search intent (e.g., informational, commercial, transactional).\n"
        "4. **Proposed Title:** Suggest an SEO-optimized title.\n"
        "5. **Meta Description:** Write a compelling meta description (under 160 characters).\n"
        "6. **Content Outline:** Provide a detailed H2/H3 structure with key points to cover in each section.\n"
        "7. **Internal/External Linking:** Suggest opportunities for internal and external links.\n"
        "8. **Call to Action:** Specify the desired CTA.\n"
        "Format the entire output as clean, well-structured Markdown."
    )


@template(ContentType.AI_TOPIC_GENERATOR, topic="theme")
def ai_topic_generator(*, theme: str) -> str:
    return (
        "You are an expert content strategist. Generate a list of 10-15 engaging and "
        "SEO-friendly topic ideas based on the following theme.\n\n"
        f"**Theme:** {theme}\n\n"
        "**Output Format:** A Markdown numbered list of topic ideas."
    )


@template(ContentType.LONG_BLOG_FROM_URL_DOC, topic="material", audience="tone", tone="word_count")
def long_blog_from_material(*, material: str, tone: str, word_count: str) -> str:
    return (
        "You are an expert writer and researcher. Synthesize the provided reference material "
        "into a coherent, original, and well-structured long-form blog post.\n\n"
        "**Reference Material:**\n"
        f"{fenced(material)}\n\n"
        f"**Desired Tone:** {tone}\n"
        f"**Target Word Count:** ~{word_count} words\n\n"
        "**Instructions:**\n"
        "1. Do not plagiarize. Extract key ideas and rephrase them in your own words.\n"
        "2. Create a logical structure with an introduction, body (H2/H3 headings), and conclusion.\n"
        "3. Ensure the final article is high-quality, readable, and engaging.\n"
        "4. Output as a single, complete Markdown document."
    )


@template(ContentType.SHORT_BLOG_ARTICLE, topic="topic", audience="tone")
def short_blog_article(*, topic: str, tone: str) -> str:
    return (
        "Generate a concise and engaging blog post (600-900 words) suitable for a quick read.\n\n"
        f"**Topic:** {topic}\n"
        f"**Tone:** {tone}\n\n"
        "**Instructions:**\n"
        "1. Write a clear introduction, a few body paragraphs, and a conclusion.\n"
        "2. Focus on providing actionable insights.\n"
        "3. Output as well-formatted Markdown."
    )


@template(ContentType.BLOG_POST_OUTLINE, topic="title")
def blog_post_outline(*, title: str) -> str:
    return (
        "You are an SEO and content structure expert. Create a logical and detailed outline "
        "for a blog post based on the given title.\n\n"
        f"**Blog Title:** {title}\n\n"
        "**Instructions:**\n"
        "- Create a structure using H1 for the title, and multiple H2s and H3s for the main sections and sub-points.\n"
        "- The outline should be comprehensive and guide a writer to create a well-structured article.\n"
        "- Output as a Markdown list."
    )


@template(ContentType.BLOG_POST_INTRODUCTION, topic="title", audience="audience", tone="tone")
def blog_post_introduction(*, title: str, audience: str, tone: str) -> str:
    return (
        "Write a compelling and engaging introduction paragraph for a blog post.\n\n"
        f"**Blog Title:** {title}\n"
        f"**Target Audience:** {audience}\n"
        f"**Tone:** {tone}\n\n"
        "**Instructions:**\n"
        "- Hook the reader immediately.\n"
        "- Clearly state the article's purpose.\n"
        "- Keep it between 100-150 words.\n"
        "- Output the paragraph directly."
    )


@template(ContentType.BLOG_POST_CONCLUSION, topic="title", audience="audience", tone="tone")
def blog_post_conclusion(*, title: str, audience: str, tone: str) -> str:
    return (
        "Write a strong and effective conclusion paragraph for a blog post.\n\n"
        f"**Blog Title:** {title}\n"
        f"**Target Audience:** {audience}\n"
        f"**Tone:** {tone}\n\n"
        "**Instructions:**\n"
        "- Summarize the key takeaways.\n"
        "- Provide a final thought or call-to-action.\n"
        "- Keep it between 100-150 words.\n"
        "- Output the paragraph directly."
    )


@template(ContentType.BLOG_SECTIONAL_CONTENT, topic="subheading", audience="context", tone="tone")
def blog_sectional_content(*, subheading: str, context: str, tone: str) -> str:
    return (
        "Write a detailed and informative blog section for the given subheading.\n\n"
        f"**Section Subheading/Topic:** {subheading}\n"
        f"**Broader Article Context:** {context}\n"
        f"**Tone:** {tone}\n\n"
        "**Instructions:**\n"
        "- Write 2-3 paragraphs.\n"
        "- Provide explanations, examples, or supporting points.\n"
        "- Ensure the content is self-contained but fits the given context.\n"
        "- Output as Markdown."
    )


@template(ContentType.BLOG_ARTICLE_FROM_OUTLINE, topic="outline", audience="topic", tone="tone")
def blog_article_from_outline(*, outline: str, topic: str, tone: str) -> str:
    return (
        "You are a skilled writer. Expand the following outline into a complete, "
        "well-written blog article.\n\n"
        "**Article Outline:**\n"
        f"{fenced(outline)}\n\n"
        f"**Article Topic:** {topic}\n"
        f"**Tone:** {tone}\n\n"
        "**Instructions:**\n"
        "- Flesh out each point in the outline into full paragraphs.\n"
        "- Ensure smooth transitions between sections.\n"
        "- Write an introduction and conclusion if not specified in the outline.\n"
        "- Output as a complete Markdown article."
    )


@template(ContentType.CONTENT_IMPROVER, topic="text", audience="tone")
def content_improver(*, text: str, tone: str) -> str:
    return (
        "You are an expert editor. Improve the following text for clarity, structure, "
        "grammar, and style, while rewriting it in the specified tone.\n\n"
        "**Original Text:**\n"
        f"{fenced(text)}\n\n"
        f"**Desired Tone:** {tone}\n\n"
        "**Output:** The improved and polished version of the text."
    )


@template(ContentType.SENTENCE_EXPANDER, topic="sentence", audience="tone")
def sentence_expander(*, sentence: str, tone: str) -> str:
    return (
        "Expand the following short sentence into a more detailed and descriptive paragraph.\n\n"
        f'**Sentence:** "{sentence}"\n'
        f"**Tone:** {tone}\n\n"
        "**Instructions:**\n"
        "- Add context, examples, and explanations.\n"
        "- Maintain the specified tone.\n"
        "- Output a single, well-formed paragraph."
    )


@template(ContentType.FAQ_GENERATOR, topic="subject")
def faq_generator(*, subject: str) -> str:
    return (
        "Generate a list of frequently asked questions (FAQs) with clear, concise answers "
        "for the given topic, product, or service.\n\n"
        f"**Topic/Product/Service:** {subject}\n\n"
        "**Instructions:**\n"
        "- Identify 5-7 common user questions.\n"
        "- Provide helpful and direct answers.\n"
        "- Format the output as a list of questions and answers in Markdown (e.g., using bold for questions)."
    )


@template(ContentType.QA_GENERATOR, topic="question")
def qa_generator(*, question: str) -> str:
    return (
        "Provide a clear, factual, and concise answer to the following question.\n\n"
        f'**Question:** "{question}"\n\n'
        "**Output:** A direct answer to the question."
    )
