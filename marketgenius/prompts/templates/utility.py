"""Text utilities: rewriting, correction, translation and the odd creative task."""
from __future__ import annotations

from marketgenius.prompts.content_types import ContentType
from marketgenius.prompts.registry import template
from marketgenius.prompts.templates import fenced


def _rewrite(instruction: str, text: str, output: str) -> str:
    return (
        f"{instruction}\n\n"
        "**Original Text:**\n"
        f"{fenced(text)}\n\n"
        f"**Output:** {output}"
    )


@template(ContentType.PARAPHRASE_REWRITE, topic="text")
def paraphrase_rewrite(*, text: str) -> str:
    return _rewrite(
        "Rewrite and paraphrase the following text. The goal is to make it sound completely "
        "original while preserving the core meaning.",
        text,
        "The rewritten version of the text.",
    )


@template(ContentType.CORRECT_SPELLING_GRAMMAR, topic="text")
def correct_spelling_grammar(*, text: str) -> str:
    return _rewrite(
        "Correct all spelling, grammar, and punctuation errors in the following text. "
        "Do not change the meaning.",
        text,
        "The corrected text.",
    )


@template(ContentType.SIMPLIFY_TEXT, topic="text")
def simplify_text(*, text: str) -> str:
    return _rewrite(
        "Rewrite the following text to make it simpler and easier to understand. "
        "Use clearer vocabulary and shorter sentences.",
        text,
        "The simplified version of the text.",
    )


@template(ContentType.PARAGRAPHS_TO_BULLETS, topic="text")
def paragraphs_to_bullets(*, text: str) -> str:
    return _rewrite(
        "Convert the following paragraph(s) into a concise, easy-to-read bulleted list. "
        "Extract the main points.",
        text,
        "A Markdown bulleted list.",
    )


@template(ContentType.TRANSLATE_TEXT, topic="text", audience="language")
def translate_text(*, text: str, language: str) -> str:
    return (
        "Translate the following text.\n"
        "**Text to Translate:**\n"
        f"{fenced(text)}\n"
        f"**Translate to (Language):** {language}\n"
        "**Instructions:** Provide only the translated text as the output."
    )


@template(ContentType.POEM, topic="theme", audience="style")
def poem(*, theme: str, style: str) -> str:
    return (
        "Write a poem on the given topic.\n"
        f"**Topic/Theme:** {theme}\n"
        f"**Style/Tone:** {style}\n"
        "**Instructions:**\n"
        "Create a poem that captures the essence of the topic in the desired style."
    )
