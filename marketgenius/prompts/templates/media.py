"""Media content types.

Speech and image editing go through dedicated client calls rather than a text
prompt; their templates exist so the registry stays exhaustive and a stray
text request gets a clear answer instead of a generic one.
"""
from __future__ import annotations

from marketgenius.prompts.content_types import ContentType
from marketgenius.prompts.registry import template

UNSUPPORTED_MESSAGE = "This content type is not supported for generic content generation."


@template(ContentType.SPEECH_GENERATION, topic="text")
def speech_generation(*, text: str) -> str:
    return UNSUPPORTED_MESSAGE


@template(ContentType.IMAGE_EDITING, topic="instruction")
def image_editing(*, instruction: str) -> str:
    return UNSUPPORTED_MESSAGE
