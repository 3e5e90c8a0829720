"""Services for MarketGenius."""
from __future__ import annotations

from marketgenius.services.errors import GenerationError, InvalidBriefError, MissingFieldsError
from marketgenius.services.gemini import (
    ChatTurn,
    GeneratedImage,
    GenerationClient,
    close_generation_client,
    get_generation_client,
)

__all__ = [
    "ChatTurn",
    "GeneratedImage",
    "GenerationClient",
    "GenerationError",
    "InvalidBriefError",
    "MissingFieldsError",
    "close_generation_client",
    "get_generation_client",
]
