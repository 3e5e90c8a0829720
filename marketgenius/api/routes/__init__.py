"""API route modules."""
from __future__ import annotations

from marketgenius.api.routes import (
    articles,
    assistant,
    campaign,
    generate,
    health,
    live,
    media,
    session,
    tools,
)

__all__ = [
    "articles",
    "assistant",
    "campaign",
    "generate",
    "health",
    "live",
    "media",
    "session",
    "tools",
]
