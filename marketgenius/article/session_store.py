"""
In-Memory Article Session Store.

Holds one ``ArticleSession`` per article being written.  Sessions are
transient: they live for the process and are dropped on start-over or
delete.

Key design:
    - Stage transitions enforced via state_machine.assert_transition()
    - ``request_epoch`` is bumped whenever a generation call starts or the
      session starts over; a result that comes back with a stale epoch is
      discarded instead of written
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from marketgenius.article.state_machine import ArticleStage, assert_transition
from marketgenius.config import DEFAULT_WORD_COUNT
from marketgenius.models.brief import BlogBrief
from marketgenius.prompts import ToneOfVoice

logger = logging.getLogger(__name__)


@dataclass
class ArticleSession:
    """
    One article from topic to finished Markdown.

    ``title``/``keywords``/``outline``/``word_count``/``tone`` are the
    user-editable copy of ``brief``; the brief itself keeps what the model
    returned (apart from a regenerated outline).
    """

    session_id: str
    stage: ArticleStage = ArticleStage.INITIAL
    topic: str = ""
    brief: Optional[BlogBrief] = None
    title: str = ""
    keywords: list[str] = field(default_factory=list)
    outline: str = ""
    word_count: str = str(DEFAULT_WORD_COUNT)
    tone: str = ToneOfVoice.FRIENDLY.value
    article: str = ""
    image_urls: list[str] = field(default_factory=list)
    feature_image: Optional[str] = None
    error: Optional[str] = None
    progress: str = ""
    busy: bool = False
    request_epoch: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def transition_to(self, new_stage: ArticleStage) -> None:
        """
        Transition to a new stage with state machine validation.

        Raises InvalidTransitionError if the transition is not allowed.
        """
        assert_transition(self.stage, new_stage)
        old_stage = self.stage
        self.stage = new_stage
        self.touch()
        logger.info(
            f"Article {self.session_id[:8]}: "
            f"{old_stage.value} → {new_stage.value}"
        )

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

    def next_epoch(self) -> int:
        self.request_epoch += 1
        return self.request_epoch

    def apply_brief(self, brief: BlogBrief) -> None:
        """Load a fresh brief into the editable fields."""
        self.brief = brief
        self.title = brief.title
        self.keywords = _dedupe(brief.keywords)
        self.outline = brief.outline
        self.touch()

    def clear(self) -> None:
        """Drop everything but identity; used when starting over."""
        self.topic = ""
        self.brief = None
        self.title = ""
        self.keywords = []
        self.outline = ""
        self.word_count = str(DEFAULT_WORD_COUNT)
        self.tone = ToneOfVoice.FRIENDLY.value
        self.article = ""
        self.image_urls = []
        self.feature_image = None
        self.error = None
        self.progress = ""
        self.busy = False
        self.touch()


def _dedupe(items: list[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for item in items:
        cleaned = item.strip()
        if cleaned and cleaned not in seen:
            seen.add(cleaned)
            result.append(cleaned)
    return result


class ArticleSessionStore:
    """In-memory store for article sessions."""

    def __init__(self) -> None:
        self._records: dict[str, ArticleSession] = {}

    def create(self, session_id: str | None = None) -> ArticleSession:
        """Create a new session in INITIAL stage."""
        session_id = session_id or str(uuid.uuid4())
        if session_id in self._records:
            raise ValueError(f"Article session {session_id} already exists")
        record = ArticleSession(session_id=session_id)
        self._records[session_id] = record
        logger.info(f"Created article session {session_id[:8]}")
        return record

    def get(self, session_id: str) -> ArticleSession | None:
        return self._records.get(session_id)

    def get_or_raise(self, session_id: str) -> ArticleSession:
        """Get a session by ID. Raises KeyError if not found."""
        record = self._records.get(session_id)
        if record is None:
            raise KeyError(f"Article session {session_id} not found")
        return record

    def transition(self, session_id: str, new_stage: ArticleStage) -> ArticleSession:
        """
        Transition a session to a new stage.

        Raises KeyError if not found, InvalidTransitionError if invalid.
        """
        record = self.get_or_raise(session_id)
        record.transition_to(new_stage)
        return record

    def delete(self, session_id: str) -> bool:
        """Delete a session. Returns True if it existed."""
        return self._records.pop(session_id, None) is not None

    def clear(self) -> None:
        """Clear all records (for testing)."""
        self._records.clear()

    @property
    def count(self) -> int:
        return len(self._records)


# Singleton instance
_store: ArticleSessionStore | None = None


def get_article_store() -> ArticleSessionStore:
    """Get the singleton ArticleSessionStore instance."""
    global _store
    if _store is None:
        _store = ArticleSessionStore()
    return _store


def reset_article_store() -> None:
    """Reset the singleton (for testing)."""
    global _store
    if _store is not None:
        _store.clear()
    _store = None
