"""
SQLAlchemy ORM models for MarketGenius.

Tables:
- kv_entries: flat key-value store holding JSON text (user session, favorites)
"""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from marketgenius.db.database import Base


def utc_now() -> datetime:
    """Get current UTC timestamp."""
    return datetime.now(timezone.utc)


class KeyValueEntry(Base):
    """One persisted value. ``value`` is JSON text; no schema versioning."""

    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<KeyValueEntry {self.key}>"
