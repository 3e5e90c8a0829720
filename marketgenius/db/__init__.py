"""
Database module for MarketGenius.

Provides async SQLAlchemy support (SQLite via aiosqlite by default).
"""
from __future__ import annotations

from marketgenius.db.database import (
    get_db,
    init_db,
    close_db,
    AsyncSessionLocal,
)
from marketgenius.db.models import KeyValueEntry

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "AsyncSessionLocal",
    "KeyValueEntry",
]
