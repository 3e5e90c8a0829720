"""Persistence for the user session and favorites."""
from __future__ import annotations

from marketgenius.storage.kv import (
    InMemoryKeyValueStore,
    KeyValueStore,
    SqlKeyValueStore,
    get_memory_store,
    reset_memory_store,
)
from marketgenius.storage.repositories import (
    FAVORITES_KEY,
    USER_KEY,
    FavoritesRepository,
    UserProfile,
    UserSessionRepository,
)

__all__ = [
    "FAVORITES_KEY",
    "USER_KEY",
    "FavoritesRepository",
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "SqlKeyValueStore",
    "UserProfile",
    "UserSessionRepository",
    "get_memory_store",
    "reset_memory_store",
]
