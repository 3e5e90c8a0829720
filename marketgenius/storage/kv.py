"""Flat key-value string stores.

Values are JSON text written by the repositories; the stores never parse
them.  Concurrent writers follow last-write-wins.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from marketgenius.db.models import KeyValueEntry, utc_now

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    async def get(self, key: str) -> Optional[str]:
        ...

    async def set(self, key: str, value: str) -> None:
        ...

    async def delete(self, key: str) -> None:
        ...


class InMemoryKeyValueStore:
    """Process-local store; used in tests and with ``storage_backend=memory``."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()


class SqlKeyValueStore:
    """Store backed by the ``kv_entries`` table.

    Writes are flushed, not committed: the request-scoped session from
    ``get_db`` commits when the request succeeds.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, key: str) -> Optional[str]:
        entry = await self._session.get(KeyValueEntry, key)
        return entry.value if entry is not None else None

    async def set(self, key: str, value: str) -> None:
        entry = await self._session.get(KeyValueEntry, key)
        if entry is None:
            self._session.add(KeyValueEntry(key=key, value=value))
        else:
            entry.value = value
            entry.updated_at = utc_now()
        await self._session.flush()

    async def delete(self, key: str) -> None:
        entry = await self._session.get(KeyValueEntry, key)
        if entry is not None:
            await self._session.delete(entry)
            await self._session.flush()


_memory_store: InMemoryKeyValueStore | None = None


def get_memory_store() -> InMemoryKeyValueStore:
    """Singleton in-memory store."""
    global _memory_store
    if _memory_store is None:
        _memory_store = InMemoryKeyValueStore()
    return _memory_store


def reset_memory_store() -> None:
    """Reset the singleton (for testing)."""
    global _memory_store
    if _memory_store is not None:
        _memory_store.clear()
    _memory_store = None
