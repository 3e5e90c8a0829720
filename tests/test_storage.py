"""Tests for the key-value stores and the session/favorites repositories."""
from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from marketgenius.storage import (
    FavoritesRepository,
    InMemoryKeyValueStore,
    SqlKeyValueStore,
    UserSessionRepository,
    get_memory_store,
    reset_memory_store,
)
from marketgenius.storage.repositories import FAVORITES_KEY, USER_KEY


# =============================================================================
# Stores
# =============================================================================


class TestInMemoryStore:
    async def test_set_get_delete(self) -> None:
        store = InMemoryKeyValueStore()
        assert await store.get("k") is None
        await store.set("k", "v")
        assert await store.get("k") == "v"
        await store.delete("k")
        await store.delete("k")
        assert await store.get("k") is None

    def test_singleton_reset(self) -> None:
        first = get_memory_store()
        assert get_memory_store() is first
        reset_memory_store()
        assert get_memory_store() is not first


class TestSqlStore:
    async def test_round_trip(self, db_session: AsyncSession) -> None:
        store = SqlKeyValueStore(db_session)
        await store.set("k", "one")
        await store.set("k", "two")
        assert await store.get("k") == "two"
        await store.delete("k")
        assert await store.get("k") is None

    async def test_delete_missing_key(self, db_session: AsyncSession) -> None:
        await SqlKeyValueStore(db_session).delete("absent")


# =============================================================================
# Repositories
# =============================================================================


class TestUserSessionRepository:
    async def test_signed_out_by_default(self) -> None:
        assert await UserSessionRepository(InMemoryKeyValueStore()).get() is None

    async def test_save_and_clear(self) -> None:
        store = InMemoryKeyValueStore()
        repo = UserSessionRepository(store)
        await repo.save("Ada", "ada@example.com")
        profile = await repo.get()
        assert profile is not None and profile.name == "Ada"
        await repo.clear()
        assert await repo.get() is None

    async def test_corrupt_entry_removed(self) -> None:
        store = InMemoryKeyValueStore({USER_KEY: "{broken"})
        assert await UserSessionRepository(store).get() is None
        assert await store.get(USER_KEY) is None

    async def test_persists_in_sql(self, db_session: AsyncSession) -> None:
        await UserSessionRepository(SqlKeyValueStore(db_session)).save("Ada", "ada@example.com")
        profile = await UserSessionRepository(SqlKeyValueStore(db_session)).get()
        assert profile is not None and profile.email == "ada@example.com"


class TestFavoritesRepository:
    async def test_toggle_keeps_insertion_order(self) -> None:
        repo = FavoritesRepository(InMemoryKeyValueStore())
        assert await repo.toggle(12) is True
        assert await repo.toggle(100) is True
        assert await repo.get_all() == [12, 100]
        assert await repo.toggle(12) is False
        assert await repo.get_all() == [100]
        assert not await repo.is_favorite(12)

    @pytest.mark.parametrize("raw", ["not json", '{"a": 1}', '"12"'])
    async def test_corrupt_entry_reads_empty(self, raw: str) -> None:
        repo = FavoritesRepository(InMemoryKeyValueStore({FAVORITES_KEY: raw}))
        assert await repo.get_all() == []

    async def test_non_integer_items_dropped(self) -> None:
        repo = FavoritesRepository(InMemoryKeyValueStore({FAVORITES_KEY: '[1, "2", true, 3.5, 4]'}))
        assert await repo.get_all() == [1, 4]
