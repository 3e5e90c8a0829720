"""User session and favorites, persisted as JSON text in a key-value store."""

from __future__ import annotations

import json
import logging
from typing import Optional

from pydantic import ValidationError

from marketgenius.models.base import CamelModel
from marketgenius.storage.kv import KeyValueStore

logger = logging.getLogger(__name__)

USER_KEY = "marketGeniusUser"
FAVORITES_KEY = "assistantFavorites"


class UserProfile(CamelModel):
    name: str
    email: str


class UserSessionRepository:
    """The signed-in user's display name and email."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    async def get(self) -> Optional[UserProfile]:
        """Stored profile, or ``None``. A corrupt entry is removed."""
        raw = await self._store.get(USER_KEY)
        if raw is None:
            return None
        try:
            return UserProfile.model_validate_json(raw)
        except ValidationError as e:
            logger.error(f"Failed to parse stored user: {e}")
            await self._store.delete(USER_KEY)
            return None

    async def save(self, name: str, email: str) -> UserProfile:
        profile = UserProfile(name=name, email=email)
        await self._store.set(USER_KEY, profile.model_dump_json())
        logger.info("User session saved")
        return profile

    async def clear(self) -> None:
        await self._store.delete(USER_KEY)


class FavoritesRepository:
    """Favorited tool ids, kept in the order they were added."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    async def get_all(self) -> list[int]:
        raw = await self._store.get(FAVORITES_KEY)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring corrupt favorites entry: {e}")
            return []
        if not isinstance(data, list):
            logger.warning("Ignoring favorites entry that is not a list")
            return []
        return [item for item in data if isinstance(item, int) and not isinstance(item, bool)]

    async def _save(self, ids: list[int]) -> None:
        await self._store.set(FAVORITES_KEY, json.dumps(ids))

    async def is_favorite(self, tool_id: int) -> bool:
        return tool_id in await self.get_all()

    async def toggle(self, tool_id: int) -> bool:
        """Flip ``tool_id``; returns whether it is now a favorite."""
        ids = await self.get_all()
        if tool_id in ids:
            ids = [i for i in ids if i != tool_id]
            now_favorite = False
        else:
            ids.append(tool_id)
            now_favorite = True
        await self._save(ids)
        return now_favorite
