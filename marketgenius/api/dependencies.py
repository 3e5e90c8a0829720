"""FastAPI dependencies: generation client, key-value store, repositories."""
from __future__ import annotations

import logging

from fastapi import Depends, status
from slowapi import Limiter
from slowapi.util import get_remote_address
from sqlalchemy.ext.asyncio import AsyncSession

from marketgenius.api.errors import http_error
from marketgenius.db import get_db
from marketgenius.services.gemini import GenerationClient, get_generation_client
from marketgenius.storage import (
    FavoritesRepository,
    KeyValueStore,
    SqlKeyValueStore,
    UserSessionRepository,
)

logger = logging.getLogger(__name__)

# Rate limiter - uses IP address as key
limiter = Limiter(key_func=get_remote_address)


def get_client() -> GenerationClient:
    """The shared generation client; 502 when no API key is configured."""
    try:
        return get_generation_client()
    except ValueError as e:
        logger.error(f"Generation client unavailable: {e}")
        raise http_error(status.HTTP_502_BAD_GATEWAY, "Generation unavailable", str(e))


async def get_kv_store(db: AsyncSession = Depends(get_db)) -> KeyValueStore:
    """Database-backed store; main.py swaps in the memory store when configured."""
    return SqlKeyValueStore(db)


def get_favorites(store: KeyValueStore = Depends(get_kv_store)) -> FavoritesRepository:
    return FavoritesRepository(store)


def get_user_session(store: KeyValueStore = Depends(get_kv_store)) -> UserSessionRepository:
    return UserSessionRepository(store)
