"""Health check endpoints."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter
from sqlalchemy import text

from marketgenius.config import settings
from marketgenius.db import AsyncSessionLocal
from marketgenius.db.database import is_initialized

router = APIRouter()
logger = logging.getLogger(__name__)


def _generation_configured() -> bool:
    """True if a Gemini API key is set."""
    return bool(settings.gemini_api_key)


async def _database_reachable() -> bool:
    if not is_initialized():
        return False
    try:
        async with AsyncSessionLocal() as session:
            await session.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        return False


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Basic health check."""
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
    }


@router.get("/health/full")
async def full_health_check() -> dict[str, Any]:
    """
    Full health check including dependencies.

    Reports:
    - generation: configured (Gemini API key present)
    - database: reachable (skipped with the memory storage backend)
    """
    generation_ok = _generation_configured()
    deps: dict[str, Any] = {
        "generation": {
            "status": "ok" if generation_ok else "unconfigured",
            "textModel": settings.text_model,
        },
    }
    all_ok = generation_ok

    if settings.storage_backend != "memory":
        db_ok = await _database_reachable()
        deps["database"] = {"status": "ok" if db_ok else "unavailable"}
        all_ok = all_ok and db_ok
    else:
        deps["database"] = {"status": "disabled", "backend": settings.storage_backend}

    return {
        "status": "ok" if all_ok else "degraded",
        "service": settings.app_name,
        "version": settings.app_version,
        "dependencies": deps,
    }
