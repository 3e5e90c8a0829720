"""
Async SQLAlchemy database setup.

SQLite via aiosqlite by default; any async SQLAlchemy URL works.
"""
from __future__ import annotations

import logging
from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from marketgenius.config import settings as settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""
    pass


# Global engine and session factory (initialized on startup)
_engine: AsyncEngine | None = None
_async_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_database_url() -> str:
    """Get the database URL from settings."""
    url = settings.database_url
    if not url:
        # Default to SQLite for development
        url = "sqlite+aiosqlite:///./marketgenius.db"
        logger.warning(f"No database URL configured, using SQLite: {url}")
    return url


async def init_db() -> None:
    """Create the engine and session factory, then create missing tables.

    The schema is one key-value table, so ``create_all`` is the whole
    migration story.
    """
    global _engine, _async_session_factory

    database_url = get_database_url()
    logger.info(f"Initializing database: {database_url.split('@')[-1] if '@' in database_url else database_url}")

    connect_args: dict[str, Any] = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    _engine = create_async_engine(
        database_url,
        echo=settings.debug,
        connect_args=connect_args,
    )

    _async_session_factory = async_sessionmaker(
        bind=_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    from marketgenius.db import models  # noqa: F401

    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database initialized successfully")


async def close_db() -> None:
    """Close database connection."""
    global _engine, _async_session_factory

    if _engine:
        await _engine.dispose()
        _engine = None
        _async_session_factory = None
        logger.info("Database connection closed")


def is_initialized() -> bool:
    return _async_session_factory is not None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for getting async database sessions.

    Usage:
        @router.get("/favorites")
        async def favorites(db: AsyncSession = Depends(get_db)):
            ...
    """
    if _async_session_factory is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")

    async with _async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def AsyncSessionLocal() -> AsyncSession:
    """
    Get a new async session directly (for non-FastAPI contexts).

    Usage:
        async with AsyncSessionLocal() as session:
            ...
    """
    if _async_session_factory is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")
    return _async_session_factory()
