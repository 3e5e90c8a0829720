"""Pytest configuration and fixtures."""
from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from marketgenius.api.dependencies import get_client, limiter
from marketgenius.article import reset_article_store
from marketgenius.db import database
from marketgenius.db.database import Base, get_db
from marketgenius.main import app
from marketgenius.models import BlogBrief
from marketgenius.services import gemini
from marketgenius.services.gemini import GeneratedImage, GenerationClient
from marketgenius.storage import reset_memory_store

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image"


def pytest_configure(config: pytest.Config) -> None:
    """Ensure asyncio_mode is auto so async fixtures work when pyproject is not in cwd."""
    if hasattr(config.option, "asyncio_mode") and config.option.asyncio_mode is None:
        config.option.asyncio_mode = "auto"
    logging.getLogger("httpcore").setLevel(logging.CRITICAL)


@pytest.fixture(autouse=True)
def _reset_singletons() -> Iterator[None]:
    """Reset singleton stores, the rate limiter and the shared client between tests."""
    yield
    reset_article_store()
    reset_memory_store()
    limiter.reset()
    gemini._shared_client = None


def make_mock_client() -> MagicMock:
    """GenerationClient double with canned responses for every model call."""
    mock = MagicMock(spec=GenerationClient)
    mock.generate_text = AsyncMock(return_value="Generated text")
    mock.generate_brief = AsyncMock(return_value=BlogBrief(
        title="Remote Work That Works",
        keywords=["remote work", "productivity", "remote work"],
        outline="## Intro\n## Tools\n## Habits",
    ))
    mock.generate_image = AsyncMock(return_value=GeneratedImage(data=PNG_BYTES, mime_type="image/png"))
    mock.edit_image = AsyncMock(return_value=GeneratedImage(data=PNG_BYTES, mime_type="image/png"))
    mock.generate_speech = AsyncMock(return_value=b"\x00\x00" * 240)
    mock.marketing_tip = AsyncMock(return_value="Post when your audience is awake.")
    mock.chat = AsyncMock(return_value="Have you tried a content calendar?")
    mock.close = AsyncMock()
    return mock


@pytest.fixture
def mock_client() -> Iterator[MagicMock]:
    """A mock generation client injected into every route that calls the model."""
    mock = make_mock_client()
    app.dependency_overrides[get_client] = lambda: mock
    yield mock
    app.dependency_overrides.pop(get_client, None)


@pytest_asyncio.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    """Create an in-memory test database session."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    # Inject so health checks using AsyncSessionLocal() see the test DB
    old_engine = database._engine
    old_factory = database._async_session_factory
    database._engine = engine
    database._async_session_factory = async_session_factory
    try:
        async with async_session_factory() as session:
            async def override_get_db() -> AsyncIterator[AsyncSession]:
                yield session
            app.dependency_overrides[get_db] = override_get_db
            yield session
            app.dependency_overrides.pop(get_db, None)
    finally:
        database._engine = old_engine
        database._async_session_factory = old_factory
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncIterator[AsyncClient]:
    """Create an async test client backed by the in-memory database."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
