"""
MarketGenius API

FastAPI application for AI-assisted marketing content.
"""
from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Awaitable, Callable

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from marketgenius.api.dependencies import get_kv_store, limiter
from marketgenius.api.routes import (
    articles,
    assistant,
    campaign,
    generate,
    health,
    live,
    media,
    session,
    tools,
)
from marketgenius.catalog import all_tools
from marketgenius.config import settings
from marketgenius.db import close_db, init_db
from marketgenius.services.gemini import close_generation_client
from marketgenius.storage import get_memory_store


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        response = await call_next(request)

        # Prevent clickjacking
        response.headers["X-Frame-Options"] = "DENY"

        # Prevent MIME type sniffing
        response.headers["X-Content-Type-Options"] = "nosniff"

        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        # The live conversation captures audio in the browser
        response.headers["Permissions-Policy"] = (
            "accelerometer=(), camera=(), geolocation=(), "
            "gyroscope=(), magnetometer=(), microphone=(self), "
            "payment=(), usb=()"
        )

        return response


# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _uses_database() -> bool:
    return settings.storage_backend != "memory"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler."""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Text model: {settings.text_model}")
    logger.info(f"Image model: {settings.image_model}")
    logger.info(f"Catalog: {len(all_tools())} tools")

    if _uses_database():
        try:
            await init_db()
            logger.info("Database initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize database: {e}")
            raise
    else:
        logger.info("Storage backend: memory (favorites and session are not persisted)")

    yield

    # Cleanup
    logger.info("Shutting down...")
    if _uses_database():
        await close_db()
    await close_generation_client()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="MarketGenius: marketing content, articles, images and live voice.",
    lifespan=lifespan,
    # Public docs only in debug; set MARKETGENIUS_DEBUG=true locally to enable
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    openapi_url="/openapi.json" if settings.debug else None,
)

# Add rate limiter to app state and exception handler
app.state.limiter = limiter
app.add_exception_handler(
    RateLimitExceeded,
    _rate_limit_exceeded_handler,  # type: ignore[arg-type]  # slowapi handler signature is (Request, RateLimitExceeded) not (Request, Exception)
)

# Security headers middleware (added first, runs last)
app.add_middleware(SecurityHeadersMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if not _uses_database():
    app.dependency_overrides[get_kv_store] = get_memory_store

# Include routers
app.include_router(health.router, prefix="/api/v1", tags=["health"])
app.include_router(tools.router, prefix="/api/v1", tags=["tools"])
app.include_router(generate.router, prefix="/api/v1", tags=["generate"])
app.include_router(campaign.router, prefix="/api/v1", tags=["campaign"])
app.include_router(articles.router, prefix="/api/v1", tags=["articles"])
app.include_router(media.router, prefix="/api/v1", tags=["media"])
app.include_router(assistant.router, prefix="/api/v1", tags=["assistant"])
app.include_router(session.router, prefix="/api/v1", tags=["session"])
app.include_router(live.router, prefix="/api/v1", tags=["live"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with service info."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
