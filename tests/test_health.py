"""Tests for health endpoints."""
from __future__ import annotations

import pytest
from httpx import AsyncClient

from marketgenius.api.routes import health


async def test_health_check(client: AsyncClient) -> None:
    """Test basic health check endpoint."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "ok"
    assert data["service"] == "MarketGenius"
    assert "version" in data


async def test_root_endpoint(client: AsyncClient) -> None:
    """Test root endpoint."""
    response = await client.get("/")
    assert response.status_code == 200

    data = response.json()
    assert "service" in data
    assert "docs" in data


async def test_full_health_degraded_without_key(client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
    """A missing API key marks generation unconfigured; the test DB is reachable."""
    monkeypatch.setattr(health.settings, "gemini_api_key", None)
    response = await client.get("/api/v1/health/full")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "degraded"
    assert data["dependencies"]["generation"]["status"] == "unconfigured"
    assert data["dependencies"]["database"]["status"] == "ok"


async def test_full_health_ok(client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(health.settings, "gemini_api_key", "test-key")
    data = (await client.get("/api/v1/health/full")).json()
    assert data["status"] == "ok"


async def test_full_health_memory_backend(client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(health.settings, "gemini_api_key", "test-key")
    monkeypatch.setattr(health.settings, "storage_backend", "memory")
    data = (await client.get("/api/v1/health/full")).json()
    assert data["dependencies"]["database"] == {"status": "disabled", "backend": "memory"}
    assert data["status"] == "ok"
