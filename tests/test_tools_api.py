"""Tests for the tool catalog, form runner and favorites endpoints."""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from httpx import AsyncClient

from marketgenius.services import gemini
from marketgenius.services.errors import GenerationError


# =============================================================================
# Catalog
# =============================================================================


class TestListTools:
    async def test_lists_whole_catalog(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/tools")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 89
        first = data["tools"][0]
        assert {"id", "title", "bulkEnabled", "linkedView", "runnable", "favorite"} <= set(first)

    async def test_search_and_category(self, client: AsyncClient) -> None:
        data = (await client.get("/api/v1/tools", params={"q": "outline", "category": "Blog"})).json()
        assert data["total"] > 0
        assert all("Blog" in t["categories"] for t in data["tools"])

    async def test_unknown_category(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/tools", params={"category": "Podcasts"})
        assert response.status_code == 422
        assert response.json()["detail"]["error"] == "Validation error"

    async def test_favorites_category(self, client: AsyncClient) -> None:
        await client.post("/api/v1/favorites/100/toggle")
        data = (await client.get("/api/v1/tools", params={"category": "Favorites"})).json()
        assert [t["id"] for t in data["tools"]] == [100]
        assert data["tools"][0]["favorite"] is True

    async def test_categories(self, client: AsyncClient) -> None:
        categories = (await client.get("/api/v1/tools/categories")).json()["categories"]
        assert categories[0] == "All"
        assert categories[-1] == "Favorites"


class TestToolDetail:
    async def test_runnable_tool(self, client: AsyncClient) -> None:
        data = (await client.get("/api/v1/tools/102")).json()
        assert data["contentType"] == "Short Blog Article"
        assert [i["id"] for i in data["inputs"]] == ["topic", "audience"]
        assert data["runnable"] is True

    async def test_view_tool(self, client: AsyncClient) -> None:
        data = (await client.get("/api/v1/tools/1")).json()
        assert data["linkedView"] == "content"
        assert data["runnable"] is False
        assert data["inputs"] == []

    async def test_not_found(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/tools/999999")
        assert response.status_code == 404
        assert response.json()["detail"]["message"] == "Tool 999999 not found"


# =============================================================================
# Runner
# =============================================================================


class TestPromptPreview:
    async def test_preview(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/tools/100/prompt", json={"values": {"topic": "Coffee"}})
        assert response.status_code == 200
        data = response.json()
        assert data["toolId"] == 100
        assert "**Theme:** Coffee" in data["prompt"]

    async def test_missing_fields(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/tools/102/prompt", json={"values": {"topic": "x"}})
        assert response.status_code == 422
        assert "audience" in response.json()["detail"]["message"]

    async def test_unknown_slot(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/tools/100/prompt", json={"values": {"colour": "red"}})
        assert response.status_code == 422

    async def test_view_tool_conflict(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/tools/1/prompt", json={"values": {}})
        assert response.status_code == 409


class TestRunTool:
    async def test_run(self, client: AsyncClient, mock_client: MagicMock) -> None:
        response = await client.post("/api/v1/tools/100/run", json={"values": {"topic": "Coffee"}})
        assert response.status_code == 200
        assert response.json() == {"toolId": 100, "output": "Generated text"}
        mock_client.generate_text.assert_awaited_once()

    async def test_validation_skips_model(self, client: AsyncClient, mock_client: MagicMock) -> None:
        response = await client.post("/api/v1/tools/100/run", json={"values": {}})
        assert response.status_code == 422
        mock_client.generate_text.assert_not_awaited()

    async def test_generation_failure(self, client: AsyncClient, mock_client: MagicMock) -> None:
        mock_client.generate_text.side_effect = GenerationError("Model unavailable")
        response = await client.post("/api/v1/tools/100/run", json={"values": {"topic": "Coffee"}})
        assert response.status_code == 502
        assert response.json()["detail"] == {"error": "Generation failed", "message": "Model unavailable"}

    async def test_missing_api_key(self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(gemini.settings, "gemini_api_key", None)
        response = await client.post("/api/v1/tools/100/run", json={"values": {"topic": "Coffee"}})
        assert response.status_code == 502
        assert response.json()["detail"]["error"] == "Generation unavailable"


# =============================================================================
# Favorites and session
# =============================================================================


class TestFavorites:
    async def test_toggle_round_trip(self, client: AsyncClient) -> None:
        first = (await client.post("/api/v1/favorites/12/toggle")).json()
        assert first == {"toolId": 12, "favorite": True}
        assert (await client.get("/api/v1/favorites")).json() == {"favorites": [12]}
        second = (await client.post("/api/v1/favorites/12/toggle")).json()
        assert second["favorite"] is False
        assert (await client.get("/api/v1/favorites")).json() == {"favorites": []}

    async def test_unknown_tool(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/favorites/999999/toggle")
        assert response.status_code == 404


class TestUserSession:
    async def test_signed_out(self, client: AsyncClient) -> None:
        assert (await client.get("/api/v1/session")).json()["signedIn"] is False

    async def test_sign_in_and_out(self, client: AsyncClient) -> None:
        response = await client.put("/api/v1/session", json={"name": " Ada ", "email": "ada@example.com"})
        assert response.json() == {"name": "Ada", "email": "ada@example.com", "signedIn": True}
        assert (await client.get("/api/v1/session")).json()["name"] == "Ada"
        assert (await client.delete("/api/v1/session")).status_code == 204
        assert (await client.get("/api/v1/session")).json()["signedIn"] is False

    async def test_blank_name_rejected(self, client: AsyncClient) -> None:
        response = await client.put("/api/v1/session", json={"name": "   ", "email": "ada@example.com"})
        assert response.status_code == 422
