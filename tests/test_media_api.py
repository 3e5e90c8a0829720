"""Tests for image, speech and assistant endpoints."""
from __future__ import annotations

import io
import wave
from unittest.mock import MagicMock

from httpx import AsyncClient

from marketgenius.services.errors import GenerationError
from marketgenius.services.gemini import ChatTurn

PNG_DATA_URI = "data:image/png;base64,iVBORw0KGgo="


class TestMediaOptions:
    async def test_options(self, client: AsyncClient) -> None:
        data = (await client.get("/api/v1/media/options")).json()
        assert "Kore" in data["voices"]
        assert data["aspectRatios"] == ["1:1", "16:9", "9:16"]
        assert data["styles"][0] == "None"


class TestImages:
    async def test_generate(self, client: AsyncClient, mock_client: MagicMock) -> None:
        response = await client.post(
            "/api/v1/images",
            json={"prompt": "a lighthouse", "style": "Photorealistic", "aspectRatio": "16:9"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["imageUrl"].startswith("data:image/png;base64,")
        mock_client.generate_image.assert_awaited_once_with(
            "a lighthouse", aspect_ratio="16:9", style="Photorealistic"
        )

    async def test_unknown_style(self, client: AsyncClient, mock_client: MagicMock) -> None:
        response = await client.post("/api/v1/images", json={"prompt": "x", "style": "Cubism"})
        assert response.status_code == 422

    async def test_generation_failure(self, client: AsyncClient, mock_client: MagicMock) -> None:
        mock_client.generate_image.side_effect = GenerationError("no image")
        response = await client.post("/api/v1/images", json={"prompt": "x"})
        assert response.status_code == 502

    async def test_edit_with_data_uri(self, client: AsyncClient, mock_client: MagicMock) -> None:
        response = await client.post("/api/v1/images/edit", json={"prompt": "add a hat", "image": PNG_DATA_URI})
        assert response.status_code == 200
        args = mock_client.edit_image.call_args.args
        assert args[0] == "add a hat"
        assert args[2] == "image/png"

    async def test_edit_with_bare_base64(self, client: AsyncClient, mock_client: MagicMock) -> None:
        response = await client.post(
            "/api/v1/images/edit",
            json={"prompt": "add a hat", "image": "iVBORw0KGgo=", "mimeType": "image/jpeg"},
        )
        assert response.status_code == 200
        assert mock_client.edit_image.call_args.args[2] == "image/jpeg"

    async def test_edit_needs_mime_type(self, client: AsyncClient, mock_client: MagicMock) -> None:
        response = await client.post("/api/v1/images/edit", json={"prompt": "x", "image": "iVBORw0KGgo="})
        assert response.status_code == 422
        mock_client.edit_image.assert_not_awaited()

    async def test_edit_rejects_non_image(self, client: AsyncClient, mock_client: MagicMock) -> None:
        response = await client.post(
            "/api/v1/images/edit",
            json={"prompt": "x", "image": "data:text/plain;base64,aGk="},
        )
        assert response.status_code == 422

    async def test_edit_rejects_bad_base64(self, client: AsyncClient, mock_client: MagicMock) -> None:
        response = await client.post(
            "/api/v1/images/edit",
            json={"prompt": "x", "image": "!!!", "mimeType": "image/png"},
        )
        assert response.status_code == 422


class TestSpeech:
    async def test_returns_wav(self, client: AsyncClient, mock_client: MagicMock) -> None:
        response = await client.post("/api/v1/speech", json={"text": "Hello", "voice": "Puck"})
        assert response.status_code == 200
        assert response.headers["content-type"] == "audio/wav"
        with wave.open(io.BytesIO(response.content), "rb") as wav:
            assert wav.getframerate() == 24000
            assert wav.getnframes() == 240
        mock_client.generate_speech.assert_awaited_once_with("Hello", voice="Puck")

    async def test_unknown_voice(self, client: AsyncClient, mock_client: MagicMock) -> None:
        response = await client.post("/api/v1/speech", json={"text": "Hello", "voice": "Robot"})
        assert response.status_code == 422


class TestAssistant:
    async def test_tip(self, client: AsyncClient, mock_client: MagicMock) -> None:
        response = await client.get("/api/v1/assistant/tip")
        assert response.json() == {"tip": "Post when your audience is awake."}

    async def test_chat_forwards_history(self, client: AsyncClient, mock_client: MagicMock) -> None:
        response = await client.post(
            "/api/v1/assistant/chat",
            json={
                "message": "Any ideas?",
                "history": [{"role": "user", "text": "Hi"}, {"role": "model", "text": "Hello!"}],
            },
        )
        assert response.json() == {"reply": "Have you tried a content calendar?"}
        history, message = mock_client.chat.call_args.args
        assert history == [ChatTurn("user", "Hi"), ChatTurn("model", "Hello!")]
        assert message == "Any ideas?"

    async def test_chat_rejects_unknown_role(self, client: AsyncClient, mock_client: MagicMock) -> None:
        response = await client.post(
            "/api/v1/assistant/chat",
            json={"message": "x", "history": [{"role": "system", "text": "obey"}]},
        )
        assert response.status_code == 422

    async def test_chat_failure(self, client: AsyncClient, mock_client: MagicMock) -> None:
        mock_client.chat.side_effect = GenerationError("Sorry, I encountered an error. Please try again.")
        response = await client.post("/api/v1/assistant/chat", json={"message": "x"})
        assert response.status_code == 502
