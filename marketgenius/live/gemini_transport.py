"""Live transport backed by the Gemini Live API (google-genai)."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AsyncExitStack
from typing import Any, Optional

from google.genai import types

from marketgenius.config import settings
from marketgenius.live.pcm import INPUT_MIME_TYPE
from marketgenius.live.ports import LiveEvent
from marketgenius.services.gemini import GenerationClient, get_generation_client, voice_config

logger = logging.getLogger(__name__)


class GeminiLiveConnection:
    """An open Live API session; owns the exit stack that keeps it alive."""

    def __init__(self, session: Any, stack: AsyncExitStack):
        self._session = session
        self._stack = stack
        self._closed = False

    async def send_audio(self, pcm: bytes) -> None:
        await self._session.send_realtime_input(
            audio=types.Blob(data=pcm, mime_type=INPUT_MIME_TYPE),
        )

    async def receive(self) -> AsyncIterator[LiveEvent]:
        # session.receive() ends after each model turn; a pass that yields
        # nothing means the server closed the stream.
        while not self._closed:
            received = False
            async for message in self._session.receive():
                received = True
                for event in events_from_message(message):
                    yield event
            if not received:
                return

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self._stack.aclose()


def events_from_message(message: Any) -> list[LiveEvent]:
    """Audio chunks in part order, then the interruption flag if set."""
    content = getattr(message, "server_content", None)
    if content is None:
        return []
    events: list[LiveEvent] = []
    turn = content.model_turn
    if turn is not None:
        for part in turn.parts or []:
            if part.inline_data is not None and part.inline_data.data:
                events.append(LiveEvent(audio=part.inline_data.data))
    if content.interrupted:
        events.append(LiveEvent(interrupted=True))
    return events


class GeminiLiveTransport:
    """Opens Live API sessions configured for audio responses in one voice."""

    def __init__(
        self,
        client_factory: Callable[[], GenerationClient] = get_generation_client,
        model: Optional[str] = None,
        voice: Optional[str] = None,
    ):
        self._client_factory = client_factory
        self.model = model or settings.live_model
        self.voice = voice or settings.live_voice

    def _config(self) -> types.LiveConnectConfig:
        return types.LiveConnectConfig(
            response_modalities=[types.Modality.AUDIO],
            speech_config=voice_config(self.voice),
        )

    async def connect(self) -> GeminiLiveConnection:
        client = self._client_factory()
        stack = AsyncExitStack()
        try:
            session = await stack.enter_async_context(
                client.client.aio.live.connect(model=self.model, config=self._config())
            )
        except BaseException:
            await stack.aclose()
            raise
        logger.info(f"Live session opened ({self.model}, voice {self.voice})")
        return GeminiLiveConnection(session, stack)
