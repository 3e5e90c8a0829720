"""Audio input/output relayed over the browser's WebSocket.

The browser owns the real microphone and speakers.  It streams captured PCM
frames in, and plays the frames sent out at the offsets the session
scheduled:

    → {"type": "audio", "id": "buf-3", "startAt": 1.5, "data": "<base64>"}
    → {"type": "stop", "ids": ["buf-3", "buf-4"]}
    → {"type": "capture", "active": true | false}
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import AsyncIterator, Sequence
from typing import Any, Optional, Protocol

from marketgenius.live.playback import ScheduledBuffer
from marketgenius.live.ports import MicrophoneUnavailableError
from marketgenius.services.audio import encode_base64

logger = logging.getLogger(__name__)


class JsonSender(Protocol):
    async def send_json(self, data: Any) -> None:
        ...


class WebSocketAudioInput:
    """Microphone frames fed by the WebSocket reader loop."""

    def __init__(self, sender: JsonSender):
        self._sender = sender
        self._queue: asyncio.Queue[Optional[bytes]] = asyncio.Queue()
        self._open = False
        self.available = True

    @property
    def is_open(self) -> bool:
        return self._open

    def set_available(self, available: bool) -> None:
        """Record whether the browser could get microphone permission."""
        self.available = available

    def feed(self, pcm: bytes) -> None:
        if self._open:
            self._queue.put_nowait(pcm)

    async def open(self) -> None:
        if not self.available:
            raise MicrophoneUnavailableError("Browser reported no microphone access")
        self._queue = asyncio.Queue()
        self._open = True
        await self._sender.send_json({"type": "capture", "active": True})

    async def chunks(self) -> AsyncIterator[bytes]:
        queue = self._queue
        while True:
            chunk = await queue.get()
            if chunk is None:
                return
            yield chunk

    async def close(self) -> None:
        if not self._open:
            return
        self._open = False
        self._queue.put_nowait(None)
        await self._sender.send_json({"type": "capture", "active": False})


class WebSocketAudioOutput:
    """Scheduled playback frames sent to the browser.

    The clock starts at 0 when the output is created; the browser maps
    ``startAt`` onto its own audio timeline.
    """

    def __init__(self, sender: JsonSender):
        self._sender = sender
        self._origin = time.monotonic()

    def current_time(self) -> float:
        return time.monotonic() - self._origin

    async def play(self, buffer: ScheduledBuffer) -> None:
        await self._sender.send_json({
            "type": "audio",
            "id": buffer.buffer_id,
            "startAt": buffer.start_at,
            "data": encode_base64(buffer.data),
        })

    async def stop(self, buffer_ids: Sequence[str]) -> None:
        if buffer_ids:
            await self._sender.send_json({"type": "stop", "ids": list(buffer_ids)})
