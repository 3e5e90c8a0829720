"""Boundaries of the live audio session.

The session actor talks to the outside world only through these protocols,
so the Gemini transport and the WebSocket relay can be swapped for fakes.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from dataclasses import dataclass
from typing import Optional, Protocol

from marketgenius.live.playback import ScheduledBuffer


class MicrophoneUnavailableError(Exception):
    """Audio input could not be acquired (permission denied, no device)."""


@dataclass(frozen=True)
class LiveEvent:
    """One signal from the remote side: an audio chunk and/or an interruption."""

    audio: Optional[bytes] = None
    interrupted: bool = False


class AudioInput(Protocol):
    async def open(self) -> None:
        """Acquire the microphone. Raises MicrophoneUnavailableError."""
        ...

    def chunks(self) -> AsyncIterator[bytes]:
        """Captured PCM chunks until the input is closed."""
        ...

    async def close(self) -> None:
        """Release the microphone. Safe to call when already closed."""
        ...


class AudioOutput(Protocol):
    def current_time(self) -> float:
        """Output clock in seconds."""
        ...

    async def play(self, buffer: ScheduledBuffer) -> None:
        ...

    async def stop(self, buffer_ids: Sequence[str]) -> None:
        ...


class LiveConnection(Protocol):
    async def send_audio(self, pcm: bytes) -> None:
        ...

    def receive(self) -> AsyncIterator[LiveEvent]:
        """Remote events; ends when the remote side closes, raises on transport error."""
        ...

    async def close(self) -> None:
        ...


class LiveTransport(Protocol):
    async def connect(self) -> LiveConnection:
        """Open the session; returns once the handshake has completed."""
        ...
