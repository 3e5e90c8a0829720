"""Gap-free playback scheduling for inbound audio chunks.

Each chunk starts at ``max(next_start_time, now)`` and pushes
``next_start_time`` forward by its duration, so chunks arriving in order
play back to back without overlap however jittery the network is.  An
interruption drops every scheduled buffer and resets the cursor to 0.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass

from marketgenius.config import LIVE_OUTPUT_SAMPLE_RATE
from marketgenius.live.pcm import chunk_duration


@dataclass(frozen=True)
class ScheduledBuffer:
    buffer_id: str
    start_at: float
    duration: float
    data: bytes

    @property
    def end_at(self) -> float:
        return self.start_at + self.duration


class PlaybackScheduler:
    """Owns the output cursor and the set of buffers still playing."""

    def __init__(self, sample_rate: int = LIVE_OUTPUT_SAMPLE_RATE) -> None:
        self.sample_rate = sample_rate
        self.next_start_time: float = 0.0
        self._active: dict[str, ScheduledBuffer] = {}
        self._ids = itertools.count(1)

    def schedule(self, data: bytes, now: float) -> ScheduledBuffer:
        """Place one chunk on the timeline. ``now`` is the output clock."""
        self.prune(now)
        start = max(self.next_start_time, now)
        buffer = ScheduledBuffer(
            buffer_id=f"buf-{next(self._ids)}",
            start_at=start,
            duration=chunk_duration(data, self.sample_rate),
            data=data,
        )
        self.next_start_time = buffer.end_at
        self._active[buffer.buffer_id] = buffer
        return buffer

    def prune(self, now: float) -> None:
        """Forget buffers that finished playing before ``now``."""
        for buffer_id, buffer in list(self._active.items()):
            if buffer.end_at <= now:
                del self._active[buffer_id]

    def interrupt(self) -> list[str]:
        """Drop every scheduled buffer and reset the cursor; returns the dropped ids."""
        dropped = list(self._active)
        self._active.clear()
        self.next_start_time = 0.0
        return dropped

    @property
    def active_ids(self) -> list[str]:
        return list(self._active)

    @property
    def active_count(self) -> int:
        return len(self._active)
