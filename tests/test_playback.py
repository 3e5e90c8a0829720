"""Tests for PCM helpers and gap-free playback scheduling."""
from __future__ import annotations

import pytest

from marketgenius.live.pcm import INPUT_MIME_TYPE, chunk_duration, duration_to_bytes
from marketgenius.live.playback import PlaybackScheduler

ONE_SECOND = b"\x00\x00" * 24000
HALF_SECOND = b"\x00\x00" * 12000
TWO_SECONDS = b"\x00\x00" * 48000


class TestPcm:
    def test_chunk_duration(self) -> None:
        assert chunk_duration(ONE_SECOND) == pytest.approx(1.0)
        assert chunk_duration(b"\x00\x00" * 16000, sample_rate=16000) == pytest.approx(1.0)

    def test_duration_to_bytes(self) -> None:
        assert duration_to_bytes(0.5) == len(HALF_SECOND)

    def test_input_mime_type(self) -> None:
        assert INPUT_MIME_TYPE == "audio/pcm;rate=16000"


class TestPlaybackScheduler:
    """Chunks play back to back; interruptions reset the cursor."""

    def test_back_to_back_offsets(self) -> None:
        scheduler = PlaybackScheduler()
        first = scheduler.schedule(ONE_SECOND, now=0.0)
        second = scheduler.schedule(HALF_SECOND, now=0.2)
        third = scheduler.schedule(TWO_SECONDS, now=0.3)
        assert [first.start_at, second.start_at, third.start_at] == pytest.approx([0.0, 1.0, 1.5])
        assert first.start_at == 0.0
        assert scheduler.next_start_time == pytest.approx(3.5)

    def test_late_chunk_starts_now(self) -> None:
        """A chunk that arrives after the cursor never starts in the past."""
        scheduler = PlaybackScheduler()
        scheduler.schedule(HALF_SECOND, now=0.0)
        late = scheduler.schedule(HALF_SECOND, now=3.0)
        assert late.start_at == 3.0
        assert scheduler.next_start_time == pytest.approx(3.5)

    def test_interrupt_resets_cursor(self) -> None:
        scheduler = PlaybackScheduler()
        a = scheduler.schedule(ONE_SECOND, now=0.0)
        b = scheduler.schedule(ONE_SECOND, now=0.0)
        dropped = scheduler.interrupt()
        assert dropped == [a.buffer_id, b.buffer_id]
        assert scheduler.next_start_time == 0.0
        assert scheduler.active_count == 0

    def test_finished_buffers_pruned(self) -> None:
        scheduler = PlaybackScheduler()
        scheduler.schedule(HALF_SECOND, now=0.0)
        scheduler.schedule(HALF_SECOND, now=0.0)
        scheduler.prune(0.75)
        assert scheduler.active_count == 1

    def test_buffer_ids_unique(self) -> None:
        scheduler = PlaybackScheduler()
        ids = {scheduler.schedule(HALF_SECOND, now=0.0).buffer_id for _ in range(5)}
        assert len(ids) == 5
