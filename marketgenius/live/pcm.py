"""Raw PCM helpers for the live audio pipeline (mono, little-endian int16)."""
from __future__ import annotations

from marketgenius.config import LIVE_INPUT_SAMPLE_RATE, LIVE_OUTPUT_SAMPLE_RATE
from marketgenius.services.audio import PCM_SAMPLE_WIDTH

INPUT_MIME_TYPE = f"audio/pcm;rate={LIVE_INPUT_SAMPLE_RATE}"


def chunk_duration(data: bytes, sample_rate: int = LIVE_OUTPUT_SAMPLE_RATE, channels: int = 1) -> float:
    """Playback length of ``data`` in seconds."""
    return len(data) / PCM_SAMPLE_WIDTH / channels / sample_rate


def duration_to_bytes(seconds: float, sample_rate: int = LIVE_OUTPUT_SAMPLE_RATE, channels: int = 1) -> int:
    """Byte length of ``seconds`` of audio, rounded down to whole samples."""
    return int(seconds * sample_rate) * PCM_SAMPLE_WIDTH * channels
