"""Audio and binary helpers: base64 framing, data URIs, WAV containers."""
from __future__ import annotations

import base64
import io
import wave

from marketgenius.config import SPEECH_SAMPLE_RATE

PCM_SAMPLE_WIDTH = 2  # int16


def encode_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def decode_base64(data: str) -> bytes:
    """Decode base64 text, raising ``ValueError`` on malformed input."""
    try:
        return base64.b64decode(data, validate=True)
    except (ValueError, TypeError) as exc:
        raise ValueError(f"Invalid base64 payload: {exc}") from exc


def to_data_uri(data: bytes, mime_type: str = "image/png") -> str:
    """``data:<mime>;base64,<payload>``, the reference format for generated images."""
    return f"data:{mime_type};base64,{encode_base64(data)}"


def parse_data_uri(uri: str) -> tuple[bytes, str]:
    """Split a base64 data URI into ``(bytes, mime_type)``."""
    if not uri.startswith("data:") or ";base64," not in uri:
        raise ValueError("Expected a base64 data URI")
    header, payload = uri[len("data:"):].split(";base64,", 1)
    return decode_base64(payload), header or "application/octet-stream"


def pcm_to_wav(
    pcm: bytes,
    sample_rate: int = SPEECH_SAMPLE_RATE,
    channels: int = 1,
) -> bytes:
    """Wrap raw little-endian int16 PCM in a WAV container."""
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wav:
        wav.setnchannels(channels)
        wav.setsampwidth(PCM_SAMPLE_WIDTH)
        wav.setframerate(sample_rate)
        wav.writeframes(pcm)
    return buffer.getvalue()
