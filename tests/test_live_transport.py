"""Tests for the Live API transport adapter and the WebSocket audio relay."""
from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from types import SimpleNamespace
from typing import Any
from unittest.mock import MagicMock

import pytest

from marketgenius.live.gemini_transport import GeminiLiveTransport, events_from_message
from marketgenius.live.playback import ScheduledBuffer
from marketgenius.live.ports import LiveEvent, MicrophoneUnavailableError
from marketgenius.live.websocket_io import WebSocketAudioInput, WebSocketAudioOutput


def _part(data: bytes | None) -> SimpleNamespace:
    inline = SimpleNamespace(data=data, mime_type="audio/pcm;rate=24000") if data is not None else None
    return SimpleNamespace(inline_data=inline)


def _message(*chunks: bytes | None, interrupted: bool = False) -> SimpleNamespace:
    turn = SimpleNamespace(parts=[_part(c) for c in chunks]) if chunks else None
    return SimpleNamespace(server_content=SimpleNamespace(model_turn=turn, interrupted=interrupted))


class RecordingSender:
    def __init__(self) -> None:
        self.sent: list[dict[str, Any]] = []

    async def send_json(self, data: Any) -> None:
        self.sent.append(data)


# =============================================================================
# Server message parsing
# =============================================================================


class TestEventsFromMessage:
    def test_audio_parts_in_order(self) -> None:
        events = events_from_message(_message(b"a", b"b"))
        assert events == [LiveEvent(audio=b"a"), LiveEvent(audio=b"b")]

    def test_interruption_after_audio(self) -> None:
        events = events_from_message(_message(b"a", interrupted=True))
        assert events == [LiveEvent(audio=b"a"), LiveEvent(interrupted=True)]

    def test_parts_without_audio_skipped(self) -> None:
        assert events_from_message(_message(None, b"")) == []

    def test_non_content_message(self) -> None:
        assert events_from_message(SimpleNamespace(setup_complete=True)) == []
        assert events_from_message(SimpleNamespace(server_content=None)) == []


# =============================================================================
# Transport
# =============================================================================


class FakeLiveSession:
    """Yields one batch of messages per ``receive()`` call, then nothing."""

    def __init__(self, turns: list[list[Any]]) -> None:
        self.turns = turns
        self.sent: list[Any] = []

    async def send_realtime_input(self, *, audio: Any) -> None:
        self.sent.append(audio)

    async def receive(self) -> AsyncIterator[Any]:
        if not self.turns:
            return
        for message in self.turns.pop(0):
            yield message


def _transport_for(live_session: FakeLiveSession, exits: list[str]) -> GeminiLiveTransport:
    @asynccontextmanager
    async def connect(model: str, config: Any) -> AsyncIterator[FakeLiveSession]:
        exits.append(f"enter:{model}")
        try:
            yield live_session
        finally:
            exits.append("exit")

    client = MagicMock()
    client.client.aio.live.connect = connect
    return GeminiLiveTransport(client_factory=lambda: client, model="live-test", voice="Zephyr")


class TestGeminiLiveTransport:
    async def test_connect_and_receive_across_turns(self) -> None:
        live_session = FakeLiveSession([[_message(b"1")], [_message(b"2", interrupted=True)]])
        exits: list[str] = []
        connection = await _transport_for(live_session, exits).connect()
        events = [event async for event in connection.receive()]
        assert events == [LiveEvent(audio=b"1"), LiveEvent(audio=b"2"), LiveEvent(interrupted=True)]
        await connection.close()
        assert exits == ["enter:live-test", "exit"]

    async def test_send_audio_wraps_blob(self) -> None:
        live_session = FakeLiveSession([])
        connection = await _transport_for(live_session, []).connect()
        await connection.send_audio(b"\x00\x01")
        blob = live_session.sent[0]
        assert blob.data == b"\x00\x01"
        assert blob.mime_type == "audio/pcm;rate=16000"
        await connection.close()

    async def test_close_is_idempotent(self) -> None:
        exits: list[str] = []
        connection = await _transport_for(FakeLiveSession([]), exits).connect()
        await connection.close()
        await connection.close()
        assert exits.count("exit") == 1

    async def test_connect_failure_propagates(self) -> None:
        def no_key() -> Any:
            raise ValueError("Gemini API key not configured")

        with pytest.raises(ValueError):
            await GeminiLiveTransport(client_factory=no_key, model="m", voice="v").connect()

    def test_config_requests_audio(self) -> None:
        transport = GeminiLiveTransport(client_factory=MagicMock(), model="m", voice="Zephyr")
        config = transport._config()
        assert config.speech_config.voice_config.prebuilt_voice_config.voice_name == "Zephyr"


# =============================================================================
# WebSocket relay
# =============================================================================


class TestWebSocketAudioInput:
    async def test_open_announces_capture(self) -> None:
        sender = RecordingSender()
        audio_in = WebSocketAudioInput(sender)
        await audio_in.open()
        assert audio_in.is_open
        assert sender.sent == [{"type": "capture", "active": True}]

    async def test_feed_then_close_ends_iteration(self) -> None:
        sender = RecordingSender()
        audio_in = WebSocketAudioInput(sender)
        await audio_in.open()
        audio_in.feed(b"a")
        audio_in.feed(b"b")
        await audio_in.close()
        assert [chunk async for chunk in audio_in.chunks()] == [b"a", b"b"]
        assert sender.sent[-1] == {"type": "capture", "active": False}

    async def test_feed_ignored_while_closed(self) -> None:
        audio_in = WebSocketAudioInput(RecordingSender())
        audio_in.feed(b"dropped")
        await audio_in.open()
        await audio_in.close()
        assert [chunk async for chunk in audio_in.chunks()] == []

    async def test_unavailable_microphone(self) -> None:
        audio_in = WebSocketAudioInput(RecordingSender())
        audio_in.set_available(False)
        with pytest.raises(MicrophoneUnavailableError):
            await audio_in.open()

    async def test_close_when_never_opened(self) -> None:
        sender = RecordingSender()
        await WebSocketAudioInput(sender).close()
        assert sender.sent == []


class TestWebSocketAudioOutput:
    async def test_play_sends_scheduled_frame(self) -> None:
        sender = RecordingSender()
        output = WebSocketAudioOutput(sender)
        await output.play(ScheduledBuffer("buf-1", 1.5, 0.5, b"\x00\x00"))
        assert sender.sent == [{"type": "audio", "id": "buf-1", "startAt": 1.5, "data": "AAA="}]

    async def test_stop_sends_ids(self) -> None:
        sender = RecordingSender()
        output = WebSocketAudioOutput(sender)
        await output.stop(["buf-1", "buf-2"])
        await output.stop([])
        assert sender.sent == [{"type": "stop", "ids": ["buf-1", "buf-2"]}]

    def test_clock_is_monotonic(self) -> None:
        output = WebSocketAudioOutput(RecordingSender())
        first = output.current_time()
        assert first >= 0.0
        assert output.current_time() >= first
