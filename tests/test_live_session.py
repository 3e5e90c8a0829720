"""
Tests for the live audio session actor.

The actor is driven through fake audio ports and a fake transport so every
exit path can be exercised without a browser or the Live API.
"""
from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable, Sequence
from typing import Optional, Union

import pytest

from marketgenius.live.playback import ScheduledBuffer
from marketgenius.live.ports import LiveEvent, MicrophoneUnavailableError
from marketgenius.live.session import (
    CONNECTION_ERROR_MESSAGE,
    MICROPHONE_ERROR_MESSAGE,
    LiveAudioSession,
)
from marketgenius.live.state_machine import ConnectionState

HALF_SECOND = b"\x00\x00" * 12000
_END = object()


# =============================================================================
# Fakes
# =============================================================================


class FakeInput:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.opened = 0
        self.closed = 0
        self._queue: asyncio.Queue[Optional[bytes]] = asyncio.Queue()

    async def open(self) -> None:
        if self.fail:
            raise MicrophoneUnavailableError("denied")
        self.opened += 1

    async def chunks(self) -> AsyncIterator[bytes]:
        while True:
            chunk = await self._queue.get()
            if chunk is None:
                return
            yield chunk

    def speak(self, chunk: bytes) -> None:
        self._queue.put_nowait(chunk)

    async def close(self) -> None:
        self.closed += 1


class FakeOutput:
    def __init__(self) -> None:
        self.now = 0.0
        self.played: list[ScheduledBuffer] = []
        self.stopped: list[str] = []

    def current_time(self) -> float:
        return self.now

    async def play(self, buffer: ScheduledBuffer) -> None:
        self.played.append(buffer)

    async def stop(self, buffer_ids: Sequence[str]) -> None:
        self.stopped.extend(buffer_ids)


class FakeConnection:
    def __init__(self) -> None:
        self.sent: list[bytes] = []
        self.closed = False
        self._events: asyncio.Queue[Union[LiveEvent, Exception, object]] = asyncio.Queue()

    async def send_audio(self, pcm: bytes) -> None:
        self.sent.append(pcm)

    async def receive(self) -> AsyncIterator[LiveEvent]:
        while True:
            item = await self._events.get()
            if item is _END:
                return
            if isinstance(item, Exception):
                raise item
            assert isinstance(item, LiveEvent)
            yield item

    def push(self, item: Union[LiveEvent, Exception, object]) -> None:
        self._events.put_nowait(item)

    async def close(self) -> None:
        self.closed = True


class FakeTransport:
    def __init__(self, fail: bool = False, gate: Optional[asyncio.Event] = None) -> None:
        self.fail = fail
        self.gate = gate
        self.connections: list[FakeConnection] = []

    async def connect(self) -> FakeConnection:
        if self.gate is not None:
            await self.gate.wait()
        if self.fail:
            raise ConnectionError("handshake refused")
        connection = FakeConnection()
        self.connections.append(connection)
        return connection


async def wait_until(predicate: Callable[[], bool], timeout: float = 1.0) -> None:
    async def _poll() -> None:
        while not predicate():
            await asyncio.sleep(0.005)

    await asyncio.wait_for(_poll(), timeout)


@pytest.fixture
def audio_in() -> FakeInput:
    return FakeInput()


@pytest.fixture
def audio_out() -> FakeOutput:
    return FakeOutput()


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


async def _connected(audio_in: FakeInput, audio_out: FakeOutput, transport: FakeTransport) -> LiveAudioSession:
    session = LiveAudioSession(audio_in, audio_out, transport)
    session.start()
    await wait_until(lambda: session.state == ConnectionState.CONNECTED)
    return session


# =============================================================================
# Start / stop
# =============================================================================


class TestStartStop:
    """Happy-path lifecycle."""

    async def test_start_connects(self, audio_in: FakeInput, audio_out: FakeOutput, transport: FakeTransport) -> None:
        states: list[tuple[ConnectionState, Optional[str]]] = []

        async def listener(state: ConnectionState, error: Optional[str]) -> None:
            states.append((state, error))

        session = LiveAudioSession(audio_in, audio_out, transport, on_state_change=listener)
        session.start()
        await wait_until(lambda: session.state == ConnectionState.CONNECTED)
        assert [s for s, _ in states] == [ConnectionState.CONNECTING, ConnectionState.CONNECTED]
        assert audio_in.opened == 1
        assert session.error is None
        await session.close()

    async def test_microphone_audio_forwarded(self, audio_in: FakeInput, audio_out: FakeOutput, transport: FakeTransport) -> None:
        session = await _connected(audio_in, audio_out, transport)
        audio_in.speak(b"\x01\x02")
        connection = transport.connections[0]
        await wait_until(lambda: connection.sent == [b"\x01\x02"])
        await session.close()

    async def test_stop_releases_everything(self, audio_in: FakeInput, audio_out: FakeOutput, transport: FakeTransport) -> None:
        session = await _connected(audio_in, audio_out, transport)
        session.on_inbound_chunk(HALF_SECOND)
        session.stop()
        await session.join()
        assert session.state == ConnectionState.DISCONNECTED
        assert audio_in.closed >= 1
        assert transport.connections[0].closed
        assert session.active_buffer_count == 0
        assert session.next_start_time == 0.0
        await session.close()

    async def test_start_ignored_while_connected(self, audio_in: FakeInput, audio_out: FakeOutput, transport: FakeTransport) -> None:
        session = await _connected(audio_in, audio_out, transport)
        session.start()
        await session.join()
        assert len(transport.connections) == 1
        assert session.state == ConnectionState.CONNECTED
        await session.close()

    async def test_stop_while_connecting(self, audio_in: FakeInput, audio_out: FakeOutput) -> None:
        """Stopping mid-handshake cancels the connect and releases the microphone."""
        gate = asyncio.Event()
        transport = FakeTransport(gate=gate)
        session = LiveAudioSession(audio_in, audio_out, transport)
        session.start()
        await wait_until(lambda: audio_in.opened == 1)
        assert session.state == ConnectionState.CONNECTING
        session.on_inbound_chunk(HALF_SECOND)
        session.stop()
        await session.join()
        gate.set()
        await asyncio.sleep(0.01)
        assert session.state == ConnectionState.DISCONNECTED
        assert audio_in.closed >= 1
        assert transport.connections == []
        assert audio_out.played == []
        assert session.active_buffer_count == 0
        assert session.next_start_time == 0.0
        await session.close()

    async def test_remote_close_disconnects(self, audio_in: FakeInput, audio_out: FakeOutput, transport: FakeTransport) -> None:
        session = await _connected(audio_in, audio_out, transport)
        transport.connections[0].push(_END)
        await wait_until(lambda: session.state == ConnectionState.DISCONNECTED)
        assert session.error is None
        await session.close()


# =============================================================================
# Playback
# =============================================================================


class TestPlayback:
    """Inbound audio is scheduled gap-free and dropped on interruption."""

    async def test_inbound_chunks_scheduled_back_to_back(self, audio_in: FakeInput, audio_out: FakeOutput, transport: FakeTransport) -> None:
        session = await _connected(audio_in, audio_out, transport)
        connection = transport.connections[0]
        connection.push(LiveEvent(audio=HALF_SECOND))
        connection.push(LiveEvent(audio=HALF_SECOND))
        await wait_until(lambda: len(audio_out.played) == 2)
        assert [b.start_at for b in audio_out.played] == [0.0, pytest.approx(0.5)]
        assert session.next_start_time == pytest.approx(1.0)
        await session.close()

    async def test_interrupt_stops_buffers(self, audio_in: FakeInput, audio_out: FakeOutput, transport: FakeTransport) -> None:
        session = await _connected(audio_in, audio_out, transport)
        session.on_inbound_chunk(HALF_SECOND)
        session.on_inbound_chunk(HALF_SECOND)
        await session.join()
        session.interrupt()
        await session.join()
        assert audio_out.stopped == [b.buffer_id for b in audio_out.played]
        assert session.next_start_time == 0.0
        assert session.active_buffer_count == 0
        assert session.state == ConnectionState.CONNECTED
        await session.close()

    async def test_remote_interruption(self, audio_in: FakeInput, audio_out: FakeOutput, transport: FakeTransport) -> None:
        session = await _connected(audio_in, audio_out, transport)
        connection = transport.connections[0]
        connection.push(LiveEvent(audio=HALF_SECOND))
        connection.push(LiveEvent(interrupted=True))
        await wait_until(lambda: len(audio_out.stopped) == 1)
        assert session.next_start_time == 0.0
        await session.close()

    async def test_audio_ignored_when_not_connected(self, audio_in: FakeInput, audio_out: FakeOutput, transport: FakeTransport) -> None:
        session = LiveAudioSession(audio_in, audio_out, transport)
        session.on_inbound_chunk(HALF_SECOND)
        await session.join()
        assert audio_out.played == []
        await session.close()


# =============================================================================
# Failures
# =============================================================================


class TestFailures:
    """Every failure lands in ERROR with resources released."""

    async def test_microphone_failure(self, audio_out: FakeOutput, transport: FakeTransport) -> None:
        audio_in = FakeInput(fail=True)
        session = LiveAudioSession(audio_in, audio_out, transport)
        session.start()
        await wait_until(lambda: session.state == ConnectionState.ERROR)
        assert session.error == MICROPHONE_ERROR_MESSAGE
        assert transport.connections == []
        assert audio_in.closed >= 1
        await session.close()

    async def test_handshake_failure(self, audio_in: FakeInput, audio_out: FakeOutput) -> None:
        session = LiveAudioSession(audio_in, audio_out, FakeTransport(fail=True))
        session.start()
        await wait_until(lambda: session.state == ConnectionState.ERROR)
        assert session.error == MICROPHONE_ERROR_MESSAGE
        assert audio_in.closed >= 1
        await session.close()

    async def test_transport_error(self, audio_in: FakeInput, audio_out: FakeOutput, transport: FakeTransport) -> None:
        session = await _connected(audio_in, audio_out, transport)
        session.on_inbound_chunk(HALF_SECOND)
        transport.connections[0].push(RuntimeError("socket reset"))
        await wait_until(lambda: session.state == ConnectionState.ERROR)
        assert session.error == CONNECTION_ERROR_MESSAGE
        assert transport.connections[0].closed
        assert session.active_buffer_count == 0
        await session.close()

    async def test_retry_after_error(self, audio_in: FakeInput, audio_out: FakeOutput) -> None:
        transport = FakeTransport(fail=True)
        session = LiveAudioSession(audio_in, audio_out, transport)
        session.start()
        await wait_until(lambda: session.state == ConnectionState.ERROR)
        transport.fail = False
        session.start()
        await wait_until(lambda: session.state == ConnectionState.CONNECTED)
        assert session.error is None
        await session.close()

    async def test_stop_from_error(self, audio_out: FakeOutput, transport: FakeTransport) -> None:
        session = LiveAudioSession(FakeInput(fail=True), audio_out, transport)
        session.start()
        await wait_until(lambda: session.state == ConnectionState.ERROR)
        session.stop()
        await session.join()
        assert session.state == ConnectionState.DISCONNECTED
        assert session.error is None
        await session.close()

    async def test_listener_errors_are_swallowed(self, audio_in: FakeInput, audio_out: FakeOutput, transport: FakeTransport) -> None:
        async def broken(state: ConnectionState, error: Optional[str]) -> None:
            raise RuntimeError("listener gone")

        session = LiveAudioSession(audio_in, audio_out, transport, on_state_change=broken)
        session.start()
        await wait_until(lambda: session.state == ConnectionState.CONNECTED)
        await session.close()


# =============================================================================
# Close
# =============================================================================


class TestClose:
    async def test_close_is_idempotent(self, audio_in: FakeInput, audio_out: FakeOutput, transport: FakeTransport) -> None:
        session = await _connected(audio_in, audio_out, transport)
        await session.close()
        await session.close()
        assert session.state == ConnectionState.DISCONNECTED
        assert transport.connections[0].closed

    async def test_overlapping_closes_leave_mailbox_drained(self, audio_in: FakeInput, audio_out: FakeOutput, transport: FakeTransport) -> None:
        session = await _connected(audio_in, audio_out, transport)
        await asyncio.gather(session.close(), session.close())
        await asyncio.wait_for(session.join(), timeout=1.0)
        assert session.state == ConnectionState.DISCONNECTED
        assert transport.connections[0].closed

    async def test_operations_after_close_are_dropped(self, audio_in: FakeInput, audio_out: FakeOutput, transport: FakeTransport) -> None:
        session = LiveAudioSession(audio_in, audio_out, transport)
        await session.close()
        session.start()
        await asyncio.sleep(0.01)
        assert session.state == ConnectionState.DISCONNECTED
        assert transport.connections == []

    async def test_context_manager_closes(self, audio_in: FakeInput, audio_out: FakeOutput, transport: FakeTransport) -> None:
        async with LiveAudioSession(audio_in, audio_out, transport) as session:
            session.start()
            await wait_until(lambda: session.state == ConnectionState.CONNECTED)
        assert transport.connections[0].closed

    def test_snapshot(self, audio_in: FakeInput, audio_out: FakeOutput, transport: FakeTransport) -> None:
        session = LiveAudioSession(audio_in, audio_out, transport, session_id="abc")
        assert session.snapshot() == {
            "state": "disconnected",
            "error": None,
            "nextStartTime": 0.0,
            "activeBuffers": 0,
        }
