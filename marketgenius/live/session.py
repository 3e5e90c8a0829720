"""
Live Audio Session actor.

One asyncio task owns every piece of mutable session state: the connection
state, the remote connection handle, the playback scheduler and the helper
tasks.  The public methods (``start``, ``stop``, ``on_inbound_chunk``,
``interrupt``, ``close``) only put a message in the mailbox; the actor
handles messages one at a time, in order.

Helper tasks (connecting, pumping microphone audio out, pumping remote
events in) never touch state.  They post messages tagged with the
connection generation they belong to, and the actor drops messages from a
generation it has already torn down.

Teardown runs on every exit path (stop, remote close, transport error,
start-up failure, close) and always performs the same steps:
    1. Detach microphone capture.
    2. Release the microphone.
    3. Stop every scheduled output buffer and reset the playback cursor.
    4. Close the remote session.
Failures inside teardown are logged and swallowed.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Optional, Union

from marketgenius.config import LIVE_OUTPUT_SAMPLE_RATE
from marketgenius.live.playback import PlaybackScheduler
from marketgenius.live.ports import AudioInput, AudioOutput, LiveConnection, LiveTransport
from marketgenius.live.state_machine import ConnectionState, assert_transition, can_start

logger = logging.getLogger(__name__)

MICROPHONE_ERROR_MESSAGE = "Could not access microphone or start session. Please check permissions."
CONNECTION_ERROR_MESSAGE = "An error occurred with the connection."

StateListener = Callable[[ConnectionState, Optional[str]], Awaitable[None]]


# ── Mailbox messages ────────────────────────────────────────────────────

@dataclass(frozen=True)
class _Start:
    pass


@dataclass(frozen=True)
class _Stop:
    pass


@dataclass(frozen=True)
class _Close:
    pass


@dataclass(frozen=True)
class _Opened:
    generation: int
    connection: LiveConnection


@dataclass(frozen=True)
class _StartFailed:
    generation: int
    reason: str


@dataclass(frozen=True)
class _Inbound:
    audio: bytes
    generation: Optional[int] = None  # None: the current connection


@dataclass(frozen=True)
class _Interrupted:
    generation: Optional[int] = None


@dataclass(frozen=True)
class _TransportError:
    generation: int
    error: Exception


@dataclass(frozen=True)
class _RemoteClosed:
    generation: int


_Message = Union[
    _Start, _Stop, _Close, _Opened, _StartFailed,
    _Inbound, _Interrupted, _TransportError, _RemoteClosed,
]


class LiveAudioSession:
    """Bidirectional voice conversation with the live model."""

    def __init__(
        self,
        audio_input: AudioInput,
        audio_output: AudioOutput,
        transport: LiveTransport,
        *,
        sample_rate: int = LIVE_OUTPUT_SAMPLE_RATE,
        on_state_change: Optional[StateListener] = None,
        session_id: Optional[str] = None,
    ):
        self.session_id = session_id or str(uuid.uuid4())
        self._input = audio_input
        self._output = audio_output
        self._transport = transport
        self._on_state_change = on_state_change
        self._scheduler = PlaybackScheduler(sample_rate)

        self._state = ConnectionState.DISCONNECTED
        self._error: Optional[str] = None
        self._connection: Optional[LiveConnection] = None
        self._generation = 0

        self._mailbox: asyncio.Queue[_Message] = asyncio.Queue()
        self._runner: Optional[asyncio.Task[None]] = None
        self._connect_task: Optional[asyncio.Task[None]] = None
        self._capture_task: Optional[asyncio.Task[None]] = None
        self._receive_task: Optional[asyncio.Task[None]] = None
        self._closed = False

    # ── Read-only view ──────────────────────────────────────────────────

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def next_start_time(self) -> float:
        return self._scheduler.next_start_time

    @property
    def active_buffer_count(self) -> int:
        return self._scheduler.active_count

    def snapshot(self) -> dict[str, Any]:
        return {
            "state": self._state.value,
            "error": self._error,
            "nextStartTime": self._scheduler.next_start_time,
            "activeBuffers": self._scheduler.active_count,
        }

    # ── Public operations (enqueue only) ────────────────────────────────

    def start(self) -> None:
        self._post(_Start())

    def stop(self) -> None:
        self._post(_Stop())

    def on_inbound_chunk(self, audio: bytes) -> None:
        self._post(_Inbound(audio))

    def interrupt(self) -> None:
        self._post(_Interrupted())

    async def close(self) -> None:
        """Tear everything down and stop the actor. Idempotent."""
        if not self._closed:
            self._post(_Close())
            self._closed = True
        if self._runner is not None:
            await self._runner

    async def join(self) -> None:
        """Wait until every message posted so far has been handled."""
        await self._mailbox.join()

    async def __aenter__(self) -> LiveAudioSession:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # ── Actor loop ──────────────────────────────────────────────────────

    def _post(self, message: _Message) -> bool:
        if self._closed:
            logger.debug(f"Live session {self.session_id[:8]} closed; dropping {type(message).__name__}")
            return False
        if self._runner is None or self._runner.done():
            self._runner = asyncio.create_task(
                self._run(), name=f"live-session-{self.session_id[:8]}"
            )
        self._mailbox.put_nowait(message)
        return True

    async def _run(self) -> None:
        while True:
            message = await self._mailbox.get()
            try:
                if isinstance(message, _Close):
                    await self._handle_close()
                    return
                await self._handle(message)
            except Exception as e:
                logger.exception(f"Live session {self.session_id[:8]}: error handling {type(message).__name__}: {e}")
            finally:
                self._mailbox.task_done()

    async def _handle(self, message: _Message) -> None:
        if isinstance(message, _Start):
            await self._handle_start()
        elif isinstance(message, _Stop):
            await self._handle_stop()
        elif isinstance(message, _Opened):
            await self._handle_opened(message)
        elif isinstance(message, _StartFailed):
            await self._handle_start_failed(message)
        elif isinstance(message, _Inbound):
            await self._handle_inbound(message)
        elif isinstance(message, _Interrupted):
            await self._handle_interrupted(message)
        elif isinstance(message, _TransportError):
            await self._handle_transport_error(message)
        elif isinstance(message, _RemoteClosed):
            await self._handle_remote_closed(message)

    def _is_stale(self, generation: Optional[int]) -> bool:
        return generation is not None and generation != self._generation

    # ── Handlers ────────────────────────────────────────────────────────

    async def _handle_start(self) -> None:
        if not can_start(self._state):
            logger.info(f"Live session {self.session_id[:8]}: start ignored while {self._state.value}")
            return
        await self._set_state(ConnectionState.CONNECTING)
        self._scheduler.interrupt()
        self._generation += 1
        self._connect_task = asyncio.create_task(self._connect(self._generation))

    async def _handle_stop(self) -> None:
        self._generation += 1
        await self._teardown()
        if self._state != ConnectionState.DISCONNECTED:
            await self._set_state(ConnectionState.DISCONNECTED)

    async def _handle_close(self) -> None:
        self._closed = True
        self._generation += 1
        await self._teardown()
        if self._state != ConnectionState.DISCONNECTED:
            await self._set_state(ConnectionState.DISCONNECTED)
        logger.info(f"Live session {self.session_id[:8]} closed")

    async def _handle_opened(self, message: _Opened) -> None:
        if self._is_stale(message.generation) or self._state != ConnectionState.CONNECTING:
            await self._quietly("closing abandoned live session", message.connection.close())
            return
        self._connection = message.connection
        await self._set_state(ConnectionState.CONNECTED)
        self._capture_task = asyncio.create_task(self._pump_capture(message.generation, message.connection))
        self._receive_task = asyncio.create_task(self._pump_receive(message.generation, message.connection))

    async def _handle_start_failed(self, message: _StartFailed) -> None:
        if self._is_stale(message.generation):
            return
        await self._teardown()
        await self._set_state(ConnectionState.ERROR, message.reason)

    async def _handle_inbound(self, message: _Inbound) -> None:
        if self._is_stale(message.generation) or self._state != ConnectionState.CONNECTED:
            return
        buffer = self._scheduler.schedule(message.audio, self._output.current_time())
        await self._quietly("playing audio", self._output.play(buffer))

    async def _handle_interrupted(self, message: _Interrupted) -> None:
        if self._is_stale(message.generation):
            return
        dropped = self._scheduler.interrupt()
        if dropped:
            await self._quietly("stopping playback", self._output.stop(dropped))
        logger.debug(f"Live session {self.session_id[:8]}: interrupted, dropped {len(dropped)} buffer(s)")

    async def _handle_transport_error(self, message: _TransportError) -> None:
        if self._is_stale(message.generation):
            return
        logger.error(f"Live session {self.session_id[:8]} error: {message.error}")
        self._generation += 1
        await self._teardown()
        await self._set_state(ConnectionState.ERROR, CONNECTION_ERROR_MESSAGE)

    async def _handle_remote_closed(self, message: _RemoteClosed) -> None:
        if self._is_stale(message.generation):
            return
        logger.info(f"Live session {self.session_id[:8]} closed by server")
        self._generation += 1
        await self._teardown()
        if self._state != ConnectionState.DISCONNECTED:
            await self._set_state(ConnectionState.DISCONNECTED)

    # ── Helper tasks (post messages, never mutate state) ────────────────

    async def _connect(self, generation: int) -> None:
        try:
            await self._input.open()
            connection = await self._transport.connect()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"Failed to start conversation: {e}")
            self._post(_StartFailed(generation, MICROPHONE_ERROR_MESSAGE))
            return
        if not self._post(_Opened(generation, connection)):
            await self._quietly("closing abandoned live session", connection.close())

    async def _pump_capture(self, generation: int, connection: LiveConnection) -> None:
        try:
            async for chunk in self._input.chunks():
                await connection.send_audio(chunk)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self._post(_TransportError(generation, e))

    async def _pump_receive(self, generation: int, connection: LiveConnection) -> None:
        try:
            async for event in connection.receive():
                if event.audio:
                    self._post(_Inbound(event.audio, generation))
                if event.interrupted:
                    self._post(_Interrupted(generation))
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self._post(_TransportError(generation, e))
            return
        self._post(_RemoteClosed(generation))

    # ── State and cleanup ───────────────────────────────────────────────

    async def _set_state(self, new_state: ConnectionState, error: Optional[str] = None) -> None:
        assert_transition(self._state, new_state)
        old_state = self._state
        self._state = new_state
        self._error = error
        logger.info(
            f"Live session {self.session_id[:8]}: "
            f"{old_state.value} → {new_state.value}"
        )
        if self._on_state_change is not None:
            await self._quietly("notifying state listener", self._on_state_change(new_state, error))

    async def _teardown(self) -> None:
        for task in (self._connect_task, self._capture_task, self._receive_task):
            if task is not None and not task.done():
                task.cancel()
        self._connect_task = self._capture_task = self._receive_task = None

        await self._quietly("closing microphone", self._input.close())

        dropped = self._scheduler.interrupt()
        if dropped:
            await self._quietly("stopping playback", self._output.stop(dropped))

        connection, self._connection = self._connection, None
        if connection is not None:
            await self._quietly("closing live session", connection.close())

    async def _quietly(self, what: str, awaitable: Awaitable[Any]) -> None:
        try:
            await awaitable
        except Exception as e:
            logger.warning(f"Live session {self.session_id[:8]}: ignoring error while {what}: {e}")
