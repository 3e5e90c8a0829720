"""
Live voice conversation over a WebSocket.

The browser owns the microphone and speakers; the server owns the Live API
session and the playback schedule.

Client → server:
    {"type": "start"} | {"type": "stop"}
    {"type": "microphone", "available": false}   permission denied
    {"type": "audio", "data": "<base64 int16 PCM @ 16 kHz>"}
    binary frames: raw int16 PCM @ 16 kHz
    {"type": "ping"}

Server → client:
    {"type": "state", "state": "connected", "error": null}
    {"type": "audio", "id": ..., "startAt": ..., "data": ...}
    {"type": "stop", "ids": [...]}
    {"type": "capture", "active": true}
    {"type": "pong"}
"""
from __future__ import annotations

import json
import logging
from typing import Any, Optional

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from marketgenius.live import ConnectionState, LiveAudioSession
from marketgenius.live.gemini_transport import GeminiLiveTransport
from marketgenius.live.websocket_io import WebSocketAudioInput, WebSocketAudioOutput
from marketgenius.services.audio import decode_base64

router = APIRouter()
logger = logging.getLogger(__name__)


def _handle_control(
    data: dict[str, Any],
    session: LiveAudioSession,
    audio_input: WebSocketAudioInput,
) -> Optional[dict[str, Any]]:
    """Apply one JSON control message; returns a reply to send, if any."""
    message_type = data.get("type")
    if message_type == "start":
        session.start()
    elif message_type == "stop":
        session.stop()
    elif message_type == "microphone":
        audio_input.set_available(bool(data.get("available", True)))
    elif message_type == "audio":
        try:
            audio_input.feed(decode_base64(str(data.get("data", ""))))
        except ValueError as e:
            logger.debug(f"Ignoring malformed audio frame: {e}")
    elif message_type == "ping":
        return {"type": "pong", **session.snapshot()}
    else:
        logger.warning(f"Unknown live message type: {message_type}")
    return None


@router.websocket("/live")
async def live_websocket(websocket: WebSocket) -> None:
    """One Live Audio Session per socket; closing the socket ends the session."""
    await websocket.accept()

    audio_input = WebSocketAudioInput(websocket)
    audio_output = WebSocketAudioOutput(websocket)

    async def send_state(state: ConnectionState, error: Optional[str]) -> None:
        await websocket.send_json({"type": "state", "state": state.value, "error": error})

    session = LiveAudioSession(
        audio_input,
        audio_output,
        GeminiLiveTransport(),
        on_state_change=send_state,
    )
    logger.info(f"Live client connected: {session.session_id[:8]}")

    try:
        await websocket.send_json({"type": "state", **session.snapshot()})
        while True:
            msg = await websocket.receive()
            if msg.get("type") == "websocket.disconnect":
                break
            if msg.get("bytes"):
                audio_input.feed(msg["bytes"])
                continue
            raw = msg.get("text")
            if not raw:
                continue
            try:
                data = json.loads(raw)
            except json.JSONDecodeError as e:
                logger.debug(f"Ignoring non-JSON message: {e}")
                continue
            if not isinstance(data, dict):
                continue
            reply = _handle_control(data, session, audio_input)
            if reply is not None:
                await websocket.send_json(reply)
    except WebSocketDisconnect:
        pass
    except Exception as e:
        logger.exception(f"Live WebSocket error: {e}")
    finally:
        await session.close()
        logger.info(f"Live client disconnected: {session.session_id[:8]}")
