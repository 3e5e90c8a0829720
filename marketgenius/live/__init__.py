"""Live audio conversation: connection state machine, playback scheduling, session actor."""
from __future__ import annotations

from marketgenius.live.playback import PlaybackScheduler, ScheduledBuffer
from marketgenius.live.ports import (
    AudioInput,
    AudioOutput,
    LiveConnection,
    LiveEvent,
    LiveTransport,
    MicrophoneUnavailableError,
)
from marketgenius.live.session import (
    CONNECTION_ERROR_MESSAGE,
    MICROPHONE_ERROR_MESSAGE,
    LiveAudioSession,
)
from marketgenius.live.state_machine import ConnectionState, InvalidTransitionError

__all__ = [
    "AudioInput",
    "AudioOutput",
    "CONNECTION_ERROR_MESSAGE",
    "ConnectionState",
    "InvalidTransitionError",
    "LiveAudioSession",
    "LiveConnection",
    "LiveEvent",
    "LiveTransport",
    "MICROPHONE_ERROR_MESSAGE",
    "MicrophoneUnavailableError",
    "PlaybackScheduler",
    "ScheduledBuffer",
]
