"""
Live Audio Connection State Machine.

States:
    DISCONNECTED : Idle; no microphone, no remote session
    CONNECTING   : Acquiring the microphone and opening the remote session
    CONNECTED    : Handshake complete; audio flows both ways
    ERROR        : Start-up or transport failure; resources already released

Invariants:
    1. Microphone audio is forwarded only while CONNECTED.
    2. A failed start goes to ERROR, never silently to DISCONNECTED.
    3. ERROR is left only by an explicit stop (→ DISCONNECTED) or retry (→ CONNECTING).
    4. Every transition out of CONNECTING or CONNECTED releases all resources first.
"""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ConnectionState(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    ERROR = "error"


# Allowed transitions: from_state -> set of valid to_states.
_TRANSITIONS: dict[ConnectionState, frozenset[ConnectionState]] = {
    ConnectionState.DISCONNECTED: frozenset({
        ConnectionState.CONNECTING,
    }),
    ConnectionState.CONNECTING: frozenset({
        ConnectionState.CONNECTED,
        ConnectionState.DISCONNECTED,
        ConnectionState.ERROR,
    }),
    ConnectionState.CONNECTED: frozenset({
        ConnectionState.DISCONNECTED,
        ConnectionState.ERROR,
    }),
    ConnectionState.ERROR: frozenset({
        ConnectionState.CONNECTING,
        ConnectionState.DISCONNECTED,
    }),
}


class InvalidTransitionError(Exception):
    """Raised when a connection-state transition violates the state machine."""

    def __init__(self, from_state: ConnectionState, to_state: ConnectionState):
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Invalid transition: {from_state.value} → {to_state.value}"
        )


def assert_transition(from_state: ConnectionState, to_state: ConnectionState) -> None:
    """Raises InvalidTransitionError if the transition violates the state machine."""
    allowed = _TRANSITIONS.get(from_state, frozenset())
    if to_state not in allowed:
        raise InvalidTransitionError(from_state, to_state)


def can_start(state: ConnectionState) -> bool:
    """Start (or retry) is offered from DISCONNECTED and ERROR."""
    return state in {ConnectionState.DISCONNECTED, ConnectionState.ERROR}
