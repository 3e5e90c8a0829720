"""Tests for the live audio connection state machine."""
from __future__ import annotations

import pytest

from marketgenius.live.state_machine import (
    ConnectionState,
    InvalidTransitionError,
    assert_transition,
    can_start,
)


class TestValidTransitions:
    """Test all allowed state transitions."""

    @pytest.mark.parametrize(
        "from_state, to_state",
        [
            (ConnectionState.DISCONNECTED, ConnectionState.CONNECTING),
            (ConnectionState.CONNECTING, ConnectionState.CONNECTED),
            (ConnectionState.CONNECTING, ConnectionState.DISCONNECTED),
            (ConnectionState.CONNECTING, ConnectionState.ERROR),
            (ConnectionState.CONNECTED, ConnectionState.DISCONNECTED),
            (ConnectionState.CONNECTED, ConnectionState.ERROR),
            (ConnectionState.ERROR, ConnectionState.CONNECTING),
            (ConnectionState.ERROR, ConnectionState.DISCONNECTED),
        ],
    )
    def test_allowed(self, from_state: ConnectionState, to_state: ConnectionState) -> None:
        assert_transition(from_state, to_state)


class TestInvalidTransitions:
    """Test that disallowed transitions raise."""

    @pytest.mark.parametrize(
        "from_state, to_state",
        [
            (ConnectionState.DISCONNECTED, ConnectionState.CONNECTED),
            (ConnectionState.DISCONNECTED, ConnectionState.ERROR),
            (ConnectionState.CONNECTED, ConnectionState.CONNECTING),
            (ConnectionState.ERROR, ConnectionState.CONNECTED),
            (ConnectionState.CONNECTED, ConnectionState.CONNECTED),
        ],
    )
    def test_rejected(self, from_state: ConnectionState, to_state: ConnectionState) -> None:
        with pytest.raises(InvalidTransitionError) as exc_info:
            assert_transition(from_state, to_state)
        assert exc_info.value.from_state == from_state
        assert exc_info.value.to_state == to_state

    def test_error_message(self) -> None:
        with pytest.raises(InvalidTransitionError, match="Invalid transition: disconnected → connected"):
            assert_transition(ConnectionState.DISCONNECTED, ConnectionState.CONNECTED)


class TestCanStart:
    def test_start_offered_when_idle_or_failed(self) -> None:
        assert can_start(ConnectionState.DISCONNECTED)
        assert can_start(ConnectionState.ERROR)

    def test_start_not_offered_while_busy(self) -> None:
        assert not can_start(ConnectionState.CONNECTING)
        assert not can_start(ConnectionState.CONNECTED)
