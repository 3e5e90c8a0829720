"""
Article Workflow State Machine.

Explicit stage transitions for the brief-then-write article workflow.
Never set ``ArticleSession.stage`` directly; always go through
``ArticleSession.transition_to()``.

States:
    INITIAL    : Waiting for a topic; the brief request runs from here
    BRIEFING   : Brief ready; title, keywords, outline, length and tone are editable
    GENERATING : Draft being written, then image placeholders resolved in order
    DONE       : Article finished; only a fresh start leaves this stage

Invariants:
    1. A failed brief request leaves the session in INITIAL.
    2. Regenerating the outline does not change the stage.
    3. A failed generation returns to BRIEFING with the edited brief intact.
    4. DONE is left only by starting over (back to INITIAL).
"""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ArticleStage(str, Enum):
    """Article workflow stages."""

    INITIAL = "initial"
    BRIEFING = "briefing"
    GENERATING = "generating"
    DONE = "done"


TERMINAL_STATES: frozenset[ArticleStage] = frozenset({ArticleStage.DONE})

# Allowed transitions: from_state -> set of valid to_states.
# Every stage but INITIAL may start over.
_TRANSITIONS: dict[ArticleStage, frozenset[ArticleStage]] = {
    ArticleStage.INITIAL: frozenset({
        ArticleStage.BRIEFING,
    }),
    ArticleStage.BRIEFING: frozenset({
        ArticleStage.GENERATING,
        ArticleStage.INITIAL,
    }),
    ArticleStage.GENERATING: frozenset({
        ArticleStage.DONE,
        ArticleStage.BRIEFING,
        ArticleStage.INITIAL,
    }),
    ArticleStage.DONE: frozenset({
        ArticleStage.INITIAL,
    }),
}


class InvalidTransitionError(Exception):
    """Raised when a stage transition violates the state machine."""

    def __init__(self, from_state: ArticleStage, to_state: ArticleStage):
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Invalid transition: {from_state.value} → {to_state.value}"
        )


def assert_transition(from_state: ArticleStage, to_state: ArticleStage) -> None:
    """
    Validate that a stage transition is allowed.

    Raises InvalidTransitionError if the transition violates the state machine.
    """
    allowed = _TRANSITIONS.get(from_state, frozenset())
    if to_state not in allowed:
        raise InvalidTransitionError(from_state, to_state)


def is_terminal(stage: ArticleStage) -> bool:
    return stage in TERMINAL_STATES


def can_edit_brief(stage: ArticleStage) -> bool:
    """Brief fields are editable only while briefing."""
    return stage == ArticleStage.BRIEFING
