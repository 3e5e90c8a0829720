"""The four positional form slots every tool form can fill."""

from __future__ import annotations

from enum import Enum


class SlotName(str, Enum):
    """Positional inputs shared by every tool form.

    Slots carry no fixed meaning: each content type decides what ``topic``,
    ``audience``, ``tone`` and ``goal`` hold for its template.  The prompt
    registry maps them onto named fields so nothing downstream has to
    remember which slot means what.
    """

    TOPIC = "topic"
    AUDIENCE = "audience"
    TONE = "tone"
    GOAL = "goal"


SLOT_ORDER: tuple[SlotName, ...] = (
    SlotName.TOPIC,
    SlotName.AUDIENCE,
    SlotName.TONE,
    SlotName.GOAL,
)
