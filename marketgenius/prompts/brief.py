"""Brief payload carried by the brief-driven article prompt.

The tool-form path has only four string slots, so the article workflow packs
the edited outline and target length into the ``goal`` slot as JSON::

    {"outline": "## Intro ...", "wordCount": "1500"}

``wordCount`` follows lenient integer parsing: a leading integer is taken
(``"1200 words"`` → 1200) and anything unparseable or zero falls back to
``DEFAULT_WORD_COUNT``.  A payload that is not a JSON object is an error.
"""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass

from marketgenius.config import DEFAULT_WORD_COUNT
from marketgenius.prompts.errors import InvalidBriefPayloadError

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Tolerance around the requested length stated to the model.
WORD_COUNT_TOLERANCE = 0.10


@dataclass(frozen=True)
class BriefPayload:
    outline: str
    word_count: int


def coerce_word_count(value: object) -> int:
    """Parse a user-entered word count, falling back to the default."""
    if isinstance(value, bool):
        return DEFAULT_WORD_COUNT
    if isinstance(value, (int, float)):
        parsed = int(value)
    else:
        match = _LEADING_INT.match(str(value or ""))
        parsed = int(match.group(1)) if match else 0
    return parsed or DEFAULT_WORD_COUNT


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def word_count_band(target: int) -> tuple[int, int]:
    """Return the ``(min, max)`` words allowed around ``target`` (±10%, rounded)."""
    return (
        _round_half_up(target * (1 - WORD_COUNT_TOLERANCE)),
        _round_half_up(target * (1 + WORD_COUNT_TOLERANCE)),
    )


def encode_brief_payload(outline: str, word_count: str | int) -> str:
    """Pack an outline and target length into the ``goal`` slot."""
    return json.dumps({"outline": outline, "wordCount": str(word_count)})


def parse_brief_payload(raw: str) -> BriefPayload:
    """Unpack the ``goal`` slot of a brief-driven article request.

    Raises:
        InvalidBriefPayloadError: When ``raw`` is not a JSON object.
    """
    try:
        data = json.loads(raw)
    except (TypeError, json.JSONDecodeError) as exc:
        raise InvalidBriefPayloadError(f"not valid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise InvalidBriefPayloadError("expected a JSON object with 'outline' and 'wordCount'")

    outline = data.get("outline")
    return BriefPayload(
        outline=outline if isinstance(outline, str) else "",
        word_count=coerce_word_count(data.get("wordCount")),
    )
