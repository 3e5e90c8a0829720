"""Image placeholders in generated articles.

The article prompt asks the model to mark image spots with a line of its own
holding ``[description]`` or ``[IMAGE: description]``.  A bracket in the
middle of a sentence is not a placeholder, and neither is the alt text of an
image that already replaced one.  Lines may end in ``\\n`` or ``\\r\\n``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

PLACEHOLDER_PATTERN = re.compile(r"^\[(?:IMAGE:)?\s*(.*?)\s*\](?=\r?$)", re.MULTILINE)


@dataclass(frozen=True)
class Placeholder:
    marker: str        # full line without its terminator, e.g. "[IMAGE: a red fox]"
    description: str   # "a red fox"


def find_placeholders(text: str) -> list[Placeholder]:
    """All full-line placeholders, in document order (duplicates included)."""
    return [
        Placeholder(marker=m.group(0), description=m.group(1))
        for m in PLACEHOLDER_PATTERN.finditer(text)
    ]


def image_markdown(description: str, url: str) -> str:
    """Markdown image block that replaces a placeholder."""
    alt = description.replace("[", "").replace("]", "")
    return f"\n\n![{alt}]({url})\n\n"


def replace_first(text: str, marker: str, replacement: str) -> str:
    """Replace the first line that consists of ``marker`` alone."""
    pattern = re.compile(rf"^{re.escape(marker)}(?=\r?$)", re.MULTILINE)
    return pattern.sub(lambda _: replacement, text, count=1)
