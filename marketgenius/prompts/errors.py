"""Prompt construction errors.

These are raised while turning user input into a prompt and caught by
route handlers to produce structured 4xx responses.  They represent invalid
client input, not server faults.
"""
from __future__ import annotations


class PromptBuildError(ValueError):
    """Base class for all prompt-construction failures."""


class InvalidBriefPayloadError(PromptBuildError):
    """The brief-driven article slot did not hold a valid ``{outline, wordCount}`` JSON object."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid brief payload: {reason}")


class UnknownFieldsError(PromptBuildError):
    """A named-field request carried fields its content type does not define.

    ``fields`` lists every unexpected name so the caller can report them all
    at once.
    """

    def __init__(self, content_type: str, fields: list[str]) -> None:
        self.content_type = content_type
        self.fields = fields
        super().__init__(
            f"Unknown fields for '{content_type}': {', '.join(sorted(fields))}"
        )
