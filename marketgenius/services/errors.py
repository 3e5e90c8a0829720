"""Service-layer errors.

``GenerationError`` covers every failure of the hosted model.  Its message is
short and safe to show to a user; the underlying exception is chained.
"""
from __future__ import annotations


class GenerationError(Exception):
    """A call to the hosted generation service failed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidBriefError(GenerationError):
    """The structured brief response did not parse as a valid brief."""

    MESSAGE = "Failed to generate a valid blog brief. The AI response was not valid JSON."

    def __init__(self, message: str = MESSAGE) -> None:
        super().__init__(message)


class MissingFieldsError(ValueError):
    """A tool run was submitted without a value for every required input."""

    def __init__(self, tool_id: int, fields: list[str]) -> None:
        self.tool_id = tool_id
        self.fields = fields
        super().__init__(f"Tool {tool_id} is missing required fields: {', '.join(fields)}")
