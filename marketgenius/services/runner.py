"""
Tool runner: form values in, generated text out.

The runner is the server-side form: it checks that every required input of
the tool is filled, maps the values onto the four prompt slots, builds the
prompt and hands it to the generation client.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from marketgenius.catalog import ToolDescriptor, get_tool
from marketgenius.prompts import PromptRequest, SlotName, build_prompt, render
from marketgenius.services.errors import MissingFieldsError
from marketgenius.services.gemini import GenerationClient

logger = logging.getLogger(__name__)


class ToolNotFoundError(LookupError):
    def __init__(self, tool_id: int) -> None:
        self.tool_id = tool_id
        super().__init__(f"Tool {tool_id} not found")


class ToolNotRunnableError(ValueError):
    """The tool opens a dedicated view and has no form to run."""

    def __init__(self, tool: ToolDescriptor) -> None:
        self.tool_id = tool.id
        view = tool.linked_view.value if tool.linked_view else "none"
        super().__init__(f"Tool {tool.id} opens the '{view}' view and cannot be run as a form")


@dataclass(frozen=True)
class ToolRun:
    tool_id: int
    prompt: str
    output: str


def resolve_tool(tool_id: int) -> ToolDescriptor:
    """Return a runnable tool. Raises ToolNotFoundError / ToolNotRunnableError."""
    tool = get_tool(tool_id)
    if tool is None:
        raise ToolNotFoundError(tool_id)
    if not tool.runnable:
        raise ToolNotRunnableError(tool)
    return tool


def missing_fields(tool: ToolDescriptor, values: Mapping[str, str]) -> list[str]:
    """Slot names of required inputs left empty or whitespace-only."""
    return [
        spec.slot.value
        for spec in tool.inputs
        if spec.required and not (values.get(spec.slot.value) or "").strip()
    ]


def prepare_prompt(tool_id: int, values: Mapping[str, str]) -> str:
    """Validate ``values`` against the tool's inputs and build its prompt.

    ``values`` is keyed by slot name (``topic``, ``audience``, ``tone``,
    ``goal``); slots the tool does not use are ignored.
    """
    tool = resolve_tool(tool_id)
    missing = missing_fields(tool, values)
    if missing:
        raise MissingFieldsError(tool_id, missing)

    used = {spec.slot for spec in tool.inputs}
    slots = {
        slot.value: (values.get(slot.value) or "") if slot in used else ""
        for slot in SlotName
    }
    if tool.content_type is None:
        raise ToolNotRunnableError(tool)
    return build_prompt(tool.content_type, **slots)


async def run_tool(
    client: GenerationClient,
    tool_id: int,
    values: Mapping[str, str],
) -> ToolRun:
    """Build the tool's prompt and generate its output."""
    prompt = prepare_prompt(tool_id, values)
    logger.info(f"Running tool {tool_id} ({len(prompt)} prompt chars)")
    output = await client.generate_text(prompt)
    return ToolRun(tool_id=tool_id, prompt=prompt, output=output)


async def generate_content(client: GenerationClient, request: PromptRequest) -> str:
    """Named-field generation: render the tagged request and generate."""
    prompt = render(request)
    logger.info(f"Generating {request.content_type.value} ({len(prompt)} prompt chars)")
    return await client.generate_text(prompt)
