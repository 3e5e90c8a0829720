"""Tests for the generic tool runner."""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from marketgenius.catalog import get_tool
from marketgenius.prompts import ContentType, PromptRequest
from marketgenius.services.errors import MissingFieldsError
from marketgenius.services import runner
from marketgenius.services.runner import (
    ToolNotFoundError,
    ToolNotRunnableError,
    generate_content,
    missing_fields,
    prepare_prompt,
    resolve_tool,
    run_tool,
)


class TestResolveTool:
    def test_unknown_tool(self) -> None:
        with pytest.raises(ToolNotFoundError, match="Tool 999999 not found"):
            resolve_tool(999_999)

    def test_view_tool_not_runnable(self) -> None:
        with pytest.raises(ToolNotRunnableError, match="'content' view"):
            resolve_tool(1)

    def test_runnable(self) -> None:
        assert resolve_tool(102).content_type == ContentType.SHORT_BLOG_ARTICLE


class TestPreparePrompt:
    """Form values are validated then mapped onto slots."""

    def test_maps_values(self) -> None:
        prompt = prepare_prompt(102, {"topic": "Content strategy", "audience": "Casual"})
        assert "**Topic:** Content strategy" in prompt
        assert "**Tone:** Casual" in prompt

    def test_missing_required(self) -> None:
        with pytest.raises(MissingFieldsError) as exc_info:
            prepare_prompt(102, {"topic": "  "})
        assert exc_info.value.fields == ["topic", "audience"]
        assert exc_info.value.tool_id == 102

    def test_unused_slots_dropped(self) -> None:
        prompt = prepare_prompt(100, {"topic": "Fashion", "goal": "SNEAKY"})
        assert "SNEAKY" not in prompt

    def test_tool_without_content_type_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A descriptor with no template raises instead of building a prompt."""
        view_tool = get_tool(1)
        assert view_tool is not None and view_tool.content_type is None
        monkeypatch.setattr(runner, "resolve_tool", lambda tool_id: view_tool)
        with pytest.raises(ToolNotRunnableError):
            prepare_prompt(1, {})

    def test_missing_fields_helper(self) -> None:
        tool = resolve_tool(100)
        assert missing_fields(tool, {}) == ["topic"]
        assert missing_fields(tool, {"topic": "x"}) == []


class TestRunTool:
    async def test_run_tool(self, mock_client: MagicMock) -> None:
        result = await run_tool(mock_client, 100, {"topic": "Fashion"})
        assert result.output == "Generated text"
        assert result.tool_id == 100
        mock_client.generate_text.assert_awaited_once_with(result.prompt)
        assert "**Theme:** Fashion" in result.prompt

    async def test_validation_before_call(self, mock_client: MagicMock) -> None:
        with pytest.raises(MissingFieldsError):
            await run_tool(mock_client, 100, {})
        mock_client.generate_text.assert_not_awaited()

    async def test_generate_content(self, mock_client: MagicMock) -> None:
        request = PromptRequest(ContentType.AI_TOPIC_GENERATOR, {"theme": "Coffee"})
        assert await generate_content(mock_client, request) == "Generated text"
        prompt = mock_client.generate_text.call_args.args[0]
        assert "**Theme:** Coffee" in prompt
