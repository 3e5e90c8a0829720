"""MarketGenius CLI: Typer application root.

Entry point for the ``marketgenius`` console script:

    marketgenius tools [--query TEXT] [--category NAME]
    marketgenius prompt TOOL_ID --topic ... [--audience ...] [--tone ...] [--goal ...]
    marketgenius run TOOL_ID --topic ...
    marketgenius serve [--host HOST] [--port PORT]
"""
from __future__ import annotations

import asyncio
import enum
import logging
from typing import Optional

import typer

from marketgenius.catalog import ALL_CATEGORY, CATEGORIES, filter_tools
from marketgenius.config import settings
from marketgenius.prompts import PromptBuildError
from marketgenius.services.errors import GenerationError, MissingFieldsError
from marketgenius.services.gemini import close_generation_client, get_generation_client
from marketgenius.services.runner import (
    ToolNotFoundError,
    ToolNotRunnableError,
    prepare_prompt,
    run_tool,
)

logger = logging.getLogger(__name__)


class ExitCode(enum.IntEnum):
    """CLI exit codes.

    0: success
    1: user error (unknown tool, missing field, bad option)
    3: generation or internal error
    """

    SUCCESS = 0
    USER_ERROR = 1
    INTERNAL_ERROR = 3


cli = typer.Typer(
    name="marketgenius",
    help="MarketGenius: AI marketing content from the command line.",
    no_args_is_help=True,
)


def _slot_values(topic: str, audience: str, tone: str, goal: str) -> dict[str, str]:
    return {"topic": topic, "audience": audience, "tone": tone, "goal": goal}


def _prompt_or_exit(tool_id: int, values: dict[str, str]) -> str:
    try:
        return prepare_prompt(tool_id, values)
    except (ToolNotFoundError, ToolNotRunnableError, MissingFieldsError, PromptBuildError) as exc:
        typer.echo(f"❌ {exc}")
        raise typer.Exit(code=ExitCode.USER_ERROR)


@cli.command("tools", help="List catalog tools, sorted by title.")
def tools_cmd(
    query: str = typer.Option("", "--query", "-q", help="Case-insensitive search on title and description."),
    category: str = typer.Option(ALL_CATEGORY, "--category", "-c", help="Category to filter by."),
) -> None:
    if category not in CATEGORIES:
        typer.echo(f"❌ Unknown category '{category}'. Choose from: {', '.join(CATEGORIES)}")
        raise typer.Exit(code=ExitCode.USER_ERROR)
    found = filter_tools(query=query, category=category)
    if not found:
        typer.echo("No tools found")
        return
    for tool in found:
        marker = "" if tool.runnable else f"  [{tool.linked_view.value if tool.linked_view else 'view'}]"
        typer.echo(f"{tool.id:>4}  {tool.title}{marker}")


@cli.command("prompt", help="Print the prompt a tool would send. No network.")
def prompt_cmd(
    tool_id: int = typer.Argument(..., help="Tool id (see `marketgenius tools`)."),
    topic: str = typer.Option("", "--topic", help="Primary input of the tool's form."),
    audience: str = typer.Option("", "--audience"),
    tone: str = typer.Option("", "--tone"),
    goal: str = typer.Option("", "--goal"),
) -> None:
    typer.echo(_prompt_or_exit(tool_id, _slot_values(topic, audience, tone, goal)))


async def _run_async(tool_id: int, values: dict[str, str]) -> str:
    try:
        result = await run_tool(get_generation_client(), tool_id, values)
    finally:
        await close_generation_client()
    return result.output


@cli.command("run", help="Run a tool against the model and print the result.")
def run_cmd(
    tool_id: int = typer.Argument(..., help="Tool id (see `marketgenius tools`)."),
    topic: str = typer.Option("", "--topic", help="Primary input of the tool's form."),
    audience: str = typer.Option("", "--audience"),
    tone: str = typer.Option("", "--tone"),
    goal: str = typer.Option("", "--goal"),
) -> None:
    values = _slot_values(topic, audience, tone, goal)
    # Validate eagerly so user errors surface before any network work
    _prompt_or_exit(tool_id, values)

    try:
        output = asyncio.run(_run_async(tool_id, values))
    except GenerationError as exc:
        typer.echo(f"❌ {exc.message}")
        raise typer.Exit(code=ExitCode.INTERNAL_ERROR)
    except ValueError as exc:
        typer.echo(f"❌ {exc}")
        raise typer.Exit(code=ExitCode.USER_ERROR)
    except Exception as exc:
        typer.echo(f"❌ marketgenius run failed: {exc}")
        logger.error("❌ marketgenius run error: %s", exc, exc_info=True)
        raise typer.Exit(code=ExitCode.INTERNAL_ERROR)
    typer.echo(output)


@cli.command("serve", help="Start the HTTP API with uvicorn.")
def serve_cmd(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (default from settings)."),
    port: Optional[int] = typer.Option(None, "--port", help="Port (default from settings)."),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes."),
) -> None:
    import uvicorn

    uvicorn.run(
        "marketgenius.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


if __name__ == "__main__":
    cli()
