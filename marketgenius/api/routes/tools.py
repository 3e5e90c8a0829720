"""Tool catalog and form runner endpoints."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request

from marketgenius.api.dependencies import get_client, get_favorites, limiter
from marketgenius.api.errors import conflict, generation_failed, not_found, unprocessable
from marketgenius.catalog import ALL_CATEGORY, CATEGORIES, filter_tools, get_tool
from marketgenius.config import settings
from marketgenius.models.requests import ToolRunRequest
from marketgenius.models.responses import (
    PromptPreviewResponse,
    ToolDetail,
    ToolListResponse,
    ToolRunResponse,
    ToolSummary,
)
from marketgenius.prompts import PromptBuildError
from marketgenius.services.errors import GenerationError, MissingFieldsError
from marketgenius.services.gemini import GenerationClient
from marketgenius.services.runner import (
    ToolNotFoundError,
    ToolNotRunnableError,
    prepare_prompt,
    run_tool,
)
from marketgenius.storage import FavoritesRepository

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/tools", response_model=ToolListResponse, response_model_by_alias=True)
async def list_tools(
    q: str = Query(default="", max_length=200, description="Search title and description"),
    category: str = Query(default=ALL_CATEGORY),
    favorites: FavoritesRepository = Depends(get_favorites),
) -> ToolListResponse:
    """Catalog sorted by title, filtered by search term and category."""
    if category not in CATEGORIES:
        raise unprocessable(f"Unknown category '{category}'")
    favorite_ids = await favorites.get_all()
    tools = filter_tools(query=q, category=category, favorites=favorite_ids)
    fav = set(favorite_ids)
    return ToolListResponse(
        tools=[ToolSummary.from_tool(tool, tool.id in fav) for tool in tools],
        total=len(tools),
    )


@router.get("/tools/categories")
async def list_categories() -> dict[str, list[str]]:
    return {"categories": list(CATEGORIES)}


@router.get("/tools/{tool_id}", response_model=ToolDetail, response_model_by_alias=True)
async def get_tool_detail(
    tool_id: int,
    favorites: FavoritesRepository = Depends(get_favorites),
) -> ToolDetail:
    tool = get_tool(tool_id)
    if tool is None:
        raise not_found("Tool", tool_id)
    return ToolDetail.from_tool(tool, await favorites.is_favorite(tool_id))


def _prompt_or_raise(tool_id: int, values: dict[str, str]) -> str:
    try:
        return prepare_prompt(tool_id, values)
    except ToolNotFoundError:
        raise not_found("Tool", tool_id)
    except ToolNotRunnableError as e:
        raise conflict(str(e))
    except (MissingFieldsError, PromptBuildError) as e:
        raise unprocessable(str(e))


@router.post("/tools/{tool_id}/prompt", response_model=PromptPreviewResponse, response_model_by_alias=True)
async def preview_prompt(tool_id: int, body: ToolRunRequest) -> PromptPreviewResponse:
    """The prompt the tool would send, without calling the model."""
    return PromptPreviewResponse(tool_id=tool_id, prompt=_prompt_or_raise(tool_id, body.values))


@router.post("/tools/{tool_id}/run", response_model=ToolRunResponse, response_model_by_alias=True)
@limiter.limit(settings.generation_rate_limit)
async def run_tool_endpoint(
    request: Request,
    tool_id: int,
    body: ToolRunRequest,
    client: GenerationClient = Depends(get_client),
) -> ToolRunResponse:
    """Validate form values, build the prompt and generate."""
    _prompt_or_raise(tool_id, body.values)
    try:
        result = await run_tool(client, tool_id, body.values)
    except GenerationError as e:
        raise generation_failed(e)
    return ToolRunResponse(tool_id=tool_id, output=result.output)
