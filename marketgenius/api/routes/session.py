"""Signed-in user and favorite tools."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from marketgenius.api.dependencies import get_favorites, get_user_session
from marketgenius.api.errors import not_found
from marketgenius.catalog import get_tool
from marketgenius.models.requests import UserSessionRequest
from marketgenius.models.responses import (
    FavoritesResponse,
    FavoriteToggleResponse,
    UserSessionResponse,
)
from marketgenius.storage import FavoritesRepository, UserSessionRepository

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/session", response_model=UserSessionResponse, response_model_by_alias=True)
async def get_session(
    users: UserSessionRepository = Depends(get_user_session),
) -> UserSessionResponse:
    profile = await users.get()
    if profile is None:
        return UserSessionResponse(signed_in=False)
    return UserSessionResponse(name=profile.name, email=profile.email, signed_in=True)


@router.put("/session", response_model=UserSessionResponse, response_model_by_alias=True)
async def sign_in(
    body: UserSessionRequest,
    users: UserSessionRepository = Depends(get_user_session),
) -> UserSessionResponse:
    """Store the user's name and email. There is no password check."""
    profile = await users.save(body.name, body.email)
    return UserSessionResponse(name=profile.name, email=profile.email, signed_in=True)


@router.delete("/session", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(users: UserSessionRepository = Depends(get_user_session)) -> None:
    await users.clear()


@router.get("/favorites", response_model=FavoritesResponse, response_model_by_alias=True)
async def list_favorites(
    favorites: FavoritesRepository = Depends(get_favorites),
) -> FavoritesResponse:
    return FavoritesResponse(favorites=await favorites.get_all())


@router.post(
    "/favorites/{tool_id}/toggle",
    response_model=FavoriteToggleResponse,
    response_model_by_alias=True,
)
async def toggle_favorite(
    tool_id: int,
    favorites: FavoritesRepository = Depends(get_favorites),
) -> FavoriteToggleResponse:
    if get_tool(tool_id) is None:
        raise not_found("Tool", tool_id)
    now_favorite = await favorites.toggle(tool_id)
    logger.info(f"Tool {tool_id} favorite={now_favorite}")
    return FavoriteToggleResponse(tool_id=tool_id, favorite=now_favorite)
