"""Marvin: the marketing assistant's daily tip and chat."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from marketgenius.api.dependencies import get_client, limiter
from marketgenius.api.errors import generation_failed
from marketgenius.config import settings
from marketgenius.models.requests import ChatRequest
from marketgenius.models.responses import ChatResponse, TipResponse
from marketgenius.services.errors import GenerationError
from marketgenius.services.gemini import ChatTurn, GenerationClient

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/assistant/tip", response_model=TipResponse, response_model_by_alias=True)
@limiter.limit(settings.generation_rate_limit)
async def marketing_tip(
    request: Request,
    client: GenerationClient = Depends(get_client),
) -> TipResponse:
    """A short tip; falls back to a fixed message instead of failing."""
    return TipResponse(tip=await client.marketing_tip())


@router.post("/assistant/chat", response_model=ChatResponse, response_model_by_alias=True)
@limiter.limit(settings.generation_rate_limit)
async def chat(
    request: Request,
    body: ChatRequest,
    client: GenerationClient = Depends(get_client),
) -> ChatResponse:
    """
    One chat turn. The client keeps the conversation and sends it back as
    ``history``; the server holds no chat state.
    """
    history = [ChatTurn(role=m.role, text=m.text) for m in body.history]
    try:
        reply = await client.chat(history, body.message)
    except GenerationError as e:
        raise generation_failed(e)
    return ChatResponse(reply=reply)
