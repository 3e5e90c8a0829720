"""Named-field generation for any content type."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from marketgenius.api.dependencies import get_client, limiter
from marketgenius.api.errors import generation_failed, unprocessable
from marketgenius.config import settings
from marketgenius.models.requests import GenerateRequest
from marketgenius.models.responses import GenerateResponse
from marketgenius.prompts import PromptBuildError, PromptRequest
from marketgenius.services.errors import GenerationError
from marketgenius.services.gemini import GenerationClient
from marketgenius.services.runner import generate_content

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/generate", response_model=GenerateResponse, response_model_by_alias=True)
@limiter.limit(settings.generation_rate_limit)
async def generate(
    request: Request,
    body: GenerateRequest,
    client: GenerationClient = Depends(get_client),
) -> GenerateResponse:
    """
    Render the content type's template with ``fields`` and generate.

    Unknown field names are rejected with 422; missing ones render empty.
    """
    try:
        prompt_request = PromptRequest(body.content_type, dict(body.fields))
    except PromptBuildError as e:
        raise unprocessable(str(e))
    try:
        output = await generate_content(client, prompt_request)
    except GenerationError as e:
        raise generation_failed(e)
    return GenerateResponse(content_type=body.content_type.value, output=output)
