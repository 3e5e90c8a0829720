"""Image generation, image editing and text-to-speech endpoints."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response

from marketgenius.api.dependencies import get_client, limiter
from marketgenius.api.errors import generation_failed, unprocessable
from marketgenius.config import IMAGE_ASPECT_RATIOS, IMAGE_STYLES, SPEECH_VOICES, settings
from marketgenius.models.requests import ImageEditRequest, ImageRequest, SpeechRequest
from marketgenius.models.responses import ImageResponse, MediaOptionsResponse
from marketgenius.services.audio import decode_base64, parse_data_uri, pcm_to_wav, to_data_uri
from marketgenius.services.errors import GenerationError
from marketgenius.services.gemini import GenerationClient

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/media/options", response_model=MediaOptionsResponse, response_model_by_alias=True)
async def media_options() -> MediaOptionsResponse:
    """Voices, aspect ratios and styles the media endpoints accept."""
    return MediaOptionsResponse(
        voices=list(SPEECH_VOICES),
        aspect_ratios=list(IMAGE_ASPECT_RATIOS),
        styles=list(IMAGE_STYLES),
    )


@router.post("/images", response_model=ImageResponse, response_model_by_alias=True)
@limiter.limit(settings.generation_rate_limit)
async def generate_image(
    request: Request,
    body: ImageRequest,
    client: GenerationClient = Depends(get_client),
) -> ImageResponse:
    try:
        image = await client.generate_image(body.prompt, aspect_ratio=body.aspect_ratio, style=body.style)
    except GenerationError as e:
        raise generation_failed(e)
    return ImageResponse(image_url=to_data_uri(image.data, image.mime_type), mime_type=image.mime_type)


def _source_image(body: ImageEditRequest) -> tuple[bytes, str]:
    """Decode the uploaded image from a data URI or bare base64 plus ``mimeType``."""
    try:
        if body.image.startswith("data:"):
            return parse_data_uri(body.image)
        if not body.mime_type:
            raise unprocessable("mimeType is required when image is not a data URI")
        return decode_base64(body.image), body.mime_type
    except ValueError as e:
        raise unprocessable(str(e))


@router.post("/images/edit", response_model=ImageResponse, response_model_by_alias=True)
@limiter.limit(settings.generation_rate_limit)
async def edit_image(
    request: Request,
    body: ImageEditRequest,
    client: GenerationClient = Depends(get_client),
) -> ImageResponse:
    """Apply a text instruction to an uploaded image."""
    data, mime_type = _source_image(body)
    if not mime_type.startswith("image/"):
        raise unprocessable(f"Unsupported source type '{mime_type}'")
    try:
        image = await client.edit_image(body.prompt, data, mime_type)
    except GenerationError as e:
        raise generation_failed(e)
    return ImageResponse(image_url=to_data_uri(image.data, image.mime_type), mime_type=image.mime_type)


@router.post("/speech", response_class=Response)
@limiter.limit(settings.generation_rate_limit)
async def generate_speech(
    request: Request,
    body: SpeechRequest,
    client: GenerationClient = Depends(get_client),
) -> Response:
    """Synthesize ``text`` and return a playable WAV file."""
    try:
        pcm = await client.generate_speech(body.text, voice=body.voice)
    except GenerationError as e:
        raise generation_failed(e)
    logger.info(f"Speech generated: {len(pcm)} PCM bytes, voice={body.voice}")
    return Response(content=pcm_to_wav(pcm), media_type="audio/wav")
