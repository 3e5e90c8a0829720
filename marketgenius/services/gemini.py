"""
Generation client for MarketGenius.

Thin async wrapper over the hosted Gemini models with:
- Text completion for every tool prompt
- Schema-validated brief generation (distinct error on a bad payload)
- Image generation and instruction-driven image editing
- Speech synthesis (raw 24 kHz PCM)
- Marketing tip and the "Marvin" strategist chat

Every failure is logged and re-raised as ``GenerationError`` carrying a short
message fit for display.  No retries: callers decide what to do next.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from google import genai
from google.genai import types
from pydantic import ValidationError

from marketgenius.config import settings
from marketgenius.models.brief import BlogBrief
from marketgenius.services.errors import GenerationError, InvalidBriefError

logger = logging.getLogger(__name__)

TEXT_ERROR_MESSAGE = (
    "An error occurred while generating content. Please check your API key and try again."
)
IMAGE_ERROR_MESSAGE = "An error occurred while generating the image. Please try again."
EDIT_ERROR_MESSAGE = "An error occurred while editing the image. Please try again."
SPEECH_ERROR_MESSAGE = "An error occurred while generating speech. Please try again."
CHAT_ERROR_MESSAGE = "Sorry, I encountered an error. Please try again."
TIP_FALLBACK_MESSAGE = "Could not fetch a tip right now. Please try again later."

TIP_PROMPT = (
    "You are a veteran marketing expert like Seth Godin. Provide one concise, "
    "insightful, and actionable marketing tip for today. The tip should be creative "
    "and thought-provoking. Keep it under 40 words."
)

MARVIN_SYSTEM_INSTRUCTION = (
    "You are 'Marvin', a world-class AI marketing strategist. Your persona is "
    "professional, insightful, and slightly witty. Your goal is to provide concise, "
    "actionable, and creative marketing advice. Always stay in character."
)


@dataclass(frozen=True)
class ChatTurn:
    """One prior message in a chat history. ``role`` is ``user`` or ``model``."""

    role: str
    text: str


@dataclass(frozen=True)
class GeneratedImage:
    data: bytes
    mime_type: str = "image/png"


def styled_image_prompt(prompt: str, style: Optional[str] = None) -> str:
    """Append ``", {style} style"`` unless no style (or ``"None"``) is chosen."""
    if not style or style == "None":
        return prompt
    return f"{prompt}, {style} style"


class GenerationClient:
    """
    Client for the hosted Gemini models.

    Supports:
    - Per-operation model routing from settings
    - Lazy SDK client creation (no network until first call)
    - Explicit ``close()`` from the app lifespan
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        self.api_key = api_key or self._get_api_key()
        self.timeout = timeout or settings.generation_timeout
        self._client: Optional[genai.Client] = None

    def _get_api_key(self) -> str:
        key = settings.gemini_api_key
        if key is None:
            raise ValueError("Gemini API key not configured")
        return key

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(
                api_key=self.api_key,
                http_options=types.HttpOptions(timeout=self.timeout * 1000),
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aio.aclose()
            self._client = None

    # ── Text ────────────────────────────────────────────────────────────

    async def generate_text(self, prompt: str, model: Optional[str] = None) -> str:
        """Single-shot text completion."""
        try:
            response = await self.client.aio.models.generate_content(
                model=model or settings.text_model,
                contents=prompt,
            )
        except Exception as e:
            logger.error(f"Error generating content: {e}")
            raise GenerationError(TEXT_ERROR_MESSAGE) from e
        if not response.text:
            logger.error("Error generating content: empty response")
            raise GenerationError(TEXT_ERROR_MESSAGE)
        return response.text

    async def generate_brief(self, prompt: str) -> BlogBrief:
        """
        Structured completion validated against ``BlogBrief``.

        Raises ``InvalidBriefError`` when the payload is not valid JSON for the
        schema, ``GenerationError`` when the call itself fails.
        """
        try:
            response = await self.client.aio.models.generate_content(
                model=settings.brief_model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=BlogBrief,
                ),
            )
        except Exception as e:
            logger.error(f"Error generating brief: {e}")
            raise GenerationError(TEXT_ERROR_MESSAGE) from e

        try:
            return BlogBrief.model_validate_json(response.text or "")
        except ValidationError as e:
            logger.error(f"Failed to parse brief from Gemini API: {e}")
            raise InvalidBriefError() from e

    # ── Images ──────────────────────────────────────────────────────────

    async def generate_image(
        self,
        prompt: str,
        aspect_ratio: str = "1:1",
        style: Optional[str] = None,
    ) -> GeneratedImage:
        """Generate one PNG for ``prompt`` with an optional style suffix."""
        try:
            response = await self.client.aio.models.generate_images(
                model=settings.image_model,
                prompt=styled_image_prompt(prompt, style),
                config=types.GenerateImagesConfig(
                    number_of_images=1,
                    output_mime_type="image/png",
                    aspect_ratio=aspect_ratio,
                ),
            )
        except Exception as e:
            logger.error(f"Error generating image: {e}")
            raise GenerationError(IMAGE_ERROR_MESSAGE) from e

        images = response.generated_images or []
        if not images or images[0].image is None or not images[0].image.image_bytes:
            logger.error("Error generating image: no image was generated")
            raise GenerationError(IMAGE_ERROR_MESSAGE)
        return GeneratedImage(data=images[0].image.image_bytes, mime_type="image/png")

    async def edit_image(self, prompt: str, image: bytes, mime_type: str) -> GeneratedImage:
        """Apply a text instruction to a source image."""
        try:
            response = await self.client.aio.models.generate_content(
                model=settings.image_edit_model,
                contents=[types.Part.from_bytes(data=image, mime_type=mime_type), prompt],
                config=types.GenerateContentConfig(response_modalities=["IMAGE"]),
            )
        except Exception as e:
            logger.error(f"Error editing image: {e}")
            raise GenerationError(EDIT_ERROR_MESSAGE) from e

        for part in _first_candidate_parts(response):
            if part.inline_data is not None and part.inline_data.data:
                return GeneratedImage(
                    data=part.inline_data.data,
                    mime_type=part.inline_data.mime_type or "image/png",
                )
        logger.error("Error editing image: no edited image was returned")
        raise GenerationError(EDIT_ERROR_MESSAGE)

    # ── Speech ──────────────────────────────────────────────────────────

    async def generate_speech(self, text: str, voice: Optional[str] = None) -> bytes:
        """Synthesize ``text``; returns raw mono int16 PCM at 24 kHz."""
        try:
            response = await self.client.aio.models.generate_content(
                model=settings.speech_model,
                contents=text,
                config=types.GenerateContentConfig(
                    response_modalities=["AUDIO"],
                    speech_config=voice_config(voice or settings.default_speech_voice),
                ),
            )
        except Exception as e:
            logger.error(f"Error generating speech: {e}")
            raise GenerationError(SPEECH_ERROR_MESSAGE) from e

        parts = _first_candidate_parts(response)
        if not parts or parts[0].inline_data is None or not parts[0].inline_data.data:
            logger.error("Error generating speech: no audio data returned")
            raise GenerationError(SPEECH_ERROR_MESSAGE)
        return parts[0].inline_data.data

    # ── Assistant ───────────────────────────────────────────────────────

    async def marketing_tip(self) -> str:
        """A short daily tip. Never raises: failures degrade to a fixed message."""
        try:
            response = await self.client.aio.models.generate_content(
                model=settings.fast_model,
                contents=TIP_PROMPT,
            )
        except Exception as e:
            logger.error(f"Error generating marketing tip: {e}")
            return TIP_FALLBACK_MESSAGE
        return response.text or TIP_FALLBACK_MESSAGE

    async def chat(self, history: Sequence[ChatTurn], message: str) -> str:
        """Send ``message`` to Marvin after replaying ``history``."""
        try:
            chat = self.client.aio.chats.create(
                model=settings.fast_model,
                config=types.GenerateContentConfig(
                    system_instruction=MARVIN_SYSTEM_INSTRUCTION,
                ),
                history=[
                    types.Content(role=turn.role, parts=[types.Part.from_text(text=turn.text)])
                    for turn in history
                ],
            )
            response = await chat.send_message(message)
        except Exception as e:
            logger.error(f"Error in chat: {e}")
            raise GenerationError(CHAT_ERROR_MESSAGE) from e
        if not response.text:
            raise GenerationError(CHAT_ERROR_MESSAGE)
        return response.text


def voice_config(voice: str) -> types.SpeechConfig:
    """Prebuilt-voice speech config shared by TTS and the live session."""
    return types.SpeechConfig(
        voice_config=types.VoiceConfig(
            prebuilt_voice_config=types.PrebuiltVoiceConfig(voice_name=voice),
        ),
    )


def _first_candidate_parts(response: Any) -> list[Any]:
    candidates = getattr(response, "candidates", None) or []
    if not candidates or candidates[0].content is None:
        return []
    return list(candidates[0].content.parts or [])


_shared_client: GenerationClient | None = None


def get_generation_client() -> GenerationClient:
    """Return the process-wide GenerationClient singleton."""
    global _shared_client
    if _shared_client is None:
        _shared_client = GenerationClient()
    return _shared_client


async def close_generation_client() -> None:
    """Close the singleton client (call from FastAPI lifespan shutdown)."""
    global _shared_client
    if _shared_client is not None:
        await _shared_client.close()
        _shared_client = None
