"""Request models for the MarketGenius API."""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, field_validator

from marketgenius.config import IMAGE_ASPECT_RATIOS, IMAGE_STYLES, SPEECH_VOICES
from marketgenius.models.base import CamelModel
from marketgenius.prompts import AnalysisFocus, CampaignGoal, ContentType

# Pasted source text (articles to repurpose, transcripts) can be long.
_MAX_FIELD_CHARS = 50_000
# Base64 of a ~15 MB image.
_MAX_IMAGE_CHARS = 20_000_000


class ToolRunRequest(CamelModel):
    """Form values for a generic tool, keyed by slot name."""

    values: dict[str, str] = Field(
        default_factory=dict,
        description="Slot values: topic, audience, tone, goal",
        examples=[{"topic": "Remote work productivity", "audience": "Startup founders"}],
    )

    @field_validator("values")
    @classmethod
    def _known_slots(cls, v: dict[str, str]) -> dict[str, str]:
        unknown = sorted(set(v) - {"topic", "audience", "tone", "goal"})
        if unknown:
            raise ValueError(f"Unknown slots: {', '.join(unknown)}")
        for name, value in v.items():
            if len(value) > _MAX_FIELD_CHARS:
                raise ValueError(f"Slot '{name}' exceeds {_MAX_FIELD_CHARS} characters")
        return v


class GenerateRequest(CamelModel):
    """Named-field generation for one content type."""

    content_type: ContentType
    fields: dict[str, str] = Field(default_factory=dict)


class CampaignReportRequest(CamelModel):
    campaign_name: str = Field(..., min_length=1, max_length=500)
    metrics: str = Field(..., min_length=1, max_length=_MAX_FIELD_CHARS)
    analysis_focus: AnalysisFocus = AnalysisFocus.OVERALL_PERFORMANCE
    objective: CampaignGoal = CampaignGoal.BRAND_AWARENESS


class MetricsParseRequest(CamelModel):
    metrics: str = Field(..., max_length=_MAX_FIELD_CHARS)


class TopicRequest(CamelModel):
    topic: str = Field(..., min_length=1, max_length=1000)


class BriefUpdateRequest(CamelModel):
    """Edits to an article brief; omitted fields are left alone."""

    title: Optional[str] = None
    outline: Optional[str] = None
    word_count: Optional[str] = None
    tone: Optional[str] = None


class KeywordRequest(CamelModel):
    keyword: str = Field(..., max_length=200)


class FeatureImageRequest(CamelModel):
    prompt: str = Field(..., min_length=1, max_length=2000)
    style: str = Field(default="None")
    aspect_ratio: str = Field(default=IMAGE_ASPECT_RATIOS[0])

    @field_validator("style")
    @classmethod
    def _known_style(cls, v: str) -> str:
        if v not in IMAGE_STYLES:
            raise ValueError(f"Unknown style; expected one of {IMAGE_STYLES}")
        return v

    @field_validator("aspect_ratio")
    @classmethod
    def _known_aspect_ratio(cls, v: str) -> str:
        if v not in IMAGE_ASPECT_RATIOS:
            raise ValueError(f"Unknown aspect ratio; expected one of {IMAGE_ASPECT_RATIOS}")
        return v


class ImageRequest(FeatureImageRequest):
    """Standalone image generation; same shape as a feature image."""


class ImageEditRequest(CamelModel):
    prompt: str = Field(..., min_length=1, max_length=2000)
    image: str = Field(
        ...,
        min_length=1,
        max_length=_MAX_IMAGE_CHARS,
        description="Source image as base64 or a base64 data URI",
    )
    mime_type: Optional[str] = Field(
        default=None,
        description="Required unless ``image`` is a data URI",
    )


class SpeechRequest(CamelModel):
    text: str = Field(..., min_length=1, max_length=5000)
    voice: str = Field(default=SPEECH_VOICES[0])

    @field_validator("voice")
    @classmethod
    def _known_voice(cls, v: str) -> str:
        if v not in SPEECH_VOICES:
            raise ValueError(f"Unknown voice; expected one of {SPEECH_VOICES}")
        return v


class ChatMessage(CamelModel):
    role: Literal["user", "model"]
    text: str


class ChatRequest(CamelModel):
    message: str = Field(..., min_length=1, max_length=10_000)
    history: list[ChatMessage] = Field(default_factory=list)


class UserSessionRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=3, max_length=320)

    @field_validator("name", "email")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v
