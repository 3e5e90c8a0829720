"""Response models for the MarketGenius API."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from marketgenius.article.session_store import ArticleSession
from marketgenius.catalog import FieldSpec, ToolDescriptor
from marketgenius.models.base import CamelModel
from marketgenius.services.campaign import Metric


class FieldSpecResponse(CamelModel):
    id: str
    label: str
    placeholder: str
    kind: str
    options: list[str] = []
    rows: Optional[int] = None
    required: bool = True

    @classmethod
    def from_spec(cls, spec: FieldSpec) -> FieldSpecResponse:
        return cls(
            id=spec.slot.value,
            label=spec.label,
            placeholder=spec.placeholder,
            kind=spec.kind.value,
            options=[value for value, _ in spec.options],
            rows=spec.rows,
            required=spec.required,
        )


class ToolSummary(CamelModel):
    id: int
    title: str
    description: str
    categories: list[str]
    bulk_enabled: bool
    linked_view: Optional[str] = None
    runnable: bool
    favorite: bool = False

    @classmethod
    def from_tool(cls, tool: ToolDescriptor, favorite: bool = False) -> ToolSummary:
        return cls(
            id=tool.id,
            title=tool.title,
            description=tool.description,
            categories=list(tool.categories),
            bulk_enabled=tool.bulk_enabled,
            linked_view=tool.linked_view.value if tool.linked_view else None,
            runnable=tool.runnable,
            favorite=favorite,
        )


class ToolDetail(ToolSummary):
    component_type: Optional[str] = None
    content_type: Optional[str] = None
    inputs: list[FieldSpecResponse] = []

    @classmethod
    def from_tool(cls, tool: ToolDescriptor, favorite: bool = False) -> ToolDetail:
        summary = ToolSummary.from_tool(tool, favorite)
        return cls(
            **summary.model_dump(),
            component_type=tool.component_type.value if tool.component_type else None,
            content_type=tool.content_type.value if tool.content_type else None,
            inputs=[FieldSpecResponse.from_spec(spec) for spec in tool.inputs],
        )


class ToolListResponse(CamelModel):
    tools: list[ToolSummary]
    total: int


class ToolRunResponse(CamelModel):
    tool_id: int
    output: str


class PromptPreviewResponse(CamelModel):
    tool_id: int
    prompt: str


class GenerateResponse(CamelModel):
    content_type: str
    output: str


class MetricResponse(CamelModel):
    label: str
    value: float
    original_value: str

    @classmethod
    def from_metric(cls, metric: Metric) -> MetricResponse:
        return cls(label=metric.label, value=metric.value, original_value=metric.original_value)


class CampaignReportResponse(CamelModel):
    report: str
    metrics: list[MetricResponse]


class MetricsResponse(CamelModel):
    metrics: list[MetricResponse]


class ArticleResponse(CamelModel):
    """Snapshot of an article session, polled while generating."""

    id: str
    stage: str
    topic: str
    title: str
    keywords: list[str]
    outline: str
    word_count: str
    tone: str
    article: str
    image_urls: list[str]
    feature_image: Optional[str] = None
    error: Optional[str] = None
    progress: str
    busy: bool
    updated_at: datetime

    @classmethod
    def from_session(cls, session: ArticleSession) -> ArticleResponse:
        return cls(
            id=session.session_id,
            stage=session.stage.value,
            topic=session.topic,
            title=session.title,
            keywords=list(session.keywords),
            outline=session.outline,
            word_count=session.word_count,
            tone=session.tone,
            article=session.article,
            image_urls=list(session.image_urls),
            feature_image=session.feature_image,
            error=session.error,
            progress=session.progress,
            busy=session.busy,
            updated_at=session.updated_at,
        )


class ImageResponse(CamelModel):
    image_url: str
    mime_type: str


class MediaOptionsResponse(CamelModel):
    voices: list[str]
    aspect_ratios: list[str]
    styles: list[str]


class TipResponse(CamelModel):
    tip: str


class ChatResponse(CamelModel):
    reply: str


class UserSessionResponse(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    signed_in: bool


class FavoritesResponse(CamelModel):
    favorites: list[int]


class FavoriteToggleResponse(CamelModel):
    tool_id: int
    favorite: bool
