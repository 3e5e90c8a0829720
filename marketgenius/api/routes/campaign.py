"""Campaign analyst endpoints."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from marketgenius.api.dependencies import get_client, limiter
from marketgenius.api.errors import generation_failed
from marketgenius.config import settings
from marketgenius.models.requests import CampaignReportRequest, MetricsParseRequest
from marketgenius.models.responses import (
    CampaignReportResponse,
    MetricResponse,
    MetricsResponse,
)
from marketgenius.services.campaign import generate_campaign_report, parse_metrics
from marketgenius.services.errors import GenerationError
from marketgenius.services.gemini import GenerationClient

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/campaign/report", response_model=CampaignReportResponse, response_model_by_alias=True)
@limiter.limit(settings.generation_rate_limit)
async def campaign_report(
    request: Request,
    body: CampaignReportRequest,
    client: GenerationClient = Depends(get_client),
) -> CampaignReportResponse:
    """Narrative analysis of a campaign plus the metrics parsed for charting."""
    try:
        result = await generate_campaign_report(
            client,
            name=body.campaign_name,
            metrics=body.metrics,
            focus=body.analysis_focus.value,
            objective=body.objective.value,
        )
    except GenerationError as e:
        raise generation_failed(e)
    return CampaignReportResponse(
        report=result.report,
        metrics=[MetricResponse.from_metric(m) for m in result.metrics],
    )


@router.post("/campaign/metrics", response_model=MetricsResponse, response_model_by_alias=True)
async def campaign_metrics(body: MetricsParseRequest) -> MetricsResponse:
    """Parse ``label: value`` lines without calling the model."""
    return MetricsResponse(metrics=[MetricResponse.from_metric(m) for m in parse_metrics(body.metrics)])
