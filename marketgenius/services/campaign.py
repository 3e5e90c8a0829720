"""Campaign analyst: narrative report plus chartable metrics."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from marketgenius.prompts import ContentType, PromptRequest, render
from marketgenius.services.gemini import GenerationClient

logger = logging.getLogger(__name__)

# Leading decimal number, the way a lenient float parse reads "1.27 avg".
_LEADING_FLOAT = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_STRIP_CHARS = re.compile(r"[$,%]")


@dataclass(frozen=True)
class Metric:
    label: str
    value: float
    original_value: str


@dataclass(frozen=True)
class CampaignReport:
    report: str
    metrics: list[Metric] = field(default_factory=list)


def parse_metrics(text: str) -> list[Metric]:
    """Parse ``label: value`` lines into metrics.

    ``$``, ``,`` and ``%`` are stripped before the number is read; lines with
    no colon or no leading number are skipped.  Everything after the first
    colon is the value, so ``"Time: 10:30"`` keeps ``"10:30"`` as its
    original text.
    """
    metrics: list[Metric] = []
    for line in text.splitlines():
        if ":" not in line:
            continue
        label, _, raw_value = line.partition(":")
        raw_value = raw_value.strip()
        match = _LEADING_FLOAT.match(_STRIP_CHARS.sub("", raw_value).strip())
        if match is None:
            continue
        metrics.append(Metric(label=label.strip(), value=float(match.group()), original_value=raw_value))
    return metrics


async def generate_campaign_report(
    client: GenerationClient,
    name: str,
    metrics: str,
    focus: str,
    objective: str,
) -> CampaignReport:
    request = PromptRequest(
        ContentType.CAMPAIGN_REPORT,
        {"name": name, "metrics": metrics, "focus": focus, "objective": objective},
    )
    report = await client.generate_text(render(request))
    parsed = parse_metrics(metrics)
    logger.info(f"Campaign report for {name!r}: {len(parsed)} metrics parsed")
    return CampaignReport(report=report, metrics=parsed)
