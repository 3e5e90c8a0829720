"""
Prompt construction for MarketGenius.

Core principles:
- One template per content type, registered in ``registry``
- Templates are pure string builders; no I/O
- Callers use named fields (``PromptRequest``) or the four form slots (``build_prompt``)
- Importing this package fails loudly if any content type lacks a template
"""
from __future__ import annotations

from marketgenius.prompts.brief import (
    BriefPayload,
    coerce_word_count,
    encode_brief_payload,
    parse_brief_payload,
    word_count_band,
)
from marketgenius.prompts.content_types import (
    AnalysisFocus,
    CampaignGoal,
    ContentType,
    ToneOfVoice,
)
from marketgenius.prompts.errors import (
    InvalidBriefPayloadError,
    PromptBuildError,
    UnknownFieldsError,
)
from marketgenius.prompts.registry import (
    PromptRequest,
    build_prompt,
    get_template,
    missing_templates,
    render,
    verify_registry,
)
from marketgenius.prompts.slots import SlotName
from marketgenius.prompts.templates import (  # noqa: F401  (registers templates)
    ads,
    articles,
    copywriting,
    email,
    media,
    social,
    strategy,
    utility,
)

verify_registry()

__all__ = [
    "AnalysisFocus",
    "BriefPayload",
    "CampaignGoal",
    "ContentType",
    "InvalidBriefPayloadError",
    "PromptBuildError",
    "PromptRequest",
    "SlotName",
    "ToneOfVoice",
    "UnknownFieldsError",
    "build_prompt",
    "coerce_word_count",
    "encode_brief_payload",
    "get_template",
    "missing_templates",
    "parse_brief_payload",
    "render",
    "verify_registry",
    "word_count_band",
]
