"""
Article workflow endpoints.

Article generation runs in the background after the BRIEFING → GENERATING
transition is accepted; clients poll ``GET /articles/{id}`` for progress.
Pass ``wait=true`` to block until the article is done instead.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import PlainTextResponse

from marketgenius.api.dependencies import get_client, limiter
from marketgenius.api.errors import conflict, generation_failed, not_found, unprocessable
from marketgenius.article import (
    ArticleInputError,
    ArticleSession,
    ArticleStageError,
    ArticleWorkflow,
    InvalidTransitionError,
)
from marketgenius.config import settings
from marketgenius.models.requests import (
    BriefUpdateRequest,
    FeatureImageRequest,
    KeywordRequest,
    TopicRequest,
)
from marketgenius.models.responses import ArticleResponse
from marketgenius.services.errors import GenerationError
from marketgenius.services.gemini import GenerationClient

router = APIRouter()
logger = logging.getLogger(__name__)

# Background article generation tasks, keyed by session id
_generation_tasks: dict[str, asyncio.Task[None]] = {}


@contextmanager
def _workflow_errors(session_id: str) -> Iterator[None]:
    """Map workflow exceptions onto HTTP errors."""
    try:
        yield
    except KeyError:
        raise not_found("Article", session_id)
    except (InvalidTransitionError, ArticleStageError) as e:
        raise conflict(str(e))
    except ArticleInputError as e:
        raise unprocessable(str(e))


def _response(session: ArticleSession) -> ArticleResponse:
    return ArticleResponse.from_session(session)


@router.post(
    "/articles",
    response_model=ArticleResponse,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_article() -> ArticleResponse:
    return _response(ArticleWorkflow().new_session())


@router.get("/articles/{session_id}", response_model=ArticleResponse, response_model_by_alias=True)
async def get_article(session_id: str) -> ArticleResponse:
    with _workflow_errors(session_id):
        return _response(ArticleWorkflow().get(session_id))


@router.delete("/articles/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(session_id: str) -> None:
    workflow = ArticleWorkflow()
    if not workflow.store.delete(session_id):
        raise not_found("Article", session_id)
    task = _generation_tasks.pop(session_id, None)
    if task is not None and not task.done():
        task.cancel()
        logger.info(f"Article {session_id[:8]}: cancelled background generation")


@router.post("/articles/{session_id}/reset", response_model=ArticleResponse, response_model_by_alias=True)
async def reset_article(session_id: str) -> ArticleResponse:
    """Start over. A generation still running finishes into the void."""
    with _workflow_errors(session_id):
        return _response(ArticleWorkflow().reset(session_id))


@router.post("/articles/{session_id}/topic", response_model=ArticleResponse, response_model_by_alias=True)
@limiter.limit(settings.generation_rate_limit)
async def submit_topic(
    request: Request,
    session_id: str,
    body: TopicRequest,
    client: GenerationClient = Depends(get_client),
) -> ArticleResponse:
    """Generate the brief. Failures are reported on the session, not as HTTP errors."""
    with _workflow_errors(session_id):
        session = await ArticleWorkflow(client).submit_topic(session_id, body.topic)
    return _response(session)


@router.post(
    "/articles/{session_id}/outline/regenerate",
    response_model=ArticleResponse,
    response_model_by_alias=True,
)
@limiter.limit(settings.generation_rate_limit)
async def regenerate_outline(
    request: Request,
    session_id: str,
    client: GenerationClient = Depends(get_client),
) -> ArticleResponse:
    with _workflow_errors(session_id):
        session = await ArticleWorkflow(client).regenerate_outline(session_id)
    return _response(session)


@router.patch("/articles/{session_id}/brief", response_model=ArticleResponse, response_model_by_alias=True)
async def update_brief(session_id: str, body: BriefUpdateRequest) -> ArticleResponse:
    with _workflow_errors(session_id):
        session = ArticleWorkflow().update_brief(
            session_id,
            title=body.title,
            outline=body.outline,
            word_count=body.word_count,
            tone=body.tone,
        )
    return _response(session)


@router.post("/articles/{session_id}/keywords", response_model=ArticleResponse, response_model_by_alias=True)
async def add_keyword(session_id: str, body: KeywordRequest) -> ArticleResponse:
    with _workflow_errors(session_id):
        return _response(ArticleWorkflow().add_keyword(session_id, body.keyword))


@router.delete(
    "/articles/{session_id}/keywords/{keyword}",
    response_model=ArticleResponse,
    response_model_by_alias=True,
)
async def remove_keyword(session_id: str, keyword: str) -> ArticleResponse:
    with _workflow_errors(session_id):
        return _response(ArticleWorkflow().remove_keyword(session_id, keyword))


def _forget_task(session_id: str, task: asyncio.Task[None]) -> None:
    if _generation_tasks.get(session_id) is task:
        del _generation_tasks[session_id]


async def _run_generation(workflow: ArticleWorkflow, session_id: str, epoch: int) -> None:
    try:
        await workflow.run_generation(session_id, epoch)
    except KeyError:
        logger.info(f"Article {session_id[:8]}: deleted during generation")


@router.post(
    "/articles/{session_id}/generate",
    response_model=ArticleResponse,
    response_model_by_alias=True,
)
@limiter.limit(settings.generation_rate_limit)
async def generate_article(
    request: Request,
    session_id: str,
    wait: bool = Query(default=False, description="Block until the article is done"),
    client: GenerationClient = Depends(get_client),
) -> ArticleResponse:
    """
    BRIEFING → GENERATING, then write the draft and its images.

    The transition is checked before returning, so an illegal request gets
    409 immediately. The draft and images are produced by a background task
    unless ``wait`` is set.
    """
    workflow = ArticleWorkflow(client)
    with _workflow_errors(session_id):
        epoch = workflow.start_generation(session_id)
        if wait:
            return _response(await workflow.run_generation(session_id, epoch))

        task = asyncio.create_task(_run_generation(workflow, session_id, epoch))
        _generation_tasks[session_id] = task
        task.add_done_callback(lambda t: _forget_task(session_id, t))
        return _response(workflow.get(session_id))


@router.post(
    "/articles/{session_id}/feature-image",
    response_model=ArticleResponse,
    response_model_by_alias=True,
)
@limiter.limit(settings.generation_rate_limit)
async def feature_image(
    request: Request,
    session_id: str,
    body: FeatureImageRequest,
    client: GenerationClient = Depends(get_client),
) -> ArticleResponse:
    """Generate an image and attach it as the finished article's feature image."""
    with _workflow_errors(session_id):
        try:
            session = await ArticleWorkflow(client).generate_feature_image(
                session_id,
                body.prompt,
                style=body.style,
                aspect_ratio=body.aspect_ratio,
            )
        except GenerationError as e:
            raise generation_failed(e)
    return _response(session)


@router.get("/articles/{session_id}/export", response_class=PlainTextResponse)
async def export_article(session_id: str) -> PlainTextResponse:
    """The finished article as a Markdown download."""
    with _workflow_errors(session_id):
        markdown = ArticleWorkflow().export_markdown(session_id)
    return PlainTextResponse(
        markdown,
        media_type="text/markdown",
        headers={"Content-Disposition": 'attachment; filename="article.md"'},
    )
