"""
Article workflow: topic → brief → draft → images.

Each operation loads the session from the store, checks the stage, calls the
generation client and writes the result back.  Model failures never escape:
they are recorded on the session (``error``) and the session lands in the
editable stage the user came from.

Calls are not cancelled when the user starts over.  A result that comes back
for a session that has since moved on (different epoch or stage, or deleted)
is dropped with a log line instead of written.
"""

from __future__ import annotations

import logging
from typing import Optional

from marketgenius.article.placeholders import find_placeholders, image_markdown, replace_first
from marketgenius.article.session_store import (
    ArticleSession,
    ArticleSessionStore,
    get_article_store,
)
from marketgenius.article.state_machine import ArticleStage, can_edit_brief
from marketgenius.prompts import (
    ContentType,
    PromptRequest,
    ToneOfVoice,
    build_prompt,
    coerce_word_count,
    render,
)
from marketgenius.services.audio import to_data_uri
from marketgenius.services.errors import GenerationError
from marketgenius.services.gemini import GenerationClient, get_generation_client

logger = logging.getLogger(__name__)

ARTICLE_IMAGE_ASPECT_RATIO = "16:9"

WRITING_MESSAGE = "Writing your draft..."
SCANNING_MESSAGE = "Scanning for image opportunities..."
BRIEF_ERROR_MESSAGE = "Could not generate brief. Please try again."
REGENERATE_ERROR_MESSAGE = "Could not regenerate outline. Please try again."
ARTICLE_ERROR_MESSAGE = "Could not generate the article. Please try again."


class ArticleStageError(Exception):
    """The operation is not available in the session's current stage."""

    def __init__(self, operation: str, stage: ArticleStage) -> None:
        self.operation = operation
        self.stage = stage
        super().__init__(f"Cannot {operation} while the article is {stage.value}")


class ArticleInputError(ValueError):
    """User input rejected by the workflow (empty topic, duplicate keyword, ...)."""


def progress_message(index: int, total: int, description: str) -> str:
    return f'Generating image {index} of {total}: "{description}"'


def export_markdown(session: ArticleSession) -> str:
    """``# title``, optional feature image, then the article body."""
    feature = (
        f"![Generated feature image]({session.feature_image})\n\n"
        if session.feature_image
        else ""
    )
    return f"# {session.title}\n\n{feature}{session.article}"


class ArticleWorkflow:
    """Drives ``ArticleSession`` records through the article stages."""

    def __init__(
        self,
        client: Optional[GenerationClient] = None,
        store: Optional[ArticleSessionStore] = None,
    ):
        self._client = client
        self.store = store or get_article_store()

    @property
    def client(self) -> GenerationClient:
        """Resolved on first model call; editing steps never need it."""
        if self._client is None:
            self._client = get_generation_client()
        return self._client

    # ── Helpers ─────────────────────────────────────────────────────────

    def _require_stage(self, session: ArticleSession, operation: str, *stages: ArticleStage) -> None:
        if session.stage not in stages:
            raise ArticleStageError(operation, session.stage)

    def _is_current(self, session: ArticleSession, epoch: int, stage: ArticleStage) -> bool:
        live = self.store.get(session.session_id)
        if live is session and session.request_epoch == epoch and session.stage == stage:
            return True
        logger.info(
            f"Article {session.session_id[:8]}: discarding result of stale request "
            f"(epoch {epoch}, now {session.request_epoch}, stage {session.stage.value})"
        )
        return False

    def _brief_prompt(self, topic: str) -> str:
        return build_prompt(ContentType.BLOG_BRIEF_AND_OUTLINE, topic)

    def _article_prompt(self, session: ArticleSession) -> str:
        return render(PromptRequest(
            ContentType.BLOG_POST_FROM_BRIEF,
            {
                "title": session.title,
                "keywords": ", ".join(session.keywords),
                "tone": session.tone,
                "outline": session.outline,
                "word_count": str(coerce_word_count(session.word_count)),
            },
        ))

    # ── Session lifecycle ───────────────────────────────────────────────

    def new_session(self) -> ArticleSession:
        return self.store.create()

    def get(self, session_id: str) -> ArticleSession:
        return self.store.get_or_raise(session_id)

    def reset(self, session_id: str) -> ArticleSession:
        """Start over from INITIAL; any call still in flight becomes stale."""
        session = self.store.get_or_raise(session_id)
        if session.stage != ArticleStage.INITIAL:
            session.transition_to(ArticleStage.INITIAL)
        session.next_epoch()
        session.clear()
        return session

    # ── INITIAL ─────────────────────────────────────────────────────────

    async def submit_topic(self, session_id: str, topic: str) -> ArticleSession:
        """Request a brief for ``topic``; INITIAL → BRIEFING on success."""
        session = self.store.get_or_raise(session_id)
        self._require_stage(session, "submit a topic", ArticleStage.INITIAL)
        topic = topic.strip()
        if not topic:
            raise ArticleInputError("Topic is required")

        session.topic = topic
        session.error = None
        session.busy = True
        epoch = session.next_epoch()

        try:
            brief = await self.client.generate_brief(self._brief_prompt(topic))
        except GenerationError as e:
            if self._is_current(session, epoch, ArticleStage.INITIAL):
                session.error = e.message or BRIEF_ERROR_MESSAGE
                session.busy = False
                session.touch()
            return session

        if self._is_current(session, epoch, ArticleStage.INITIAL):
            session.apply_brief(brief)
            session.busy = False
            session.transition_to(ArticleStage.BRIEFING)
        return session

    # ── BRIEFING ────────────────────────────────────────────────────────

    async def regenerate_outline(self, session_id: str) -> ArticleSession:
        """Replace only the outline; title, keywords and stage are untouched."""
        session = self.store.get_or_raise(session_id)
        self._require_stage(session, "regenerate the outline", ArticleStage.BRIEFING)
        session.error = None
        session.busy = True
        epoch = session.next_epoch()

        try:
            brief = await self.client.generate_brief(self._brief_prompt(session.topic))
        except GenerationError as e:
            if self._is_current(session, epoch, ArticleStage.BRIEFING):
                logger.warning(f"Article {session_id[:8]}: outline regeneration failed: {e}")
                session.error = REGENERATE_ERROR_MESSAGE
                session.busy = False
                session.touch()
            return session

        if self._is_current(session, epoch, ArticleStage.BRIEFING):
            session.outline = brief.outline
            if session.brief is not None:
                session.brief = session.brief.model_copy(update={"outline": brief.outline})
            else:
                session.brief = brief
            session.busy = False
            session.touch()
        return session

    def update_brief(
        self,
        session_id: str,
        *,
        title: Optional[str] = None,
        outline: Optional[str] = None,
        word_count: Optional[str | int] = None,
        tone: Optional[str] = None,
    ) -> ArticleSession:
        """Apply user edits to the brief. Fields left as ``None`` are kept."""
        session = self.store.get_or_raise(session_id)
        if not can_edit_brief(session.stage):
            raise ArticleStageError("edit the brief", session.stage)
        if tone is not None:
            try:
                session.tone = ToneOfVoice(tone).value
            except ValueError as e:
                raise ArticleInputError(f"Unknown tone of voice: {tone!r}") from e
        if title is not None:
            session.title = title
        if outline is not None:
            session.outline = outline
        if word_count is not None:
            session.word_count = str(word_count)
        session.touch()
        return session

    def add_keyword(self, session_id: str, keyword: str) -> ArticleSession:
        session = self.store.get_or_raise(session_id)
        if not can_edit_brief(session.stage):
            raise ArticleStageError("edit keywords", session.stage)
        keyword = keyword.strip()
        if not keyword:
            raise ArticleInputError("Keyword is empty")
        if keyword in session.keywords:
            raise ArticleInputError(f"Keyword already added: {keyword!r}")
        session.keywords.append(keyword)
        session.touch()
        return session

    def remove_keyword(self, session_id: str, keyword: str) -> ArticleSession:
        session = self.store.get_or_raise(session_id)
        if not can_edit_brief(session.stage):
            raise ArticleStageError("edit keywords", session.stage)
        session.keywords = [k for k in session.keywords if k != keyword]
        session.touch()
        return session

    # ── GENERATING ──────────────────────────────────────────────────────

    def start_generation(self, session_id: str) -> int:
        """BRIEFING → GENERATING. Returns the epoch ``run_generation`` must carry.

        Split from ``run_generation`` so a route can reject an illegal
        transition synchronously and then run the slow part in the background.
        """
        session = self.store.get_or_raise(session_id)
        session.transition_to(ArticleStage.GENERATING)
        session.error = None
        session.article = ""
        session.progress = WRITING_MESSAGE
        return session.next_epoch()

    async def run_generation(self, session_id: str, epoch: int) -> ArticleSession:
        """Write the draft, then resolve image placeholders one at a time.

        The article text is updated after every image so a poller sees it
        fill in.  Any model failure returns the session to BRIEFING.
        """
        session = self.store.get_or_raise(session_id)
        stage = ArticleStage.GENERATING
        try:
            draft = await self.client.generate_text(self._article_prompt(session))
            if not self._is_current(session, epoch, stage):
                return session
            session.article = draft
            session.progress = SCANNING_MESSAGE
            session.touch()

            placeholders = find_placeholders(draft)
            total = len(placeholders)
            for index, placeholder in enumerate(placeholders, start=1):
                session.progress = progress_message(index, total, placeholder.description)
                image = await self.client.generate_image(
                    placeholder.description,
                    aspect_ratio=ARTICLE_IMAGE_ASPECT_RATIO,
                )
                if not self._is_current(session, epoch, stage):
                    return session
                url = to_data_uri(image.data, image.mime_type)
                session.image_urls.append(url)
                session.article = replace_first(
                    session.article,
                    placeholder.marker,
                    image_markdown(placeholder.description, url),
                )
                session.touch()
        except GenerationError as e:
            if self._is_current(session, epoch, stage):
                logger.error(f"Article {session_id[:8]}: generation failed: {e}")
                session.error = e.message or ARTICLE_ERROR_MESSAGE
                session.progress = ""
                session.transition_to(ArticleStage.BRIEFING)
            return session
        except Exception as e:
            logger.exception(f"Article {session_id[:8]}: unexpected generation error: {e}")
            if self._is_current(session, epoch, stage):
                session.error = ARTICLE_ERROR_MESSAGE
                session.progress = ""
                session.transition_to(ArticleStage.BRIEFING)
            return session

        session.progress = ""
        session.transition_to(ArticleStage.DONE)
        logger.info(f"Article {session_id[:8]}: done with {total} image(s)")
        return session

    async def submit_brief(self, session_id: str) -> ArticleSession:
        """Generate the article in one call (start + run)."""
        epoch = self.start_generation(session_id)
        return await self.run_generation(session_id, epoch)

    # ── DONE ────────────────────────────────────────────────────────────

    def set_feature_image(self, session_id: str, url: str) -> ArticleSession:
        session = self.store.get_or_raise(session_id)
        self._require_stage(session, "set a feature image", ArticleStage.DONE)
        session.feature_image = url
        session.touch()
        return session

    async def generate_feature_image(
        self,
        session_id: str,
        prompt: str,
        style: Optional[str] = None,
        aspect_ratio: str = "1:1",
    ) -> ArticleSession:
        """Generate an image and use it as the article's feature image.

        Unlike the workflow steps, a failure here is raised to the caller:
        the session is unchanged and stays in DONE.
        """
        session = self.store.get_or_raise(session_id)
        self._require_stage(session, "set a feature image", ArticleStage.DONE)
        epoch = session.request_epoch
        image = await self.client.generate_image(prompt, aspect_ratio=aspect_ratio, style=style)
        if not self._is_current(session, epoch, ArticleStage.DONE):
            return session
        return self.set_feature_image(session_id, to_data_uri(image.data, image.mime_type))

    def export_markdown(self, session_id: str) -> str:
        session = self.store.get_or_raise(session_id)
        self._require_stage(session, "export", ArticleStage.DONE)
        return export_markdown(session)
