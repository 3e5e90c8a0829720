"""Article workflow: brief, draft, and in-order image placeholder resolution."""
from __future__ import annotations

from marketgenius.article.placeholders import Placeholder, find_placeholders
from marketgenius.article.session_store import (
    ArticleSession,
    ArticleSessionStore,
    get_article_store,
    reset_article_store,
)
from marketgenius.article.state_machine import ArticleStage, InvalidTransitionError
from marketgenius.article.workflow import (
    ArticleInputError,
    ArticleStageError,
    ArticleWorkflow,
    export_markdown,
)

__all__ = [
    "ArticleInputError",
    "ArticleSession",
    "ArticleSessionStore",
    "ArticleStage",
    "ArticleStageError",
    "ArticleWorkflow",
    "InvalidTransitionError",
    "Placeholder",
    "export_markdown",
    "find_placeholders",
    "get_article_store",
    "reset_article_store",
]
