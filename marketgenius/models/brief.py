"""Structured blog brief returned by the brief model."""
from __future__ import annotations

from pydantic import Field

from marketgenius.models.base import CamelModel


class BlogBrief(CamelModel):
    """Title, keyword list and Markdown outline for a long-form article."""

    title: str = Field(..., description="The SEO-friendly title for the blog post.")
    keywords: list[str] = Field(..., description="An array of 5-7 relevant keywords.")
    outline: str = Field(..., description="The detailed content outline in Markdown format.")
