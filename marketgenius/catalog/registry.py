"""Tool catalog registry: build, query, and look up ToolDescriptor entries."""

from __future__ import annotations

from typing import Optional

from marketgenius.catalog.metadata import ToolDescriptor
from marketgenius.catalog.tools.ads import AD_TOOLS, VIDEO_TOOLS
from marketgenius.catalog.tools.blog import BLOG_TOOLS
from marketgenius.catalog.tools.copywriting import COPY_TOOLS, SEO_TOOLS, SUMMARY_TOOLS
from marketgenius.catalog.tools.descriptions import DESCRIPTION_TOOLS
from marketgenius.catalog.tools.email import EMAIL_TOOLS
from marketgenius.catalog.tools.other import OTHER_TOOLS
from marketgenius.catalog.tools.social import SOCIAL_TOOLS
from marketgenius.catalog.tools.views import COMING_SOON_TOOLS, VIEW_TOOLS

ToolCatalog = dict[int, ToolDescriptor]

ALL_TOOL_LISTS: list[list[ToolDescriptor]] = [
    VIEW_TOOLS,
    COMING_SOON_TOOLS,
    BLOG_TOOLS,
    SOCIAL_TOOLS,
    COPY_TOOLS,
    SUMMARY_TOOLS,
    SEO_TOOLS,
    EMAIL_TOOLS,
    DESCRIPTION_TOOLS,
    AD_TOOLS,
    VIDEO_TOOLS,
    OTHER_TOOLS,
]

_CATALOG: ToolCatalog = {}


def _register(tool: ToolDescriptor) -> None:
    if tool.id in _CATALOG:
        raise ValueError(f"Duplicate tool id {tool.id}: {tool.title!r} vs {_CATALOG[tool.id].title!r}")
    _CATALOG[tool.id] = tool


def build_catalog() -> ToolCatalog:
    """Populate ``_CATALOG`` with every tool and return it.

    Idempotent: returns the cached dict on subsequent calls.
    """
    if _CATALOG:
        return _CATALOG

    for tools in ALL_TOOL_LISTS:
        for tool in tools:
            _register(tool)
    return _CATALOG


def get_tool(tool_id: int) -> Optional[ToolDescriptor]:
    return build_catalog().get(tool_id)


def all_tools() -> list[ToolDescriptor]:
    """Every tool, sorted by title (case-insensitive) for display."""
    return sorted(build_catalog().values(), key=lambda t: t.title.casefold())


def tool_ids() -> frozenset[int]:
    return frozenset(build_catalog())
