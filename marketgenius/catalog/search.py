"""Catalog filtering: free-text search, category, favorites."""

from __future__ import annotations

from collections.abc import Iterable

from marketgenius.catalog.metadata import ALL_CATEGORY, FAVORITES_CATEGORY, ToolDescriptor
from marketgenius.catalog.registry import all_tools


def matches_query(tool: ToolDescriptor, query: str) -> bool:
    """Case-insensitive substring match on title or description."""
    needle = query.casefold()
    return needle in tool.title.casefold() or needle in tool.description.casefold()


def filter_tools(
    query: str = "",
    category: str = ALL_CATEGORY,
    favorites: Iterable[int] = (),
) -> list[ToolDescriptor]:
    """Return the tools visible for a search term and category, sorted by title.

    ``"All"`` shows everything; ``"Favorites"`` shows only the ids in
    ``favorites``; any other category must appear in a tool's categories.
    """
    favorite_ids = set(favorites)
    results: list[ToolDescriptor] = []
    for tool in all_tools():
        if query and not matches_query(tool, query):
            continue
        if category == FAVORITES_CATEGORY:
            if tool.id not in favorite_ids:
                continue
        elif category != ALL_CATEGORY and category not in tool.categories:
            continue
        results.append(tool)
    return results
