"""Tool catalog: immutable descriptors for every content-generation tool."""
from __future__ import annotations

from marketgenius.catalog.metadata import (
    ALL_CATEGORY,
    CATEGORIES,
    FAVORITES_CATEGORY,
    ComponentType,
    FieldKind,
    FieldSpec,
    LinkedView,
    ToolDescriptor,
)
from marketgenius.catalog.registry import all_tools, build_catalog, get_tool, tool_ids
from marketgenius.catalog.search import filter_tools, matches_query

__all__ = [
    "ALL_CATEGORY",
    "CATEGORIES",
    "FAVORITES_CATEGORY",
    "ComponentType",
    "FieldKind",
    "FieldSpec",
    "LinkedView",
    "ToolDescriptor",
    "all_tools",
    "build_catalog",
    "filter_tools",
    "get_tool",
    "matches_query",
    "tool_ids",
]
