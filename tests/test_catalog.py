"""Tests for the tool catalog and its search/category filtering."""
from __future__ import annotations

import pytest

from marketgenius.catalog import (
    ALL_CATEGORY,
    CATEGORIES,
    FAVORITES_CATEGORY,
    FieldKind,
    LinkedView,
    ToolDescriptor,
    all_tools,
    filter_tools,
    get_tool,
    matches_query,
    tool_ids,
)
from marketgenius.prompts import ContentType, SlotName, ToneOfVoice, missing_templates


# =============================================================================
# Catalog integrity
# =============================================================================


class TestCatalogIntegrity:
    """Every descriptor is well-formed and ids are unique."""

    def test_catalog_size(self) -> None:
        assert len(all_tools()) == 89
        assert len(tool_ids()) == 89

    def test_sorted_by_title(self) -> None:
        titles = [t.title.casefold() for t in all_tools()]
        assert titles == sorted(titles)

    def test_runnable_tools_have_template_and_inputs(self) -> None:
        for tool in all_tools():
            if tool.runnable:
                assert tool.content_type is not None
                assert tool.inputs, f"tool {tool.id} has no inputs"
                assert tool.content_type not in missing_templates()

    def test_view_tools_are_not_runnable(self) -> None:
        long_article = get_tool(1)
        assert long_article is not None
        assert long_article.linked_view == LinkedView.CONTENT
        assert not long_article.runnable

    def test_coming_soon_tools(self) -> None:
        soon = [t for t in all_tools() if t.linked_view == LinkedView.COMING_SOON]
        assert {t.id for t in soon} == {4, 5, 7, 8, 9, 10, 11}

    def test_categories_are_known(self) -> None:
        known = set(CATEGORIES) | {"eCommerce"}
        for tool in all_tools():
            assert set(tool.categories) <= known, tool.id

    def test_unknown_id(self) -> None:
        assert get_tool(999_999) is None


class TestDescriptorValidation:
    """``ToolDescriptor`` rejects malformed entries."""

    def test_needs_view_or_content_type(self) -> None:
        with pytest.raises(ValueError, match="linked view or a content type"):
            ToolDescriptor(1000, "Broken", "No way to run", ("Other",))

    def test_rejects_duplicate_slots(self) -> None:
        from marketgenius.catalog.metadata import text

        with pytest.raises(ValueError, match="same slot"):
            ToolDescriptor(
                1001, "Broken", "Two topics", ("Other",),
                content_type=ContentType.BLOG_POST,
                inputs=(text(SlotName.TOPIC, "A"), text(SlotName.TOPIC, "B")),
            )

    def test_input_for(self) -> None:
        tool = get_tool(100)
        assert tool is not None
        spec = tool.input_for(SlotName.TOPIC)
        assert spec is not None and spec.label == "Theme or Category"
        assert tool.input_for(SlotName.GOAL) is None

    def test_select_options_from_enum(self) -> None:
        tone_selects = [
            spec
            for tool in all_tools()
            for spec in tool.inputs
            if spec.kind == FieldKind.SELECT and spec.label == "Tone"
        ]
        assert tone_selects
        for spec in tone_selects:
            assert len(spec.options) == len(ToneOfVoice)
            assert (ToneOfVoice.FRIENDLY.value, ToneOfVoice.FRIENDLY.value) in spec.options


# =============================================================================
# Search and filtering
# =============================================================================


class TestFilterTools:
    """Title/description search plus category filter."""

    def test_all_returns_everything(self) -> None:
        assert filter_tools() == all_tools()

    def test_search_is_case_insensitive(self) -> None:
        titles = {t.title for t in filter_tools(query="IMAGE EDITOR")}
        assert "AI Image Editor" in titles

    def test_search_matches_description(self) -> None:
        tool = get_tool(12)
        assert tool is not None
        assert matches_query(tool, "retro filter")

    def test_category_filter(self) -> None:
        blog = filter_tools(category="Blog")
        assert blog
        assert all("Blog" in t.categories for t in blog)

    def test_search_and_category_combine(self) -> None:
        results = filter_tools(query="outline", category="Blog")
        assert results
        for tool in results:
            assert "Blog" in tool.categories
            assert matches_query(tool, "outline")

    def test_favorites_category(self) -> None:
        results = filter_tools(category=FAVORITES_CATEGORY, favorites=[12, 100])
        assert {t.id for t in results} == {12, 100}

    def test_favorites_category_empty(self) -> None:
        assert filter_tools(category=FAVORITES_CATEGORY) == []

    def test_unknown_category_matches_nothing(self) -> None:
        assert filter_tools(category="Podcasts") == []

    def test_pseudo_categories_listed(self) -> None:
        assert CATEGORIES[0] == ALL_CATEGORY
        assert CATEGORIES[-1] == FAVORITES_CATEGORY
