"""Tests for image placeholder extraction and replacement."""
from __future__ import annotations

from marketgenius.article.placeholders import (
    find_placeholders,
    image_markdown,
    replace_first,
)


class TestFindPlaceholders:
    """Only full-line markers count."""

    def test_full_line_only(self) -> None:
        text = "Intro\n[A red fox in snow]\nsome text [not a placeholder] inline\n"
        found = find_placeholders(text)
        assert [p.description for p in found] == ["A red fox in snow"]
        assert found[0].marker == "[A red fox in snow]"

    def test_image_prefix(self) -> None:
        found = find_placeholders("para\n[IMAGE: a rocket at dawn]\nmore")
        assert found[0].description == "a rocket at dawn"
        assert found[0].marker == "[IMAGE: a rocket at dawn]"

    def test_document_order_with_duplicates(self) -> None:
        text = "[sunset]\ntext\n[beach]\nmore\n[sunset]"
        assert [p.description for p in find_placeholders(text)] == ["sunset", "beach", "sunset"]

    def test_markdown_link_is_not_placeholder(self) -> None:
        assert find_placeholders("See [the docs](https://example.com) for details.") == []

    def test_no_placeholders(self) -> None:
        assert find_placeholders("Just prose.\n\n## Heading\n") == []

    def test_crlf_line_endings(self) -> None:
        found = find_placeholders("Intro\r\n[A red fox in snow]\r\nEnd")
        assert [p.description for p in found] == ["A red fox in snow"]
        assert found[0].marker == "[A red fox in snow]"

    def test_inserted_image_is_not_placeholder(self) -> None:
        assert find_placeholders(image_markdown("sunset", "url")) == []


class TestReplacement:
    """Each marker is replaced once, first occurrence first."""

    def test_image_markdown(self) -> None:
        assert image_markdown("a [bright] sun", "data:image/png;base64,AA==") == (
            "\n\n![a bright sun](data:image/png;base64,AA==)\n\n"
        )

    def test_replace_first_only(self) -> None:
        text = "[sunset]\nmiddle\n[sunset]"
        once = replace_first(text, "[sunset]", "IMG1")
        assert once == "IMG1\nmiddle\n[sunset]"
        twice = replace_first(once, "[sunset]", "IMG2")
        assert twice == "IMG1\nmiddle\nIMG2"

    def test_identical_plain_markers(self) -> None:
        """Alt text of the first image never absorbs the second marker."""
        text = "intro\n[sunset]\nmiddle\n[sunset]\nend"
        for index, placeholder in enumerate(find_placeholders(text)):
            text = replace_first(text, placeholder.marker, image_markdown(placeholder.description, f"url{index}"))
        assert find_placeholders(text) == []
        assert "!\n\n![" not in text
        assert text.index("![sunset](url0)") < text.index("![sunset](url1)")

    def test_replace_ignores_inline_occurrence(self) -> None:
        text = "see ![sunset](a) here\n[sunset]"
        assert replace_first(text, "[sunset]", "IMG") == "see ![sunset](a) here\nIMG"

    def test_replace_keeps_crlf(self) -> None:
        assert replace_first("a\r\n[fox]\r\nb", "[fox]", "IMG") == "a\r\nIMG\r\nb"

    def test_round_trip_count(self) -> None:
        text = "a\n[one]\nb\n[two]\nc\n[one]"
        placeholders = find_placeholders(text)
        for index, placeholder in enumerate(placeholders):
            text = replace_first(text, placeholder.marker, image_markdown(placeholder.description, f"url{index}"))
        assert find_placeholders(text) == []
        assert text.count("![") == len(placeholders) == 3
