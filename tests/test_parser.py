"""Tests for the public parse entry points."""

from __future__ import annotations

import threading

import pytest

import mdlite
from mdlite import InvalidInputError, MdliteError, ParseOptions, parse, to_html, to_text
from mdlite.schemas import Bold, Document, HeadingNode, Italic, ParagraphNode, Text

SAMPLE_INPUTS = [
    "",
    "# This is a TEST H1 Heading",
    "## This is a TEST H2 Heading",
    "### This is a TEST H3 Heading",
    "**This Text should be bold**",
    "*This Text should be italicized*",
    "# Title\n\nSome **bold** and *italic*\n####### overflow",
    "*** ** * **** *",
]


class TestParse:
    """Tests for parse function."""

    def test_level_one_heading(self) -> None:
        assert parse("# Heading") == Document(
            blocks=[HeadingNode(level=1, children=[Text(text="Heading")])]
        )

    def test_level_six_heading(self) -> None:
        assert parse("###### Heading").blocks == [HeadingNode(level=6, children=[Text(text="Heading")])]

    def test_overlong_heading_keeps_literal_marker(self) -> None:
        assert parse("####### Heading").blocks == [HeadingNode(level=6, children=[Text(text="# Heading")])]

    def test_bold(self) -> None:
        assert parse("**bold**").blocks == [ParagraphNode(children=[Bold(children=[Text(text="bold")])])]

    def test_italic(self) -> None:
        assert parse("*italic*").blocks == [ParagraphNode(children=[Italic(children=[Text(text="italic")])])]

    def test_unmatched_delimiter_is_literal(self) -> None:
        assert parse("*no close").blocks == [ParagraphNode(children=[Text(text="*no close")])]

    def test_nesting(self) -> None:
        (paragraph,) = parse("**bold *and italic* text**").blocks

        assert paragraph.children == [
            Bold(
                children=[
                    Text(text="bold "),
                    Italic(children=[Text(text="and italic")]),
                    Text(text=" text"),
                ]
            )
        ]

    def test_plain_text(self) -> None:
        assert parse("Just plain text").blocks == [ParagraphNode(children=[Text(text="Just plain text")])]

    def test_marker_without_space_is_paragraph(self) -> None:
        assert parse("#nospace").blocks == [ParagraphNode(children=[Text(text="#nospace")])]

    def test_empty_input(self) -> None:
        assert parse("") == Document(blocks=[])

    def test_whitespace_only_input(self) -> None:
        assert parse(" \n\t\n") == Document(blocks=[])

    def test_options_are_applied(self) -> None:
        document = parse("# Intro", options=ParseOptions(header_ids=True, header_prefix="s-"))
        assert document.blocks[0].anchor == "s-intro"

    def test_tree_serializes_to_json(self) -> None:
        payload = parse("# *Hi*").model_dump(mode="json")

        assert payload == {
            "blocks": [
                {
                    "kind": "heading",
                    "level": 1,
                    "anchor": None,
                    "children": [{"kind": "italic", "children": [{"kind": "text", "text": "Hi"}]}],
                }
            ]
        }

    def test_tree_round_trips_through_validation(self) -> None:
        document = parse("# Title\n**a *b* c**")
        assert Document.model_validate(document.model_dump()) == document


class TestToHtml:
    """Tests for to_html function."""

    def test_sample_headings(self) -> None:
        assert to_html("# This is a TEST H1 Heading") == "<h1>This is a TEST H1 Heading</h1>\n"
        assert to_html("### This is a TEST H3 Heading") == "<h3>This is a TEST H3 Heading</h3>\n"

    def test_sample_emphasis(self) -> None:
        assert to_html("**This Text should be bold**") == "<p><strong>This Text should be bold</strong></p>\n"
        assert to_html("*This Text should be italicized*") == "<p><em>This Text should be italicized</em></p>\n"

    def test_underscore_emphasis(self) -> None:
        assert to_html("_it_ __b__") == "<p><em>it</em> <strong>b</strong></p>\n"

    def test_escapes_raw_markup(self) -> None:
        html = to_html("<script>alert('x')</script>")
        assert "<script>" not in html
        assert html == "<p>&lt;script&gt;alert(&#39;x&#39;)&lt;/script&gt;</p>\n"

    def test_empty_input(self) -> None:
        assert to_html("") == ""


class TestToText:
    """Tests for to_text function."""

    def test_returns_text_only(self) -> None:
        assert to_text("## **Hello** *there*\n\nplain") == "Hello there\nplain"


class TestInputValidation:
    """Caller contract violations."""

    @pytest.mark.parametrize("value", [None, 42, b"# bytes", ["# list"]])
    def test_rejects_non_text(self, value: object) -> None:
        with pytest.raises(InvalidInputError, match="Expected markup text as str"):
            parse(value)  # type: ignore[arg-type]

    def test_rejection_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            to_html(3.14)  # type: ignore[arg-type]

    def test_rejection_is_an_mdlite_error(self) -> None:
        with pytest.raises(MdliteError):
            to_text(None)  # type: ignore[arg-type]

    def test_rejects_wrong_options_type(self) -> None:
        with pytest.raises(InvalidInputError, match="Expected ParseOptions"):
            parse("# x", options={"header_ids": True})  # type: ignore[arg-type]


class TestProperties:
    """Determinism and purity."""

    @pytest.mark.parametrize("text", SAMPLE_INPUTS)
    def test_deterministic(self, text: str) -> None:
        assert parse(text) == parse(text)
        assert to_html(text) == to_html(text)

    def test_concurrent_calls_agree(self) -> None:
        text = "# Title\n**bold *and italic* text**\n" * 50
        expected = to_html(text)
        results: list[str] = []

        def worker() -> None:
            results.append(to_html(text))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == [expected] * 8

    def test_package_exports_entry_points(self) -> None:
        assert mdlite.parse is parse
        assert mdlite.to_html is to_html
