"""Tests for a2ml.blocks content block alternation."""

import pytest

from a2ml.blocks import (
    parse_bullet_list,
    parse_code_block,
    parse_content_block,
    parse_horizontal_rule,
    parse_paragraph,
)
from a2ml.errors import ParseError
from a2ml.scanner import Cursor
from a2ml.types import (
    BulletList,
    CodeBlock,
    Err,
    HorizontalRule,
    Ok,
    Paragraph,
)


def _block(src: str) -> object:
    result = parse_content_block(Cursor(src))
    assert isinstance(result, Ok)
    return result.value.value


class TestHorizontalRule:
    def test_rule(self) -> None:
        result = parse_horizontal_rule(Cursor("---\nnext"))
        assert isinstance(result, Ok)
        assert result.value.value == HorizontalRule()
        assert result.value.rest.remaining == "next"

    def test_requires_line_ending_right_after(self) -> None:
        assert isinstance(parse_horizontal_rule(Cursor("----\n")), Err)
        assert isinstance(parse_horizontal_rule(Cursor("---")), Err)


class TestBulletList:
    def test_items(self) -> None:
        result = parse_bullet_list(Cursor("- Item 1\n- Item 2\n- Item 3\n\n"))
        assert isinstance(result, Ok)
        assert result.value.value == BulletList(items=("Item 1", "Item 2", "Item 3"))
        assert result.value.rest.remaining == "\n"

    def test_stops_at_first_non_item(self) -> None:
        result = parse_bullet_list(Cursor("- a\n-b\n"))
        assert isinstance(result, Ok)
        assert result.value.value == BulletList(items=("a",))
        assert result.value.rest.remaining == "-b\n"

    def test_no_items_is_miss(self) -> None:
        cur = Cursor("text\n")
        result = parse_bullet_list(cur)
        assert isinstance(result, Err)
        assert result.error.at == cur


class TestCodeBlock:
    def test_language_and_verbatim_body(self) -> None:
        src = "```python\ndef f():\n    return 1\n```\nafter\n"
        result = parse_code_block(Cursor(src))
        assert isinstance(result, Ok)
        assert result.value.value == CodeBlock(
            language="python", code="def f():\n    return 1\n",
        )
        assert result.value.rest.remaining == "after\n"

    def test_no_language_tag(self) -> None:
        result = parse_code_block(Cursor("```\nx = 1\n```"))
        assert isinstance(result, Ok)
        assert result.value.value == CodeBlock(language=None, code="x = 1\n")
        assert result.value.rest.at_end()

    def test_body_keeps_structural_lines(self) -> None:
        src = "```\n# not a heading\n---\n- not a list\n```\n"
        block = _block(src)
        assert block == CodeBlock(
            language=None, code="# not a heading\n---\n- not a list\n",
        )

    def test_unterminated_fence_raises(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_code_block(Cursor("```\nnever closed\n"))
        assert excinfo.value.context == "never closed\n"

    def test_fence_at_end_of_input_raises(self) -> None:
        with pytest.raises(ParseError):
            parse_code_block(Cursor("```python"))


class TestParagraph:
    def test_lines_joined(self) -> None:
        result = parse_paragraph(Cursor("This is a paragraph.\nIt has two lines.\n\n"))
        assert isinstance(result, Ok)
        assert result.value.value == Paragraph(
            text="This is a paragraph.\nIt has two lines.",
        )
        assert result.value.rest.at_end()

    def test_stops_before_structural_line(self) -> None:
        result = parse_paragraph(Cursor("Prose.\n- item\n"))
        assert isinstance(result, Ok)
        assert result.value.value == Paragraph(text="Prose.")
        assert result.value.rest.remaining == "- item\n"

    def test_blank_run_is_miss(self) -> None:
        assert isinstance(parse_paragraph(Cursor("\n\n   \n")), Err)

    def test_line_without_ending_is_not_consumed(self) -> None:
        assert isinstance(parse_paragraph(Cursor("dangling")), Err)
        result = parse_paragraph(Cursor("first\ndangling"))
        assert isinstance(result, Ok)
        assert result.value.value == Paragraph(text="first")
        assert result.value.rest.remaining == "dangling"


class TestContentBlockOrder:
    def test_rule_is_never_a_paragraph(self) -> None:
        assert _block("---\n") == HorizontalRule()

    def test_list_before_paragraph(self) -> None:
        assert _block("- x\n") == BulletList(items=("x",))

    def test_code_before_paragraph(self) -> None:
        assert isinstance(_block("```sh\nls\n```\n"), CodeBlock)

    def test_heading_is_no_block(self) -> None:
        assert isinstance(parse_content_block(Cursor("# Next\n")), Err)

    def test_directive_is_no_block(self) -> None:
        assert isinstance(parse_content_block(Cursor("@refs:\n")), Err)

    def test_long_dash_line_is_no_block(self) -> None:
        assert isinstance(parse_content_block(Cursor("----\n")), Err)
