"""Tests for a2ml.directives (@abstract, @requires, @refs)."""

import pytest

from a2ml.directives import parse_abstract, parse_refs, parse_requires
from a2ml.errors import ParseError
from a2ml.scanner import Cursor
from a2ml.types import Err, Ok


class TestAbstract:
    def test_multiline_body_is_trimmed(self) -> None:
        src = "@abstract:\nThis is a test abstract.\nIt has multiple lines.\n@end\n\n# Next\n"
        result = parse_abstract(Cursor(src))
        assert isinstance(result, Ok)
        step = result.value
        assert step.value == "This is a test abstract.\nIt has multiple lines."
        assert step.rest.remaining == "# Next\n"

    def test_inline_body(self) -> None:
        result = parse_abstract(Cursor("@abstract: Short. @end"))
        assert isinstance(result, Ok)
        assert result.value.value == "Short."
        assert result.value.rest.at_end()

    def test_absent_keyword_is_miss(self) -> None:
        cur = Cursor("# Heading\n")
        result = parse_abstract(cur)
        assert isinstance(result, Err)
        assert result.error.rule == "abstract"
        assert result.error.at == cur

    def test_missing_sentinel_raises(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_abstract(Cursor("@abstract:\nNo closing tag\n"))
        assert excinfo.value.context.startswith("No closing tag")

    def test_body_stops_at_first_sentinel(self) -> None:
        result = parse_abstract(Cursor("@abstract:\nuse @endpoint\n@end\n"))
        assert isinstance(result, Ok)
        assert result.value.value == "use"
        assert result.value.rest.remaining.startswith("point")


class TestRequires:
    def test_items_in_order(self) -> None:
        src = "@requires:\n- UK Employment Rights Act 1996\n- GDPR (EU 2016/679)\n@end\n\n"
        result = parse_requires(Cursor(src))
        assert isinstance(result, Ok)
        assert result.value.value == (
            "UK Employment Rights Act 1996",
            "GDPR (EU 2016/679)",
        )
        assert result.value.rest.at_end()

    def test_dash_without_space_is_accepted(self) -> None:
        result = parse_requires(Cursor("@requires:\n-A\n-  B  \n@end\n"))
        assert isinstance(result, Ok)
        assert result.value.value == ("A", "B")

    def test_zero_items_raises(self) -> None:
        with pytest.raises(ParseError):
            parse_requires(Cursor("@requires:\n@end\n"))

    def test_blank_line_before_sentinel_raises(self) -> None:
        with pytest.raises(ParseError):
            parse_requires(Cursor("@requires:\n- A\n\n@end\n"))

    def test_missing_sentinel_raises(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_requires(Cursor("@requires:\n- A\n# Heading\n"))
        assert excinfo.value.context.startswith("# Heading")

    def test_absent_keyword_is_miss(self) -> None:
        assert isinstance(parse_requires(Cursor("@refs:\n")), Err)


class TestRefs:
    def test_references_with_and_without_url(self) -> None:
        src = "@refs:\n[1] UK Employment Rights Act 1996\n[2] Guidance https://example.org/g\n@end\n"
        result = parse_refs(Cursor(src))
        assert isinstance(result, Ok)
        first, second = result.value.value
        assert (first.id, first.text, first.url) == (
            "1", "UK Employment Rights Act 1996", None,
        )
        assert (second.id, second.text, second.url) == (
            "2", "Guidance", "https://example.org/g",
        )

    def test_zero_references_raises(self) -> None:
        with pytest.raises(ParseError):
            parse_refs(Cursor("@refs:\nnot a reference\n@end\n"))

    def test_missing_sentinel_raises(self) -> None:
        with pytest.raises(ParseError):
            parse_refs(Cursor("@refs:\n[1] Only entry\n"))
