"""Content block rules: horizontal rule, bullet list, code block, paragraph.

``parse_content_block`` tries them in that fixed order and keeps the first
match. The order keeps ``---`` from being read as a one-line paragraph. It also
keeps a fenced code block from being split into paragraph lines.
"""

from __future__ import annotations

from collections.abc import Callable

from a2ml.classifier import is_paragraph_line
from a2ml.errors import committed_failure
from a2ml.scanner import (
    Cursor,
    match_line_ending,
    match_space1,
    match_tag,
    read_line,
    read_until,
)
from a2ml.types import (
    BulletList,
    CodeBlock,
    ContentBlock,
    Err,
    HorizontalRule,
    Ok,
    Paragraph,
    Parsed,
    hit,
    miss,
)

FENCE = "```"
RULE = "---"


def parse_horizontal_rule(cursor: Cursor) -> Parsed[ContentBlock]:
    """``---`` immediately followed by a line ending."""
    after_rule = match_tag(cursor, RULE)
    if after_rule is None:
        return miss("horizontal_rule", cursor)
    rest = match_line_ending(after_rule)
    if rest is None:
        return miss("horizontal_rule", cursor)
    return hit(HorizontalRule(), rest)


def _list_item(cursor: Cursor) -> Parsed[str]:
    """``-`` blanks+ line EOL."""
    after_dash = match_tag(cursor, "-")
    if after_dash is None:
        return miss("list_item", cursor)
    after_space = match_space1(after_dash)
    if after_space is None:
        return miss("list_item", cursor)
    line, after_line = read_line(after_space)
    rest = match_line_ending(after_line)
    if rest is None:
        return miss("list_item", cursor)
    return hit(line.strip(), rest)


def parse_bullet_list(cursor: Cursor) -> Parsed[ContentBlock]:
    items: list[str] = []
    current = cursor
    while True:
        match _list_item(current):
            case Ok(value=step):
                items.append(step.value)
                current = step.rest
            case Err():
                break
    if not items:
        return miss("bullet_list", cursor)
    return hit(BulletList(items=tuple(items)), current)


def parse_code_block(cursor: Cursor) -> Parsed[ContentBlock]:
    """Fenced code; the body is kept verbatim up to the next fence.

    Once the opening fence has matched, a missing line ending after the
    language tag or a missing closing fence is a ParseError.
    """
    after_fence = match_tag(cursor, FENCE)
    if after_fence is None:
        return miss("code_block", cursor)
    tag, after_tag = read_line(after_fence)
    body_start = match_line_ending(after_tag)
    if body_start is None:
        raise committed_failure("code fence has no line ending", after_tag)
    found = read_until(body_start, FENCE)
    if found is None:
        raise committed_failure("unterminated code fence", body_start)
    code, at_close = found
    rest = at_close.advance(len(FENCE))
    rest = match_line_ending(rest) or rest
    language = tag.strip() or None
    return hit(CodeBlock(language=language, code=code), rest)


def parse_paragraph(cursor: Cursor) -> Parsed[ContentBlock]:
    """Consecutive prose lines, each ended by a line ending.

    Joined with newlines and trimmed; an all-blank run is a miss rather than
    an empty paragraph.
    """
    lines: list[str] = []
    current = cursor
    while is_paragraph_line(current):
        line, after_line = read_line(current)
        rest = match_line_ending(after_line)
        if rest is None:
            break
        lines.append(line)
        current = rest
    text = "\n".join(lines).strip()
    if not text:
        return miss("paragraph", cursor)
    return hit(Paragraph(text=text), current)


CONTENT_BLOCK_RULES: tuple[Callable[[Cursor], Parsed[ContentBlock]], ...] = (
    parse_horizontal_rule,
    parse_bullet_list,
    parse_code_block,
    parse_paragraph,
)


def parse_content_block(cursor: Cursor) -> Parsed[ContentBlock]:
    """First matching alternative of CONTENT_BLOCK_RULES."""
    for rule in CONTENT_BLOCK_RULES:
        result = rule(cursor)
        if isinstance(result, Ok):
            return result
    return miss("content_block", cursor)
