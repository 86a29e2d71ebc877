"""Directive blocks: ``@abstract:``, ``@requires:`` and ``@refs:`` closed by ``@end``.

A directive whose keyword is absent is a plain miss, since every directive is
optional in a document. Once the keyword has matched, the parser is committed:
a missing ``@end`` or an empty item list raises ParseError for the whole
document.
"""

from __future__ import annotations

import logging

from a2ml.errors import committed_failure
from a2ml.references import parse_reference
from a2ml.scanner import (
    Cursor,
    match_line_ending,
    match_tag,
    read_line,
    read_until,
    skip_multispace,
    skip_space,
)
from a2ml.types import Err, Ok, Parsed, Reference, hit, miss

logger = logging.getLogger(__name__)

ABSTRACT_TAG = "@abstract:"
REQUIRES_TAG = "@requires:"
REFS_TAG = "@refs:"
END_TAG = "@end"


def _close(cursor: Cursor, directive: str) -> Cursor:
    """Consume the ``@end`` sentinel and any whitespace after it."""
    after = match_tag(cursor, END_TAG)
    if after is None:
        raise committed_failure(f"{directive} directive is missing {END_TAG}", cursor)
    return skip_multispace(after)


def parse_abstract(cursor: Cursor) -> Parsed[str]:
    """Free text up to the first verbatim ``@end``; the result is trimmed."""
    body_start = match_tag(cursor, ABSTRACT_TAG)
    if body_start is None:
        return miss("abstract", cursor)
    body_start = skip_multispace(body_start)
    found = read_until(body_start, END_TAG)
    if found is None:
        raise committed_failure(
            f"{ABSTRACT_TAG} directive is missing {END_TAG}", body_start,
        )
    body, at_end = found
    return hit(body.strip(), _close(at_end, ABSTRACT_TAG))


def _requirement_item(cursor: Cursor) -> Parsed[str]:
    """``-`` blanks* line EOL."""
    after_dash = match_tag(cursor, "-")
    if after_dash is None:
        return miss("requirement", cursor)
    line, after_line = read_line(skip_space(after_dash))
    rest = match_line_ending(after_line)
    if rest is None:
        return miss("requirement", cursor)
    return hit(line.strip(), rest)


def parse_requires(cursor: Cursor) -> Parsed[tuple[str, ...]]:
    """One or more ``- item`` lines; order is preserved."""
    after_tag = match_tag(cursor, REQUIRES_TAG)
    if after_tag is None:
        return miss("requires", cursor)
    current = skip_multispace(after_tag)
    items: list[str] = []
    while True:
        match _requirement_item(current):
            case Ok(value=step):
                items.append(step.value)
                current = step.rest
            case Err():
                break
    if not items:
        raise committed_failure(f"{REQUIRES_TAG} directive has no items", current)
    logger.debug("Parsed %d requirement(s)", len(items))
    return hit(tuple(items), _close(current, REQUIRES_TAG))


def parse_refs(cursor: Cursor) -> Parsed[tuple[Reference, ...]]:
    """One or more ``[n] text`` reference lines."""
    after_tag = match_tag(cursor, REFS_TAG)
    if after_tag is None:
        return miss("refs", cursor)
    current = skip_multispace(after_tag)
    refs: list[Reference] = []
    while True:
        match parse_reference(current):
            case Ok(value=step):
                refs.append(step.value)
                current = step.rest
            case Err():
                break
    if not refs:
        raise committed_failure(f"{REFS_TAG} directive has no references", current)
    logger.debug("Parsed %d reference(s)", len(refs))
    return hit(tuple(refs), _close(current, REFS_TAG))
