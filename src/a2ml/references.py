"""Numbered reference lines: ``[1] Some Act 1996 https://example.org/act``.

URL detection is a substring heuristic, not a URL grammar. Text that mentions
"http" before a real link is split at the first "http".
"""

from __future__ import annotations

from a2ml.scanner import (
    Cursor,
    match_line_ending,
    match_tag,
    read_line,
    read_while1,
    skip_space,
)
from a2ml.types import Parsed, Reference, hit, miss

_URL_MARKERS = ("http://", "https://")
_URL_TERMINATORS = frozenset(")")


def split_reference_url(text: str) -> tuple[str, str | None]:
    """Split reference text into (description, url).

    Applies only when the text contains "http://" or "https://". The URL runs
    from the first "http" to the next whitespace or ")". The description is
    whatever precedes it, trimmed.
    """
    text = text.strip()
    if not any(marker in text for marker in _URL_MARKERS):
        return text, None
    start = text.find("http")
    tail = text[start:]
    end = len(tail)
    for idx, ch in enumerate(tail):
        if ch.isspace() or ch in _URL_TERMINATORS:
            end = idx
            break
    return text[:start].strip(), tail[:end]


def parse_reference(cursor: Cursor) -> Parsed[Reference]:
    """``[`` digits ``]`` blanks* line EOL."""
    after_open = match_tag(cursor, "[")
    if after_open is None:
        return miss("reference", cursor)
    digits = read_while1(after_open, str.isdigit)
    if digits is None:
        return miss("reference", cursor)
    ref_id, after_id = digits
    after_close = match_tag(after_id, "]")
    if after_close is None:
        return miss("reference", cursor)
    line, after_line = read_line(skip_space(after_close))
    rest = match_line_ending(after_line)
    if rest is None:
        return miss("reference", cursor)
    text, url = split_reference_url(line)
    return hit(Reference(id=ref_id, text=text, url=url), rest)
