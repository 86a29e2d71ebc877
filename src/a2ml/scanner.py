"""Immutable cursor and lexical primitives for the A2ML grammar.

A ``Cursor`` is a position in the source text. Primitives never mutate a cursor;
they return a new one (or ``None`` when they do not match), so a failed
alternative cannot move its caller's position.

Line endings are ``\\n`` or ``\\r\\n``. "Space" means blanks and tabs;
"multispace" additionally covers ``\\r`` and ``\\n``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

_SPACE = frozenset(" \t")
_MULTISPACE = frozenset(" \t\r\n")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Read position in an A2ML source string."""

    text: str
    pos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.pos <= len(self.text):
            raise ValueError(
                f"Cursor.pos must be in [0, {len(self.text)}], got {self.pos}"
            )

    @property
    def remaining(self) -> str:
        return self.text[self.pos:]

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Next character, or "" at end of input."""
        return self.text[self.pos:self.pos + 1]

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def advance(self, count: int) -> Cursor:
        return Cursor(self.text, self.pos + count)

    def moved_to(self, pos: int) -> Cursor:
        return Cursor(self.text, pos)

    def current_line(self) -> str:
        """Text from the cursor to the end of its line, line ending excluded."""
        line, _ = read_line(self)
        return line

    def snippet(self, limit: int = 50) -> str:
        return self.text[self.pos:self.pos + limit]


def _skip(cursor: Cursor, chars: frozenset[str]) -> Cursor:
    text = cursor.text
    pos = cursor.pos
    while pos < len(text) and text[pos] in chars:
        pos += 1
    return cursor if pos == cursor.pos else cursor.moved_to(pos)


def skip_space(cursor: Cursor) -> Cursor:
    return _skip(cursor, _SPACE)


def skip_multispace(cursor: Cursor) -> Cursor:
    return _skip(cursor, _MULTISPACE)


def match_space1(cursor: Cursor) -> Cursor | None:
    """At least one blank or tab."""
    after = skip_space(cursor)
    return after if after.pos > cursor.pos else None


def match_tag(cursor: Cursor, literal: str) -> Cursor | None:
    if cursor.startswith(literal):
        return cursor.advance(len(literal))
    return None


def match_line_ending(cursor: Cursor) -> Cursor | None:
    if cursor.startswith("\n"):
        return cursor.advance(1)
    if cursor.startswith("\r\n"):
        return cursor.advance(2)
    return None


def read_line(cursor: Cursor) -> tuple[str, Cursor]:
    """Consume up to (not including) the next line ending.

    Always succeeds; returns "" when the cursor already sits on a line ending
    or at end of input.
    """
    text = cursor.text
    end = text.find("\n", cursor.pos)
    if end < 0:
        end = len(text)
    elif end > cursor.pos and text[end - 1] == "\r":
        end -= 1
    return text[cursor.pos:end], cursor.moved_to(end)


def read_until(cursor: Cursor, sentinel: str) -> tuple[str, Cursor] | None:
    """Consume everything before the first verbatim ``sentinel``.

    The returned cursor sits on the sentinel. ``None`` when it never occurs.
    """
    idx = cursor.text.find(sentinel, cursor.pos)
    if idx < 0:
        return None
    return cursor.text[cursor.pos:idx], cursor.moved_to(idx)


def read_while1(
    cursor: Cursor, predicate: Callable[[str], bool],
) -> tuple[str, Cursor] | None:
    """Consume one or more characters satisfying ``predicate``."""
    text = cursor.text
    pos = cursor.pos
    while pos < len(text) and predicate(text[pos]):
        pos += 1
    if pos == cursor.pos:
        return None
    return text[cursor.pos:pos], cursor.moved_to(pos)
