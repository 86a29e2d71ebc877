"""Exception types raised by the A2ML parser."""

from __future__ import annotations

from pathlib import Path

from a2ml.scanner import Cursor

DEFAULT_CONTEXT_CHARS = 50


class A2mlError(Exception):
    """Base class for every error the parser raises."""


class ParseError(A2mlError):
    """The input does not match the A2ML grammar.

    ``context`` holds the start of the unparsed remainder at the failure point
    and ``position`` its offset in the source. No line or column is computed.
    """

    def __init__(
        self, message: str, context: str = "", position: int | None = None,
    ) -> None:
        self.message = message
        self.context = context
        self.position = position
        super().__init__(f"Failed to parse A2ML document: {message} at: {context!r}")

    def with_context(self, text: str, limit: int) -> ParseError:
        """Copy of this error whose context is ``limit`` chars of ``text``."""
        if self.position is None:
            return self
        return ParseError(
            self.message, text[self.position:self.position + limit], self.position,
        )


def committed_failure(message: str, cursor: Cursor) -> ParseError:
    """Error for a construct whose opening matched but whose body did not."""
    return ParseError(message, cursor.snippet(DEFAULT_CONTEXT_CHARS), cursor.pos)


class DocumentNotFoundError(A2mlError):
    """The document path does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"File not found: {path}")


class DocumentReadError(A2mlError):
    """The document exists but could not be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")
