"""Parser configuration, optionally loaded from a JSON file."""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from pathlib import Path

import orjson

from a2ml.errors import DEFAULT_CONTEXT_CHARS


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Knobs that affect error reporting and file loading, never the grammar."""

    error_context_chars: int = DEFAULT_CONTEXT_CHARS  # remainder shown in ParseError
    encoding: str = "utf-8"                           # used by parse_file

    def __post_init__(self) -> None:
        if self.error_context_chars < 0:
            raise ValueError(
                f"error_context_chars must be >= 0, got {self.error_context_chars}"
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {self.encoding!r}") from exc

    @classmethod
    def from_json(cls, path: Path) -> ParserConfig:
        """Load from a JSON object; absent keys keep their defaults."""
        data = orjson.loads(path.read_bytes())
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a JSON object")
        return cls(
            error_context_chars=int(
                data.get("error_context_chars", DEFAULT_CONTEXT_CHARS)
            ),
            encoding=str(data.get("encoding", "utf-8")),
        )


DEFAULT_CONFIG = ParserConfig()
