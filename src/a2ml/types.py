"""Core types for the A2ML document parser.

Every grammar rule and every consumer shares these types. All dataclasses are
frozen and use slots=True; a parsed Document is never mutated after assembly.

Type hierarchy:
  Ok[T] / Err[E]   : Strict algebraic Result type
  Step[T]          : Parsed value plus the cursor left after it
  Miss             : Local (non-committed) rule failure
  Paragraph, BulletList, Table, CodeBlock, HorizontalRule
                   : ContentBlock variants (Table is reserved, never produced)
  Attestation      : Normative claim found in a paragraph
  Reference        : Numbered entry from an @refs block
  Section          : Heading plus its content blocks
  Document         : Whole parse result
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from a2ml.scanner import Cursor

# ---------------------------------------------------------------------------
# Result ADT
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success case of Result[T, E].

    Usage::

        match parse_section(cursor):
            case Ok(value=step): sections.append(step.value)
            case Err(error=miss): print(miss.rule)
    """
    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failure case of Result[T, E]."""
    error: E


type Result[T, E] = Ok[T] | Err[E]


@dataclass(frozen=True, slots=True)
class Step[T]:
    """A rule's value and the cursor positioned just past it."""

    value: T
    rest: Cursor


@dataclass(frozen=True, slots=True)
class Miss:
    """A rule did not match at ``at``.

    The caller's cursor is untouched, so it may try the next alternative.
    """

    rule: str
    at: Cursor


type Parsed[T] = Result[Step[T], Miss]


def hit[T](value: T, rest: Cursor) -> Parsed[T]:
    return Ok(Step(value, rest))


def miss(rule: str, at: Cursor) -> Err[Miss]:
    return Err(Miss(rule, at))


# ---------------------------------------------------------------------------
# Content blocks
# ---------------------------------------------------------------------------

type RequirementStrength = Literal["MUST", "SHOULD", "COULD"]


@dataclass(frozen=True, slots=True)
class Paragraph:
    text: str


@dataclass(frozen=True, slots=True)
class BulletList:
    items: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Table:
    """Reserved block kind. No grammar rule produces it yet."""

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]


@dataclass(frozen=True, slots=True)
class CodeBlock:
    language: str | None   # None when the fence carries no tag
    code: str              # verbatim, including trailing newline


@dataclass(frozen=True, slots=True)
class HorizontalRule:
    pass


type ContentBlock = Paragraph | BulletList | Table | CodeBlock | HorizontalRule


# ---------------------------------------------------------------------------
# Document tree
# ---------------------------------------------------------------------------

MAX_HEADING_LEVEL = 6


@dataclass(frozen=True, slots=True)
class Attestation:
    """A normative claim embedded in prose."""

    claim: str                          # first line of the source paragraph
    requirement: RequirementStrength
    reference: str | None = None        # external citation; not extracted yet


@dataclass(frozen=True, slots=True)
class Reference:
    """One ``[n] text`` line of an @refs block."""

    id: str            # "1"
    text: str          # description with any URL removed
    url: str | None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Reference.id cannot be empty")


@dataclass(frozen=True, slots=True)
class Section:
    """A heading and the blocks that follow it up to the next heading."""

    heading: str
    level: int
    content: tuple[ContentBlock, ...]
    attestations: tuple[Attestation, ...]
    line_number: int = 0  # not tracked by the parser

    def __post_init__(self) -> None:
        if not 1 <= self.level <= MAX_HEADING_LEVEL:
            raise ValueError(
                f"Section.level must be in [1, {MAX_HEADING_LEVEL}], got {self.level}"
            )


@dataclass(frozen=True, slots=True)
class Document:
    """Parsed A2ML document.

    ``raw`` holds only the trailing text that no grammar rule consumed; it is
    not a serialization of the document.
    """

    abstract_text: str | None
    sections: tuple[Section, ...]
    references: tuple[Reference, ...]
    requirements: tuple[str, ...]
    raw: str
