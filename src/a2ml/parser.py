"""A2ML document parser.

Grammar (informal)::

    document      = ws* abstract? ws* requires? ws* section* ws* refs? ws*
    section       = heading (content_block ws*)*
    heading       = "#"+ blank+ line EOL
    content_block = hrule | bullet_list | code_block | paragraph

Every rule is a pure function of an immutable Cursor. A rule returns
``Ok(Step(value, rest))`` or ``Err(Miss(...))``; a miss leaves the caller where
it was, so optional and repeated rules simply stop. Constructs that fail after
their opening matched (directives, code fences) raise ParseError, and the whole
parse fails with no partial Document.

Text left over once the optional @refs block has been tried is kept in
``Document.raw``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from a2ml.attestations import extract_attestations
from a2ml.blocks import parse_content_block
from a2ml.config import DEFAULT_CONFIG, ParserConfig
from a2ml.directives import parse_abstract, parse_refs, parse_requires
from a2ml.errors import DocumentNotFoundError, DocumentReadError, ParseError
from a2ml.scanner import (
    Cursor,
    match_line_ending,
    match_space1,
    read_line,
    read_while1,
    skip_multispace,
)
from a2ml.types import (
    MAX_HEADING_LEVEL,
    ContentBlock,
    Document,
    Err,
    Ok,
    Parsed,
    Reference,
    Section,
    hit,
    miss,
)

logger = logging.getLogger(__name__)


def parse_heading(cursor: Cursor) -> Parsed[tuple[int, str]]:
    """``#`` run, at least one blank, heading text, line ending.

    The level is the number of ``#`` characters clamped to 6.
    """
    hashes = read_while1(cursor, lambda ch: ch == "#")
    if hashes is None:
        return miss("heading", cursor)
    marks, after_marks = hashes
    after_space = match_space1(after_marks)
    if after_space is None:
        return miss("heading", cursor)
    text, after_text = read_line(after_space)
    rest = match_line_ending(after_text)
    if rest is None:
        return miss("heading", cursor)
    level = min(len(marks), MAX_HEADING_LEVEL)
    return hit((level, text.strip()), rest)


def parse_section(cursor: Cursor) -> Parsed[Section]:
    """A heading followed by content blocks up to the next heading or end."""
    match parse_heading(cursor):
        case Ok(value=step):
            (level, heading), current = step.value, step.rest
        case Err() as failed:
            return failed
    current = skip_multispace(current)
    blocks: list[ContentBlock] = []
    while True:
        match parse_content_block(current):
            case Ok(value=step):
                blocks.append(step.value)
                current = skip_multispace(step.rest)
            case Err():
                break
    section = Section(
        heading=heading,
        level=level,
        content=tuple(blocks),
        attestations=extract_attestations(blocks),
    )
    return hit(section, current)


def parse_document(cursor: Cursor) -> Document:
    """Assemble a Document from ``cursor`` to the end of what the grammar accepts.

    Raises ParseError when a directive or code fence is malformed.
    """
    current = skip_multispace(cursor)

    abstract_text: str | None = None
    match parse_abstract(current):
        case Ok(value=step):
            abstract_text, current = step.value, step.rest
        case Err():
            pass
    current = skip_multispace(current)

    requirements: tuple[str, ...] = ()
    match parse_requires(current):
        case Ok(value=step):
            requirements, current = step.value, step.rest
        case Err():
            pass
    current = skip_multispace(current)

    sections: list[Section] = []
    while True:
        match parse_section(current):
            case Ok(value=step):
                sections.append(step.value)
                current = step.rest
            case Err():
                break
    current = skip_multispace(current)

    references: tuple[Reference, ...] = ()
    match parse_refs(current):
        case Ok(value=step):
            references, current = step.value, step.rest
        case Err():
            pass
    current = skip_multispace(current)

    return Document(
        abstract_text=abstract_text,
        sections=tuple(sections),
        references=references,
        requirements=requirements,
        raw=current.remaining,
    )


def parse(text: str, config: ParserConfig | None = None) -> Document:
    """Parse A2ML source text into a Document.

    Args:
        text: Complete document source.
        config: Error-reporting options; defaults to ParserConfig().

    Returns:
        The parsed Document. Trailing text the grammar does not accept is
        kept in ``Document.raw``.

    Raises:
        ParseError: a directive lacks ``@end``, a directive list is empty, or
            a code fence is unterminated.
    """
    config = config or DEFAULT_CONFIG
    logger.debug("Parsing A2ML from string (%d chars)", len(text))
    try:
        document = parse_document(Cursor(text))
    except ParseError as exc:
        raise exc.with_context(text, config.error_context_chars) from None
    logger.debug(
        "Parsed %d section(s), %d reference(s), %d requirement(s)",
        len(document.sections),
        len(document.references),
        len(document.requirements),
    )
    if document.raw:
        logger.debug("%d trailing char(s) not consumed", len(document.raw))
    return document


def parse_file(path: Path | str, config: ParserConfig | None = None) -> Document:
    """Read and parse an A2ML file.

    Raises:
        DocumentNotFoundError: ``path`` does not exist.
        DocumentReadError: the file cannot be read or decoded.
        ParseError: the content is not valid A2ML.
    """
    config = config or DEFAULT_CONFIG
    path = Path(path)
    logger.debug("Parsing A2ML file: %s", path)
    if not path.exists():
        raise DocumentNotFoundError(path)
    try:
        text = path.read_text(encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentReadError(path, str(exc)) from exc
    return parse(text, config)
