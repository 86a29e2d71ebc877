"""A2ML document parser: directives, sections, references and attestations."""

from a2ml.attestations import extract_attestations
from a2ml.classifier import LineKind, classify_line, is_paragraph_line
from a2ml.config import ParserConfig
from a2ml.errors import (
    A2mlError,
    DocumentNotFoundError,
    DocumentReadError,
    ParseError,
)
from a2ml.parser import parse, parse_file
from a2ml.query import (
    document_to_dict,
    find_section,
    has_section,
    iter_attestations,
    section_text,
)
from a2ml.scanner import Cursor
from a2ml.types import (
    Attestation,
    BulletList,
    CodeBlock,
    ContentBlock,
    Document,
    HorizontalRule,
    Paragraph,
    Reference,
    RequirementStrength,
    Section,
    Table,
)

__all__ = [
    "A2mlError",
    "Attestation",
    "BulletList",
    "CodeBlock",
    "ContentBlock",
    "Cursor",
    "Document",
    "DocumentNotFoundError",
    "DocumentReadError",
    "HorizontalRule",
    "LineKind",
    "Paragraph",
    "ParseError",
    "ParserConfig",
    "Reference",
    "RequirementStrength",
    "Section",
    "Table",
    "classify_line",
    "document_to_dict",
    "extract_attestations",
    "find_section",
    "has_section",
    "is_paragraph_line",
    "iter_attestations",
    "parse",
    "parse_file",
    "section_text",
]

__version__ = "0.1.0"
