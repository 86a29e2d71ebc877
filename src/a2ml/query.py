"""Read-only helpers for consumers of a parsed Document.

Heading lookup, plain-text flattening of a section, attestation iteration,
and a deterministic dict snapshot of the whole tree.
"""

from __future__ import annotations

from collections.abc import Iterator

from a2ml.types import (
    Attestation,
    BulletList,
    CodeBlock,
    ContentBlock,
    Document,
    HorizontalRule,
    Paragraph,
    Section,
    Table,
)


def find_section(document: Document, name: str) -> Section | None:
    """First section whose heading contains ``name`` (case-insensitive)."""
    needle = name.lower()
    for section in document.sections:
        if needle in section.heading.lower():
            return section
    return None


def has_section(document: Document, name: str) -> bool:
    return find_section(document, name) is not None


def section_text(section: Section) -> str:
    """Paragraphs verbatim and bullet items as ``- item``, one per line.

    Code blocks, rules and tables are left out.
    """
    lines: list[str] = []
    for block in section.content:
        match block:
            case Paragraph(text=text):
                lines.append(text)
            case BulletList(items=items):
                lines.extend(f"- {item}" for item in items)
            case _:
                continue
    return "\n".join(lines)


def iter_attestations(document: Document) -> Iterator[tuple[Section, Attestation]]:
    """(section, attestation) pairs in document order."""
    for section in document.sections:
        for attestation in section.attestations:
            yield section, attestation


def block_to_dict(block: ContentBlock) -> dict[str, object]:
    match block:
        case Paragraph(text=text):
            return {"type": "paragraph", "text": text}
        case BulletList(items=items):
            return {"type": "bullet_list", "items": list(items)}
        case Table(headers=headers, rows=rows):
            return {
                "type": "table",
                "headers": list(headers),
                "rows": [list(row) for row in rows],
            }
        case CodeBlock(language=language, code=code):
            return {"type": "code_block", "language": language, "code": code}
        case HorizontalRule():
            return {"type": "horizontal_rule"}


def document_to_dict(document: Document) -> dict[str, object]:
    """Serialize a Document for deterministic snapshots."""

    return {
        "abstract_text": document.abstract_text,
        "requirements": list(document.requirements),
        "sections": [
            {
                "heading": section.heading,
                "level": section.level,
                "line_number": section.line_number,
                "content": [block_to_dict(block) for block in section.content],
                "attestations": [
                    {
                        "claim": attestation.claim,
                        "requirement": attestation.requirement,
                        "reference": attestation.reference,
                    }
                    for attestation in section.attestations
                ],
            }
            for section in document.sections
        ],
        "references": [
            {"id": ref.id, "text": ref.text, "url": ref.url}
            for ref in document.references
        ],
        "raw": document.raw,
    }
