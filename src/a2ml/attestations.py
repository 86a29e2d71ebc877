"""Attestation extraction from parsed paragraphs.

An attestation is any paragraph containing ``Attestation:``. The text after the
first occurrence is checked for a modal prefix (``*Must*``, ``*Should*``,
``*Could*``, in that order). Without one the strength defaults to MUST. The
recorded claim is the paragraph's first line, not the attestation body.

Only the literal prefixes count, so ``**Attestation:** *Should* ...`` (bold
marker still attached to the body) classifies as MUST.
"""

from __future__ import annotations

from collections.abc import Iterable

from a2ml.types import Attestation, ContentBlock, Paragraph, RequirementStrength

ATTESTATION_MARKER = "Attestation:"

_MODAL_PREFIXES: tuple[tuple[str, RequirementStrength], ...] = (
    ("*Must*", "MUST"),
    ("*Should*", "SHOULD"),
    ("*Could*", "COULD"),
)
_DEFAULT_STRENGTH: RequirementStrength = "MUST"


def classify_requirement(body: str) -> RequirementStrength:
    """Modal strength of an attestation body."""
    body = body.strip()
    for prefix, strength in _MODAL_PREFIXES:
        if body.startswith(prefix):
            return strength
    return _DEFAULT_STRENGTH


def attestation_from_paragraph(text: str) -> Attestation | None:
    _, marker, body = text.partition(ATTESTATION_MARKER)
    if not marker:
        return None
    return Attestation(
        claim=text.split("\n", 1)[0],
        requirement=classify_requirement(body),
    )


def extract_attestations(blocks: Iterable[ContentBlock]) -> tuple[Attestation, ...]:
    """Attestations found in ``blocks``, in block order.

    Non-paragraph blocks are skipped. The blocks themselves are not modified.
    """
    found: list[Attestation] = []
    for block in blocks:
        match block:
            case Paragraph(text=text):
                attestation = attestation_from_paragraph(text)
                if attestation is not None:
                    found.append(attestation)
            case _:
                continue
    return tuple(found)
