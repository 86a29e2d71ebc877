"""Line classification for A2ML block alternation.

A line's category is decided from its leading characters only. The paragraph
rule relies on this: a line is prose only if it opens no other construct.
"""

from __future__ import annotations

from typing import Literal

from a2ml.scanner import Cursor

type LineKind = Literal[
    "heading", "rule", "fence", "directive", "list_item", "paragraph",
]

# Checked in order; first prefix that matches wins.
_PREFIXES: tuple[tuple[str, LineKind], ...] = (
    ("#", "heading"),
    ("---", "rule"),
    ("```", "fence"),
    ("@", "directive"),
    ("- ", "list_item"),
)


def classify_line(line: str) -> LineKind:
    """Return the block category a line opens.

    Blank lines classify as "paragraph"; the paragraph rule trims them away.
    """
    for prefix, kind in _PREFIXES:
        if line.startswith(prefix):
            return kind
    return "paragraph"


def is_paragraph_line(cursor: Cursor) -> bool:
    """True when the line at ``cursor`` may continue a paragraph."""
    if cursor.at_end():
        return False
    return classify_line(cursor.current_line()) == "paragraph"
