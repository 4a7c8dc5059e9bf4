"""
Citation marker extraction.

Finds ``[Doc <id>: <name>]`` markers in generated text.

Grammar::

    marker := "[Doc " digits ":" ws* name ws* "]"
    digits := [0-9]+
    name   := one or more characters other than "[" and "]"

Text that does not match is ignored. A bracket inside the name, a missing
colon, a non-numeric id or an unterminated bracket is never a marker, and the
name must contain something besides whitespace.

Dependencies: re, backend.models
System role: Citation marker parsing
"""

import re
from collections.abc import Iterator

from backend.models.citation import CitationMarker

CITATION_PATTERN = re.compile(r"\[Doc ([0-9]+):\s*([^\[\]]+)\]")


def iter_citation_markers(text: str) -> Iterator[CitationMarker]:
    """
    Yield citation markers left to right.

    Args:
        text: Arbitrary text, usually a model reply

    Yields:
        CitationMarker: One per well-formed marker, duplicates included
    """
    if not text:
        return
    for match in CITATION_PATTERN.finditer(text):
        name = match.group(2).strip()
        if not name:
            continue
        yield CitationMarker(id=int(match.group(1)), name=name)


class CitationMarkers:
    """
    Restartable view over the markers in a text.

    Each iteration scans the text again, so the sequence can be consumed
    any number of times with the same result.
    """

    def __init__(self, text: str) -> None:
        self._text = text or ""

    def __iter__(self) -> Iterator[CitationMarker]:
        return iter_citation_markers(self._text)

    def __repr__(self) -> str:
        return f"CitationMarkers({len(self._text)} chars)"


def extract_citation_markers(text: str) -> list[CitationMarker]:
    """Return every citation marker in ``text`` as a list."""
    return list(iter_citation_markers(text))
