"""
Recognizer for doctrine (commentary/textbook) citations.

    GAUCH/SCHLUEP/SCHMID, OR AT, N 123
    TERCIER/PICHONNAZ, Le droit des obligations, 6e éd., 2019, n. 1050
    HONSELL, Schweizerisches Haftpflichtrecht, 2. Aufl., S. 45

Doctrine citations are parsed so they can be validated and inspected, but
no formatter exists for them.
"""
from __future__ import annotations

import re

from .errors import CitationParseError, ErrorCode
from .records import DoctrineCitation
from .tokenizer import collapse_whitespace

_NAME = r"[A-ZÄÖÜ][A-ZÄÖÜa-zäöüéèàç'-]*"
_AUTHORS_RE = re.compile(rf"^{_NAME}(?:/{_NAME})*$")
_EDITION_RE = re.compile(
    r"^\d{1,2}(?:\.\s?Aufl\.?|e\s?éd\.?|a\s?ed\.?|(?:st|nd|rd|th)\s?ed\.?)$",
    re.IGNORECASE,
)
_YEAR_RE = re.compile(r"^(?:1[89]|20)\d{2}$")
_MARGIN_RE = re.compile(r"^(N|Rz\.?|n\.)\s?(\d+)$")
_PAGE_RE = re.compile(r"^(S\.|p\.)\s?(\d+)$")

_GERMAN_HINTS = ("N", "Rz", "Rz.", "S.")
_FRENCH_HINTS = ("n.", "p.")

FORMAT_MESSAGE = "Invalid doctrine citation format. Expected: AUTHOR[/AUTHOR], Title[, N 123]"


def parse_doctrine(text: str) -> DoctrineCitation:
    """Parse a doctrine citation or raise ``CitationParseError``."""
    collapsed = collapse_whitespace(text)
    parts = [p.strip() for p in collapsed.split(",")]
    if len(parts) < 2 or not _AUTHORS_RE.match(parts[0]) or not parts[1]:
        raise CitationParseError(ErrorCode.UNRECOGNIZED_FORMAT, FORMAT_MESSAGE)

    authors = tuple(parts[0].split("/"))
    title_parts = [parts[1]]
    edition = year = margin = page = None
    hints: list[str] = []

    # Trailing segments are matched from the right; anything unrecognized
    # before them still belongs to the title ("OR AT, Band I").
    tail = parts[2:]
    consumed = len(tail)
    for i in range(len(tail) - 1, -1, -1):
        segment = tail[i]
        margin_match = _MARGIN_RE.match(segment)
        page_match = _PAGE_RE.match(segment)
        if margin is None and margin_match:
            margin = int(margin_match.group(2))
            hints.append(margin_match.group(1))
        elif page is None and page_match:
            page = int(page_match.group(2))
            hints.append(page_match.group(1))
        elif year is None and _YEAR_RE.match(segment):
            year = int(segment)
        elif edition is None and _EDITION_RE.match(segment):
            edition = segment
            hints.append(segment)
        else:
            break
        consumed = i
    title_parts.extend(tail[:consumed])
    if any(not p for p in title_parts):
        raise CitationParseError(ErrorCode.UNRECOGNIZED_FORMAT, FORMAT_MESSAGE)

    return DoctrineCitation(
        authors=authors,
        title=", ".join(title_parts),
        edition=edition,
        year=year,
        margin_number=margin,
        page=page,
        language=_detect_language(hints),
    )


def _detect_language(hints: list[str]) -> str:
    for hint in hints:
        if hint in _FRENCH_HINTS or "éd" in hint:
            return "fr"
        if hint in _GERMAN_HINTS or "Aufl" in hint:
            return "de"
    return "de"


def render_doctrine(citation: DoctrineCitation) -> str:
    """Canonical rendering, keeping the markers of the source language."""
    parts = ["/".join(citation.authors), citation.title]
    if citation.edition:
        parts.append(citation.edition)
    if citation.year is not None:
        parts.append(str(citation.year))
    if citation.margin_number is not None:
        parts.append(f"{'n.' if citation.language == 'fr' else 'N'} {citation.margin_number}")
    if citation.page is not None:
        parts.append(f"{'p.' if citation.language == 'fr' else 'S.'} {citation.page}")
    return ", ".join(parts)
