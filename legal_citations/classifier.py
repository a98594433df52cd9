"""Decide which citation grammar applies to a raw string."""
from __future__ import annotations

import re

from .errors import CitationParseError, ErrorCode
from .records import CitationType
from .tokenizer import collapse_whitespace

_CASE_LAW_RE = re.compile(r"^(?:BGE|ATF|DTF)", re.IGNORECASE)
_STATUTE_RE = re.compile(r"^Art\.", re.IGNORECASE)
# Capitalized author name(s), optionally slash-joined, followed by a comma.
_DOCTRINE_RE = re.compile(
    r"^[A-ZÄÖÜ][A-ZÄÖÜa-zäöüéèàç'-]*(?:/[A-ZÄÖÜ][A-ZÄÖÜa-zäöüéèàç'-]*)*,\s*\S"
)


def detect_citation_type(text: str) -> CitationType | None:
    """Structurally detected family of ``text``, or None."""
    collapsed = collapse_whitespace(text)
    if _CASE_LAW_RE.match(collapsed):
        return CitationType.BGE
    if _STATUTE_RE.match(collapsed):
        return CitationType.STATUTE
    if _DOCTRINE_RE.match(collapsed):
        return CitationType.DOCTRINE
    return None


def classify(text: str, type_hint: CitationType | str | None = None) -> CitationType | None:
    """Family of ``text``; None when nothing matches.

    ``type_hint`` asserts the expected family. Disagreement with the
    detected family raises ``CitationParseError(TYPE_MISMATCH)``.
    """
    detected = detect_citation_type(text)
    if type_hint is None or detected is None:
        return detected
    hint = CitationType(type_hint)
    if hint is not detected:
        raise CitationParseError(
            ErrorCode.TYPE_MISMATCH,
            f"Citation type hint '{hint.value}' does not match detected type '{detected.value}'",
        )
    return detected
