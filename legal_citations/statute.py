"""
Grammar for statute citations.

    Art. NUMBER [PARAGRAPH-MARKER NUMBER] [LETTER-MARKER a-z]
         [SUBNUMBER-MARKER NUMBER] [CODE]

    Art. 97 OR
    art. 97 al. 1 CO
    Art. 8 Abs. 1 lit. a Ziff. 2 ZGB

Markers may come from any language ("Art. 97 al. 1 OR" is accepted) and
whitespace between tokens is optional. The source language is read off
the markers, not off the statute code.
"""
from __future__ import annotations

import logging
import re

from .errors import CitationParseError, ErrorCode
from .records import StatuteCitation
from .terminology import (
    ARTICLE_MARKERS,
    LETTER_MARKERS,
    NUMBER_MARKERS,
    PARAGRAPH_MARKERS,
    canonical_statute,
    statute_language_from_markers,
)
from .tokenizer import Token, TokenKind, TokenStream, collapse_whitespace, tokenize

logger = logging.getLogger(__name__)

_CODE_RE = re.compile(r"^[A-Za-z]{2,10}\.?$")
_LETTER_RE = re.compile(r"^[A-Za-z]$")

FORMAT_MESSAGE = "Invalid statute citation format. Expected: Art. [number] [paragraph] [statute]"
MISSING_STATUTE_MESSAGE = "Statute citation is missing the statute abbreviation (e.g., OR, ZGB, StGB)"


class _Mismatch(Exception):
    """Internal: the token stream does not fit the grammar."""


def detect_language(text: str) -> str:
    """Source language of a statute citation from the markers it contains."""
    tokens = tokenize(collapse_whitespace(text))
    return statute_language_from_markers(
        t.lower for t in tokens if t.kind is TokenKind.WORD and t.text.endswith(".")
    )


def parse_statute(text: str, *, require_statute: bool = True) -> StatuteCitation:
    """Parse a statute citation or raise ``CitationParseError``.

    With ``require_statute=False`` an article-only citation ("Art. 97")
    is returned with ``statute=None``.
    """
    collapsed = collapse_whitespace(text)
    try:
        citation = _StatuteGrammar(tokenize(collapsed)).parse()
    except _Mismatch:
        raise CitationParseError(ErrorCode.UNRECOGNIZED_FORMAT, FORMAT_MESSAGE) from None
    if citation.statute is None and require_statute:
        logger.debug("statute citation without abbreviation: %r", collapsed)
        raise CitationParseError(ErrorCode.MISSING_STATUTE, MISSING_STATUTE_MESSAGE)
    return citation


class _StatuteGrammar:
    def __init__(self, tokens: list[Token]):
        self.stream = TokenStream(tokens)
        self.markers: list[str] = []

    def parse(self) -> StatuteCitation:
        self._marker(ARTICLE_MARKERS, required=True)
        article = self._integer()
        paragraph = self._integer() if self._marker(PARAGRAPH_MARKERS) else None
        letter = self._letter() if self._marker(LETTER_MARKERS) else None
        number = self._integer() if self._marker(NUMBER_MARKERS) else None
        statute = self._code()
        if not self.stream.at_end():
            raise _Mismatch()
        return StatuteCitation(
            article=article,
            paragraph=paragraph,
            letter=letter,
            number=number,
            statute=canonical_statute(statute) if statute else None,
            language=statute_language_from_markers(self.markers),
        )

    def _marker(self, accepted: frozenset[str], *, required: bool = False) -> bool:
        tok = self.stream.peek()
        if tok is not None and tok.kind is TokenKind.WORD and tok.lower in accepted:
            self.stream.next()
            self.markers.append(tok.lower)
            return True
        if required:
            raise _Mismatch()
        return False

    def _integer(self) -> int:
        tok = self.stream.next()
        if tok is None or not tok.is_integer:
            raise _Mismatch()
        return int(tok.text)

    def _letter(self) -> str:
        tok = self.stream.next()
        if tok is None or tok.kind is not TokenKind.WORD or not _LETTER_RE.match(tok.text):
            raise _Mismatch()
        return tok.text.lower()

    def _code(self) -> str | None:
        tok = self.stream.peek()
        if tok is None:
            return None
        if tok.kind is not TokenKind.WORD or not _CODE_RE.match(tok.text):
            raise _Mismatch()
        self.stream.next()
        return tok.text.rstrip(".")
