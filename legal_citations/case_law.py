"""
Grammar for Federal Supreme Court citations.

    PREFIX VOLUME SECTION PAGE [MARKER CONSIDERATION]

    BGE 145 III 229
    ATF 140 II 315 consid. 4.2
    DTF 138 Ia 1 E. 3.1.2

Tokens must be separated by whitespace. The strict grammar only accepts
the seven section codes; the loose grammar accepts any alphabetic section
token and exists so that "BGE 145 VII 229" can be reported as an invalid
section (with its position) instead of an unrecognized format.
"""
from __future__ import annotations

import logging
import re

from .errors import CitationParseError, ErrorCode
from .records import CaseLawCitation
from .terminology import (
    CASE_LAW_PREFIXES,
    CONSIDERATION_MARKERS,
    VALID_SECTIONS,
    canonical_section,
    language_for_prefix,
)
from .tokenizer import Token, TokenKind, TokenStream, collapse_whitespace, tokenize

logger = logging.getLogger(__name__)

_CONSIDERATION_RE = re.compile(r"^\d+(?:\.\d+)*$")
_SECTION_WORD_RE = re.compile(r"^[^\W\d_]+$")

FORMAT_MESSAGE = "Invalid BGE citation format. Expected: BGE/ATF/DTF [volume] [section] [page]"


class _Mismatch(Exception):
    """Internal: the token stream does not fit the grammar."""


def invalid_section_message(section: str) -> str:
    return f"Invalid BGE section '{section}'. Valid sections: {', '.join(VALID_SECTIONS)}"


def detect_language(prefix: str) -> str:
    """BGE -> de, ATF -> fr, DTF -> it."""
    return language_for_prefix(prefix)


def parse_case_law(text: str) -> CaseLawCitation:
    """Parse a case-law citation or raise ``CitationParseError``."""
    collapsed = collapse_whitespace(text)
    tokens = tokenize(collapsed)
    try:
        return _CaseLawGrammar(tokens, loose=False).parse()
    except _Mismatch:
        pass

    # Strict grammar failed; see whether only the section is wrong.
    try:
        _CaseLawGrammar(tokens, loose=True).parse()
    except _Mismatch:
        raise CitationParseError(ErrorCode.UNRECOGNIZED_FORMAT, FORMAT_MESSAGE) from None

    section_token = tokens[2]
    logger.debug("invalid BGE section %r in %r", section_token.text, collapsed)
    raise CitationParseError(
        ErrorCode.INVALID_SECTION,
        invalid_section_message(section_token.text),
        position=section_token.position,
    )


class _CaseLawGrammar:
    def __init__(self, tokens: list[Token], *, loose: bool):
        self.stream = TokenStream(tokens)
        self.loose = loose

    def parse(self) -> CaseLawCitation:
        prefix = self._prefix()
        volume = self._integer()
        section = self._section()
        page = self._integer()
        consideration = self._consideration()
        if not self.stream.at_end():
            raise _Mismatch()
        prefix_upper = prefix.text.upper()
        return CaseLawCitation(
            prefix=prefix_upper,
            volume=int(volume.text),
            section=canonical_section(section.text) or section.text,
            page=int(page.text),
            consideration=consideration,
            language=detect_language(prefix_upper),
        )

    def _expect(self) -> Token:
        tok = self.stream.next()
        if tok is None or not tok.spaced:
            raise _Mismatch()
        return tok

    def _prefix(self) -> Token:
        tok = self._expect()
        if not tok.is_bare_word or tok.text.upper() not in CASE_LAW_PREFIXES:
            raise _Mismatch()
        return tok

    def _integer(self) -> Token:
        tok = self._expect()
        if not tok.is_integer:
            raise _Mismatch()
        return tok

    def _section(self) -> Token:
        tok = self._expect()
        if not tok.is_bare_word:
            raise _Mismatch()
        if self.loose:
            if not _SECTION_WORD_RE.match(tok.text):
                raise _Mismatch()
        elif canonical_section(tok.text) is None:
            raise _Mismatch()
        return tok

    def _consideration(self) -> str | None:
        if self.stream.at_end():
            return None
        marker = self._expect()
        if marker.kind is not TokenKind.WORD or marker.lower not in CONSIDERATION_MARKERS:
            raise _Mismatch()
        path = self._expect()
        if path.kind is not TokenKind.NUMBER or not _CONSIDERATION_RE.match(path.text):
            raise _Mismatch()
        return path.text
