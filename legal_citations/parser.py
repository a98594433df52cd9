"""
Parse operation: classify a raw citation and run the matching grammar.
"""
from __future__ import annotations

import logging

from .case_law import parse_case_law
from .classifier import classify
from .doctrine import parse_doctrine
from .errors import CitationParseError, ErrorCode
from .models import ParseResult
from .records import CitationType, ParsedCitation
from .rendering import normalize
from .statute import parse_statute
from .tokenizer import collapse_whitespace

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "Citation string is empty"
UNRECOGNIZED_MESSAGE = "Unrecognized citation format. Supported formats: BGE/ATF/DTF, Art. [statute], doctrine"

_GRAMMARS = {
    CitationType.BGE: parse_case_law,
    CitationType.STATUTE: parse_statute,
    CitationType.DOCTRINE: parse_doctrine,
}


def parse(text: str, citation_type: CitationType | str | None = None) -> ParsedCitation:
    """Parse ``text`` into a citation record.

    Raises ``CitationParseError`` for every expected input problem
    (empty, unrecognized, type mismatch, invalid section, missing statute).
    """
    collapsed = collapse_whitespace(text)
    if not collapsed:
        raise CitationParseError(ErrorCode.EMPTY_CITATION, EMPTY_MESSAGE)

    family = classify(collapsed, citation_type)
    if family is None:
        raise CitationParseError(ErrorCode.UNRECOGNIZED_FORMAT, UNRECOGNIZED_MESSAGE)
    return _GRAMMARS[family](collapsed)


def parse_citation(citation: str, citation_type: CitationType | str | None = None) -> ParseResult:
    """Parse a Swiss legal citation into its components."""
    try:
        record = parse(citation, citation_type)
    except CitationParseError as e:
        logger.debug("parse failed for %r: %s", citation, e.code.value)
        return ParseResult(
            success=False,
            original=citation,
            error=e.message,
            error_code=e.code.value,
        )
    return ParseResult(
        success=True,
        parsed=record.to_dict(),
        original=citation,
        normalized=normalize(record),
    )
