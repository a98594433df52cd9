"""Render citations in a target language and style."""
from __future__ import annotations

import logging

from .errors import CitationParseError, ErrorCode
from .models import FormatResult
from .parser import parse
from .records import CaseLawCitation, Language, ParsedCitation, StatuteCitation, Style
from .rendering import render_case_law, render_statute

logger = logging.getLogger(__name__)

UNSUPPORTED_TYPE_MESSAGE = "Unsupported citation type for formatting"


def render(record: ParsedCitation, language: Language | str, style: Style | str = Style.FULL) -> str:
    """Render a parsed record; raises ``CitationParseError`` for doctrine."""
    language = Language(language).value
    if isinstance(record, CaseLawCitation):
        return render_case_law(record, language, style)
    if isinstance(record, StatuteCitation):
        return render_statute(record, language, style)
    raise CitationParseError(ErrorCode.UNSUPPORTED_TYPE, UNSUPPORTED_TYPE_MESSAGE)


def format_citation(
    citation: str,
    target_language: Language | str,
    style: Style | str = Style.FULL,
) -> FormatResult:
    """Format a Swiss legal citation to a specific language and style.

    "BGE 145 III 229", "fr"            -> "ATF 145 III 229"
    "Art. 97 Abs. 1 OR", "fr"          -> "art. 97 al. 1 CO"
    "BGE 145 III 229 E. 4.2", "de", "short" -> "BGE 145 III 229"
    """
    target_language = Language(target_language)
    style = Style(style)
    try:
        record = parse(citation)
        formatted = render(record, target_language, style)
    except CitationParseError as e:
        logger.debug("format failed for %r: %s", citation, e.code.value)
        return FormatResult(
            success=False,
            original=citation,
            target_language=target_language,
            style=style,
            error=e.message,
            error_code=e.code.value,
        )
    return FormatResult(
        success=True,
        formatted=formatted,
        original=citation,
        target_language=target_language,
        style=style,
    )
