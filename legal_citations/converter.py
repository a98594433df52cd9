"""
Convert citations between language renderings of the same family.

Case-law and statute grammars are not interconvertible: a BGE reference
can become an ATF or DTF reference, a German statute citation a French or
Italian one, but never one family into the other.
"""
from __future__ import annotations

import logging

from .errors import CitationParseError, ErrorCode
from .formatter import render
from .models import ConversionResult
from .parser import parse
from .records import CitationType, Language, ParsedCitation, StatuteCitation, Style
from .terminology import find_statute_family

logger = logging.getLogger(__name__)

UNSUPPORTED_TARGET_MESSAGE = "Conversion to doctrine format is not yet supported"


def convert_citation(
    citation: str,
    to_format: CitationType | str,
    from_format: CitationType | str | None = None,
    target_language: Language | str = Language.DE,
) -> ConversionResult:
    """Convert a Swiss legal citation to ``target_language`` within its family."""
    to_format = CitationType(to_format)
    from_format = CitationType(from_format) if from_format is not None else None
    target_language = Language(target_language)

    def failure(code: ErrorCode, message: str, detected: CitationType | None) -> ConversionResult:
        logger.debug("convert failed for %r: %s", citation, code.value)
        return ConversionResult(
            success=False,
            original=citation,
            from_format=detected or from_format,
            to_format=to_format,
            target_language=target_language,
            error=message,
            error_code=code.value,
        )

    try:
        record = parse(citation, from_format)
    except CitationParseError as e:
        return failure(e.code, e.message, None)

    detected = record.citation_type
    if to_format is CitationType.DOCTRINE:
        return failure(ErrorCode.UNSUPPORTED_TARGET, UNSUPPORTED_TARGET_MESSAGE, detected)
    if detected is not to_format:
        return failure(
            ErrorCode.FORMAT_MISMATCH,
            f"Cannot convert from '{detected.value}' to '{to_format.value}'. "
            "Citation type must match target format.",
            detected,
        )

    converted = render(record, target_language, Style.FULL)
    return ConversionResult(
        success=True,
        converted=converted,
        original=citation,
        from_format=detected,
        to_format=to_format,
        target_language=target_language,
        warnings=conversion_warnings(record, target_language) or None,
    )


def conversion_warnings(record: ParsedCitation, language: Language) -> list[str]:
    warnings: list[str] = []
    if not isinstance(record, StatuteCitation) or not record.statute:
        return warnings
    family = find_statute_family(record.statute)
    if family is None:
        warnings.append(f"No translation found for statute '{record.statute}'; kept as-is")
    elif language is Language.EN and family.key == "criminal_code":
        warnings.append(
            f"English abbreviation '{family.en}' of the {family.name} is also used for the Swiss Civil Code"
        )
    return warnings
