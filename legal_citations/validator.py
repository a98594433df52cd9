"""
Citation validation.

Grammar validity comes from the parsers; strict mode layers plausibility
checks on top (volume range, positive numbers, known statute). Strict
findings are reported as errors but leave ``normalized`` and
``citation_type`` intact.
"""
from __future__ import annotations

import logging
import re

from .errors import CitationError, CitationParseError, ErrorCode
from .models import ErrorDetail, ValidationResult
from .parser import parse
from .records import CaseLawCitation, CitationType, ParsedCitation, StatuteCitation
from .rendering import normalize
from .terminology import is_known_statute
from .tokenizer import collapse_whitespace

logger = logging.getLogger(__name__)

MIN_BGE_VOLUME = 1
MAX_BGE_VOLUME = 200

CASE_LAW_TEMPLATE = "BGE format: BGE 145 III 229 E. 4.2"
STATUTE_TEMPLATE = "Article format: Art. 97 Abs. 1 OR"
GENERIC_HINT = (
    "Supported formats: BGE/ATF/DTF [volume] [section] [page], "
    "Art. [number] [statute], AUTHOR, Title, N [margin]"
)

_MISSING_PAGE_RE = re.compile(r"^(?:BGE|ATF|DTF)\s+\d+\s+(?:I|Ia|II|III|IV|V|VI)$", re.IGNORECASE)
_MISSING_STATUTE_RE = re.compile(r"^Art\.\s*\d+$", re.IGNORECASE)
_UNSPACED_RE = re.compile(r"(?:BGE|ATF|DTF)\d|Art\.\d", re.IGNORECASE)

# Errors where the family itself was recognized.
_FAMILY_KNOWN = {
    ErrorCode.INVALID_SECTION: CitationType.BGE,
    ErrorCode.MISSING_STATUTE: CitationType.STATUTE,
}


def validate_citation(
    citation: str,
    strict: bool = False,
    citation_type: CitationType | str | None = None,
) -> ValidationResult:
    """Validate a Swiss legal citation."""
    collapsed = collapse_whitespace(citation)
    if not collapsed:
        error = CitationError(
            ErrorCode.EMPTY_CITATION, "Citation string is empty or contains only whitespace"
        )
        return ValidationResult(
            valid=False,
            errors=[ErrorDetail(**error.to_dict())],
            suggestions=["Please provide a valid citation string"],
        )

    try:
        record = parse(collapsed, citation_type)
    except CitationParseError as e:
        return ValidationResult(
            valid=False,
            citation_type=_FAMILY_KNOWN.get(e.code),
            errors=[ErrorDetail(**e.to_error().to_dict())],
            suggestions=suggest(citation),
        )

    errors = check_plausibility(record) if strict else []
    if errors:
        logger.debug("strict validation flagged %r: %s", collapsed, [e.code.value for e in errors])
    return ValidationResult(
        valid=not errors,
        citation_type=record.citation_type,
        errors=[ErrorDetail(**e.to_dict()) for e in errors],
        normalized=normalize(record),
        suggestions=suggest(citation) if errors else None,
    )


def check_plausibility(record: ParsedCitation) -> list[CitationError]:
    """Strict-mode checks on a parsed record."""
    errors: list[CitationError] = []
    if isinstance(record, CaseLawCitation):
        if record.volume < MIN_BGE_VOLUME or record.volume > MAX_BGE_VOLUME:
            errors.append(CitationError(
                ErrorCode.VOLUME_OUT_OF_RANGE,
                f"BGE volume {record.volume} is outside expected range "
                f"({MIN_BGE_VOLUME}-{MAX_BGE_VOLUME})",
            ))
        if record.page < 1:
            errors.append(_non_positive("Page", record.page))
    elif isinstance(record, StatuteCitation):
        for label, value in (
            ("Article", record.article),
            ("Paragraph", record.paragraph),
            ("Number", record.number),
        ):
            if value is not None and value < 1:
                errors.append(_non_positive(label, value))
        if record.statute and not is_known_statute(record.statute):
            errors.append(CitationError(
                ErrorCode.UNKNOWN_STATUTE,
                f"Unknown statute abbreviation: {record.statute}",
            ))
    return errors


def _non_positive(label: str, value: int) -> CitationError:
    return CitationError(
        ErrorCode.NON_POSITIVE_NUMBER,
        f"{label} number must be positive, got {value}",
    )


def suggest(citation: str) -> list[str]:
    """Hints for fixing a citation that failed validation."""
    collapsed = collapse_whitespace(citation)
    lowered = collapsed.lower()
    suggestions: list[str] = []

    if _MISSING_PAGE_RE.match(collapsed):
        suggestions.append(
            "BGE citation appears to be missing page number. Format: BGE [volume] [section] [page]"
        )
    if _MISSING_STATUTE_RE.match(collapsed):
        suggestions.append("Statute citation is missing the statute abbreviation. Example: Art. 97 OR")
    if _UNSPACED_RE.search(collapsed):
        suggestions.append("Add spaces between components of the citation")

    if "bge" in lowered or "atf" in lowered or "dtf" in lowered:
        suggestions.append(CASE_LAW_TEMPLATE)
    if "art" in lowered:
        suggestions.append(STATUTE_TEMPLATE)
    if not suggestions:
        suggestions.append(GENERIC_HINT)
    return suggestions
