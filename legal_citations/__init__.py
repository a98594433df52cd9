"""
Swiss legal citation engine.

This package provides:
- Recognition of case-law (BGE/ATF/DTF), statute and doctrine citations
- Parsing into immutable records and canonical normalization
- Validation with optional strict plausibility checks
- Formatting and conversion across German, French, Italian and English
- Citation extraction from running text
"""

from .classifier import classify, detect_citation_type
from .converter import convert_citation
from .errors import CitationError, CitationParseError, ErrorCode
from .formatter import format_citation, render
from .parser import parse, parse_citation
from .records import CaseLawCitation, CitationType, DoctrineCitation, Language, StatuteCitation, Style
from .reference_extraction import extract_citations, extract_references
from .rendering import normalize
from .validator import validate_citation

__all__ = [
    "CaseLawCitation",
    "CitationError",
    "CitationParseError",
    "CitationType",
    "DoctrineCitation",
    "ErrorCode",
    "Language",
    "StatuteCitation",
    "Style",
    "classify",
    "convert_citation",
    "detect_citation_type",
    "extract_citations",
    "extract_references",
    "format_citation",
    "normalize",
    "parse",
    "parse_citation",
    "render",
    "validate_citation",
]
