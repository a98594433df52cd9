"""
Citation extraction from running text.

Finds case-law references ("BGE 147 I 268 E. 2.1", "ATF 140 II 315") and
statute references ("Art. 34 Abs. 2 BV", "art. 8 al. 1 CEDH") in decision
or memo text, and runs every candidate span through the citation parsers so
that only well-formed citations are returned.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .errors import CitationParseError
from .parser import parse
from .records import CitationType
from .rendering import normalize

logger = logging.getLogger(__name__)

_CONSIDERATION = r"(?:\s+(?:E\.|consid\.)\s+\d+(?:\.\d+)*)?"

CASE_LAW_PATTERN = re.compile(
    rf"\b(?:BGE|ATF|DTF)\s+\d{{1,3}}\s+(?:[IVX]{{1,4}}a?)\s+\d{{1,4}}{_CONSIDERATION}",
    flags=re.IGNORECASE,
)

STATUTE_PATTERN = re.compile(
    r"""
    \bArt\.\s*\d+
    (?:\s*(?:Abs\.|al\.|cpv\.)\s*\d+)?
    (?:\s*(?:lit\.|let\.|lett\.)\s*[a-z]\b)?
    (?:\s*(?:Ziff\.|ch\.|n\.)\s*\d+)?
    \s+(?P<law>(?-i:[A-Z][A-Za-z]{1,9}))\b
    """,
    flags=re.IGNORECASE | re.VERBOSE,
)

# Capitalized words that can follow "Art. 12" in prose without being a law code.
_INVALID_LAW_CODES = {
    # ── Statute structural markers ──
    "ART", "ABS", "ABSATZ", "AL", "CPV", "LIT", "LET", "LETT",
    "ZIFF", "ZIFFER", "CH", "BST", "SATZ",
    # ── Prose ──
    "AB", "AM", "AN", "AUS", "BEI", "BZW", "DA", "DAS", "DEM", "DEN",
    "DER", "DES", "DIE", "EIN", "EINE", "ER", "ES", "IM", "IN", "IST",
    "MIT", "NACH", "ODER", "UND", "VOM", "VON", "ZU", "ZUM", "ZUR",
    "AU", "AUX", "CE", "DANS", "DE", "DU", "EN", "EST", "ET", "IL",
    "LA", "LE", "LES", "OU", "PAR", "POUR", "QUE", "QUI", "SUR",
    "CHE", "CON", "DEL", "DELLA", "DI", "NEL", "NON", "PER",
    "FF", "SS", "SEGG", "BIS", "TER",
}


@dataclass(frozen=True)
class ExtractedCitation:
    raw: str
    start: int
    end: int
    citation_type: CitationType
    normalized: str
    parsed: dict

    def to_dict(self) -> dict:
        return {
            "raw": self.raw,
            "start": self.start,
            "end": self.end,
            "citation_type": self.citation_type.value,
            "normalized": self.normalized,
            "parsed": self.parsed,
        }


def extract_citations(text: str) -> list[ExtractedCitation]:
    """All well-formed citations in ``text``, in order of appearance.

    Duplicates (same normalized form) are reported once, at their first
    occurrence.
    """
    if not text:
        return []

    candidates: list[tuple[int, int, str]] = []
    for match in CASE_LAW_PATTERN.finditer(text):
        candidates.append((match.start(), match.end(), match.group(0)))
    for match in STATUTE_PATTERN.finditer(text):
        if not _looks_like_law_code(match.group("law")):
            continue
        candidates.append((match.start(), match.end(), match.group(0)))
    candidates.sort()

    refs: list[ExtractedCitation] = []
    seen: set[str] = set()
    for start, end, raw in candidates:
        try:
            record = parse(raw)
        except CitationParseError as e:
            logger.debug("skipping candidate %r: %s", raw, e.code.value)
            continue
        normalized = normalize(record)
        if normalized in seen:
            continue
        seen.add(normalized)
        refs.append(ExtractedCitation(
            raw=raw,
            start=start,
            end=end,
            citation_type=record.citation_type,
            normalized=normalized,
            parsed=record.to_dict(),
        ))
    return refs


def extract_references(text: str) -> dict[str, list[dict]]:
    """Extracted citations split by family."""
    refs = extract_citations(text)
    return {
        "statutes": [r.to_dict() for r in refs if r.citation_type is CitationType.STATUTE],
        "citations": [r.to_dict() for r in refs if r.citation_type is CitationType.BGE],
    }


def _looks_like_law_code(law: str) -> bool:
    # Short title-case codes (Cst, Cost) are fine; longer title-case words
    # (Oder, Della) are prose.
    n_upper = sum(1 for c in law if c.isupper())
    if n_upper == 1 and len(law) > 4:
        return False
    return law.upper() not in _INVALID_LAW_CODES
