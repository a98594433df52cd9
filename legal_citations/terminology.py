"""
Per-language vocabulary for Swiss legal citations.

Holds:
- Federal Supreme Court prefixes (BGE/ATF/DTF) and consideration markers
- The seven BGE section codes
- Article/paragraph/letter/number labels for statute citations
- The statute abbreviation table (OR <-> CO, ZGB <-> CC, ...)

Everything here is built once at import and never mutated.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

LANGUAGES = ("de", "fr", "it", "en")

# English keeps the German case-law vocabulary.
PREFIX_BY_LANGUAGE = MappingProxyType({
    "de": "BGE",
    "fr": "ATF",
    "it": "DTF",
    "en": "BGE",
})
LANGUAGE_BY_PREFIX = MappingProxyType({
    "BGE": "de",
    "ATF": "fr",
    "DTF": "it",
})
CASE_LAW_PREFIXES = frozenset(LANGUAGE_BY_PREFIX)

CONSIDERATION_MARKER_BY_LANGUAGE = MappingProxyType({
    "de": "E.",
    "fr": "consid.",
    "it": "consid.",
    "en": "consid.",
})
CONSIDERATION_MARKERS = frozenset({"e.", "consid."})

VALID_SECTIONS = ("I", "Ia", "II", "III", "IV", "V", "VI")
_SECTION_BY_UPPER = MappingProxyType({s.upper(): s for s in VALID_SECTIONS})


@dataclass(frozen=True)
class StatuteLabels:
    article: str
    paragraph: str
    letter: str
    number: str


STATUTE_LABELS = MappingProxyType({
    "de": StatuteLabels(article="Art.", paragraph="Abs.", letter="lit.", number="Ziff."),
    "fr": StatuteLabels(article="art.", paragraph="al.", letter="let.", number="ch."),
    "it": StatuteLabels(article="art.", paragraph="cpv.", letter="lett.", number="n."),
    "en": StatuteLabels(article="Art.", paragraph="para.", letter="let.", number="no."),
})

# Markers accepted on input, lower-cased.
ARTICLE_MARKERS = frozenset({"art."})
PARAGRAPH_MARKERS = frozenset({"abs.", "al.", "cpv."})
LETTER_MARKERS = frozenset({"lit.", "let.", "lett."})
NUMBER_MARKERS = frozenset({"ziff.", "ch.", "n."})

# Markers that give away a non-German source. French wins over Italian.
FRENCH_MARKERS = frozenset({"al.", "let.", "ch."})
ITALIAN_MARKERS = frozenset({"cpv.", "lett."})


@dataclass(frozen=True)
class StatuteFamily:
    """One federal statute and its abbreviation in each rendering language."""

    key: str
    name: str
    de: str
    fr: str
    it: str
    en: str

    def code(self, language: str) -> str:
        return getattr(self, language)

    @property
    def codes(self) -> tuple[str, ...]:
        return (self.de, self.fr, self.it, self.en)


# Declaration order matters: the English "CC" of the Criminal Code is also
# the Civil Code's abbreviation, and lookups resolve to the first family.
STATUTE_FAMILIES = (
    StatuteFamily("code_of_obligations", "Swiss Code of Obligations", de="OR", fr="CO", it="CO", en="CO"),
    StatuteFamily("civil_code", "Swiss Civil Code", de="ZGB", fr="CC", it="CC", en="CC"),
    StatuteFamily("criminal_code", "Swiss Criminal Code", de="StGB", fr="CP", it="CP", en="CC"),
    StatuteFamily("federal_constitution", "Federal Constitution", de="BV", fr="Cst", it="Cost", en="FC"),
    StatuteFamily("civil_procedure_code", "Swiss Civil Procedure Code", de="ZPO", fr="CPC", it="CPC", en="CPC"),
    StatuteFamily("criminal_procedure_code", "Swiss Criminal Procedure Code", de="StPO", fr="CPP", it="CPP", en="CPP"),
)


def _build_family_index() -> MappingProxyType:
    index: dict[str, StatuteFamily] = {}
    for family in STATUTE_FAMILIES:
        for code in family.codes:
            index.setdefault(code.upper(), family)
    return MappingProxyType(index)


_FAMILY_BY_CODE = _build_family_index()

# Canonical spellings of abbreviations outside the translation table.
_EXTRA_CANONICAL = ("UWG", "DSG", "SchKG", "IPRG", "BGG", "VwVG", "LP", "LDIP", "LTF")

_CANONICAL_BY_UPPER = MappingProxyType({
    code.upper(): code
    for code in (
        *(c for family in STATUTE_FAMILIES for c in family.codes),
        *_EXTRA_CANONICAL,
    )
})


def canonical_section(section: str) -> str | None:
    """Return the canonical spelling of a BGE section code, or None if invalid."""
    return _SECTION_BY_UPPER.get(section.upper())


def canonical_statute(code: str) -> str:
    """Canonical spelling of a statute abbreviation ("stgb" -> "StGB").

    Unknown abbreviations come back upper-cased.
    """
    return _CANONICAL_BY_UPPER.get(code.upper(), code.upper())


def find_statute_family(code: str) -> StatuteFamily | None:
    return _FAMILY_BY_CODE.get(code.upper())


def is_known_statute(code: str) -> bool:
    return find_statute_family(code) is not None


def translate_statute(code: str, language: str) -> str:
    """Abbreviation of ``code``'s statute in ``language``; passthrough if unknown."""
    family = find_statute_family(code)
    if family is None:
        return code
    return family.code(language)


def language_for_prefix(prefix: str) -> str:
    return LANGUAGE_BY_PREFIX.get(prefix.upper(), "de")


def statute_language_from_markers(markers) -> str:
    """Source language of a statute citation given the markers it uses."""
    seen = {m.lower() for m in markers}
    if seen & FRENCH_MARKERS:
        return "fr"
    if seen & ITALIAN_MARKERS:
        return "it"
    return "de"
