"""Turn citation records back into strings."""
from __future__ import annotations

from .doctrine import render_doctrine
from .records import CaseLawCitation, DoctrineCitation, ParsedCitation, StatuteCitation, Style
from .terminology import (
    CONSIDERATION_MARKER_BY_LANGUAGE,
    PREFIX_BY_LANGUAGE,
    STATUTE_LABELS,
    translate_statute,
)


def render_case_law(citation: CaseLawCitation, language: str, style: Style | str = Style.FULL) -> str:
    style = Style(style)
    core = f"{citation.volume} {citation.section} {citation.page}"
    if style is Style.INLINE:
        return core
    result = f"{PREFIX_BY_LANGUAGE[language]} {core}"
    if style is Style.FULL and citation.consideration:
        result += f" {CONSIDERATION_MARKER_BY_LANGUAGE[language]} {citation.consideration}"
    return result


def render_statute(
    citation: StatuteCitation,
    language: str,
    style: Style | str = Style.FULL,
    *,
    translate: bool = True,
) -> str:
    style = Style(style)
    labels = STATUTE_LABELS[language]
    statute = citation.statute
    if statute and translate:
        statute = translate_statute(statute, language)

    if style is Style.INLINE:
        parts = [str(citation.article)]
    else:
        parts = [labels.article, str(citation.article)]
        if style is Style.FULL:
            if citation.paragraph is not None:
                parts += [labels.paragraph, str(citation.paragraph)]
            if citation.letter is not None:
                parts += [labels.letter, citation.letter]
            if citation.number is not None:
                parts += [labels.number, str(citation.number)]
    if statute:
        parts.append(statute)
    return " ".join(parts)


def normalize(citation: ParsedCitation) -> str:
    """Canonical spacing/casing of a record in its own source language.

    Unlike formatting, this never translates: case-law keeps the prefix it
    was cited with and statutes keep their abbreviation.
    """
    if isinstance(citation, CaseLawCitation):
        return render_case_law(citation, citation.language)
    if isinstance(citation, StatuteCitation):
        return render_statute(citation, citation.language, translate=False)
    if isinstance(citation, DoctrineCitation):
        return render_doctrine(citation)
    raise TypeError(f"not a citation record: {citation!r}")
