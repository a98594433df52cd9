"""Structured citation records produced by the parsers."""
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Union


class CitationType(str, Enum):
    BGE = "bge"
    STATUTE = "statute"
    DOCTRINE = "doctrine"


class Language(str, Enum):
    DE = "de"
    FR = "fr"
    IT = "it"
    EN = "en"


class Style(str, Enum):
    FULL = "full"
    SHORT = "short"
    INLINE = "inline"


def _compact(record) -> dict:
    out = {"type": record.citation_type.value}
    for f in fields(record):
        value = getattr(record, f.name)
        if value is None:
            continue
        out[f.name] = list(value) if isinstance(value, tuple) else value
    return out


@dataclass(frozen=True)
class CaseLawCitation:
    """BGE 145 III 229 E. 4.2"""

    prefix: str
    volume: int
    section: str
    page: int
    consideration: str | None = None
    language: str = "de"

    citation_type = CitationType.BGE

    def to_dict(self) -> dict:
        return _compact(self)


@dataclass(frozen=True)
class StatuteCitation:
    """Art. 97 Abs. 1 lit. a OR"""

    article: int
    statute: str | None
    paragraph: int | None = None
    letter: str | None = None
    number: int | None = None
    language: str = "de"

    citation_type = CitationType.STATUTE

    def to_dict(self) -> dict:
        return _compact(self)


@dataclass(frozen=True)
class DoctrineCitation:
    """GAUCH/SCHLUEP/SCHMID, OR AT, N 123"""

    authors: tuple[str, ...]
    title: str
    edition: str | None = None
    year: int | None = None
    margin_number: int | None = None
    page: int | None = None
    language: str = "de"

    citation_type = CitationType.DOCTRINE

    def to_dict(self) -> dict:
        return _compact(self)


ParsedCitation = Union[CaseLawCitation, StatuteCitation, DoctrineCitation]
