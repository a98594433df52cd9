"""Error codes and the exception raised by the citation grammars."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCode(str, Enum):
    EMPTY_CITATION = "EMPTY_CITATION"
    UNRECOGNIZED_FORMAT = "UNRECOGNIZED_FORMAT"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    INVALID_SECTION = "INVALID_SECTION"
    MISSING_STATUTE = "MISSING_STATUTE"
    FORMAT_MISMATCH = "FORMAT_MISMATCH"
    UNSUPPORTED_TARGET = "UNSUPPORTED_TARGET"
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
    # strict mode
    VOLUME_OUT_OF_RANGE = "VOLUME_OUT_OF_RANGE"
    NON_POSITIVE_NUMBER = "NON_POSITIVE_NUMBER"
    UNKNOWN_STATUTE = "UNKNOWN_STATUTE"


@dataclass(frozen=True)
class CitationError:
    code: ErrorCode
    message: str
    position: int | None = None

    def to_dict(self) -> dict:
        out = {"code": self.code.value, "message": self.message}
        if self.position is not None:
            out["position"] = self.position
        return out


class CitationParseError(ValueError):
    """A citation failed to classify or parse.

    Always an input-quality problem; the public operations turn it into a
    result object instead of letting it escape.
    """

    def __init__(self, code: ErrorCode, message: str, position: int | None = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.position = position

    def to_error(self) -> CitationError:
        return CitationError(code=self.code, message=self.message, position=self.position)
