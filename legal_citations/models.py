"""
Request and response schemas of the citation tools.

Requests are validated at the tool boundary (mcp_server.py); responses are
what the engine operations return and what gets serialized back to the
client.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .records import CitationType, Language, Style


# ============================================================
# Requests
# ============================================================


class ValidateCitationRequest(BaseModel):
    citation: str = Field(..., description="The citation string to validate")
    strict: bool = Field(
        False,
        description="Also check plausibility: volume range, positive numbers, known statute",
    )
    citation_type: Optional[CitationType] = Field(
        None, description="Expected citation type (bge, statute, doctrine); auto-detected if omitted"
    )


class ParseCitationRequest(BaseModel):
    citation: str = Field(..., description="The citation string to parse")
    citation_type: Optional[CitationType] = Field(
        None, description="Expected citation type; auto-detected if omitted"
    )


class FormatCitationRequest(BaseModel):
    citation: str = Field(..., description="The citation string to format")
    target_language: Language = Field(..., description="Language code: de, fr, it, en")
    style: Style = Field(Style.FULL, description="full | short | inline")

    @field_validator("target_language", mode="before")
    @classmethod
    def lower_language(cls, v):
        return v.lower() if isinstance(v, str) else v


class ConvertCitationRequest(BaseModel):
    citation: str = Field(..., description="The citation string to convert")
    from_format: Optional[CitationType] = Field(
        None, description="Source format; auto-detected if omitted"
    )
    to_format: CitationType = Field(..., description="Target format: bge, statute, doctrine")
    target_language: Language = Field(Language.DE, description="Language code: de, fr, it, en")

    @field_validator("target_language", mode="before")
    @classmethod
    def lower_language(cls, v):
        return v.lower() if isinstance(v, str) else v


class ExtractCitationsRequest(BaseModel):
    text: str = Field(..., description="Running text to scan for citations")
    limit: int = Field(100, ge=1, le=1000, description="Maximum number of citations returned")


# ============================================================
# Responses
# ============================================================


class ErrorDetail(BaseModel):
    code: str = Field(..., description="Machine-readable error code, e.g. INVALID_SECTION")
    message: str
    position: Optional[int] = Field(
        None, description="Character offset of the offending token in the whitespace-collapsed input"
    )


class ValidationResult(BaseModel):
    valid: bool
    citation_type: Optional[CitationType] = None
    errors: list[ErrorDetail] = Field(default_factory=list)
    normalized: Optional[str] = None
    suggestions: Optional[list[str]] = None


class ParseResult(BaseModel):
    success: bool
    parsed: Optional[dict] = None
    original: str
    normalized: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[str] = None


class FormatResult(BaseModel):
    success: bool
    formatted: Optional[str] = None
    original: str
    target_language: Language
    style: Style
    error: Optional[str] = None
    error_code: Optional[str] = None


class ConversionResult(BaseModel):
    success: bool
    converted: Optional[str] = None
    original: str
    from_format: Optional[CitationType] = None
    to_format: CitationType
    target_language: Language
    error: Optional[str] = None
    error_code: Optional[str] = None
    warnings: Optional[list[str]] = None


class ExtractedCitationModel(BaseModel):
    raw: str
    start: int
    end: int
    citation_type: CitationType
    normalized: str
    parsed: dict


class ExtractionResult(BaseModel):
    count: int
    citations: list[ExtractedCitationModel] = Field(default_factory=list)
