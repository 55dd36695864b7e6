"""Pydantic models for API request/response."""

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field


class DefinitionRequest(BaseModel):
    """Request model for a word or phrase lookup."""
    word: str = Field(..., min_length=1, max_length=100, description="Word or phrase to define")


class TranslationRequest(BaseModel):
    """Request model for sentence translation."""
    text: str = Field(..., min_length=1, max_length=2000, description="Sentence to translate")


class ExampleResponse(BaseModel):
    text: str
    translation: Optional[str] = None


class SenseResponse(BaseModel):
    pos: str
    text: str
    translation: Optional[str] = None
    example: list[ExampleResponse] = Field(default_factory=list)


class PronunciationResponse(BaseModel):
    lang: str
    pron: str = ""
    url: str = Field("", description="Audio URL, empty when unavailable")


class EntryResponse(BaseModel):
    """Normalized, projected lexical entry (wire shape shared with the extension)."""
    word: str
    translation: Optional[str] = None
    pos: list[str]
    verbs: list[str] = Field(default_factory=list)
    pronunciation: list[PronunciationResponse]
    definition: list[SenseResponse]


class DefinitionResponse(BaseModel):
    """Tagged lookup result."""
    status: Literal["success", "error"]
    data: Optional[EntryResponse] = None
    message: Optional[str] = None
    ttsEnabled: Optional[bool] = None


class TranslationResponse(BaseModel):
    """Tagged translation result; data is the backend payload verbatim."""
    status: Literal["success", "error", "noLanguage"]
    data: Optional[dict[str, Any]] = None
    message: Optional[str] = None
    ttsEnabled: Optional[bool] = None
