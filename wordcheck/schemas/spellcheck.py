"""
Pydantic schemas for spell-check functionality.
"""
from datetime import datetime
from typing import List, Literal

from pydantic import BaseModel, Field


class Token(BaseModel):
    """A word and where it starts in the source text."""

    word: str = Field(description="Word exactly as it appears in the text")
    offset: int = Field(ge=0, description="Zero-based character index of the first character")

    @property
    def end(self) -> int:
        return self.offset + len(self.word)


class Diagnostic(BaseModel):
    """Marker a host renders over a misspelled occurrence."""

    word: str
    start: int = Field(ge=0, description="Start character index (inclusive)")
    end: int = Field(ge=0, description="End character index (exclusive)")
    message: str
    severity: Literal["error", "warning", "information", "hint"] = "error"


class CheckRequest(BaseModel):
    """Schema for a spell-check request."""

    text: str = Field(description="Document text to check")


class CheckResponse(BaseModel):
    """Schema for a spell-check response."""

    misspelled: List[Token] = Field(description="Misspelled occurrences in document order")
    diagnostics: List[Diagnostic]


class SuggestRequest(BaseModel):
    """Schema for a suggestion request."""

    word: str


class SuggestResponse(BaseModel):
    """Schema for a suggestion response."""

    word: str
    suggestions: List[str] = Field(description="Corrections ordered by edit distance")


class WordRequest(BaseModel):
    """Schema for adding or ignoring a single word."""

    word: str = Field(min_length=1, pattern=r"\S")


class WordAddedResponse(BaseModel):
    """Schema for the result of a dictionary or ignore-set mutation."""

    word: str
    added: bool = Field(description="False when the word was already present")


class WordListResponse(BaseModel):
    """Schema for the host-persisted word lists."""

    words: List[str]


class HealthResponse(BaseModel):
    """Schema for health check endpoint response."""

    status: str
    dictionary_words: int
    timestamp: datetime
