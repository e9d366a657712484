"""
Pydantic schemas for spell-check values and API request/response models.
"""
from wordcheck.schemas.spellcheck import (
    Token,
    Diagnostic,
    CheckRequest,
    CheckResponse,
    SuggestRequest,
    SuggestResponse,
    WordRequest,
    WordAddedResponse,
    WordListResponse,
    HealthResponse,
)

__all__ = [
    "Token",
    "Diagnostic",
    "CheckRequest",
    "CheckResponse",
    "SuggestRequest",
    "SuggestResponse",
    "WordRequest",
    "WordAddedResponse",
    "WordListResponse",
    "HealthResponse",
]
