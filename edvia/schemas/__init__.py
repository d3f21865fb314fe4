"""API request/response schemas."""

from .text import (
    LanguagesResponse,
    ProcessTextRequest,
    ProcessTextResponse,
    TranslateRequest,
    TranslateResponse,
    TTSRequest,
    TTSResponse,
    VocabularyItem,
    VocabularyRequest,
    VocabularyResponse,
)

__all__ = [
    "LanguagesResponse",
    "ProcessTextRequest",
    "ProcessTextResponse",
    "TTSRequest",
    "TTSResponse",
    "TranslateRequest",
    "TranslateResponse",
    "VocabularyItem",
    "VocabularyRequest",
    "VocabularyResponse",
]
