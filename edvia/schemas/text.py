"""Text processing and translation request/response schemas."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model using the camelCase field names of the JSON API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProcessTextRequest(CamelModel):
    """Text simplification request."""

    text: str = Field(min_length=1)
    reading_level: Any = None  # unrecognized values resolve to middle-school
    include_summary: bool = False


class VocabularyRequest(CamelModel):
    """Vocabulary-only extraction request."""

    text: str = Field(min_length=1)
    reading_level: Any = None  # unrecognized values resolve to middle-school


class VocabularyItem(CamelModel):
    """One vocabulary entry."""

    word: str
    definition: str
    example: str
    difficulty: str


class ProcessTextResponse(CamelModel):
    """Simplified text with vocabulary."""

    simplified_text: str
    vocabulary: list[VocabularyItem]
    summary: Optional[str] = None
    reading_level: str
    source: str


class VocabularyResponse(CamelModel):
    """Vocabulary list."""

    vocabulary: list[VocabularyItem]


class TTSRequest(CamelModel):
    """Text-to-speech preparation request."""

    text: str = Field(min_length=1)


class TTSResponse(CamelModel):
    """Text cleaned for speech synthesis."""

    text: str


class TranslateRequest(CamelModel):
    """Translation request."""

    text: str = Field(min_length=1)
    target_language: str = Field(min_length=1)
    reading_level: Any = None  # unrecognized values resolve to middle-school


class TranslateResponse(CamelModel):
    """Translation result."""

    original_text: str
    translated_text: str
    target_language: str
    language_name: str
    reading_level: str
    original_language: str
    character_count: int
    word_count: int


class LanguagesResponse(CamelModel):
    """Supported translation languages, key -> display name."""

    languages: dict[str, str]
