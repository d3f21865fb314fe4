"""Edvia services."""

from .llm_client import GeminiClient, get_llm_client
from .simplify import FallbackProcessor, TextProcessingService
from .speech import prepare_for_tts
from .translate import SUPPORTED_LANGUAGES, TranslationService

__all__ = [
    "SUPPORTED_LANGUAGES",
    "FallbackProcessor",
    "GeminiClient",
    "TextProcessingService",
    "TranslationService",
    "get_llm_client",
    "prepare_for_tts",
]
