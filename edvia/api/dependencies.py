"""FastAPI dependencies providing the service singletons."""

from typing import Optional

from ..services.simplify import TextProcessingService
from ..services.translate import TranslationService

# Lazy-loaded singletons to avoid building clients at import time
_text_service: Optional[TextProcessingService] = None
_translation_service: Optional[TranslationService] = None


def get_text_service() -> TextProcessingService:
    """Get text processing service singleton."""
    global _text_service
    if _text_service is None:
        _text_service = TextProcessingService()
    return _text_service


def get_translation_service() -> TranslationService:
    """Get translation service singleton."""
    global _translation_service
    if _translation_service is None:
        _translation_service = TranslationService()
    return _translation_service
