"""Translation routes."""

from fastapi import APIRouter, Depends

from ...core.config import settings
from ...core.exceptions import ValidationError
from ...schemas.text import LanguagesResponse, TranslateRequest, TranslateResponse
from ...services.translate import SUPPORTED_LANGUAGES, TranslationService
from ..dependencies import get_translation_service

router = APIRouter(tags=["translation"])


@router.get("/languages", response_model=LanguagesResponse)
async def list_languages() -> LanguagesResponse:
    """Supported target languages."""
    return LanguagesResponse(languages=SUPPORTED_LANGUAGES)


@router.post("/translate", response_model=TranslateResponse)
async def translate_text(
    request: TranslateRequest,
    service: TranslationService = Depends(get_translation_service),
) -> TranslateResponse:
    """Translate text while keeping the reading level."""
    # Reject before spending a provider call
    service.language_name(request.target_language)

    if len(request.text) > settings.MAX_TRANSLATION_LENGTH:
        raise ValidationError(
            "Text is too long for translation. "
            f"Maximum {settings.MAX_TRANSLATION_LENGTH:,} characters allowed."
        )

    result = await service.translate(
        request.text, request.target_language, request.reading_level
    )
    return TranslateResponse(**result)
