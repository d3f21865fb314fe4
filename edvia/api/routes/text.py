"""
Text Processing Routes
======================

Simplification, vocabulary extraction and speech preparation.
"""

import logging

from fastapi import APIRouter, Depends

from ...core.config import settings
from ...core.exceptions import ValidationError
from ...schemas.text import (
    ProcessTextRequest,
    ProcessTextResponse,
    TTSRequest,
    TTSResponse,
    VocabularyRequest,
    VocabularyResponse,
)
from ...services.simplify import TextProcessingService, resolve_level
from ...services.speech import prepare_for_tts
from ..dependencies import get_text_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["text"])


def _check_length(text: str, limit: int) -> None:
    if len(text) > limit:
        raise ValidationError(
            f"Text is too long. Maximum {limit:,} characters allowed."
        )


@router.post(
    "/process",
    response_model=ProcessTextResponse,
    response_model_exclude_none=True,
)
async def process_text(
    request: ProcessTextRequest,
    service: TextProcessingService = Depends(get_text_service),
) -> ProcessTextResponse:
    """Simplify text for a reading level and extract key vocabulary."""
    _check_length(request.text, settings.MAX_TEXT_LENGTH)
    level = resolve_level(request.reading_level)

    result = await service.process(request.text, level, request.include_summary)
    logger.info(
        "Processed %d chars at %s via %s", len(request.text), level.value, result.source
    )

    return ProcessTextResponse(
        simplified_text=result.simplified_text,
        vocabulary=[entry.to_dict() for entry in result.vocabulary],
        summary=result.summary,
        reading_level=level.value,
        source=result.source,
    )


@router.post("/vocabulary", response_model=VocabularyResponse)
async def extract_vocabulary(
    request: VocabularyRequest,
    service: TextProcessingService = Depends(get_text_service),
) -> VocabularyResponse:
    """Extract vocabulary only."""
    _check_length(request.text, settings.MAX_TEXT_LENGTH)
    entries = await service.vocabulary(request.text, resolve_level(request.reading_level))
    return VocabularyResponse(vocabulary=[entry.to_dict() for entry in entries])


@router.post("/tts", response_model=TTSResponse)
async def prepare_tts(request: TTSRequest) -> TTSResponse:
    """Clean text for browser speech synthesis."""
    _check_length(request.text, settings.MAX_TEXT_LENGTH)
    return TTSResponse(text=prepare_for_tts(request.text))
