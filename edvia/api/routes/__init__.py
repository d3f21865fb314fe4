"""API route modules.

- text.py: simplification, vocabulary, speech preparation
- translation.py: supported languages and translation
- health.py: health check
"""

from fastapi import APIRouter

from .health import router as health_router
from .text import router as text_router
from .translation import router as translation_router

router = APIRouter()
router.include_router(health_router)
router.include_router(text_router, prefix="/text")
router.include_router(translation_router, prefix="/translation")

__all__ = [
    "health_router",
    "router",
    "text_router",
    "translation_router",
]
