"""Translation service backed by the generative provider."""

from typing import Any, Optional

from ..core.config import settings
from ..core.exceptions import ResponseParseError, UnsupportedLanguageError
from ..utils.logging import get_logger
from .llm_client import BaseLLMClient, get_llm_client, parse_json_reply
from .simplify.levels import resolve_level
from .simplify.prompts import build_translation_prompt

logger = get_logger(__name__)

SUPPORTED_LANGUAGES: dict[str, str] = {
    "spanish": "Spanish",
    "french": "French",
    "german": "German",
    "italian": "Italian",
    "portuguese": "Portuguese",
    "chinese": "Chinese (Simplified)",
    "japanese": "Japanese",
    "korean": "Korean",
    "arabic": "Arabic",
    "hindi": "Hindi",
    "russian": "Russian",
    "dutch": "Dutch",
    "swedish": "Swedish",
    "norwegian": "Norwegian",
    "danish": "Danish",
}


class TranslationService:
    """Translate text while keeping its reading level."""

    def __init__(self, client: Optional[BaseLLMClient] = None):
        self.client = client or get_llm_client()

    @staticmethod
    def language_name(language: str) -> str:
        try:
            return SUPPORTED_LANGUAGES[language]
        except KeyError:
            raise UnsupportedLanguageError(
                language, supported=list(SUPPORTED_LANGUAGES)
            ) from None

    async def translate(
        self, text: str, target_language: str, reading_level: Optional[str] = None
    ) -> dict[str, Any]:
        """
        Translate text to a supported language.

        Args:
            text: Text to translate (English)
            target_language: Key of SUPPORTED_LANGUAGES (e.g. "spanish")
            reading_level: Reading level to keep (defaults to middle-school)

        Returns:
            Translation payload with character and word counts

        Raises:
            UnsupportedLanguageError: target language is not supported
            ProviderError: provider failed or replied without a translation
        """
        language_name = self.language_name(target_language)
        level = resolve_level(reading_level).value

        logger.info(f"Translating {len(text)} chars to {language_name} ({level})")
        reply = await self.client.generate(
            build_translation_prompt(text, target_language, language_name, level),
            max_tokens=settings.GENERATION_MAX_TOKENS,
        )

        data = parse_json_reply(reply)
        translated = data.get("translatedText")
        if not isinstance(translated, str) or not translated:
            raise ResponseParseError("missing translated text", reply)

        return {
            "originalText": data.get("originalText") or text,
            "translatedText": translated,
            "targetLanguage": target_language,
            "languageName": language_name,
            "readingLevel": level,
            "originalLanguage": "english",
            "characterCount": len(translated),
            "wordCount": len(translated.split(" ")),
        }
