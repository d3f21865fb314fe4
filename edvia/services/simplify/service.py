"""Text processing service: generative provider first, rule-based fallback."""

import logging
from typing import Any, Optional

from ...core.config import settings
from ...core.exceptions import ProviderError, ResponseParseError
from ..llm_client import BaseLLMClient, get_llm_client, parse_json_reply
from .levels import Difficulty, ReadingLevel, get_profile
from .lexicon import Lexicon
from .prompts import build_simplify_prompt, build_vocabulary_prompt
from .rule_based import FallbackProcessor
from .types import SimplificationResult, VocabularyEntry

logger = logging.getLogger(__name__)

# Labels a provider reply may use; anything else becomes intermediate
PROVIDER_DIFFICULTIES = (Difficulty.BASIC, Difficulty.INTERMEDIATE, Difficulty.ADVANCED)


def normalize_vocabulary(items: Any) -> list[VocabularyEntry]:
    """Coerce provider vocabulary items, dropping ones without word or definition."""
    entries: list[VocabularyEntry] = []
    for item in items or []:
        if not isinstance(item, dict):
            continue
        word = str(item.get("word") or "").strip()
        definition = str(item.get("definition") or "").strip()
        if not word or not definition:
            continue
        difficulty = item.get("difficulty")
        entries.append(
            VocabularyEntry(
                word=word,
                definition=definition,
                example=str(item.get("example") or ""),
                difficulty=(
                    Difficulty(difficulty)
                    if isinstance(difficulty, str)
                    and difficulty in {d.value for d in PROVIDER_DIFFICULTIES}
                    else Difficulty.INTERMEDIATE
                ),
            )
        )
    return entries


class TextProcessingService:
    """
    Simplify text and extract vocabulary for a reading level.

    The provider is asked first. Any ProviderError (unconfigured, network,
    auth, quota, malformed reply) is logged and answered from the rule-based
    FallbackProcessor, unless fallback is disabled in settings.
    """

    def __init__(
        self,
        client: Optional[BaseLLMClient] = None,
        fallback: Optional[FallbackProcessor] = None,
        lexicon: Optional[Lexicon] = None,
        fallback_enabled: Optional[bool] = None,
    ):
        self.client = client or get_llm_client()
        self.fallback = fallback or FallbackProcessor(lexicon)
        self.fallback_enabled = (
            settings.FALLBACK_ENABLED if fallback_enabled is None else fallback_enabled
        )

    async def process(
        self,
        text: str,
        level: "ReadingLevel | str | None" = None,
        include_summary: bool = False,
    ) -> SimplificationResult:
        profile = get_profile(level)
        try:
            reply = await self.client.generate(
                build_simplify_prompt(text, profile, include_summary),
                max_tokens=settings.GENERATION_MAX_TOKENS,
            )
            return self._parse_process_reply(reply, include_summary)
        except ProviderError as e:
            if not self.fallback_enabled:
                raise
            logger.warning(
                "Provider simplification failed (%s), using rule-based fallback",
                e.error_code,
            )
            return self.fallback.process(text, profile.level, include_summary)

    async def vocabulary(
        self, text: str, level: "ReadingLevel | str | None" = None
    ) -> list[VocabularyEntry]:
        profile = get_profile(level)
        try:
            reply = await self.client.generate(
                build_vocabulary_prompt(text, profile),
                max_tokens=settings.VOCABULARY_MAX_TOKENS,
            )
            data = parse_json_reply(reply)
            if not isinstance(data.get("vocabulary"), list):
                raise ResponseParseError("missing vocabulary array", reply)
            return normalize_vocabulary(data["vocabulary"])
        except ProviderError as e:
            if not self.fallback_enabled:
                raise
            logger.warning(
                "Provider vocabulary extraction failed (%s), using rule-based fallback",
                e.error_code,
            )
            return self.fallback.vocabulary(text, profile.level)

    @staticmethod
    def _parse_process_reply(reply: str, include_summary: bool) -> SimplificationResult:
        data = parse_json_reply(reply)

        if not isinstance(data.get("vocabulary"), list):
            raise ResponseParseError("missing vocabulary array", reply)
        simplified = data.get("simplifiedText")
        if not isinstance(simplified, str) or not simplified.strip():
            raise ResponseParseError("missing simplified text", reply)

        summary = data.get("summary") if include_summary else None
        return SimplificationResult(
            simplified_text=simplified,
            vocabulary=normalize_vocabulary(data["vocabulary"]),
            summary=str(summary) if summary else None,
            source="ai",
        )
