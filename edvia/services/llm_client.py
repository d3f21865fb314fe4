"""Generative-language provider client (Google Gemini REST API)."""

import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from ..core.config import settings
from ..core.exceptions import (
    ProviderAuthError,
    ProviderError,
    ProviderQuotaError,
    ProviderUnavailableError,
    ResponseParseError,
)

logger = logging.getLogger(__name__)

_CODE_FENCE_RE = re.compile(r"```(?:json)?\n?")
_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")
_QUOTA_MARKERS = ("quota", "rate limit", "resource_exhausted")


class BaseLLMClient(ABC):
    """Abstract base class for LLM clients."""

    @abstractmethod
    async def generate(self, prompt: str, **kwargs) -> str:
        """Generate text from prompt."""
        pass

    async def close(self) -> None:
        pass


class GeminiClient(BaseLLMClient):
    """Gemini ``generateContent`` client over httpx."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = settings.GEMINI_API_KEY if api_key is None else api_key
        self.model = model or settings.GEMINI_MODEL
        self.base_url = (base_url or settings.GEMINI_BASE_URL).rstrip("/")
        self.client = http_client or httpx.AsyncClient(timeout=settings.PROVIDER_TIMEOUT)

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate(
        self,
        prompt: str,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        **kwargs,
    ) -> str:
        """Generate text with Gemini and return the first candidate's text."""
        if not self.configured:
            raise ProviderUnavailableError()

        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": (
                    settings.GENERATION_TEMPERATURE if temperature is None else temperature
                ),
                "maxOutputTokens": max_tokens or settings.GENERATION_MAX_TOKENS,
            },
        }

        try:
            response = await self.client.post(
                self.endpoint,
                params={"key": self.api_key},
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.TimeoutException as e:
            raise ProviderUnavailableError(f"Gemini request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise ProviderUnavailableError(f"Gemini request failed: {e}") from e

        if response.status_code >= 400:
            raise self._error_for(response)

        try:
            data = response.json()
        except ValueError as e:
            raise ResponseParseError("Gemini reply is not JSON", response.text) from e
        return self._extract_text(data)

    @staticmethod
    def _error_for(response: httpx.Response) -> ProviderError:
        body = response.text
        lowered = body.lower()
        logger.warning("Gemini returned HTTP %s: %s", response.status_code, body[:500])

        if "api_key_invalid" in lowered or response.status_code == 401:
            return ProviderAuthError()
        if response.status_code in (403, 429) or any(
            marker in lowered for marker in _QUOTA_MARKERS
        ):
            return ProviderQuotaError()
        return ProviderError(f"Gemini API error {response.status_code}")

    @staticmethod
    def _extract_text(data: dict[str, Any]) -> str:
        try:
            parts = data["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError) as e:
            raise ResponseParseError("no candidates in Gemini reply", json.dumps(data)) from e
        return "".join(part.get("text", "") for part in parts)

    async def close(self) -> None:
        await self.client.aclose()


def parse_json_reply(text: str) -> dict[str, Any]:
    """
    Parse the JSON object from a model reply.

    Markdown code fences are stripped first; when the reply still has prose
    around the object, the outermost ``{...}`` span is used.
    """
    cleaned = _CODE_FENCE_RE.sub("", text).strip()
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError:
        match = _JSON_OBJECT_RE.search(cleaned)
        if not match:
            raise ResponseParseError("no JSON object in reply", text) from None
        try:
            parsed = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            raise ResponseParseError(str(e), text) from e

    if not isinstance(parsed, dict):
        raise ResponseParseError("reply is not a JSON object", text)
    return parsed


_default_client: Optional[GeminiClient] = None


def get_llm_client() -> GeminiClient:
    """Get the shared Gemini client (lazy-loaded)."""
    global _default_client
    if _default_client is None:
        _default_client = GeminiClient()
    return _default_client


async def close_llm_client() -> None:
    global _default_client
    if _default_client is not None:
        await _default_client.close()
        _default_client = None
