"""Unit tests for the Gemini client and reply parsing."""

import json

import httpx
import pytest

from edvia.core.exceptions import (
    ProviderAuthError,
    ProviderError,
    ProviderQuotaError,
    ProviderUnavailableError,
    ResponseParseError,
)
from edvia.services.llm_client import GeminiClient, parse_json_reply


def _gemini_reply(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


def _client(handler, api_key="test-key") -> GeminiClient:
    return GeminiClient(
        api_key=api_key,
        model="gemini-test",
        base_url="https://gemini.test/v1beta/",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


class TestGeminiClient:
    """Request shape and error mapping."""

    @pytest.mark.asyncio
    async def test_generate_posts_prompt(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = request.url
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=_gemini_reply("Hello"))

        client = _client(handler)
        text = await client.generate("Say hello", max_tokens=123, temperature=0.1)

        assert text == "Hello"
        assert seen["url"].path == "/v1beta/models/gemini-test:generateContent"
        assert seen["url"].params["key"] == "test-key"
        assert seen["body"]["contents"][0]["parts"][0]["text"] == "Say hello"
        assert seen["body"]["generationConfig"] == {
            "temperature": 0.1,
            "maxOutputTokens": 123,
        }
        await client.close()

    @pytest.mark.asyncio
    async def test_parts_are_joined(self):
        reply = {"candidates": [{"content": {"parts": [{"text": "a"}, {"text": "b"}]}}]}
        client = _client(lambda request: httpx.Response(200, json=reply))
        assert await client.generate("x") == "ab"

    @pytest.mark.asyncio
    async def test_no_api_key(self):
        def handler(request):
            raise AssertionError("no request expected without a key")

        client = _client(handler, api_key="")
        assert client.configured is False
        with pytest.raises(ProviderUnavailableError):
            await client.generate("x")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status,body,expected",
        [
            (400, '{"error": {"status": "INVALID_ARGUMENT", "message": "API_KEY_INVALID"}}', ProviderAuthError),
            (401, "unauthorized", ProviderAuthError),
            (429, '{"error": {"status": "RESOURCE_EXHAUSTED"}}', ProviderQuotaError),
            (403, "forbidden", ProviderQuotaError),
            (400, "Quota exceeded for project", ProviderQuotaError),
            (500, "internal error", ProviderError),
        ],
    )
    async def test_error_mapping(self, status, body, expected):
        client = _client(lambda request: httpx.Response(status, text=body))
        with pytest.raises(expected) as exc_info:
            await client.generate("x")
        assert type(exc_info.value) is expected

    @pytest.mark.asyncio
    async def test_network_error_is_unavailable(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ProviderUnavailableError):
            await _client(handler).generate("x")

    @pytest.mark.asyncio
    async def test_timeout_is_unavailable(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(ProviderUnavailableError, match="timed out"):
            await _client(handler).generate("x")

    @pytest.mark.asyncio
    async def test_non_json_reply(self):
        client = _client(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(ResponseParseError):
            await client.generate("x")

    @pytest.mark.asyncio
    async def test_reply_without_candidates(self):
        client = _client(lambda request: httpx.Response(200, json={"candidates": []}))
        with pytest.raises(ResponseParseError, match="no candidates"):
            await client.generate("x")


class TestParseJsonReply:
    """Model replies wrapped in fences or prose."""

    def test_plain_json(self):
        assert parse_json_reply('{"a": 1}') == {"a": 1}

    def test_fenced_json(self):
        reply = '```json\n{"simplifiedText": "Hi", "vocabulary": []}\n```'
        assert parse_json_reply(reply) == {"simplifiedText": "Hi", "vocabulary": []}

    def test_bare_fence(self):
        assert parse_json_reply('```\n{"a": 1}\n```') == {"a": 1}

    def test_prose_around_object(self):
        assert parse_json_reply('Here you go: {"a": 1} Enjoy!') == {"a": 1}

    def test_no_object(self):
        with pytest.raises(ResponseParseError):
            parse_json_reply("I cannot help with that.")

    def test_broken_object(self):
        with pytest.raises(ResponseParseError):
            parse_json_reply('Sure: {"a": 1,} done')

    def test_array_is_rejected(self):
        with pytest.raises(ResponseParseError, match="not a JSON object"):
            parse_json_reply("[1, 2]")
