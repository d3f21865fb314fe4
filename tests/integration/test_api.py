"""
API integration tests.

Exercise the HTTP layer end to end through TestClient, with the provider
replaced by the ``mock_llm`` fixture.
"""

import json

import pytest
from fastapi.testclient import TestClient

from edvia.api.main import app
from edvia.core.config import settings
from edvia.middleware.rate_limiter import get_rate_limiter

pytestmark = pytest.mark.integration


class TestHealth:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "OK"
        assert data["version"] == "1.0.0"
        assert "/api/text" in data["endpoints"]

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "OK"
        assert response.json()["provider_configured"] is False

    def test_request_id_and_timing_headers(self, client):
        response = client.get("/api/health", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"
        assert "X-Process-Time" in response.headers

    def test_unknown_endpoint(self, client):
        response = client.get("/api/nope")

        assert response.status_code == 404
        assert response.json()["detail"] == "Endpoint not found"
        assert response.json()["error"] == "NOT_FOUND"


class TestProcessText:
    def test_fallback_grade3(self, client):
        response = client.post(
            "/api/text/process",
            json={
                "text": "The committee reached a unanimous decision.",
                "readingLevel": "grade3",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["simplifiedText"] == "The group reached a all agreed decision."
        assert data["readingLevel"] == "grade3"
        assert data["source"] == "fallback"
        assert "summary" not in data
        assert data["vocabulary"][2] == {
            "word": "unanimous",
            "definition": "everyone said yes",
            "example": "The class vote was unanimous, so we all got pizza.",
            "difficulty": "basic",
        }

    @pytest.mark.parametrize("level", ["phd", 5, True, ["grade3"], {"a": 1}, None])
    def test_invalid_level_becomes_middle_school(self, client, level):
        response = client.post(
            "/api/text/process", json={"text": "The committee met.", "readingLevel": level}
        )

        assert response.status_code == 200
        assert response.json()["readingLevel"] == "middle-school"
        assert response.json()["simplifiedText"] == "The group met."

    @pytest.mark.parametrize("level", [3, ["high-school"]])
    def test_non_string_level_on_other_routes(self, client, mock_llm, level):
        vocabulary = client.post(
            "/api/text/vocabulary", json={"text": "committee", "readingLevel": level}
        )
        assert vocabulary.status_code == 200
        assert vocabulary.json()["vocabulary"][0]["difficulty"] == "intermediate"

        mock_llm.generate.side_effect = None
        mock_llm.generate.return_value = '{"translatedText": "Hola"}'
        translation = client.post(
            "/api/translation/translate",
            json={"text": "Hello", "targetLanguage": "spanish", "readingLevel": level},
        )
        assert translation.status_code == 200
        assert translation.json()["readingLevel"] == "middle-school"

    def test_summary(self, client):
        response = client.post(
            "/api/text/process",
            json={
                "text": "One cat sat. Two dogs ran. Three birds flew.",
                "readingLevel": "grade3",
                "includeSummary": True,
            },
        )

        assert response.status_code == 200
        assert response.json()["summary"] == "One cat sat. Two dogs ran."

    def test_provider_reply(self, client, mock_llm):
        mock_llm.generate.side_effect = None
        mock_llm.generate.return_value = json.dumps(
            {"simplifiedText": "Everyone in the group agreed.", "vocabulary": []}
        )

        response = client.post("/api/text/process", json={"text": "Some text."})

        assert response.status_code == 200
        assert response.json()["source"] == "ai"
        assert response.json()["simplifiedText"] == "Everyone in the group agreed."

    @pytest.mark.parametrize(
        "body",
        [{}, {"text": ""}, {"text": 42}, {"readingLevel": "grade3"}],
    )
    def test_missing_text(self, client, body):
        response = client.post("/api/text/process", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"
        assert response.json()["detail"] == "Text is required and must be a string"

    def test_text_too_long(self, client):
        response = client.post(
            "/api/text/process", json={"text": "a" * (settings.MAX_TEXT_LENGTH + 1)}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == (
            "Text is too long. Maximum 10,000 characters allowed."
        )

    def test_text_at_limit(self, client):
        response = client.post(
            "/api/text/process", json={"text": "a" * settings.MAX_TEXT_LENGTH}
        )
        assert response.status_code == 200


class TestVocabulary:
    def test_vocabulary(self, client):
        response = client.post(
            "/api/text/vocabulary",
            json={"text": "elephant elephants", "readingLevel": "high-school"},
        )

        assert response.status_code == 200
        vocabulary = response.json()["vocabulary"]
        assert [item["word"] for item in vocabulary] == ["elephants"]
        assert vocabulary[0]["difficulty"] == "advanced"


class TestTTS:
    def test_tts(self, client):
        response = client.post("/api/text/tts", json={"text": "Cats & dogs!"})

        assert response.status_code == 200
        assert response.json() == {"text": "Cats dogs!"}


class TestTranslation:
    def test_languages(self, client):
        response = client.get("/api/translation/languages")

        assert response.status_code == 200
        languages = response.json()["languages"]
        assert len(languages) == 15
        assert languages["spanish"] == "Spanish"

    def test_translate(self, client, mock_llm):
        mock_llm.generate.side_effect = None
        mock_llm.generate.return_value = '{"translatedText": "Hola mundo"}'

        response = client.post(
            "/api/translation/translate",
            json={"text": "Hello world", "targetLanguage": "spanish"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["translatedText"] == "Hola mundo"
        assert data["languageName"] == "Spanish"
        assert data["readingLevel"] == "middle-school"
        assert data["wordCount"] == 2

    def test_unsupported_language(self, client, mock_llm):
        response = client.post(
            "/api/translation/translate",
            json={"text": "Hello", "targetLanguage": "klingon"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "UNSUPPORTED_LANGUAGE"
        mock_llm.generate.assert_not_called()

    def test_missing_target_language(self, client):
        response = client.post("/api/translation/translate", json={"text": "Hello"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Target language is required"

    def test_text_too_long(self, client):
        response = client.post(
            "/api/translation/translate",
            json={"text": "a" * 5001, "targetLanguage": "spanish"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == (
            "Text is too long for translation. Maximum 5,000 characters allowed."
        )

    def test_provider_unavailable(self, client):
        # No fallback for translation
        response = client.post(
            "/api/translation/translate",
            json={"text": "Hello", "targetLanguage": "spanish"},
        )

        assert response.status_code == 503
        assert response.json()["error"] == "PROVIDER_UNAVAILABLE"

    def test_quota_exceeded(self, client, mock_llm):
        from edvia.core.exceptions import ProviderQuotaError

        mock_llm.generate.side_effect = ProviderQuotaError()
        response = client.post(
            "/api/translation/translate",
            json={"text": "Hello", "targetLanguage": "spanish"},
        )

        assert response.status_code == 503
        assert "quota" in response.json()["detail"]


class TestRateLimiting:
    @pytest.fixture
    def limited_client(self, client, monkeypatch):
        monkeypatch.setattr(settings, "RATE_LIMIT_ENABLED", True)
        limiter = get_rate_limiter()
        monkeypatch.setattr(limiter.config, "requests", 2)
        limiter.reset()
        yield client
        limiter.reset()

    def test_limit_applies_to_api(self, limited_client):
        for _ in range(2):
            assert limited_client.get("/api/health").status_code == 200

        response = limited_client.get("/api/health")

        assert response.status_code == 429
        assert response.json()["error"] == "RATE_LIMIT_EXCEEDED"
        assert "Retry-After" in response.headers

    def test_root_is_not_limited(self, limited_client):
        for _ in range(3):
            assert limited_client.get("/").status_code == 200


def test_generic_errors_are_wrapped():
    """Unexpected failures return the error envelope without internals."""
    from edvia.api.dependencies import get_text_service

    def broken():
        raise RuntimeError("secret internals")

    app.dependency_overrides[get_text_service] = broken
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.post("/api/text/process", json={"text": "Hi"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json()["error"] == "INTERNAL_ERROR"
    assert response.json()["detail"] == "Internal server error"
