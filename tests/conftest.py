"""
Shared test fixtures.

The environment is configured before any ``edvia`` module is imported, since
settings are read once at import time.
"""

import os
import tempfile
from collections.abc import Generator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

# Set test environment BEFORE importing modules
os.environ["ENVIRONMENT"] = "test"
os.environ["GEMINI_API_KEY"] = ""
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="edvia-test-logs-")
os.environ.pop("LEXICON_PATH", None)

# Disable rate limiting by default for tests (specific tests can enable it)
os.environ["RATE_LIMIT_ENABLED"] = "false"

# Import after environment setup
from edvia.api.dependencies import get_text_service, get_translation_service
from edvia.api.main import app
from edvia.core.exceptions import ProviderUnavailableError
from edvia.services.llm_client import BaseLLMClient
from edvia.services.simplify import FallbackProcessor, TextProcessingService
from edvia.services.translate import TranslationService

# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (HTTP layer)")


# =============================================================================
# PROVIDER FIXTURES
# =============================================================================


@pytest.fixture
def mock_llm():
    """Provider client whose reply each test sets via ``generate``."""
    client = AsyncMock(spec=BaseLLMClient)
    client.generate = AsyncMock(side_effect=ProviderUnavailableError())
    return client


@pytest.fixture
def fallback() -> FallbackProcessor:
    return FallbackProcessor()


@pytest.fixture
def text_service(mock_llm, fallback) -> TextProcessingService:
    return TextProcessingService(client=mock_llm, fallback=fallback, fallback_enabled=True)


@pytest.fixture
def translation_service(mock_llm) -> TranslationService:
    return TranslationService(client=mock_llm)


# =============================================================================
# API CLIENT FIXTURES
# =============================================================================


@pytest.fixture
def client(text_service, translation_service) -> Generator[TestClient, None, None]:
    """Test client with services bound to the mock provider."""
    app.dependency_overrides[get_text_service] = lambda: text_service
    app.dependency_overrides[get_translation_service] = lambda: translation_service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
