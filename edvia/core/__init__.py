"""Core configuration and exceptions."""

from .config import Settings, get_settings, settings
from .exceptions import (
    EdviaException,
    LexiconError,
    ProviderAuthError,
    ProviderError,
    ProviderQuotaError,
    ProviderUnavailableError,
    RateLimitError,
    ResponseParseError,
    UnsupportedLanguageError,
    ValidationError,
)

__all__ = [
    "EdviaException",
    "LexiconError",
    "ProviderAuthError",
    "ProviderError",
    "ProviderQuotaError",
    "ProviderUnavailableError",
    "RateLimitError",
    "ResponseParseError",
    "Settings",
    "UnsupportedLanguageError",
    "ValidationError",
    "get_settings",
    "settings",
]
