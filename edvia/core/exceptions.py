"""Custom exception classes for Edvia.

Includes:
- Base exception carrying an HTTP status and error code
- Request validation errors
- Generative provider errors (the text service falls back on these)
- Lexicon configuration errors
"""

from datetime import UTC, datetime


class EdviaException(Exception):
    """Base exception for all Edvia errors."""

    def __init__(
        self, detail: str, status_code: int = 500, error_code: str = "INTERNAL_ERROR"
    ):
        self.detail = detail
        self.status_code = status_code
        self.error_code = error_code
        self.timestamp = datetime.now(UTC).isoformat()
        super().__init__(detail)

    def to_dict(self):
        """Convert exception to dictionary for API response."""
        return {
            "error": self.error_code,
            "detail": self.detail,
            "status_code": self.status_code,
            "timestamp": self.timestamp,
        }


class ValidationError(EdviaException):
    """Raised when input validation fails."""

    def __init__(self, detail: str):
        super().__init__(detail=detail, status_code=400, error_code="VALIDATION_ERROR")


class UnsupportedLanguageError(EdviaException):
    """Raised when a translation target is not supported."""

    def __init__(self, language: str, supported: list[str] | None = None):
        detail = f"Unsupported language: {language}"
        if supported:
            detail = f"Unsupported language. Supported languages: {', '.join(supported)}"
        self.language = language
        super().__init__(
            detail=detail, status_code=400, error_code="UNSUPPORTED_LANGUAGE"
        )


class RateLimitError(EdviaException):
    """Raised when rate limit is exceeded."""

    def __init__(self, detail: str = "Rate limit exceeded", retry_after: int = 0):
        self.retry_after = retry_after
        super().__init__(
            detail=detail, status_code=429, error_code="RATE_LIMIT_EXCEEDED"
        )


class LexiconError(EdviaException):
    """Raised when the simplification lexicon cannot be loaded."""

    def __init__(self, detail: str):
        super().__init__(
            detail=f"Lexicon error: {detail}",
            status_code=500,
            error_code="LEXICON_ERROR",
        )


# =============================================================================
# PROVIDER EXCEPTIONS
# =============================================================================


class ProviderError(EdviaException):
    """Base exception for generative provider failures."""

    def __init__(
        self,
        detail: str,
        status_code: int = 502,
        error_code: str = "PROVIDER_ERROR",
        provider: str = "gemini",
    ):
        self.provider = provider
        super().__init__(detail=detail, status_code=status_code, error_code=error_code)


class ProviderUnavailableError(ProviderError):
    """Raised when the provider is not configured or unreachable."""

    def __init__(self, detail: str = "Generative provider is not configured"):
        super().__init__(
            detail=detail, status_code=503, error_code="PROVIDER_UNAVAILABLE"
        )


class ProviderAuthError(ProviderError):
    """Raised when the provider rejects the API key."""

    def __init__(
        self, detail: str = "Invalid Gemini API key. Please check your configuration."
    ):
        super().__init__(detail=detail, status_code=401, error_code="INVALID_API_KEY")


class ProviderQuotaError(ProviderError):
    """Raised when the provider quota or rate limit is exhausted."""

    def __init__(
        self, detail: str = "Gemini API quota exceeded. Please try again later."
    ):
        super().__init__(
            detail=detail, status_code=503, error_code="PROVIDER_QUOTA_EXCEEDED"
        )


class ResponseParseError(ProviderError):
    """Raised when the provider reply is not the expected JSON shape."""

    def __init__(self, detail: str, raw_response: str = ""):
        self.raw_response = raw_response
        super().__init__(
            detail=f"Response parsing failed: {detail}",
            status_code=502,
            error_code="RESPONSE_PARSE_ERROR",
        )
