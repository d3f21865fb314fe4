"""Centralized configuration management."""

import logging
import os
from pathlib import Path
from typing import Literal

# Load .env file BEFORE any settings are read
# This ensures environment variables are available when Settings() is instantiated
try:
    from dotenv import load_dotenv

    # Load from project root (this file lives in edvia/core/)
    env_path = Path(__file__).parent.parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)
except ImportError:
    pass  # python-dotenv not installed, rely on system env vars


Environment = Literal["development", "test", "production"]


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Settings:
    """Application settings."""

    # =================================================================
    # APPLICATION
    # =================================================================
    APP_NAME: str = "Edvia Text API"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: Environment = os.getenv("ENVIRONMENT", "development")
    DEBUG: bool = _env_bool("DEBUG", "false")

    # =================================================================
    # API CONFIGURATION
    # =================================================================
    API_PREFIX: str = "/api"
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3001"))

    # =================================================================
    # GENERATIVE PROVIDER (Gemini REST API)
    # =================================================================
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
    GEMINI_BASE_URL: str = os.getenv(
        "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
    )
    PROVIDER_TIMEOUT: float = float(os.getenv("PROVIDER_TIMEOUT", "30.0"))
    GENERATION_TEMPERATURE: float = float(os.getenv("GENERATION_TEMPERATURE", "0.3"))
    GENERATION_MAX_TOKENS: int = int(os.getenv("GENERATION_MAX_TOKENS", "2000"))
    VOCABULARY_MAX_TOKENS: int = int(os.getenv("VOCABULARY_MAX_TOKENS", "1000"))

    # Serve the rule-based simplifier when the provider fails
    FALLBACK_ENABLED: bool = _env_bool("FALLBACK_ENABLED", "true")

    # =================================================================
    # TEXT LIMITS
    # =================================================================
    MAX_TEXT_LENGTH: int = int(os.getenv("MAX_TEXT_LENGTH", "10000"))
    MAX_TRANSLATION_LENGTH: int = int(os.getenv("MAX_TRANSLATION_LENGTH", "5000"))

    # Optional override for the packaged lexicon.json
    LEXICON_PATH: str = os.getenv("LEXICON_PATH", "")

    # =================================================================
    # CORS
    # NOTE: In production, set ALLOWED_ORIGINS environment variable
    # to a comma-separated list of allowed origins.
    # =================================================================
    ALLOWED_ORIGINS: list[str] = [
        "http://localhost:3000",
        "https://edvia.vercel.app",
    ]
    ALLOWED_ORIGIN_REGEX: str = os.getenv(
        "ALLOWED_ORIGIN_REGEX", r"https://.*\.vercel\.app"
    )
    ALLOW_CREDENTIALS: bool = True
    ALLOWED_METHODS: list[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    ALLOWED_HEADERS: list[str] = ["Content-Type", "Authorization"]

    # =================================================================
    # RATE LIMITING
    # =================================================================
    RATE_LIMIT_ENABLED: bool = _env_bool("RATE_LIMIT_ENABLED", "true")
    RATE_LIMIT_REQUESTS: int = int(os.getenv("RATE_LIMIT_REQUESTS", "100"))
    RATE_LIMIT_WINDOW_SECONDS: int = int(
        os.getenv("RATE_LIMIT_WINDOW_SECONDS", "900")
    )  # 15 minutes

    # =================================================================
    # LOGGING
    # =================================================================
    LOG_DIR: Path = Path(os.getenv("LOG_DIR", "logs"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "edvia.log")
    LOG_MAX_BYTES: int = 10485760  # 10 MB
    LOG_BACKUP_COUNT: int = 5
    SLOW_REQUEST_THRESHOLD: float = float(os.getenv("SLOW_REQUEST_THRESHOLD", "5.0"))

    def __init__(self):
        """Initialize settings and create necessary directories."""
        # Parse ALLOWED_ORIGINS from environment
        allowed_env = os.getenv("ALLOWED_ORIGINS")
        if allowed_env:
            parsed = [o.strip() for o in allowed_env.split(",") if o.strip()]
            if parsed:
                self.ALLOWED_ORIGINS = parsed

        self.LOG_DIR.mkdir(parents=True, exist_ok=True)

    @property
    def provider_configured(self) -> bool:
        """Whether a Gemini API key is available."""
        return bool(self.GEMINI_API_KEY)

    @property
    def lexicon_path(self) -> Path | None:
        """Lexicon override path, if one is configured."""
        return Path(self.LEXICON_PATH) if self.LEXICON_PATH else None

    def validate_required(self) -> list[str]:
        """
        Validate configuration at startup.
        Returns list of warnings/errors.
        """
        issues: list[str] = []
        logger = logging.getLogger(__name__)

        if not self.GEMINI_API_KEY:
            issues.append(
                "WARNING: GEMINI_API_KEY not set, all requests use the rule-based fallback"
            )
        if self.ENVIRONMENT == "production" and self.DEBUG:
            issues.append("WARNING: DEBUG=true in production")
        if self.lexicon_path is not None and not self.lexicon_path.exists():
            issues.append(f"ERROR: LEXICON_PATH ({self.lexicon_path}) does not exist")

        for issue in issues:
            log_method = logger.error if issue.startswith("ERROR") else logger.warning
            log_method(issue)

        return issues


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings
