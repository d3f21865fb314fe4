"""
Rate Limiter Implementation

Fixed-window request counting per client IP, kept in process memory.
Mirrors the API's public contract: 100 requests per 15 minutes by default.
"""
import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from fastapi import Request
from fastapi.responses import JSONResponse

from ..core.config import settings
from ..core.exceptions import RateLimitError

logger = logging.getLogger(__name__)


@dataclass
class RateLimitConfig:
    """Rate limit configuration."""
    requests: int = 100
    window_seconds: int = 900


@dataclass
class _Window:
    started_at: float
    count: int = 0


class InMemoryRateLimiter:
    """Fixed-window counter per key."""

    def __init__(self, config: Optional[RateLimitConfig] = None, clock=time.monotonic):
        self.config = config or RateLimitConfig(
            requests=settings.RATE_LIMIT_REQUESTS,
            window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
        )
        self._clock = clock
        self._windows: Dict[str, _Window] = {}
        self._lock = asyncio.Lock()

    def _purge_expired(self, now: float) -> None:
        expired = [
            key for key, window in self._windows.items()
            if now - window.started_at >= self.config.window_seconds
        ]
        for key in expired:
            del self._windows[key]

    async def check(self, key: str) -> Tuple[bool, float, Dict[str, int]]:
        """
        Count a request for key.

        Returns:
            Tuple of (allowed, retry_after_seconds, headers)
        """
        async with self._lock:
            now = self._clock()
            self._purge_expired(now)

            window = self._windows.get(key)
            if window is None:
                window = self._windows[key] = _Window(started_at=now)

            reset_in = self.config.window_seconds - (now - window.started_at)
            headers = {
                "X-RateLimit-Limit": self.config.requests,
                "X-RateLimit-Remaining": max(0, self.config.requests - window.count - 1),
                "X-RateLimit-Reset": int(reset_in),
            }

            if window.count >= self.config.requests:
                headers["X-RateLimit-Remaining"] = 0
                headers["Retry-After"] = int(reset_in) + 1
                return False, reset_in, headers

            window.count += 1
            return True, 0, headers

    def reset(self) -> None:
        self._windows.clear()


# Global rate limiter
_rate_limiter: Optional[InMemoryRateLimiter] = None


def get_rate_limiter() -> InMemoryRateLimiter:
    """Get global rate limiter."""
    global _rate_limiter
    if _rate_limiter is None:
        _rate_limiter = InMemoryRateLimiter()
    return _rate_limiter


async def rate_limit_middleware(request: Request, call_next):
    """
    FastAPI middleware for rate limiting.

    Add to app:
        app.middleware("http")(rate_limit_middleware)
    """
    # Only API routes are limited
    if not settings.RATE_LIMIT_ENABLED or not request.url.path.startswith(
        f"{settings.API_PREFIX}/"
    ):
        return await call_next(request)

    identifier = request.client.host if request.client else "unknown"
    allowed, retry_after, headers = await get_rate_limiter().check(identifier)

    if not allowed:
        logger.warning("Rate limit exceeded for %s on %s", identifier, request.url.path)
        exc = RateLimitError(
            f"Rate limit exceeded. Try again in {int(retry_after) + 1} seconds.",
            retry_after=int(retry_after) + 1,
        )
        response = JSONResponse(status_code=exc.status_code, content=exc.to_dict())
        for key, value in headers.items():
            response.headers[key] = str(value)
        return response

    response = await call_next(request)

    for key, value in headers.items():
        response.headers[key] = str(value)

    return response
