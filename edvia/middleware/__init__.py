"""HTTP middleware."""

from .rate_limiter import (
    InMemoryRateLimiter,
    RateLimitConfig,
    get_rate_limiter,
    rate_limit_middleware,
)

__all__ = [
    "InMemoryRateLimiter",
    "RateLimitConfig",
    "get_rate_limiter",
    "rate_limit_middleware",
]
