"""API middleware for request tracing, logging, timing and error handling."""

import time
import uuid
from collections.abc import Callable
from datetime import UTC, datetime

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ..core.config import settings
from ..core.exceptions import EdviaException, ValidationError
from ..utils.logging import get_logger, reset_request_id, set_request_id

logger = get_logger(__name__)

# Paths that skip request logging
_SKIP_LOGGING_PATHS = frozenset(["/", "/api/health", "/favicon.ico"])

# Friendly messages for body fields, keyed by field name
_FIELD_MESSAGES = {
    "text": "Text is required and must be a string",
    "targetLanguage": "Target language is required",
    "includeSummary": "includeSummary must be a boolean",
}


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Add unique request ID for tracing and bind it to log records."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        request.state.request_id = request_id

        token = set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(token)
        response.headers["X-Request-ID"] = request_id
        return response


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Add request timing and log slow requests."""

    def __init__(self, app, slow_threshold: float | None = None):
        super().__init__(app)
        self._slow_threshold = (
            settings.SLOW_REQUEST_THRESHOLD if slow_threshold is None else slow_threshold
        )

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        process_time = time.perf_counter() - start_time
        response.headers["X-Process-Time"] = f"{process_time:.4f}"

        if process_time > self._slow_threshold:
            logger.warning(
                "Slow request: %s %s took %.2fs",
                request.method,
                request.url.path,
                process_time,
            )

        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log API requests with request ID correlation."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        if path in _SKIP_LOGGING_PATHS:
            return await call_next(request)

        request_id = getattr(request.state, "request_id", None)
        method = request.method
        client = request.client

        logger.info(
            "Request: %s %s from %s",
            method,
            path,
            client.host if client else "unknown",
            extra={"request_id": request_id},
        )

        response = await call_next(request)

        if response.status_code >= 400:
            logger.warning(
                "Response: %s %s status=%d",
                method,
                path,
                response.status_code,
                extra={"request_id": request_id},
            )

        return response


def exception_handler(request: Request, exc: EdviaException) -> JSONResponse:
    """Handle custom Edvia exceptions."""
    logger.error(
        "EdviaException: %s - %s (status=%d) for %s %s",
        exc.error_code,
        exc.detail,
        exc.status_code,
        request.method,
        request.url.path,
    )
    response = JSONResponse(status_code=exc.status_code, content=exc.to_dict())
    retry_after = getattr(exc, "retry_after", 0)
    if retry_after:
        response.headers["Retry-After"] = str(retry_after)
    return response


def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Map request body validation failures to a 400 with a readable message."""
    errors = exc.errors()
    message = "Invalid request body"
    if errors:
        loc = errors[0].get("loc", ())
        field = loc[-1] if loc else None
        message = _FIELD_MESSAGES.get(field, errors[0].get("msg", message))
        if field not in _FIELD_MESSAGES and field is not None:
            message = f"{field}: {message}"

    logger.info("Validation failed for %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content=ValidationError(message).to_dict())


def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(
        "Unhandled exception for %s %s: %s", request.method, request.url.path, str(exc)
    )

    detail = str(exc) if settings.DEBUG else "Internal server error"

    return JSONResponse(
        status_code=500,
        content={
            "error": "INTERNAL_ERROR",
            "detail": detail,
            "status_code": 500,
            "timestamp": datetime.now(UTC).isoformat(),
        },
    )
