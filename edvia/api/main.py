"""
Edvia Text API
==============

FastAPI application serving reading-level simplification, vocabulary
extraction, speech preparation and translation.

- Routes under /api (text, translation, health)
- Gemini provider with rule-based fallback for simplification
- In-memory per-IP rate limiting on /api/*
- Consistent JSON error envelope for every failure
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.config import settings
from ..core.exceptions import EdviaException
from ..middleware.rate_limiter import rate_limit_middleware
from ..services.llm_client import close_llm_client
from ..services.simplify import get_lexicon
from ..utils.logging import setup_logging
from .middleware import (
    RequestIDMiddleware,
    RequestLoggingMiddleware,
    RequestTimingMiddleware,
    exception_handler,
    generic_exception_handler,
    validation_exception_handler,
)
from .routes import router as api_router

# Initialize logging
logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager - handles startup and shutdown."""
    # ==================== STARTUP ====================
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Debug mode: {settings.DEBUG}")

    settings.validate_required()

    # Fail at startup rather than on the first fallback request
    lexicon = get_lexicon()
    logger.info(
        f"Lexicon loaded ({sum(len(t) for t in lexicon.replacements.values())} replacements)"
    )

    if not settings.provider_configured:
        logger.warning("Gemini provider not configured, serving rule-based fallback only")

    yield  # Application runs here

    # ==================== SHUTDOWN ====================
    logger.info(f"Shutting down {settings.APP_NAME}")
    await close_llm_client()


app = FastAPI(
    title=settings.APP_NAME,
    description="Reading-level text simplification, vocabulary and translation API",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# ==================== MIDDLEWARE CONFIGURATION ====================
# Starlette runs the last added middleware first

app.middleware("http")(rate_limit_middleware)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(RequestTimingMiddleware)
app.add_middleware(RequestIDMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_origin_regex=settings.ALLOWED_ORIGIN_REGEX or None,
    allow_credentials=settings.ALLOW_CREDENTIALS,
    allow_methods=settings.ALLOWED_METHODS,
    allow_headers=settings.ALLOWED_HEADERS,
    expose_headers=[
        "X-Process-Time",
        "X-RateLimit-Limit",
        "X-RateLimit-Remaining",
        "X-RateLimit-Reset",
        "Retry-After",
        "X-Request-ID",
    ],
)

# ==================== EXCEPTION HANDLERS ====================

app.add_exception_handler(EdviaException, exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Keep framework HTTP errors (404, 405) in the API error envelope."""
    if exc.status_code == 404:
        error_code, detail = "NOT_FOUND", "Endpoint not found"
    else:
        error_code, detail = "HTTP_ERROR", str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=EdviaException(detail, exc.status_code, error_code).to_dict(),
        headers=getattr(exc, "headers", None),
    )


# ==================== ROUTES ====================

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    """Service banner."""
    return {
        "status": "OK",
        "message": f"{settings.APP_NAME} is running",
        "version": settings.APP_VERSION,
        "endpoints": [
            f"{settings.API_PREFIX}/health",
            f"{settings.API_PREFIX}/text",
            f"{settings.API_PREFIX}/translation",
        ],
    }
