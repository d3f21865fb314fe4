"""
Logging setup for the Edvia API.

Every record carries the ID of the HTTP request that produced it
(``request_id``, ``"-"`` outside a request), so provider failures and
fallback warnings can be matched to the request line that triggered them.
"""

import contextvars
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from ..core.config import settings

APP_LOGGER = "edvia"

CONSOLE_FORMAT = "%(levelname)s [%(request_id)s] %(name)s - %(message)s"
FILE_FORMAT = (
    "%(asctime)s %(levelname)s [%(request_id)s] %(name)s "
    "%(funcName)s:%(lineno)d - %(message)s"
)

# httpx logs full request URLs at INFO, and Gemini URLs carry the API key
_QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")

request_id_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "request_id", default=None
)


def set_request_id(request_id: Optional[str]) -> contextvars.Token:
    """Bind a request ID to the current context; returns the reset token."""
    return request_id_var.set(request_id)


def reset_request_id(token: contextvars.Token) -> None:
    request_id_var.reset(token)


class RequestContextFilter(logging.Filter):
    """Stamp records with the current request ID."""

    def filter(self, record: logging.LogRecord) -> bool:
        # explicit extra={"request_id": ...} wins
        if not getattr(record, "request_id", None):
            record.request_id = request_id_var.get() or "-"
        return True


def setup_logging(
    name: str | None = None, log_level: str | None = None
) -> logging.Logger:
    """
    Configure the application logger once.

    Console output is always attached; the rotating file under
    ``settings.LOG_DIR`` is best effort, a read-only disk only costs a warning.
    """
    logger = logging.getLogger(name or APP_LOGGER)
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, (log_level or settings.LOG_LEVEL).upper(), logging.INFO))
    context_filter = RequestContextFilter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        logging.Formatter(CONSOLE_FORMAT if settings.ENVIRONMENT == "production" else FILE_FORMAT)
    )
    console_handler.addFilter(context_filter)
    logger.addHandler(console_handler)

    try:
        settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            settings.LOG_DIR / settings.LOG_FILE,
            maxBytes=settings.LOG_MAX_BYTES,
            backupCount=settings.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        logger.warning(f"File logging disabled: {e}")
    else:
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        file_handler.addFilter(context_filter)
        logger.addHandler(file_handler)

    for noisy in _QUIET_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Module logger; use ``__name__`` so records propagate to ``edvia``."""
    return logging.getLogger(name)
