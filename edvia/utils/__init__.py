"""Shared utilities."""

from .logging import (
    RequestContextFilter,
    get_logger,
    request_id_var,
    reset_request_id,
    set_request_id,
    setup_logging,
)

__all__ = [
    "RequestContextFilter",
    "get_logger",
    "request_id_var",
    "reset_request_id",
    "set_request_id",
    "setup_logging",
]
