"""Logging module with structured logging and request tracking."""

from citizen_services.core.logging.config import configure_logging
from citizen_services.core.logging.middleware import (
    RequestIdMiddleware,
    RequestLoggingMiddleware,
)


__all__ = [
    "RequestIdMiddleware",
    "RequestLoggingMiddleware",
    "configure_logging",
]
