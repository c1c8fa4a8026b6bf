"""
Observability hooks.
Exceptions that reach the global handlers are logged and counted per type so the
health endpoint can surface them.
"""

from collections import Counter
from typing import Dict
from fastapi import Request
import logging

from app.core.config import settings

logger = logging.getLogger(__name__)

_exception_counts: Counter = Counter()


def setup_observability() -> None:
    """Reset exception counters and announce the service identity."""
    _exception_counts.clear()
    logger.info(
        "Setting up observability",
        extra={
            "service_name": settings.OTEL_SERVICE_NAME,
            "environment": settings.OTEL_ENVIRONMENT,
        },
    )


def record_exception(exc: Exception, request: Request) -> None:
    """
    Record an exception that escaped a request handler.

    Args:
        exc: The exception that occurred
        request: The FastAPI request object
    """
    _exception_counts[type(exc).__name__] += 1
    logger.error(
        f"Exception recorded: {type(exc).__name__}",
        extra={
            "exception_message": str(exc),
            "path": request.url.path,
            "service_name": settings.OTEL_SERVICE_NAME,
        },
    )


def get_exception_counts() -> Dict[str, int]:
    """Snapshot of recorded exceptions keyed by exception class name."""
    return dict(_exception_counts)
