"""
Logging configuration for the bucket-lister handler.

Centralized logging setup with:
- Structured JSON output
- Request ID tracking per invocation
- Performance timing helpers
"""

import logging
import sys
import time
from contextvars import ContextVar, Token

import structlog

# Context variable for invocation correlation
request_id: ContextVar[str] = ContextVar("request_id", default="")


def configure_logging(service_name: str, level: str = "INFO") -> None:
    """
    Configure structured logging for the handler.

    Args:
        service_name: Name of the service for log context
        level: Minimum log level name
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_service_name(service_name),
            _add_request_id,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(default=str),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def _add_service_name(service_name: str):
    """Processor to add service name to all logs."""

    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    return processor


def _add_request_id(logger, method_name, event_dict):
    """Processor to add the invocation request ID if present."""
    rid = request_id.get()
    if rid:
        event_dict["request_id"] = rid
    return event_dict


def set_request_id(rid: str) -> Token[str]:
    """Set request ID for current context (e.g., from the Lambda context)."""
    return request_id.set(rid)


def reset_request_id(token: Token[str]) -> None:
    """Restore the request ID that was current before set_request_id."""
    request_id.reset(token)


class Timer:
    """
    Context manager for timing operations.

    Usage:
        with Timer() as t:
            client.list_buckets()
        logger.info("Listed buckets", duration_ms=t.duration_ms)
    """

    def __init__(self):
        self._start: float = 0
        self._end: float = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self._end = time.perf_counter()

    @property
    def duration_ms(self) -> float:
        """Duration in milliseconds, rounded to 2 decimal places."""
        return round((self._end - self._start) * 1000, 2)
