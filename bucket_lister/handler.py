"""
Invocation handler that lists the buckets visible to the execution identity.

Every outcome is returned as a ResponseEnvelope; nothing raised while
enumerating escapes the call.
"""

import logging
from collections.abc import Callable
from contextlib import suppress
from typing import Any

import structlog

from .domain.ports import StorageClient
from .domain.value_objects import InvocationEvent, ResponseEnvelope
from .infrastructure.logging import Timer, reset_request_id, set_request_id


class InvocationHandler:
    """
    Lists buckets through an injected StorageClient.

    The factory is called once per invocation. It may hand back the same
    client every time as long as that client keeps no business state.
    """

    def __init__(
        self,
        storage_client_factory: Callable[[], StorageClient],
        logger: Any = None,
        log_events: bool = True,
    ) -> None:
        self._storage_client_factory = storage_client_factory
        self._logger = logger if logger is not None else structlog.get_logger()
        self._log_events = log_events

    def __call__(self, event: Any, context: Any) -> dict[str, Any]:
        """Runtime entry point returning the envelope as a plain mapping."""
        return self.handle(event, context).to_dict()

    def handle(self, event: Any, context: Any) -> ResponseEnvelope:
        """
        Handle one invocation.

        Args:
            event: Event supplied by the runtime, read but never modified
            context: Runtime context; ``aws_request_id`` and ``logger`` (or
                ``get_logger()``) are used when present

        Returns:
            200 envelope with bucket names, or 500 envelope with the failure
        """
        invocation_event = InvocationEvent.from_raw(event)
        sink = self._logger
        rid = ""
        with suppress(Exception):
            sink = self._resolve_sink(context)
        with suppress(Exception):
            rid = str(getattr(context, "aws_request_id", "") or "")
        token = set_request_id(rid)

        try:
            if self._log_events:
                _emit(sink, "info", "Received event", received_event=dict(invocation_event))
            _emit(sink, "info", "Handler initializing", handler=type(self).__name__)

            try:
                with Timer() as t:
                    names = self._list_bucket_names()
            except Exception as e:
                description = str(e) or type(e).__name__
                _emit(
                    sink,
                    "error",
                    "Error listing buckets",
                    error=description,
                    error_type=type(e).__name__,
                    exc_info=e,
                )
                return ResponseEnvelope.failure(description)

            _emit(
                sink,
                "info",
                "Successfully retrieved buckets",
                count=len(names),
                duration_ms=t.duration_ms,
            )
            return ResponseEnvelope.success(names)
        finally:
            reset_request_id(token)

    def _resolve_sink(self, context: Any) -> Any:
        sink = getattr(context, "logger", None)
        if sink is None:
            get_logger = getattr(context, "get_logger", None)
            if callable(get_logger):
                sink = get_logger()
        if sink is None:
            return self._logger
        if isinstance(sink, (logging.Logger, logging.LoggerAdapter)):
            return structlog.wrap_logger(
                sink,
                processors=[
                    structlog.processors.format_exc_info,
                    structlog.processors.JSONRenderer(default=str),
                ],
                wrapper_class=structlog.stdlib.BoundLogger,
            )
        return sink

    def _list_bucket_names(self) -> list[str]:
        client = self._storage_client_factory()
        return [bucket.name for bucket in client.list_buckets()]


def _emit(sink: Any, level: str, message: str, **fields: Any) -> None:
    """Write one log line; a failing sink never affects the invocation."""
    with suppress(Exception):
        getattr(sink, level)(message, **fields)
