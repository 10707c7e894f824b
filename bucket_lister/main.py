"""Lambda entry point for the bucket-lister handler."""

import argparse
import json
import sys
import uuid
from types import SimpleNamespace
from typing import Any

import structlog

from .config import settings
from .domain.ports import StorageClient
from .handler import InvocationHandler
from .infrastructure.adapters import S3StorageClient
from .infrastructure.logging import configure_logging

configure_logging(settings.service_name, settings.log_level)

logger = structlog.get_logger()

# Reused across warm invocations of this process; holds no business state.
_storage_client: StorageClient | None = None


def get_storage_client() -> StorageClient:
    """Get or create the process-wide S3 storage client."""
    global _storage_client
    if _storage_client is None:
        _storage_client = S3StorageClient(settings=settings)
    return _storage_client


_handler = InvocationHandler(get_storage_client, log_events=settings.log_events)

logger.info(
    "Cold start",
    service=settings.service_name,
    instrumentation_wrapper=settings.exec_wrapper,
)


def handler(event: dict, context) -> dict:
    """AWS Lambda handler returning the ``{statusCode, body}`` envelope."""
    return _handler(event, context)


def main(argv: list[str] | None = None) -> int:
    """Invoke the handler locally and print the envelope."""
    parser = argparse.ArgumentParser(
        prog="bucket-lister",
        description="List the buckets visible to the current AWS identity.",
    )
    parser.add_argument(
        "event",
        nargs="?",
        default="{}",
        help="Invocation event as a JSON document (default: {})",
    )
    args = parser.parse_args(argv)

    try:
        event: Any = json.loads(args.event)
    except json.JSONDecodeError as e:
        parser.error(f"event is not valid JSON: {e}")

    context = SimpleNamespace(
        aws_request_id=str(uuid.uuid4()),
        function_name=settings.service_name,
    )
    response = handler(event, context)
    print(json.dumps(response, indent=2, default=str))
    return 0 if response["statusCode"] == 200 else 1


if __name__ == "__main__":
    sys.exit(main())
