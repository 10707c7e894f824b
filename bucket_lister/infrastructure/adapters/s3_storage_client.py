"""
S3 storage client implementation.

This adapter implements StorageClient with boto3, using the credentials and
region supplied by the execution environment.
"""

from typing import Any

import boto3
import structlog
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ...config import Settings, settings as default_settings
from ...domain.ports import BucketDescriptor, StorageClient, StorageEnumerationError

logger = structlog.get_logger()


def build_s3_client(settings: Settings = default_settings) -> Any:
    """Create a boto3 S3 client from ambient credentials."""
    client_kwargs: dict[str, Any] = {
        "config": Config(
            connect_timeout=settings.s3_connect_timeout_seconds,
            read_timeout=settings.s3_read_timeout_seconds,
            retries={"total_max_attempts": settings.s3_max_attempts, "mode": "standard"},
        ),
    }
    if settings.aws_region:
        client_kwargs["region_name"] = settings.aws_region
    if settings.aws_endpoint_url:
        client_kwargs["endpoint_url"] = settings.aws_endpoint_url

    return boto3.client("s3", **client_kwargs)


class S3StorageClient(StorageClient):
    """
    boto3 implementation of StorageClient.

    Holds no state besides the underlying client, which boto3 documents as
    safe to reuse across calls.
    """

    def __init__(self, client: Any = None, settings: Settings = default_settings) -> None:
        self._client = client if client is not None else build_s3_client(settings)

    def list_buckets(self) -> list[BucketDescriptor]:
        """
        List all buckets, following continuation tokens.

        Pages are accumulated locally and only returned once the last page
        has been read, so a failure on any page fails the whole listing.
        """
        descriptors: list[BucketDescriptor] = []
        token: str | None = None
        pages = 0

        while True:
            kwargs = {"ContinuationToken": token} if token else {}
            try:
                resp = self._client.list_buckets(**kwargs)
            except ClientError as e:
                error = e.response.get("Error", {})
                raise StorageEnumerationError(
                    error.get("Message") or str(e),
                    code=error.get("Code"),
                ) from e
            except BotoCoreError as e:
                raise StorageEnumerationError(str(e)) from e

            pages += 1
            descriptors.extend(self._parse_buckets(resp))

            token = resp.get("ContinuationToken")
            if not token:
                break

        logger.debug("Listed buckets from S3", count=len(descriptors), pages=pages)
        return descriptors

    @staticmethod
    def _parse_buckets(resp: dict) -> list[BucketDescriptor]:
        buckets = resp.get("Buckets", [])
        if not isinstance(buckets, list):
            raise StorageEnumerationError(
                f"Malformed ListBuckets response: Buckets is {type(buckets).__name__}"
            )

        parsed = []
        for bucket in buckets:
            try:
                name = bucket["Name"]
            except (KeyError, TypeError) as e:
                raise StorageEnumerationError(
                    f"Malformed ListBuckets response: bucket entry without Name: {bucket!r}"
                ) from e
            parsed.append(BucketDescriptor(name=name, created_at=bucket.get("CreationDate")))
        return parsed
