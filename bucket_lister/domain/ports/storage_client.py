"""
Outbound port for bucket enumeration.

This port defines the single storage operation the handler depends on.
Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class BucketDescriptor:
    """A bucket as reported by the storage service."""

    name: str
    created_at: datetime | None = None


class StorageEnumerationError(Exception):
    """Raised when the storage service cannot list buckets."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class StorageClient(ABC):
    """
    Outbound port for listing buckets.

    The client acts with the ambient identity of the process; no
    credentials cross this boundary.
    """

    @abstractmethod
    def list_buckets(self) -> list[BucketDescriptor]:
        """
        List every bucket visible to the current identity.

        Returns:
            Descriptors in the order the service reports them. Services
            that paginate are flattened; either all pages are returned or
            the call fails.

        Raises:
            StorageEnumerationError: If the listing cannot be completed
        """
        ...
