from .storage_client import BucketDescriptor, StorageClient, StorageEnumerationError

__all__ = [
    "BucketDescriptor",
    "StorageClient",
    "StorageEnumerationError",
]
