from .s3_storage_client import S3StorageClient

__all__ = ["S3StorageClient"]
