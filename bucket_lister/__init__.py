"""Serverless handler that lists the storage buckets visible to its identity."""

__version__ = "0.1.0"
