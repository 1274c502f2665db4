"""Blob publishing adapters."""

from .local_file_adapter import LocalFilePublisherAdapter
from .s3_adapter import S3PublisherAdapter

__all__ = ["LocalFilePublisherAdapter", "S3PublisherAdapter"]
