"""Error kinds raised across the ingestion pipeline.

- FetchError: source unreachable or malformed response
- StorageError: database engine failure (lock, disk, missing table, ...)
- DeliveryError: push transport failure
"""
from typing import Optional


class NoticeRelayError(Exception):
    """Base class for pipeline errors."""


class FetchError(NoticeRelayError):
    def __init__(self, message: str, category: Optional[str] = None):
        self.category = category
        super().__init__(message)


class StorageError(NoticeRelayError):
    pass


class DeliveryError(NoticeRelayError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
