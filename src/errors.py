"""Exceptions raised by document stores and the search service."""

from typing import Optional


class DocumentStoreError(Exception):
    """Base class for failures talking to a document store."""


class ListingError(DocumentStoreError):
    """The store listing could not be fetched or was malformed."""


class ContentFetchError(DocumentStoreError):
    """The raw content of a single document could not be fetched."""

    def __init__(self, document_name: str, message: str):
        super().__init__(f"{document_name}: {message}")
        self.document_name = document_name


class RateLimitError(ListingError):
    """The store refused the request because the API rate limit is exhausted."""

    def __init__(self, message: str, reset_at: Optional[int] = None):
        super().__init__(message)
        self.reset_at = reset_at
