"""Services for the application."""

from .document_store_factory import (
    create_document_store,
    create_document_store_from_settings,
)
from .git_store import GitCloneStore
from .github_store import GitHubContentsStore
from .search_service import SearchService

__all__ = [
    "GitCloneStore",
    "GitHubContentsStore",
    "SearchService",
    "create_document_store",
    "create_document_store_from_settings",
]
