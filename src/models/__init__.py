"""Models for the application."""

from .document import Document, EntryType, MatchResult, RepositoryLocation
from .tag_extractor import extract_tags

__all__ = [
    "Document",
    "EntryType",
    "MatchResult",
    "RepositoryLocation",
    "extract_tags",
]
