"""Schemas for the application."""

from .search import SearchRequest, SearchResponse

__all__ = ["SearchRequest", "SearchResponse"]
