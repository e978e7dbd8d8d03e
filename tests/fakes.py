"""Test doubles shared across the test suite."""

import asyncio
from typing import Dict, List, Optional

from src.errors import ContentFetchError
from src.models import Document, RepositoryLocation


class FakeDocumentStore:
    """In-memory DocumentStoreProtocol implementation for tests."""

    def __init__(
        self,
        entries: List[Document],
        contents: Dict[str, str],
        failing: Optional[List[str]] = None,
        slow: Optional[List[str]] = None,
        listing_error: Optional[Exception] = None,
    ):
        self.entries = entries
        self.contents = contents
        self.failing = set(failing or [])
        self.slow = set(slow or [])
        self.listing_error = listing_error
        self.cancelled: List[str] = []
        self.cancelled_at_exit: Optional[List[str]] = None
        self.fetched: List[str] = []
        self.opened = 0
        self.closed = 0
        self._location = RepositoryLocation(owner="octo", repo="notes", branch="main")

    @property
    def location(self) -> RepositoryLocation:
        return self._location

    async def __aenter__(self):
        self.opened += 1
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.closed += 1
        self.cancelled_at_exit = list(self.cancelled)

    async def list_documents(self) -> List[Document]:
        if self.listing_error is not None:
            raise self.listing_error
        return list(self.entries)

    async def fetch_content(self, document: Document) -> str:
        self.fetched.append(document.name)
        if document.name in self.failing:
            raise ContentFetchError(document.name, "HTTP 500 from download URL")
        if document.name in self.slow:
            try:
                await asyncio.sleep(60)
            except asyncio.CancelledError:
                self.cancelled.append(document.name)
                raise
        return self.contents[document.name]


def md_file(name: str) -> Document:
    return Document(
        name=name,
        type="file",
        download_url=f"https://raw.githubusercontent.com/octo/notes/main/{name}",
    )
