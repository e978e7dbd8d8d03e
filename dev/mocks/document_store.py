"""Mock implementation of DocumentStoreProtocol for development and testing."""

import asyncio
from pathlib import Path
from typing import List

from src.errors import ContentFetchError
from src.models import Document, EntryType, RepositoryLocation


class MockDocumentStore:
    """Mock DocumentStoreProtocol that serves files from dev/mock-docs."""

    def __init__(self, location: RepositoryLocation, recursive: bool = False):
        self._location = location
        self.recursive = recursive

        # Use absolute path to dev/mock-docs for all operations
        self._mock_docs_path = Path(__file__).parent.parent / "mock-docs"

    @property
    def location(self) -> RepositoryLocation:
        return self._location

    async def __aenter__(self) -> "MockDocumentStore":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def list_documents(self) -> List[Document]:
        """List the mock docs directory."""
        if not self._mock_docs_path.exists():
            return []
        return self._list_directory(self._mock_docs_path)

    def _list_directory(self, directory: Path) -> List[Document]:
        documents = []
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            relative_path = entry.relative_to(self._mock_docs_path).as_posix()
            entry_type = EntryType.DIR.value if entry.is_dir() else EntryType.FILE.value
            documents.append(
                Document(
                    name=entry.name,
                    type=entry_type,
                    path=relative_path,
                )
            )
            if self.recursive and entry.is_dir():
                documents.extend(self._list_directory(entry))
        return documents

    async def fetch_content(self, document: Document) -> str:
        """Get file content from the mock docs directory."""
        full_path = self._mock_docs_path / document.path
        if not full_path.is_file():
            raise ContentFetchError(document.name, "not found in mock docs")
        return await asyncio.to_thread(full_path.read_text, encoding="utf-8")
