"""Document store protocol interface."""

from typing import List, Protocol, runtime_checkable

from ..models import Document, RepositoryLocation


@runtime_checkable
class DocumentStoreProtocol(Protocol):
    """Protocol for read-only access to a store of searchable documents.

    Stores are async context managers; connections opened on entry are
    released on exit, so nothing is shared between searches.
    """

    @property
    def location(self) -> RepositoryLocation:
        """Repository the documents are browsed from."""
        ...

    async def __aenter__(self) -> "DocumentStoreProtocol": ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def list_documents(self) -> List[Document]:
        """List the entries of the store root, in store order."""
        ...

    async def fetch_content(self, document: Document) -> str:
        """Get the raw text of a document."""
        ...
