"""Keyword search over the documents of a document store."""

import asyncio
import logging
from typing import FrozenSet, List, Optional

from src.errors import DocumentStoreError
from src.models import Document, MatchResult, RepositoryLocation, extract_tags
from src.protocols.document_store_protocol import DocumentStoreProtocol

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".md"


def is_candidate(document: Document, extension: str = DEFAULT_EXTENSION) -> bool:
    """Plain files with the document extension; directories never qualify."""
    return document.is_file and document.name.endswith(extension)


def matches(query: str, name: str, tags: FrozenSet[str]) -> bool:
    """Filename substring or exact tag match, both case-insensitive."""
    needle = query.lower()
    return needle in name.lower() or needle in tags


def display_name(name: str, extension: str = DEFAULT_EXTENSION) -> str:
    """``My_Doc_Name.md`` -> ``My Doc Name``."""
    if extension and name.endswith(extension):
        name = name[: -len(extension)]
    return name.replace("_", " ")


def to_match_result(
    document: Document,
    location: RepositoryLocation,
    extension: str = DEFAULT_EXTENSION,
) -> MatchResult:
    return MatchResult(
        name=display_name(document.name, extension),
        url=location.browse_url(document.path),
    )


class SearchService:
    """Filters store documents by filename or declared tags."""

    def __init__(
        self,
        store: DocumentStoreProtocol,
        extension: str = DEFAULT_EXTENSION,
        isolate_failures: bool = False,
    ):
        self.store = store
        self.extension = extension
        self.isolate_failures = isolate_failures

    async def search(self, query: str) -> List[MatchResult]:
        """
        Return the documents whose filename contains the query or whose tag
        set contains it, in store listing order.

        Every candidate is fetched concurrently. By default a failure of the
        listing or of any single fetch aborts the whole search with a
        DocumentStoreError. With isolate_failures, a document whose fetch
        fails is logged and skipped instead.
        """
        query = (query or "").lower()
        logger.info(f"Searching for '{query}'")

        async with self.store as store:
            try:
                listing = await store.list_documents()
            except DocumentStoreError:
                logger.exception("Failed to list documents")
                raise

            candidates = [doc for doc in listing if is_candidate(doc, self.extension)]
            logger.debug(f"{len(candidates)} of {len(listing)} entries are candidates")

            tag_sets = await self._fetch_tag_sets(store, candidates)
            location = store.location

        results = [
            to_match_result(document, location, self.extension)
            for document, tags in zip(candidates, tag_sets)
            if tags is not None and matches(query, document.name, tags)
        ]
        logger.info(f"Search for '{query}' matched {len(results)} documents")
        return results

    async def _fetch_tag_sets(
        self, store: DocumentStoreProtocol, candidates: List[Document]
    ) -> List[Optional[FrozenSet[str]]]:
        tasks = [asyncio.ensure_future(store.fetch_content(doc)) for doc in candidates]
        try:
            contents = await asyncio.gather(
                *tasks, return_exceptions=self.isolate_failures
            )
        except Exception as e:
            logger.error(f"Search aborted, content fetch failed: {e}")
            # The store is closed on return; stop fetches still in flight and
            # collect their outcomes before it is
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        tag_sets: List[Optional[FrozenSet[str]]] = []
        for document, content in zip(candidates, contents):
            if isinstance(content, BaseException):
                if not isinstance(content, DocumentStoreError):
                    raise content
                logger.warning(f"Skipping {document.name}: {content}")
                tag_sets.append(None)
                continue
            tag_sets.append(extract_tags(content))
        return tag_sets
