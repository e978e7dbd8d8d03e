import logging
from typing import Any, Dict, List, Optional

import httpx

from ..errors import ContentFetchError, ListingError, RateLimitError
from ..models import Document, EntryType, RepositoryLocation

logger = logging.getLogger(__name__)


class GitHubContentsStore:
    """Reads documents through the GitHub repository contents API."""

    def __init__(
        self,
        location: RepositoryLocation,
        api_url: str = "https://api.github.com",
        github_token: str = "",
        recursive: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._location = location
        self.api_url = api_url.rstrip("/")
        self.github_token = github_token
        self.recursive = recursive
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def location(self) -> RepositoryLocation:
        return self._location

    async def __aenter__(self) -> "GitHubContentsStore":
        self._client = httpx.AsyncClient(
            headers=self._build_headers(),
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _build_headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "cpp-notes-search",
        }
        if self.github_token:
            headers["Authorization"] = f"Bearer {self.github_token}"
        return headers

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("Store is not open; use 'async with store:'")
        return self._client

    def contents_url(self, path: str = "") -> str:
        """Build the contents API URL for a directory of the repository."""
        url = f"{self.api_url}/repos/{self._location.owner}/{self._location.repo}/contents"
        path = path.strip("/")
        if path:
            url = f"{url}/{path}"
        return url

    async def list_documents(self) -> List[Document]:
        """List the entries of the configured directory."""
        if self.recursive:
            return await self._list_tree(self._location.path)
        return await self._list_directory(self._location.path)

    async def _list_tree(self, path: str) -> List[Document]:
        # Depth first; each directory entry is followed by its contents
        entries: List[Document] = []
        for document in await self._list_directory(path):
            entries.append(document)
            if document.is_dir:
                entries.extend(await self._list_tree(document.path))
        return entries

    async def _list_directory(self, path: str) -> List[Document]:
        url = self.contents_url(path)
        logger.debug(f"Listing {url}")
        try:
            response = await self.client.get(
                url, params={"ref": self._location.branch}
            )
        except httpx.HTTPError as e:
            raise ListingError(f"Failed to list {url}: {e}") from e

        self._raise_for_rate_limit(response)
        if response.is_error:
            raise ListingError(
                f"Listing {url} returned HTTP {response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise ListingError(f"Listing {url} returned invalid JSON") from e

        return self._parse_listing(payload, url)

    def _parse_listing(self, payload: Any, url: str) -> List[Document]:
        # A file path yields a single object instead of a list
        if not isinstance(payload, list):
            raise ListingError(f"Listing {url} is not a directory listing")

        documents = []
        for entry in payload:
            if not isinstance(entry, dict) or "name" not in entry or "type" not in entry:
                raise ListingError(f"Malformed entry in listing {url}: {entry!r}")
            documents.append(
                Document(
                    name=entry["name"],
                    type=entry["type"],
                    download_url=entry.get("download_url"),
                    path=entry.get("path") or entry["name"],
                )
            )
        return documents

    async def fetch_content(self, document: Document) -> str:
        """Get the raw text of a document from its download URL."""
        if document.type != EntryType.FILE.value or not document.download_url:
            raise ContentFetchError(document.name, "document has no download URL")

        logger.debug(f"Fetching {document.download_url}")
        try:
            response = await self.client.get(document.download_url)
        except httpx.HTTPError as e:
            raise ContentFetchError(document.name, str(e)) from e

        if response.is_error:
            raise ContentFetchError(
                document.name, f"HTTP {response.status_code} from download URL"
            )
        return response.text

    @staticmethod
    def _raise_for_rate_limit(response: httpx.Response) -> None:
        if response.status_code not in (403, 429):
            return
        remaining = response.headers.get("x-ratelimit-remaining")
        if response.status_code == 403 and remaining != "0":
            return

        reset = response.headers.get("x-ratelimit-reset")
        reset_at = int(reset) if reset and reset.isdigit() else None
        raise RateLimitError("GitHub API rate limit exceeded", reset_at=reset_at)
