import asyncio
import logging
import shutil
import threading
from pathlib import Path
from typing import Dict, List, Optional

from git import GitCommandError, InvalidGitRepositoryError, Repo

from ..errors import ContentFetchError, ListingError
from ..models import Document, EntryType, RepositoryLocation

logger = logging.getLogger(__name__)

LOCK_POLL_INTERVAL = 0.05  # seconds

# One working tree per path; a store holds its lock from entry to exit
_clone_locks: Dict[Path, threading.Lock] = {}
_clone_locks_guard = threading.Lock()


def clone_lock(local_path: Path) -> threading.Lock:
    """Return the lock that serialises access to the clone at local_path."""
    key = local_path.resolve()
    with _clone_locks_guard:
        return _clone_locks.setdefault(key, threading.Lock())


class GitCloneStore:
    """Serves documents from a local clone of the notes repository."""

    def __init__(
        self,
        location: RepositoryLocation,
        local_path: str,
        github_token: str = "",
        recursive: bool = False,
    ):
        self._location = location
        self.local_path = Path(local_path)
        self.github_token = github_token
        self.recursive = recursive
        self.repo: Optional[Repo] = None
        self._lock = clone_lock(self.local_path)

    @property
    def location(self) -> RepositoryLocation:
        return self._location

    async def __aenter__(self) -> "GitCloneStore":
        # Concurrent searches would otherwise pull or re-clone the tree under
        # each other's reads. Polled so waiters do not occupy executor threads
        # the holder needs for its own reads.
        while not self._lock.acquire(blocking=False):
            await asyncio.sleep(LOCK_POLL_INTERVAL)
        try:
            await asyncio.to_thread(self.setup_repository)
        except BaseException:
            self._lock.release()
            raise
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        try:
            if self.repo is not None:
                self.repo.close()
                self.repo = None
        finally:
            self._lock.release()

    def setup_repository(self) -> None:
        """Clone the repository, or pull the configured branch if already cloned."""
        try:
            if (self.local_path / ".git").exists():
                self.repo = Repo(self.local_path)
                if self.repo.active_branch.name != self._location.branch:
                    self.repo.git.checkout(self._location.branch)
                self.repo.remotes.origin.pull()
                logger.info(f"Updated {self.local_path} to latest {self._location.branch}")
                return

            # A non-repository directory is replaced by a fresh clone
            if self.local_path.exists() and any(self.local_path.iterdir()):
                logger.info(f"Clearing existing directory contents: {self.local_path}")
                shutil.rmtree(self.local_path)
            self.local_path.mkdir(parents=True, exist_ok=True)

            logger.info(f"Cloning repository from {self._location.clone_url}")
            self.repo = Repo.clone_from(
                self._build_clone_url(), self.local_path, branch=self._location.branch
            )
        except (GitCommandError, InvalidGitRepositoryError, OSError) as e:
            raise ListingError(f"Failed to set up repository clone: {e}") from e

    def _build_clone_url(self) -> str:
        """Build clone URL with token for private repositories."""
        clone_url = self._location.clone_url
        if self.github_token and clone_url.startswith("https://"):
            return clone_url.replace("https://", f"https://{self.github_token}@", 1)
        return clone_url

    @property
    def root(self) -> Path:
        return self.local_path / self._location.path.strip("/")

    async def list_documents(self) -> List[Document]:
        """List the entries of the configured directory of the working tree."""
        return await asyncio.to_thread(self._list_directory, self.root)

    def _list_directory(self, directory: Path) -> List[Document]:
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise ListingError(f"Failed to list {directory}: {e}") from e

        documents: List[Document] = []
        for entry in entries:
            if entry.name == ".git":
                continue
            if entry.is_symlink():
                entry_type = EntryType.SYMLINK.value
            elif entry.is_dir():
                entry_type = EntryType.DIR.value
            else:
                entry_type = EntryType.FILE.value

            relative_path = entry.relative_to(self.local_path).as_posix()
            documents.append(Document(name=entry.name, type=entry_type, path=relative_path))
            if self.recursive and entry_type == EntryType.DIR.value:
                documents.extend(self._list_directory(entry))
        return documents

    async def fetch_content(self, document: Document) -> str:
        """Read a document from the working tree."""
        full_path = self.local_path / document.path
        try:
            return await asyncio.to_thread(full_path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ContentFetchError(document.name, str(e)) from e
