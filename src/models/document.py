"""Document store model classes."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class EntryType(str, Enum):
    """Entry markers used by the GitHub contents listing."""

    FILE = "file"
    DIR = "dir"
    SYMLINK = "symlink"


class RepositoryLocation(BaseModel):
    """Identifies the repository, branch and directory that hold the notes."""

    owner: str
    repo: str
    branch: str = "main"
    path: str = ""
    host: str = "https://github.com"

    def browse_url(self, file_path: str) -> str:
        """Build the web URL used to read a document on the hosting site."""
        host = self.host.rstrip("/")
        return f"{host}/{self.owner}/{self.repo}/blob/{self.branch}/{file_path}"

    @property
    def clone_url(self) -> str:
        host = self.host.rstrip("/")
        return f"{host}/{self.owner}/{self.repo}.git"


class Document(BaseModel):
    """A named remote text resource from the store listing."""

    name: str
    type: str
    download_url: Optional[str] = None
    path: str = ""

    def model_post_init(self, __context) -> None:
        if not self.path:
            self.path = self.name

    @property
    def is_file(self) -> bool:
        return self.type == EntryType.FILE.value

    @property
    def is_dir(self) -> bool:
        return self.type == EntryType.DIR.value


class MatchResult(BaseModel):
    """A display-ready search hit."""

    name: str
    url: str
