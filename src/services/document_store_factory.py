"""Factory for creating document stores with DEBUG mode support."""

import logging

from ..config.settings import Settings
from ..models import RepositoryLocation
from ..protocols.document_store_protocol import DocumentStoreProtocol
from .git_store import GitCloneStore
from .github_store import GitHubContentsStore

logger = logging.getLogger(__name__)

BACKENDS = ("github", "git")


def location_from_settings(settings: Settings) -> RepositoryLocation:
    return RepositoryLocation(
        owner=settings.REPO_OWNER,
        repo=settings.REPO_NAME,
        branch=settings.REPO_BRANCH,
        path=settings.REPO_PATH,
        host=settings.GITHUB_HOST,
    )


def create_document_store(
    location: RepositoryLocation,
    backend: str = "github",
    api_url: str = "https://api.github.com",
    github_token: str = "",
    local_path: str = "./notes-repo",
    recursive: bool = False,
    debug_mode: bool = False,
) -> DocumentStoreProtocol:
    """
    Create a document store for the given backend.

    Args:
        location: Repository owner, name, branch and directory
        backend: "github" for the contents API, "git" for a local clone
        api_url: GitHub REST API base URL
        github_token: GitHub personal access token
        local_path: Working tree path for the "git" backend
        recursive: Descend into subdirectories when listing
        debug_mode: If True, returns MockDocumentStore backed by dev/mock-docs

    Returns:
        DocumentStoreProtocol implementation
    """
    if debug_mode:
        logger.info("🔧 DEBUG mode: Using MockDocumentStore")
        # Lazy import; the dev directory is only on sys.path in DEBUG mode
        try:
            from mocks.document_store import MockDocumentStore

            return MockDocumentStore(location, recursive=recursive)
        except ImportError:
            logger.warning("⚠️ MockDocumentStore not available, using configured backend")

    if backend == "git":
        logger.info(f"Using local clone store at {local_path}")
        return GitCloneStore(
            location, local_path, github_token=github_token, recursive=recursive
        )
    if backend != "github":
        raise ValueError(f"Unknown store backend '{backend}', expected one of {BACKENDS}")

    return GitHubContentsStore(
        location, api_url=api_url, github_token=github_token, recursive=recursive
    )


def create_document_store_from_settings(settings: Settings) -> DocumentStoreProtocol:
    """
    Create a document store using application settings.

    Args:
        settings: Application settings

    Returns:
        DocumentStoreProtocol implementation
    """
    return create_document_store(
        location=location_from_settings(settings),
        backend=settings.STORE_BACKEND,
        api_url=settings.GITHUB_API_URL,
        github_token=settings.GITHUB_TOKEN,
        local_path=settings.LOCAL_CLONE_PATH,
        recursive=settings.RECURSIVE_LISTING,
        debug_mode=settings.DEBUG,
    )
