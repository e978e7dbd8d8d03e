from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Values are read from the process environment and, when present, from a
    ``.env`` file in the working directory. The defaults point at the public
    C++ notes repository so the service works without any configuration.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Document store location
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_HOST: str = "https://github.com"
    REPO_OWNER: str = "cpp-notes"
    REPO_NAME: str = "cpp-notes"
    REPO_BRANCH: str = "main"
    REPO_PATH: str = ""  # Directory inside the repository, root by default
    GITHUB_TOKEN: str = ""  # Optional, raises the API rate limit

    # Search behaviour
    DOCUMENT_EXTENSION: str = ".md"
    ISOLATE_FETCH_FAILURES: bool = False
    RECURSIVE_LISTING: bool = False

    # Backend selection: "github" (contents API) or "git" (local clone)
    STORE_BACKEND: str = "github"
    LOCAL_CLONE_PATH: str = "./notes-repo"

    # Development and debugging
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
