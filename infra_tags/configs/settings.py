"""
Ambient settings read from the process environment.

Holds the CI-provided values that influence tagging: the repository
override and the GitHub Actions run identifiers.

Dependencies: pydantic_settings
System role: Single place where environment variables are read
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TagSettings(BaseSettings):
    """Environment-driven settings for tagging."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    github_repository: str | None = Field(
        default=None,
        description="Repository slug set by GitHub Actions, overrides the context repository",
    )
    github_run_id: str | None = Field(
        default=None,
        description="GitHub Actions run id",
    )
    github_run_attempt: str | None = Field(
        default=None,
        description="GitHub Actions run attempt",
    )
    tag_prefix: str = Field(
        default="",
        description="Prefix prepended to every tag key (e.g. 'linz.')",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )


@lru_cache
def get_settings() -> TagSettings:
    """
    Get tag settings singleton.

    Returns:
        TagSettings: Settings loaded once from the environment
    """
    return TagSettings()


def read_repository_override() -> str | None:
    """
    Read the ambient repository override.

    Reads the environment on every call so CI values set after import are
    picked up.

    Returns:
        str | None: Repository slug, or None when unset or empty
    """
    return TagSettings().github_repository or None
