"""
Git build information for provenance tags.

Describes the current checkout (version, commit hash) and the CI build that
produced it. Failure to inspect git is not an error: the provider returns
None and provenance tags are omitted.

Dependencies: git CLI
System role: Build info collaborator for tag derivation
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from infra_tags.configs.constants import DEFAULT_RUN_ATTEMPT, GIT_COMMANDS
from infra_tags.configs.settings import TagSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildInfo:
    """Version, commit and build identifier of the current build."""
    version: str
    hash: str
    build_id: str


class GitInfoProvider:
    """Query git and the CI environment for build information."""

    def __init__(self, cwd: str | Path | None = None, settings: TagSettings | None = None):
        """
        Initialize provider.

        Args:
            cwd: Directory inside the git checkout, defaults to the process cwd
            settings: Ambient settings holding the CI run identifiers
        """
        self.cwd = str(cwd) if cwd is not None else None
        self.settings = settings

    def _run(self, command: list[str]) -> str | None:
        """Run a git command and return its trimmed stdout, or None on failure."""
        try:
            result = subprocess.run(
                command,
                check=True,
                capture_output=True,
                text=True,
                cwd=self.cwd,
            )
        except subprocess.CalledProcessError as e:
            logger.warning(f"Git command failed ({' '.join(command)}): {e.stderr.strip()}")
            return None
        except FileNotFoundError:
            logger.warning("Git not found, skipping build info")
            return None

        return result.stdout.strip()

    def get_build_id(self) -> str:
        """
        Build identifier of the GitHub Actions run.

        Returns:
            str: '{run_id}-{run_attempt}', or '' outside of GitHub Actions
        """
        settings = self.settings or TagSettings()
        if not settings.github_run_id:
            return ""
        attempt = settings.github_run_attempt or DEFAULT_RUN_ATTEMPT
        return f"{settings.github_run_id}-{attempt}"

    def get_build_info(self) -> BuildInfo | None:
        """
        Collect build information for the current checkout.

        Returns:
            BuildInfo | None: Build info, or None if git cannot describe the checkout
        """
        version = self._run(GIT_COMMANDS["version"])
        if version is None:
            return None

        commit_hash = self._run(GIT_COMMANDS["hash"])
        if commit_hash is None:
            return None

        build_info = BuildInfo(version=version, hash=commit_hash, build_id=self.get_build_id())
        logger.debug(f"Build info: {build_info}")
        return build_info
