"""
Shared test fixtures for the tagging test suite.

Provides: Tag contexts, build info, mocked git provider, recording sink
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

from unittest.mock import MagicMock

import pytest

from infra_tags.configs.base import (
    Criticality,
    Environment,
    ResourceTagContext,
    SecurityClassification,
)
from infra_tags.configs.settings import get_settings
from infra_tags.utils.git import BuildInfo, GitInfoProvider

CI_ENV_VARS = ("GITHUB_REPOSITORY", "GITHUB_RUN_ID", "GITHUB_RUN_ATTEMPT", "TAG_PREFIX")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove CI variables and reset cached settings around each test."""
    for name in CI_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def base_context() -> ResourceTagContext:
    """Production context for the basemaps application, git info skipped."""
    return ResourceTagContext(
        environment=Environment.PROD,
        application="basemaps",
        group="li",
        classification=SecurityClassification.UNCLASSIFIED,
        criticality=Criticality.HIGH,
        skip_git_info=True,
    )


@pytest.fixture
def build_info() -> BuildInfo:
    """Provide sample build info."""
    return BuildInfo(version="v6.40.0-3-gabc1234", hash="abc1234def5678", build_id="9876543-2")


@pytest.fixture
def mock_git_info(build_info: BuildInfo) -> MagicMock:
    """Provide mock GitInfoProvider returning sample build info."""
    provider = MagicMock(spec=GitInfoProvider)
    provider.get_build_info.return_value = build_info
    return provider


@pytest.fixture
def recording_sink() -> MagicMock:
    """Provide mock label sink recording attach calls."""
    return MagicMock()
