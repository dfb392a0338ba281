"""Pytest fixtures for Pulumi infrastructure tests."""

from pathlib import Path

import pulumi
import pytest


class TagMocks(pulumi.runtime.Mocks):
    """Echo resource inputs back as outputs."""

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        return [f"{args.name}_id", args.inputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        return {}


pulumi.runtime.set_mocks(TagMocks(), preview=False)


@pytest.fixture
def package_root():
    """Return the infra_tags package directory."""
    return Path(__file__).parent.parent.parent / "infra_tags"


@pytest.fixture
def python_files_in_package(package_root):
    """Return all Python files in the package."""
    return [f for f in package_root.rglob("*.py") if "__pycache__" not in str(f)]
