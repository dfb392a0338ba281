"""
Utility functions for tagging Pulumi infrastructure.

Provides tag derivation, tag factories, and git build information.
"""

from infra_tags.utils.git import BuildInfo, GitInfoProvider
from infra_tags.utils.tags import (
    InvariantViolation,
    LabelSink,
    apply_tags,
    create_tags,
    derive_data_tags,
    derive_tags,
    filter_tags,
    merge_tags,
    tag_resource,
    validate_context,
)

__all__ = [
    "BuildInfo",
    "GitInfoProvider",
    "InvariantViolation",
    "LabelSink",
    "apply_tags",
    "create_tags",
    "derive_data_tags",
    "derive_tags",
    "filter_tags",
    "merge_tags",
    "tag_resource",
    "validate_context",
]
