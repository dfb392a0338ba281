"""
Configuration module for infra-tags.

Provides the tag context records, ambient settings, and stack config loading.
"""

from infra_tags.configs.base import (
    Criticality,
    DataSensitivity,
    Environment,
    ResourceTagContext,
    SecurityClassification,
)
from infra_tags.configs.constants import TAG_DEFAULTS, TAG_KEYS, TAGGABLE_RESOURCE_TYPES
from infra_tags.configs.environment import get_tag_context
from infra_tags.configs.settings import TagSettings, get_settings, read_repository_override

__all__ = [
    "Criticality",
    "DataSensitivity",
    "Environment",
    "ResourceTagContext",
    "SecurityClassification",
    "TAG_DEFAULTS",
    "TAG_KEYS",
    "TAGGABLE_RESOURCE_TYPES",
    "TagSettings",
    "get_settings",
    "get_tag_context",
    "read_repository_override",
]
