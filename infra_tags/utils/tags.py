"""
Tag derivation for infrastructure resources.

Derives the ordered tag set of a resource from its tag context, filters out
empty values, and attaches the rest to a label sink. Also provides a tag
factory for building the `tags=` argument of a single resource.
"""

import logging
from collections.abc import Iterable
from enum import Enum
from typing import Protocol

from infra_tags.configs.base import (
    DataSensitivity,
    ResourceTagContext,
    SecurityClassification,
)
from infra_tags.configs.constants import TAG_DEFAULTS, TAG_KEYS
from infra_tags.configs.settings import get_settings, read_repository_override
from infra_tags.utils.git import GitInfoProvider

logger = logging.getLogger(__name__)

TagPair = tuple[str, str | None]


class InvariantViolation(ValueError):
    """Raised when a resource is public but not unclassified."""


class LabelSink(Protocol):
    """Anything tags can be attached to."""

    def attach(self, key: str, value: str) -> None:
        ...


def _apply_defaults(values: dict[str, object]) -> dict[str, object]:
    """Replace absent values with their entry in TAG_DEFAULTS."""
    return {
        field: TAG_DEFAULTS[field] if value is None and field in TAG_DEFAULTS else value
        for field, value in values.items()
    }


def _as_str(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.value
    return str(value)


def validate_context(context: ResourceTagContext) -> None:
    """
    Check that only unclassified resources are made public.

    An absent classification is not treated as a mismatch.

    Raises:
        InvariantViolation: If the resource is public and classified
    """
    if (
        context.is_public
        and context.classification is not None
        and context.classification != SecurityClassification.UNCLASSIFIED
    ):
        raise InvariantViolation("Only unclassified resources can be made public")


def derive_data_tags(tags: DataSensitivity) -> list[TagPair]:
    """
    Derive data classification tags.

    Args:
        tags: Data sensitivity flags

    Returns:
        Pairs for data.role, data.is-master and data.is-public
    """
    values = _apply_defaults({
        "role": tags.role,
        "is_master": tags.is_master,
        "is_public": tags.is_public,
    })
    return [
        (TAG_KEYS["data_role"], _as_str(values["role"])),
        (TAG_KEYS["data_is_master"], _as_str(values["is_master"])),
        (TAG_KEYS["data_is_public"], _as_str(values["is_public"])),
    ]


def derive_tags(
    context: ResourceTagContext,
    ambient_repository_override: str | None = None,
    git_info: GitInfoProvider | None = None,
) -> list[TagPair]:
    """
    Derive the ordered tag set of a resource.

    Pairs whose value is None are kept; they are dropped by filter_tags.

    Args:
        context: Tag context of the resource
        ambient_repository_override: Repository slug that wins over context.repository
        git_info: Build info collaborator, queried unless context.skip_git_info

    Returns:
        Ordered (key, value) pairs

    Raises:
        InvariantViolation: If the resource is public and classified
    """
    validate_context(context)

    build_info = None
    if not context.skip_git_info:
        build_info = (git_info or GitInfoProvider()).get_build_info()

    values = _apply_defaults({
        "responder_team": context.responder_team,
        "repository": ambient_repository_override or context.repository,
    })

    # Application tags
    pairs: list[TagPair] = [(TAG_KEYS["app_name"], context.application)]
    if build_info:
        pairs.append((TAG_KEYS["app_version"], build_info.version))
    pairs.append((TAG_KEYS["environment"], _as_str(context.environment)))

    # Ownership tags
    pairs.append((TAG_KEYS["group"], context.group))
    pairs.append((TAG_KEYS["responder_team"], _as_str(values["responder_team"])))
    pairs.append((TAG_KEYS["criticality"], _as_str(context.criticality)))

    # Git tags
    if build_info:
        pairs.append((TAG_KEYS["git_hash"], build_info.hash))
    pairs.append((TAG_KEYS["git_repository"], _as_str(values["repository"])))

    # CI build tags
    if build_info:
        pairs.append((TAG_KEYS["build_id"], build_info.build_id))

    # Security tags
    pairs.append((TAG_KEYS["classification"], _as_str(context.classification)))
    if context.data_tags is not None:
        pairs.extend(derive_data_tags(context.data_tags))

    return pairs


def filter_tags(pairs: Iterable[TagPair]) -> list[tuple[str, str]]:
    """Drop pairs whose value is None or empty, preserving order."""
    kept = []
    for key, value in pairs:
        if value is None or value == "":
            logger.debug(f"Skipping empty tag: {key}")
            continue
        kept.append((key, value))
    return kept


def apply_tags(sink: LabelSink, pairs: Iterable[TagPair], prefix: str = "") -> None:
    """
    Attach derived tags to a sink.

    Args:
        sink: Label sink receiving one attach call per non-empty pair
        pairs: Ordered (key, value) pairs
        prefix: Prefix prepended to every key
    """
    for key, value in filter_tags(pairs):
        sink.attach(f"{prefix}{key}", value)


def tag_resource(
    sink: LabelSink,
    context: ResourceTagContext,
    ambient_repository_override: str | None = None,
    git_info: GitInfoProvider | None = None,
    prefix: str | None = None,
) -> None:
    """
    Derive and attach the tag set of a resource.

    The repository override and key prefix are read from the ambient
    settings when not supplied. Nothing is attached if validation fails.

    Args:
        sink: Label sink for the resource
        context: Tag context of the resource
        ambient_repository_override: Repository slug that wins over context.repository
        git_info: Build info collaborator
        prefix: Prefix prepended to every key

    Raises:
        InvariantViolation: If the resource is public and classified
    """
    if ambient_repository_override is None:
        ambient_repository_override = read_repository_override()
    if prefix is None:
        prefix = get_settings().tag_prefix

    pairs = derive_tags(context, ambient_repository_override, git_info)
    apply_tags(sink, pairs, prefix)
    logger.info(f"Tagged {context.application} ({context.environment.value})")


def create_tags(
    context: ResourceTagContext,
    ambient_repository_override: str | None = None,
    git_info: GitInfoProvider | None = None,
    prefix: str = "",
    **extra_tags: str,
) -> dict[str, str]:
    """
    Create the tag dictionary for a single resource.

    Args:
        context: Tag context of the resource
        ambient_repository_override: Repository slug that wins over context.repository
        git_info: Build info collaborator
        prefix: Prefix prepended to every derived key
        **extra_tags: Additional tags to include, applied last

    Returns:
        Dictionary of tags
    """
    pairs = derive_tags(context, ambient_repository_override, git_info)
    derived = {f"{prefix}{key}": value for key, value in filter_tags(pairs)}
    return merge_tags(derived, extra_tags)


def merge_tags(
    base_tags: dict[str, str],
    *additional_tags: dict[str, str],
) -> dict[str, str]:
    """
    Merge multiple tag dictionaries.

    Args:
        base_tags: Base tag dictionary
        *additional_tags: Additional tag dictionaries to merge

    Returns:
        Merged tag dictionary
    """
    result = base_tags.copy()
    for tags in additional_tags:
        result.update(tags)
    return result
