"""
Tag context loader.

Loads and validates the resource tag context from Pulumi stack config files.
"""

import pulumi

from infra_tags.configs.base import DataSensitivity, ResourceTagContext


def _get_data_tags(config: pulumi.Config) -> DataSensitivity | None:
    """Build data sensitivity flags if any data key is configured."""
    role = config.get("dataRole")
    is_master = config.get_bool("dataIsMaster")
    is_public = config.get_bool("dataIsPublic")

    if role is None and is_master is None and is_public is None:
        return None
    return DataSensitivity(role=role, is_master=is_master, is_public=is_public)


def get_tag_context(name: str | None = None) -> ResourceTagContext:
    """
    Load the resource tag context from Pulumi stack config.

    Args:
        name: Config namespace, defaults to the project name

    Returns:
        ResourceTagContext: Validated tag context

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
        ValueError: If an enum value is not recognised
    """
    config = pulumi.Config(name)

    return ResourceTagContext(
        environment=config.require("environment"),
        application=config.require("application"),
        group=config.require("group"),
        classification=config.require("classification"),
        criticality=config.require("criticality"),
        repository=config.get("repository"),
        responder_team=config.get("responderTeam"),
        skip_git_info=config.get_bool("skipGitInfo") or False,
        data_tags=_get_data_tags(config),
    )
