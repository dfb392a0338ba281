"""
Component resource that tags everything created beneath it.

The component derives the tag set of its context once and passes a
transformation to its children through child_opts.
"""

import pulumi

from infra_tags.components.sinks import StackTagSink
from infra_tags.configs.base import ResourceTagContext
from infra_tags.utils.git import GitInfoProvider
from infra_tags.utils.tags import tag_resource


class TaggedComponent(pulumi.ComponentResource):
    """
    Scope for resources sharing one tag context.

    Usage:
        scope = TaggedComponent("cache", context)
        aws.s3.Bucket("tiles", opts=scope.child_opts)
    """

    def __init__(
        self,
        name: str,
        context: ResourceTagContext,
        ambient_repository_override: str | None = None,
        git_info: GitInfoProvider | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        # Validate before registering so a public classified scope creates nothing
        self.sink = StackTagSink()
        tag_resource(self.sink, context, ambient_repository_override, git_info)

        super().__init__("custom:tagging:Tagged", name, None, opts)

        self.child_opts = self.sink.resource_options(parent=self)
        self.register_outputs({"tags": self.sink.tags})

    @property
    def tags(self) -> dict[str, str]:
        """Tags applied to children of this component."""
        return dict(self.sink.tags)
