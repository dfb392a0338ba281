"""
Label sinks that receive derived tags.

A sink only needs an attach(key, value) method. DictLabelSink collects tags
for a resource's `tags=` argument or a provider's default tags;
StackTagSink turns them into a Pulumi resource transformation that tags
every taggable resource in its scope.
"""

import pulumi

from infra_tags.configs.constants import TAGGABLE_RESOURCE_TYPES


class DictLabelSink:
    """Collects attached labels in insertion order. Last write for a key wins."""

    def __init__(self) -> None:
        self.tags: dict[str, str] = {}

    def attach(self, key: str, value: str) -> None:
        self.tags[key] = value


class StackTagSink(DictLabelSink):
    """
    Applies collected labels to taggable resources through a transformation.

    Tags set explicitly on a resource win over the collected labels.
    """

    def __init__(self, taggable_types: frozenset[str] = TAGGABLE_RESOURCE_TYPES) -> None:
        super().__init__()
        self.taggable_types = taggable_types

    def transform(
        self, args: pulumi.ResourceTransformationArgs
    ) -> pulumi.ResourceTransformationResult | None:
        """
        Add the collected labels to a resource's tags.

        Args:
            args: Resource being registered

        Returns:
            Updated props, or None to leave the resource untouched
        """
        if args.type_ not in self.taggable_types or not self.tags:
            return None

        scope_tags = dict(self.tags)
        props = dict(args.props)
        existing = props.get("tags")
        if isinstance(existing, pulumi.Output):
            props["tags"] = existing.apply(lambda tags: {**scope_tags, **(tags or {})})
        else:
            props["tags"] = {**scope_tags, **(existing or {})}

        return pulumi.ResourceTransformationResult(props, args.opts)

    def register(self) -> None:
        """Apply the labels to every taggable resource in the stack."""
        pulumi.runtime.register_stack_transformation(self.transform)

    def resource_options(self, **kwargs) -> pulumi.ResourceOptions:
        """Resource options applying the labels to a resource and its children."""
        return pulumi.ResourceOptions(transformations=[self.transform], **kwargs)
