"""
Tag sinks and components for Pulumi programs.

Components:
- DictLabelSink: Collects tags for a resource's tags argument
- StackTagSink: Applies tags to a stack or subtree via transformation
- TaggedComponent: Component resource tagging all of its children
- create_tagged_provider: AWS provider with default tags
"""

from infra_tags.components.sinks import DictLabelSink, StackTagSink
from infra_tags.components.provider import create_tagged_provider
from infra_tags.components.tagged import TaggedComponent
from infra_tags.utils.tags import LabelSink

__all__ = [
    "DictLabelSink",
    "LabelSink",
    "StackTagSink",
    "TaggedComponent",
    "create_tagged_provider",
]
