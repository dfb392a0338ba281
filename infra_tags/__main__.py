"""
Pulumi program entry point for stack-wide tagging.

1. Load the tag context from stack config
2. Derive tags and register them as a stack transformation
3. Export the applied tags

The transformation only sees resources registered after main() runs, so a
program declares its resources after calling main().
"""

import logging

import pulumi

from infra_tags.components.sinks import StackTagSink
from infra_tags.configs.environment import get_tag_context
from infra_tags.configs.settings import get_settings
from infra_tags.utils.tags import tag_resource


def main() -> StackTagSink:
    """Tag every taggable resource registered after this call."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s: %(message)s")

    context = get_tag_context()
    sink = StackTagSink()
    tag_resource(sink, context)
    sink.register()

    pulumi.export("tags", sink.tags)
    pulumi.log.info(f"✓ Registered {len(sink.tags)} stack tags for {context.application}")
    return sink


if __name__ == "__main__":
    main()
