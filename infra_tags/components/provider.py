"""
AWS provider carrying derived tags as default tags.

Every resource created through the provider inherits the tags, including
resource types not covered by the stack transformation.
"""

import pulumi
import pulumi_aws as aws

from infra_tags.components.sinks import DictLabelSink


def create_tagged_provider(
    name: str,
    sink: DictLabelSink,
    region: str | None = None,
    opts: pulumi.ResourceOptions | None = None,
) -> aws.Provider:
    """
    Create an AWS provider with the sink's labels as default tags.

    Args:
        name: Provider resource name
        sink: Sink holding the attached labels
        region: AWS region, defaults to the ambient provider config
        opts: Resource options

    Returns:
        AWS provider
    """
    return aws.Provider(
        name,
        region=region,
        default_tags=aws.ProviderDefaultTagsArgs(tags=dict(sink.tags)),
        opts=opts,
    )
