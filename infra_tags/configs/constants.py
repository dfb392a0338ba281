"""
Tagging constants for infra-tags.

Contains tag keys, default values, and the resource types that accept tags.
"""

from typing import Final

# Tag key suffixes, in attach order
TAG_KEYS: Final[dict[str, str]] = {
    "app_name": "app.name",
    "app_version": "app.version",
    "environment": "environment",
    "group": "group",
    "responder_team": "responder.team",
    "criticality": "app.criticality",
    "git_hash": "git.hash",
    "git_repository": "git.repository",
    "build_id": "build.id",
    "classification": "security.classification",
    "data_role": "data.role",
    "data_is_master": "data.is-master",
    "data_is_public": "data.is-public",
}

# Fallback values for optional context fields
TAG_DEFAULTS: Final[dict[str, object]] = {
    "responder_team": "NotSet",
    "is_master": False,
    "is_public": False,
}

# Git commands used to describe the current checkout
GIT_COMMANDS: Final[dict[str, list[str]]] = {
    "version": ["git", "describe", "--tags", "--always", "--match", "v*"],
    "hash": ["git", "rev-parse", "HEAD"],
}

# Default run attempt when GITHUB_RUN_ATTEMPT is not set
DEFAULT_RUN_ATTEMPT: Final[str] = "1"

# Pulumi resource types that carry a `tags` property
TAGGABLE_RESOURCE_TYPES: Final[frozenset[str]] = frozenset({
    "aws:cloudfront/distribution:Distribution",
    "aws:ec2/eip:Eip",
    "aws:ec2/instance:Instance",
    "aws:ec2/internetGateway:InternetGateway",
    "aws:ec2/natGateway:NatGateway",
    "aws:ec2/routeTable:RouteTable",
    "aws:ec2/securityGroup:SecurityGroup",
    "aws:ec2/subnet:Subnet",
    "aws:ec2/vpc:Vpc",
    "aws:ec2/vpcEndpoint:VpcEndpoint",
    "aws:ecr/repository:Repository",
    "aws:iam/role:Role",
    "aws:lambda/function:Function",
    "aws:lb/loadBalancer:LoadBalancer",
    "aws:lb/targetGroup:TargetGroup",
    "aws:rds/instance:Instance",
    "aws:rds/subnetGroup:SubnetGroup",
    "aws:s3/bucket:Bucket",
    "aws:s3/bucketV2:BucketV2",
    "aws:secretsmanager/secret:Secret",
    "aws:sqs/queue:Queue",
    "aws:apigatewayv2/api:Api",
})
