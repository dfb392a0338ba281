"""
Tag context records describing a single resource.

Provides the frozen dataclasses and enums a caller builds once per tagging
pass. String values are accepted for enum fields and normalised on creation.
"""

from dataclasses import dataclass
from enum import Enum


class Environment(str, Enum):
    """Deployment environment of the resource."""
    NONPROD = "nonprod"
    PREPROD = "preprod"
    PROD = "prod"


class Criticality(str, Enum):
    """Business criticality of the resource."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SecurityClassification(str, Enum):
    """
    Security classification of the data held by a resource.

    Follows the New Zealand government classification levels.
    """
    UNCLASSIFIED = "unclassified"
    IN_CONFIDENCE = "in-confidence"
    SENSITIVE = "sensitive"
    RESTRICTED = "restricted"
    CONFIDENTIAL = "confidential"
    SECRET = "secret"
    TOP_SECRET = "top-secret"


@dataclass(frozen=True)
class DataSensitivity:
    """
    Data classification flags for resources that store data.

    Attributes:
        role: Role of the data store (e.g. 'archive', 'cache')
        is_master: Whether this is the master copy of the data
        is_public: Whether the data is publicly readable
    """
    role: str | None = None
    is_master: bool | None = None
    is_public: bool | None = None


@dataclass(frozen=True)
class ResourceTagContext:
    """
    Everything needed to derive the tag set of a resource.

    Attributes:
        environment: Deployment environment (nonprod, preprod, prod)
        application: Application name, e.g. 'basemaps'
        group: Human friendly name of the owning group, e.g. 'li'
        classification: Security classification of the resource; None omits the
            classification tag and never fails the public check
        criticality: Criticality of the resource
        repository: Git repository the resource belongs to, e.g. 'linz/basemaps'
        responder_team: Responder team listed in the on-call tool
        skip_git_info: Skip collection of git version, commit and build id
        data_tags: Data classification flags
    """
    environment: Environment
    application: str
    group: str
    classification: SecurityClassification | None
    criticality: Criticality
    repository: str | None = None
    responder_team: str | None = None
    skip_git_info: bool = False
    data_tags: DataSensitivity | None = None

    def __post_init__(self) -> None:
        # frozen, so normalise through object.__setattr__
        object.__setattr__(self, "environment", Environment(self.environment))
        object.__setattr__(self, "criticality", Criticality(self.criticality))
        if self.classification is not None:
            object.__setattr__(
                self, "classification", SecurityClassification(self.classification)
            )

    @property
    def is_public(self) -> bool:
        """Check if the resource data is flagged as public."""
        return bool(self.data_tags and self.data_tags.is_public)
