"""Resolution, differential and property reconciliation services."""

from distrosync.core.differential import (
    CoreArtifactDeletionError,
    calculate_update_differential,
    compute_differential,
    is_same_artifact,
)
from distrosync.core.properties import reconcile_properties
from distrosync.core.resolver import (
    DescriptorNotFoundError,
    DistroResolver,
    InvalidSpecifierError,
    MissingCollaboratorError,
    ResolverContext,
    UnsupportedVersionError,
    parse_distro_artifact,
)

__all__ = [
    "CoreArtifactDeletionError",
    "DescriptorNotFoundError",
    "DistroResolver",
    "InvalidSpecifierError",
    "MissingCollaboratorError",
    "ResolverContext",
    "UnsupportedVersionError",
    "calculate_update_differential",
    "compute_differential",
    "is_same_artifact",
    "parse_distro_artifact",
    "reconcile_properties",
]
