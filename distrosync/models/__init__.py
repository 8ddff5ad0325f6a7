"""distrosync data models — all Pydantic v2, all frozen (immutable)."""

from distrosync.models.artifacts import (
    GROUP_DISTRO,
    GROUP_MODULE,
    GROUP_WEB,
    REFAPP_ARTIFACT_ID,
    TYPE_JAR,
    TYPE_OMOD,
    TYPE_WAR,
    TYPE_ZIP,
    WEBAPP_ARTIFACT_ID,
    Artifact,
)
from distrosync.models.descriptor import DistroDescriptor, DistroProperty, ModuleEntry
from distrosync.models.differential import ArtifactChange, UpgradeDifferential
from distrosync.models.versioning import Comparison, Version, compare, is_unstable

__all__ = [
    # versioning
    "Comparison",
    "Version",
    "compare",
    "is_unstable",
    # artifacts
    "Artifact",
    "GROUP_DISTRO",
    "GROUP_MODULE",
    "GROUP_WEB",
    "REFAPP_ARTIFACT_ID",
    "TYPE_JAR",
    "TYPE_OMOD",
    "TYPE_WAR",
    "TYPE_ZIP",
    "WEBAPP_ARTIFACT_ID",
    # descriptor
    "DistroDescriptor",
    "DistroProperty",
    "ModuleEntry",
    # differential
    "ArtifactChange",
    "UpgradeDifferential",
]
