"""Artifact identity models — named, versioned, typed installable units."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

GROUP_DISTRO = "org.openmrs.distro"
GROUP_MODULE = "org.openmrs.module"
GROUP_WEB = "org.openmrs.web"

TYPE_JAR = "jar"
TYPE_WAR = "war"
TYPE_OMOD = "omod"
TYPE_ZIP = "zip"

WEBAPP_ARTIFACT_ID = "openmrs-webapp"
REFAPP_ARTIFACT_ID = "referenceapplication-package"

_IDENTITY_SEPARATOR = "-"


def short_name(artifact_id: str) -> str:
    """Leading token of an artifact id before its first ``-``."""
    head, _, _ = artifact_id.partition(_IDENTITY_SEPARATOR)
    return head


class Artifact(BaseModel):
    """A ``group:artifact:version`` coordinate plus packaging type.

    ``dest_file_name`` defaults to ``{artifact_id}-{version}.{type}`` and is
    only used for download bookkeeping; use :meth:`with_dest_file_name` to
    obtain a copy with a different one.
    """

    model_config = ConfigDict(frozen=True)

    artifact_id: str
    version: str
    group_id: str = GROUP_MODULE
    type: str = TYPE_JAR
    dest_file_name: str = Field(default="")

    @model_validator(mode="after")
    def _default_dest_file_name(self) -> Artifact:
        if not self.dest_file_name:
            object.__setattr__(
                self, "dest_file_name", f"{self.artifact_id}-{self.version}.{self.type}"
            )
        return self

    @property
    def identity(self) -> str:
        """Normalized short name used to match the same artifact across versions."""
        return short_name(self.artifact_id)

    @property
    def is_platform(self) -> bool:
        """True for the core platform webapp artifact."""
        return self.type == TYPE_WAR and self.artifact_id == WEBAPP_ARTIFACT_ID

    @property
    def coordinate(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"

    def with_dest_file_name(self, dest_file_name: str) -> Artifact:
        return self.model_copy(update={"dest_file_name": dest_file_name})

    def with_version(self, version: str) -> Artifact:
        """Copy with another version; the destination file name is recomputed."""
        return Artifact(
            artifact_id=self.artifact_id,
            version=version,
            group_id=self.group_id,
            type=self.type,
        )

    def __str__(self) -> str:
        return self.coordinate
