"""Upgrade differential — the computed change set between installed and target."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from distrosync.models.artifacts import Artifact


class ArtifactChange(BaseModel):
    """An in-place replacement of ``old`` by ``new``."""

    model_config = ConfigDict(frozen=True)

    old: Artifact
    new: Artifact


class UpgradeDifferential(BaseModel):
    """Structured diff handed to an external applier.

    The platform artifact is tracked on its own and never appears in the
    generic update/downgrade/add/delete collections. ``platform_upgraded`` is
    ``True`` for an upgrade, ``False`` for a downgrade and ``None`` when the
    platform is unchanged.
    """

    model_config = ConfigDict(frozen=True)

    platform_artifact: Artifact | None = None
    platform_upgraded: bool | None = None
    updates: list[ArtifactChange] = Field(default_factory=list)
    downgrades: list[ArtifactChange] = Field(default_factory=list)
    to_add: list[Artifact] = Field(default_factory=list)
    to_delete: list[Artifact] = Field(default_factory=list)

    @property
    def platform_changed(self) -> bool:
        return self.platform_artifact is not None

    @property
    def update_map(self) -> dict[Artifact, Artifact]:
        return {change.old: change.new for change in self.updates}

    @property
    def downgrade_map(self) -> dict[Artifact, Artifact]:
        return {change.old: change.new for change in self.downgrades}

    @property
    def is_empty(self) -> bool:
        return not (
            self.platform_changed
            or self.updates
            or self.downgrades
            or self.to_add
            or self.to_delete
        )
