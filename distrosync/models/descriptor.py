"""Distribution descriptor — the declarative target state of a server.

A descriptor names the platform version, an ordered list of modules and a
set of custom properties. It is read-only after construction; placeholder
substitution returns a new descriptor.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from distrosync.models.artifacts import (
    GROUP_MODULE,
    GROUP_WEB,
    TYPE_OMOD,
    TYPE_WAR,
    WEBAPP_ARTIFACT_ID,
    Artifact,
)

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def substitute_placeholders(text: str, mapping: Mapping[str, str]) -> str:
    """Replace ``${key}`` with ``mapping[key]``; unknown keys are left as-is.

    Substitution is a single pass, values are not re-expanded.
    """
    return _PLACEHOLDER.sub(lambda m: mapping.get(m.group(1), m.group(0)), text)


class DistroProperty(BaseModel):
    """A named custom property; any of value, prompt, default may be missing."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str | None = None
    prompt: str | None = None
    default: str | None = None


class ModuleEntry(BaseModel):
    """One ``omod.<name>`` line of a descriptor."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    group_id: str = GROUP_MODULE
    type: str = TYPE_OMOD

    def to_artifact(self) -> Artifact:
        return Artifact(
            artifact_id=f"{self.name}-omod" if self.type == TYPE_OMOD else self.name,
            version=self.version,
            group_id=self.group_id,
            type=self.type,
            dest_file_name=f"{self.name}-{self.version}.{self.type}",
        )


class DistroDescriptor(BaseModel):
    """Parsed target state: platform + ordered modules + custom properties."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    platform_version: str | None = None
    modules: list[ModuleEntry] = Field(default_factory=list)
    properties: dict[str, DistroProperty] = Field(default_factory=dict)
    webapp_override: Artifact | None = None
    h2_support: bool = False
    # Hardcoded legacy descriptor; it lists no modules
    built_in: bool = False

    @field_validator("properties")
    @classmethod
    def _keys_match_names(
        cls, value: dict[str, DistroProperty]
    ) -> dict[str, DistroProperty]:
        for key, prop in value.items():
            if key != prop.name:
                raise ValueError(f"property key {key!r} does not match name {prop.name!r}")
        return value

    @classmethod
    def for_platform(
        cls, server_id: str, platform_version: str, *, h2: bool = False
    ) -> DistroDescriptor:
        """Minimal descriptor for a platform-only installation."""
        return cls(
            name=server_id,
            version=platform_version,
            platform_version=platform_version,
            h2_support=h2,
        )

    def platform_artifact(self) -> Artifact | None:
        if self.webapp_override is not None:
            return self.webapp_override
        if not self.platform_version:
            return None
        return Artifact(
            artifact_id=WEBAPP_ARTIFACT_ID,
            version=self.platform_version,
            group_id=GROUP_WEB,
            type=TYPE_WAR,
        )

    def war_artifacts(self) -> list[Artifact]:
        platform = self.platform_artifact()
        return [platform] if platform is not None else []

    def module_artifacts(self) -> list[Artifact]:
        return [module.to_artifact() for module in self.modules]

    def target_artifacts(self) -> list[Artifact]:
        """Platform first, then modules in declaration order."""
        return self.war_artifacts() + self.module_artifacts()

    def resolve_placeholders(self, mapping: Mapping[str, str]) -> DistroDescriptor:
        """Return a copy with ``${key}`` placeholders substituted from *mapping*."""

        def sub(value: str | None) -> str | None:
            return None if value is None else substitute_placeholders(value, mapping)

        modules = [
            module.model_copy(update={"version": sub(module.version)})
            for module in self.modules
        ]
        properties = {
            name: prop.model_copy(
                update={
                    "value": sub(prop.value),
                    "prompt": sub(prop.prompt),
                    "default": sub(prop.default),
                }
            )
            for name, prop in self.properties.items()
        }
        return self.model_copy(
            update={
                "name": sub(self.name),
                "version": sub(self.version),
                "platform_version": sub(self.platform_version),
                "modules": modules,
                "properties": properties,
            }
        )
