"""Descriptor persistence in the ``openmrs-distro.properties`` text format.

Recognized keys::

    name=Reference Application
    version=2.4
    war.openmrs=1.11.5
    db.h2.supported=true
    omod.appui=1.3
    omod.appui.groupId=org.openmrs.module
    omod.appui.type=omod
    property.site.name=Demo
    property.admin.prompt=Admin password
    property.admin.default=Admin123

Lines starting with ``#`` or ``!`` and blank lines are ignored. Both ``=``
and ``:`` separate keys from values. Unknown keys are kept out of the model.
"""

from __future__ import annotations

import logging
from pathlib import Path

from distrosync.models.artifacts import GROUP_MODULE, TYPE_OMOD
from distrosync.models.descriptor import DistroDescriptor, DistroProperty, ModuleEntry

logger = logging.getLogger(__name__)

_MODULE_PREFIX = "omod."
_PROPERTY_PREFIX = "property."
_PLATFORM_KEY = "war.openmrs"
_H2_KEY = "db.h2.supported"
_PROPERTY_SUFFIXES = ("prompt", "default")
_MODULE_SUFFIXES = ("groupId", "type")


class DescriptorFormatError(ValueError):
    """Raised when text is not a valid descriptor."""


def parse_properties(text: str) -> dict[str, str]:
    """Parse ``key=value`` lines, preserving declaration order."""
    entries: dict[str, str] = {}
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line[0] in "#!":
            continue
        cut = min((i for i in (line.find("="), line.find(":")) if i >= 0), default=-1)
        if cut < 0:
            raise DescriptorFormatError(f"line {line_no}: missing '=' in {raw!r}")
        entries[line[:cut].strip()] = line[cut + 1 :].strip()
    return entries


def _split_suffix(key: str, suffixes: tuple[str, ...]) -> tuple[str, str | None]:
    for suffix in suffixes:
        if key.endswith(f".{suffix}"):
            return key[: -len(suffix) - 1], suffix
    return key, None


def descriptor_from_properties(entries: dict[str, str]) -> DistroDescriptor:
    missing = [key for key in ("name", "version") if not entries.get(key)]
    if missing:
        raise DescriptorFormatError(f"missing required keys: {', '.join(missing)}")

    modules: dict[str, dict[str, str]] = {}
    properties: dict[str, dict[str, str]] = {}

    for key, value in entries.items():
        if key.startswith(_MODULE_PREFIX):
            name, suffix = _split_suffix(key[len(_MODULE_PREFIX) :], _MODULE_SUFFIXES)
            modules.setdefault(name, {})[suffix or "version"] = value
        elif key.startswith(_PROPERTY_PREFIX):
            name, suffix = _split_suffix(key[len(_PROPERTY_PREFIX) :], _PROPERTY_SUFFIXES)
            properties.setdefault(name, {})[suffix or "value"] = value

    module_entries = []
    for name, fields in modules.items():
        if "version" not in fields:
            raise DescriptorFormatError(f"module {name!r} has no version")
        module_entries.append(
            ModuleEntry(
                name=name,
                version=fields["version"],
                group_id=fields.get("groupId", GROUP_MODULE),
                type=fields.get("type", TYPE_OMOD),
            )
        )

    return DistroDescriptor(
        name=entries["name"],
        version=entries["version"],
        platform_version=entries.get(_PLATFORM_KEY) or None,
        modules=module_entries,
        properties={
            name: DistroProperty(name=name, **fields) for name, fields in properties.items()
        },
        h2_support=entries.get(_H2_KEY, "").lower() == "true",
    )


def descriptor_to_properties(descriptor: DistroDescriptor) -> dict[str, str]:
    entries: dict[str, str] = {"name": descriptor.name, "version": descriptor.version}
    if descriptor.platform_version:
        entries[_PLATFORM_KEY] = descriptor.platform_version
    if descriptor.h2_support:
        entries[_H2_KEY] = "true"
    for module in descriptor.modules:
        entries[f"{_MODULE_PREFIX}{module.name}"] = module.version
        if module.group_id != GROUP_MODULE:
            entries[f"{_MODULE_PREFIX}{module.name}.groupId"] = module.group_id
        if module.type != TYPE_OMOD:
            entries[f"{_MODULE_PREFIX}{module.name}.type"] = module.type
    for name, prop in descriptor.properties.items():
        if prop.value is not None:
            entries[f"{_PROPERTY_PREFIX}{name}"] = prop.value
        if prop.prompt is not None:
            entries[f"{_PROPERTY_PREFIX}{name}.prompt"] = prop.prompt
        if prop.default is not None:
            entries[f"{_PROPERTY_PREFIX}{name}.default"] = prop.default
    return entries


class PropertiesDescriptorStore:
    """:class:`~distrosync.core.ports.DescriptorStore` for ``.properties`` files."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def loads(self, data: bytes) -> DistroDescriptor:
        try:
            text = data.decode(self.encoding)
        except UnicodeDecodeError as exc:
            raise DescriptorFormatError(f"not {self.encoding} text: {exc}") from exc
        return descriptor_from_properties(parse_properties(text))

    def load(self, path: Path) -> DistroDescriptor:
        return self.loads(Path(path).read_bytes())

    def dumps(self, descriptor: DistroDescriptor) -> str:
        lines = [f"{key}={value}" for key, value in descriptor_to_properties(descriptor).items()]
        return "\n".join(lines) + "\n"

    def save(self, descriptor: DistroDescriptor, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.dumps(descriptor), encoding=self.encoding)
        logger.info("Saved descriptor %s %s to %s", descriptor.name, descriptor.version, path)
