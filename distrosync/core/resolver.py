"""Distro specifier resolver — turns a user string into a DistroDescriptor.

Two specifier shapes are accepted:

1. A path to a descriptor file. Placeholders referencing the consuming
   project (``${project.version}``, ``${project.parent.version}`` and any
   other project property) are substituted from the :class:`ResolverContext`.
2. A coordinate ``group:artifact:version`` or ``artifact:version``. The group
   defaults to the distro namespace; ``module`` and ``distro`` are accepted as
   short group aliases.

Coordinate conventions
----------------------
- ``LATEST`` / ``LATEST-SNAPSHOT`` versions are resolved through an injected
  :class:`VersionLookup`; without one the keyword is kept verbatim.
- ``referenceapplication`` in the distro group means
  ``referenceapplication-package``.
- Artifacts in the module group get ``-omod`` appended.
- Reference application releases below 2.1 are unsupported; releases up to
  2.3.1 never shipped a descriptor and get a hardcoded minimal one.

Everything else is fetched through the :class:`ArtifactFetcher`, and the
embedded descriptor is read with the :class:`ArchiveReader`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from distrosync.config import settings
from distrosync.core.ports import (
    ArchiveReader,
    ArtifactFetcher,
    DescriptorStore,
    VersionLookup,
)
from distrosync.models.artifacts import (
    GROUP_DISTRO,
    GROUP_MODULE,
    GROUP_WEB,
    REFAPP_ARTIFACT_ID,
    TYPE_JAR,
    Artifact,
)
from distrosync.models.descriptor import DistroDescriptor
from distrosync.models.versioning import Version

logger = logging.getLogger(__name__)

LATEST_RELEASE_KEYWORD = "LATEST"
LATEST_SNAPSHOT_KEYWORD = "LATEST-SNAPSHOT"

REFAPP_ALIAS = "referenceapplication"

_GROUP_ALIASES: dict[str, str] = {
    "distro": GROUP_DISTRO,
    "module": GROUP_MODULE,
    "web": GROUP_WEB,
}

# Oldest supported reference application release.
REFAPP_SUPPORTED_FLOOR = "2.1"
# Newest reference application release without a published descriptor.
REFAPP_LEGACY_CEILING = "2.3.1"

# Platform version bundled with each legacy reference application release.
_LEGACY_REFAPP_PLATFORMS: dict[str, str] = {
    "2.1": "1.10.0",
    "2.2": "1.11.2",
    "2.3": "1.11.4",
    "2.3.1": "1.11.5",
}


class InvalidSpecifierError(ValueError):
    """Raised for a malformed coordinate specifier."""

    def __init__(self, specifier: str, reason: str = "expected [group:]artifact:version") -> None:
        self.specifier = specifier
        super().__init__(f"Invalid distro {specifier!r}: {reason}")


class UnsupportedVersionError(ValueError):
    """Raised for legacy releases below the supported floor."""

    def __init__(self, artifact: Artifact) -> None:
        self.artifact = artifact
        super().__init__(
            f"Reference Application versions below {REFAPP_SUPPORTED_FLOOR} "
            f"are not supported (got {artifact.version})"
        )


class DescriptorNotFoundError(RuntimeError):
    """Raised when a fetched distro archive carries no descriptor."""

    def __init__(self, artifact: Artifact, entry_name: str) -> None:
        self.artifact = artifact
        super().__init__(f"{artifact.coordinate} does not contain {entry_name}")


class MissingCollaboratorError(RuntimeError):
    """Raised when resolution needs a collaborator that was not injected."""


class ResolverContext(BaseModel):
    """Explicit inputs that would otherwise come from process state.

    ``base_dir`` anchors relative descriptor paths, ``work_dir`` receives
    fetched archives, ``project_version``/``project_properties`` feed
    placeholder substitution.
    """

    model_config = ConfigDict(frozen=True)

    base_dir: Path = Field(default_factory=Path.cwd)
    work_dir: Path = Field(default_factory=lambda: settings.work_dir)
    project_version: str | None = None
    project_properties: dict[str, str] = Field(default_factory=dict)
    descriptor_file_name: str = Field(default_factory=lambda: settings.descriptor_file_name)
    distro_archive_name: str = Field(default_factory=lambda: settings.distro_archive_name)

    def placeholder_mapping(self) -> dict[str, str]:
        mapping = dict(self.project_properties)
        if self.project_version is not None:
            mapping["project.version"] = self.project_version
            mapping["project.parent.version"] = self.project_version
        return mapping


# ---------------------------------------------------------------------------
# Coordinate parsing
# ---------------------------------------------------------------------------


def _infer_artifact_id(artifact_id: str, group_id: str) -> str:
    if group_id == GROUP_DISTRO and artifact_id == REFAPP_ALIAS:
        return REFAPP_ARTIFACT_ID
    return artifact_id


def _resolve_latest(
    version: str, candidate: Artifact, version_lookup: VersionLookup | None
) -> str:
    keyword = version.upper()
    if keyword not in (LATEST_RELEASE_KEYWORD, LATEST_SNAPSHOT_KEYWORD):
        return version
    if version_lookup is None:
        logger.warning("No version lookup configured; keeping %r for %s", version, candidate.artifact_id)
        return version
    if keyword == LATEST_SNAPSHOT_KEYWORD:
        resolved = version_lookup.latest_snapshot(candidate)
    else:
        resolved = version_lookup.latest_release(candidate)
    logger.info("Resolved %s %s to %s", candidate.artifact_id, version, resolved)
    return resolved


def parse_distro_artifact(
    specifier: str, version_lookup: VersionLookup | None = None
) -> Artifact:
    """Parse ``group:artifact:version`` or ``artifact:version``."""
    parts = specifier.split(":")
    if len(parts) > 3:
        raise InvalidSpecifierError(specifier, "too many ':' separated segments")
    if len(parts) < 2 or not all(part.strip() for part in parts):
        raise InvalidSpecifierError(specifier)

    group_id = _GROUP_ALIASES.get(parts[0], parts[0]) if len(parts) == 3 else GROUP_DISTRO
    artifact_id, version = parts[-2], parts[-1]

    version = _resolve_latest(
        version,
        Artifact(artifact_id=artifact_id, version=version, group_id=group_id),
        version_lookup,
    )

    artifact_id = _infer_artifact_id(artifact_id, group_id)
    if group_id == GROUP_MODULE:
        artifact_id = f"{artifact_id}-omod"

    return Artifact(artifact_id=artifact_id, version=version, group_id=group_id, type=TYPE_JAR)


def is_refapp_below_floor(artifact: Artifact) -> bool:
    return (
        artifact.artifact_id == REFAPP_ARTIFACT_ID
        and Version.parse(artifact.version) < Version.parse(REFAPP_SUPPORTED_FLOOR)
    )


def is_legacy_refapp(artifact: Artifact) -> bool:
    """True for supported reference application releases without a descriptor."""
    return (
        artifact.artifact_id == REFAPP_ARTIFACT_ID
        and not is_refapp_below_floor(artifact)
        and Version.parse(artifact.version) <= Version.parse(REFAPP_LEGACY_CEILING)
    )


def legacy_refapp_descriptor(version: str) -> DistroDescriptor:
    """Hardcoded minimal descriptor for a legacy reference application."""
    parsed = Version.parse(version)
    platform = None
    for release, platform_version in _LEGACY_REFAPP_PLATFORMS.items():
        if Version.parse(release) <= parsed:
            platform = platform_version
    return DistroDescriptor(
        name="Reference Application",
        version=version,
        platform_version=platform,
        built_in=True,
    )


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


class DistroResolver:
    """Resolves specifiers into descriptors through injected collaborators.

    Parameters
    ----------
    store:
        Parses and writes descriptor files.
    fetcher, archive_reader:
        Needed only when a coordinate has to be expanded remotely.
    version_lookup:
        Needed only for ``LATEST`` keywords.
    context:
        Working directories and project placeholders; defaults from settings.
    """

    def __init__(
        self,
        store: DescriptorStore,
        *,
        fetcher: ArtifactFetcher | None = None,
        archive_reader: ArchiveReader | None = None,
        version_lookup: VersionLookup | None = None,
        context: ResolverContext | None = None,
    ) -> None:
        self.store = store
        self.fetcher = fetcher
        self.archive_reader = archive_reader
        self.version_lookup = version_lookup
        self.context = context or ResolverContext()

    # ------------------------------------------------------------------
    # Descriptor files
    # ------------------------------------------------------------------

    def _load_file(self, path: Path) -> DistroDescriptor | None:
        if not path.is_absolute():
            path = self.context.base_dir / path
        if not path.is_file():
            return None
        try:
            return self.store.load(path)
        except ValueError as exc:
            logger.debug("%s is not a descriptor: %s", path, exc)
            return None

    def resolve_from_dir(self, directory: Path | None = None) -> DistroDescriptor | None:
        """Load the descriptor file from *directory* (default: base dir), if any."""
        directory = directory or self.context.base_dir
        return self._load_file(directory / self.context.descriptor_file_name)

    # ------------------------------------------------------------------
    # Remote expansion
    # ------------------------------------------------------------------

    def _fetch(self, artifact: Artifact) -> Path:
        if self.fetcher is None:
            raise MissingCollaboratorError(f"No artifact fetcher configured to obtain {artifact}")
        work_dir = self.context.work_dir
        work_dir.mkdir(parents=True, exist_ok=True)
        return self.fetcher.fetch(artifact, work_dir)

    def extract_file(self, artifact: Artifact, entry_name: str) -> bytes | None:
        """Fetch *artifact* and return the bytes of one archive entry."""
        if self.archive_reader is None:
            raise MissingCollaboratorError("No archive reader configured")
        archive = self._fetch(artifact.with_dest_file_name(self.context.distro_archive_name))
        try:
            return self.archive_reader.read_entry(archive, entry_name)
        finally:
            archive.unlink(missing_ok=True)

    def fetch_descriptor(self, artifact: Artifact) -> DistroDescriptor | None:
        """Read the descriptor packaged inside a distro archive."""
        data = self.extract_file(artifact, self.context.descriptor_file_name)
        if data is None:
            return None
        return self.store.loads(data)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def resolve(self, specifier: str) -> DistroDescriptor:
        """Resolve a file path or coordinate specifier.

        Raises
        ------
        InvalidSpecifierError
            Malformed coordinate.
        UnsupportedVersionError
            Reference application release below the supported floor.
        DescriptorNotFoundError
            The fetched archive carries no descriptor.
        """
        descriptor = self._load_file(Path(specifier))
        if descriptor is not None:
            logger.info("Loaded descriptor %s %s from file", descriptor.name, descriptor.version)
            return descriptor.resolve_placeholders(self.context.placeholder_mapping())

        artifact = parse_distro_artifact(specifier, self.version_lookup)
        if is_refapp_below_floor(artifact):
            raise UnsupportedVersionError(artifact)
        if is_legacy_refapp(artifact):
            logger.info("Using built-in descriptor for %s", artifact.coordinate)
            return legacy_refapp_descriptor(artifact.version)

        descriptor = self.fetch_descriptor(artifact)
        if descriptor is None:
            raise DescriptorNotFoundError(artifact, self.context.descriptor_file_name)
        logger.info("Fetched descriptor %s %s", descriptor.name, descriptor.version)
        return descriptor

    def save_descriptor_to(self, destination: Path, specifier: str) -> DistroDescriptor:
        """Resolve *specifier* and write the descriptor to *destination*."""
        descriptor = self.resolve(specifier)
        self.store.save(descriptor, destination)
        return descriptor
