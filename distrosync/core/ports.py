"""Collaborator ports used by the resolver and property reconciliation.

The core never fetches, unpacks, prompts or touches descriptor files
itself; it talks to these Protocols. Default implementations live in
:mod:`distrosync.adapters`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from distrosync.models.artifacts import Artifact
from distrosync.models.descriptor import DistroDescriptor


@runtime_checkable
class ArtifactFetcher(Protocol):
    """Downloads or copies an artifact into a directory."""

    def fetch(self, artifact: Artifact, dest_dir: Path) -> Path:
        """Place *artifact* at ``dest_dir / artifact.dest_file_name``.

        Returns the local path. Raises ``OSError`` if it cannot be obtained.
        """
        ...


@runtime_checkable
class ArchiveReader(Protocol):
    """Reads a single named entry out of an archive."""

    def read_entry(self, archive: Path, entry_name: str) -> bytes | None:
        """Return the entry bytes, or ``None`` if the archive has no such entry."""
        ...


@runtime_checkable
class VersionLookup(Protocol):
    """Queries the newest published versions of an artifact."""

    def latest_release(self, artifact: Artifact) -> str: ...

    def latest_snapshot(self, artifact: Artifact) -> str: ...


@runtime_checkable
class PromptService(Protocol):
    """Asks the operator for a value."""

    def prompt(self, text: str, default: str | None = None) -> str: ...


@runtime_checkable
class DescriptorStore(Protocol):
    """Reads and writes the on-disk descriptor format."""

    def load(self, path: Path) -> DistroDescriptor:
        """Parse a descriptor file. Raises ``ValueError`` if it is not one."""
        ...

    def loads(self, data: bytes) -> DistroDescriptor: ...

    def save(self, descriptor: DistroDescriptor, path: Path) -> None: ...
