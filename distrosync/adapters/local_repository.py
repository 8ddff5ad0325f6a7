"""Artifact fetcher backed by a local Maven-layout repository directory.

Layout: ``{root}/{group with dots as slashes}/{artifact}/{version}/{artifact}-{version}.{type}``
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from distrosync.models.artifacts import Artifact
from distrosync.models.versioning import Version

logger = logging.getLogger(__name__)


class LocalRepositoryFetcher:
    """Copies artifacts out of a local repository; also answers version lookups.

    Parameters
    ----------
    root:
        Repository root directory.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def _artifact_dir(self, artifact: Artifact) -> Path:
        return self.root.joinpath(*artifact.group_id.split("."), artifact.artifact_id)

    def artifact_path(self, artifact: Artifact) -> Path:
        return (
            self._artifact_dir(artifact)
            / artifact.version
            / f"{artifact.artifact_id}-{artifact.version}.{artifact.type}"
        )

    # ------------------------------------------------------------------
    # ArtifactFetcher
    # ------------------------------------------------------------------

    def fetch(self, artifact: Artifact, dest_dir: Path) -> Path:
        source = self.artifact_path(artifact)
        if not source.is_file():
            raise FileNotFoundError(f"Artifact not found in {self.root}: {artifact.coordinate}")
        dest = Path(dest_dir) / artifact.dest_file_name
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, dest)
        logger.debug("Copied %s to %s", artifact.coordinate, dest)
        return dest

    # ------------------------------------------------------------------
    # VersionLookup
    # ------------------------------------------------------------------

    def available_versions(self, artifact: Artifact) -> list[Version]:
        base = self._artifact_dir(artifact)
        if not base.is_dir():
            return []
        return sorted(Version.parse(p.name) for p in base.iterdir() if p.is_dir())

    def _latest(self, artifact: Artifact, *, unstable: bool) -> str:
        candidates = [v for v in self.available_versions(artifact) if v.is_unstable == unstable]
        if not candidates:
            kind = "snapshot" if unstable else "release"
            raise FileNotFoundError(f"No {kind} of {artifact.group_id}:{artifact.artifact_id} in {self.root}")
        return candidates[-1].raw

    def latest_release(self, artifact: Artifact) -> str:
        return self._latest(artifact, unstable=False)

    def latest_snapshot(self, artifact: Artifact) -> str:
        return self._latest(artifact, unstable=True)
