"""Shared test fixtures for distrosync."""

from __future__ import annotations

import io
import zipfile
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from distrosync.adapters import LocalRepositoryFetcher, PropertiesDescriptorStore, ZipArchiveReader
from distrosync.core.resolver import DistroResolver, ResolverContext
from distrosync.models.artifacts import (
    GROUP_MODULE,
    GROUP_WEB,
    TYPE_OMOD,
    TYPE_WAR,
    WEBAPP_ARTIFACT_ID,
    Artifact,
)


# ---------------------------------------------------------------------------
# Artifact factories
# ---------------------------------------------------------------------------


def platform(version: str) -> Artifact:
    return Artifact(
        artifact_id=WEBAPP_ARTIFACT_ID,
        version=version,
        group_id=GROUP_WEB,
        type=TYPE_WAR,
    )


def module(name: str, version: str) -> Artifact:
    return Artifact(
        artifact_id=f"{name}-omod",
        version=version,
        group_id=GROUP_MODULE,
        type=TYPE_OMOD,
    )


@pytest.fixture
def make_platform() -> Callable[[str], Artifact]:
    return platform


@pytest.fixture
def make_module() -> Callable[[str, str], Artifact]:
    return module


# ---------------------------------------------------------------------------
# Collaborator doubles
# ---------------------------------------------------------------------------


class RecordingFetcher:
    """Fetcher double that counts calls and serves prepared files."""

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self.files = files or {}
        self.calls: list[Artifact] = []

    def fetch(self, artifact: Artifact, dest_dir: Path) -> Path:
        self.calls.append(artifact)
        if artifact.coordinate not in self.files:
            raise FileNotFoundError(artifact.coordinate)
        dest = dest_dir / artifact.dest_file_name
        dest.write_bytes(self.files[artifact.coordinate])
        return dest


class StubVersionLookup:
    def __init__(self, release: str = "2.9.0", snapshot: str = "2.10.0-SNAPSHOT") -> None:
        self.release = release
        self.snapshot = snapshot
        self.queried: list[tuple[str, Artifact]] = []

    def latest_release(self, artifact: Artifact) -> str:
        self.queried.append(("release", artifact))
        return self.release

    def latest_snapshot(self, artifact: Artifact) -> str:
        self.queried.append(("snapshot", artifact))
        return self.snapshot


class StubPrompt:
    def __init__(self, answer: str = "answered") -> None:
        self.answer = answer
        self.asked: list[tuple[str, str | None]] = []

    def prompt(self, text: str, default: str | None = None) -> str:
        self.asked.append((text, default))
        return self.answer


@pytest.fixture
def fetcher() -> RecordingFetcher:
    return RecordingFetcher()


@pytest.fixture
def store() -> PropertiesDescriptorStore:
    return PropertiesDescriptorStore()


@pytest.fixture
def context(tmp_path: Path) -> ResolverContext:
    return ResolverContext(base_dir=tmp_path, work_dir=tmp_path / "work")


@pytest.fixture
def resolver(
    store: PropertiesDescriptorStore, fetcher: RecordingFetcher, context: ResolverContext
) -> DistroResolver:
    """Resolver wired to a recording fetcher and the zip reader."""
    return DistroResolver(
        store,
        fetcher=fetcher,
        archive_reader=ZipArchiveReader(),
        context=context,
    )


# ---------------------------------------------------------------------------
# On-disk helpers
# ---------------------------------------------------------------------------


DISTRO_PROPERTIES = """\
# Demo distribution
name=Demo Distro
version=${project.version}
war.openmrs=2.6.0
omod.appui=1.3
omod.reporting=1.25.0-SNAPSHOT
property.site.name=Demo Site
property.admin.password.prompt=Admin password
property.admin.password.default=Admin123
"""


def make_jar(entries: dict[str, str | bytes]) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        for name, content in entries.items():
            zf.writestr(name, content)
    return buffer.getvalue()


@pytest.fixture
def make_repository(tmp_path: Path) -> Callable[..., LocalRepositoryFetcher]:
    """Factory fixture: lay out artifacts in a Maven-style repository."""

    def _factory(artifacts: dict[Artifact, bytes], **overrides: Any) -> LocalRepositoryFetcher:
        root = overrides.get("root", tmp_path / "repository")
        repo = LocalRepositoryFetcher(root)
        for artifact, content in artifacts.items():
            path = repo.artifact_path(artifact)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        return repo

    return _factory


@pytest.fixture
def make_server(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture: a server directory with a webapp and module files."""

    def _factory(platform_version: str | None, modules: dict[str, str]) -> Path:
        server = tmp_path / "server"
        (server / "modules").mkdir(parents=True, exist_ok=True)
        if platform_version is not None:
            (server / f"openmrs-{platform_version}.war").write_bytes(b"war")
        for name, version in modules.items():
            (server / "modules" / f"{name}-{version}.omod").write_bytes(b"omod")
        return server

    return _factory


@pytest.fixture
def version_lookup() -> StubVersionLookup:
    return StubVersionLookup()


@pytest.fixture
def prompt() -> StubPrompt:
    return StubPrompt()


@pytest.fixture
def jar_bytes() -> Callable[[dict[str, str | bytes]], bytes]:
    """Factory fixture: zip bytes holding the given entries."""
    return make_jar


@pytest.fixture
def distro_properties() -> str:
    return DISTRO_PROPERTIES
