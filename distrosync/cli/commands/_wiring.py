"""Builds a resolver wired to the default adapters for CLI commands."""

from __future__ import annotations

from pathlib import Path

from distrosync.adapters import LocalRepositoryFetcher, PropertiesDescriptorStore, ZipArchiveReader
from distrosync.config import settings
from distrosync.core.resolver import DistroResolver, ResolverContext


def build_resolver(
    repository: Path | None = None,
    work_dir: Path | None = None,
    project_version: str | None = None,
) -> DistroResolver:
    fetcher = LocalRepositoryFetcher(repository or settings.repository_path)
    context = ResolverContext(
        work_dir=work_dir or settings.work_dir,
        project_version=project_version,
    )
    return DistroResolver(
        PropertiesDescriptorStore(),
        fetcher=fetcher,
        archive_reader=ZipArchiveReader(),
        version_lookup=fetcher,
        context=context,
    )
