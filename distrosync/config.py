"""Runtime configuration — env-driven via pydantic-settings.

Reads from a ``.env`` file and ``DISTROSYNC_*`` environment variables.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class DistroSyncSettings(BaseSettings):
    """Settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export DISTROSYNC_LOG_LEVEL=DEBUG
        export DISTROSYNC_REPOSITORY_PATH=~/.m2/repository
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DISTROSYNC_",
        env_file_encoding="utf-8",
    )

    log_level: str = "INFO"

    # Scratch directory for fetched distro archives
    work_dir: Path = Path(".")
    # Local Maven-layout repository used by the default fetcher
    repository_path: Path = Path.home() / ".m2" / "repository"

    descriptor_file_name: str = "openmrs-distro.properties"
    distro_archive_name: str = "openmrs-distro.jar"


# Module-level singleton — import as `from distrosync.config import settings`
settings = DistroSyncSettings()
