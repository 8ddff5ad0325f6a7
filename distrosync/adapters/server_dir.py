"""Builds the installed-artifact list of a server directory.

Expected layout::

    {server}/openmrs-1.11.5.war        platform webapp
    {server}/modules/appui-1.3.omod    one file per module

Module file names are ``{name}-{version}.omod``; the version starts at the
first ``-`` followed by a digit so names containing dashes survive.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from distrosync.models.artifacts import (
    GROUP_MODULE,
    GROUP_WEB,
    TYPE_OMOD,
    TYPE_WAR,
    WEBAPP_ARTIFACT_ID,
    Artifact,
)

logger = logging.getLogger(__name__)

MODULES_DIR = "modules"

_NAME_VERSION = re.compile(r"^(?P<name>.+?)-(?P<version>\d.*)$")


def _split_file_name(stem: str) -> tuple[str, str] | None:
    match = _NAME_VERSION.match(stem)
    if match is None:
        return None
    return match.group("name"), match.group("version")


def scan_server_directory(server_dir: Path) -> list[Artifact]:
    """Return the platform artifact (if any) followed by installed modules."""
    server_dir = Path(server_dir)
    if not server_dir.is_dir():
        raise NotADirectoryError(f"Server directory not found: {server_dir}")

    installed: list[Artifact] = []

    for war in sorted(server_dir.glob(f"*.{TYPE_WAR}")):
        parts = _split_file_name(war.stem)
        if parts is None:
            logger.warning("Ignoring webapp without version: %s", war.name)
            continue
        installed.append(
            Artifact(
                artifact_id=WEBAPP_ARTIFACT_ID,
                version=parts[1],
                group_id=GROUP_WEB,
                type=TYPE_WAR,
                dest_file_name=war.name,
            )
        )

    modules_dir = server_dir / MODULES_DIR
    if modules_dir.is_dir():
        for omod in sorted(modules_dir.glob(f"*.{TYPE_OMOD}")):
            parts = _split_file_name(omod.stem)
            if parts is None:
                logger.warning("Ignoring module without version: %s", omod.name)
                continue
            name, version = parts
            installed.append(
                Artifact(
                    artifact_id=f"{name}-omod",
                    version=version,
                    group_id=GROUP_MODULE,
                    type=TYPE_OMOD,
                    dest_file_name=omod.name,
                )
            )

    logger.info("Found %d installed artifacts in %s", len(installed), server_dir)
    return installed
