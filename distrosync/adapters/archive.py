"""Zip/jar archive reader."""

from __future__ import annotations

import zipfile
from pathlib import Path


class ZipArchiveReader:
    """Reads single entries out of zip-format archives (jar, omod, zip)."""

    def read_entry(self, archive: Path, entry_name: str) -> bytes | None:
        try:
            with zipfile.ZipFile(archive) as zf:
                try:
                    return zf.read(entry_name)
                except KeyError:
                    return None
        except zipfile.BadZipFile as exc:
            raise OSError(f"Could not read {archive}: {exc}") from exc
