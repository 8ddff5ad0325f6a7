"""Default implementations of the collaborator ports."""

from distrosync.adapters.archive import ZipArchiveReader
from distrosync.adapters.local_repository import LocalRepositoryFetcher
from distrosync.adapters.prompt import ConsolePrompt
from distrosync.adapters.properties_store import DescriptorFormatError, PropertiesDescriptorStore
from distrosync.adapters.server_dir import scan_server_directory

__all__ = [
    "ConsolePrompt",
    "DescriptorFormatError",
    "LocalRepositoryFetcher",
    "PropertiesDescriptorStore",
    "ZipArchiveReader",
    "scan_server_directory",
]
