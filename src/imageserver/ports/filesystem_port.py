from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystemPort(Protocol):
    def list_files(self, directory: str) -> list[str]:
        """Return regular file names in a directory, sorted by name."""

    def list_entries(self, directory: str) -> list[str]:
        """Return every entry name in a directory, files and folders alike."""

    def rename(self, directory: str, old_name: str, new_name: str) -> None:
        """Rename an entry within a directory."""

    def write_bytes(self, directory: str, filename: str, data: bytes) -> None:
        """Create or replace a file with the given content."""
