from __future__ import annotations

import os
from pathlib import Path

from imageserver.ports.filesystem_port import FileSystemPort


class LocalFileSystemAdapter(FileSystemPort):
    """FileSystemPort over the local disk; directories are relative to `root`."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def list_files(self, directory: str) -> list[str]:
        path = self._resolve(directory)
        return sorted(entry.name for entry in path.iterdir() if entry.is_file())

    def list_entries(self, directory: str) -> list[str]:
        return sorted(os.listdir(self._resolve(directory)))

    def rename(self, directory: str, old_name: str, new_name: str) -> None:
        path = self._resolve(directory)
        # os.rename silently replaces the target on POSIX.
        target = path / new_name
        if target.exists():
            raise FileExistsError(f"Refusing to overwrite existing file: {new_name}")
        (path / old_name).rename(target)

    def write_bytes(self, directory: str, filename: str, data: bytes) -> None:
        path = self._resolve(directory)
        path.mkdir(parents=True, exist_ok=True)
        (path / filename).write_bytes(data)

    def _resolve(self, directory: str) -> Path:
        return self._root / directory if directory else self._root
