from imageserver.adapters.local_filesystem import LocalFileSystemAdapter
from imageserver.ports.filesystem_port import FileSystemPort


class InMemoryFileSystem:
    def list_files(self, directory: str) -> list[str]:
        return []

    def list_entries(self, directory: str) -> list[str]:
        return []

    def rename(self, directory: str, old_name: str, new_name: str) -> None:
        return None

    def write_bytes(self, directory: str, filename: str, data: bytes) -> None:
        return None


def test_filesystem_port_runtime_checkable(tmp_path) -> None:
    assert isinstance(InMemoryFileSystem(), FileSystemPort)
    assert isinstance(LocalFileSystemAdapter(tmp_path), FileSystemPort)
