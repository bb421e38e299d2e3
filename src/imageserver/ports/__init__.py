from .filesystem_port import FileSystemPort

__all__ = ["FileSystemPort"]
