from __future__ import annotations

import logging
import os

from imageserver.domain.errors import (
    DirectoryUnreadableError,
    MissingInputError,
    UnsupportedImageError,
    UploadWriteError,
)
from imageserver.domain.models import ImageEntry, UploadResult
from imageserver.domain.ordering import IMAGE_EXTENSIONS, image_extension, is_image_filename
from imageserver.domain.rename_logic import sanitize_filename
from imageserver.ports.filesystem_port import FileSystemPort

logger = logging.getLogger(__name__)


class GalleryService:
    def __init__(self, filesystem: FileSystemPort, public_base_url: str) -> None:
        self._filesystem = filesystem
        self._public_base_url = public_base_url.rstrip("/")

    def image_url(self, filename: str) -> str:
        return f"{self._public_base_url}/images/{filename}"

    def list_images(self) -> list[ImageEntry]:
        try:
            names = self._filesystem.list_files("")
        except OSError as exc:
            raise DirectoryUnreadableError("Unable to read directory", str(exc)) from exc
        return [
            ImageEntry(filename=name, url=self.image_url(name))
            for name in names
            if is_image_filename(name)
        ]

    def upload_image(self, name: str | None, original_filename: str | None, data: bytes | None) -> UploadResult:
        if not data:
            raise MissingInputError("No image uploaded", "Request must include an image file")
        if name is None or not name.strip():
            raise MissingInputError("Missing name", "Request must include a non-empty 'name' field")

        filename = self._target_filename(name, original_filename or "")
        try:
            self._filesystem.write_bytes("", filename, data)
        except OSError as exc:
            logger.error("Failed to write upload %r: %s", filename, exc)
            raise UploadWriteError("Failed to save image", str(exc)) from exc

        logger.info("Stored upload %r (%d bytes)", filename, len(data))
        return UploadResult(
            message="Image uploaded successfully",
            filename=filename,
            url=self.image_url(filename),
        )

    @staticmethod
    def _target_filename(name: str, original_filename: str) -> str:
        filename = sanitize_filename(name)
        if image_extension(filename) is not None:
            return filename
        ext = image_extension(original_filename)
        if ext is not None:
            return f"{filename}{ext.lower()}"
        got = os.path.splitext(original_filename)[1] or "no extension"
        raise UnsupportedImageError(
            "Unsupported file type",
            f"Expected one of {', '.join(sorted(IMAGE_EXTENSIONS))}; got {got!r}",
        )
