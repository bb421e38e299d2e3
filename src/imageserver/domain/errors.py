from __future__ import annotations

from .models import ChangeRecord, StrandedFile


class ImageServerError(RuntimeError):
    """Base error carrying a human-readable message and a detail string."""

    def __init__(self, message: str, details: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class DirectoryUnreadableError(ImageServerError):
    pass


class MissingInputError(ImageServerError):
    pass


class UnsupportedImageError(ImageServerError):
    pass


class UploadWriteError(ImageServerError):
    pass


class RenameFailedError(ImageServerError):
    """
    Raised when a reorder batch aborts part way through.

    `changes` holds the renames that completed before the failure and
    `stranded` the files still sitting under their temporary names.
    """

    def __init__(
        self,
        phase: int,
        details: str,
        changes: list[ChangeRecord],
        stranded: list[StrandedFile],
    ) -> None:
        super().__init__(f"Reorder failed during rename phase {phase}", details)
        self.phase = phase
        self.changes = changes
        self.stranded = stranded
