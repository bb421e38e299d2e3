from __future__ import annotations

import logging

from imageserver.domain.errors import RenameFailedError
from imageserver.domain.models import ChangeRecord, RenamePlanEntry, StrandedFile
from imageserver.ports.filesystem_port import FileSystemPort

logger = logging.getLogger(__name__)


class TwoPhaseRenamer:
    """
    Apply a rename plan in two passes: every source to its temporary name,
    then every temporary name to its final name.

    Renames run one at a time in plan order. A failure aborts the batch and
    raises RenameFailedError with what already completed; nothing is rolled
    back.
    """

    def __init__(self, filesystem: FileSystemPort) -> None:
        self._filesystem = filesystem

    def execute(self, directory: str, plan: list[RenamePlanEntry]) -> list[ChangeRecord]:
        moved: list[RenamePlanEntry] = []
        for entry in plan:
            try:
                self._filesystem.rename(directory, entry.source_name, entry.temporary_name)
            except OSError as exc:
                raise self._failure(1, exc, [], moved) from exc
            moved.append(entry)
        logger.debug("Moved %d files to temporary names in %r", len(moved), directory)

        changes: list[ChangeRecord] = []
        for index, entry in enumerate(plan):
            try:
                self._filesystem.rename(directory, entry.temporary_name, entry.final_name)
            except OSError as exc:
                raise self._failure(2, exc, changes, plan[index:]) from exc
            changes.append(ChangeRecord(old=entry.source_name, new=entry.final_name))
        return changes

    @staticmethod
    def _failure(
        phase: int,
        exc: OSError,
        changes: list[ChangeRecord],
        pending: list[RenamePlanEntry],
    ) -> RenameFailedError:
        stranded = [
            StrandedFile(original_name=entry.source_name, temporary_name=entry.temporary_name)
            for entry in pending
        ]
        logger.error(
            "Rename phase %d failed after %d changes, %d files left under temporary names: %s",
            phase,
            len(changes),
            len(stranded),
            exc,
        )
        return RenameFailedError(phase=phase, details=str(exc), changes=changes, stranded=stranded)
