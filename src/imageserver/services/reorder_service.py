from __future__ import annotations

import logging

from imageserver.domain.errors import DirectoryUnreadableError
from imageserver.domain.models import ReorderResult
from imageserver.domain.ordering import (
    assign_final_names,
    collect_image_files,
    sort_by_order_key,
)
from imageserver.domain.rename_logic import build_rename_plan, resolve_collisions
from imageserver.ports.filesystem_port import FileSystemPort
from imageserver.services.two_phase_renamer import TwoPhaseRenamer

logger = logging.getLogger(__name__)

NOTHING_TO_REORDER = "No images found to reorder"


class ReorderService:
    def __init__(self, filesystem: FileSystemPort, renamer: TwoPhaseRenamer, directory: str = "") -> None:
        self._filesystem = filesystem
        self._renamer = renamer
        self._directory = directory

    def reorder(self) -> ReorderResult:
        try:
            file_names = self._filesystem.list_files(self._directory)
            entry_names = self._filesystem.list_entries(self._directory)
        except OSError as exc:
            raise DirectoryUnreadableError("Unable to read directory", str(exc)) from exc

        images = sort_by_order_key(collect_image_files(file_names))
        if not images:
            logger.info("Reorder requested but %r holds no images", self._directory)
            return ReorderResult(message=NOTHING_TO_REORDER, count=0)

        sources = [image.filename for image in images]
        batch = set(sources)
        others = {name for name in entry_names if name not in batch}
        finals = resolve_collisions(assign_final_names(images), others)

        plan = build_rename_plan(list(zip(sources, finals)), set(entry_names))
        changes = self._renamer.execute(self._directory, plan)
        logger.info("Reordered %d images in %r", len(changes), self._directory)
        return ReorderResult(
            message=f"Successfully reordered {len(changes)} images",
            count=len(changes),
            changes=changes,
        )
