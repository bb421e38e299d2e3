from __future__ import annotations

from typing import Any

from imageserver.adapters.local_filesystem import LocalFileSystemAdapter
from imageserver.services.gallery_service import GalleryService
from imageserver.services.reorder_service import ReorderService
from imageserver.services.two_phase_renamer import TwoPhaseRenamer
from imageserver.settings import ServerConfig


def build_services(config: ServerConfig) -> dict[str, Any]:
    filesystem = LocalFileSystemAdapter(config.image_root_path)
    renamer = TwoPhaseRenamer(filesystem)
    return {
        "gallery_service": GalleryService(filesystem, config.base_url),
        "reorder_service": ReorderService(filesystem, renamer, config.reorder_subdir),
        "renamer": renamer,
        "filesystem": filesystem,
    }
