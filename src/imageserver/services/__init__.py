from .gallery_service import GalleryService
from .reorder_service import ReorderService
from .two_phase_renamer import TwoPhaseRenamer

__all__ = ["GalleryService", "ReorderService", "TwoPhaseRenamer"]
