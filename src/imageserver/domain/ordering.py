from __future__ import annotations

import math
import os
import re
from typing import Iterable

from .models import ImageFile

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp", ".svg", ".bmp"})
UNORDERED = math.inf
UNORDERED_PREFIX = "unk_"

_ORDER_PREFIX = re.compile(r"^([0-9]+)_")


def extract_order_key(filename: str) -> int | float:
    """
    Return the numeric prefix of a filename, or UNORDERED when there is none.

    Examples:
        >>> extract_order_key("4_sunset.png")
        4
        >>> extract_order_key("007_x.png")
        7
        >>> extract_order_key("sunset_4.png")
        inf
    """
    match = _ORDER_PREFIX.match(filename)
    if match is None:
        return UNORDERED
    return int(match.group(1))


def image_extension(filename: str) -> str | None:
    """Return the filename's extension (case preserved) if it is a recognised image type."""
    ext = os.path.splitext(filename)[1]
    if ext.lower() in IMAGE_EXTENSIONS:
        return ext
    return None


def is_image_filename(filename: str) -> bool:
    return image_extension(filename) is not None


def collect_image_files(names: Iterable[str]) -> list[ImageFile]:
    files: list[ImageFile] = []
    for name in names:
        ext = image_extension(name)
        if ext is None:
            continue
        files.append(ImageFile(filename=name, extension=ext, order_key=extract_order_key(name)))
    return files


def sort_by_order_key(files: list[ImageFile]) -> list[ImageFile]:
    # sorted() is stable, so unordered files keep their input order.
    return sorted(files, key=lambda image: image.order_key)


def assign_final_names(files: list[ImageFile]) -> list[str]:
    """
    Compute the sequential target name for each already-sorted file.

    Ordered files reuse their key zero-padded to three digits, so gaps in the
    source numbering survive. Unordered files are numbered by their 1-based
    position among the unordered ones.

    Example:
        files = sort_by_order_key(collect_image_files(["5_x.jpg", "z.jpg"]))
        assign_final_names(files)
        # ['005.jpg', 'unk_001.jpg']
    """
    names: list[str] = []
    unordered_position = 0
    for image in files:
        if image.order_key == UNORDERED:
            unordered_position += 1
            names.append(f"{UNORDERED_PREFIX}{unordered_position:03d}{image.extension}")
        else:
            names.append(f"{int(image.order_key):03d}{image.extension}")
    return names
