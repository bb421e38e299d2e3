from __future__ import annotations

import os

from .models import RenamePlanEntry

INVALID_FILENAME_CHARS = set('/\\:*?"<>|')
TEMPORARY_PREFIX = ".reorder-tmp-"
COLLISION_SEPARATOR = "-"


def sanitize_filename(name: str) -> str:
    """
    Turn a client-supplied upload name into a single safe path component.

    Path separators and control characters are dropped so the name cannot
    leave the image root, and leading dots are removed so uploads never
    become hidden files or `..`.

    Examples:
        >>> sanitize_filename("  a/b  ")
        'ab'
        >>> sanitize_filename("../../etc/passwd")
        'etcpasswd'
        >>> sanitize_filename("   ")
        'UNNAMED'
    """
    kept = [
        ch
        for ch in name
        if ch not in INVALID_FILENAME_CHARS and ord(ch) >= 32 and ord(ch) != 127
    ]
    normalized = " ".join("".join(kept).split()).lstrip(".")
    return normalized if normalized else "UNNAMED"


def resolve_collisions(names: list[str], existing_names: set[str]) -> list[str]:
    """
    Make reorder target names unique within the directory.

    Two sources can share a key (`1_a.png`, `01_b.png`) or a target can match
    an entry that is not being renamed. Later names get a `-NN` suffix, which
    the order-key pattern does not read as a prefix, so a suffixed file stays
    unordered on the next reorder. Names are compared case-insensitively since
    `001.png` and `001.PNG` are the same file on macOS and Windows.

    Example:
        resolve_collisions(["001.png", "001.PNG"], {"notes.txt"})
        # ['001.png', '001-01.PNG']
    """
    taken = {_name_key(name) for name in existing_names}
    resolved: list[str] = []
    for name in names:
        candidate = name if _name_key(name) not in taken else next_available_name(name, taken)
        taken.add(_name_key(candidate))
        resolved.append(candidate)
    return resolved


def next_available_name(name: str, taken: set[str]) -> str:
    """`taken` holds casefolded names."""
    base, ext = os.path.splitext(name)
    counter = 1
    while True:
        candidate = f"{base}{COLLISION_SEPARATOR}{counter:02d}{ext}"
        if _name_key(candidate) not in taken:
            return candidate
        counter += 1


def build_rename_plan(
    renames: list[tuple[str, str]], existing_names: set[str]
) -> list[RenamePlanEntry]:
    """
    Pair every (source, final) rename with a temporary name.

    Temporary names come from a monotonic counter scoped to the directory and
    skip anything already present, any source and any final name (ignoring
    case), so neither phase of the rename can land on a file that is still
    pending.

    Example:
        build_rename_plan([("2.png", "1.png"), ("1.png", "2.png")], {"1.png", "2.png"})
        # [RenamePlanEntry('2.png', '.reorder-tmp-0001.png', '1.png'),
        #  RenamePlanEntry('1.png', '.reorder-tmp-0002.png', '2.png')]
    """
    reserved = {_name_key(name) for name in existing_names}
    reserved.update(_name_key(source) for source, _ in renames)
    reserved.update(_name_key(final) for _, final in renames)

    plan: list[RenamePlanEntry] = []
    counter = 0
    for source, final in renames:
        ext = os.path.splitext(source)[1]
        while True:
            counter += 1
            temporary = f"{TEMPORARY_PREFIX}{counter:04d}{ext}"
            if _name_key(temporary) not in reserved:
                break
        reserved.add(_name_key(temporary))
        plan.append(RenamePlanEntry(source_name=source, temporary_name=temporary, final_name=final))
    return plan


def _name_key(name: str) -> str:
    return name.casefold()
