"""Recursive listing of the files in a directory tree."""

from __future__ import annotations

import os
from pathlib import Path, PurePath


def list_files_recursive(root: Path | str) -> list[str]:
    """List every regular file under ``root`` as a '/'-separated relative path.

    Nothing is skipped by name (``.git`` included); directories that cannot be
    read are passed over silently. A missing or non-directory root gives an
    empty list. Paths are returned in sorted order.
    """
    if not os.fspath(root):
        return []

    base = Path(root)
    try:
        if not base.is_dir():
            return []
    except OSError:
        return []

    try:
        base = base.absolute()
    except OSError:
        pass

    results: list[str] = []
    for dirpath, _dirnames, filenames in os.walk(base):
        for name in filenames:
            full = os.path.join(dirpath, name)
            try:
                if not os.path.isfile(full):
                    continue
                rel = os.path.relpath(full, base)
            except (OSError, ValueError):
                continue
            rel_str = PurePath(rel).as_posix()
            if rel_str and rel_str != ".":
                results.append(rel_str)

    results.sort()
    return results