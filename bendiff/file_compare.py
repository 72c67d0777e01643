"""Bytewise comparison of two files."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

_CHUNK_SIZE = 64 * 1024


class FileCompareResult(Enum):
    """Outcome of comparing two files."""

    SAME = "same"
    DIFFERENT = "different"
    UNREADABLE = "unreadable"


def _size_or_none(path: Path) -> int | None:
    try:
        return os.path.getsize(path)
    except OSError:
        return None


def compare_files_bytewise(left: Path | str, right: Path | str) -> FileCompareResult:
    """Compare two files for bytewise equality.

    A file that cannot be opened or read gives UNREADABLE. Files of different
    sizes are DIFFERENT without reading them; otherwise the contents are
    compared in chunks.
    """
    left_path, right_path = Path(left), Path(right)
    try:
        with open(left_path, "rb") as a, open(right_path, "rb") as b:
            size_a = _size_or_none(left_path)
            size_b = _size_or_none(right_path)
            if size_a is not None and size_b is not None and size_a != size_b:
                return FileCompareResult.DIFFERENT

            while True:
                chunk_a = a.read(_CHUNK_SIZE)
                chunk_b = b.read(_CHUNK_SIZE)
                if chunk_a != chunk_b:
                    return FileCompareResult.DIFFERENT
                if not chunk_a:
                    return FileCompareResult.SAME
    except OSError:
        return FileCompareResult.UNREADABLE