"""Comparison of two directory trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePosixPath

from bendiff.dir_walk import list_files_recursive
from bendiff.file_compare import FileCompareResult, compare_files_bytewise


class DirEntryStatus(Enum):
    """How a relative path compares between the two trees."""

    SAME = "same"
    DIFFERENT = "different"
    LEFT_ONLY = "left_only"
    RIGHT_ONLY = "right_only"
    UNREADABLE = "unreadable"


@dataclass
class DirEntry:
    """Status of one relative file path."""

    relative_path: str
    status: DirEntryStatus = DirEntryStatus.SAME
    is_binary_hint: bool = False


@dataclass
class DirDiffResult:
    """Entries for the union of files under both roots, sorted by path."""

    left_root: Path = field(default_factory=Path)
    right_root: Path = field(default_factory=Path)
    entries: list[DirEntry] = field(default_factory=list)


_STATUS_FOR_COMPARE = {
    FileCompareResult.SAME: DirEntryStatus.SAME,
    FileCompareResult.DIFFERENT: DirEntryStatus.DIFFERENT,
    FileCompareResult.UNREADABLE: DirEntryStatus.UNREADABLE,
}


def _absolute(path: Path | str) -> Path:
    try:
        return Path(path).absolute()
    except OSError:
        return Path(path)


def _full_path(root: Path, relative_path: str) -> Path:
    return root.joinpath(*PurePosixPath(relative_path).parts)


def _can_open_for_read(path: Path) -> bool:
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def diff_directories(left_root: Path | str, right_root: Path | str) -> DirDiffResult:
    """Classify every file found under either root.

    Files on both sides are compared bytewise; files on one side are
    LEFT_ONLY or RIGHT_ONLY, or UNREADABLE when they cannot be opened.
    Nothing is skipped by name.
    """
    result = DirDiffResult(left_root=_absolute(left_root), right_root=_absolute(right_root))

    left_files = set(list_files_recursive(result.left_root))
    right_files = set(list_files_recursive(result.right_root))

    for rel in sorted(left_files | right_files):
        in_left = rel in left_files
        in_right = rel in right_files
        if in_left and in_right:
            compared = compare_files_bytewise(
                _full_path(result.left_root, rel), _full_path(result.right_root, rel)
            )
            status = _STATUS_FOR_COMPARE[compared]
        elif in_left:
            readable = _can_open_for_read(_full_path(result.left_root, rel))
            status = DirEntryStatus.LEFT_ONLY if readable else DirEntryStatus.UNREADABLE
        else:
            readable = _can_open_for_read(_full_path(result.right_root, rel))
            status = DirEntryStatus.RIGHT_ONLY if readable else DirEntryStatus.UNREADABLE
        result.entries.append(DirEntry(relative_path=rel, status=status))

    return result