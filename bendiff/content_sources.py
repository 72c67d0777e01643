"""Resolving where the two sides of a diff get their content."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from bendiff.model import ChangedFile, ChangeKind
from bendiff.process import ProcessResult, run_process


class ContentKind(Enum):
    """Where the content of a diff side comes from."""

    MISSING = "missing"
    FILE_ON_DISK = "file_on_disk"
    BYTES = "bytes"


@dataclass
class ContentSource:
    """Content of one diff side.

    ``absolute_path`` is set for files on disk and missing working-tree files;
    ``data`` and ``process`` are set for content produced by git.
    """

    kind: ContentKind = ContentKind.MISSING
    absolute_path: Path | None = None
    data: bytes = b""
    process: ProcessResult = field(default_factory=ProcessResult)


@dataclass
class ResolvedContentSides:
    """Content sources for the left and right side of a diff."""

    left: ContentSource = field(default_factory=ContentSource)
    right: ContentSource = field(default_factory=ContentSource)


def _absolute(path: Path | str) -> Path:
    try:
        return Path(path).absolute()
    except OSError:
        return Path(path)


def run_git_show_head_path(
    repo_root: Path | str, repo_relative_path: str
) -> ProcessResult:
    """Run ``git show HEAD:<repo_relative_path>`` inside ``repo_root``."""
    return run_process(["git", "show", f"HEAD:{repo_relative_path}"], _absolute(repo_root))


def resolve_folder_content(
    left_root: Path | str, right_root: Path | str, relative_path: str
) -> ResolvedContentSides:
    """Both sides are the same relative path under two roots on disk."""
    return ResolvedContentSides(
        left=ContentSource(ContentKind.FILE_ON_DISK, _absolute(left_root) / relative_path),
        right=ContentSource(ContentKind.FILE_ON_DISK, _absolute(right_root) / relative_path),
    )


def resolve_repo_content(repo_root: Path | str, file: ChangedFile) -> ResolvedContentSides:
    """Compare the committed version of ``file`` with its working-tree copy.

    Deleted files have no right side and added files no left side; a renamed
    file is read from HEAD under its old path.
    """
    root = _absolute(repo_root)
    right_kind = ContentKind.MISSING if file.kind is ChangeKind.DELETED else ContentKind.FILE_ON_DISK
    sides = ResolvedContentSides(
        right=ContentSource(right_kind, root / file.repo_relative_path)
    )

    if file.kind is ChangeKind.ADDED:
        return sides

    show_path = file.repo_relative_path
    if file.kind is ChangeKind.RENAMED and file.rename_from is not None:
        show_path = file.rename_from

    process = run_git_show_head_path(root, show_path)
    sides.left = ContentSource(ContentKind.BYTES, data=process.stdout, process=process)
    return sides