"""Data model for changed files in a repository."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class ChangeKind(Enum):
    """How a file changed relative to the committed state."""

    MODIFIED = "modified"
    ADDED = "added"
    DELETED = "deleted"
    RENAMED = "renamed"
    UNMERGED = "unmerged"
    UNKNOWN = "unknown"


@dataclass
class ChangedFile:
    """A single changed path; ``rename_from`` holds the old path of a rename."""

    repo_relative_path: str
    kind: ChangeKind = ChangeKind.UNKNOWN
    rename_from: str | None = None


@dataclass
class RepoStatus:
    """The changed files of a repository rooted at ``repo_root``."""

    repo_root: Path = field(default_factory=Path)
    files: list[ChangedFile] = field(default_factory=list)