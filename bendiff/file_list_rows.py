"""Grouping changed files into rows for a file list."""

from __future__ import annotations

import posixpath
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from bendiff.model import ChangedFile

ROOT_HEADER = "(root)"


class FileListRowKind(Enum):
    """Whether a row is a group header or a file."""

    HEADER = "header"
    FILE = "file"


@dataclass
class FileListRow:
    """One row of the file list; ``group_key`` is "" for top-level files."""

    kind: FileListRowKind = FileListRowKind.FILE
    display_text: str = ""
    file: ChangedFile | None = None
    group_key: str = ""
    selectable: bool = True


def _group_key(path: str) -> str:
    if not path:
        return ""
    parent = posixpath.dirname(posixpath.normpath(path))
    return "" if parent in ("", ".") else parent


def build_grouped_file_list_rows(files: Iterable[ChangedFile]) -> list[FileListRow]:
    """Group files by directory into a flat list of header and file rows.

    Groups are sorted by directory and files within a group by path; each
    group starts with a non-selectable header row.
    """
    groups: defaultdict[str, list[ChangedFile]] = defaultdict(list)
    for changed in files:
        groups[_group_key(changed.repo_relative_path)].append(changed)

    rows: list[FileListRow] = []
    for key in sorted(groups):
        rows.append(
            FileListRow(
                kind=FileListRowKind.HEADER,
                display_text=key or ROOT_HEADER,
                file=None,
                group_key=key,
                selectable=False,
            )
        )
        for changed in sorted(groups[key], key=lambda f: f.repo_relative_path):
            rows.append(
                FileListRow(
                    kind=FileListRowKind.FILE,
                    display_text=changed.repo_relative_path,
                    file=changed,
                    group_key=key,
                    selectable=True,
                )
            )
    return rows