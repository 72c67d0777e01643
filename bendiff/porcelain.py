"""Parsing of ``git status --porcelain=v1`` output."""

from __future__ import annotations

from collections import deque

from bendiff.model import ChangedFile, ChangeKind

_RENAME_ARROW = " -> "


def _split_fields(text: str, delim: str) -> list[str]:
    fields = text.split(delim)
    if text.endswith(delim):
        fields.pop()
        if fields and not fields[-1]:
            fields.pop()
    return fields


def _ltrim(text: str) -> str:
    return text.lstrip(" \t")


def _is_ignored(x: str, y: str) -> bool:
    return x == "!" and y == "!"


def _is_untracked(x: str, y: str) -> bool:
    return x == "?" and y == "?"


def _is_submodule(x: str, y: str) -> bool:
    return x == "S" or y == "S"


def _is_skipped(x: str, y: str) -> bool:
    return _is_ignored(x, y) or _is_submodule(x, y)


def _is_unmerged(x: str, y: str) -> bool:
    return "U" in (x, y) or (x == y and x in "AD")


def _classify(x: str, y: str) -> ChangeKind:
    if _is_unmerged(x, y):
        return ChangeKind.UNMERGED
    if "R" in (x, y):
        return ChangeKind.RENAMED
    if "D" in (x, y):
        return ChangeKind.DELETED
    if _is_untracked(x, y) or "A" in (x, y):
        return ChangeKind.ADDED
    if "M" in (x, y):
        return ChangeKind.MODIFIED
    return ChangeKind.UNKNOWN


def _parse_xy_path(record: str) -> ChangedFile | None:
    if len(record) < 3:
        return None
    x, y = record[0], record[1]
    if _is_skipped(x, y):
        return None
    rest = _ltrim(record[2:])
    if not rest:
        return None
    return ChangedFile(rest, _classify(x, y))


def _parse_nul_separated(text: str) -> list[ChangedFile]:
    out: list[ChangedFile] = []
    records = deque(_split_fields(text, "\0"))

    while records:
        record = records.popleft()
        if not record:
            continue

        if len(record) >= 2:
            x, y = record[0], record[1]
            if _is_skipped(x, y):
                continue
            if _classify(x, y) is ChangeKind.RENAMED:
                old_path = _ltrim(record[2:])
                if not old_path or not records or not records[0]:
                    continue
                new_path = records.popleft()
                out.append(ChangedFile(new_path, ChangeKind.RENAMED, old_path))
                continue

        parsed = _parse_xy_path(record)
        if parsed is not None:
            out.append(parsed)

    return out


def _parse_line_separated(text: str) -> list[ChangedFile]:
    out: list[ChangedFile] = []

    for line in _split_fields(text, "\n"):
        if line.endswith("\r"):
            line = line[:-1]
        if len(line) < 3:
            continue
        x, y = line[0], line[1]
        if _is_skipped(x, y):
            continue

        kind = _classify(x, y)
        rest = _ltrim(line[2:])
        if not rest:
            continue

        if kind is ChangeKind.RENAMED:
            old_path, arrow, new_path = rest.partition(_RENAME_ARROW)
            if not arrow or not old_path or not new_path:
                continue
            out.append(ChangedFile(new_path, ChangeKind.RENAMED, old_path))
            continue

        out.append(ChangedFile(rest, kind))

    return out


def parse_porcelain_v1(text: str, nul_separated: bool) -> list[ChangedFile]:
    """Parse porcelain v1 status output into changed files.

    With ``nul_separated`` the ``-z`` form is expected, where a rename is
    followed by a second field holding the new path. Ignored entries and
    submodules (status ``S``) are left out; renames set ``rename_from``.
    """
    if not text:
        return []
    if nul_separated:
        return _parse_nul_separated(text)
    return _parse_line_separated(text)