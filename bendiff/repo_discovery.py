"""Locating the root of a git repository."""

from __future__ import annotations

import os
from pathlib import Path


def find_git_repo_root(start_dir: Path | str) -> Path | None:
    """Walk up from ``start_dir`` (inclusive) to a directory holding ``.git``.

    A file start point begins the search at its directory. ``.git`` must be a
    directory; worktree ``.git`` files are not recognised.
    """
    if not os.fspath(start_dir):
        return None

    current = Path(start_dir)
    try:
        if current.is_file():
            current = current.parent
    except OSError:
        pass

    try:
        current = current.absolute()
    except OSError:
        pass

    for candidate in (current, *current.parents):
        try:
            if (candidate / ".git").is_dir():
                return candidate
        except OSError:
            continue
    return None