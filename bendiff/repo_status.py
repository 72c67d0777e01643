"""Querying the working-tree status of a git repository."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from bendiff.model import RepoStatus
from bendiff.porcelain import parse_porcelain_v1
from bendiff.process import ProcessResult, run_process

STATUS_COMMAND = ("git", "status", "--porcelain=v1", "-z")


@dataclass
class RepoStatusResult:
    """Parsed status together with the git invocation that produced it."""

    status: RepoStatus = field(default_factory=RepoStatus)
    process: ProcessResult = field(default_factory=ProcessResult)


def _absolute(path: Path | str) -> Path:
    try:
        return Path(path).absolute()
    except OSError:
        return Path(path)


def run_git_status_porcelain_v1z(repo_root: Path | str) -> ProcessResult:
    """Run ``git status --porcelain=v1 -z`` inside ``repo_root``."""
    return run_process(list(STATUS_COMMAND), _absolute(repo_root))


def get_repo_status_with_diagnostics(repo_root: Path | str) -> RepoStatusResult:
    """Run git status and parse its output when git succeeds.

    The process result is always returned so failures can be reported.
    """
    root = _absolute(repo_root)
    process = run_git_status_porcelain_v1z(root)
    status = RepoStatus(repo_root=root)
    if process.exit_code == 0:
        status.files = parse_porcelain_v1(process.stdout_text, nul_separated=True)
    return RepoStatusResult(status=status, process=process)


def get_repo_status(repo_root: Path | str) -> RepoStatus:
    """Return the changed files of the repository at ``repo_root``."""
    return get_repo_status_with_diagnostics(_absolute(repo_root)).status