import subprocess
from unittest import mock

from bendiff.content_sources import (
    ContentKind,
    ContentSource,
    resolve_folder_content,
    resolve_repo_content,
    run_git_show_head_path,
)
from bendiff.model import ChangedFile, ChangeKind


def _completed(returncode, stdout=b"", stderr=b""):
    return subprocess.CompletedProcess(
        args=[], returncode=returncode, stdout=stdout, stderr=stderr
    )


def test_folder_content_joins_roots(tmp_path):
    left = tmp_path / "left"
    right = tmp_path / "right"
    sides = resolve_folder_content(left, right, "dir/file.txt")
    assert sides.left.kind is ContentKind.FILE_ON_DISK
    assert sides.right.kind is ContentKind.FILE_ON_DISK
    assert sides.left.absolute_path == left.absolute() / "dir" / "file.txt"
    assert sides.right.absolute_path == right.absolute() / "dir" / "file.txt"


def test_folder_content_relative_roots_become_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    sides = resolve_folder_content("a", "b", "x.txt")
    assert sides.left.absolute_path == tmp_path.absolute() / "a" / "x.txt"
    assert sides.right.absolute_path.is_absolute()


def test_added_file_has_missing_left_and_runs_nothing(tmp_path):
    with mock.patch("subprocess.run") as run:
        sides = resolve_repo_content(tmp_path, ChangedFile("new.txt", ChangeKind.ADDED))
    assert run.call_count == 0
    assert sides.left == ContentSource()
    assert sides.right.kind is ContentKind.FILE_ON_DISK
    assert sides.right.absolute_path == tmp_path.absolute() / "new.txt"


def test_modified_file_reads_head(tmp_path):
    with mock.patch("subprocess.run", return_value=_completed(0, b"old\n")) as run:
        sides = resolve_repo_content(tmp_path, ChangedFile("src/a.txt", ChangeKind.MODIFIED))
    assert run.call_args[0][0] == ["git", "show", "HEAD:src/a.txt"]
    assert sides.left.kind is ContentKind.BYTES
    assert sides.left.data == b"old\n"
    assert sides.left.process.exit_code == 0
    assert sides.right.kind is ContentKind.FILE_ON_DISK


def test_deleted_file_has_missing_right(tmp_path):
    with mock.patch("subprocess.run", return_value=_completed(0, b"gone")):
        sides = resolve_repo_content(tmp_path, ChangedFile("gone.txt", ChangeKind.DELETED))
    assert sides.right.kind is ContentKind.MISSING
    assert sides.right.absolute_path == tmp_path.absolute() / "gone.txt"
    assert sides.left.data == b"gone"


def test_renamed_file_reads_old_path(tmp_path):
    changed = ChangedFile("new.txt", ChangeKind.RENAMED, "old.txt")
    with mock.patch("subprocess.run", return_value=_completed(0, b"body")) as run:
        sides = resolve_repo_content(tmp_path, changed)
    assert run.call_args[0][0] == ["git", "show", "HEAD:old.txt"]
    assert sides.right.absolute_path == tmp_path.absolute() / "new.txt"


def test_git_failure_is_kept_in_process(tmp_path):
    completed = _completed(128, b"", b"fatal: bad revision")
    with mock.patch("subprocess.run", return_value=completed):
        sides = resolve_repo_content(tmp_path, ChangedFile("a.txt", ChangeKind.MODIFIED))
    assert sides.left.kind is ContentKind.BYTES
    assert sides.left.data == b""
    assert sides.left.process.exit_code == 128
    assert "bad revision" in sides.left.process.stderr


def test_run_git_show_uses_repo_root_as_cwd(tmp_path):
    with mock.patch("subprocess.run", return_value=_completed(0, b"x")) as run:
        result = run_git_show_head_path(tmp_path, "a/b.txt")
    assert result.stdout == b"x"
    assert run.call_args[1]["cwd"] == str(tmp_path.absolute())