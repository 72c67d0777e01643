from pathlib import Path

import pytest

from bendiff.model import ChangedFile, ChangeKind, RepoStatus


def test_changed_file_defaults_to_unknown_without_rename():
    changed = ChangedFile("src/main.cpp")
    assert changed.kind is ChangeKind.UNKNOWN
    assert changed.rename_from is None
    assert changed.repo_relative_path == "src/main.cpp"


def test_changed_file_rename_keeps_both_paths():
    changed = ChangedFile("new/name.txt", ChangeKind.RENAMED, rename_from="old/name.txt")
    assert changed.repo_relative_path == "new/name.txt"
    assert changed.rename_from == "old/name.txt"
    assert changed.kind is ChangeKind.RENAMED


def test_changed_files_compare_by_value():
    first = ChangedFile("a.txt", ChangeKind.MODIFIED)
    second = ChangedFile("a.txt", ChangeKind.MODIFIED)
    third = ChangedFile("a.txt", ChangeKind.ADDED)
    assert first == second
    assert (first == third) is False


def test_repo_status_instances_do_not_share_file_lists():
    one = RepoStatus()
    two = RepoStatus()
    one.files.append(ChangedFile("x"))
    assert two.files == []
    assert len(one.files) == 1


def test_repo_status_holds_root_and_files():
    files = [ChangedFile("a", ChangeKind.ADDED), ChangedFile("b", ChangeKind.DELETED)]
    status = RepoStatus(Path("/repo"), files)
    assert status.repo_root == Path("/repo")
    assert [f.kind for f in status.files] == [ChangeKind.ADDED, ChangeKind.DELETED]


@pytest.mark.parametrize("kind", list(ChangeKind))
def test_changed_file_keeps_each_kind(kind):
    changed = ChangedFile("path.txt", kind)
    assert changed.kind is kind
    others = [ChangedFile("path.txt", other) for other in ChangeKind if other is not kind]
    assert all((changed == other) is False for other in others)


def test_changed_file_with_unmerged_kind_stored_in_status():
    status = RepoStatus(Path("/repo"), [ChangedFile("conflict.txt", ChangeKind.UNMERGED)])
    assert status.files[0].kind is ChangeKind.UNMERGED
    assert status.files[0].repo_relative_path == "conflict.txt"