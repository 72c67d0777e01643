from bendiff.dir_diff import DirEntryStatus, diff_directories


def _write(root, rel, data):
    target = root / rel
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(data)


def _statuses(result):
    return {entry.relative_path: entry.status for entry in result.entries}


def test_classifies_all_kinds(tmp_path):
    left = tmp_path / "left"
    right = tmp_path / "right"
    _write(left, "same.txt", b"same")
    _write(right, "same.txt", b"same")
    _write(left, "diff.txt", b"one")
    _write(right, "diff.txt", b"two")
    _write(left, "only_left.txt", b"l")
    _write(right, "sub/only_right.txt", b"r")

    result = diff_directories(left, right)
    assert _statuses(result) == {
        "same.txt": DirEntryStatus.SAME,
        "diff.txt": DirEntryStatus.DIFFERENT,
        "only_left.txt": DirEntryStatus.LEFT_ONLY,
        "sub/only_right.txt": DirEntryStatus.RIGHT_ONLY,
    }


def test_entries_sorted_by_relative_path(tmp_path):
    left = tmp_path / "left"
    right = tmp_path / "right"
    for rel in ["b.txt", "a/z.txt", "c.txt"]:
        _write(left, rel, b"x")
    for rel in ["a.txt", "b.txt"]:
        _write(right, rel, b"x")

    paths = [e.relative_path for e in diff_directories(left, right).entries]
    assert paths == sorted(paths)
    assert set(paths) == {"a.txt", "a/z.txt", "b.txt", "c.txt"}


def test_roots_are_made_absolute(tmp_path, monkeypatch):
    (tmp_path / "l").mkdir()
    (tmp_path / "r").mkdir()
    monkeypatch.chdir(tmp_path)
    result = diff_directories("l", "r")
    assert result.left_root == tmp_path / "l"
    assert result.right_root == tmp_path / "r"
    assert result.entries == []


def test_missing_side_makes_everything_one_sided(tmp_path):
    left = tmp_path / "left"
    _write(left, "a.txt", b"a")
    _write(left, "b/c.txt", b"c")
    result = diff_directories(left, tmp_path / "absent")
    assert all(e.status is DirEntryStatus.LEFT_ONLY for e in result.entries)
    assert len(result.entries) == 2


def test_dot_git_is_not_ignored(tmp_path):
    left = tmp_path / "left"
    right = tmp_path / "right"
    _write(left, ".git/HEAD", b"ref")
    right.mkdir()
    assert _statuses(diff_directories(left, right)) == {".git/HEAD": DirEntryStatus.LEFT_ONLY}


def test_binary_hint_defaults_false(tmp_path):
    left = tmp_path / "left"
    right = tmp_path / "right"
    _write(left, "bin", b"\x00\x01")
    _write(right, "bin", b"\x00\x01")
    entries = diff_directories(left, right).entries
    assert [(e.status, e.is_binary_hint) for e in entries] == [(DirEntryStatus.SAME, False)]


def test_identical_trees_are_all_same(tmp_path):
    left = tmp_path / "left"
    right = tmp_path / "right"
    for rel in ["x", "y/z", "y/w/v"]:
        _write(left, rel, rel.encode())
        _write(right, rel, rel.encode())
    result = diff_directories(left, right)
    assert len(result.entries) == 3
    assert {e.status for e in result.entries} == {DirEntryStatus.SAME}