"""Tests for loading parts of the disk into an in-memory snapshot."""

import os

import pytest

from unf.core.scan_files import load_snapshot


def test_load_snapshot_copies_paths_and_ancestors_only(make_tree):
    root = make_tree([
        "a",
        "a/b.txt",
        "c.txt",
        "foo",
        "foo/bar.txt",
        "foo/baz",
        "foo/baz/a.txt",
    ])

    fs = load_snapshot(["a", "foo/baz"])

    assert fs.exists(str(root / "a"))
    assert fs.exists(str(root / "a" / "b.txt"))
    assert fs.exists(str(root / "foo" / "baz"))
    assert fs.exists(str(root / "foo" / "baz" / "a.txt"))

    assert not fs.exists(str(root / "c.txt"))
    assert not fs.exists(str(root / "foo" / "bar.txt"))

    # Ancestors are empty shells apart from the loaded path
    assert fs.list_children(str(root / "foo")) == ["baz"]
    assert fs.list_children(str(root.parent)) == [root.name]


def test_load_snapshot_relative_lookups(make_tree):
    make_tree(["d", "d/x.txt"])
    fs = load_snapshot(["d"])
    assert fs.list_children("d") == ["x.txt"]
    assert fs.list_children("./d/") == ["x.txt"]


def test_load_snapshot_overlapping_paths(make_tree):
    make_tree(["d", "d/e", "d/e/x.txt"])
    fs = load_snapshot(["d", "d/e", "d/e/x.txt"])
    assert fs.list_children("d/e") == ["x.txt"]


def test_load_snapshot_does_not_touch_disk(make_tree, tree_paths):
    root = make_tree(["d", "d/x y.txt"])
    fs = load_snapshot(["d"])
    fs.rename("d/x y.txt", "d/x_y.txt")
    assert tree_paths(root) == ["d", os.path.join("d", "x y.txt")]


def test_load_snapshot_missing_path(make_tree):
    make_tree(["d"])
    with pytest.raises(FileNotFoundError):
        load_snapshot(["missing"])


def test_load_snapshot_explicit_cwd(tmp_path):
    (tmp_path / "d").mkdir()
    (tmp_path / "d" / "x.txt").touch()
    fs = load_snapshot(["d"], cwd=str(tmp_path))
    assert fs.cwd == str(tmp_path)
    assert fs.exists("d/x.txt")
