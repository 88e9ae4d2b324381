"""Tests for the traversal that renames path trees.

Covers forced, simulated (dry run) and interactive runs on the disk and
on in-memory snapshots.
"""

import os

import pytest

from unf.core.exec_rename import Unixizer, basename_of, unixize
from unf.core.fs_backend import DiskFS
from unf.core.models_fs import UnixizeOptions
from unf.core.safety_checks import InvalidFilenameError
from unf.core.scan_files import load_snapshot

FORCE_RECURSIVE = UnixizeOptions(recursive=True, force=True)
DRY_RUN_RECURSIVE = UnixizeOptions(recursive=True, dry_run=True)

MY_FILES_RENAMES = [
    ("My Files/Another Cool Photo.JPG", "My Files/Another_Cool_Photo.JPG"),
    ("My Files/Cool Photo.JPG", "My Files/Cool_Photo.JPG"),
    ("My Files/Passwords :) .txt", "My Files/Passwords.txt"),
    ("My Files/Wow Cool Photo.JPG", "My Files/Wow_Cool_Photo.JPG"),
    ("My Files/", "My_Files"),
    ("My Folder", "My_Folder"),
]


class Recorder:
    """Collects report lines and answers questions from a script"""

    def __init__(self, answers=()):
        self.lines = []
        self.questions = []
        self.answers = list(answers)

    def report(self, line):
        self.lines.append(line)

    def confirm(self, question):
        self.questions.append(question)
        return self.answers.pop(0) if self.answers else False


class TestForcedRun:

    def test_recursive_renames_children_first(self, my_files_tree, tree_paths):
        rec = Recorder()
        result = unixize(["My Files/", "My Folder"], DiskFS(), FORCE_RECURSIVE, report=rec.report)

        assert rec.lines == [f"rename '{src}' -> '{dst}'" for src, dst in MY_FILES_RENAMES]
        assert [(op.src, op.dst) for op in result.renamed] == MY_FILES_RENAMES
        assert tree_paths(my_files_tree) == sorted([
            "My_Folder",
            "My_Files",
            os.path.join("My_Files", "Passwords.txt"),
            os.path.join("My_Files", "Another_Cool_Photo.JPG"),
            os.path.join("My_Files", "Wow_Cool_Photo.JPG"),
            os.path.join("My_Files", "Cool_Photo.JPG"),
        ])

    def test_emoji_name(self, make_tree, tree_paths):
        root = make_tree(["Game (Not Pirated 😉).rar"])
        rec = Recorder()
        unixize(["Game (Not Pirated 😉).rar"], DiskFS(), UnixizeOptions(force=True), report=rec.report)

        assert rec.lines == ["rename 'Game (Not Pirated 😉).rar' -> 'Game_Not_Pirated_wink.rar'"]
        assert tree_paths(root) == ["Game_Not_Pirated_wink.rar"]

    def test_collisions_get_increasing_counters(self, make_tree, tree_paths):
        names = [
            "--fake-flag.txt",
            "fake-flag.txt",
            "------fake-flag.txt",
            " fake-flag.txt",
            "\tfake-flag.txt",
        ]
        root = make_tree(names)
        rec = Recorder()
        result = unixize(names, DiskFS(), UnixizeOptions(force=True), report=rec.report)

        assert rec.lines == [
            "rename '--fake-flag.txt' -> 'fake-flag_000.txt'",
            "rename '------fake-flag.txt' -> 'fake-flag_001.txt'",
            "rename ' fake-flag.txt' -> 'fake-flag_002.txt'",
            "rename '\tfake-flag.txt' -> 'fake-flag_003.txt'",
        ]
        assert result.conflict_count == 4
        assert tree_paths(root) == [
            "fake-flag.txt",
            "fake-flag_000.txt",
            "fake-flag_001.txt",
            "fake-flag_002.txt",
            "fake-flag_003.txt",
        ]

    def test_not_recursive_leaves_children(self, my_files_tree, tree_paths):
        unixize(["My Files"], DiskFS(), UnixizeOptions(force=True), report=None)
        assert os.path.join("My_Files", "Cool Photo.JPG") in tree_paths(my_files_tree)

    def test_current_directory_is_not_renamed(self, make_tree, tree_paths):
        root = make_tree(["a b.txt"])
        rec = Recorder()
        unixize(["."], DiskFS(), FORCE_RECURSIVE, report=rec.report)
        assert rec.lines == ["rename './a b.txt' -> './a_b.txt'"]
        assert tree_paths(root) == ["a_b.txt"]

    def test_unchanged_names_are_not_reported(self, make_tree):
        make_tree(["fine", "fine/ok.txt"])
        rec = Recorder()
        result = unixize(["fine"], DiskFS(), FORCE_RECURSIVE, report=rec.report)
        assert rec.lines == []
        assert result.renamed == []

    def test_empty_transliteration_gets_counter_name(self, make_tree, tree_paths):
        root = make_tree(["()"])
        rec = Recorder()
        unixize(["()"], DiskFS(), UnixizeOptions(force=True), report=rec.report)
        assert rec.lines == ["rename '()' -> '_000'"]
        assert tree_paths(root) == ["_000"]

    def test_dot_transliteration_does_not_clash_with_directory(self, make_tree, tree_paths):
        root = make_tree(["d", "d/(.)"])
        # "(.)" contains a dot, so the fixture made it a file
        unixize(["d/(.)"], DiskFS(), UnixizeOptions(force=True), report=None)
        assert tree_paths(root) == ["d", os.path.join("d", "_000.")]

    def test_quiet_run_reports_nothing(self, my_files_tree):
        rec = Recorder()
        options = UnixizeOptions(recursive=True, force=True, quiet=True)
        result = unixize(["My Files/"], DiskFS(), options, report=rec.report)
        assert rec.lines == []
        assert result.renamed_count == 5


class TestDryRun:

    def test_same_lines_as_real_run_and_disk_untouched(self, my_files_tree, tree_paths):
        before = tree_paths(my_files_tree)
        paths = ["My Files/", "My Folder"]

        dry = Recorder()
        unixize(paths, load_snapshot(paths), DRY_RUN_RECURSIVE, report=dry.report)
        assert tree_paths(my_files_tree) == before

        real = Recorder()
        unixize(paths, DiskFS(), FORCE_RECURSIVE, report=real.report)

        assert dry.lines == ["would " + line for line in real.lines]
        assert len(dry.lines) == len(MY_FILES_RENAMES)

    def test_simulated_collisions_match_real_ones(self, make_tree):
        names = ["a b.txt", "a  b.txt", "a_b.txt", "a (b).txt"]
        make_tree(names)

        dry = Recorder()
        unixize(names, load_snapshot(names), UnixizeOptions(dry_run=True), report=dry.report)
        real = Recorder()
        unixize(names, DiskFS(), UnixizeOptions(force=True), report=real.report)

        assert dry.lines == ["would " + line for line in real.lines]
        assert real.lines[-1] == "rename 'a (b).txt' -> 'a_b_002.txt'"

    def test_dry_run_refuses_the_disk(self):
        with pytest.raises(ValueError):
            Unixizer(DiskFS(), UnixizeOptions(dry_run=True))

    def test_simulated_renames_stay_in_snapshot(self, make_tree, tree_paths):
        names = ["a b.txt", "a  b.txt"]
        root = make_tree(names)
        fs = load_snapshot(names)
        unixize(names, fs, UnixizeOptions(dry_run=True), report=None)

        assert fs.list_children(".") == ["a_b.txt", "a_b_000.txt"]
        assert tree_paths(root) == ["a  b.txt", "a b.txt"]

    def test_dry_run_never_asks(self, my_files_tree):
        rec = Recorder()
        paths = ["My Files"]
        unixize(paths, load_snapshot(paths), DRY_RUN_RECURSIVE, confirm=rec.confirm, report=rec.report)
        assert rec.questions == []
        assert len(rec.lines) == 5


class TestInteractiveRun:

    def test_declining_descent_still_offers_rename(self, my_files_tree, tree_paths):
        rec = Recorder(answers=[False, True])
        options = UnixizeOptions(recursive=True)
        result = unixize(["My Files"], DiskFS(), options, confirm=rec.confirm, report=rec.report)

        assert rec.questions == [
            "descend into directory 'My Files'?",
            "rename 'My Files' -> 'My_Files'?",
        ]
        assert rec.lines == []
        assert result.renamed_count == 1
        assert os.path.join("My_Files", "Cool Photo.JPG") in tree_paths(my_files_tree)

    def test_declined_renames_are_skipped(self, my_files_tree, tree_paths):
        # descend, then: yes, no, no, yes for the files, no for the directory
        rec = Recorder(answers=[True, True, False, False, True, False])
        options = UnixizeOptions(recursive=True)
        result = unixize(["My Files"], DiskFS(), options, confirm=rec.confirm)

        assert rec.questions[0] == "descend into directory 'My Files'?"
        assert rec.questions[1] == "rename 'My Files/Another Cool Photo.JPG' -> 'My Files/Another_Cool_Photo.JPG'?"
        assert result.renamed_count == 2
        assert result.skipped_count == 3
        assert tree_paths(my_files_tree) == sorted([
            "My Folder",
            "My Files",
            os.path.join("My Files", "Another_Cool_Photo.JPG"),
            os.path.join("My Files", "Cool Photo.JPG"),
            os.path.join("My Files", "Passwords :) .txt"),
            os.path.join("My Files", "Wow_Cool_Photo.JPG"),
        ])

    def test_default_answer_is_no(self, my_files_tree, tree_paths):
        before = tree_paths(my_files_tree)
        unixize(["My Files", "My Folder"], DiskFS(), UnixizeOptions(recursive=True))
        assert tree_paths(my_files_tree) == before


class TestFailures:

    def test_missing_path_aborts_run(self, make_tree, tree_paths):
        root = make_tree(["a b.txt"])
        with pytest.raises(FileNotFoundError):
            unixize(["missing file", "a b.txt"], DiskFS(), UnixizeOptions(force=True), report=None)
        assert tree_paths(root) == ["a b.txt"]

    def test_error_stops_remaining_siblings(self, make_tree, tree_paths):
        root = make_tree(["a b.txt", "c d.txt"])
        rec = Recorder()
        with pytest.raises(FileNotFoundError):
            unixize(["a b.txt", "gone", "c d.txt"], DiskFS(), UnixizeOptions(force=True), report=rec.report)
        assert rec.lines == ["rename 'a b.txt' -> 'a_b.txt'"]
        assert tree_paths(root) == ["a_b.txt", "c d.txt"]

    def test_non_utf8_name_is_fatal(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        name = os.fsdecode(b"bad\xff name.txt")
        try:
            open(name, "w").close()
        except (OSError, UnicodeError):
            pytest.skip("filesystem does not accept non-UTF-8 names")
        with pytest.raises(InvalidFilenameError):
            unixize([name], DiskFS(), UnixizeOptions(force=True), report=None)


def test_basename_of():
    assert basename_of("My Files/") == "My Files"
    assert basename_of("a/b.txt") == "b.txt"
    assert basename_of(".") is None
    assert basename_of("..") is None
    assert basename_of("a/..") is None
    assert basename_of("/") is None


def test_unixizer_accumulates_across_runs(make_tree):
    make_tree(["a b.txt", "c d.txt"])
    unixizer = Unixizer(DiskFS(), UnixizeOptions(force=True), report=None)
    unixizer.visit("a b.txt")
    result = unixizer.run(["c d.txt"])
    assert [op.dst for op in result.renamed] == ["a_b.txt", "c_d.txt"]
