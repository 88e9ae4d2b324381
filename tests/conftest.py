"""
Shared fixtures for the unf test suite.

Trees are described as lists of relative paths; a path whose last
component contains a dot is a file, anything else is a directory.
"""

import os
import sys
from pathlib import Path

# Add project root to sys.path so 'unf' can be imported without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest


def build_tree(root: Path, paths):
    for rel in paths:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if "." in path.name:
            path.touch()
        else:
            path.mkdir(exist_ok=True)


def walk_tree(root: Path):
    """All paths below root, relative, as a sorted list of strings"""
    found = []
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            found.append(os.path.relpath(os.path.join(dirpath, name), root))
    return sorted(found)


@pytest.fixture
def make_tree(tmp_path, monkeypatch):
    """Build a tree under tmp_path and make it the working directory"""
    def _make(paths):
        build_tree(tmp_path, paths)
        monkeypatch.chdir(tmp_path)
        return tmp_path
    return _make


@pytest.fixture
def tree_paths():
    return walk_tree


MY_FILES_TREE = [
    "My Folder",
    "My Files",
    "My Files/Passwords :) .txt",
    "My Files/Another Cool Photo.JPG",
    "My Files/Wow Cool Photo.JPG",
    "My Files/Cool Photo.JPG",
]


@pytest.fixture
def my_files_tree(make_tree):
    return make_tree(MY_FILES_TREE)
