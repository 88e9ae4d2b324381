"""
scan_files.py - Filesystem Snapshot Module

Copies the parts of the disk referenced by the input paths into a
MemoryFS, so a run can be simulated without touching the disk
"""

from pathlib import Path
from typing import Iterable, Optional
import logging
import os

from .fs_backend import DiskFS, FileSystem, MemoryFS

logger = logging.getLogger(__name__)


def _copy_tree(source: FileSystem, target: MemoryFS, path: str) -> int:
    """
    Copy path and all of its children from source into target

    Returns:
        Number of entries copied
    """
    if source.metadata(path).is_directory:
        target.create_directory(path, exist_ok=True)
        count = 1
        for name in source.list_children(path):
            count += _copy_tree(source, target, os.path.join(path, name))
        return count

    target.create_file(path, exist_ok=True)
    return 1


def load_snapshot(
    paths: Iterable[str],
    cwd: Optional[str] = None,
    source: Optional[FileSystem] = None
) -> MemoryFS:
    """
    Load the parts of the disk referenced by paths into a new MemoryFS

    Each path is made absolute; all of its ancestors are created as empty
    directories and the path itself is copied with all of its children.
    Siblings of the ancestors are not copied.

    Example: with cwd /tmp holding a/b, c, foo/bar and foo/baz/a, loading
    ["a", "foo/baz"] yields /tmp/a, /tmp/a/b, /tmp/foo, /tmp/foo/baz and
    /tmp/foo/baz/a, but neither /tmp/c nor /tmp/foo/bar.

    Args:
        paths: Input paths (relative to cwd or absolute)
        cwd: Working directory (defaults to the process working directory)
        source: Filesystem to copy from (defaults to the disk)

    Returns:
        In-memory filesystem
    """
    cwd = os.path.abspath(cwd if cwd is not None else os.getcwd())
    source = source or DiskFS()
    fs = MemoryFS(cwd=cwd)

    for path in paths:
        full = os.path.normpath(os.path.join(cwd, os.fspath(path)))

        # Create all parents of the absolute path
        parent = str(Path(full).parent)
        fs.create_directory(parent, parents=True, exist_ok=True)

        count = _copy_tree(source, fs, full)
        logger.debug("snapshot of %r: %d entries", full, count)

    return fs
