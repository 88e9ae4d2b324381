"""
plan_rename.py - Collision Resolution Module

Responsibilities:
- Find the next free name for a rename target (adds _000, _001, ...)
- Never overwrite, never reuse a lower counter
"""

from typing import Callable
import logging
import os

from .models_fs import FilenameParts
from .fs_backend import FileSystem

logger = logging.getLogger(__name__)


def split_path(path: str):
    """
    Split path into (directory part, basename)

    Trailing separators are ignored, so "My Files/" has the basename
    "My Files". The directory part is kept as given ("" for a bare name).
    """
    stripped = path.rstrip(os.sep)
    if os.altsep:
        stripped = stripped.rstrip(os.altsep)
    if not stripped:
        # Filesystem root
        return path, ""
    return os.path.split(stripped)


def resolve_name(directory: str, name: str, exists: Callable[[str], bool]) -> str:
    """
    Resolve conflict, return a path in directory that does not exist

    While the candidate is taken, its counter is bumped (previous + 1, or
    0 when absent). Counters only grow, so the loop ends after at most one
    step per existing colliding entry.

    Args:
        directory: Directory part of the target ("" for the current directory)
        name: Desired filename, may be empty
        exists: Existence check

    Returns:
        First free path in the candidate sequence
    """
    candidate = os.path.join(directory, name)
    # An empty name can never be created; count it as taken
    while not name or exists(candidate):
        parts = FilenameParts.from_filename(name) if name else FilenameParts(stem="")
        name = parts.bumped().merge()
        candidate = os.path.join(directory, name)
        logger.debug("collision, trying %r", candidate)
    return candidate


def resolve_collision(candidate: str, exists: Callable[[str], bool]) -> str:
    """Resolve conflict for a full candidate path"""
    directory, name = split_path(candidate)
    return resolve_name(directory, name, exists)


class ConflictResolver:
    """Conflict resolver backed by a filesystem"""

    def __init__(self, fs: FileSystem):
        self.fs = fs

    def is_occupied(self, path: str) -> bool:
        """Check if path is already taken"""
        return self.fs.exists(path)

    def resolve(self, candidate: str) -> str:
        return resolve_collision(candidate, self.is_occupied)

    def resolve_rename(self, src: str, new_name: str) -> str:
        """
        Collision-free target for renaming src to new_name

        Args:
            src: Source path (display form)
            new_name: Desired basename

        Returns:
            Target path (display form)
        """
        directory, _ = split_path(src)
        return resolve_name(directory, new_name, self.is_occupied)
