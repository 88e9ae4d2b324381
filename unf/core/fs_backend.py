"""
fs_backend.py - Filesystem Backends

Responsibilities:
- Capability interface used by the traversal (metadata, listing, rename)
- DiskFS: the real filesystem
- MemoryFS: an in-memory tree used to simulate a run (dry_run)

Both backends raise the same built-in OSError subclasses and list
directories in the same (sorted) order, so traversal code cannot tell
them apart.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import PurePath
from typing import Dict, List, Optional, Tuple
import errno
import logging
import os
import stat

logger = logging.getLogger(__name__)


def _os_error(code: int, path: str, cls=OSError) -> OSError:
    return cls(code, os.strerror(code), path)


@dataclass(frozen=True)
class EntryMetadata:
    """Metadata of an existing entry"""
    is_directory: bool

    @property
    def exists(self) -> bool:
        return True


class FileSystem(ABC):
    """Capabilities needed to unixize a path tree"""

    @abstractmethod
    def metadata(self, path: str) -> EntryMetadata:
        """Metadata of path, without following symlinks; FileNotFoundError if missing"""

    @abstractmethod
    def list_children(self, path: str) -> List[str]:
        """Sorted child names of a directory"""

    @abstractmethod
    def rename(self, src: str, dst: str) -> None:
        """Rename src to dst; never replaces an existing dst"""

    @abstractmethod
    def create_directory(self, path: str, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory"""

    @abstractmethod
    def create_file(self, path: str, exist_ok: bool = False) -> None:
        """Create an empty file"""

    def exists(self, path: str) -> bool:
        try:
            self.metadata(path)
        except FileNotFoundError:
            return False
        return True


class DiskFS(FileSystem):
    """The real filesystem"""

    def metadata(self, path: str) -> EntryMetadata:
        st = os.lstat(path)
        return EntryMetadata(is_directory=stat.S_ISDIR(st.st_mode))

    def list_children(self, path: str) -> List[str]:
        return sorted(os.listdir(path))

    def rename(self, src: str, dst: str) -> None:
        # os.rename silently replaces files on POSIX
        if not os.path.lexists(src):
            raise _os_error(errno.ENOENT, src, FileNotFoundError)
        if os.path.lexists(dst):
            raise _os_error(errno.EEXIST, dst, FileExistsError)
        logger.debug("disk rename %r -> %r", src, dst)
        os.rename(src, dst)

    def create_directory(self, path: str, parents: bool = False, exist_ok: bool = False) -> None:
        if parents:
            os.makedirs(path, exist_ok=exist_ok)
            return
        try:
            os.mkdir(path)
        except FileExistsError:
            if not (exist_ok and os.path.isdir(path)):
                raise

    def create_file(self, path: str, exist_ok: bool = False) -> None:
        with open(path, "a" if exist_ok else "x"):
            pass


class _Node:
    """Directory (children is a dict) or file (children is None)"""

    __slots__ = ("children",)

    def __init__(self, is_directory: bool):
        self.children: Optional[Dict[str, "_Node"]] = {} if is_directory else None

    @property
    def is_directory(self) -> bool:
        return self.children is not None


class MemoryFS(FileSystem):
    """
    In-memory filesystem tree

    Paths are resolved the way the disk would resolve them: relative paths
    against `cwd` (captured at construction), then normalized. Children are
    stored unordered and listed sorted.
    """

    def __init__(self, cwd: Optional[str] = None):
        self.cwd = os.path.abspath(cwd if cwd is not None else os.getcwd())
        # One root directory per anchor ("/" on POSIX, drives on Windows)
        self._roots: Dict[str, _Node] = {}

    def _parts(self, path: str) -> Tuple[str, Tuple[str, ...]]:
        full = os.path.normpath(os.path.join(self.cwd, os.fspath(path)))
        parts = PurePath(full).parts
        return parts[0], parts[1:]

    def _lookup(self, path: str) -> _Node:
        anchor, names = self._parts(path)
        node = self._roots.get(anchor)
        if node is None:
            raise _os_error(errno.ENOENT, path, FileNotFoundError)
        for name in names:
            if not node.is_directory:
                raise _os_error(errno.ENOTDIR, path, NotADirectoryError)
            child = node.children.get(name)
            if child is None:
                raise _os_error(errno.ENOENT, path, FileNotFoundError)
            node = child
        return node

    def _lookup_parent(self, path: str) -> Tuple[_Node, str]:
        anchor, names = self._parts(path)
        if not names:
            raise _os_error(errno.EBUSY, path)
        parent = self._roots.get(anchor)
        if parent is None:
            raise _os_error(errno.ENOENT, path, FileNotFoundError)
        for name in names[:-1]:
            if not parent.is_directory:
                raise _os_error(errno.ENOTDIR, path, NotADirectoryError)
            parent = parent.children.get(name)
            if parent is None:
                raise _os_error(errno.ENOENT, path, FileNotFoundError)
        if not parent.is_directory:
            raise _os_error(errno.ENOTDIR, path, NotADirectoryError)
        return parent, names[-1]

    def metadata(self, path: str) -> EntryMetadata:
        return EntryMetadata(is_directory=self._lookup(path).is_directory)

    def list_children(self, path: str) -> List[str]:
        node = self._lookup(path)
        if not node.is_directory:
            raise _os_error(errno.ENOTDIR, path, NotADirectoryError)
        return sorted(node.children)

    def rename(self, src: str, dst: str) -> None:
        src_parent, src_name = self._lookup_parent(src)
        node = src_parent.children.get(src_name)
        if node is None:
            raise _os_error(errno.ENOENT, src, FileNotFoundError)
        dst_parent, dst_name = self._lookup_parent(dst)
        if dst_name in dst_parent.children:
            raise _os_error(errno.EEXIST, dst, FileExistsError)

        # A directory cannot be moved below itself
        src_anchor, src_names = self._parts(src)
        dst_anchor, dst_names = self._parts(dst)
        if src_anchor == dst_anchor and dst_names[:len(src_names)] == src_names:
            raise _os_error(errno.EINVAL, dst)

        logger.debug("memory rename %r -> %r", src, dst)
        del src_parent.children[src_name]
        dst_parent.children[dst_name] = node

    def create_directory(self, path: str, parents: bool = False, exist_ok: bool = False) -> None:
        anchor, names = self._parts(path)
        if not names:
            if anchor in self._roots and not exist_ok:
                raise _os_error(errno.EEXIST, path, FileExistsError)
            self._roots.setdefault(anchor, _Node(is_directory=True))
            return

        if parents:
            node = self._roots.setdefault(anchor, _Node(is_directory=True))
            for name in names[:-1]:
                if not node.is_directory:
                    raise _os_error(errno.ENOTDIR, path, NotADirectoryError)
                node = node.children.setdefault(name, _Node(is_directory=True))
            if not node.is_directory:
                raise _os_error(errno.ENOTDIR, path, NotADirectoryError)
            parent, name = node, names[-1]
        else:
            parent, name = self._lookup_parent(path)

        existing = parent.children.get(name)
        if existing is not None:
            if exist_ok and existing.is_directory:
                return
            raise _os_error(errno.EEXIST, path, FileExistsError)
        parent.children[name] = _Node(is_directory=True)

    def create_file(self, path: str, exist_ok: bool = False) -> None:
        parent, name = self._lookup_parent(path)
        existing = parent.children.get(name)
        if existing is not None:
            if existing.is_directory:
                raise _os_error(errno.EISDIR, path, IsADirectoryError)
            if exist_ok:
                return
            raise _os_error(errno.EEXIST, path, FileExistsError)
        parent.children[name] = _Node(is_directory=False)
