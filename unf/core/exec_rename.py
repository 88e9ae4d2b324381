"""
exec_rename.py - Traversal and Rename Execution Module

Responsibilities:
- Walk each input path, optionally descending into directories
- Compute unix-friendly names and collision-free targets
- Rename, simulate (dry_run) or ask before renaming
"""

from typing import Callable, Iterable, Optional
import logging
import os

from .models_fs import RenameOp, RenameResult, UnixizeOptions
from .fs_backend import DiskFS, FileSystem
from .plan_rename import ConflictResolver, split_path
from .safety_checks import check_utf8_name
from .text_match import transliterate

logger = logging.getLogger(__name__)


def _never(question: str) -> bool:
    return False


def basename_of(path: str) -> Optional[str]:
    """Basename of path, or None for ".", ".." and the root"""
    _, name = split_path(path)
    if name in ("", os.curdir, os.pardir):
        return None
    return name


class Unixizer:
    """
    Rename a path tree to unix-friendly names

    The same traversal runs against any FileSystem: DiskFS for a real run,
    a snapshot MemoryFS for dry_run.
    """

    def __init__(
        self,
        fs: FileSystem,
        options: Optional[UnixizeOptions] = None,
        confirm: Optional[Callable[[str], bool]] = None,
        report: Optional[Callable[[str], None]] = print
    ):
        """
        Initialize

        Args:
            fs: Filesystem to operate on
            options: Run options
            confirm: Yes/no question callback for interactive runs
            report: Receives one line per performed or simulated rename
        """
        self.options = options or UnixizeOptions()
        if self.options.dry_run and isinstance(fs, DiskFS):
            raise ValueError("dry_run needs a snapshot filesystem, not the disk")
        self.fs = fs
        self.confirm = confirm or _never
        self.report = None if self.options.quiet else report
        self.resolver = ConflictResolver(fs)
        self.result = RenameResult(dry_run=self.options.dry_run)

    def run(self, paths: Iterable[str]) -> RenameResult:
        """Visit every input path in order"""
        for path in paths:
            self.visit(os.fspath(path))
        return self.result

    def visit(self, path: str) -> None:
        """Unixize path (and its children when recursive)"""
        meta = self.fs.metadata(path)
        name = basename_of(path)
        if name is not None:
            check_utf8_name(name)
        new_name = transliterate(name) if name is not None else None

        # Children first, while the directory is still reachable by its old name
        if meta.is_directory and self.options.recursive and self._should_descend(path):
            for child in self.fs.list_children(path):
                self.visit(os.path.join(path, child))

        if name is None or new_name == name:
            return

        dst = self.resolver.resolve_rename(path, new_name)
        final_name = split_path(dst)[1]
        note = ""
        if final_name != new_name:
            note = f"conflict resolved: {new_name!r} -> {final_name!r}"
        self._maybe_rename(RenameOp(src=path, dst=dst, note=note))

    def _should_descend(self, path: str) -> bool:
        if not self.options.interactive:
            return True
        return self.confirm(f"descend into directory '{path}'?")

    def _maybe_rename(self, op: RenameOp) -> None:
        if self.options.interactive:
            if not self.confirm(f"{op.describe()}?"):
                logger.debug("skipped %r", op.src)
                self.result.skipped.append(op)
                return
        elif self.report is not None:
            self.report(op.describe(self.options.dry_run))

        # dry_run renames inside its snapshot, so later collisions see the new name
        self.fs.rename(op.src, op.dst)
        logger.debug("%s %r -> %r%s", "simulated" if self.options.dry_run else "renamed",
                     op.src, op.dst, f" ({op.note})" if op.note else "")
        self.result.renamed.append(op)


def unixize(
    paths: Iterable[str],
    fs: FileSystem,
    options: Optional[UnixizeOptions] = None,
    confirm: Optional[Callable[[str], bool]] = None,
    report: Optional[Callable[[str], None]] = print
) -> RenameResult:
    """
    Unixize paths

    Args:
        paths: Input paths, visited in order
        fs: Filesystem (DiskFS, or a snapshot MemoryFS for dry_run)
        options: Run options
        confirm: Yes/no question callback for interactive runs
        report: Receives one line per performed or simulated rename

    Returns:
        Execution result
    """
    return Unixizer(fs, options, confirm=confirm, report=report).run(paths)
