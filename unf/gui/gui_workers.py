"""
gui_workers.py - GUI Worker Threads

Runs traversals in the background to avoid blocking the UI
"""

from typing import Optional, List

from PySide6.QtCore import QThread, Signal, QObject

from ..core import (
    DiskFS, InvalidFilenameError, UnixizeOptions, load_snapshot, unixize,
)


class PreviewWorker(QThread):
    """Simulates a forced run on a fresh snapshot of the disk"""

    # Signals
    progress = Signal(str)          # One "would rename" line
    finished = Signal(object)       # RenameResult
    error = Signal(str)             # Error message

    def __init__(
        self,
        paths: List[str],
        recursive: bool = True,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.paths = paths
        self.recursive = recursive

    def run(self):
        try:
            self.progress.emit("Loading snapshot...")
            fs = load_snapshot(self.paths)
            options = UnixizeOptions(recursive=self.recursive, dry_run=True)
            result = unixize(self.paths, fs, options, report=self.progress.emit)
            self.finished.emit(result)
        except (OSError, InvalidFilenameError) as e:
            self.error.emit(str(e))


class RenameWorker(QThread):
    """Rename execution worker thread"""

    # Signals
    progress = Signal(str)          # One "rename" line
    finished = Signal(object)       # RenameResult
    error = Signal(str)             # Error message

    def __init__(
        self,
        paths: List[str],
        recursive: bool = True,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.paths = paths
        self.recursive = recursive

    def run(self):
        try:
            options = UnixizeOptions(recursive=self.recursive, force=True)
            result = unixize(self.paths, DiskFS(), options, report=self.progress.emit)
            self.finished.emit(result)
        except (OSError, InvalidFilenameError) as e:
            self.error.emit(str(e))
