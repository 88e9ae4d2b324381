"""
gui_mainwindow.py - GUI Main Window

Pick paths, preview the renames (dry run on a snapshot), then apply them
"""

from pathlib import Path
from typing import Optional, List

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QCheckBox, QListWidget, QTableWidget, QTableWidgetItem, QProgressBar,
    QFileDialog, QMessageBox, QHeaderView, QGroupBox
)
from PySide6.QtCore import Slot
from PySide6.QtGui import QColor

from ..core import RenameResult
from .gui_workers import PreviewWorker, RenameWorker


class UnixizeWidget(QWidget):
    """Path selection, preview table and execution"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.result: Optional[RenameResult] = None
        self.preview_worker: Optional[PreviewWorker] = None
        self.rename_worker: Optional[RenameWorker] = None

        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        # Path selection group
        paths_group = QGroupBox("Paths")
        paths_layout = QVBoxLayout(paths_group)

        self.path_list = QListWidget()
        self.path_list.setSelectionMode(QListWidget.SelectionMode.ExtendedSelection)
        paths_layout.addWidget(self.path_list)

        buttons_layout = QHBoxLayout()
        self.add_files_btn = QPushButton("Add Files...")
        self.add_files_btn.clicked.connect(self._browse_files)
        buttons_layout.addWidget(self.add_files_btn)
        self.add_dir_btn = QPushButton("Add Folder...")
        self.add_dir_btn.clicked.connect(self._browse_directory)
        buttons_layout.addWidget(self.add_dir_btn)
        self.remove_btn = QPushButton("Remove")
        self.remove_btn.clicked.connect(self._remove_selected)
        buttons_layout.addWidget(self.remove_btn)
        self.clear_btn = QPushButton("Clear")
        self.clear_btn.clicked.connect(self._clear_paths)
        buttons_layout.addWidget(self.clear_btn)
        buttons_layout.addStretch()
        self.recursive_check = QCheckBox("Recursive")
        self.recursive_check.setChecked(True)
        self.recursive_check.toggled.connect(self._invalidate_preview)
        buttons_layout.addWidget(self.recursive_check)
        paths_layout.addLayout(buttons_layout)

        self.preview_btn = QPushButton("Preview")
        self.preview_btn.clicked.connect(self._do_preview)
        self.preview_btn.setEnabled(False)
        paths_layout.addWidget(self.preview_btn)

        layout.addWidget(paths_group)

        # Results table
        self.table = QTableWidget()
        self.table.setColumnCount(3)
        self.table.setHorizontalHeaderLabels(["Original Path", "New Path", "Status"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        layout.addWidget(self.table, 1)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.execute_btn = QPushButton("Apply Renames")
        self.execute_btn.clicked.connect(self._do_execute)
        self.execute_btn.setEnabled(False)
        self.execute_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.execute_btn)

        layout.addLayout(bottom_layout)

        # Status label
        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

    def paths(self) -> List[str]:
        return [self.path_list.item(i).text() for i in range(self.path_list.count())]

    def _add_paths(self, paths: List[str]):
        existing = set(self.paths())
        for path in paths:
            if path and path not in existing:
                self.path_list.addItem(path)
                existing.add(path)
        self._invalidate_preview()

    def _browse_files(self):
        """Browse and select files"""
        files, _ = QFileDialog.getOpenFileNames(self, "Select Files")
        self._add_paths(files)

    def _browse_directory(self):
        """Browse and select directory"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory")
        if directory:
            self._add_paths([directory])

    def _remove_selected(self):
        for item in self.path_list.selectedItems():
            self.path_list.takeItem(self.path_list.row(item))
        self._invalidate_preview()

    def _clear_paths(self):
        self.path_list.clear()
        self._invalidate_preview()

    @Slot()
    def _invalidate_preview(self):
        """Paths or options changed; the shown preview no longer applies"""
        self.result = None
        self.table.setRowCount(0)
        self.execute_btn.setEnabled(False)
        self.preview_btn.setEnabled(self.path_list.count() > 0)
        self.status_label.setText("")

    def _set_busy(self, busy: bool):
        for widget in (self.add_files_btn, self.add_dir_btn, self.remove_btn,
                       self.clear_btn, self.recursive_check, self.preview_btn):
            widget.setEnabled(not busy)
        self.execute_btn.setEnabled(False)
        self.progress_bar.setVisible(busy)
        self.progress_bar.setRange(0, 0)  # Indeterminate progress

    def _do_preview(self):
        """Generate preview"""
        paths = self.paths()
        missing = [p for p in paths if not Path(p).exists()]
        if missing:
            QMessageBox.warning(self, "Warning", "Paths do not exist:\n" + "\n".join(missing))
            return

        self._set_busy(True)
        self.preview_btn.setText("Generating...")

        # Start preview thread
        self.preview_worker = PreviewWorker(paths, recursive=self.recursive_check.isChecked())
        self.preview_worker.progress.connect(self._on_progress)
        self.preview_worker.finished.connect(self._on_preview_finished)
        self.preview_worker.error.connect(self._on_error)
        self.preview_worker.start()

    @Slot(str)
    def _on_progress(self, msg: str):
        self.status_label.setText(msg[-80:] if len(msg) > 80 else msg)

    @Slot(object)
    def _on_preview_finished(self, result: RenameResult):
        """Preview complete"""
        self.result = result
        self._set_busy(False)
        self.preview_btn.setText("Preview")

        self.table.setRowCount(len(result.renamed))
        for i, op in enumerate(result.renamed):
            self.table.setItem(i, 0, QTableWidgetItem(op.src))
            new_name_item = QTableWidgetItem(op.dst)
            if op.note:
                new_name_item.setBackground(QColor(255, 255, 200))
                status_item = QTableWidgetItem("Conflict Resolved")
                status_item.setForeground(QColor(200, 150, 0))
            else:
                status_item = QTableWidgetItem("Will Rename")
                status_item.setForeground(QColor(0, 150, 0))
            self.table.setItem(i, 1, new_name_item)
            self.table.setItem(i, 2, status_item)

        if result.renamed:
            self.execute_btn.setEnabled(True)
            self.status_label.setText(
                f"Will perform {result.renamed_count} rename operations "
                f"(conflict resolutions: {result.conflict_count})"
            )
        else:
            self.status_label.setText("All names are already unix-friendly")

    def _do_execute(self):
        """Execute rename"""
        if not self.result or not self.result.renamed:
            return

        reply = QMessageBox.question(
            self, "Confirm",
            f"Are you sure you want to execute {self.result.renamed_count} rename operations?\n\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        self._set_busy(True)
        self.execute_btn.setText("Executing...")

        # Start execution thread
        self.rename_worker = RenameWorker(self.paths(), recursive=self.recursive_check.isChecked())
        self.rename_worker.progress.connect(self._on_progress)
        self.rename_worker.finished.connect(self._on_rename_finished)
        self.rename_worker.error.connect(self._on_error)
        self.rename_worker.start()

    @Slot(object)
    def _on_rename_finished(self, result: RenameResult):
        """Execution complete"""
        self.execute_btn.setText("Apply Renames")
        self._set_busy(False)

        QMessageBox.information(self, "Complete", f"Rename complete!\n\n{result.summary()}")

        # Renamed paths are gone from the list
        self.path_list.clear()
        self._invalidate_preview()
        self.status_label.setText("Complete")

    @Slot(str)
    def _on_error(self, error: str):
        self.preview_btn.setText("Preview")
        self.execute_btn.setText("Apply Renames")
        self._set_busy(False)
        QMessageBox.critical(self, "Error", f"Failed: {error}")


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("unf - Unixize Filenames")
        self.setMinimumSize(800, 600)

        self.unixize_widget = UnixizeWidget()
        self.setCentralWidget(self.unixize_widget)

        # Status bar
        self.statusBar().showMessage("Ready")
