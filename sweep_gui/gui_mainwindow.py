"""
gui_mainwindow.py - GUI Main Window

Single panel: search/replace settings, a preview table of the plan and an
execute button
"""

from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QCheckBox, QComboBox,
    QTableWidget, QTableWidgetItem, QProgressBar,
    QFileDialog, QMessageBox, QHeaderView, QGroupBox
)
from PySide6.QtCore import Slot
from PySide6.QtGui import QColor

from sweep_core import RenameOptions, RenamePlan, TransferStrategy
from .gui_workers import PlanWorker, TransferWorker


class RenamePanel(QWidget):
    """Search and Replace panel"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.plan: Optional[RenamePlan] = None
        self.plan_worker: Optional[PlanWorker] = None
        self.transfer_worker: Optional[TransferWorker] = None

        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        # Search settings group
        search_group = QGroupBox("Search Settings")
        search_layout = QGridLayout(search_group)

        # Directory selection
        search_layout.addWidget(QLabel("Directory:"), 0, 0)
        self.dir_edit = QLineEdit()
        self.dir_edit.setPlaceholderText("Select root directory...")
        search_layout.addWidget(self.dir_edit, 0, 1)
        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self._browse_directory)
        search_layout.addWidget(self.browse_btn, 0, 2)

        search_layout.addWidget(QLabel("Find:"), 1, 0)
        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText("String (or regular expression) to find")
        search_layout.addWidget(self.search_edit, 1, 1, 1, 2)

        search_layout.addWidget(QLabel("Replace with:"), 2, 0)
        self.replace_edit = QLineEdit()
        self.replace_edit.setPlaceholderText("Replacement string (leave empty to delete)")
        search_layout.addWidget(self.replace_edit, 2, 1, 1, 2)

        search_layout.addWidget(QLabel("Extension:"), 3, 0)
        self.ext_edit = QLineEdit()
        self.ext_edit.setPlaceholderText("e.g. .jpg (leave empty for all files)")
        search_layout.addWidget(self.ext_edit, 3, 1, 1, 2)

        # Options
        options_layout = QHBoxLayout()
        self.regex_check = QCheckBox("Regular Expression")
        self.resolve_check = QCheckBox("Resolve Conflicts When Deleting")
        self.action_combo = QComboBox()
        for strategy in TransferStrategy:
            self.action_combo.addItem(strategy.value.capitalize(), strategy)
        options_layout.addWidget(self.regex_check)
        options_layout.addWidget(self.resolve_check)
        options_layout.addStretch()
        options_layout.addWidget(QLabel("Action:"))
        options_layout.addWidget(self.action_combo)
        search_layout.addLayout(options_layout, 4, 0, 1, 3)

        # Preview button
        self.preview_btn = QPushButton("Preview")
        self.preview_btn.clicked.connect(self._do_preview)
        search_layout.addWidget(self.preview_btn, 5, 0, 1, 3)

        layout.addWidget(search_group)

        # Results table
        self.table = QTableWidget()
        self.table.setColumnCount(4)
        self.table.setHorizontalHeaderLabels(["Original Name", "New Name", "Status", "Folder"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        self.table.horizontalHeader().setSectionResizeMode(3, QHeaderView.ResizeMode.Stretch)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        layout.addWidget(self.table, 1)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.execute_btn = QPushButton("Execute")
        self.execute_btn.clicked.connect(self._do_execute)
        self.execute_btn.setEnabled(False)
        self.execute_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.execute_btn)

        layout.addLayout(bottom_layout)

        # Status label
        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

    def _browse_directory(self):
        """Browse and select directory"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory")
        if directory:
            self.dir_edit.setText(directory)

    def current_options(self) -> RenameOptions:
        """Options from the form fields"""
        return RenameOptions(
            root=self.dir_edit.text().strip(),
            search=self.search_edit.text(),
            extension=self.ext_edit.text(),
            replace=self.replace_edit.text(),
            regex=self.regex_check.isChecked(),
            resolve_deletions=self.resolve_check.isChecked(),
        )

    def current_strategy(self) -> TransferStrategy:
        return self.action_combo.currentData()

    def _do_preview(self):
        """Generate preview"""
        options = self.current_options()
        if not options.search:
            QMessageBox.warning(self, "Warning", "Please enter the string to find")
            return
        if not options.root_path.is_dir():
            QMessageBox.warning(self, "Warning", f"Directory does not exist: {options.root}")
            return

        self.preview_btn.setEnabled(False)
        self.preview_btn.setText("Generating...")
        self.execute_btn.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, 0)  # Indeterminate progress

        self.plan_worker = PlanWorker(options)
        self.plan_worker.progress.connect(self.status_label.setText)
        self.plan_worker.finished.connect(self._on_plan_finished)
        self.plan_worker.error.connect(self._on_plan_error)
        self.plan_worker.start()

    @Slot(object)
    def _on_plan_finished(self, plan: RenamePlan):
        """Plan generation complete"""
        self.plan = plan
        self.preview_btn.setEnabled(True)
        self.preview_btn.setText("Preview")
        self.progress_bar.setVisible(False)

        self._update_table_preview()

        if len(plan):
            self.execute_btn.setEnabled(True)
            self.status_label.setText(f"Will process {plan.total_count} file(s) (conflict resolutions: {plan.conflict_count})")
        else:
            self.status_label.setText("No files need renaming")

    @Slot(str)
    def _on_plan_error(self, error: str):
        """Plan generation error"""
        self.preview_btn.setEnabled(True)
        self.preview_btn.setText("Preview")
        self.progress_bar.setVisible(False)
        QMessageBox.critical(self, "Error", f"Failed to generate preview: {error}")

    def _update_table_preview(self):
        """Update table to display preview results"""
        ops = self.plan.valid_ops if self.plan else []
        self.table.setRowCount(len(ops))

        base_dir = Path(self.dir_edit.text().strip())
        for i, op in enumerate(ops):
            self.table.setItem(i, 0, QTableWidgetItem(op.src.name))
            new_name_item = QTableWidgetItem(op.dst.name)
            if op.note:
                new_name_item.setBackground(QColor(255, 255, 200))
                status_item = QTableWidgetItem("Conflict Resolved")
                status_item.setForeground(QColor(200, 150, 0))
            else:
                status_item = QTableWidgetItem("Will Rename")
                status_item.setForeground(QColor(0, 150, 0))
            self.table.setItem(i, 1, new_name_item)
            self.table.setItem(i, 2, status_item)
            try:
                folder = str(op.src.parent.relative_to(base_dir))
            except ValueError:
                folder = str(op.src.parent)
            self.table.setItem(i, 3, QTableWidgetItem(folder))

    def _do_execute(self):
        """Execute the plan"""
        if not self.plan:
            return

        strategy = self.current_strategy()
        reply = QMessageBox.question(
            self, "Confirm",
            f"Are you sure you want to {strategy.value} {self.plan.total_count} file(s)?\n\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        self.execute_btn.setEnabled(False)
        self.execute_btn.setText("Executing...")
        self.preview_btn.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, self.plan.total_count)

        self.transfer_worker = TransferWorker(self.plan, strategy)
        self.transfer_worker.progress.connect(self._on_transfer_progress)
        self.transfer_worker.finished.connect(self._on_transfer_finished)
        self.transfer_worker.error.connect(self._on_transfer_error)
        self.transfer_worker.start()

    @Slot(int, int, str)
    def _on_transfer_progress(self, current: int, total: int, msg: str):
        """Execution progress update"""
        self.progress_bar.setValue(current)
        self.status_label.setText(msg)

    def _reset_after_transfer(self):
        self.execute_btn.setEnabled(False)
        self.execute_btn.setText("Execute")
        self.preview_btn.setEnabled(True)
        self.progress_bar.setVisible(False)
        # The plan was consumed; a new preview is required
        self.plan = None
        self.table.setRowCount(0)

    @Slot(int)
    def _on_transfer_finished(self, processed: int):
        """Execution complete"""
        self._reset_after_transfer()
        QMessageBox.information(self, "Complete", f"Done! {processed} file(s) were {self.current_strategy().verb}.")
        self.status_label.setText("Complete")

    @Slot(str, int)
    def _on_transfer_error(self, error: str, processed: int):
        """Execution error"""
        self._reset_after_transfer()
        QMessageBox.critical(
            self, "Error",
            f"Execution failed: {error}\n\n{processed} file(s) were {self.current_strategy().verb} before the failure."
        )
        self.status_label.setText("Failed")


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Sweep Rename")
        self.setMinimumSize(800, 600)

        self.panel = RenamePanel()
        self.setCentralWidget(self.panel)

        # Status bar
        self.statusBar().showMessage("Ready")
