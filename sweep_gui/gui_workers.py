"""
gui_workers.py - GUI Worker Threads

Runs planning and transfer off the UI thread. Each worker drives the same
sequential pipeline the CLI uses.
"""

from typing import Optional
import logging

from PySide6.QtCore import QThread, Signal, QObject

from sweep_core import (
    walk, execute_transfer,
    RenameOptions, RenamePlan, TransferStrategy,
    SweepError, TransferError,
)

logger = logging.getLogger(__name__)


class PlanWorker(QThread):
    """Plan generation worker thread"""

    # Signals
    progress = Signal(str)              # Progress message
    finished = Signal(object)           # RenamePlan
    error = Signal(str)                 # Error message

    def __init__(self, options: RenameOptions, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.options = options

    def run(self):
        try:
            self.progress.emit(f"Scanning {self.options.root_path} ...")
            self.options.validate()
            plan = walk(self.options)
            self.finished.emit(plan)
        except SweepError as e:
            self.error.emit(str(e))
        except Exception as e:
            logger.exception("Planning failed")
            self.error.emit(str(e))


class TransferWorker(QThread):
    """Transfer execution worker thread"""

    # Signals
    progress = Signal(int, int, str)    # current, total, message
    finished = Signal(int)              # Files processed
    error = Signal(str, int)            # Error message, files processed before it

    def __init__(
        self,
        plan: RenamePlan,
        strategy: TransferStrategy = TransferStrategy.RENAME,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.plan = plan
        self.strategy = strategy

    def run(self):
        processed = 0
        try:
            def progress_callback(current: int, total: int, msg: str):
                nonlocal processed
                processed = current
                self.progress.emit(current, total, msg)

            processed = execute_transfer(
                self.plan,
                self.strategy,
                progress_callback=progress_callback,
            )
            self.finished.emit(processed)
        except TransferError as e:
            self.error.emit(str(e), e.processed)
        except Exception as e:
            logger.exception("Transfer failed after %d file(s)", processed)
            self.error.emit(str(e), processed)
