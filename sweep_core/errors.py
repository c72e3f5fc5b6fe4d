"""
errors.py - Error Types

Three failure families, all deriving from SweepError:
- ConfigurationError: bad options, raised before touching the filesystem
- TraversalError: the directory walk could not read a directory
- TransferError: one rename/copy/move failed during execution
"""

from pathlib import Path
from typing import Optional


class SweepError(Exception):
    """Base class for all errors raised by the rename pipeline"""


class ConfigurationError(SweepError):
    """Required option missing or invalid (including bad regex patterns)"""


class TraversalError(SweepError):
    """Directory read failure during the walk"""

    def __init__(self, path: Path, cause: OSError):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{self.path}: {cause}")


class TransferError(SweepError):
    """A single rename/copy/move failed; earlier operations are kept"""

    def __init__(self, src: Path, dst: Path, cause: Optional[OSError], processed: int):
        self.src = Path(src)
        self.dst = Path(dst)
        self.cause = cause
        self.processed = processed
        super().__init__(f"{str(self.src)!r} to {str(self.dst)!r}: {cause}")
