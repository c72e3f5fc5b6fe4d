"""
exec_rename.py - Transfer Execution Module

Responsibilities:
- Apply a finished plan with one primitive (rename, copy or move)
- Stop at the first failure and report how many operations succeeded
- Never replace an existing destination
"""

from pathlib import Path
from typing import Callable, Optional
import errno
import logging
import os
import shutil

from .errors import TransferError
from .models_fs import RenamePlan, TransferStrategy

logger = logging.getLogger(__name__)


def _refuse_existing(dst: Path) -> None:
    # Dangling symlinks count as taken
    if os.path.lexists(dst):
        raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), str(dst))


def _rename(src: Path, dst: Path) -> None:
    _refuse_existing(dst)
    os.rename(src, dst)


def _copy(src: Path, dst: Path) -> None:
    # 'xb' refuses an existing destination
    with open(src, 'rb') as fsrc, open(dst, 'xb') as fdst:
        shutil.copyfileobj(fsrc, fdst)


def _move(src: Path, dst: Path) -> None:
    _refuse_existing(dst)
    shutil.move(str(src), str(dst))


_PRIMITIVES = {
    TransferStrategy.RENAME: _rename,
    TransferStrategy.COPY: _copy,
    TransferStrategy.MOVE: _move,
}


def execute_transfer(
    plan: RenamePlan,
    strategy: TransferStrategy = TransferStrategy.RENAME,
    progress_callback: Optional[Callable[[int, int, str], None]] = None
) -> int:
    """
    Execute a plan

    Entries are independent, so iteration order carries no meaning.
    Completed operations are not rolled back on failure.

    Args:
        plan: Plan produced by walk()
        strategy: Transfer primitive to use
        progress_callback: Progress callback (current, total, message)

    Returns:
        Number of files processed

    Raises:
        TransferError: First failing operation, with the count already done
    """
    primitive = _PRIMITIVES[strategy]
    total = len(plan)
    processed = 0

    for op in plan.valid_ops:
        try:
            primitive(op.src, op.dst)
        except OSError as e:
            logger.debug("%s failed for %s -> %s: %s", strategy.value, op.src, op.dst, e)
            raise TransferError(op.src, op.dst, e, processed) from e

        processed += 1
        logger.debug("%s %s -> %s", strategy.verb, op.src, op.dst)
        if progress_callback:
            progress_callback(processed, total, f"{op.src.name} -> {op.dst.name}")

    return processed
