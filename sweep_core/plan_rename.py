"""
plan_rename.py - Collision Resolution

Responsibilities:
- Detect when a candidate name is already planned or already on disk
- Pick the first free "<stem>_<n><ext>" name, n = 1, 2, 3...
"""

from pathlib import Path
from typing import Iterable, Mapping, Set, Tuple, Union
import logging
import os

from .text_match import split_extension

logger = logging.getLogger(__name__)


def _planned_names(planned: Union[Mapping, Iterable]) -> Set[str]:
    """Base names of the destinations planned so far"""
    if isinstance(planned, Mapping) or hasattr(planned, "values"):
        destinations = planned.values()
    else:
        destinations = planned
    return {Path(p).name for p in destinations}


def suffixed_name(name: str, n: int) -> str:
    """Insert a numeric suffix before the extension: a.txt -> a_1.txt"""
    stem, ext = split_extension(name)
    return f"{stem}_{n}{ext}"


class ConflictResolver:
    """
    Conflict resolver

    Tracks the base names already handed out so every check against the
    plan is a set lookup. Disk state is queried on every candidate unless
    check_disk is off (deletion mode without resolve_deletions).
    """

    def __init__(self, planned: Union[Mapping, Iterable] = (), check_disk: bool = True):
        self.occupied: Set[str] = _planned_names(planned)
        self.check_disk = check_disk

    def is_occupied(self, directory: Path, name: str) -> bool:
        """Check if name is already planned or present on disk (dangling links count)"""
        if name in self.occupied:
            return True
        return self.check_disk and os.path.lexists(Path(directory) / name)

    def mark_occupied(self, name: str) -> None:
        """Mark name as occupied"""
        self.occupied.add(name)

    def resolve(self, directory: Path, desired_name: str) -> Tuple[str, bool]:
        """
        Resolve conflict, return available filename

        Args:
            directory: Directory the file will live in
            desired_name: Desired filename

        Returns:
            (actual filename, whether conflict occurred)
        """
        candidate = desired_name
        n = 1
        while self.is_occupied(directory, candidate):
            candidate = suffixed_name(desired_name, n)
            n += 1

        if candidate != desired_name:
            logger.debug("Conflict on %s in %s, using %s", desired_name, directory, candidate)
        return candidate, candidate != desired_name


def resolve_conflict(directory: Path, candidate: str, planned: Union[Mapping, Iterable]) -> str:
    """
    Guaranteed-unique name for candidate in directory

    Args:
        directory: Directory the file will live in
        candidate: Name produced by the name planner
        planned: Plan so far (mapping old -> new, or an iterable of new paths)

    Returns:
        candidate itself, or the first free "<stem>_<n><ext>" variant
    """
    name, _ = ConflictResolver(planned).resolve(directory, candidate)
    return name
