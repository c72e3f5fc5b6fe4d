"""
scan_files.py - Directory Traversal and Plan Building

Walks the root recursively and turns every matching file into a plan entry
"""

from pathlib import Path
from typing import Generator, Union
import logging
import os

from .errors import TraversalError
from .models_fs import RenameOptions, RenamePlan
from .plan_rename import ConflictResolver
from .text_match import passes_extension_filter, plan_new_name

logger = logging.getLogger(__name__)


def _raise_traversal_error(error: OSError) -> None:
    raise TraversalError(error.filename or "", error) from error


def iter_files(root: Union[str, Path]) -> Generator[Path, None, None]:
    """
    Lazily yield every non-directory entry under root

    Directories are visited, never yielded. Names are sorted so the walk
    order is deterministic. Paths are built from root as given (relative
    roots yield relative paths).

    Raises:
        TraversalError: A directory (including root) could not be read
    """
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_traversal_error):
        dirnames.sort()
        current_dir = Path(dirpath)
        for filename in sorted(filenames):
            yield current_dir / filename


def walk(options: RenameOptions) -> RenamePlan:
    """
    Build the rename plan for options

    Args:
        options: Validated run options

    Returns:
        Plan mapping each selected file to its new path

    Raises:
        TraversalError: The walk failed; no partial plan is returned
    """
    matcher = options.matcher()
    plan = RenamePlan()
    # Planned names are always checked; disk only when conflicts are resolved
    resolver = ConflictResolver(check_disk=options.needs_conflict_resolution)

    for path in iter_files(options.root_path):
        old_name = path.name

        if not passes_extension_filter(old_name, options.extension):
            continue

        matched = matcher.match(old_name)
        new_name = plan_new_name(old_name, options.extension, matched, options.replace)
        if new_name is None:
            continue

        note = ""
        final_name, had_conflict = resolver.resolve(path.parent, new_name)
        if had_conflict:
            note = f"conflict resolved: {new_name} -> {final_name}"
        new_name = final_name

        new_path = path.parent / new_name
        if new_path == path:
            continue

        plan.add_op(path, new_path, note)
        resolver.mark_occupied(new_name)
        logger.debug("Planned %s -> %s%s", path, new_path, f" ({note})" if note else "")

    logger.debug("Walk of %s planned %d file(s)", options.root_path, len(plan))
    return plan
