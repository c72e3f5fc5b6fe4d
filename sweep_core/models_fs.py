"""
models_fs.py - Core Data Structure Definitions

Contains:
- TransferStrategy: How a finished plan is applied
- RenameOptions: Search/replace options for one run
- RenameOp: Single planned operation
- RenamePlan: Old path -> new path mapping built by the walker
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union
from enum import Enum
import os

from .errors import ConfigurationError
from .text_match import make_matcher, Matcher


class TransferStrategy(Enum):
    """Primitive used by the transfer executor"""
    RENAME = "rename"    # os.rename in place
    COPY = "copy"        # Copy content, keep the original
    MOVE = "move"        # Copy content, then remove the original

    @property
    def verb(self) -> str:
        """Past tense used in reports ("renamed", "copied", "moved")"""
        return {"rename": "renamed", "copy": "copied", "move": "moved"}[self.value]


def normalize_extension(ext: Optional[str]) -> str:
    """Normalize an extension filter so it always carries its leading dot"""
    if not ext:
        return ""
    ext = ext.strip()
    if ext and not ext.startswith('.'):
        ext = '.' + ext
    return ext


@dataclass(frozen=True)
class RenameOptions:
    """Options for one planning run (immutable once built)"""
    root: Union[str, Path] = ""
    search: str = ""
    extension: str = ""             # Extension filter, e.g. ".txt" ("" = no filter)
    replace: str = ""               # Replacement text ("" = delete the match)
    regex: bool = False             # Treat search as a regular expression
    resolve_deletions: bool = False # Also avoid existing files when deleting

    def __post_init__(self):
        object.__setattr__(self, "extension", normalize_extension(self.extension))

    @property
    def root_path(self) -> Path:
        return Path(self.root)

    @property
    def needs_conflict_resolution(self) -> bool:
        """Whether the collision resolver also avoids files already on disk"""
        return bool(self.replace) or self.resolve_deletions

    def validate(self) -> None:
        """
        Check the options before any filesystem access

        Raises:
            ConfigurationError: Missing root/search, unusable replacement,
                or a regex that does not compile
        """
        if not str(self.root):
            raise ConfigurationError("root directory path is required")
        if not self.search:
            raise ConfigurationError("search term is required")

        # The replacement must keep the new name inside the same directory
        for sep in {os.sep, os.altsep, '/', '\0'} - {None}:
            if sep in self.replace:
                raise ConfigurationError(f"replacement text cannot contain {sep!r}")

        if self.regex:
            self.matcher()

    def matcher(self) -> Matcher:
        """Build the criterion matcher for these options"""
        return make_matcher(self.search, self.regex)


@dataclass
class RenameOp:
    """Single planned operation"""
    src: Path                       # Source path
    dst: Path                       # Destination path
    note: str = ""                  # Note (e.g., conflict resolution explanation)


@dataclass
class RenamePlan:
    """
    Batch plan: a mapping from original path to new path

    Keys are unique and an entry never maps a path onto itself. The
    mapping interface (len, in, [], items) is keyed by source path.
    """
    ops: Dict[Path, RenameOp] = field(default_factory=dict)

    def add_op(self, src: Path, dst: Path, note: str = "") -> RenameOp:
        """Add operation"""
        src, dst = Path(src), Path(dst)
        if src == dst:
            raise ValueError(f"Plan entry cannot map a path onto itself: {src}")
        if src in self.ops:
            raise ValueError(f"Path already planned: {src}")
        op = RenameOp(src=src, dst=dst, note=note)
        self.ops[src] = op
        return op

    def __len__(self) -> int:
        return len(self.ops)

    def __iter__(self) -> Iterator[Path]:
        return iter(self.ops)

    def __contains__(self, src) -> bool:
        return Path(src) in self.ops

    def __getitem__(self, src) -> Path:
        return self.ops[Path(src)].dst

    def get(self, src, default=None) -> Optional[Path]:
        op = self.ops.get(Path(src))
        return op.dst if op else default

    def items(self) -> List[Tuple[Path, Path]]:
        return [(op.src, op.dst) for op in self.ops.values()]

    def values(self) -> List[Path]:
        return [op.dst for op in self.ops.values()]

    @property
    def valid_ops(self) -> List[RenameOp]:
        return list(self.ops.values())

    @property
    def conflict_count(self) -> int:
        """Number of conflict resolutions"""
        return sum(1 for op in self.ops.values() if op.note.startswith("conflict resolved"))

    @property
    def total_count(self) -> int:
        return len(self.ops)
