"""
sweep_core - Batch Rename Core Module

Provides matching, plan generation, collision resolution and transfer execution
"""

from .errors import (
    SweepError,
    ConfigurationError,
    TraversalError,
    TransferError,
)

from .models_fs import (
    RenameOp,
    RenamePlan,
    RenameOptions,
    TransferStrategy,
    normalize_extension,
)

from .text_match import (
    LiteralMatcher,
    PatternMatcher,
    make_matcher,
    search_string,
    file_extension,
    passes_extension_filter,
    plan_new_name,
)

from .plan_rename import (
    ConflictResolver,
    resolve_conflict,
    suffixed_name,
)

from .scan_files import (
    iter_files,
    walk,
)

from .exec_rename import (
    execute_transfer,
)

__all__ = [
    # Errors
    "SweepError",
    "ConfigurationError",
    "TraversalError",
    "TransferError",
    # Data models
    "RenameOp",
    "RenamePlan",
    "RenameOptions",
    "TransferStrategy",
    "normalize_extension",
    # Matching
    "LiteralMatcher",
    "PatternMatcher",
    "make_matcher",
    "search_string",
    "file_extension",
    "passes_extension_filter",
    "plan_new_name",
    # Planning
    "ConflictResolver",
    "resolve_conflict",
    "suffixed_name",
    # Traversal
    "iter_files",
    "walk",
    # Execution
    "execute_transfer",
]

__version__ = "1.0.0"
