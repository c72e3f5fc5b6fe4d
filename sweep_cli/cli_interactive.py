"""
cli_interactive.py - Confirmation Prompt and Plan Reporting

Provides the y/n confirmation and the dry-run report
"""

import sys
from typing import Optional, TextIO

from colorama import Fore, Style

from sweep_core import RenamePlan


def can_proceed(stream: Optional[TextIO] = None) -> bool:
    """
    Read one line and decide whether to continue

    Only "y" or "yes" (any case, surrounding whitespace ignored) proceed.
    EOF and read errors count as a refusal.
    """
    if stream is None:
        stream = sys.stdin
    try:
        answer = stream.readline()
    except (OSError, ValueError):
        return False
    return answer.strip().lower() in ("y", "yes")


def format_op(src, dst, note: str = "") -> str:
    """One "old -> new" line, conflict-resolved names highlighted"""
    color = Fore.YELLOW if note else Fore.GREEN
    return f"{src} -> {color}{dst}{Style.RESET_ALL}"


def print_plan(plan: RenamePlan, stream: Optional[TextIO] = None) -> None:
    """Print every planned pair"""
    for op in plan.valid_ops:
        print(format_op(op.src, op.dst, op.note), file=stream)


def report_plan(plan: RenamePlan, verbose: bool = False, stream: Optional[TextIO] = None) -> None:
    """
    Dry-run report: the number of planned files and, when verbose, each pair

    Never touches the filesystem.
    """
    print(f"Found {len(plan)} file(s) to rename!", file=stream)
    if verbose:
        print_plan(plan, stream=stream)
        if plan.conflict_count > 0:
            print(f"Note: {plan.conflict_count} file(s) renamed with a numeric suffix "
                  f"to avoid conflicts (adding _1, _2...)", file=stream)
