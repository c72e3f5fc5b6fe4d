"""
sweep_cli - Command Line Interface for the Batch Rename Tool
"""

from .cli_entry import main
from .cli_interactive import can_proceed, report_plan

__all__ = ["main", "can_proceed", "report_plan"]
