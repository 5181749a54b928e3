"""Utility modules for gostrip.

This module exports commonly used utility functions.
"""

from gostrip.utils.shell import CommandResult, run_command, run_interactive

__all__ = [
    "CommandResult",
    "run_command",
    "run_interactive",
]
