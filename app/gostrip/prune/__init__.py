"""Pruning engine for built Go trees.

This module provides the static deny-list, placeholder expansion,
the test-artifact scanner, platform-aware removal and the pruner
that ties them together.
"""

from gostrip.prune.denylist import DEFAULT_REMOVAL_PATTERNS, KNOWN_GROUPS, select_patterns
from gostrip.prune.expander import expand_pattern, resolve_pattern
from gostrip.prune.models import PlanEntry, PlanOrigin, PruneReport, RemovalPattern, RemovalResult
from gostrip.prune.pruner import Pruner
from gostrip.prune.remover import PosixRemover, Remover, WindowsRemover, get_remover
from gostrip.prune.scanner import ArtifactScanner

__all__ = [
    "DEFAULT_REMOVAL_PATTERNS",
    "KNOWN_GROUPS",
    "ArtifactScanner",
    "PlanEntry",
    "PlanOrigin",
    "PosixRemover",
    "PruneReport",
    "Pruner",
    "RemovalPattern",
    "RemovalResult",
    "Remover",
    "WindowsRemover",
    "expand_pattern",
    "get_remover",
    "resolve_pattern",
    "select_patterns",
]
