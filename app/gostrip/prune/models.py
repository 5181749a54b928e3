"""Pruning domain models.

This module defines the data structures flowing through the pruning
engine: deny-list patterns, removal plan entries and per-path
removal results.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class PlanOrigin(str, Enum):
    """Where a removal plan entry came from.

    Attributes:
        STATIC: Expanded from the deny-list.
        DYNAMIC: Discovered by the test-artifact scan.
    """

    STATIC = "static"
    DYNAMIC = "dynamic"


@dataclass(frozen=True, slots=True)
class RemovalPattern:
    """A deny-list entry.

    Attributes:
        template: Slash-separated path relative to the tree root. May
            contain the GOOS and GOARCH placeholders.
        group: Concern the entry belongs to; groups can be preserved
            as a unit.
        uncertain: Whether removing this entry is known to be
            questionable and should stay overridable.
    """

    template: str
    group: str
    uncertain: bool = False

    def __post_init__(self) -> None:
        """Validate pattern data after initialization."""
        if not self.template:
            msg = "Pattern template cannot be empty"
            raise ValueError(msg)
        if not self.group:
            msg = "Pattern group cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class PlanEntry:
    """A single path scheduled for removal.

    Attributes:
        path: Absolute path to remove.
        origin: Static deny-list or dynamic scan.
        pattern: Deny-list pattern the path was expanded from (static only).
    """

    path: Path
    origin: PlanOrigin
    pattern: RemovalPattern | None = None


@dataclass(frozen=True, slots=True)
class RemovalResult:
    """Result of a single removal.

    Attributes:
        path: Path that was operated on.
        success: Whether the path is gone (or never existed).
        error: Error message if the removal failed, None otherwise.
        missing: Whether the path did not exist in the first place.
        dry_run: Whether this was a dry-run (no actual deletion).
    """

    path: Path
    success: bool
    error: str | None = None
    missing: bool = False
    dry_run: bool = False


@dataclass(slots=True)
class PruneReport:
    """Outcome of a complete pruning pass.

    Attributes:
        root: Tree that was pruned.
        entries: Executed plan, static entries first.
        results: Removal result for each entry, in plan order.
    """

    root: Path
    entries: list[PlanEntry] = field(default_factory=list)
    results: list[RemovalResult] = field(default_factory=list)

    @property
    def removed(self) -> list[RemovalResult]:
        """Results for paths that existed and were removed."""
        return [r for r in self.results if r.success and not r.missing]

    @property
    def missing(self) -> list[RemovalResult]:
        """Results for planned paths that did not exist."""
        return [r for r in self.results if r.missing]

    def count(self, origin: PlanOrigin) -> int:
        """Count plan entries of the given origin."""
        return sum(1 for e in self.entries if e.origin == origin)

    def count_missing(self, origin: PlanOrigin) -> int:
        """Count plan entries of the given origin whose path did not exist."""
        return sum(
            1
            for e, r in zip(self.entries, self.results, strict=True)
            if e.origin == origin and r.missing
        )
