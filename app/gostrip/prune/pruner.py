"""Pruning orchestration.

Removes the expanded deny-list from a built tree, then scans the
source subdirectory for test artifacts and removes those too. The
first removal that fails aborts the pass; nothing is rolled back.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from gostrip.core.errors import PruneError
from gostrip.core.platform import PlatformIdentifiers
from gostrip.prune.denylist import DEFAULT_REMOVAL_PATTERNS
from gostrip.prune.expander import resolve_pattern
from gostrip.prune.models import PlanEntry, PlanOrigin, PruneReport, RemovalPattern
from gostrip.prune.remover import Remover
from gostrip.prune.scanner import ArtifactScanner

logger = logging.getLogger(__name__)


class Pruner:
    """Removes everything not needed to use a built Go tree.

    Args:
        root: Root of the built tree.
        identifiers: Host identifiers used to expand deny-list templates.
        remover: Removal strategy.
        patterns: Deny-list, in removal order.
        scanner: Test-artifact scanner.
        scan_subdir: Subdirectory of root walked by the scanner.
    """

    def __init__(
        self,
        root: Path,
        identifiers: PlatformIdentifiers,
        remover: Remover,
        *,
        patterns: Iterable[RemovalPattern] = DEFAULT_REMOVAL_PATTERNS,
        scanner: ArtifactScanner | None = None,
        scan_subdir: str = "src",
    ) -> None:
        self._root = root
        self._identifiers = identifiers
        self._remover = remover
        self._patterns = tuple(patterns)
        self._scanner = scanner or ArtifactScanner()
        self._scan_subdir = scan_subdir

    @property
    def scan_root(self) -> Path:
        """Directory walked for test artifacts."""
        return self._root / self._scan_subdir

    def static_plan(self) -> list[PlanEntry]:
        """Expand the deny-list into plan entries.

        Returns:
            One entry per pattern, in deny-list order.
        """
        return [
            PlanEntry(
                path=resolve_pattern(self._root, pattern, self._identifiers),
                origin=PlanOrigin.STATIC,
                pattern=pattern,
            )
            for pattern in self._patterns
        ]

    def dynamic_plan(self, exclude: Iterable[Path] = ()) -> list[PlanEntry]:
        """Scan the source tree for test artifacts.

        Must run after the static entries are removed so removed
        directories are not scanned. When nothing was actually removed
        (dry-run), the static paths are passed as ``exclude`` instead.

        Args:
            exclude: Paths whose subtrees are left out of the plan.

        Returns:
            One entry per discovered artifact.

        Raises:
            ScanError: If the walk cannot be carried out.
        """
        excluded = tuple(exclude)
        return [
            PlanEntry(path=path, origin=PlanOrigin.DYNAMIC)
            for path in self._scanner.scan(self.scan_root)
            if not any(path == e or e in path.parents for e in excluded)
        ]

    def prune(self) -> PruneReport:
        """Run the static removal, then the scan and its removals.

        Returns:
            PruneReport with the executed plan and results.

        Raises:
            PruneError: On the first path that exists but cannot be removed.
            ScanError: If the test-artifact walk cannot be carried out.
        """
        report = PruneReport(root=self._root)

        static = self.static_plan()
        logger.debug("Removing %d deny-list entries for %s", len(static), self._identifiers)
        self._execute(static, report)

        exclude = [e.path for e in static] if self._remover.dry_run else []
        dynamic = self.dynamic_plan(exclude)
        logger.debug("Removing %d test artifacts under %s", len(dynamic), self.scan_root)
        self._execute(dynamic, report)

        return report

    def _execute(
        self,
        entries: list[PlanEntry],
        report: PruneReport,
    ) -> None:
        """Remove entries in order, stopping at the first failure."""
        for entry in entries:
            result = self._remover.remove(entry.path)
            report.entries.append(entry)
            report.results.append(result)
            if not result.success:
                raise PruneError(entry.path, result.error or "unknown error")
