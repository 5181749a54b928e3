"""Scanner for test artifacts in a Go source tree.

Test data directories and test source files cannot be listed
statically, so the source tree is walked to find them. Test data
directories are reported as a whole and never descended into.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from gostrip.core.errors import ScanError

logger = logging.getLogger(__name__)

DEFAULT_TEST_DATA_DIR = "testdata"
DEFAULT_TEST_SUFFIX = "_test.go"


class ArtifactScanner:
    """Walks a directory tree and yields test artifacts.

    Yields every directory named ``test_data_dir`` (without descending
    into it) and every non-directory entry whose name ends with
    ``test_suffix``. Entries of each directory are visited in name
    order, depth first.

    Args:
        test_data_dir: Directory name marking test data.
        test_suffix: File name suffix marking test sources.
        ignore_errors: If True, entries that cannot be inspected or
            listed are skipped. If False, such errors raise ScanError.
            An unreadable scan root raises ScanError either way.
    """

    def __init__(
        self,
        *,
        test_data_dir: str = DEFAULT_TEST_DATA_DIR,
        test_suffix: str = DEFAULT_TEST_SUFFIX,
        ignore_errors: bool = True,
    ) -> None:
        self._test_data_dir = test_data_dir
        self._test_suffix = test_suffix
        self._ignore_errors = ignore_errors

    @property
    def ignore_errors(self) -> bool:
        """Check if per-entry errors are skipped."""
        return self._ignore_errors

    def scan(self, root: Path) -> Iterator[Path]:
        """Walk root and yield test artifact paths.

        The walk is lazy and one-shot.

        Args:
            root: Directory to walk.

        Yields:
            Paths of test data directories and test source files.

        Raises:
            ScanError: If root cannot be listed, or an entry fails while
                ignore_errors is False.
        """
        try:
            entries = self._list_dir(root)
        except OSError as e:
            raise ScanError(f"cannot read {root}: {e}") from e

        yield from self._walk(entries)

    def _walk(self, entries: list[os.DirEntry[str]]) -> Iterator[Path]:
        """Recursively yield artifacts from already listed entries."""
        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                self._handle_error(entry.path, e)
                continue

            if not is_dir:
                if entry.name.endswith(self._test_suffix):
                    yield Path(entry.path)
                continue

            if entry.name == self._test_data_dir:
                yield Path(entry.path)
                continue

            try:
                children = self._list_dir(Path(entry.path))
            except OSError as e:
                self._handle_error(entry.path, e)
                continue

            yield from self._walk(children)

    def _handle_error(self, path: str, error: OSError) -> None:
        """Apply the error policy to a failing entry.

        Raises:
            ScanError: If ignore_errors is False.
        """
        if not self._ignore_errors:
            raise ScanError(f"cannot inspect {path}: {error}") from error
        logger.debug("Skipping unreadable entry %s: %s", path, error)

    @staticmethod
    def _list_dir(path: Path) -> list[os.DirEntry[str]]:
        """List a directory sorted by entry name."""
        with os.scandir(path) as it:
            return sorted(it, key=lambda e: e.name)
