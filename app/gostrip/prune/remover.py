"""Platform-aware recursive removal.

Recursive deletion of read-only or in-use files behaves differently
across platforms, so removal goes through a Remover interface with
two implementations:

- PosixRemover: shutil.rmtree for directories, Path.unlink otherwise
- WindowsRemover: ``cmd.exe /C rmdir /Q /S`` for directories and
  ``cmd.exe /C del /Q /F /S`` for files

The implementation is picked once per run by get_remover().
"""

import logging
import platform
import shutil
import stat
from abc import ABC, abstractmethod
from pathlib import Path

from gostrip.prune.models import RemovalResult
from gostrip.utils.shell import run_command

logger = logging.getLogger(__name__)


class Remover(ABC):
    """Abstract base class for recursive removal strategies.

    A path that does not exist is reported as a successful removal
    with ``missing=True``. Any other error is reported as a failure
    carrying the error text; removers never raise for I/O errors.

    Attributes:
        dry_run: If True, report removals without touching the filesystem.

    Example:
        >>> remover = get_remover(dry_run=True)
        >>> result = remover.remove(Path("/tmp/go/doc"))
        >>> result.success
        True
    """

    def __init__(self, *, dry_run: bool = False) -> None:
        """Initialize the remover.

        Args:
            dry_run: If True, only report what would be removed.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Check if remover is in dry-run mode."""
        return self._dry_run

    def remove(self, path: Path) -> RemovalResult:
        """Remove a file or directory tree.

        Args:
            path: Path to remove.

        Returns:
            RemovalResult describing the outcome.
        """
        try:
            mode = path.lstat().st_mode
        except FileNotFoundError:
            logger.debug("Skipping missing path %s", path)
            return RemovalResult(path=path, success=True, missing=True, dry_run=self._dry_run)
        except OSError as e:
            return RemovalResult(path=path, success=False, error=str(e), dry_run=self._dry_run)

        if self._dry_run:
            logger.info("Dry-run: would remove %s", path)
            return RemovalResult(path=path, success=True, dry_run=True)

        logger.debug("Removing %s", path)
        return self._remove_existing(path, is_dir=stat.S_ISDIR(mode))

    @abstractmethod
    def _remove_existing(self, path: Path, *, is_dir: bool) -> RemovalResult:
        """Remove a path known to exist.

        Args:
            path: Path to remove.
            is_dir: Whether the path is a real directory (not a symlink).

        Returns:
            RemovalResult describing the outcome.
        """


class PosixRemover(Remover):
    """Removes paths with native filesystem calls."""

    def _remove_existing(self, path: Path, *, is_dir: bool) -> RemovalResult:
        try:
            if is_dir:
                shutil.rmtree(path)
            else:
                path.unlink()
        except FileNotFoundError:
            # Vanished between the existence check and the removal
            return RemovalResult(path=path, success=True, missing=True)
        except OSError as e:
            return RemovalResult(path=path, success=False, error=str(e))
        return RemovalResult(path=path, success=True)


class WindowsRemover(Remover):
    """Removes paths through cmd.exe.

    Directories and files need different delete verbs on Windows.
    """

    def _remove_existing(self, path: Path, *, is_dir: bool) -> RemovalResult:
        if is_dir:
            args = ["cmd.exe", "/C", "rmdir", "/Q", "/S", str(path)]
        else:
            args = ["cmd.exe", "/C", "del", "/Q", "/F", "/S", str(path)]

        try:
            result = run_command(args, timeout=None)
        except OSError as e:
            return RemovalResult(path=path, success=False, error=str(e))

        if not result.success:
            return RemovalResult(
                path=path,
                success=False,
                error=result.stderr.strip() or f"{args[2]} exited with status {result.returncode}",
            )
        return RemovalResult(path=path, success=True)


def get_remover(system: str | None = None, *, dry_run: bool = False) -> Remover:
    """Select the removal strategy for a host.

    Args:
        system: platform.system() value. If None, the running host is used.
        dry_run: If True, the remover only reports what it would remove.

    Returns:
        WindowsRemover on Windows, PosixRemover everywhere else.
    """
    name = (system if system is not None else platform.system()).lower()
    if name == "windows":
        return WindowsRemover(dry_run=dry_run)
    return PosixRemover(dry_run=dry_run)
