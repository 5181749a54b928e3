"""Clone and build a Go source tree.

Both steps inherit the terminal so git and make.bash progress is
visible, and neither is subject to a timeout.
"""

import logging
import platform
from pathlib import Path

from gostrip.core.errors import BuildError, CloneError, DestinationExistsError
from gostrip.utils.shell import run_interactive

logger = logging.getLogger(__name__)


def check_destination(dest: Path) -> None:
    """Ensure the destination does not exist yet.

    Args:
        dest: Destination directory.

    Raises:
        DestinationExistsError: If anything exists at dest.
    """
    if dest.exists() or dest.is_symlink():
        raise DestinationExistsError(dest)


def clone_repository(repo: str, dest: Path) -> None:
    """Clone the source repository into dest.

    Args:
        repo: Repository location understood by ``git clone``.
        dest: Destination directory (must not exist).

    Raises:
        CloneError: If git cannot be started or exits non-zero.
    """
    args = ["git", "clone", repo, str(dest)]
    logger.debug("Running %s", " ".join(args))
    try:
        returncode = run_interactive(args)
    except OSError as e:
        raise CloneError(f"cloning repo: {e}") from e

    if returncode != 0:
        raise CloneError(f"cloning repo: git clone exited with status {returncode}")


def build_script(system: str | None = None) -> list[str]:
    """Return the build entry point command for a host.

    Args:
        system: platform.system() value. If None, the running host is used.

    Returns:
        Command to run from the tree's src directory.
    """
    name = (system if system is not None else platform.system()).lower()
    if name == "windows":
        return [".\\make.bat"]
    return ["./make.bash"]


def build_toolchain(dest: Path, system: str | None = None) -> None:
    """Build the toolchain in a cloned tree.

    Args:
        dest: Root of the cloned tree.
        system: platform.system() value. If None, the running host is used.

    Raises:
        BuildError: If the build script cannot be started or exits non-zero.
    """
    args = build_script(system)
    src = dest / "src"
    logger.debug("Running %s in %s", " ".join(args), src)
    try:
        returncode = run_interactive(args, cwd=str(src))
    except OSError as e:
        raise BuildError(f"building go: {e}") from e

    if returncode != 0:
        raise BuildError(f"building go: {args[0]} exited with status {returncode}")
