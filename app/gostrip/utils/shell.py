"""Shell execution utilities.

Provides subprocess execution for the removal commands (captured
output) and the clone/build steps (inherited terminal).
"""

import subprocess
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


def run_command(
    args: list[str],
    *,
    timeout: float | None = 60.0,
) -> CommandResult:
    """Execute a shell command and capture its error output.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait for command.

    Returns:
        CommandResult with stderr and returncode.

    Raises:
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=False,
        timeout=timeout,
    )
    return CommandResult(stderr=result.stderr, returncode=result.returncode)


def run_interactive(
    args: list[str],
    *,
    cwd: str | None = None,
) -> int:
    """Execute a command inheriting the terminal, without a timeout.

    Unlike run_command(), this does NOT capture stdout/stderr, so the
    progress output of long-running steps reaches the user directly.

    Args:
        args: Command and arguments to execute.
        cwd: Working directory for the command.

    Returns:
        Exit code of the command.

    Raises:
        FileNotFoundError: If command executable is not found.
        OSError: If command cannot be executed.
    """
    result = subprocess.run(args, check=False, cwd=cwd)
    return result.returncode
