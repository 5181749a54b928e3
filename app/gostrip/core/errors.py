"""Exception hierarchy for gostrip.

Every fatal condition of a run is expressed as a subclass of
GostripError so the CLI can turn it into a single diagnostic line
and a non-zero exit status.
"""

from pathlib import Path


class GostripError(Exception):
    """Base exception for all gostrip errors."""


class DestinationExistsError(GostripError):
    """Raised when the destination directory already exists."""

    def __init__(self, destination: Path) -> None:
        self.destination = destination
        super().__init__(f"destination {destination} already exists; won't overwrite.")


class DriverError(GostripError):
    """Base exception for clone and build subprocess failures."""


class CloneError(DriverError):
    """Raised when cloning the source repository fails."""


class BuildError(DriverError):
    """Raised when the toolchain build script fails."""


class PruneError(GostripError):
    """Raised when a path that exists cannot be removed.

    Attributes:
        path: The path whose removal failed.
        reason: Underlying error text.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"removing {path}: {reason}")


class ScanError(GostripError):
    """Raised when the test-artifact walk cannot be carried out.

    Attributes:
        reason: Underlying error text.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"looking for test data: {reason}")


class ConfigError(GostripError):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested config file does not exist."""


class ConfigParseError(ConfigError):
    """Raised when a config file is not valid TOML."""
