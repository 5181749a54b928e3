"""gostrip configuration and settings.

Configuration is optional and stored in ~/.config/gostrip/config.toml.
It supplies the defaults for everything the command line can set,
plus the layout knobs of the pruning engine (scan root, test-data
marker, test-source suffix) that the command line does not expose.

Example:
    repo = "https://github.com/golang/go"
    keep_groups = ["gofmt", "doc"]
    extra_patterns = ["src/cmd/vet"]
"""

import logging
import tomllib
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from gostrip.core.errors import ConfigError, ConfigNotFoundError, ConfigParseError
from gostrip.core.paths import get_config_path
from gostrip.prune.denylist import KNOWN_GROUPS

logger = logging.getLogger(__name__)

DEFAULT_REPO = "https://go.googlesource.com/go"


class GostripConfig(BaseModel):
    """Configuration for a gostrip run.

    Attributes:
        repo: Repository location passed to ``git clone``.
        keep_groups: Deny-list groups to preserve (e.g., "gofmt").
        keep_uncertain: Preserve deny-list entries flagged as uncertain.
        extra_patterns: Additional templates appended to the deny-list.
        scan_subdir: Subdirectory of the tree walked for test artifacts.
        test_data_dir: Directory name marking test data.
        test_suffix: File name suffix marking test sources.
        ignore_scan_errors: Skip unreadable entries during the walk.
    """

    model_config = ConfigDict(extra="forbid")

    repo: Annotated[
        str,
        Field(min_length=1, description="Repository location"),
    ] = DEFAULT_REPO
    keep_groups: Annotated[
        list[str],
        Field(description="Deny-list groups to preserve"),
    ] = []
    keep_uncertain: Annotated[
        bool,
        Field(description="Preserve deny-list entries flagged as uncertain"),
    ] = False
    extra_patterns: Annotated[
        list[str],
        Field(description="Additional removal templates"),
    ] = []
    scan_subdir: Annotated[
        str,
        Field(min_length=1, description="Subdirectory scanned for test artifacts"),
    ] = "src"
    test_data_dir: Annotated[
        str,
        Field(min_length=1, description="Test-data directory name"),
    ] = "testdata"
    test_suffix: Annotated[
        str,
        Field(min_length=1, description="Test-source file suffix"),
    ] = "_test.go"
    ignore_scan_errors: Annotated[
        bool,
        Field(description="Skip unreadable entries while scanning"),
    ] = True

    @field_validator("keep_groups")
    @classmethod
    def validate_groups(cls, v: list[str]) -> list[str]:
        """Reject group names that do not exist in the deny-list."""
        unknown = sorted(set(v) - KNOWN_GROUPS)
        if unknown:
            msg = f"unknown deny-list group(s): {', '.join(unknown)}"
            raise ValueError(msg)
        return v

    @field_validator("extra_patterns")
    @classmethod
    def validate_patterns(cls, v: list[str]) -> list[str]:
        """Reject empty templates and templates escaping the tree root."""
        for template in v:
            if not template.strip():
                msg = "extra pattern cannot be empty"
                raise ValueError(msg)
            _require_inside_root(template, "extra pattern")
        return v

    @field_validator("scan_subdir")
    @classmethod
    def validate_scan_subdir(cls, v: str) -> str:
        """Reject scan directories outside the tree root."""
        _require_inside_root(v, "scan_subdir")
        return v


def _require_inside_root(value: str, name: str) -> None:
    """Ensure a path stays inside the tree it is joined onto.

    Both POSIX and Windows spellings are checked so a config file means
    the same thing on every host.

    Raises:
        ValueError: If the path is absolute, has a drive or contains "..".
    """
    posix = PurePosixPath(value)
    windows = PureWindowsPath(value)
    if posix.is_absolute() or windows.is_absolute() or windows.drive or windows.root:
        msg = f"{name} must be relative: {value}"
        raise ValueError(msg)
    if ".." in posix.parts or ".." in windows.parts:
        msg = f"{name} must not contain '..': {value}"
        raise ValueError(msg)


def load_config(path: Path | None = None) -> GostripConfig:
    """Load configuration from a TOML file.

    When no path is given the default location is used and a missing
    file yields the built-in defaults. An explicitly given path must
    exist.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated GostripConfig object.

    Raises:
        ConfigNotFoundError: If an explicit config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        if path is not None:
            raise ConfigNotFoundError(f"config file not found: {config_path}")
        logger.debug("No config file at %s, using defaults", config_path)
        return GostripConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"failed to read config {config_path}: {e}") from e

    logger.debug("Loaded config from %s", config_path)

    try:
        return GostripConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"invalid config content in {config_path}: {e}") from e
