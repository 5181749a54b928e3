"""Host identification in Go's GOOS/GOARCH vocabulary.

The Python runtime reports the operating system and machine type in
its own spelling (``Linux``, ``x86_64``, ``AMD64``...). Go names the
same things ``linux`` and ``amd64``, and the directories produced by
the Go build use the Go spelling, so the host identity is normalised
once here.
"""

import platform
from dataclasses import dataclass

# platform.system() values mapped to GOOS
_GOOS_ALIASES: dict[str, str] = {
    "linux": "linux",
    "darwin": "darwin",
    "windows": "windows",
    "freebsd": "freebsd",
    "openbsd": "openbsd",
    "netbsd": "netbsd",
    "dragonfly": "dragonfly",
    "sunos": "solaris",
    "aix": "aix",
}

# platform.machine() values mapped to GOARCH
_GOARCH_ALIASES: dict[str, str] = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "i386": "386",
    "i486": "386",
    "i586": "386",
    "i686": "386",
    "x86": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv5l": "arm",
    "armv6l": "arm",
    "armv7l": "arm",
    "armv8l": "arm",
    "ppc64": "ppc64",
    "ppc64le": "ppc64le",
    "s390x": "s390x",
    "riscv64": "riscv64",
    "mips": "mips",
    "mips64": "mips64",
    "loongarch64": "loong64",
}


@dataclass(frozen=True, slots=True)
class PlatformIdentifiers:
    """Operating system and architecture of the executing host.

    Attributes:
        goos: Go operating system name (e.g., "linux").
        goarch: Go architecture name (e.g., "amd64").
    """

    goos: str
    goarch: str

    def __post_init__(self) -> None:
        """Validate identifiers after initialization."""
        if not self.goos or not self.goarch:
            msg = "Platform identifiers cannot be empty"
            raise ValueError(msg)

    @property
    def is_windows(self) -> bool:
        """Check if the host belongs to the Windows family."""
        return self.goos == "windows"

    def __str__(self) -> str:
        return f"{self.goos}_{self.goarch}"


def normalize_goos(system: str) -> str:
    """Map a platform.system() value to its GOOS spelling.

    Unknown systems are lower-cased and passed through.
    """
    key = system.strip().lower()
    return _GOOS_ALIASES.get(key, key)


def normalize_goarch(machine: str) -> str:
    """Map a platform.machine() value to its GOARCH spelling.

    Unknown machines are lower-cased and passed through.
    """
    key = machine.strip().lower()
    return _GOARCH_ALIASES.get(key, key)


def detect_platform() -> PlatformIdentifiers:
    """Detect the identifiers of the running host.

    Returns:
        PlatformIdentifiers for the current process.
    """
    return PlatformIdentifiers(
        goos=normalize_goos(platform.system()),
        goarch=normalize_goarch(platform.machine()),
    )
