"""Unit tests for host identification."""

from unittest.mock import patch

import pytest
from gostrip.core.platform import (
    PlatformIdentifiers,
    detect_platform,
    normalize_goarch,
    normalize_goos,
)


class TestNormalize:
    """Tests for GOOS/GOARCH normalisation."""

    @pytest.mark.parametrize(
        ("system", "expected"),
        [("Linux", "linux"), ("Darwin", "darwin"), ("Windows", "windows"), ("SunOS", "solaris")],
    )
    def test_goos(self, system: str, expected: str) -> None:
        assert normalize_goos(system) == expected

    @pytest.mark.parametrize(
        ("machine", "expected"),
        [
            ("x86_64", "amd64"),
            ("AMD64", "amd64"),
            ("i686", "386"),
            ("aarch64", "arm64"),
            ("arm64", "arm64"),
            ("armv7l", "arm"),
            ("ppc64le", "ppc64le"),
        ],
    )
    def test_goarch(self, machine: str, expected: str) -> None:
        assert normalize_goarch(machine) == expected

    def test_unknown_values_pass_through_lowercased(self) -> None:
        assert normalize_goos("Plan9") == "plan9"
        assert normalize_goarch("WASM") == "wasm"


class TestDetectPlatform:
    """Tests for detect_platform."""

    def test_detects_linux_amd64(self) -> None:
        with (
            patch("gostrip.core.platform.platform.system", return_value="Linux"),
            patch("gostrip.core.platform.platform.machine", return_value="x86_64"),
        ):
            ids = detect_platform()

        assert ids == PlatformIdentifiers(goos="linux", goarch="amd64")
        assert str(ids) == "linux_amd64"
        assert ids.is_windows is False

    def test_detects_windows(self) -> None:
        with (
            patch("gostrip.core.platform.platform.system", return_value="Windows"),
            patch("gostrip.core.platform.platform.machine", return_value="AMD64"),
        ):
            ids = detect_platform()

        assert ids.is_windows is True
        assert ids.goarch == "amd64"


class TestPlatformIdentifiers:
    """Tests for PlatformIdentifiers validation."""

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            PlatformIdentifiers(goos="", goarch="amd64")

    def test_is_immutable(self) -> None:
        ids = PlatformIdentifiers(goos="linux", goarch="amd64")
        with pytest.raises(AttributeError):
            ids.goos = "darwin"  # type: ignore[misc]
