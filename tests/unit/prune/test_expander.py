"""Unit tests for deny-list placeholder expansion."""

from pathlib import Path

import pytest
from gostrip.core.platform import PlatformIdentifiers
from gostrip.prune.denylist import DEFAULT_REMOVAL_PATTERNS
from gostrip.prune.expander import expand_pattern, resolve_pattern
from gostrip.prune.models import RemovalPattern


class TestExpandPattern:
    """Tests for expand_pattern."""

    def test_substitutes_os_and_arch(self, linux_amd64: PlatformIdentifiers) -> None:
        """Both placeholders are replaced."""
        assert expand_pattern("pkg/tool/GOOS_GOARCH/nm", linux_amd64) == "pkg/tool/linux_amd64/nm"

    def test_no_placeholder_is_unchanged(self, linux_amd64: PlatformIdentifiers) -> None:
        """Templates without placeholders come back as-is."""
        assert expand_pattern("src/run.bash", linux_amd64) == "src/run.bash"

    def test_every_occurrence_is_replaced(self) -> None:
        """Repeated placeholders are all substituted."""
        ids = PlatformIdentifiers(goos="darwin", goarch="arm64")

        result = expand_pattern("GOOS/GOARCH/GOOS_GOARCH", ids)

        assert result == "darwin/arm64/darwin_arm64"

    @pytest.mark.parametrize(
        ("goos", "goarch"),
        [("linux", "amd64"), ("windows", "386"), ("freebsd", "riscv64"), ("plan9", "arm")],
    )
    def test_no_placeholder_remains(self, goos: str, goarch: str) -> None:
        """Expansion of every deny-list entry leaves no placeholder behind."""
        ids = PlatformIdentifiers(goos=goos, goarch=goarch)

        for pattern in DEFAULT_REMOVAL_PATTERNS:
            expanded = expand_pattern(pattern.template, ids)
            assert "GOOS" not in expanded
            assert "GOARCH" not in expanded

            segments = pattern.template.split("/")
            expanded_segments = expanded.split("/")
            assert len(expanded_segments) == len(segments)
            for before, after in zip(segments, expanded_segments, strict=True):
                if "GOOS" not in before and "GOARCH" not in before:
                    assert after == before


class TestResolvePattern:
    """Tests for resolve_pattern."""

    def test_joins_under_root(self, tmp_path: Path, linux_amd64: PlatformIdentifiers) -> None:
        """OS/arch specific tool paths resolve under the destination."""
        pattern = RemovalPattern(template="pkg/tool/GOOS_GOARCH/pprof", group="pprof")

        result = resolve_pattern(tmp_path, pattern, linux_amd64)

        assert result == tmp_path / "pkg" / "tool" / "linux_amd64" / "pprof"

    def test_top_level_entry(self, tmp_path: Path, linux_amd64: PlatformIdentifiers) -> None:
        """Single-segment templates resolve to a direct child."""
        pattern = RemovalPattern(template=".git", group="repo-metadata")

        assert resolve_pattern(tmp_path, pattern, linux_amd64) == tmp_path / ".git"
