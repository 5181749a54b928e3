"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from gostrip.core.platform import PlatformIdentifiers


def make_tree(root: Path, paths: list[str]) -> Path:
    """Create files (and their parent directories) under root.

    Entries ending with "/" are created as empty directories.
    """
    for rel in paths:
        target = root / rel
        if rel.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(f"contents of {rel}\n")
    return root


@pytest.fixture
def linux_amd64() -> PlatformIdentifiers:
    """Identifiers of a linux/amd64 host."""
    return PlatformIdentifiers(goos="linux", goarch="amd64")


@pytest.fixture
def go_tree(tmp_path: Path) -> Path:
    """A small built Go tree with static and dynamic removal targets."""
    return make_tree(
        tmp_path / "go",
        [
            ".git/HEAD",
            "VERSION",
            "doc/install.html",
            "misc/cgo/test.go",
            "bin/go",
            "bin/gofmt",
            "pkg/linux_amd64/fmt.a",
            "pkg/linux_amd64/cmd/go.a",
            "pkg/tool/linux_amd64/compile",
            "pkg/tool/linux_amd64/nm",
            "pkg/tool/linux_amd64/pprof",
            "src/run.bash",
            "src/make.bash",
            "src/cmd/pack/pack.go",
            "src/cmd/go/main.go",
            "src/cmd/go/testdata/script.txt",
            "src/fmt/print.go",
            "src/fmt/print_test.go",
            "src/pkg/foo/foo.go",
            "src/pkg/foo/foo_test.go",
            "src/pkg/foo/testdata/x",
            "src/pkg/foo/testdata/nested/y_test.go",
        ],
    )


@pytest.fixture
def tree_factory():
    """Return the make_tree helper for building ad-hoc trees."""
    return make_tree
