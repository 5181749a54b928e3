"""Integration tests for pruning a synthetic built Go tree.

These tests run the pruning engine against real files in a temporary
directory, without cloning or building anything.
"""

import os
import stat
import sys
from pathlib import Path

import pytest
from gostrip.cli.main import prune_tree
from gostrip.core.config import GostripConfig
from gostrip.core.errors import PruneError
from gostrip.core.platform import PlatformIdentifiers
from gostrip.prune.models import PlanOrigin, RemovalPattern
from gostrip.prune.pruner import Pruner
from gostrip.prune.remover import get_remover


def test_prune_tree_with_minimal_deny_list(go_tree: Path, linux_amd64: PlatformIdentifiers) -> None:
    """Static targets and test artifacts go, non-test siblings stay."""
    pruner = Pruner(
        go_tree,
        linux_amd64,
        get_remover("Linux"),
        patterns=[
            RemovalPattern(template="doc", group="doc"),
            RemovalPattern(template="src/run.bash", group="build-scripts"),
        ],
    )

    report = pruner.prune()

    assert not (go_tree / "doc").exists()
    assert not (go_tree / "src" / "run.bash").exists()
    assert not (go_tree / "src" / "pkg" / "foo" / "foo_test.go").exists()
    assert not (go_tree / "src" / "pkg" / "foo" / "testdata").exists()
    assert (go_tree / "src" / "pkg" / "foo" / "foo.go").exists()
    assert (go_tree / "src" / "make.bash").exists()
    assert report.count(PlanOrigin.DYNAMIC) >= 3


def test_prune_tree_resolves_host_tool_dir(go_tree: Path, linux_amd64: PlatformIdentifiers) -> None:
    """pkg/tool/GOOS_GOARCH entries hit pkg/tool/linux_amd64."""
    pruner = Pruner(
        go_tree,
        linux_amd64,
        get_remover("Linux"),
        patterns=[RemovalPattern(template="pkg/tool/GOOS_GOARCH/nm", group="tools")],
    )

    report = pruner.prune()

    assert report.entries[0].path == go_tree / "pkg" / "tool" / "linux_amd64" / "nm"
    assert not (go_tree / "pkg" / "tool" / "linux_amd64" / "nm").exists()
    assert (go_tree / "pkg" / "tool" / "linux_amd64" / "compile").exists()


def test_prune_tree_with_defaults(go_tree: Path) -> None:
    """prune_tree applies the default configuration for the running host."""
    report = prune_tree(go_tree, GostripConfig(), keep_groups=[], keep_uncertain=False)

    assert not (go_tree / "doc").exists()
    assert not (go_tree / ".git").exists()
    assert not (go_tree / "src" / "fmt" / "print_test.go").exists()
    assert (go_tree / "src" / "fmt" / "print.go").exists()
    assert report.removed


@pytest.mark.skipif(
    sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="requires POSIX permissions enforced for a non-root user",
)
def test_permission_denied_stops_before_scan(
    go_tree: Path, linux_amd64: PlatformIdentifiers
) -> None:
    """A static path that cannot be removed aborts the run and is named."""
    src = go_tree / "src"
    src.chmod(stat.S_IRUSR | stat.S_IXUSR)
    try:
        pruner = Pruner(
            go_tree,
            linux_amd64,
            get_remover("Linux"),
            patterns=[RemovalPattern(template="src/run.bash", group="build-scripts")],
        )

        with pytest.raises(PruneError) as exc_info:
            pruner.prune()
    finally:
        src.chmod(stat.S_IRWXU)

    assert exc_info.value.path == src / "run.bash"
    assert str(src / "run.bash") in str(exc_info.value)
    assert (src / "pkg" / "foo" / "foo_test.go").exists()
