"""Main CLI application entry point.

Defines the Typer application: a single command that clones, builds
and prunes a Go tree into a destination directory.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from gostrip import __version__
from gostrip.build.driver import build_toolchain, check_destination, clone_repository
from gostrip.core.config import GostripConfig, load_config
from gostrip.core.errors import GostripError
from gostrip.core.platform import detect_platform
from gostrip.prune.denylist import KNOWN_GROUPS, select_patterns
from gostrip.prune.models import PlanOrigin, PruneReport
from gostrip.prune.pruner import Pruner
from gostrip.prune.remover import get_remover
from gostrip.prune.scanner import ArtifactScanner
from gostrip.utils.formatting import (
    console,
    create_plan_table,
    err_console,
    print_error,
    print_info,
    print_success,
)

app = typer.Typer(
    name="gostrip",
    help="Build a minimal Go installation.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"gostrip version {__version__}")
        raise typer.Exit()


def keep_callback(value: list[str] | None) -> list[str]:
    """Validate --keep group names."""
    groups = value or []
    unknown = sorted(set(groups) - KNOWN_GROUPS)
    if unknown:
        msg = f"unknown group(s): {', '.join(unknown)} (known: {', '.join(sorted(KNOWN_GROUPS))})"
        raise typer.BadParameter(msg)
    return groups


def setup_logging(verbose: bool) -> None:
    """Route log records to the error console."""
    handler = RichHandler(console=err_console, show_time=False, show_path=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


@app.command()
def main(
    destination: Annotated[
        Path,
        typer.Argument(help="Directory to create the Go installation in (must not exist)."),
    ],
    repo: Annotated[
        str | None,
        typer.Option("--repo", help="Repository location.  [default: https://go.googlesource.com/go]"),
    ] = None,
    keep: Annotated[
        list[str] | None,
        typer.Option(
            "--keep",
            "-k",
            callback=keep_callback,
            help="Preserve a deny-list group (e.g. gofmt, pprof, doc). Repeatable.",
        ),
    ] = None,
    keep_pack: Annotated[
        bool | None,
        typer.Option(
            "--keep-pack/--remove-pack",
            help="Preserve or remove src/cmd/pack.  [default: remove]",
            show_default=False,
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Configuration file."),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Clone and build, then show what would be removed."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Fetch, build and strip a Go toolchain.

    Clones the Go repository into DESTINATION, runs the platform build
    script, then removes everything that is not needed to build Go
    programs with the result.
    """
    setup_logging(verbose)

    try:
        config = load_config(config_path)
        check_destination(destination)

        clone_repository(repo or config.repo, destination)
        build_toolchain(destination)

        report = prune_tree(
            destination,
            config,
            keep_groups=[*config.keep_groups, *(keep or [])],
            keep_uncertain=config.keep_uncertain if keep_pack is None else keep_pack,
            dry_run=dry_run,
        )
    except GostripError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    _print_summary(report, dry_run)


def prune_tree(
    destination: Path,
    config: GostripConfig,
    *,
    keep_groups: list[str],
    keep_uncertain: bool,
    dry_run: bool = False,
) -> PruneReport:
    """Prune a built tree according to the configuration.

    Args:
        destination: Root of the built tree.
        config: Loaded configuration.
        keep_groups: Deny-list groups to preserve.
        keep_uncertain: Preserve entries flagged as uncertain.
        dry_run: If True, only report what would be removed.

    Returns:
        PruneReport of the pass.

    Raises:
        PruneError: If a path cannot be removed.
        ScanError: If the test-artifact walk cannot be carried out.
    """
    patterns = select_patterns(
        keep_groups=keep_groups,
        keep_uncertain=keep_uncertain,
        extra=config.extra_patterns,
    )
    scanner = ArtifactScanner(
        test_data_dir=config.test_data_dir,
        test_suffix=config.test_suffix,
        ignore_errors=config.ignore_scan_errors,
    )
    pruner = Pruner(
        destination,
        detect_platform(),
        get_remover(dry_run=dry_run),
        patterns=patterns,
        scanner=scanner,
        scan_subdir=config.scan_subdir,
    )
    return pruner.prune()


def _print_summary(report: PruneReport, dry_run: bool) -> None:
    """Print the outcome of a pruning pass."""
    static = report.count(PlanOrigin.STATIC)
    dynamic = report.count(PlanOrigin.DYNAMIC)

    if dry_run:
        present = [e for e, r in zip(report.entries, report.results, strict=True) if not r.missing]
        console.print(create_plan_table(present, title="Paths that would be removed"))
        print_info(f"Would remove {len(present)} paths from {report.root}")
        return

    missing = report.count_missing(PlanOrigin.STATIC)
    print_success(f"Pruned {len(report.removed)} paths from {report.root}")
    print_info(
        f"{static} deny-list entries ({missing} not present), "
        f"{dynamic} test artifacts"
    )


if __name__ == "__main__":
    app()
