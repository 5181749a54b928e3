"""Static deny-list of paths removed from a built Go tree.

Each entry is a template relative to the tree root. ``GOOS`` and
``GOARCH`` are placeholders for the host identifiers. Entries are
grouped by concern so whole groups can be preserved on request.

The list is coupled to the layout of the Go source tree; paths that
a given Go release does not have are simply skipped at removal time.
"""

from collections.abc import Iterable

from gostrip.prune.models import RemovalPattern

# Group assigned to templates supplied through configuration
CUSTOM_GROUP = "custom"


def _group(name: str, *templates: str) -> tuple[RemovalPattern, ...]:
    return tuple(RemovalPattern(template=t, group=name) for t in templates)


DEFAULT_REMOVAL_PATTERNS: tuple[RemovalPattern, ...] = (
    # Repository metadata and web leftovers
    *_group(
        "repo-metadata",
        ".git",
        ".gitattributes",
        ".gitignore",
        "CONTRIBUTING.md",
        "VERSION.cache",
        "favicon.ico",
        "robots.txt",
    ),
    # Trees only needed to build or test the toolchain itself
    *_group(
        "toolchain-sources",
        "api",
        "include",
        "lib",
        "misc",
        "pkg/obj",
        "test",
    ),
    *_group("dist", "bin/dist"),
    *_group("compiled-commands", "pkg/GOOS_GOARCH/cmd"),
    # Tools not needed to build programs
    *_group(
        "tools",
        "pkg/tool/GOOS_GOARCH/dist",
        "pkg/tool/GOOS_GOARCH/fix",
        "pkg/tool/GOOS_GOARCH/nm",
        "pkg/tool/GOOS_GOARCH/objdump",
        "pkg/tool/GOOS_GOARCH/yacc",
        "src/cmd/dist",
        "src/cmd/fix",
        "src/cmd/nm",
        "src/cmd/objdump",
        "src/cmd/yacc",
    ),
    # Compiler, assembler and linker sources (C toolchain era)
    *_group(
        "compiler-sources",
        "src/cmd/5a",
        "src/cmd/5g",
        "src/cmd/5l",
        "src/cmd/6a",
        "src/cmd/6g",
        "src/cmd/6l",
        "src/cmd/8a",
        "src/cmd/8g",
        "src/cmd/8l",
        "src/cmd/9a",
        "src/cmd/9g",
        "src/cmd/9l",
        "src/cmd/cc",
        "src/cmd/gc",
        "src/cmd/link",
        "src/cmd/ld",
    ),
    RemovalPattern(template="src/cmd/pack", group="pack", uncertain=True),
    *_group("go-command-sources", "src/cmd/go"),
    *_group(
        "build-scripts",
        "src/all.bash",
        "src/all.bat",
        "src/all.rc",
        "src/androidtest.bash",
        "src/clean.bash",
        "src/clean.bat",
        "src/clean.rc",
        "src/make.Dist",
        "src/make.bash",
        "src/make.bat",
        "src/make.rc",
        "src/nacltest.bash",
        "src/race.bash",
        "src/race.bat",
        "src/run.bash",
        "src/run.bat",
        "src/run.rc",
    ),
    *_group("c-libraries", "src/lib9", "src/libbio", "src/liblink"),
    *_group("pprof", "pkg/tool/GOOS_GOARCH/pprof", "src/cmd/pprof"),
    *_group("gofmt", "bin/gofmt", "src/cmd/gofmt"),
    *_group("doc", "doc"),
)

KNOWN_GROUPS: frozenset[str] = frozenset(p.group for p in DEFAULT_REMOVAL_PATTERNS)


def select_patterns(
    patterns: Iterable[RemovalPattern] = DEFAULT_REMOVAL_PATTERNS,
    *,
    keep_groups: Iterable[str] = (),
    keep_uncertain: bool = False,
    extra: Iterable[str] = (),
) -> tuple[RemovalPattern, ...]:
    """Build the effective deny-list for a run.

    Args:
        patterns: Base deny-list, in removal order.
        keep_groups: Groups whose entries are preserved.
        keep_uncertain: If True, entries flagged uncertain are preserved.
        extra: Additional templates appended in the custom group.

    Returns:
        The deny-list to expand and remove, base order preserved.
    """
    keep = set(keep_groups)
    selected = [
        p
        for p in patterns
        if p.group not in keep and not (keep_uncertain and p.uncertain)
    ]
    selected.extend(RemovalPattern(template=t, group=CUSTOM_GROUP) for t in extra)
    return tuple(selected)
