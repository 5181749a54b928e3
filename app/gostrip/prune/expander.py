"""Placeholder substitution for deny-list templates."""

from pathlib import Path

from gostrip.core.platform import PlatformIdentifiers
from gostrip.prune.models import RemovalPattern

GOOS_PLACEHOLDER = "GOOS"
GOARCH_PLACEHOLDER = "GOARCH"


def expand_pattern(template: str, identifiers: PlatformIdentifiers) -> str:
    """Substitute every GOOS and GOARCH placeholder in a template.

    Args:
        template: Deny-list template (e.g., "pkg/tool/GOOS_GOARCH/nm").
        identifiers: Host identifiers to substitute.

    Returns:
        The template with all placeholders replaced.
    """
    expanded = template.replace(GOOS_PLACEHOLDER, identifiers.goos)
    return expanded.replace(GOARCH_PLACEHOLDER, identifiers.goarch)


def resolve_pattern(root: Path, pattern: RemovalPattern, identifiers: PlatformIdentifiers) -> Path:
    """Expand a pattern and join it onto the tree root.

    Templates are slash-separated; each segment is joined separately
    so the result uses the host path flavour.

    Args:
        root: Destination tree root.
        pattern: Deny-list pattern to resolve.
        identifiers: Host identifiers to substitute.

    Returns:
        Path of the entry under root.
    """
    expanded = expand_pattern(pattern.template, identifiers)
    return root.joinpath(*[part for part in expanded.split("/") if part])
