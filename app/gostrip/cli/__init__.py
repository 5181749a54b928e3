"""CLI package for gostrip.

This package contains the Typer application.
"""

from gostrip.cli.main import app

__all__ = ["app"]
