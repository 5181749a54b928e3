"""Fetch and build steps producing the tree that gets pruned."""

from gostrip.build.driver import build_script, build_toolchain, check_destination, clone_repository

__all__ = ["build_script", "build_toolchain", "check_destination", "clone_repository"]
