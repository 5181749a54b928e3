"""gostrip - build a minimal Go toolchain installation.

Clones a Go source checkout, builds it, and prunes everything that is
not needed to compile and run Go programs.
"""

__version__ = "0.1.0"
