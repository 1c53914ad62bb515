"""Directory tree listing utilities.

This package builds an immutable snapshot of a filesystem subtree, prunes it with
composable filters and renders it as an indented tree diagram.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("fstree")
except PackageNotFoundError:
    __version__ = "unknown"
