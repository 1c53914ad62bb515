"""File system tree snapshots with composable filters.

This package provides the immutable node model, the builder that walks the file
system, prune passes, traversal queries and the ASCII renderer.
"""

from .file_system_node import FileSystemNode
from .file_system_tree import FileSystemTree

__all__ = [
    "FileSystemNode",
    "FileSystemTree",
]
