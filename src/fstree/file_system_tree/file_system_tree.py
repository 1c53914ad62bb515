"""File system tree snapshot with a configurable filter pipeline.

This module provides the main FileSystemTree class, which builds a snapshot of a
directory structure, prunes it according to TreeOptions and optional exclusion rules,
and exposes the rendered diagram together with summary counts.
"""

import logging
from pathlib import Path
from typing import Iterator, Optional

from fstree.exclusion_rules.base_rules import BaseExclusionRules
from fstree.file_system_tree.builder import build_tree
from fstree.file_system_tree.file_system_node import FileSystemNode
from fstree.file_system_tree.pruning import apply_options
from fstree.file_system_tree.render import format_summary, stream_tree_lines
from fstree.file_system_tree.traversal import directory_names, file_names, symlink_names
from fstree.options import TreeOptions
from fstree.types import PathType

logger = logging.getLogger(__name__)


class FileSystemTree:
    """A filtered snapshot of the file system below a root path.

    The snapshot is built lazily on first access, in a single synchronous walk, and then
    passed through the prune passes selected by ``options``. All counts and the rendered
    diagram describe the filtered tree, not the raw snapshot. When the filters drop the
    root, ``get_tree`` returns None, counts are zero and the diagram is empty.

    Symbolic links are shown as leaves and are never followed.

    Attributes:
        root_path (Path): Path to the root entry.
        options (TreeOptions): Filters and display settings.
        exclusion_rules (Optional[BaseExclusionRules]): Gitignore-style rules, if any.

    Example:
        >>> tree = FileSystemTree("src", TreeOptions(max_depth=2))  # doctest: +SKIP
        >>> print(tree.get_tree_representation(), end="")  # doctest: +SKIP
        \\-- src
            \\-- fstree
        >>> tree.get_summary()  # doctest: +SKIP
        '2 directories\\t0 files'
    """

    def __init__(
        self,
        root_path: PathType,
        options: Optional[TreeOptions] = None,
        exclusion_rules: Optional[BaseExclusionRules] = None,
    ) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root entry. Can be any path-like object.
            options: Filters and display settings. Defaults to TreeOptions().
            exclusion_rules: Gitignore-style rules applied after the name patterns.
        """
        self.root_path = Path(root_path)
        self.options = options if options is not None else TreeOptions()
        self.exclusion_rules = exclusion_rules
        self._snapshot: Optional[FileSystemNode] = None
        self._tree: Optional[FileSystemNode] = None
        self._built = False

    def _build_tree(self) -> FileSystemNode:
        """Build the snapshot and apply the filter pipeline.

        Returns:
            The unfiltered snapshot.

        Raises:
            FileNotFoundError: If the root path or an entry below it doesn't exist.
            PermissionError: If an entry or directory listing is inaccessible.
            InvalidFileTypeError: If an entry is neither file, directory nor symlink.
        """
        snapshot = build_tree(self.root_path)
        self._snapshot = snapshot
        self._tree = apply_options(snapshot, self.options, self.exclusion_rules)
        self._built = True
        if self._tree is None:
            logger.debug("Filters dropped the root %s; nothing to display", self.root_path)
        return snapshot

    def get_unfiltered_tree(self) -> FileSystemNode:
        """Get the raw snapshot, before any filter was applied."""
        if not self._built or self._snapshot is None:
            return self._build_tree()
        return self._snapshot

    def get_tree(self) -> Optional[FileSystemNode]:
        """Get the root of the filtered tree.

        Returns:
            The filtered root node, or None if the filters left nothing to display.
        """
        if not self._built:
            self._build_tree()
        return self._tree

    def get_directory_count(self) -> int:
        """Number of directories in the filtered tree, including the root."""
        tree = self.get_tree()
        return len(directory_names(tree)) if tree is not None else 0

    def get_file_count(self) -> int:
        """Number of regular files in the filtered tree."""
        tree = self.get_tree()
        return len(file_names(tree)) if tree is not None else 0

    def get_symlink_count(self) -> int:
        """Number of symbolic links in the filtered tree."""
        tree = self.get_tree()
        return len(symlink_names(tree)) if tree is not None else 0

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the tree diagram one newline-terminated line at a time.

        Yields nothing when the filters dropped the root.
        """
        tree = self.get_tree()
        if tree is None:
            return
        yield from stream_tree_lines(tree, self.options.show_full_paths)

    def get_tree_representation(self) -> str:
        """Get the complete tree diagram as a string."""
        return "".join(self.stream_tree_representation())

    def get_summary(self) -> str:
        """Get the ``"<D> directories\\t<F> files"`` summary line of the filtered tree."""
        tree = self.get_tree()
        if tree is None:
            return "0 directories\t0 files"
        return format_summary(tree)

    def refresh(self) -> None:
        """Discard the snapshot and rebuild it from the current file system state."""
        self._snapshot = None
        self._tree = None
        self._built = False
        self._build_tree()
