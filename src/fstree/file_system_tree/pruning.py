"""Composable prune passes over immutable file system trees.

Every pass takes a tree and returns either a replacement tree or ``None``, meaning the
whole tree was dropped. Passes never mutate their input and never fail on a
well-formed tree. The order in which passes are composed matters; ``apply_options``
applies them in the order used by the command-line tool.
"""

import logging
import os
import re
from typing import Callable, List, Optional, Tuple

from fstree.exclusion_rules.base_rules import BaseExclusionRules
from fstree.file_system_tree.file_system_node import FileSystemNode
from fstree.options import TreeOptions

logger = logging.getLogger(__name__)

Predicate = Callable[[FileSystemNode], bool]
PrunePass = Callable[[FileSystemNode], Optional[FileSystemNode]]


def drop_where(node: FileSystemNode, predicate: Predicate) -> Optional[FileSystemNode]:
    """Drop every node, with its subtree, for which ``predicate`` returns True.

    A directory whose children were all dropped is kept, with no children.

    Example:
        >>> root = FileSystemNode.directory("a", "a", [FileSystemNode.file("a/.y", ".y")])
        >>> drop_where(root, lambda n: n.is_hidden).children
        ()
        >>> drop_where(root, lambda n: n.is_directory) is None
        True
    """
    if predicate(node):
        return None
    if not node.is_directory:
        return node
    kept: List[FileSystemNode] = []
    for child in node.children:
        survivor = drop_where(child, predicate)
        if survivor is not None:
            kept.append(survivor)
    return node.with_children(kept)


def drop_below_depth(node: FileSystemNode, max_depth: int) -> Optional[FileSystemNode]:
    """Keep only the top ``max_depth`` levels of the tree.

    The root is level 1, so a ``max_depth`` of zero or less drops everything and a
    ``max_depth`` of 1 keeps a childless root.
    """
    if max_depth <= 0:
        return None
    if not node.is_directory:
        return node
    kept: List[FileSystemNode] = []
    for child in node.children:
        survivor = drop_below_depth(child, max_depth - 1)
        if survivor is not None:
            kept.append(survivor)
    return node.with_children(kept)


def drop_empty(node: FileSystemNode) -> Optional[FileSystemNode]:
    """Drop directories that have no children once their own subtrees are pruned.

    Files and symlinks always survive. The pass is idempotent.
    """
    if not node.is_directory:
        return node
    kept: List[FileSystemNode] = []
    for child in node.children:
        survivor = drop_empty(child)
        if survivor is not None:
            kept.append(survivor)
    if not kept:
        return None
    return node.with_children(kept)


def drop_unmatched_names(node: FileSystemNode, pattern: str) -> Optional[FileSystemNode]:
    """Drop non-directory nodes whose name does not contain a match for ``pattern``."""
    regex = re.compile(pattern)
    return drop_where(node, lambda n: not n.is_directory and regex.search(n.name) is None)


def drop_matching_names(node: FileSystemNode, pattern: str) -> Optional[FileSystemNode]:
    """Drop non-directory nodes whose name contains a match for ``pattern``."""
    regex = re.compile(pattern)
    return drop_where(node, lambda n: not n.is_directory and regex.search(n.name) is not None)


def drop_excluded(node: FileSystemNode, exclusion_rules: BaseExclusionRules) -> Optional[FileSystemNode]:
    """Drop nodes whose path relative to ``node`` is excluded by ``exclusion_rules``.

    Relative paths use ``/`` separators and directories get a trailing ``/`` so that
    directory-only gitignore patterns apply. The root itself is never excluded.
    """
    root_path = node.path

    def excluded(candidate: FileSystemNode) -> bool:
        if candidate is node:
            return False
        relative_path = os.path.relpath(candidate.path, root_path).replace(os.sep, "/")
        if candidate.is_directory:
            relative_path += "/"
        return exclusion_rules.exclude(relative_path)

    return drop_where(node, excluded)


def apply_options(
    node: FileSystemNode,
    options: TreeOptions,
    exclusion_rules: Optional[BaseExclusionRules] = None,
) -> Optional[FileSystemNode]:
    """Run the prune passes selected by ``options`` in their fixed order.

    The order is: depth, directories only, hidden entries, match pattern, exclude
    pattern, exclusion rules, empty directories. Returns None as soon as a pass
    drops the root.

    Args:
        node: Root of the tree to filter.
        options: Selected filters.
        exclusion_rules: Optional gitignore-style rules applied after the name patterns.

    Returns:
        The filtered tree, or None if nothing is left to show.
    """
    passes: List[Tuple[str, PrunePass]] = []
    if options.max_depth is not None:
        max_depth = options.max_depth
        passes.append(("depth", lambda n: drop_below_depth(n, max_depth)))
    if options.directories_only:
        passes.append(("directories only", lambda n: drop_where(n, lambda c: not c.is_directory)))
    if not options.show_hidden:
        passes.append(("hidden", lambda n: drop_where(n, lambda c: c.is_hidden)))
    if options.match_pattern is not None:
        match_pattern = options.match_pattern
        passes.append(("match pattern", lambda n: drop_unmatched_names(n, match_pattern)))
    if options.exclude_pattern is not None:
        exclude_pattern = options.exclude_pattern
        passes.append(("exclude pattern", lambda n: drop_matching_names(n, exclude_pattern)))
    if exclusion_rules is not None and exclusion_rules.has_rules():
        rules = exclusion_rules
        passes.append(("exclusion rules", lambda n: drop_excluded(n, rules)))
    if options.exclude_empty:
        passes.append(("empty directories", drop_empty))

    for label, prune in passes:
        pruned = prune(node)
        if pruned is None:
            logger.debug("Prune pass '%s' dropped the root", label)
            return None
        node = pruned
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Prune pass '%s' left %d nodes", label, sum(1 for _ in node))
    return node
