"""Lazy traversal and aggregate queries over file system trees."""

from typing import Iterator, List

from anytree import LevelOrderGroupIter, PreOrderIter

from fstree.file_system_tree.file_system_node import FileSystemNode


def pre_order(node: FileSystemNode) -> Iterator[FileSystemNode]:
    """Yield ``node`` first, then the pre-order sequence of each child in child order.

    Every call starts a fresh traversal. Since trees are immutable, repeated calls yield
    the same sequence.

    Example:
        >>> root = FileSystemNode.directory("a", "a", [
        ...     FileSystemNode.directory("a/b", "b", [FileSystemNode.file("a/b/c", "c")]),
        ...     FileSystemNode.file("a/d", "d"),
        ... ])
        >>> [n.name for n in pre_order(root)]
        ['a', 'b', 'c', 'd']
    """
    return PreOrderIter(node)


def directory_names(node: FileSystemNode) -> List[str]:
    """Names of every directory in the tree, including ``node`` itself if it is one."""
    return [n.name for n in PreOrderIter(node, filter_=lambda n: n.is_directory)]


def file_names(node: FileSystemNode) -> List[str]:
    """Names of every regular file in the tree. Symbolic links are not files."""
    return [n.name for n in PreOrderIter(node, filter_=lambda n: n.is_file)]


def symlink_names(node: FileSystemNode) -> List[str]:
    """Names of every symbolic link in the tree."""
    return [n.name for n in PreOrderIter(node, filter_=lambda n: n.is_symlink)]


def depth(node: FileSystemNode) -> int:
    """Number of levels in the tree. A lone node has depth 1."""
    return sum(1 for _ in LevelOrderGroupIter(node))
