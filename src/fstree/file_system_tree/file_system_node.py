"""Immutable node representation for file system entries in the tree."""

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Tuple

from anytree import PreOrderIter

from fstree.types import FileType


@dataclass(frozen=True)
class FileSystemNode:
    """Immutable value representing one file system entry and, for directories, its subtree.

    A node is one of three variants, distinguished by ``file_type``: a regular file, a
    symbolic link or a directory owning an ordered tuple of child nodes. Files and
    symlinks never have children. Nodes are never mutated; filter passes build new
    directory nodes with a reduced ``children`` tuple instead.

    Equality is structural: two nodes are equal when their type, path, name and
    children (recursively, in order) are equal.

    Attributes:
        file_type (FileType): Which variant this node is.
        path (str): The path at which the entry was discovered.
        name (str): The display name of the entry.
        children (tuple[FileSystemNode, ...]): Child nodes. Always empty for non-directories.

    Example:
        >>> root = FileSystemNode.directory("a", "a", [FileSystemNode.file("a/x.txt", "x.txt")])
        >>> root.is_directory
        True
        >>> [node.name for node in root]
        ['a', 'x.txt']
        >>> FileSystemNode.file("a/.y", ".y").is_hidden
        True
    """

    file_type: FileType
    path: str
    name: str
    children: Tuple["FileSystemNode", ...] = field(default=())

    def __post_init__(self) -> None:
        if self.file_type is not FileType.DIRECTORY and self.children:
            raise ValueError(f"Only directories can have children: {self.path}")
        # Accept any iterable at construction, store a tuple
        object.__setattr__(self, "children", tuple(self.children))

    @classmethod
    def file(cls, path: str, name: str) -> "FileSystemNode":
        """Create a regular file node."""
        return cls(FileType.FILE, path, name)

    @classmethod
    def symbolic_link(cls, path: str, name: str) -> "FileSystemNode":
        """Create a symbolic link node. Links are leaves and are never dereferenced."""
        return cls(FileType.SYMLINK, path, name)

    @classmethod
    def directory(cls, path: str, name: str, children: Iterable["FileSystemNode"] = ()) -> "FileSystemNode":
        """Create a directory node owning the given children in order."""
        return cls(FileType.DIRECTORY, path, name, tuple(children))

    def with_children(self, children: Iterable["FileSystemNode"]) -> "FileSystemNode":
        """Return a copy of this directory with ``children`` replacing its current children.

        Args:
            children: The new child nodes, in order.

        Returns:
            A new directory node. The receiver is left unchanged.
        """
        return replace(self, children=tuple(children))

    @property
    def is_directory(self) -> bool:
        return self.file_type is FileType.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.file_type is FileType.FILE

    @property
    def is_symlink(self) -> bool:
        return self.file_type is FileType.SYMLINK

    @property
    def is_hidden(self) -> bool:
        """True if the entry name starts with a ``.`` character."""
        return self.name.startswith(".")

    def __iter__(self) -> Iterator["FileSystemNode"]:
        """Iterate over this node and all of its descendants in pre-order."""
        return iter(PreOrderIter(self))
