"""Synchronous depth-first construction of file system trees."""

import logging
import os
import stat
from pathlib import Path

from fstree.exceptions import InvalidFileTypeError
from fstree.file_system_tree.file_system_node import FileSystemNode
from fstree.types import FileType, PathType

logger = logging.getLogger(__name__)


def build_tree(path: PathType) -> FileSystemNode:
    """Build an immutable snapshot of the file system entry at ``path``.

    Directories are listed once and their children built recursively, depth-first.
    Children are ordered by name. Symbolic links become leaf nodes and are never
    followed, so the resulting tree cannot contain cycles. Nothing is re-validated
    after construction; the tree is a snapshot, not a live view.

    Args:
        path: Path to the root entry. Can be any path-like object.

    Returns:
        The root node of the snapshot.

    Raises:
        FileNotFoundError: If ``path`` or any entry below it does not exist.
        PermissionError: If an entry's metadata or a directory listing is inaccessible.
        InvalidFileTypeError: If an entry is neither regular file, directory nor symlink.

    Example:
        >>> root = build_tree("src")  # doctest: +SKIP
        >>> root.name  # doctest: +SKIP
        'src'
    """
    path_str = os.fspath(path)
    logger.debug("Building tree from %s", path_str)
    return _build_node(path_str, display_name(path_str))


def display_name(path: str) -> str:
    """Return the name shown for the entry at ``path``.

    This is the last path component. For paths without a meaningful last component
    (``.``, ``..``, ``./``) the name of the resolved directory is used, and the path
    itself is used for the file system root.

    Example:
        >>> display_name("/tmp/project/file.txt")
        'file.txt'
        >>> display_name("/")
        '/'
    """
    name = os.path.basename(os.path.normpath(path))
    if name in ("", ".", ".."):
        name = Path(path).resolve().name
    return name or path


def _build_node(path: str, name: str) -> FileSystemNode:
    file_type = _file_type(path)

    if file_type is FileType.FILE:
        return FileSystemNode.file(path, name)
    if file_type is FileType.SYMLINK:
        return FileSystemNode.symbolic_link(path, name)

    try:
        entries = sorted(os.listdir(path))
    except PermissionError as e:
        raise PermissionError(f"Access denied to {path}: {e}") from e

    children = [_build_node(os.path.join(path, entry), entry) for entry in entries]
    logger.debug("Listed %s (%d entries)", path, len(children))
    return FileSystemNode.directory(path, name, children)


def _file_type(path: str) -> FileType:
    """Classify the entry at ``path`` without following symbolic links."""
    mode = os.lstat(path).st_mode
    if stat.S_ISLNK(mode):
        return FileType.SYMLINK
    if stat.S_ISDIR(mode):
        return FileType.DIRECTORY
    if stat.S_ISREG(mode):
        return FileType.FILE
    raise InvalidFileTypeError(path)
