"""ASCII tree diagrams and summary lines for file system trees."""

from typing import Iterator

from fstree.file_system_tree.file_system_node import FileSystemNode
from fstree.file_system_tree.traversal import directory_names, file_names

TEE = "+--"
CORNER = "\\--"
VERTICAL = "|   "
BLANK = "    "


def stream_tree_lines(node: FileSystemNode, show_full_path: bool = False) -> Iterator[str]:
    """Generate the tree diagram one line at a time.

    Each node contributes one line, ``<indent><connector> <name>``, followed by the lines
    of its children. The root is rendered as the last entry of an implicit top level.
    Every yielded line ends with a newline.

    Args:
        node: Root of the tree to render.
        show_full_path: Show each node's full path instead of its name.

    Yields:
        Lines of the diagram.

    Example:
        >>> root = FileSystemNode.directory("a", "a", [
        ...     FileSystemNode.directory("a/b", "b", [FileSystemNode.file("a/b/c", "c")]),
        ...     FileSystemNode.file("a/x.txt", "x.txt"),
        ... ])
        >>> print("".join(stream_tree_lines(root)), end="")
        \\-- a
            +-- b
            |   \\-- c
            \\-- x.txt
    """

    def write_node(current: FileSystemNode, prefix: str, is_last: bool) -> Iterator[str]:
        connector = CORNER if is_last else TEE
        # path already ends with the entry name, so it is shown instead of "<path>/<name>"
        label = current.path if show_full_path else current.name
        yield f"{prefix}{connector} {label}\n"

        child_prefix = prefix + (BLANK if is_last else VERTICAL)
        last_index = len(current.children) - 1
        for i, child in enumerate(current.children):
            yield from write_node(child, child_prefix, i == last_index)

    yield from write_node(node, "", True)


def render_tree(node: FileSystemNode, show_full_path: bool = False) -> str:
    """Return the complete tree diagram as a single string ending with a newline."""
    return "".join(stream_tree_lines(node, show_full_path))


def format_summary(node: FileSystemNode) -> str:
    """Format the directory and file counts of ``node`` as ``"<D> directories\\t<F> files"``.

    Example:
        >>> format_summary(FileSystemNode.directory("a", "a", [FileSystemNode.file("a/x", "x")]))
        '1 directories\\t1 files'
    """
    return f"{len(directory_names(node))} directories\t{len(file_names(node))} files"
