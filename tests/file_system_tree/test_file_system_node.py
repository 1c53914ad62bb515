"""Unit tests for the FileSystemNode class."""

import dataclasses

import pytest

from fstree.file_system_tree.file_system_node import FileSystemNode
from fstree.types import FileType


def test_file_system_node_variants():
    """Test the three node variants and their predicates."""
    file_node = FileSystemNode.file("/a/x.txt", "x.txt")
    assert file_node.file_type is FileType.FILE
    assert file_node.is_file
    assert not file_node.is_directory
    assert not file_node.is_symlink
    assert file_node.children == ()

    link_node = FileSystemNode.symbolic_link("/a/link", "link")
    assert link_node.is_symlink
    assert not link_node.is_file
    assert not link_node.is_directory
    assert link_node.children == ()

    dir_node = FileSystemNode.directory("/a", "a", [file_node, link_node])
    assert dir_node.is_directory
    assert dir_node.children == (file_node, link_node)
    assert dir_node.path == "/a"
    assert dir_node.name == "a"


def test_file_system_node_is_hidden():
    assert FileSystemNode.file("/a/.y", ".y").is_hidden
    assert FileSystemNode.directory("/a/.git", ".git").is_hidden
    assert not FileSystemNode.file("/a/x.txt", "x.txt").is_hidden


def test_file_system_node_name_may_differ_from_path():
    node = FileSystemNode.directory(".", "project")
    assert node.path == "."
    assert node.name == "project"


def test_file_system_node_is_immutable():
    node = FileSystemNode.file("/a/x.txt", "x.txt")
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.name = "other"


def test_only_directories_have_children():
    child = FileSystemNode.file("/a/x", "x")
    with pytest.raises(ValueError, match="Only directories"):
        FileSystemNode(FileType.FILE, "/a/y", "y", (child,))


def test_with_children_returns_new_node():
    x = FileSystemNode.file("/a/x", "x")
    y = FileSystemNode.file("/a/y", "y")
    root = FileSystemNode.directory("/a", "a", [x, y])

    shrunk = root.with_children([y])

    assert shrunk.children == (y,)
    assert root.children == (x, y)
    assert shrunk.path == root.path
    assert shrunk.name == root.name


def test_equality_compares_path_and_name():
    """Nodes with the same name at different paths are different entries."""
    assert FileSystemNode.file("/a/x", "x") == FileSystemNode.file("/a/x", "x")
    assert FileSystemNode.file("/a/x", "x") != FileSystemNode.file("/b/x", "x")
    assert FileSystemNode.symbolic_link("/a/x", "x") != FileSystemNode.symbolic_link("/b/x", "x")
    assert FileSystemNode.file("/a/x", "x") != FileSystemNode.symbolic_link("/a/x", "x")


def test_directory_equality_is_recursive_and_ordered():
    x = FileSystemNode.file("/a/x", "x")
    y = FileSystemNode.file("/a/y", "y")
    assert FileSystemNode.directory("/a", "a", [x, y]) == FileSystemNode.directory("/a", "a", [x, y])
    assert FileSystemNode.directory("/a", "a", [x, y]) != FileSystemNode.directory("/a", "a", [y, x])
    assert FileSystemNode.directory("/a", "a", [x]) != FileSystemNode.directory("/b", "a", [x])


def test_nodes_are_hashable():
    x = FileSystemNode.file("/a/x", "x")
    root = FileSystemNode.directory("/a", "a", [x])
    assert len({root, FileSystemNode.directory("/a", "a", [x]), x}) == 2


def test_iteration_is_pre_order():
    root = FileSystemNode.directory(
        "/r",
        "r",
        [
            FileSystemNode.directory("/r/a", "a", [FileSystemNode.file("/r/a/a1", "a1")]),
            FileSystemNode.file("/r/b", "b"),
        ],
    )
    assert [node.name for node in root] == ["r", "a", "a1", "b"]
    # Re-iterating yields the same sequence
    assert [node.name for node in root] == ["r", "a", "a1", "b"]
