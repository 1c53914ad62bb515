"""Test configuration and fixtures for fstree."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_tree(tmp_path):
    """Create directory ``a`` holding ``x.txt``, hidden ``.y`` and empty directory ``b``."""
    root = tmp_path / "a"
    root.mkdir()
    (root / "x.txt").write_text("x")
    (root / ".y").write_text("y")
    (root / "b").mkdir()
    return root


@pytest.fixture
def nested_tree(tmp_path):
    """Create a three-level project directory."""
    root = tmp_path / "project"
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / "src" / "main.py").write_text("def main(): pass\n")
    (root / "src" / "main.pyc").write_bytes(b"\x00")
    (root / "src" / "pkg" / "util.py").write_text("")
    (root / "docs" / "index.md").write_text("# Docs\n")
    (root / "README.md").write_text("readme\n")
    return root
