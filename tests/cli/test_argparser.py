"""Unit tests for the argument parser module in fstree CLI."""

import argparse
from pathlib import Path
from unittest.mock import MagicMock, call

import pytest

from fstree.cli.argparser import (
    create_exclusion_action,
    create_parser,
    options_from_args,
    positive_int,
    regex,
    validate_args,
)
from fstree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from fstree.options import TreeOptions


@pytest.fixture
def mock_exclusion_rules():
    """Create a mock ExclusionRules object."""
    return MagicMock(spec=GitIgnoreExclusionRules)


def test_defaults(mock_exclusion_rules):
    args = create_parser(mock_exclusion_rules).parse_args([])
    assert args.directory == Path(".")
    assert options_from_args(args) == TreeOptions()
    assert args.output is None
    assert not args.verbose


def test_all_filter_flags(mock_exclusion_rules):
    parser = create_parser(mock_exclusion_rules)
    args = parser.parse_args(
        ["-a", "-d", "-P", r"\.py$", "-I", "^test_", "-L", "3", "--prune", "-f", "/some/dir"]
    )
    assert args.directory == Path("/some/dir")
    assert options_from_args(args) == TreeOptions(
        show_hidden=True,
        directories_only=True,
        match_pattern=r"\.py$",
        exclude_pattern="^test_",
        max_depth=3,
        exclude_empty=True,
        show_full_paths=True,
    )


@pytest.mark.parametrize("level", ["0", "-2", "two"])
def test_invalid_level_is_a_usage_error(mock_exclusion_rules, level):
    parser = create_parser(mock_exclusion_rules)
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-L", level])
    assert excinfo.value.code == 2


def test_invalid_pattern_is_a_usage_error(mock_exclusion_rules):
    parser = create_parser(mock_exclusion_rules)
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-P", "("])
    assert excinfo.value.code == 2


def test_type_functions():
    assert regex(r"\d+") == r"\d+"
    assert positive_int("7") == 7
    with pytest.raises(argparse.ArgumentTypeError):
        regex("[")
    with pytest.raises(argparse.ArgumentTypeError):
        positive_int("0")


def test_exclusion_action_preserves_order(mock_exclusion_rules):
    parser = create_parser(mock_exclusion_rules)
    args = parser.parse_args(["-i", "*.log", "-e", "rules.ignore", "-i", "!keep.log"])

    assert mock_exclusion_rules.method_calls == [
        call.add_rule("*.log"),
        call.load_rules(Path("rules.ignore")),
        call.add_rule("!keep.log"),
    ]
    assert args.ignore == ["*.log", "!keep.log"]
    assert args.exclude == [Path("rules.ignore")]


def test_exclusion_action_missing_file_is_a_usage_error(tmp_path):
    parser = create_parser(GitIgnoreExclusionRules())
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-e", str(tmp_path / "missing.ignore")])
    assert excinfo.value.code == 2


def test_create_exclusion_action():
    ExclusionAction = create_exclusion_action(MagicMock())
    assert issubclass(ExclusionAction, argparse.Action)


def test_validate_args_rejects_directory_output(mock_exclusion_rules, tmp_path):
    args = create_parser(mock_exclusion_rules).parse_args(["-o", str(tmp_path)])
    with pytest.raises(ValueError, match="Output path is a directory"):
        validate_args(args)


def test_version(mock_exclusion_rules, capsys):
    with pytest.raises(SystemExit) as excinfo:
        create_parser(mock_exclusion_rules).parse_args(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("fstree ")


def test_help_explains_level_counting(mock_exclusion_rules, capsys, monkeypatch):
    monkeypatch.setenv("COLUMNS", "200")
    with pytest.raises(SystemExit) as excinfo:
        create_parser(mock_exclusion_rules).parse_args(["--help"])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "counting the root directory as level 1" in out
    assert "fstree -L 1" in out
    assert "fstree -L 2" in out
