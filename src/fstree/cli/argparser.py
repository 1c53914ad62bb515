"""Command-line argument parsing for fstree.

This module defines the command-line interface for fstree, turning flags into a
TreeOptions value and populating gitignore-style exclusion rules.
"""

import argparse
import re
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from fstree import __version__
from fstree.exclusion_rules.base_rules import BaseExclusionRules
from fstree.options import TreeOptions


def regex(value: str) -> str:
    """Argument type accepting any valid Python regular expression."""
    try:
        re.compile(value)
    except re.error as e:
        raise argparse.ArgumentTypeError(f"invalid regular expression {value!r}: {e}")
    return value


def positive_int(value: str) -> int:
    """Argument type accepting integers greater than zero."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create an action class that feeds ``-e`` files and ``-i`` patterns into ``exclusion_rules``.

    Rules are added as the options are parsed, so their command-line order is kept,
    which matters for negated patterns.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Adds rule files or single patterns to the shared exclusion rules."""

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return
            if option_string in ("-e", "--exclude"):
                try:
                    exclusion_rules.load_rules(Path(str(values)))
                except FileNotFoundError as e:
                    parser.error(str(e))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            collected: List[Any] = list(getattr(namespace, self.dest, None) or [])
            collected.append(values)
            setattr(namespace, self.dest, collected)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with fstree's options.
    """
    description = """
    fstree: list the contents of a directory in a tree-like format.

    The directory is read once into a snapshot, filtered, and printed as an ASCII
    tree followed by a summary of directory and file counts. Symbolic links are
    listed but never followed.

    Filters are applied in a fixed order: level, directories only, hidden entries,
    match pattern, exclude pattern, gitignore rules, empty directories.
    """

    epilog = """
    Examples:
      # Current directory, hidden entries omitted
      fstree

      # Only the root line: the root directory itself is level 1
      fstree -L 1

      # The root and its immediate entries, like `tree -L 1`
      fstree -L 2

      # Everything, including hidden entries
      fstree -a /path/to/project

      # Only directories, at most three levels deep
      fstree -d -L 3 /path/to/project

      # Only Python files, without directories left empty by the filter
      fstree -P '\\.py$' --prune /path/to/project

      # Skip compiled files and anything a .gitignore excludes
      fstree -I '\\.pyc$' -e .gitignore /path/to/project

      # Show full paths and write the listing to a file
      fstree -f -o listing.txt /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="fstree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"fstree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("."),
        help="The directory to list (default: the current directory).",
    )
    parser.add_argument("-a", "--all", action="store_true", help="List all entries, including hidden ones.")
    parser.add_argument("-d", "--directories", action="store_true", help="List directories only.")
    parser.add_argument(
        "-P",
        "--pattern",
        type=regex,
        metavar="REGEX",
        help="List only files whose name matches REGEX. Directories are always listed.",
    )
    parser.add_argument(
        "-I",
        "--exclude-pattern",
        type=regex,
        metavar="REGEX",
        help="Do not list files whose name matches REGEX. Directories are always listed.",
    )
    parser.add_argument(
        "-L",
        "--level",
        type=positive_int,
        metavar="LEVEL",
        help="Descend at most LEVEL levels, counting the root directory as level 1.",
    )
    parser.add_argument(
        "--prune",
        action="store_true",
        help="Remove directories left empty after the other filters.",
    )
    parser.add_argument("-f", "--full-path", action="store_true", help="Print the full path of each entry.")
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a gitignore-style file of exclusion patterns (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Individual gitignore-style pattern to exclude files and directories (can be specified "
            "multiple times). Patterns are processed in the order they appear, mixed with -e/--exclude."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug information to stderr.")

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse checks.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.output is not None and args.output.is_dir():
        raise ValueError(f"Output path is a directory: {args.output}")


def options_from_args(args: argparse.Namespace) -> TreeOptions:
    """Build the TreeOptions value selected by parsed arguments."""
    return TreeOptions(
        show_hidden=args.all,
        directories_only=args.directories,
        match_pattern=args.pattern,
        exclude_pattern=args.exclude_pattern,
        max_depth=args.level,
        exclude_empty=args.prune,
        show_full_paths=args.full_path,
    )
