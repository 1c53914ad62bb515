"""Command-line entry point for fstree.

Exit Codes:
    0: Successful completion, including when the filters leave nothing to print
    1: Runtime error (missing path, unsupported file type, unreadable rules file, ...)
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # List the current directory
    $ fstree

    # Hidden entries, three levels, no empty directories
    $ fstree -a -L 3 --prune /path/to/dir
"""

import logging
import sys

from fstree.cli.argparser import create_parser, options_from_args, validate_args
from fstree.cli.safe_writer import SafeWriter
from fstree.cli.signal_handler import setup_signal_handling, signal_handler
from fstree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from fstree.file_system_tree.file_system_tree import FileSystemTree

EXIT_ERROR = 1
EXIT_PERMISSION_DENIED = 126

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"


def configure_logging(verbose: bool) -> None:
    """Send library log records to stderr, at DEBUG level when ``verbose`` is set."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT, stream=sys.stderr)


def main() -> None:
    """Main entry point for the fstree command-line interface.

    Parses arguments, builds and filters the tree, and writes the diagram followed by
    the summary line. Nothing is written when the filters drop the root.
    """
    setup_signal_handling()

    try:
        exclusion_rules = GitIgnoreExclusionRules()
        parser = create_parser(exclusion_rules)
        args = parser.parse_args()

        configure_logging(args.verbose)
        validate_args(args)

        tree = FileSystemTree(args.directory, options_from_args(args), exclusion_rules)

        try:
            if tree.get_tree() is None:
                return

            output = args.output if args.output else sys.stdout.fileno()
            with SafeWriter(output) as safe_writer:
                try:
                    safe_writer.write_lines(tree.stream_tree_representation())
                    safe_writer.write("\n" + tree.get_summary() + "\n")
                except BrokenPipeError:
                    pass  # SafeWriter will automatically close in the context manager

        except PermissionError as e:
            print(f"Error: {str(e)}", file=sys.stderr)
            sys.exit(EXIT_PERMISSION_DENIED)

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(EXIT_ERROR)
    finally:
        exit_code = signal_handler.exit_code()
        if exit_code is not None:
            sys.exit(exit_code)


if __name__ == "__main__":
    main()
