"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec

from fstree.types import PathType

from .base_rules import BaseExclusionRules


def _gitignore_pattern_name() -> str:
    # pathspec 1.x registers "gitignore" and deprecates "gitwildmatch"; 0.12 only knows the latter
    try:
        PathSpec.from_lines("gitignore", [])
    except KeyError:
        return "gitwildmatch"
    return "gitignore"


PATTERN_NAME = _gitignore_pattern_name()


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore pattern syntax.

    Patterns are matched with the pathspec library the same way Git matches them:
    globs, directory-only patterns ending in ``/``, negations starting with ``!``,
    ``**`` and comment lines are all supported. Rules from files and rules added
    directly are combined in the order they were added, so later negations can
    re-include earlier exclusions.

    Attributes:
        spec (PathSpec): Compiled pattern matcher.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("build/")
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("build")
        False
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("logs/app.log"), rules.exclude("keep.log")
        (True, False)
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize with patterns from the given files, if any.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines(PATTERN_NAME, self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        return self.spec.match_file(path)

    def has_rules(self) -> bool:
        # Comment and blank lines compile to patterns that neither include nor exclude
        return any(pattern.include is not None for pattern in self.spec.patterns)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and append .gitignore patterns from one or more files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                self._lines.extend(f.read().splitlines())

        self._compile()

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern, e.g. ``"*.pyc"`` or ``"!important.txt"``."""
        self._lines.append(rule)
        self._compile()

    def _compile(self) -> None:
        self.spec = PathSpec.from_lines(PATTERN_NAME, self._lines)
