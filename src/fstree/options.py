"""Filter and display options consumed by the tree pipeline."""

import re
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TreeOptions:
    """Already-parsed options controlling which nodes are shown and how.

    Attributes:
        show_hidden: Keep entries whose name starts with ``.``.
        directories_only: Drop every non-directory entry.
        match_pattern: Regular expression a non-directory name must match to be kept.
        exclude_pattern: Regular expression a non-directory name must not match to be kept.
        max_depth: Number of levels to keep, counting the root as level 1. None keeps all.
        exclude_empty: Drop directories left without children after the other filters.
        show_full_paths: Render each node's full path instead of its name.

    Raises:
        ValueError: If ``max_depth`` is not positive or a pattern is not a valid regular expression.

    Example:
        >>> TreeOptions(max_depth=0)
        Traceback (most recent call last):
            ...
        ValueError: max_depth must be a positive integer, got 0
    """

    show_hidden: bool = False
    directories_only: bool = False
    match_pattern: Optional[str] = None
    exclude_pattern: Optional[str] = None
    max_depth: Optional[int] = None
    exclude_empty: bool = False
    show_full_paths: bool = False

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be a positive integer, got {self.max_depth}")
        for pattern in (self.match_pattern, self.exclude_pattern):
            if pattern is not None:
                try:
                    re.compile(pattern)
                except re.error as e:
                    raise ValueError(f"Invalid regular expression {pattern!r}: {e}") from e
