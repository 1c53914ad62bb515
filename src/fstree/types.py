from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(Enum):
    """Enumeration of the entry kinds a tree node can represent.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link (never followed)
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
