class InvalidFileTypeError(Exception):
    """
    Exception raised when the tree builder meets an entry it cannot represent.

    Only regular files, directories and symbolic links can become tree nodes. Device
    files, sockets and FIFOs abort the build with this error.

    Attributes:
        file_path (str): Path to the offending entry.

    Example:
        >>> error = InvalidFileTypeError("/dev/null")
        >>> str(error)
        'Unsupported file type: /dev/null'
    """

    def __init__(self, file_path: str) -> None:
        """
        Initialize the exception with the path to the unsupported entry.

        Args:
            file_path (str): Path to the entry that is neither file, directory nor symlink.
        """
        self.file_path = file_path
        super().__init__(f"Unsupported file type: {file_path}")
