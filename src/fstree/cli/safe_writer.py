"""Signal-aware output writing for the fstree CLI."""

import errno
import os
import types
from pathlib import Path
from typing import Iterable, Optional, TextIO, Type, Union

from fstree.cli.signal_handler import signal_handler
from fstree.types import PathType


class SafeWriter:
    """Writes UTF-8 text to a file descriptor or file path, stopping on SIGPIPE or SIGINT.

    A broken pipe, whether reported by a signal or by ``EPIPE`` from ``os.write``,
    surfaces as BrokenPipeError so the caller can stop producing output.

    Attributes:
        fd: The file descriptor being written to.
    """

    def __init__(self, target: Union[int, PathType]):
        """Initialize the writer.

        Args:
            target: An open file descriptor, or a path to create or truncate.

        Raises:
            TypeError: If ``target`` is neither a descriptor nor a path.
        """
        self._file_obj: Optional[TextIO] = None
        self._closed = False

        if isinstance(target, int):
            self.fd = target
        elif isinstance(target, (str, os.PathLike)):
            self._file_obj = Path(target).open("w", encoding="utf-8")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(target).__name__}")

    def write(self, data: str) -> None:
        """Write ``data``.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received, or the pipe is closed.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")
        if signal_handler.interrupted:
            raise BrokenPipeError()

        try:
            os.write(self.fd, data.encode("utf-8"))
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def write_lines(self, lines: Iterable[str]) -> None:
        """Write each string of ``lines`` in turn."""
        for line in lines:
            self.write(line)

    def close(self) -> None:
        """Close the file opened by this writer, if any. Descriptors passed in stay open."""
        if self._closed:
            return
        self._closed = True
        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes precedence
            if exc_type is None:
                raise
