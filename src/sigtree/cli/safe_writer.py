"""Signal-aware output for the sigtree CLI."""

import errno
import os
import types
from pathlib import Path
from typing import Iterable, Optional, Type, Union

from sigtree.cli.signal_handler import signal_handler
from sigtree.types import PathType


class SafeWriter:
    """Write rendered lines to a file descriptor or a file, stopping on interruption.

    Output goes straight to the file descriptor with ``os.write`` so that nothing is
    left in a Python buffer when the reading end of a pipe closes. Once SIGPIPE or
    SIGINT has been received, further writes raise BrokenPipeError.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The file descriptor being written to.
        encoding: Encoding used for the written text.
        errors: Encoding error handler.
    """

    def __init__(self, file: Union[int, PathType], encoding: str = "utf-8", errors: str = "surrogateescape"):
        """Initialize the writer.

        Args:
            file: An open file descriptor (e.g. ``sys.stdout.fileno()``) or a path to
                create or truncate.
            encoding: Encoding used for the written text.
            errors: Encoding error handler. The default writes file names that are not
                valid in the encoding back as the bytes they came from.

        Raises:
            TypeError: If file is neither a file descriptor nor a path.
        """
        self.file = file
        self.encoding = encoding
        self.errors = errors
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("wb")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write text.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received, or the pipe is broken.
            OSError: If another I/O error occurs.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        payload = data.encode(self.encoding, self.errors)
        try:
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def write_lines(self, lines: Iterable[str]) -> int:
        """Write each line followed by a newline.

        Returns:
            The number of lines written.
        """
        count = 0
        for line in lines:
            self.write(line + "\n")
            count += 1
        return count

    def close(self) -> None:
        """Close the file if it was opened by this writer; a broken pipe on close is ignored."""
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

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
            # An exception from the with block takes priority over a close failure
            if exc_type is None:
                raise
