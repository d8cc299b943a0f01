"""Signal-aware output writing for the treescan CLI."""

import errno
import os
import types
from pathlib import Path
from typing import BinaryIO, Optional, Type, Union

from treescan.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes report text to a file descriptor or a file path.

    The writer encodes text as UTF-8 and writes it with os.write, looping until every
    byte has been accepted. A broken pipe, or a SIGPIPE/SIGINT recorded by the signal
    handler, is reported as BrokenPipeError so the caller can stop quietly.

    A path is opened lazily on the first write, so constructing a writer for a report
    that then fails to format leaves no empty output file behind.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The file descriptor being written to, or None until a path is opened.
    """

    def __init__(self, file: Union[int, str, os.PathLike]):
        """Initialize the safe writer.

        Args:
            file: Either a file descriptor (int) or a path for writing output.

        Raises:
            TypeError: If file is neither an int nor path-like.
        """
        self.file = file
        self._closed = False
        self._file_obj: Optional[BinaryIO] = None
        self.fd: Optional[int] = None

        if isinstance(file, int):
            self.fd = file
        elif not isinstance(file, (str, os.PathLike)):
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def _open(self) -> int:
        if self.fd is None:
            self._file_obj = Path(self.file).open("wb")  # type: ignore[arg-type]
            self.fd = self._file_obj.fileno()
        return self.fd

    def write(self, data: str) -> None:
        """Write text, checking for interruption first.

        Args:
            data: Text to write.

        Raises:
            BrokenPipeError: If SIGPIPE/SIGINT was received or the pipe is broken.
            OSError: If another I/O error occurs during writing.
            ValueError: If the writer is already closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        fd = self._open()
        view = memoryview(data.encode("utf-8"))
        try:
            while view:
                written = os.write(fd, view)
                view = view[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the file if this writer opened it.

        The writer is marked closed even when closing fails with a broken pipe.
        """
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
        """Close the writer, letting an exception from the with block take priority."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
