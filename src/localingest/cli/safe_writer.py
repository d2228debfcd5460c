"""Scoped output file writing for the localingest CLI."""

import types
from pathlib import Path
from typing import BinaryIO, Optional, Type

from localingest.types import PathType


class SafeWriter:
    """Write text to an output file that is opened once and always closed.

    The file is created (or truncated) when the writer is constructed, so a path that
    cannot be created fails before any work is written. Text is encoded as UTF-8 with the
    "surrogateescape" handler, so bytes that were not valid UTF-8 in the source files are
    written back unchanged.

    Attributes:
        path (Path): The output file path.

    Example:
        >>> with SafeWriter("output.txt") as writer:  # doctest: +SKIP
        ...     writer.write("hello\\n")
    """

    def __init__(self, path: PathType, encoding: str = "utf-8"):
        """Open ``path`` for writing.

        Raises:
            OSError: If the file cannot be created.
        """
        self.path = Path(path)
        self.encoding = encoding
        self._file_obj: BinaryIO = self.path.open("wb")
        self._closed = False

    def write(self, data: str) -> None:
        """Write a chunk of text.

        Raises:
            ValueError: If the writer has been closed.
            OSError: If an I/O error occurs during writing.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")
        self._file_obj.write(data.encode(self.encoding, errors="surrogateescape"))

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._file_obj.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the file. A close error is only raised when no other exception is in flight."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
