"""A data stream backed by a file on disk."""

from __future__ import annotations

import contextlib
import os
from typing import BinaryIO

from icommon.datastream import DataStream

_SEPARATORS = "\\/"


class FileStream(DataStream):
    """A stream over a file opened for reading or created for writing."""

    def __init__(self, path: str | os.PathLike | None = None) -> None:
        super().__init__()
        self._file: BinaryIO | None = None
        if path is not None:
            self.open(path)

    @property
    def closed(self) -> bool:
        return self._file is None

    def _handle(self) -> BinaryIO:
        if self._file is None:
            raise ValueError("file stream is not open")
        return self._file

    def open(self, path: str | os.PathLike) -> None:
        """Open an existing file for reading; raises OSError on failure."""
        self.close()
        self._file = open(path, "rb")
        self.length = os.fstat(self._file.fileno()).st_size
        self.offset = 0

    def create(self, path: str | os.PathLike) -> None:
        """Create (or truncate) a file for writing; raises OSError on failure."""
        self.close()
        self._file = open(path, "wb")
        self.length = 0
        self.offset = 0

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def read_buf(self, length: int) -> bytes:
        data = self._handle().read(length)
        self.offset += len(data)
        return data

    def write_buf(self, data: bytes) -> None:
        written = self._handle().write(bytes(data))
        self.offset += written
        if self.length < self.offset:
            self.length = self.offset

    def set_offset(self, offset: int) -> None:
        self._handle().seek(offset)
        self.offset = offset

    def set_length(self, length: int) -> None:
        """Truncate or extend the file, leaving the offset at its new end."""
        self.set_offset(length)
        self._handle().truncate(length)
        self.length = length

    def __enter__(self) -> FileStream:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def make_all_dirs(path: str | os.PathLike) -> None:
    """Create every directory leading up to the last path component."""
    path = os.fspath(path)
    for index, char in enumerate(path):
        if char in _SEPARATORS:
            with contextlib.suppress(OSError):
                os.mkdir(path[:index])


def extract_file_name(path: str) -> str | None:
    """Return the part after the last slash, or None if there is no slash."""
    cut = max(path.rfind("/"), path.rfind("\\"))
    if cut < 0:
        return None
    return path[cut + 1:]