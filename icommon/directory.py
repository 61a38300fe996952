"""Iteration over the entries of a directory that match a wildcard."""

from __future__ import annotations

import fnmatch
import os
from typing import Iterator


class DirectoryIterator:
    """A cursor over directory entries matching a pattern, in name order.

    A directory that cannot be read yields no entries.
    """

    def __init__(self, path: str | os.PathLike, match: str | None = None) -> None:
        self.path = os.fspath(path)
        self.match = match or "*"
        try:
            with os.scandir(self.path) as entries:
                self._entries = sorted(
                    (entry for entry in entries if fnmatch.fnmatch(entry.name, self.match)),
                    key=lambda entry: entry.name,
                )
        except OSError:
            self._entries = []
        self._position = 0

    @property
    def entry(self) -> os.DirEntry:
        """The current entry; IndexError once iteration is done."""
        if self.done():
            raise IndexError("directory iteration is done")
        return self._entries[self._position]

    def full_path(self) -> str:
        return os.path.join(self.path, self.entry.name)

    def next(self) -> None:
        if not self.done():
            self._position += 1

    def done(self) -> bool:
        return self._position >= len(self._entries)

    def __iter__(self) -> Iterator[os.DirEntry]:
        while not self.done():
            yield self.entry
            self.next()