"""A map from non-overlapping integer ranges to data."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Any, Iterator


@dataclass
class RangeEntry:
    start: int
    length: int
    data: Any = None

    @property
    def end(self) -> int:
        """The last key inside the range."""
        return self.start + self.length - 1

    def contains(self, address: int) -> bool:
        return self.start <= address <= self.end


class RangeMap:
    """Non-overlapping ranges of keys limited to key_bits bits."""

    def __init__(self, key_bits: int = 32) -> None:
        if key_bits <= 0:
            raise ValueError("key_bits must be positive")
        self.key_bits = key_bits
        self._max_key = (1 << key_bits) - 1
        self._starts: list[int] = []
        self._entries: dict[int, RangeEntry] = {}

    def clear(self) -> None:
        self._starts.clear()
        self._entries.clear()

    def add(self, start: int, length: int, data: Any = None) -> RangeEntry:
        """Add a range; raises ValueError if it overflows or overlaps another."""
        if not 0 <= start <= self._max_key:
            raise ValueError("range start outside key space")
        if length <= 0 or length > self._max_key or start + length - 1 > self._max_key:
            raise ValueError("range overflows key space")
        end = start + length - 1
        index = bisect.bisect_left(self._starts, start)
        if index < len(self._starts) and self._starts[index] <= end:
            raise ValueError("range overlaps a following range")
        if index > 0 and self._entries[self._starts[index - 1]].end >= start:
            raise ValueError("range overlaps a preceding range")
        entry = RangeEntry(start, length, data)
        self._starts.insert(index, start)
        self._entries[start] = entry
        return entry

    def _find(self, address: int) -> RangeEntry | None:
        index = bisect.bisect_right(self._starts, address) - 1
        if index < 0:
            return None
        entry = self._entries[self._starts[index]]
        return entry if entry.contains(address) else None

    def lookup(self, address: int) -> RangeEntry | None:
        """Return the range holding address, or None."""
        return self._find(address)

    def erase(self, address: int) -> RangeEntry:
        """Remove and return the range holding address; raises KeyError if none."""
        entry = self._find(address)
        if entry is None:
            raise KeyError(address)
        del self._entries[entry.start]
        self._starts.remove(entry.start)
        return entry

    def __iter__(self) -> Iterator[RangeEntry]:
        return iter([self._entries[start] for start in self._starts])

    def __len__(self) -> int:
        return len(self._starts)