"""A keyed store of objects with automatically allocated 60-bit keys."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")

GUID_MASK = 0x0FFFFFFFFFFFFFFF


class Database(Generic[T]):
    """Objects stored by nonzero key; keys are masked to 60 bits."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._data: dict[int, T] = {}
        self._key_hint = 1

    def get(self, key: int) -> T | None:
        """Return the object stored at key, or None."""
        key &= GUID_MASK
        if not key:
            return None
        return self._data.get(key)

    def alloc(self, key: int) -> T:
        """Create an object at key; raises KeyError if the key is zero or taken."""
        key &= GUID_MASK
        if not key:
            raise KeyError("key 0 is reserved")
        if key in self._data:
            raise KeyError(f"key {key:#x} already in use")
        obj = self._factory()
        self._data[key] = obj
        return obj

    def alloc_key(self) -> tuple[int, T]:
        """Create an object at the first free key from the hint on; return (key, object)."""
        if len(self._data) >= GUID_MASK:
            raise MemoryError("no free keys")
        key = self._key_hint
        while True:
            key &= GUID_MASK
            if not key:
                key = 1
            if key not in self._data:
                break
            key += 1
        self._key_hint = (key + 1) & GUID_MASK
        obj = self._factory()
        self._data[key] = obj
        return key, obj

    def delete(self, key: int) -> None:
        """Remove key if present; its slot becomes the next key tried."""
        if key:
            key &= GUID_MASK
            self._data.pop(key, None)
            self._key_hint = key

    def items(self) -> Iterator[tuple[int, T]]:
        return iter(sorted(self._data.items()))

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._data))