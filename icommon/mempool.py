"""Fixed-capacity object pools."""

from __future__ import annotations

import threading
from typing import Callable, Generic, Iterator, TypeVar

from icommon.debuglog import DebugLog, LogLevel

T = TypeVar("T")


class _SlotPool(Generic[T]):
    def __init__(self, factory: Callable[[], T], size: int) -> None:
        if size <= 0:
            raise ValueError("pool size must be positive")
        self._factory = factory
        self.size = size
        self.reset()

    def reset(self) -> None:
        self._reset_slots()

    def _reset_slots(self) -> None:
        self._slots: list[T | None] = [None] * self.size
        self._free = list(range(self.size - 1, -1, -1))
        self._index: dict[int, int] = {}

    def _take(self) -> tuple[int, T]:
        if not self._free:
            raise MemoryError("pool exhausted")
        slot = self._free.pop()
        obj = self._factory()
        self._slots[slot] = obj
        self._index[id(obj)] = slot
        return slot, obj

    def _slot_of(self, obj: T) -> int:
        slot = self._index.get(id(obj))
        if slot is None or self._slots[slot] is not obj:
            raise ValueError("object is not allocated from this pool")
        return slot

    def _release(self, obj: T) -> int:
        slot = self._slot_of(obj)
        del self._index[id(obj)]
        self._slots[slot] = None
        self._free.append(slot)
        return slot

    def _exhausted(self) -> bool:
        return not self._free


class MemPool(_SlotPool[T]):
    """A pool that also tracks its allocated objects, newest first."""

    def __init__(self, factory: Callable[[], T], size: int) -> None:
        super().__init__(factory, size)

    def reset(self) -> None:
        """Forget every allocation and make all slots free."""
        self._reset_slots()
        self._alloc: list[int] = []

    def allocate(self) -> T:
        """Create an object in a free slot; raises MemoryError when full."""
        slot, obj = self._take()
        self._alloc.insert(0, slot)
        return obj

    def free(self, obj: T) -> None:
        slot = self._release(obj)
        self._alloc.remove(slot)

    def full(self) -> bool:
        return self._exhausted()

    def empty(self) -> bool:
        return not self._alloc

    def clear(self) -> None:
        while self._alloc:
            self.free(self._slots[self._alloc[0]])

    def dump(self, log: DebugLog) -> None:
        """Write the free and allocated slot numbers to log."""
        log.indent()
        log.log(LogLevel.DEBUG_MESSAGE, "free:")
        log.indent()
        for slot in reversed(self._free):
            log.log(LogLevel.DEBUG_MESSAGE, "%08X", slot)
        log.outdent()
        log.log(LogLevel.DEBUG_MESSAGE, "alloc:")
        log.indent()
        for slot in self._alloc:
            log.log(LogLevel.DEBUG_MESSAGE, "%08X", slot)
        log.outdent()
        log.outdent()

    def __iter__(self) -> Iterator[T]:
        return iter([self._slots[slot] for slot in self._alloc])


class BasicMemPool(_SlotPool[T]):
    """A pool whose objects are addressable by slot index."""

    def __init__(self, factory: Callable[[], T], size: int) -> None:
        super().__init__(factory, size)

    def reset(self) -> None:
        """Forget every allocation and make all slots free."""
        self._reset_slots()

    def allocate(self) -> T:
        """Create an object in a free slot; raises MemoryError when full."""
        return self._take()[1]

    def free(self, obj: T) -> None:
        self._release(obj)

    def full(self) -> bool:
        return self._exhausted()

    def index_of(self, obj: T) -> int:
        return self._slot_of(obj)

    def get_by_id(self, index: int) -> T | None:
        """Return the object in slot index, or None if the slot is free."""
        if not 0 <= index < self.size:
            raise IndexError("slot index out of range")
        return self._slots[index]


class ThreadSafeBasicMemPool(BasicMemPool[T]):
    """A BasicMemPool whose allocation and release are serialised by a lock."""

    def __init__(self, factory: Callable[[], T], size: int) -> None:
        self._lock = threading.Lock()
        super().__init__(factory, size)

    def reset(self) -> None:
        with self._lock:
            super().reset()

    def allocate(self) -> T:
        with self._lock:
            return super().allocate()

    def free(self, obj: T) -> None:
        with self._lock:
            super().free(obj)