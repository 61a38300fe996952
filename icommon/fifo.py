"""A fixed-size ring buffer of bytes."""

from __future__ import annotations


class Fifo:
    """A first-in first-out byte queue of fixed capacity."""

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("fifo size must not be negative")
        self._buf = bytearray(size)
        self._base = 0
        self._length = 0

    @property
    def buffer_size(self) -> int:
        return len(self._buf)

    @property
    def buffer_remain(self) -> int:
        return len(self._buf) - self._length

    @property
    def data_length(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length

    def push(self, data: bytes) -> None:
        """Append data; raises BufferError if it does not fit."""
        data = bytes(data)
        count = len(data)
        if count > self.buffer_remain:
            raise BufferError("fifo overflow")
        if not count:
            return
        size = len(self._buf)
        write = (self._base + self._length) % size
        first = min(count, size - write)
        self._buf[write:write + first] = data[:first]
        self._buf[:count - first] = data[first:]
        self._length += count

    def peek(self, length: int) -> bytes:
        """Return the oldest length bytes without removing them."""
        if length < 0:
            raise ValueError("length must not be negative")
        if length > self._length:
            raise BufferError("fifo underflow")
        size = len(self._buf)
        end = self._base + length
        if end <= size:
            return bytes(self._buf[self._base:end])
        return bytes(self._buf[self._base:]) + bytes(self._buf[:end - size])

    def pop(self, length: int) -> bytes:
        """Remove and return the oldest length bytes."""
        data = self.peek(length)
        self._length -= length
        size = len(self._buf)
        self._base = (self._base + length) % size if size else 0
        return data

    def clear(self) -> None:
        self._length = 0
        self._base = 0