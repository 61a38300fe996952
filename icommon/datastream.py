"""Abstract byte streams with typed reads and writes, and windowed sub-streams."""

from __future__ import annotations

import abc
import contextlib
import struct
from typing import Iterator

from icommon.errors import check

DEFAULT_BUFFER_SIZE = 1024 * 1024


def _terminator(value: int | str | bytes | None) -> int | None:
    if value is None or isinstance(value, int):
        return value
    if isinstance(value, str):
        value = value.encode("latin-1")
    if len(value) != 1:
        raise ValueError("terminator must be a single character")
    return value[0]


class DataStream(abc.ABC):
    """A positioned stream of bytes.

    Multi-byte values are little-endian unless swap_bytes is set.
    """

    encoding = "latin-1"

    def __init__(self) -> None:
        self.length = 0
        self.offset = 0
        self.swap_bytes = False

    @abc.abstractmethod
    def read_buf(self, length: int) -> bytes:
        """Read up to length bytes and advance the offset."""

    @abc.abstractmethod
    def write_buf(self, data: bytes) -> None:
        """Write data at the current offset and advance it."""

    @property
    def _order(self) -> str:
        return ">" if self.swap_bytes else "<"

    @property
    def remain(self) -> int:
        return self.length - self.offset

    @property
    def parent(self) -> DataStream | None:
        return None

    @property
    def parent_offset(self) -> int:
        return self.offset

    def _read_exact(self, length: int) -> bytes:
        data = self.read_buf(length)
        if len(data) < length:
            raise EOFError(f"needed {length} bytes, got {len(data)}")
        return data

    def _read_value(self, fmt: str):
        data = self._read_exact(struct.calcsize(fmt))
        return struct.unpack(self._order + fmt, data)[0]

    def _write_value(self, fmt: str, value) -> None:
        self.write_buf(struct.pack(self._order + fmt, value))

    def read8(self) -> int:
        return self._read_value("B")

    def read16(self) -> int:
        return self._read_value("H")

    def read32(self) -> int:
        return self._read_value("I")

    def read64(self) -> int:
        return self._read_value("Q")

    def read_float(self) -> float:
        return self._read_value("f")

    def read_string(
        self,
        max_length: int | None = None,
        alt_terminator: int | str | bytes | None = None,
        alt_terminator2: int | str | bytes | None = None,
    ) -> str:
        """Read a NUL-terminated string of at most max_length characters.

        Either alternate terminator also ends the string. If one of them is a
        newline, a carriage return (optionally followed by a newline) ends it too.
        """
        check(max_length is None or max_length >= 0, "DataStream.read_string: negative length")
        terminators = {t for t in (_terminator(alt_terminator), _terminator(alt_terminator2)) if t is not None}
        terminators.add(0)
        break_on_returns = 0x0A in terminators
        out = bytearray()
        while (max_length is None or len(out) < max_length) and not self.hit_eof():
            data = self.read8()
            if break_on_returns and data == 0x0D:
                if not self.hit_eof() and self.peek8() == 0x0A:
                    self.skip(1)
                break
            if data in terminators:
                break
            out.append(data)
        return out.decode(self.encoding)

    @contextlib.contextmanager
    def saved_position(self) -> Iterator[DataStream]:
        """Restore the current offset when the block exits."""
        saved = self.offset
        try:
            yield self
        finally:
            self.set_offset(saved)

    def peek8(self) -> int:
        with self.saved_position():
            return self.read8()

    def peek16(self) -> int:
        with self.saved_position():
            return self.read16()

    def peek32(self) -> int:
        with self.saved_position():
            return self.read32()

    def peek64(self) -> int:
        with self.saved_position():
            return self.read64()

    def peek_float(self) -> float:
        with self.saved_position():
            return self.read_float()

    def peek_buf(self, length: int) -> bytes:
        with self.saved_position():
            return self.read_buf(length)

    def skip(self, count: int) -> None:
        self.set_offset(self.offset + count)

    def write8(self, value: int) -> None:
        self._write_value("B", value & 0xFF)

    def write16(self, value: int) -> None:
        self._write_value("H", value & 0xFFFF)

    def write32(self, value: int) -> None:
        self._write_value("I", value & 0xFFFFFFFF)

    def write64(self, value: int) -> None:
        self._write_value("Q", value & 0xFFFFFFFFFFFFFFFF)

    def write_float(self, value: float) -> None:
        self._write_value("f", value)

    def write_string(self, text: str | bytes) -> None:
        """Write text followed by a NUL byte."""
        data = text.encode(self.encoding) if isinstance(text, str) else bytes(text)
        self.write_buf(data + b"\0")

    def hit_eof(self) -> bool:
        return self.offset >= self.length

    def set_offset(self, offset: int) -> None:
        self.offset = offset

    def rewind(self) -> None:
        self.set_offset(0)

    def root_parent(self) -> DataStream:
        """Follow parent links to the outermost stream."""
        stream: DataStream = self
        while stream.parent is not None:
            stream = stream.parent
        return stream


def copy_sub_streams(
    out: DataStream, source: DataStream, remain: int, buffer_size: int = DEFAULT_BUFFER_SIZE
) -> None:
    """Copy remain bytes from source's current position to out in chunks."""
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    while remain > 0:
        size = min(remain, buffer_size)
        out.write_buf(source._read_exact(size))
        remain -= size


def copy_streams(out: DataStream, source: DataStream, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
    """Copy the whole of source, from its start, to out."""
    source.rewind()
    copy_sub_streams(out, source, source.length, buffer_size)


class DataSubStream(DataStream):
    """A window onto part of another stream."""

    def __init__(self, stream: DataStream | None = None, offset: int = 0, length: int = 0) -> None:
        super().__init__()
        self._stream: DataStream | None = None
        self.sub_base = 0
        if stream is not None:
            self.attach(stream, offset, length)

    @property
    def parent(self) -> DataStream | None:
        return self._stream

    @property
    def parent_offset(self) -> int:
        return self._attached().offset

    def _attached(self) -> DataStream:
        if self._stream is None:
            raise ValueError("sub-stream is not attached")
        return self._stream

    def attach(self, stream: DataStream, offset: int, length: int) -> None:
        self._stream = stream
        self.sub_base = offset
        self.length = length
        self.offset = 0
        stream.set_offset(offset)

    def _sync(self) -> DataStream:
        stream = self._attached()
        target = self.sub_base + self.offset
        if stream.offset != target:
            stream.set_offset(target)
        return stream

    def read_buf(self, length: int) -> bytes:
        check(length <= self.remain, "DataSubStream.read_buf: hit eof")
        data = self._sync().read_buf(length)
        self.offset += length
        return data

    def write_buf(self, data: bytes) -> None:
        self._sync().write_buf(data)
        self.offset += len(data)
        if self.length < self.offset:
            self.length = self.offset

    def set_offset(self, offset: int) -> None:
        self._attached().set_offset(self.sub_base + offset)
        self.offset = offset