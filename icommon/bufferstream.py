"""A data stream over an in-memory buffer."""

from __future__ import annotations

from icommon.datastream import DataStream


class BufferStream(DataStream):
    """A stream reading and writing a fixed-size byte buffer.

    A bytearray passed in is shared, so writes are visible to its owner.
    """

    def __init__(self, buffer: bytes | bytearray | None = None) -> None:
        super().__init__()
        self.buffer = bytearray()
        if buffer is not None:
            self.set_buffer(buffer)

    def set_buffer(self, buffer: bytes | bytearray) -> None:
        self.buffer = buffer if isinstance(buffer, bytearray) else bytearray(buffer)
        self.length = len(self.buffer)
        self.rewind()

    def read_buf(self, length: int) -> bytes:
        end = self.offset + length
        if length < 0 or end > len(self.buffer):
            raise EOFError("read past end of buffer")
        data = bytes(self.buffer[self.offset:end])
        self.offset = end
        return data

    def write_buf(self, data: bytes) -> None:
        end = self.offset + len(data)
        if end > len(self.buffer):
            raise ValueError("write past end of buffer")
        self.buffer[self.offset:end] = data
        self.offset = end