"""A read-only stream assembled from segments of a parent stream."""

from __future__ import annotations

from dataclasses import dataclass

from icommon.datastream import DataStream
from icommon.errors import check, halt


@dataclass(frozen=True)
class Segment:
    offset: int
    length: int
    parent_offset: int

    def contains(self, offset: int) -> bool:
        return self.offset <= offset < self.offset + self.length


class SegmentStream(DataStream):
    """Maps ranges of its own offsets onto ranges of a parent stream."""

    def __init__(self, parent: DataStream | None = None) -> None:
        super().__init__()
        self._source: DataStream | None = None
        self._segments: list[Segment] = []
        if parent is not None:
            self.attach_stream(parent)

    @property
    def source(self) -> DataStream | None:
        return self._source

    @property
    def segments(self) -> tuple[Segment, ...]:
        return tuple(self._segments)

    def attach_stream(self, parent: DataStream) -> None:
        self._source = parent
        self.length = 0
        self.offset = 0

    def add_segment(self, offset: int, length: int, parent_offset: int) -> None:
        self._segments.append(Segment(offset, length, parent_offset))
        self.length = max(self.length, parent_offset + length)

    def _lookup(self, offset: int) -> Segment | None:
        return next((segment for segment in self._segments if segment.contains(offset)), None)

    def _parent(self) -> DataStream:
        if self._source is None:
            raise ValueError("no parent stream attached")
        return self._source

    def read_buf(self, length: int) -> bytes:
        parent = self._parent()
        out = bytearray()
        remain = length
        while remain > 0:
            segment = self._lookup(self.offset)
            check(segment is not None, "SegmentStream.read_buf: offset outside all segments")
            segment_offset = self.offset - segment.offset
            transfer = min(segment.length - segment_offset, remain)
            parent.set_offset(segment.parent_offset + segment_offset)
            out += parent._read_exact(transfer)
            self.offset += transfer
            remain -= transfer
        return bytes(out)

    def write_buf(self, data: bytes) -> None:
        halt("SegmentStream.write_buf: writing unsupported")

    def set_offset(self, offset: int) -> None:
        segment = self._lookup(offset)
        check(segment is not None, "SegmentStream.set_offset: offset outside all segments")
        self._parent().set_offset(segment.parent_offset + offset - segment.offset)
        self.offset = offset