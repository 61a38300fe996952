"""Whitespace-separated token and line reading from a data stream."""

from __future__ import annotations

from icommon.datastream import DataStream
from icommon.errors import check


def _is_space(value: int) -> bool:
    return bytes((value,)).isspace()


class TextParser:
    """Reads tokens and lines from an attached stream."""

    def __init__(self, stream: DataStream | None = None) -> None:
        self.stream = stream

    def attach(self, stream: DataStream) -> None:
        self.stream = stream

    def _attached(self) -> DataStream:
        if self.stream is None:
            raise ValueError("no stream attached")
        return self.stream

    def hit_eof(self) -> bool:
        return self._attached().hit_eof()

    def skip_whitespace(self) -> None:
        stream = self._attached()
        while not stream.hit_eof() and _is_space(stream.peek8()):
            stream.skip(1)

    def skip_line(self) -> None:
        """Skip any run of newline and carriage-return characters."""
        stream = self._attached()
        while not stream.hit_eof() and stream.peek8() in (0x0A, 0x0D):
            stream.skip(1)

    def read_line(self, max_length: int | None = None) -> str:
        return self._attached().read_string(max_length, "\n", "\r")

    def read_token(self, max_length: int | None = None) -> str:
        """Read up to the next whitespace or NUL, consuming that delimiter."""
        check(max_length is None or max_length >= 0, "TextParser.read_token: negative length")
        stream = self._attached()
        out = bytearray()
        while (max_length is None or len(out) < max_length) and not stream.hit_eof():
            data = stream.read8()
            if not data or _is_space(data):
                break
            out.append(data)
        return out.decode(stream.encoding)