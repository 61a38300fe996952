import pytest

from icommon.datastream import DataStream, DataSubStream, copy_streams, copy_sub_streams
from icommon.errors import HaltError


class MemoryStream(DataStream):
    def __init__(self, data=b""):
        super().__init__()
        self.data = bytearray(data)
        self.length = len(self.data)

    def read_buf(self, length):
        chunk = bytes(self.data[self.offset:self.offset + length])
        self.offset += len(chunk)
        return chunk

    def write_buf(self, data):
        end = self.offset + len(data)
        if end > len(self.data):
            self.data.extend(bytes(end - len(self.data)))
        self.data[self.offset:end] = data
        self.offset = end
        self.length = max(self.length, end)


def _window(data=b""):
    """Return a memory stream and a sub stream covering all of it."""
    base = MemoryStream(data)
    return base, DataSubStream(base, 0, len(data))


@pytest.mark.parametrize("swap", [False, True])
def test_integer_and_float_round_trip(swap):
    base = MemoryStream()
    stream = DataSubStream(base, 0, 0)
    stream.swap_bytes = swap
    stream.write8(0xAB)
    stream.write16(0xBEEF)
    stream.write32(0xDEADBEEF)
    stream.write64(0x0123456789ABCDEF)
    stream.write_float(1.5)
    assert stream.length == 19
    stream.rewind()
    assert stream.read8() == 0xAB
    assert stream.read16() == 0xBEEF
    assert stream.read32() == 0xDEADBEEF
    assert stream.read64() == 0x0123456789ABCDEF
    assert stream.read_float() == 1.5
    assert stream.hit_eof()


def test_write32_is_little_endian_by_default():
    base = MemoryStream()
    stream = DataSubStream(base, 0, 0)
    stream.write32(0x12345678)
    assert stream.length == 4
    assert bytes(base.data) == b"\x78\x56\x34\x12"


def test_write32_swapped_is_big_endian():
    base = MemoryStream()
    stream = DataSubStream(base, 0, 0)
    stream.swap_bytes = True
    stream.write32(0x12345678)
    assert stream.length == 4
    assert bytes(base.data) == b"\x12\x34\x56\x78"


def test_peek_does_not_advance():
    _, stream = _window(b"\x01\x02\x03\x04\x05\x06\x07\x08")
    stream.skip(1)
    peeked = stream.peek32()
    assert stream.offset == 1
    assert stream.read32() == peeked
    assert stream.peek_buf(3) == b"\x06\x07\x08"
    assert stream.offset == 5


def test_read_past_end_raises_eof():
    base = MemoryStream(b"\x01")
    stream = DataSubStream(base, 0, 2)
    with pytest.raises(EOFError):
        stream.read16()


def test_string_round_trip():
    base = MemoryStream()
    stream = DataSubStream(base, 0, 0)
    stream.write_string("hello")
    stream.rewind()
    assert stream.read_string() == "hello"
    assert stream.offset == len("hello") + 1


def test_read_string_truncates():
    _, stream = _window(b"abcdef\0")
    assert stream.read_string(3) == "abc"
    assert stream.offset == 3


def test_read_string_zero_length_reads_nothing():
    _, stream = _window(b"abc\0")
    assert stream.read_string(0) == ""
    assert stream.offset == 0


def test_read_string_negative_length_halts():
    _, stream = _window(b"abc")
    with pytest.raises(HaltError):
        stream.read_string(-1)


def test_read_string_handles_crlf_with_newline_terminator():
    _, stream = _window(b"line1\r\nline2")
    assert stream.read_string(None, "\n", "\r") == "line1"
    assert stream.read_string(None, "\n", "\r") == "line2"
    assert stream.hit_eof()


def test_read_string_alternate_terminator():
    _, stream = _window(b"key=value")
    assert stream.read_string(None, "=") == "key"
    assert stream.read_string() == "value"


def test_read_string_at_eof_is_empty():
    _, stream = _window(b"")
    assert stream.read_string(10) == ""


def test_skip_remain_and_eof():
    _, stream = _window(b"abcdef")
    stream.skip(4)
    assert stream.remain == 2
    assert not stream.hit_eof()
    stream.skip(2)
    assert stream.hit_eof()


def test_saved_position_restores_after_failed_read():
    _, stream = _window(b"abcdef")
    stream.skip(2)
    with pytest.raises(HaltError):
        with stream.saved_position():
            stream.read64()
    assert stream.offset == 2


def test_copy_streams_copies_everything_from_start():
    source = MemoryStream(b"The quick brown fox")
    source.skip(5)
    out = MemoryStream()
    copy_streams(out, source, buffer_size=4)
    assert bytes(out.data) == b"The quick brown fox"


def test_copy_sub_streams_copies_from_current_position():
    source = MemoryStream(b"0123456789")
    source.skip(2)
    out = MemoryStream()
    copy_sub_streams(out, source, 5, buffer_size=2)
    assert bytes(out.data) == b"23456"
    assert source.offset == 7


def test_sub_stream_reads_its_window():
    base = MemoryStream(b"0123456789")
    sub = DataSubStream(base, 3, 4)
    assert sub.read_buf(2) == b"34"
    base.rewind()
    assert sub.read_buf(2) == b"56"
    assert sub.hit_eof()


def test_sub_stream_read_past_window_halts():
    base = MemoryStream(b"0123456789")
    sub = DataSubStream(base, 3, 2)
    with pytest.raises(HaltError):
        sub.read_buf(3)


def test_sub_stream_write_extends_length_and_writes_parent():
    base = MemoryStream(b"0123456789")
    sub = DataSubStream(base, 8, 0)
    sub.write_buf(b"XYZ")
    assert sub.length == 3
    assert bytes(base.data) == b"01234567XYZ"


def test_sub_stream_set_offset_moves_parent():
    base = MemoryStream(b"0123456789")
    sub = DataSubStream(base, 2, 6)
    sub.set_offset(3)
    assert base.offset == 5
    assert sub.parent_offset == base.offset
    assert sub.read8() == ord("5")


def test_root_parent_follows_nesting():
    base = MemoryStream(b"0123456789")
    outer = DataSubStream(base, 1, 8)
    inner = DataSubStream(outer, 1, 4)
    assert inner.root_parent() is base
    assert inner.parent is outer
    assert base.root_parent() is base


def test_unattached_sub_stream_rejects_reads():
    sub = DataSubStream()
    with pytest.raises(ValueError):
        sub.set_offset(0)