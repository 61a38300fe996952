import pytest

from icommon.filestream import FileStream, extract_file_name, make_all_dirs


def test_create_write_and_read_back(tmp_path):
    path = tmp_path / "data.bin"
    with FileStream() as stream:
        stream.create(path)
        stream.write32(0x12345678)
        stream.write_string("hi")
        assert stream.length == 7
    with FileStream(path) as stream:
        assert stream.length == 7
        assert stream.read32() == 0x12345678
        assert stream.read_string() == "hi"
        assert stream.hit_eof()


def test_context_manager_closes(tmp_path):
    path = tmp_path / "x.bin"
    path.write_bytes(b"abc")
    with FileStream(path) as stream:
        assert not stream.closed
    assert stream.closed


def test_open_missing_raises(tmp_path):
    with pytest.raises(OSError):
        FileStream(tmp_path / "missing.bin")


def test_read_on_closed_stream_raises():
    stream = FileStream()
    with pytest.raises(ValueError):
        stream.read_buf(1)


def test_set_offset_and_peek(tmp_path):
    path = tmp_path / "p.bin"
    path.write_bytes(b"abcdef")
    with FileStream(path) as stream:
        stream.set_offset(2)
        assert stream.peek_buf(2) == b"cd"
        assert stream.offset == 2
        assert stream.read_buf(4) == b"cdef"


def test_set_length_truncates(tmp_path):
    path = tmp_path / "t.bin"
    with FileStream() as stream:
        stream.create(path)
        stream.write_buf(b"abcdef")
        stream.set_length(3)
        assert stream.length == 3
        assert stream.offset == 3
    assert path.read_bytes() == b"abc"


def test_set_length_extends(tmp_path):
    path = tmp_path / "e.bin"
    with FileStream() as stream:
        stream.create(path)
        stream.write_buf(b"ab")
        stream.set_length(10)
    assert path.stat().st_size == 10


def test_write_past_end_fills_gap(tmp_path):
    path = tmp_path / "g.bin"
    with FileStream() as stream:
        stream.create(path)
        stream.set_offset(4)
        stream.write_buf(b"x")
        assert stream.length == 5
    assert path.read_bytes() == b"\0\0\0\0x"


def test_make_all_dirs_creates_parents_only(tmp_path):
    target = tmp_path / "a" / "b" / "file.txt"
    make_all_dirs(str(target))
    assert (tmp_path / "a" / "b").is_dir()
    assert not target.exists()


def test_extract_file_name():
    assert extract_file_name("dir/sub/name.txt") == "name.txt"
    assert extract_file_name("dir\\name.txt") == "name.txt"
    assert extract_file_name("dir/") == ""
    assert extract_file_name("plain") is None