import pytest

from icommon.fifo import Fifo


def test_push_pop_round_trip():
    fifo = Fifo(16)
    fifo.push(b"hello")
    assert len(fifo) == 5
    assert fifo.pop(5) == b"hello"
    assert len(fifo) == 0


def test_order_is_first_in_first_out():
    fifo = Fifo(16)
    fifo.push(b"abc")
    fifo.push(b"def")
    assert fifo.pop(2) == b"ab"
    assert fifo.pop(4) == b"cdef"


def test_wraparound_preserves_data():
    fifo = Fifo(8)
    fifo.push(b"012345")
    assert fifo.pop(4) == b"0123"
    fifo.push(b"ABCDE")
    assert fifo.buffer_remain == 1
    assert fifo.peek(7) == b"45" + b"ABCDE"
    assert fifo.pop(7) == b"45ABCDE"


def test_peek_does_not_consume():
    fifo = Fifo(4)
    fifo.push(b"xy")
    assert fifo.peek(1) == b"x"
    assert fifo.data_length == 2
    assert fifo.pop(2) == b"xy"


def test_overflow_raises():
    fifo = Fifo(4)
    fifo.push(b"abc")
    with pytest.raises(BufferError):
        fifo.push(b"de")
    assert fifo.pop(3) == b"abc"


def test_underflow_raises():
    fifo = Fifo(4)
    fifo.push(b"a")
    with pytest.raises(BufferError):
        fifo.pop(2)
    with pytest.raises(BufferError):
        fifo.peek(2)


def test_clear_empties():
    fifo = Fifo(4)
    fifo.push(b"abcd")
    fifo.clear()
    assert len(fifo) == 0
    assert fifo.buffer_remain == fifo.buffer_size


def test_zero_sized_fifo():
    fifo = Fifo()
    fifo.push(b"")
    assert fifo.pop(0) == b""
    with pytest.raises(BufferError):
        fifo.push(b"a")


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Fifo(-1)