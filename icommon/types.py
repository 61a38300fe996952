"""Integer, bit-field, time and vector helpers."""

from __future__ import annotations

import datetime
import math
import struct
import sys
from dataclasses import dataclass

FLOAT_EPSILON = 0.0001

_U32 = 0xFFFFFFFF


def extend16(value: int) -> int:
    """Sign-extend a 16-bit value to an unsigned 32-bit value."""
    value &= _U32
    return (0xFFFF0000 | value) if value & 0x8000 else value


def extend8(value: int) -> int:
    """Sign-extend an 8-bit value to an unsigned 32-bit value."""
    value &= _U32
    return (0xFFFFFF00 | value) if value & 0x80 else value


def _swap(value: int, size: int) -> int:
    mask = (1 << (size * 8)) - 1
    return int.from_bytes((value & mask).to_bytes(size, "little"), "big")


def swap16(value: int) -> int:
    """Reverse the byte order of a 16-bit value."""
    return _swap(value, 2)


def swap32(value: int) -> int:
    """Reverse the byte order of a 32-bit value."""
    return _swap(value, 4)


def swap64(value: int) -> int:
    """Reverse the byte order of a 64-bit value."""
    return _swap(value, 8)


def swap_float(value: float) -> float:
    """Reverse the byte order of a 32-bit float."""
    return struct.unpack("<f", struct.pack(">f", value))[0]


def swap_double(value: float) -> float:
    """Reverse the byte order of a 64-bit float."""
    return struct.unpack("<d", struct.pack(">d", value))[0]


def is_big_endian() -> bool:
    """Whether the host stores integers most significant byte first."""
    return sys.byteorder == "big"


def is_little_endian() -> bool:
    """Whether the host stores integers least significant byte first."""
    return not is_big_endian()


def char_code(a: int, b: int, c: int, d: int) -> int:
    """Pack four bytes into a 32-bit code, first byte lowest."""
    return (a & 0xFF) | ((b & 0xFF) << 8) | ((c & 0xFF) << 16) | ((d & 0xFF) << 24)


def version_code(primary: int, secondary: int, sub: int) -> int:
    """Pack a three-part version number into 32 bits."""
    return ((primary & 0xFFF) << 20) | ((secondary & 0xFFF) << 8) | (sub & 0xFF)


def version_primary(code: int) -> int:
    return (code >> 20) & 0xFFF


def version_secondary(code: int) -> int:
    return (code >> 8) & 0xFFF


def version_sub(code: int) -> int:
    return code & 0xFF


def make_color(a: int, r: int, g: int, b: int) -> int:
    """Pack ARGB components into a 32-bit colour."""
    return ((a & 0xFF) << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def color_alpha(color: int) -> int:
    return (color >> 24) & 0xFF


def color_red(color: int) -> int:
    return (color >> 16) & 0xFF


def color_green(color: int) -> int:
    return (color >> 8) & 0xFF


def color_blue(color: int) -> int:
    return color & 0xFF


def float_equal(a: float, b: float) -> bool:
    """Whether two floats differ by less than FLOAT_EPSILON."""
    return abs(a - b) < FLOAT_EPSILON


def mask_compare(lhs: bytes, rhs: bytes, mask: bytes) -> bool:
    """Compare two byte strings, considering only the bits set in mask."""
    return all((l & m) == (r & m) for l, r, m in zip(lhs, rhs, mask))


class Bitfield:
    """A fixed-width set of flag bits."""

    def __init__(self, width: int = 32, value: int = 0) -> None:
        if width <= 0:
            raise ValueError("Bitfield width must be positive")
        self.width = width
        self._mask = (1 << width) - 1
        self._field = value & self._mask

    def __int__(self) -> int:
        return self._field

    def __repr__(self) -> str:
        return f"Bitfield(width={self.width}, value={self._field:#x})"

    def clear(self, bits: int | None = None) -> None:
        """Clear the given bits, or every bit when none are given."""
        if bits is None:
            self._field = 0
        else:
            self._field &= ~bits & self._mask

    def raw_set(self, value: int) -> None:
        self._field = value & self._mask

    def set(self, bits: int) -> None:
        self._field = (self._field | bits) & self._mask

    def unset(self, bits: int) -> None:
        self.clear(bits)

    def mask(self, bits: int) -> None:
        self._field &= bits

    def toggle(self, bits: int) -> None:
        self._field = (self._field ^ bits) & self._mask

    def write(self, bits: int, state: bool) -> None:
        if state:
            self.set(bits)
        else:
            self.clear(bits)

    def get(self, bits: int | None = None) -> int:
        """Return all bits, or only those selected by bits."""
        return self._field if bits is None else self._field & bits

    def extract(self, bit: int) -> int:
        return (self._field >> bit) & 1

    def extract_field(self, shift: int, length: int) -> int:
        if not 0 <= length <= 32:
            raise ValueError("field length must be between 0 and 32")
        return (self._field >> shift) & ((1 << length) - 1)

    def is_set(self, bits: int) -> bool:
        """Whether all of the given bits are set."""
        return (self._field & bits) == bits

    def is_unset(self, bits: int) -> bool:
        """Whether all of the given bits are clear."""
        return not self._field & bits

    is_clear = is_unset


class Bitstring:
    """A bit vector whose length is rounded up to whole bytes."""

    def __init__(self, length: int) -> None:
        if length < 0:
            raise ValueError("Bitstring length must not be negative")
        self._data = bytearray((length + 7) // 8)

    def __len__(self) -> int:
        return len(self._data) * 8

    def _check(self, index: int, operation: str) -> None:
        if not 0 <= index < len(self):
            raise IndexError(f"Bitstring.{operation}: out of range")

    def clear(self, index: int | None = None) -> None:
        """Clear one bit, or every bit when no index is given."""
        if index is None:
            self._data[:] = bytes(len(self._data))
            return
        self._check(index, "clear")
        self._data[index >> 3] &= ~(1 << (index & 7)) & 0xFF

    def set(self, index: int) -> None:
        self._check(index, "set")
        self._data[index >> 3] |= 1 << (index & 7)

    def is_set(self, index: int) -> bool:
        self._check(index, "is_set")
        return bool(self._data[index >> 3] & (1 << (index & 7)))

    def is_clear(self, index: int) -> bool:
        self._check(index, "is_clear")
        return not self._data[index >> 3] & (1 << (index & 7))


@dataclass
class Time:
    """A time of day that may be unset."""

    seconds: int = 0
    minutes: int = 0
    hours: int = 0
    has_data: bool = False

    def clear(self) -> None:
        self.seconds = self.minutes = self.hours = 0
        self.has_data = False

    def set_to_now(self) -> None:
        now = datetime.datetime.now()
        self.set(now.second, now.minute, now.hour)

    def set(self, seconds: int, minutes: int, hours: int) -> None:
        self.seconds = seconds & 0xFF
        self.minutes = minutes & 0xFF
        self.hours = hours & 0xFF
        self.has_data = True

    def is_set(self) -> bool:
        return self.has_data


@dataclass
class Vector2:
    """A two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> None:
        mag = self.magnitude()
        self.x /= mag
        self.y /= mag

    def reverse(self) -> None:
        self.x, self.y = -self.y, -self.x

    def scale(self, factor: float) -> None:
        self.x *= factor
        self.y *= factor

    def swap_bytes(self) -> None:
        self.x = swap_float(self.x)
        self.y = swap_float(self.y)

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    def __truediv__(self, factor: float) -> Vector2:
        return Vector2(self.x / factor, self.y / factor)


@dataclass
class Vector3:
    """A three-dimensional vector with component-wise arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> None:
        mag = self.magnitude()
        self.x /= mag
        self.y /= mag
        self.z /= mag

    def scale(self, factor: float) -> None:
        self.x *= factor
        self.y *= factor
        self.z *= factor

    def swap_bytes(self) -> None:
        self.x = swap_float(self.x)
        self.y = swap_float(self.y)
        self.z = swap_float(self.z)

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vector3) -> Vector3:
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __truediv__(self, other: Vector3) -> Vector3:
        return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)