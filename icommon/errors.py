"""Fatal assertion reporting."""

from __future__ import annotations

from typing import NoReturn

from icommon.debuglog import fatal_error

_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF


class HaltError(RuntimeError):
    """Raised when an assertion fails or the program is halted."""

    def __init__(self, description: str, code: int | str | None = None) -> None:
        self.description = description
        self.code = code
        super().__init__(_describe(description, code))


def _describe(description: str, code: int | str | None) -> str:
    text = f"Assertion failed: {description}"
    if code is None:
        return text
    if isinstance(code, str):
        return f"{text} (code = {code})"
    value = code & _U64
    if value & ~_U32:
        return f"{text} (code = {value:16X} ({value}))"
    value &= _U32
    return f"{text} (code = {value:08X} ({value}))"


def halt(description: str, code: int | str | None = None) -> NoReturn:
    """Log a fatal error and raise HaltError."""
    error = HaltError(description, code)
    fatal_error("%s", str(error))
    raise error


def check(condition: object, description: str, code: int | str | None = None) -> None:
    """Halt with description (and code) unless condition holds."""
    if not condition:
        halt(description, code)