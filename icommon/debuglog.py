"""An indenting debug log file with source prefixes and blocks."""

from __future__ import annotations

import contextlib
import os
import sys
from enum import IntEnum
from typing import IO

_OPEN_RETRIES = 5
_SOURCE_LIMIT = 15
_HEADER_NAME_WIDTH = 8
_SPACES_PER_INDENT = 4


class LogLevel(IntEnum):
    FATAL_ERROR = 0
    ERROR = 1
    WARNING = 2
    MESSAGE = 3
    VERBOSE_MESSAGE = 4
    DEBUG_MESSAGE = 5


def _format(fmt: str, args: tuple) -> str:
    return fmt % args if args else fmt


def _make_all_dirs(path: str) -> None:
    for index, char in enumerate(path):
        if char in "\\/" and index:
            with contextlib.suppress(OSError):
                os.mkdir(path[:index])


class DebugLog:
    """A log file that tracks its cursor column to indent with tabs."""

    def __init__(self, path: str | os.PathLike | None = None) -> None:
        self._file: IO[str] | None = None
        self._source = ""
        self._header = ""
        self._indent_level = 0
        self._cursor = 0
        self._in_block = False
        self.auto_flush = True
        self.log_level = LogLevel.DEBUG_MESSAGE
        self.print_level = LogLevel.MESSAGE
        if path is not None:
            self.open(path)

    @property
    def source(self) -> str:
        return self._source

    @property
    def header(self) -> str:
        return self._header

    @property
    def indent_level(self) -> int:
        return self._indent_level

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def open(self, path: str | os.PathLike) -> None:
        """Open the log file, falling back to numbered names if it cannot be opened."""
        self.close()
        path = os.fspath(path)
        candidates = [path] + [f"{path}{number}" for number in range(_OPEN_RETRIES)]
        for candidate in candidates:
            try:
                self._file = open(candidate, "w", encoding="utf-8")
            except OSError:
                continue
            return

    def open_relative(self, base: str | os.PathLike, rel_path: str) -> None:
        """Open a log at base + rel_path, creating missing directories."""
        path = os.fspath(base) + rel_path
        _make_all_dirs(path)
        self.open(path)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def message(self, message: str, source: str | None = None, new_line: bool = True) -> None:
        """Write an unformatted message, optionally changing the source first."""
        if source is not None:
            self.set_source(source)
        base = self._indent_level * _SPACES_PER_INDENT
        if self._in_block:
            self._seek_cursor(self._round_to_tab(base + len(self._header)))
        else:
            self._seek_cursor(base)
            self._print_text(self._header)
        self._print_text(message)
        if new_line:
            self._new_line()

    def formatted_message(self, fmt: str, *args) -> None:
        self.message(_format(fmt, args))

    def log(self, level: LogLevel, fmt: str, *args) -> None:
        """Write a message if level passes the log level, print it if it passes the print level."""
        self._emit(level, fmt, args, new_line=True)

    def log_nnl(self, level: LogLevel, fmt: str, *args) -> None:
        """Like log, without ending the line."""
        self._emit(level, fmt, args, new_line=False)

    def _emit(self, level: LogLevel, fmt: str, args: tuple, new_line: bool) -> None:
        write = level <= self.log_level
        show = level <= self.print_level
        if not (write or show):
            return
        text = _format(fmt, args)
        if write:
            self.message(text, new_line=new_line)
        if show:
            sys.stdout.write(text + "\n" if new_line else text)

    def set_source(self, source: str) -> None:
        self._source = source[:_SOURCE_LIMIT]
        name = self._source[:_HEADER_NAME_WIDTH]
        self._header = f"[{name.ljust(_HEADER_NAME_WIDTH)}]\t"

    def clear_source(self) -> None:
        """Forget the source name; the current line prefix is kept."""
        self._source = ""

    def indent(self) -> None:
        self._indent_level += 1

    def outdent(self) -> None:
        if self._indent_level:
            self._indent_level -= 1

    def open_block(self) -> None:
        self._seek_cursor(self._indent_level * _SPACES_PER_INDENT)
        self._print_text(self._header)
        self._in_block = True

    def close_block(self) -> None:
        self._in_block = False

    def set_auto_flush(self, enabled: bool) -> None:
        self.auto_flush = enabled

    def set_log_level(self, level: LogLevel) -> None:
        self.log_level = LogLevel(level)

    def set_print_level(self, level: LogLevel) -> None:
        self.print_level = LogLevel(level)

    def _tab_size(self) -> int:
        return ((~self._cursor) & 3) + 1

    @staticmethod
    def _round_to_tab(spaces: int) -> int:
        return (spaces + 3) & ~3

    def _print_spaces(self, count: int) -> None:
        if self._file is not None:
            tab = self._tab_size()
            remaining = count
            pieces = []
            while remaining > 0:
                if remaining >= tab:
                    remaining -= tab
                    pieces.append("\t")
                else:
                    remaining -= 1
                    pieces.append(" ")
            self._file.write("".join(pieces))
        self._cursor += count

    def _print_text(self, text: str) -> None:
        if self._file is not None:
            self._file.write(text)
            if self.auto_flush:
                self._file.flush()
        for char in text:
            self._cursor += self._tab_size() if char == "\t" else 1

    def _new_line(self) -> None:
        if self._file is not None:
            self._file.write("\n")
            if self.auto_flush:
                self._file.flush()
        self._cursor = 0

    def _seek_cursor(self, position: int) -> None:
        if position > self._cursor:
            self._print_spaces(position - self._cursor)


default_log = DebugLog()


def fatal_error(fmt: str, *args) -> None:
    default_log.log(LogLevel.FATAL_ERROR, fmt, *args)


def error(fmt: str, *args) -> None:
    default_log.log(LogLevel.ERROR, fmt, *args)


def warning(fmt: str, *args) -> None:
    default_log.log(LogLevel.WARNING, fmt, *args)


def message(fmt: str, *args) -> None:
    default_log.log(LogLevel.MESSAGE, fmt, *args)


def verbose_message(fmt: str, *args) -> None:
    default_log.log(LogLevel.VERBOSE_MESSAGE, fmt, *args)


def debug_message(fmt: str, *args) -> None:
    default_log.log(LogLevel.DEBUG_MESSAGE, fmt, *args)