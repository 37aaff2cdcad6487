"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

from ftlib.chars import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(char: int | str, fd: int) -> None:
    """Write one character to ``fd``.

    An int is written as a single byte (its low 8 bits); a one-character
    string is written in UTF-8.
    """
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        data = char.encode("utf-8")
    else:
        data = bytes([char & 0xFF])
    _write_all(fd, data)


def put_str(text: str | None, fd: int) -> None:
    """Write ``text`` to ``fd``; None writes nothing."""
    if text is None:
        return
    _write_all(fd, text.encode("utf-8"))


def put_endl(text: str | None, fd: int) -> None:
    """Write ``text`` followed by a newline; nothing for None or a negative fd."""
    if text is None or fd < 0:
        return
    _write_all(fd, (text + "\n").encode("utf-8"))


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal representation of ``n`` to ``fd``."""
    put_str(itoa(n), fd)