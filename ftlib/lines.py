"""Line-by-line reading from file descriptors with per-descriptor buffering."""

from __future__ import annotations

import operator
import os
from collections.abc import Iterator

DEFAULT_BUFFER_SIZE = 42


class LineReader:
    """Reads newline-terminated lines from raw file descriptors.

    Each descriptor keeps its own buffer of bytes read past the last line
    returned, so several descriptors can be read alternately.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        buffer_size = operator.index(buffer_size)
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._buffer_size = buffer_size
        self._stash: dict[int, bytes] = {}

    @property
    def buffer_size(self) -> int:
        """Number of bytes requested from the descriptor on each read."""
        return self._buffer_size

    def next_line(self, fd: int) -> bytes | None:
        """Return the next line of ``fd``, newline included, or None at end of input.

        The last line of the input is returned without a newline if it has
        none. A read error discards the descriptor's buffer and propagates.
        """
        fd = operator.index(fd)
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        stash = bytearray(self._stash.pop(fd, b""))
        while b"\n" not in stash:
            chunk = os.read(fd, self._buffer_size)
            if not chunk:
                break
            stash += chunk
        if not stash:
            return None
        cut = stash.find(b"\n")
        if cut < 0:
            return bytes(stash)
        line = bytes(stash[: cut + 1])
        rest = bytes(stash[cut + 1:])
        if rest:
            self._stash[fd] = rest
        return line

    def lines(self, fd: int) -> Iterator[bytes]:
        """Yield every remaining line of ``fd`` until end of input."""
        while True:
            line = self.next_line(fd)
            if line is None:
                return
            yield line

    def discard(self, fd: int) -> None:
        """Drop any bytes buffered for ``fd``."""
        self._stash.pop(operator.index(fd), None)


_default_reader = LineReader()


def get_next_line(fd: int) -> bytes | None:
    """Return the next line of ``fd`` using a shared reader, or None at end of input."""
    return _default_reader.next_line(fd)