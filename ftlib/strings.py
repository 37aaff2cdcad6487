"""String helpers with terminator-aware search, bounded copies and splitting."""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from itertools import zip_longest

_TERMINATOR = "\0"


def _char(char: int | str) -> str:
    """Return a one-character string for a character given as int or str."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    return chr(operator.index(char))


def _non_negative(value: int, name: str) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the (possibly truncated) copy and the full length of ``src``,
    so truncation happened when the length is not below ``size``.
    """
    size = _non_negative(size, "size")
    return src[: max(size - 1, 0)], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting string and the length the full concatenation
    would need. When ``dest`` is already at least ``size`` long, nothing is
    appended and the reported length is ``len(src) + size``.
    """
    size = _non_negative(size, "size")
    room = max(size - len(dest) - 1, 0)
    result = dest + src[:room]
    if len(dest) < size:
        return result, len(dest) + len(src)
    return result, len(src) + size


def strchr(text: str, char: int | str) -> int | None:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for the terminator character finds the end of the string.
    """
    target = _char(char)
    if target == _TERMINATOR:
        index = text.find(target)
        return len(text) if index < 0 else index
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, char: int | str) -> int | None:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for the terminator character finds the end of the string.
    """
    target = _char(char)
    if target == _TERMINATOR:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns the difference of the code points at the first mismatch (or at
    the end of the shorter string), else 0.
    """
    count = _non_negative(count, "count")
    pairs = zip_longest(first, second, fillvalue=_TERMINATOR)
    for _, (a, b) in zip(range(count), pairs):
        if a != b or a == _TERMINATOR:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    An empty needle matches at 0. Returns the index of the match or None.
    """
    length = _non_negative(length, "length")
    if not needle:
        return 0
    if len(needle) > length:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return str(text)


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    start = _non_negative(start, "start")
    length = _non_negative(length, "length")
    if len(text) <= start:
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def split(text: str, sep: int | str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    return [word for word in text.split(_char(sep)) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    text: MutableSequence[str], func: Callable[[int, str], str | None]
) -> MutableSequence[str]:
    """Call ``func(index, char)`` for each character of a mutable sequence.

    A non-None return value replaces the character in place. The sequence
    is returned.
    """
    for index, char in enumerate(text):
        replacement = func(index, char)
        if replacement is not None:
            text[index] = replacement
    return text