# ftlib

A small library of utilities that follow the behaviour of the classic C
character, string and memory routines, expressed with Python types. Positions
are returned as indexes (or `None`), and bad arguments such as negative counts
raise `ValueError` instead of giving undefined results.

## Modules

- `ftlib.chars`: character classification (`is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`), ASCII case conversion (`to_upper`, `to_lower`) and
  integer conversion (`atoi`, `itoa`). Characters may be given as an int code
  or a one-character string; `to_upper` and `to_lower` return the same type
  they were given.
- `ftlib.memory`: operations on byte buffers: `memset`, `bzero`, `calloc`
  (returns a zeroed `bytearray`), `memcpy`, `memmove` (copies within one
  buffer between offsets, overlap allowed), `memchr` (index or `None`) and
  `memcmp`. A count larger than a buffer raises `ValueError`.
- `ftlib.strings`: string helpers: `strlen`, `strlcpy` and `strlcat` (return
  the resulting string together with the length the full result would need),
  `strchr`, `strrchr`, `strnstr` (indexes or `None`; searching for `"\0"`
  finds the end of the string), `strncmp`, `strdup`, `substr`, `strjoin`,
  `strtrim`, `split` (drops empty pieces), `strmapi` and `striteri` (works on
  a mutable sequence of characters, replacing those for which the callback
  returns a value).
- `ftlib.linked`: a singly linked list, `LinkedList`, made of `Node` objects,
  with `append`, `appendleft`, `popleft`, `last`, `clear`, `for_each`, `map`,
  `len()` and iteration over the contents.
- `ftlib.output`: writing to raw file descriptors: `put_char`, `put_str`,
  `put_endl` and `put_nbr`. Strings are written in UTF-8; an int given to
  `put_char` is written as one byte.
- `ftlib.lines`: reading a raw file descriptor one line at a time.
  `LineReader` keeps a separate buffer for each descriptor; `next_line`
  returns `bytes` with the newline included, or `None` at end of input.
  `get_next_line` uses one shared reader with the default buffer size of 42.

## Installation

```
pip install .
```

## Examples

```python
from ftlib.chars import atoi, itoa
from ftlib.strings import split, strtrim

atoi("  -42abc")          # -42
itoa(-2147483648)         # "-2147483648"
split("a,,b,c", ",")      # ["a", "b", "c"]
strtrim("xxhixx", "x")    # "hi"
```

Reading lines from a descriptor:

```python
import os
import sys
from ftlib.lines import LineReader

reader = LineReader(buffer_size=42)
fd = os.open("map.fdf", os.O_RDONLY)
try:
    for line in reader.lines(fd):
        sys.stdout.buffer.write(line)
finally:
    os.close(fd)
```

A linked list:

```python
from ftlib.linked import LinkedList

items = LinkedList([1, 2, 3])
items.appendleft(0)
doubled = items.map(lambda x: x * 2, None)
list(doubled)             # [0, 2, 4, 6]
```

## What it does not do

This is a library only: it has no command-line program. Line reading works
on raw file descriptors and returns undecoded `bytes`; decoding the text is
left to the caller.

## Running the tests

```
pip install .[test]
pytest
```