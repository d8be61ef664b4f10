# ftlib

A small library of helpers for ASCII character classes, integer and text
conversion, `bytearray` buffers, string searching and assembly, a singly
linked list, minimal formatted output and line-by-line reading from a
stream in fixed-size chunks. It has no dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `ftlib.charclass`

`is_alpha`, `is_alnum`, `is_ascii`, `is_digit`, `is_print`, `to_lower`,
`to_upper`. Each takes an integer code or a one-character string. The
`is_*` functions return `bool`. `to_lower` and `to_upper` change only ASCII
letters and return the same kind of value they were given.

### `ftlib.convert`

- `atoi(text)` skips leading ASCII whitespace, takes one optional `+` or
  `-`, then reads decimal digits up to the first other character. With no
  digits the result is `0`.
- `itoa(n)` renders an `int` in decimal; anything else raises `TypeError`.

### `ftlib.memory`

`bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`.
Destinations are `bytearray` or writable `memoryview` objects; byte values
are taken modulo 256. A length that is negative or longer than a buffer
raises `ValueError`. `memchr` returns an index or `None`; `memcmp` returns
the difference of the first unequal bytes, or `0`.

### `ftlib.text`

`strlen`, `strchr`, `strrchr`, `strcmp`, `strncmp`, `strnstr`, `strdup`,
`strjoin`, `substr`. Searches return an index or `None`; searching for
character code 0 returns `len(s)`. `strcmp` and `strncmp` return the
difference between the codes of the first differing characters, treating
the end of the shorter string as code 0. `substr` returns an empty string
when `start` is past the end.

### `ftlib.transform`

- `split(s, sep)` splits on one character and drops empty pieces. When `s`
  begins with `sep`, the last word is dropped as well.
- `strtrim(s, chars)` strips the characters of `chars` from both ends.
- `strmapi(s, func)` builds a new string from `func(index, char)`.
- `striteri(buffer, func)` rewrites a mutable sequence in place with
  `func(index, item)`, stopping at the first `0` or `"\0"`.
- `strlcpy(dst, src, size)` and `strlcat(dst, src, size)` work on
  zero-terminated `bytearray` buffers and return the length of `src`, or of
  the string they tried to build. When `dst` is already `size` bytes or
  longer, `strlcat` returns `len(src) + size` and writes nothing.

### `ftlib.linkedlist`

`Node` (a dataclass with `content` and `next`) and `LinkedList`, which takes
an optional iterable and supports `push_front`, `push_back`, `last`,
`len()`, iteration over contents, `remove_first(delete)` (raises
`IndexError` when empty), `clear(delete)`, `for_each(func)` and
`map(func, delete)`. If `func` raises during `map`, the contents already
produced are passed to `delete` and the exception propagates.

### `ftlib.output`

`put_char`, `put_str`, `put_endl`, `put_number` write to a text stream,
standard output by default. `put_str(None)` and `put_endl(None)` write
nothing.

### `ftlib.printf`

`sprintf(fmt, *args)` returns the formatted text; `printf(fmt, *args,
stream=None)` writes it and returns the number of characters written.
Conversions are `%c %s %p %d %i %u %x %X %%`. `%d`/`%i` wrap to a signed
32-bit value and `%u`/`%x`/`%X` to an unsigned 32-bit value. `%s` of `None`
prints `(null)`. `%p` prints an integer, or the `id()` of any other object,
in hex with a `0x` prefix. An unknown conversion produces nothing; a lone
`%` at the end is written as is; too few arguments raise `TypeError`.

### `ftlib.linereader`

`LineReader(stream, buffer_size=5)` reads a text or binary stream
`buffer_size` units at a time. `read_line()` returns the next line with its
newline (the last line may lack one) or `None` at the end; the reader is
also iterable. `read_lines(stream, buffer_size=5)` yields the same lines.
A `buffer_size` of zero or less raises `ValueError`.

## Example

```python
import io

from ftlib.printf import sprintf
from ftlib.linereader import read_lines
from ftlib.transform import split

sprintf("%d items, %x hex, %s", 42, 255, "done")   # '42 items, ff hex, done'
split("hello world  you", " ")                     # ['hello', 'world', 'you']
list(read_lines(io.StringIO("a\nb\nc"), 5))        # ['a\n', 'b\n', 'c']
```

## What it does not do

`ftlib` is a library only: it installs no command-line program, and
nothing in it draws, plays or runs a game or any other application.