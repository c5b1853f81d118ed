# ftlib

Small utilities with no dependencies. They follow the behaviour of classic C
library routines and use ordinary Python types.

## Modules

### `ftlib.ctype`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print` each take an
integer code or a one-character string and return a `bool`. The checks cover
the ASCII range only. `to_upper` and `to_lower` convert ASCII letters. They
return a value of the same kind they were given. Anything that is not a letter
comes back unchanged.

### `ftlib.memory`

These functions work on `bytearray` or `memoryview` buffers:

- `memset(buf, c, n)`, `bzero(buf, n)`, `memcpy(dest, src, n)` and
  `memmove(dest, src, n)` change the buffer in place.
- `memchr(buf, c, n)` returns the index of a byte, or `None`.
- `memcmp(a, b, n)` returns `-1`, `0` or `1`.
- `calloc(nmemb, size)` returns a zeroed `bytearray`. When either argument is
  zero it returns a one-byte buffer.

A negative count raises `ValueError`, and so does a count longer than a buffer.

### `ftlib.strfuncs`

These functions take `str` values. A `"\0"` in a string ends it.

- `strlen` returns the length up to that terminator.
- `strlcpy` and `strlcat` return a `CopyResult(text, length)`.
- `strchr`, `strrchr` and `strnstr` return an index or `None`.
- `strcmp` and `strncmp` return the difference between the first pair of
  characters that differ.
- `atoi` parses a leading integer and wraps the result like a 32-bit `int`.
- `strdup` and `strndup` return copies of the string.

### `ftlib.transform`

- `substr`, `strjoin` and `strtrim` build new strings.
- `split(s, sep)` returns the non-empty pieces.
- `itoa` formats an integer.
- `strmapi(s, f)` builds a string from `f(index, char)`.
- `striteri(s, f)` calls `f(index, char)` for every character. Where `f`
  returns a string, that string replaces the character. Where it returns
  `None`, the character is kept. `striteri` returns the resulting string.

### `ftlib.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to an OS file descriptor
with `os.write`. Strings are encoded as UTF-8. `put_str(None, fd)` writes
nothing.

### `ftlib.linkedlist`

This module has a `Node` dataclass and a `LinkedList` class:

- `push_front` and `push_back` each return the new node.
- `last()` returns the last `Node`, or `None`.
- `clear(delete)` empties the list and passes each content to `delete`.
- `for_each(f)` calls `f` on each content.
- `map(f, delete)` returns a new list. If `f` raises, the new list is cleared
  through `delete` and the exception propagates.

A `LinkedList` also supports `len()` and iteration over its contents.

### `ftlib.nextline`

`LineReader(buffer_size=1024, fd_max=1024)` reads a file descriptor in chunks
of `buffer_size` bytes. Each call to `read_line(fd)` returns the next line as
`bytes`, with its newline if the line has one. At end of input it returns
`None`. The reader keeps the data it has read past each line, separately for
each descriptor.

A descriptor outside `0 .. fd_max - 1` raises `ValueError`. A read error
propagates as `OSError`.

`get_next_line(fd)` does the same with one shared reader that uses the default
sizes.

## Examples

```python
from ftlib.strfuncs import atoi, strlcpy
from ftlib.transform import split, itoa

atoi("  -42abc")                  # -42
strlcpy("World", "Hello12334", 8) # CopyResult(text='Hello12', length=10)
split("   lorem   ipsum ", " ")   # ['lorem', 'ipsum']
itoa(-2147483648)                 # '-2147483648'
```

```python
from ftlib.linkedlist import LinkedList

items = LinkedList([1, 2])
items.push_front(0)
list(items)                # [0, 1, 2]
items.last().content       # 2
```

```python
import os
from ftlib.nextline import LineReader

reader = LineReader(buffer_size=16)
fd = os.open("notes.txt", os.O_RDONLY)
while (line := reader.read_line(fd)) is not None:
    print(line.decode(), end="")
os.close(fd)
```

## What it does not do

`ftlib` is a library only. It installs no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```