# ftlib

A small collection of helpers modelled on the classic C standard-library routines, written for Python's own types: `bytes`, `bytearray` and `memoryview` for memory, `str` for text, iterators for lists and lines. Errors are raised as exceptions (`ValueError`, `TypeError`) rather than reported through return codes.

## Modules

- `ftlib.chars`: checks and conversions on single characters, given as a one-character string or an integer code (`isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`), plus `atoi` and `itoa`.
- `ftlib.memory`: byte-buffer operations (`memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc`, `realloc`). Lengths that are negative or run past the end of a buffer raise `ValueError`. `memmove` moves bytes within a single buffer between two offsets; `calloc` and `realloc` return new `bytearray` objects.
- `ftlib.strings`: string routines (`strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`, `strcmp`, `strstr`, `strnstr`, `strdup`, `substr`, `strjoin`, `strtrim`, `strmapi`, `striteri`, `split`). Search functions return an index or `None`; searching for `"\0"` gives `len(s)`. `strlcpy` and `strlcat` return a `(result, total_length)` pair.
- `ftlib.linked_list`: `LinkedList`, a singly linked list with `add_front`, `add_back`, `last`, `clear`, `for_each` and `map`, iteration and `len()`. `clear` and `map` take an optional `delete` callback that receives each discarded content.
- `ftlib.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, which write to a text stream (standard output by default).
- `ftlib.printf`: `format_string`, `printf` and `to_base`. The `%c %s %p %d %i %u %x %X %%` conversions are supported; integers follow 32-bit C semantics, `%s` of `None` gives `(null)` and `%p` of `None` gives `0x0`. `printf` returns the number of characters written.
- `ftlib.line_reader`: `LineReader` and `read_lines`, which read a text or binary stream in fixed-size chunks (120 by default) and return one line at a time, newline included.

## Examples

```python
from ftlib.chars import atoi, itoa
from ftlib.strings import split, strtrim
from ftlib.printf import format_string
from ftlib.linked_list import LinkedList

atoi("   -42abc")            # -42
itoa(-2147483648)            # "-2147483648"
split("  a b  c ", " ")      # ["a", "b", "c"]
strtrim("xxhixx", "x")       # "hi"
format_string("%d-%x", 255, 255)   # "255-ff"

items = LinkedList([1, 2, 3])
items.add_front(0)
list(items.map(lambda x: x * 10, None))   # [0, 10, 20, 30]
```

Reading lines from a stream:

```python
import io
from ftlib.line_reader import read_lines

for line in read_lines(io.StringIO("one\ntwo\n"), 120):
    print(line, end="")
```

## What it does not do

This is a library only. It installs no command-line program, and it contains no shell, command parser or token and syntax-tree types; it provides the building blocks above and nothing that runs commands.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```