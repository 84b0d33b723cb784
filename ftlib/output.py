"""Writing characters, strings and integers to a text stream.

The stream defaults to standard output.
"""

import sys


def _target(stream):
    return sys.stdout if stream is None else stream


def _char(c):
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def put_char(c, stream=None):
    """Write one character; an integer code is truncated to 8 bits."""
    _target(stream).write(_char(c))


def put_str(s, stream=None):
    """Write the string ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    _target(stream).write(s)


def put_endl(s, stream=None):
    """Write the string ``s`` followed by a newline."""
    put_str(s, stream)
    _target(stream).write("\n")


def put_nbr(n, stream=None):
    """Write the decimal representation of the integer ``n``."""
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    _target(stream).write(str(n))