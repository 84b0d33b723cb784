"""String operations with the semantics of the classic C string routines.

Search functions return an index into the string, or ``None`` when there is
no match.  Where the C routine could point at the terminating NUL, for
example when searching for ``"\\0"``, the index returned is ``len(s)``.
Character arguments may be a one-character string or an integer code; an
integer is truncated to 8 bits.
"""

from collections.abc import MutableSequence
from itertools import zip_longest

_NUL = "\0"


def _char(c):
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _check_non_negative(name, value):
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s):
    """Return the number of characters in ``s``."""
    return len(s)


def strlcpy(src, dstsize):
    """Copy ``src`` into a destination of ``dstsize`` slots, NUL included.

    Returns ``(copied, len(src))``; at most ``dstsize - 1`` characters are
    copied.  With ``dstsize`` 0 nothing is copied.
    """
    _check_non_negative("dstsize", dstsize)
    copied = src[:dstsize - 1] if dstsize > 0 else ""
    return copied, len(src)


def strlcat(dst, src, size):
    """Append ``src`` to ``dst`` within a destination of ``size`` slots.

    Returns ``(result, total)``.  ``total`` is ``len(dst) + len(src)``, or
    ``size + len(src)`` when ``size`` is smaller than ``len(dst)``, in which
    case ``dst`` is left as it is.
    """
    _check_non_negative("size", size)
    if size < len(dst):
        return dst, size + len(src)
    room = max(size - len(dst) - 1, 0)
    return dst + src[:room], len(dst) + len(src)


def strchr(s, c):
    """Return the index of the first occurrence of ``c`` in ``s``, or ``None``."""
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s, c):
    """Return the index of the last occurrence of ``c`` in ``s``, or ``None``."""
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1, s2, n):
    """Compare at most ``n`` characters; return -1, 0 or 1."""
    _check_non_negative("n", n)
    a, b = s1[:n], s2[:n]
    return (a > b) - (a < b)


def strcmp(s1, s2):
    """Compare two strings; return the code difference of the first differing characters."""
    for a, b in zip_longest(s1, s2, fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strstr(haystack, needle):
    """Return the index of the first occurrence of ``needle``, or ``None``.

    An empty ``needle`` matches at index 0.
    """
    index = haystack.find(needle)
    return None if index < 0 else index


def strnstr(haystack, needle, length):
    """Like :func:`strstr`, but the match must lie within the first ``length`` characters."""
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strdup(s):
    """Return a copy of ``s``."""
    return str(s)


def substr(s, start, length):
    """Return at most ``length`` characters of ``s`` from ``start``.

    A ``start`` at or past the end gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    return s[start:start + length]


def strjoin(s1, s2):
    """Return the concatenation of ``s1`` and ``s2``."""
    return s1 + s2


def strtrim(s, charset):
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if s is None or charset is None:
        raise TypeError("strtrim needs a string and a character set")
    return s.strip(charset)


def strmapi(s, func):
    """Return a new string made of ``func(index, char)`` for each character of ``s``."""
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(s, func):
    """Call ``func(index, char)`` for each character of ``s`` in order.

    When ``s`` is a mutable sequence of characters, a return value other
    than ``None`` replaces the element it was called with.
    """
    mutable = isinstance(s, MutableSequence)
    for i, ch in enumerate(s):
        result = func(i, ch)
        if mutable and result is not None:
            s[i] = result


def split(s, c):
    """Split ``s`` on the delimiter ``c``, dropping empty words."""
    if s is None:
        raise TypeError("split needs a string")
    return [word for word in s.split(_char(c)) if word]