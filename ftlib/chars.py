"""Character classification, case mapping and integer/text conversion.

Character arguments may be given either as a one-character string or as an
integer code point.  Case-mapping functions return a value of the same kind
as they were given.
"""

from itertools import takewhile

_WHITESPACE = " \n\t\r\v\f"


def _code(c):
    """Return the integer code of a character given as ``str`` or ``int``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _in_range(c, low, high):
    return low <= _code(c) <= high


def isalpha(c):
    """True if ``c`` is an ASCII letter."""
    return _in_range(c, ord("a"), ord("z")) or _in_range(c, ord("A"), ord("Z"))


def isdigit(c):
    """True if ``c`` is an ASCII decimal digit."""
    return _in_range(c, ord("0"), ord("9"))


def isalnum(c):
    """True if ``c`` is an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c):
    """True if ``c`` lies in the 7-bit ASCII range."""
    return _in_range(c, 0, 127)


def isprint(c):
    """True if ``c`` is a printable ASCII character, space included."""
    return _in_range(c, 32, 126)


def _convert_case(c, low, high, offset):
    code = _code(c)
    if low <= code <= high:
        code += offset
    return chr(code) if isinstance(c, str) else code


def toupper(c):
    """Map an ASCII lowercase letter to uppercase; anything else is returned unchanged."""
    return _convert_case(c, ord("a"), ord("z"), -32)


def tolower(c):
    """Map an ASCII uppercase letter to lowercase; anything else is returned unchanged."""
    return _convert_case(c, ord("A"), ord("Z"), 32)


def atoi(text):
    """Parse a leading decimal integer.

    Leading whitespace is skipped, then a single optional ``+`` or ``-`` sign,
    then as many ASCII digits as follow.  Parsing stops at the first other
    character; if no digits are found the result is 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(isdigit, rest))
    return sign * int(digits) if digits else 0


def itoa(n):
    """Return the decimal representation of the integer ``n``."""
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)