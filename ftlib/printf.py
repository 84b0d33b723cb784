"""Minimal ``printf``-style formatting.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``.  Any other character after ``%`` is consumed and
produces no output.  Integer conversions use 32-bit C semantics: ``%d`` and
``%i`` wrap to a signed 32-bit value, ``%u``, ``%x`` and ``%X`` to an
unsigned one.  Pointers are 64 bits wide.
"""

from .output import put_str

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_NULL_STRING = "(null)"
_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _check_digits(digits):
    if len(digits) < 2:
        raise ValueError("a base needs at least two digits")
    if len(set(digits)) != len(digits):
        raise ValueError(f"base digits must be distinct: {digits!r}")
    for ch in digits:
        if ch in "+-":
            raise ValueError("base digits must not contain '+' or '-'")
        if not 32 <= ord(ch) <= 126:
            raise ValueError(f"base digit {ch!r} is not printable ASCII")


def to_base(n, digits):
    """Return the non-negative integer ``n`` written with the given digit set.

    The base is ``len(digits)``.  The digit set must hold at least two
    distinct printable ASCII characters and neither ``+`` nor ``-``.
    """
    _check_digits(digits)
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"cannot convert a negative number: {n}")
    base = len(digits)
    out = []
    while True:
        n, rem = divmod(n, base)
        out.append(digits[rem])
        if n == 0:
            break
    return "".join(reversed(out))


def _as_int(value, spec):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return value


def _signed32(value):
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _format_char(value):
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _format_str(value):
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _format_pointer(value):
    if value is None:
        return "0x0"
    return "0x" + to_base(_as_int(value, "p") & _POINTER_MASK, _LOWER_HEX)


def _convert(spec, value):
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_str(value)
    if spec == "p":
        return _format_pointer(value)
    if spec in "di":
        return str(_signed32(_as_int(value, spec)))
    if spec == "u":
        return str(_as_int(value, spec) & _UINT_MASK)
    digits = _UPPER_HEX if spec == "X" else _LOWER_HEX
    return to_base(_as_int(value, spec) & _UINT_MASK, digits)


def format_string(fmt, *args):
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    Raises ``TypeError`` when there are fewer arguments than conversions or
    an argument has the wrong type, and ``ValueError`` when ``fmt`` ends in a
    lone ``%``.
    """
    values = iter(args)
    chars = iter(fmt)
    out = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        if spec == "%":
            out.append("%")
        elif spec in "cspdiuxX":
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for format {fmt!r}") from None
            out.append(_convert(spec, value))
    return "".join(out)


def printf(fmt, *args, stream=None):
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    put_str(text, stream)
    return len(text)