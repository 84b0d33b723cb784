"""Byte-buffer operations over ``bytes``, ``bytearray`` and ``memoryview``.

Lengths are checked against the buffers they apply to; a length that is
negative or runs past the end of a buffer raises ``ValueError``.
"""


def _check_length(n, *buffers):
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf, c, length):
    """Fill the first ``length`` bytes of ``buf`` with ``c`` (taken modulo 256).

    Returns ``buf``.
    """
    _check_length(length, buf)
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf, n):
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dst, src, n):
    """Copy ``n`` bytes from ``src`` into the start of ``dst``.

    Returns ``dst``; when both buffers are ``None`` the result is ``None``.
    """
    if dst is None and src is None:
        return None
    _check_length(n, dst, src)
    dst[:n] = src[:n]
    return dst


def memmove(buf, dst, src, length):
    """Move ``length`` bytes within ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap.  Returns ``buf``.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(length, buf[src:], buf[dst:])
    if dst != src:
        buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def memchr(data, c, n):
    """Return the index of the first byte equal to ``c`` within the first ``n`` bytes.

    Returns ``None`` if there is no such byte.
    """
    _check_length(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1, s2, n):
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_length(n, s1, s2)
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return a - b
    return 0


def calloc(count, size):
    """Return a zero-filled ``bytearray`` of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def realloc(data, length, new_length):
    """Return a new ``bytearray`` of ``new_length`` bytes holding the first ``length`` bytes of ``data``."""
    if new_length < 0:
        raise ValueError(f"new length must not be negative, got {new_length}")
    _check_length(length, data)
    if length > new_length:
        raise ValueError(f"cannot keep {length} bytes in a buffer of {new_length}")
    resized = bytearray(new_length)
    resized[:length] = data[:length]
    return resized