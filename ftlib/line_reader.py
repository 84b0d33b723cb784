"""Reading a stream line by line in fixed-size chunks.

The stream may be text or binary; it only needs a ``read(size)`` method.
Lines are returned with their trailing newline, except a last line that has
none.
"""

DEFAULT_BUFFER_SIZE = 120


def _newline(data):
    return "\n" if isinstance(data, str) else b"\n"


class LineReader:
    """Return successive lines of ``stream``, reading ``buffer_size`` units at a time."""

    def __init__(self, stream, buffer_size=DEFAULT_BUFFER_SIZE):
        if buffer_size < 1:
            raise ValueError(f"buffer size must be at least 1, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._buffer = None

    def _fill(self):
        buf = self._buffer
        while buf is None or _newline(buf) not in buf:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            buf = chunk if buf is None else buf + chunk
        return buf

    def readline(self):
        """Return the next line, or ``None`` when the stream is exhausted."""
        buf = self._fill()
        if not buf:
            self._buffer = None
            return None
        index = buf.find(_newline(buf))
        if index < 0:
            self._buffer = None
            return buf
        self._buffer = buf[index + 1:]
        return buf[:index + 1]

    def __iter__(self):
        while (line := self.readline()) is not None:
            yield line


def read_lines(stream, buffer_size=DEFAULT_BUFFER_SIZE):
    """Yield the lines of ``stream`` in order."""
    yield from LineReader(stream, buffer_size)