"""Character, string, memory, linked-list, output, formatting and line-reading helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "strings",
    "linked_list",
    "output",
    "printf",
    "line_reader",
]