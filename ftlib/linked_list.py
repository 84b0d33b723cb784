"""A singly linked list of arbitrary contents."""

from dataclasses import dataclass


@dataclass(eq=False)
class _Node:
    content: object
    next: "_Node | None" = None


class LinkedList:
    """Singly linked list that supports adding at either end, mapping and clearing.

    Callbacks given to :meth:`clear` and :meth:`map` as ``delete`` are called
    with each content that is discarded, in list order.
    """

    def __init__(self, items=None):
        self._head = None
        self._tail = None
        self._size = 0
        if items is not None:
            for item in items:
                self.add_back(item)

    def add_front(self, content):
        """Insert ``content`` at the start of the list."""
        node = _Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def add_back(self, content):
        """Append ``content`` at the end of the list."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self):
        """Return the content of the last element, or ``None`` if the list is empty."""
        return None if self._tail is None else self._tail.content

    def clear(self, delete=None):
        """Remove every element, passing each content to ``delete`` if given."""
        node = self._head
        self._head = self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def for_each(self, func):
        """Call ``func`` on each content in order."""
        for content in self:
            func(content)

    def map(self, func, delete=None):
        """Return a new list holding ``func(content)`` for each content.

        If ``func`` raises, the contents already produced are passed to
        ``delete`` (when given) and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __iter__(self):
        node = self._head
        while node is not None:
            following = node.next
            yield node.content
            node = following

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"LinkedList({list(self)!r})"