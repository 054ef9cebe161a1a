"""A doubly linked list with ordered insertion."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import islice
from typing import Generic, Iterable, Iterator, Optional, TextIO, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    data: T
    prev: Optional[_Node[T]] = None
    next: Optional[_Node[T]] = None


class DoublyLinkedList(Generic[T]):
    """Doubly linked list; items are compared with ``<=`` and ``==``."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items if items is not None else ():
            self.add_to_tail(item)

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self._nodes())

    def __contains__(self, item: object) -> bool:
        return any(data == item for data in self)

    def __str__(self) -> str:
        return "".join(f"{data} " for data in self)

    def clear(self) -> None:
        self._head = self._tail = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._head is None

    def _insert_before(self, node: _Node[T], item: T) -> None:
        new = _Node(item, prev=node.prev, next=node)
        if node.prev is None:
            self._head = new
        else:
            node.prev.next = new
        node.prev = new
        self._size += 1

    def _unlink(self, node: _Node[T]) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1

    def add_in_order(self, item: T) -> None:
        """Insert before the first item that ``item`` is ``<=`` to, else at the tail."""
        node = self._head
        while node is not None and not item <= node.data:  # type: ignore[operator]
            node = node.next
        if node is None:
            self.add_to_tail(item)
        else:
            self._insert_before(node, item)

    def add_to_head(self, item: T) -> None:
        if self._head is None:
            self._head = self._tail = _Node(item)
            self._size += 1
        else:
            self._insert_before(self._head, item)

    def add_to_tail(self, item: T) -> None:
        if self._tail is None:
            self._head = self._tail = _Node(item)
        else:
            new = _Node(item, prev=self._tail)
            self._tail.next = new
            self._tail = new
        self._size += 1

    def add_at_position(self, item: T, pos: int) -> None:
        """Insert at 1-based ``pos``; position 1 is the head and the last position appends.

        Raises IndexError when ``pos`` is not between 1 and the list's length.
        """
        if not 1 <= pos <= self._size:
            raise IndexError(f"position {pos} out of range for list of length {self._size}")
        if pos == 1:
            self.add_to_head(item)
        elif pos == self._size:
            self.add_to_tail(item)
        else:
            target = next(islice(self._nodes(), pos - 1, None))
            self._insert_before(target, item)

    def delete_head(self) -> T:
        """Remove and return the first item."""
        if self._head is None:
            raise IndexError("delete from empty list")
        node = self._head
        self._unlink(node)
        return node.data

    def delete_tail(self) -> T:
        """Remove and return the last item."""
        if self._tail is None:
            raise IndexError("delete from empty list")
        node = self._tail
        self._unlink(node)
        return node.data

    def delete_value(self, item: T) -> bool:
        """Remove the first item equal to ``item``; return whether one was found."""
        for node in self._nodes():
            if node.data == item:
                self._unlink(node)
                return True
        return False

    def display(self, out: Optional[TextIO] = None) -> None:
        """Write the items, each followed by a space, then a newline."""
        out = out if out is not None else sys.stdout
        out.write(f"{self}\n")