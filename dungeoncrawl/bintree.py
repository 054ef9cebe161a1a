"""An unbalanced binary search tree with uniform random sampling."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from itertools import islice
from typing import Any, Generic, Iterator, Optional, TextIO, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    key: T
    left: Optional[_Node[T]] = None
    right: Optional[_Node[T]] = None


class BinaryTree(Generic[T]):
    """Binary search tree of unique keys, ordered by the keys' ``<`` and ``>``."""

    def __init__(self, rng: Optional[Any] = None) -> None:
        self._root: Optional[_Node[T]] = None
        self._size = 0
        self._rng = rng if rng is not None else random.Random()

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Yield the keys in order."""
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right  # type: ignore[operator]
        return False

    def insert(self, key: T) -> bool:
        """Add ``key``; return False if an equal key is already present."""
        new = _Node(key)
        if self._root is None:
            self._root = new
            self._size += 1
            return True
        node = self._root
        while True:
            if key < node.key:  # type: ignore[operator]
                if node.left is None:
                    node.left = new
                    break
                node = node.left
            elif key > node.key:  # type: ignore[operator]
                if node.right is None:
                    node.right = new
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def remove(self, key: T) -> bool:
        """Remove ``key``; return False if it was not in the tree."""
        parent: Optional[_Node[T]] = None
        node = self._root
        while node is not None:
            if key < node.key:  # type: ignore[operator]
                parent, node = node, node.left
            elif key > node.key:  # type: ignore[operator]
                parent, node = node, node.right
            else:
                break
        else:
            return False

        if node.left is not None and node.right is not None:
            succ_parent, succ = node, node.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
            node.key = succ.key
            if succ_parent.left is succ:
                succ_parent.left = succ.right
            else:
                succ_parent.right = succ.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._size -= 1
        return True

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._root is None

    def random_key(self) -> Optional[T]:
        """Return a key chosen uniformly at random, or None if the tree is empty."""
        if self._size == 0:
            return None
        position = self._rng.randrange(self._size)
        return next(islice(self, position, None))

    def display(self, out: Optional[TextIO] = None) -> None:
        """Write the keys in order, each followed by a space, then a newline."""
        out = out if out is not None else sys.stdout
        for key in self:
            out.write(f"{key} ")
        out.write("\n")