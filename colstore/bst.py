"""An unbalanced binary search tree keyed by an ordering function."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    data: T
    left: Optional[_Node[T]] = None
    right: Optional[_Node[T]] = None


class BSTree(Generic[T]):
    """A binary search tree of unique items.

    Items are ordered by ``key(item)`` with ``<`` (or by the items themselves
    when no key is given); two items whose keys are neither less nor greater
    than each other are the same item, so inserting such a duplicate does
    nothing.
    """

    def __init__(self, key: Optional[Callable[[T], Any]] = None) -> None:
        self._key = key
        self._root: Optional[_Node[T]] = None
        self._size = 0

    def _less(self, a: T, b: T) -> bool:
        if self._key is None:
            return a < b  # type: ignore[operator]
        return self._key(a) < self._key(b)

    def insert(self, item: T) -> None:
        """Add ``item`` unless an equal item is already present."""
        if self._root is None:
            self._root = _Node(item)
            self._size += 1
            return
        node = self._root
        while True:
            if self._less(item, node.data):
                if node.left is None:
                    node.left = _Node(item)
                    break
                node = node.left
            elif self._less(node.data, item):
                if node.right is None:
                    node.right = _Node(item)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def remove(self, item: T) -> bool:
        """Remove the item equal to ``item``; return whether one was removed."""
        parent: Optional[_Node[T]] = None
        node = self._root
        while node is not None:
            if self._less(item, node.data):
                parent, node = node, node.left
            elif self._less(node.data, item):
                parent, node = node, node.right
            else:
                break
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.data = successor.data
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
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

    def find(self, item: T) -> Optional[T]:
        """Return the stored item equal to ``item``, or None."""
        node = self._root
        while node is not None:
            if self._less(item, node.data):
                node = node.left
            elif self._less(node.data, item):
                node = node.right
            else:
                return node.data
        return None

    def __iter__(self) -> Iterator[T]:
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def inorder(self) -> list[T]:
        """Return the items in ascending order."""
        return list(self)

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Return the number of edges on the longest root-to-leaf path; -1 if empty."""
        level = [self._root] if self._root is not None else []
        height = -1
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height