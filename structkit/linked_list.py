"""A singly linked list of arbitrary values."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Iterator, TextIO


class EmptyListError(IndexError):
    """Raised when removing from an empty list."""


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next_node: _Node | None = None) -> None:
        self.data = data
        self.next = next_node


class LinkedList:
    """Singly linked list with insertion and removal at both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._count = 0
        for item in items:
            self.add_last(item)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def traverse(self, out: TextIO | None = None) -> None:
        """Write every element on its own line, front to back."""
        stream = sys.stdout if out is None else out
        for data in self:
            print(data, file=stream)

    def add_first(self, data: Any) -> None:
        """Insert ``data`` at the front."""
        self._head = _Node(data, self._head)
        if self._tail is None:
            self._tail = self._head
        self._count += 1

    def add_last(self, data: Any) -> None:
        """Append ``data`` at the back."""
        node = _Node(data)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._count += 1

    def delete_first(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise EmptyListError("the list is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._count -= 1
        return node.data

    def delete_last(self) -> Any:
        """Remove and return the last element."""
        if self._head is None or self._tail is None:
            raise EmptyListError("the list is empty")
        node = self._tail
        if self._head is node:
            self._head = self._tail = None
        else:
            prev = self._head
            while prev.next is not node:
                prev = prev.next
            prev.next = None
            self._tail = prev
        self._count -= 1
        return node.data

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        prev: _Node | None = None
        curr = self._head
        self._tail = curr
        while curr is not None:
            curr.next, prev, curr = prev, curr, curr.next
        self._head = prev

    def is_empty(self) -> bool:
        """Return True if the list holds no elements."""
        return self._head is None