"""A stack built on the linked list."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from structkit.linked_list import EmptyListError, LinkedList


class EmptyStackError(EmptyListError):
    """Raised when popping or peeking an empty stack."""


class Stack(LinkedList):
    """Last-in first-out stack whose top is the front of the list."""

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self.add_first(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise EmptyStackError("the stack is empty")
        return self.delete_first()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self.is_empty():
            raise EmptyStackError("the stack is empty")
        return next(iter(self))

    def show(self, out: TextIO | None = None) -> None:
        """Write a heading followed by every value, top first."""
        stream = sys.stdout if out is None else out
        stream.write("Stack data = ")
        self.traverse(stream)