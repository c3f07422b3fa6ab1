"""Bracket balance checking with a stack."""

from __future__ import annotations

from typing import Sequence

from structkit.stack import Stack

_PAIRS = {"(": ")", "{": "}", "[": "]"}
_CLOSERS = frozenset(_PAIRS.values())


def is_matching(open_char: str, close_char: str) -> bool:
    """Return True if ``close_char`` closes ``open_char``."""
    return _PAIRS.get(open_char) == close_char


def check_with_linked_stack(text: str) -> bool:
    """Check bracket balance using the linked-list stack."""
    stack = Stack()
    for ch in text:
        if ch in _PAIRS:
            stack.push(ch)
        elif ch in _CLOSERS:
            if stack.is_empty():
                return False
            if not is_matching(stack.pop(), ch):
                return False
    return stack.is_empty()


def check_brackets(text: str) -> bool:
    """Check bracket balance using a plain list as the stack."""
    stack: list[str] = []
    for ch in text:
        if ch in _PAIRS:
            stack.append(ch)
        elif ch in _CLOSERS:
            if not stack:
                return False
            if not is_matching(stack.pop(), ch):
                return False
    return not stack


_SAMPLES = (
    ("code1", "{ int x = (a[5] + b) }"),
    ("code2", "{ int y = (c*d)"),
    ("code3", "int z = e[2) - {f/(6/4)}"),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Demonstrate the stack and check a few sample snippets."""
    s = Stack()
    for value in (10, 20, 15):
        s.push(value)
    s.show()
    s.pop()
    s.show()
    print(int(s.is_empty()))
    print(s.peek())

    for checker in (check_with_linked_stack, check_brackets):
        for name, code in _SAMPLES:
            verdict = "brackets match" if checker(code) else "bracket error"
            print(f"{name}: {verdict}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())