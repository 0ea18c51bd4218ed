"""A simple stack and bracket matching built on it."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


class Stack(Generic[T]):
    """A last-in, first-out stack."""

    def __init__(self) -> None:
        self._data: list[T] = []

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        self._data.append(value)

    def pop(self) -> T:
        """Remove and return the top value; raise IndexError when empty."""
        if not self._data:
            raise IndexError("pop from an empty stack")
        return self._data.pop()

    def peek(self) -> Optional[T]:
        """Return the top value without removing it, or None when empty."""
        return self._data[-1] if self._data else None

    def is_empty(self) -> bool:
        return not self._data

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._data)


def bracket_match(text: str) -> bool:
    """Return True when the brackets in ``text`` are balanced.

    Whenever the stack is empty the next character is pushed whatever it is,
    so a character outside the brackets at that point unbalances the text.
    """
    stack: Stack[str] = Stack()
    for char in text:
        if stack.is_empty():
            stack.push(char)
            continue
        if char in _PAIRS:
            if stack.peek() != _PAIRS[char]:
                return False
            stack.pop()
        elif char in _OPENERS:
            stack.push(char)
    return stack.is_empty()