"""A FIFO queue and a LIFO stack built from two such queues."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class EmptyError(IndexError):
    """Raised when taking a value from an empty container."""


class Queue(Generic[T]):
    """A first-in, first-out queue."""

    def __init__(self) -> None:
        self._elements: deque[T] = deque()

    def enqueue(self, value: T) -> None:
        self._elements.append(value)

    def dequeue(self) -> T:
        """Remove and return the front value."""
        if not self._elements:
            raise EmptyError("Queue is empty")
        return self._elements.popleft()

    def peek(self) -> T:
        """Return the front value without removing it."""
        if not self._elements:
            raise EmptyError("Queue is empty")
        return self._elements[0]

    def is_empty(self) -> bool:
        return not self._elements

    def __len__(self) -> int:
        return len(self._elements)


class QueueStack(Generic[T]):
    """A stack that keeps its values in two queues."""

    def __init__(self) -> None:
        self._active: Queue[T] = Queue()
        self._spare: Queue[T] = Queue()

    def push(self, value: T) -> None:
        self._active.enqueue(value)

    def pop(self) -> T:
        """Remove and return the most recently pushed value."""
        if self.is_empty():
            raise EmptyError("Stack is empty")
        while len(self._active) > 1:
            self._spare.enqueue(self._active.dequeue())
        self._active, self._spare = self._spare, self._active
        return self._spare.dequeue()

    def is_empty(self) -> bool:
        return self._active.is_empty()