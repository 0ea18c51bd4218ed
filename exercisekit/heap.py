"""A binary heap with a cursor that walks its storage order."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class Heap(Generic[T]):
    """A binary heap ordered by ``comparator(a, b)``, true when ``a`` ranks above ``b``.

    Iterating yields the stored values in heap order from a cursor. Adding a
    value that moves into a position the cursor has already passed rewinds
    the cursor to the start.
    """

    def __init__(self, comparator: Callable[[T, T], bool]) -> None:
        self._comparator = comparator
        self._items: list[T] = []
        self._cursor = 0

    def add(self, value: T) -> None:
        """Insert ``value`` and restore the heap order."""
        items = self._items
        items.append(value)
        position = len(items) - 1
        while position > 0:
            parent = (position - 1) // 2
            if not self._comparator(items[position], items[parent]):
                break
            items[position], items[parent] = items[parent], items[position]
            position = parent
        if position < self._cursor:
            self._cursor = 0

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._cursor == len(self._items):
            raise StopIteration
        value = self._items[self._cursor]
        self._cursor += 1
        return value


def min_heap() -> Heap[Any]:
    """Return a heap with the smallest value on top."""
    return Heap(lambda a, b: a < b)


def max_heap() -> Heap[Any]:
    """Return a heap with the largest value on top."""
    return Heap(lambda a, b: a > b)