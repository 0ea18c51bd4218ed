"""Singly and doubly linked lists of ordered values."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    next: Optional[_Node[T]] = None


@dataclass(eq=False)
class _DoubleNode(Generic[T]):
    value: T
    next: Optional[_DoubleNode[T]] = None
    prev: Optional[_DoubleNode[T]] = field(default=None, repr=False)


class LinkedList(Generic[T]):
    """A singly linked list that appends at its tail."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._start: Optional[_Node[T]] = None
        self._end: Optional[_Node[T]] = None
        self._length = 0
        for value in values:
            self.add(value)

    def add(self, value: T) -> None:
        """Append a value at the end of the list."""
        node = _Node(value)
        if self._end is None:
            self._start = node
        else:
            self._end.next = node
        self._end = node
        self._length += 1

    def get(self, index: int) -> Optional[T]:
        """Return the value at ``index``, or None when there is none."""
        if index < 0:
            return None
        for position, value in enumerate(self):
            if position == index:
                return value
        return None

    @staticmethod
    def merge(list_a: LinkedList[Any], list_b: LinkedList[Any]) -> LinkedList[Any]:
        """Merge two ordered lists into one ordered list.

        On equal values, those from ``list_a`` come first.
        """
        if len(list_a) == 0:
            return list_b
        if len(list_b) == 0:
            return list_a
        return LinkedList(heapq.merge(list_a, list_b))

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        node = self._start
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return ", ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedList([{', '.join(repr(v) for v in self)}])"


class DoublyLinkedList(Generic[T]):
    """A doubly linked list that can be reversed in place."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._start: Optional[_DoubleNode[T]] = None
        self._end: Optional[_DoubleNode[T]] = None
        self._length = 0
        for value in values:
            self.add(value)

    def add(self, value: T) -> None:
        """Append a value at the end of the list."""
        node = _DoubleNode(value, prev=self._end)
        if self._end is None:
            self._start = node
        else:
            self._end.next = node
        self._end = node
        self._length += 1

    def get(self, index: int) -> Optional[T]:
        """Return the value at ``index``, or None when there is none."""
        if index < 0:
            return None
        for position, value in enumerate(self):
            if position == index:
                return value
        return None

    def reverse(self) -> None:
        """Reverse the list in place by swapping every node's links."""
        node = self._start
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._start, self._end = self._end, self._start

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        node = self._start
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._end
        while node is not None:
            yield node.value
            node = node.prev

    def __str__(self) -> str:
        return ", ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"DoublyLinkedList([{', '.join(repr(v) for v in self)}])"