"""In-place sorting of a mutable sequence."""

from __future__ import annotations

from typing import Any, MutableSequence


def sort(array: MutableSequence[Any]) -> None:
    """Sort ``array`` in ascending order, in place."""
    for position in range(1, len(array)):
        value = array[position]
        insert_at = position
        while insert_at > 0 and value < array[insert_at - 1]:
            array[insert_at] = array[insert_at - 1]
            insert_at -= 1
        array[insert_at] = value