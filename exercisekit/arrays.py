"""Puzzles over integer arrays: missing values, duplicates, rotation, intersection, intervals."""

from __future__ import annotations

from itertools import groupby
from typing import Sequence


def find_missing_number(nums: Sequence[int]) -> int:
    """Return the number missing from ``nums``, which holds all of ``1 .. n`` but one."""
    n = len(nums) + 1
    return n * (n + 1) // 2 - sum(nums)


def find_duplicates(nums: Sequence[int]) -> list[int]:
    """Return, in ascending order, each value that occurs more than once in ``nums``."""
    return [value for value, group in groupby(sorted(nums)) if sum(1 for _ in group) > 1]


def rotate_matrix_90_degrees(matrix: list[list[int]]) -> None:
    """Rotate ``matrix`` a quarter turn clockwise, in place.

    A matrix of ``n`` rows and ``m`` columns becomes one of ``m`` rows and
    ``n`` columns. Raises ValueError for an empty or ragged matrix.
    """
    if not matrix:
        raise ValueError("cannot rotate an empty matrix")
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("all rows of the matrix must have the same length")
    matrix[:] = [list(column) for column in zip(*reversed(matrix))]


def intersection(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Return the values found in both ``nums1`` and ``nums2``, ascending and without repeats."""
    return sorted(set(nums1) & set(nums2))


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping inclusive intervals ``[start, end]``.

    Intervals that share an end point are merged. The result is sorted by
    start. Raises ValueError when no intervals are given.
    """
    if not intervals:
        raise ValueError("no intervals to merge")
    merged: list[list[int]] = []
    for start, end in sorted((list(interval) for interval in intervals)):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged