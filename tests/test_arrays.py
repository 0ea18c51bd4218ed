import pytest

from exercisekit.arrays import (
    find_duplicates,
    find_missing_number,
    intersection,
    merge_intervals,
    rotate_matrix_90_degrees,
)


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([3, 7, 1, 2, 8, 4, 5], 6),
        ([1, 2, 4, 5], 3),
        ([2, 3, 4, 5, 6, 7, 8, 9], 1),
        ([1, 2, 3, 5, 6], 4),
    ],
)
def test_find_missing_number(nums, expected):
    assert find_missing_number(nums) == expected


def test_find_missing_number_empty_gives_one():
    assert find_missing_number([]) == 1


def test_find_missing_number_last_missing():
    assert find_missing_number([1, 2, 3]) == 4


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([1, 2, 3, 4, 5, 6, 2, 3], [2, 3]),
        ([4, 5, 6, 7, 5, 4], [4, 5]),
        ([1, 2, 3, 4, 5], []),
        ([1, 1, 1, 1, 1], [1]),
        ([10, 9, 8, 7, 6, 7, 8], [7, 8]),
    ],
)
def test_find_duplicates(nums, expected):
    assert find_duplicates(nums) == expected


def test_find_duplicates_leaves_input_unchanged():
    nums = [3, 1, 3]
    assert find_duplicates(nums) == [3]
    assert nums == [3, 1, 3]


@pytest.mark.parametrize(
    "matrix, expected",
    [
        ([[1, 2, 3], [4, 5, 6], [7, 8, 9]], [[7, 4, 1], [8, 5, 2], [9, 6, 3]]),
        ([[1, 2], [3, 4]], [[3, 1], [4, 2]]),
        ([[1]], [[1]]),
        ([[1, 2], [3, 4], [5, 6]], [[5, 3, 1], [6, 4, 2]]),
    ],
)
def test_rotate_matrix(matrix, expected):
    original = matrix
    rotate_matrix_90_degrees(matrix)
    assert matrix == expected
    assert matrix is original


def test_rotate_wide_matrix():
    matrix = [[1, 2, 3], [4, 5, 6]]
    rotate_matrix_90_degrees(matrix)
    assert matrix == [[4, 1], [5, 2], [6, 3]]


def test_rotate_four_times_restores_matrix():
    matrix = [[1, 2, 3], [4, 5, 6]]
    for _ in range(4):
        rotate_matrix_90_degrees(matrix)
    assert matrix == [[1, 2, 3], [4, 5, 6]]


def test_rotate_empty_matrix_raises():
    with pytest.raises(ValueError):
        rotate_matrix_90_degrees([])


def test_rotate_ragged_matrix_raises():
    with pytest.raises(ValueError):
        rotate_matrix_90_degrees([[1, 2], [3]])


@pytest.mark.parametrize(
    "nums1, nums2, expected",
    [
        ([1, 2, 2, 1], [2, 2], [2]),
        ([4, 9, 5], [9, 4, 9, 8, 4], [4, 9]),
        ([1, 2, 3], [4, 5, 6], []),
        ([1, 1, 1], [1, 1, 1], [1]),
        ([10, 20, 30], [30, 40, 50], [30]),
    ],
)
def test_intersection(nums1, nums2, expected):
    assert intersection(nums1, nums2) == expected


def test_intersection_is_symmetric():
    assert intersection([5, 1, 3], [3, 5, 7]) == intersection([3, 5, 7], [5, 1, 3]) == [3, 5]


@pytest.mark.parametrize(
    "intervals, expected",
    [
        ([[1, 3], [2, 6], [8, 10], [15, 18]], [[1, 6], [8, 10], [15, 18]]),
        ([[1, 4], [4, 5]], [[1, 5]]),
        ([[1, 4], [0, 4]], [[0, 4]]),
        ([[1, 10], [2, 6], [8, 10]], [[1, 10]]),
        ([[1, 2], [3, 5], [4, 7], [8, 10]], [[1, 2], [3, 7], [8, 10]]),
    ],
)
def test_merge_intervals(intervals, expected):
    assert merge_intervals(intervals) == expected


def test_merge_intervals_single():
    assert merge_intervals([[2, 3]]) == [[2, 3]]


def test_merge_intervals_does_not_modify_input():
    intervals = [[3, 5], [1, 4]]
    assert merge_intervals(intervals) == [[1, 5]]
    assert intervals == [[3, 5], [1, 4]]


def test_merge_intervals_empty_raises():
    with pytest.raises(ValueError):
        merge_intervals([])