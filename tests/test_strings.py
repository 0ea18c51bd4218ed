import pytest

from exercisekit.strings import (
    are_anagrams,
    is_palindrome,
    longest_substring_without_repeating_chars,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("A man, a plan, a canal, Panama", True),
        ("Racecar", True),
        ("Hello, World!", False),
        ("No 'x' in Nixon", True),
        ("Was it a car or a cat I saw?", True),
    ],
)
def test_palindrome(text, expected):
    assert is_palindrome(text) is expected


def test_palindrome_ignores_digits():
    assert is_palindrome("a1b2a") is True
    assert is_palindrome("") is True


@pytest.mark.parametrize(
    "s1, s2, expected",
    [
        ("listen", "silent", True),
        ("evil", "vile", True),
        ("hello", "world", False),
        ("Clint Eastwood", "Old West Action", True),
        ("Astronomer", "Moon starer", True),
    ],
)
def test_anagram(s1, s2, expected):
    assert are_anagrams(s1, s2) is expected


def test_anagram_counts_repeats():
    assert are_anagrams("aab", "abb") is False
    assert are_anagrams("a-b!", "B a") is True


@pytest.mark.parametrize(
    "text, expected",
    [
        ("abcabcbb", 3),
        ("bbbbb", 1),
        ("pwwkew", 3),
        ("", 0),
        ("abcde", 5),
    ],
)
def test_longest_substring(text, expected):
    assert longest_substring_without_repeating_chars(text) == expected


def test_longest_substring_window_not_moved_back():
    assert longest_substring_without_repeating_chars("abba") == 2
    assert longest_substring_without_repeating_chars("dvdf") == 3


def test_longest_substring_rejects_non_ascii():
    with pytest.raises(ValueError):
        longest_substring_without_repeating_chars("héllo")