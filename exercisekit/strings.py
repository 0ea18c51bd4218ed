"""String puzzles: palindromes, anagrams and distinct-character windows."""

from __future__ import annotations

from collections import Counter

_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyz")


def _letters(s: str) -> list[str]:
    return [char for char in s.lower() if char in _LETTERS]


def is_palindrome(s: str) -> bool:
    """Return True when the ASCII letters of ``s`` read the same both ways, ignoring case."""
    letters = _letters(s)
    return letters == letters[::-1]


def are_anagrams(s1: str, s2: str) -> bool:
    """Return True when ``s1`` and ``s2`` hold the same ASCII letters, ignoring case."""
    return Counter(_letters(s1)) == Counter(_letters(s2))


def longest_substring_without_repeating_chars(s: str) -> int:
    """Return the length of the longest run of ``s`` with no repeated character.

    Only ASCII text is accepted; other characters raise ValueError.
    """
    if not s.isascii():
        raise ValueError("only ASCII characters are supported")
    last_seen: dict[str, int] = {}
    window_start = 0
    best = 0
    for position, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None and previous >= window_start:
            window_start = previous + 1
        last_seen[char] = position
        best = max(best, position - window_start + 1)
    return best