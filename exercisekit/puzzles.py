"""Small numeric and string puzzles: distinct items, base conversion, birthdays, coins, Fibonacci."""

from __future__ import annotations

import math
import string

_DIGITS = string.digits + string.ascii_lowercase
_DIGIT_VALUES = {char: value for value, char in enumerate(_DIGITS)}
_COINS = (1, 2, 5, 10, 20, 30, 50, 100)
_DAYS_IN_YEAR = 365


def count_distinct(input_str: str) -> int:
    """Return how many distinct items the comma-separated ``input_str`` holds."""
    return len(set(input_str.split(",")))


def convert_base(num_str: str, to_base: int) -> str:
    """Convert a number written as ``digits(base)`` into base ``to_base``.

    Digits are ``0-9`` followed by lower-case ``a-z``. A value of zero gives
    an empty string. Raises ValueError for malformed input or a target base
    outside ``2 .. 36``.
    """
    if not 2 <= to_base <= len(_DIGITS):
        raise ValueError(f"target base must be between 2 and {len(_DIGITS)}")
    digits, paren, rest = num_str.partition("(")
    base_text = rest.split(")", 1)[0]
    if not paren or not base_text.isdigit():
        raise ValueError(f"expected a number of the form digits(base), got {num_str!r}")
    base = int(base_text)

    value = 0
    for char in digits:
        digit = _DIGIT_VALUES.get(char)
        if digit is None:
            raise ValueError(f"invalid digit {char!r} in {num_str!r}")
        value = value * base + digit

    out: list[str] = []
    while value > 0:
        value, remainder = divmod(value, to_base)
        out.append(_DIGITS[remainder])
    return "".join(reversed(out))


def birthday_probability(n: int) -> float:
    """Return the probability that at least two of ``n`` people share a birthday."""
    if not 0 <= n <= _DAYS_IN_YEAR + 1:
        raise ValueError(f"n must be between 0 and {_DAYS_IN_YEAR + 1}")
    all_distinct = math.prod(
        day / _DAYS_IN_YEAR for day in range(_DAYS_IN_YEAR - 1, _DAYS_IN_YEAR - n, -1)
    )
    return 1.0 - all_distinct


def min_coins(amount: int) -> int:
    """Return the fewest coins of 1, 2, 5, 10, 20, 30, 50 and 100 that make ``amount``."""
    if amount < 0:
        raise ValueError("amount must be non-negative")
    best = [0] + [amount + 1] * amount
    for coin in _COINS:
        for total in range(coin, amount + 1):
            best[total] = min(best[total], best[total - coin] + 1)
    return best[amount]


def odd_fibonacci_sum(threshold: int) -> int:
    """Return the sum of the odd Fibonacci numbers below ``threshold``.

    The sequence starts 0, 1, 1, 2, ...; the leading 1 is always counted.
    """
    total = 1
    previous, current = 0, 1
    while current < threshold:
        previous, current = current, previous + current
        if current % 2 == 1 and current < threshold:
            total += current
    return total