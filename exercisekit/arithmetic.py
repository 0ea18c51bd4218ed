"""Small arithmetic routines: Fibonacci numbers and addition."""

from __future__ import annotations

_Matrix = tuple[tuple[int, int], tuple[int, int]]


def _multiply(a: _Matrix, b: _Matrix) -> _Matrix:
    (a00, a01), (a10, a11) = a
    (b00, b01), (b10, b11) = b
    return (
        (a00 * b00 + a01 * b10, a00 * b01 + a01 * b11),
        (a10 * b00 + a11 * b10, a10 * b01 + a11 * b11),
    )


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number by matrix exponentiation."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0
    result: _Matrix = ((1, 0), (0, 1))
    power: _Matrix = ((0, 1), (1, 1))
    exponent = n - 1
    while exponent > 0:
        if exponent & 1:
            result = _multiply(result, power)
        power = _multiply(power, power)
        exponent >>= 1
    return result[1][1]


def get_sum(a: int, b: int) -> int:
    """Return ``a + b`` without using the addition operator."""
    return a - (-b)