"""Small integer and floating-point helpers."""

from __future__ import annotations


def is_power_of(n: int, x: int) -> bool:
    """Whether ``n`` is a whole power of ``x`` (``x**0 == 1`` counts)."""
    if n < 0:
        raise ValueError("n must not be negative")
    if x < 2:
        raise ValueError("base must be at least 2")
    if n == 0:
        return False
    while n % x == 0:
        n //= x
    return n == 1


def int_range(low: int, high: int) -> list[int]:
    """Integers from ``low`` to ``high``, both included, counting up or down."""
    step = 1 if high >= low else -1
    return list(range(low, high + step, step))


def power(n: float, exponent: int) -> float:
    """``n`` multiplied by itself ``exponent`` times, 1 for exponent 0."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1.0
    for _ in range(exponent):
        result = n * result
    return result