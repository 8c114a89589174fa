"""Greatest common divisor used by exact rational arithmetic."""

from __future__ import annotations


def int_gcd(a: int, b: int) -> int:
    """Find the greatest common divisor of two integers.

    Works on absolute values. ``int_gcd(0, 0)`` is ``1`` so that a zero
    numerator always reduces to a denominator of ``1``.

    Args:
        a: First value (any sign)
        b: Second value (any sign)

    Returns:
        Positive greatest common divisor

    Example:
        >>> int_gcd(-12, 18)
        6
        >>> int_gcd(0, -7)
        7
    """
    x = -a if a < 0 else a
    y = -b if b < 0 else b

    if x == 0:
        return y if y != 0 else 1
    if y == 0:
        return x

    if x > y:
        x, y = y, x

    while y != 0:
        x, y = y, x % y
    return x
