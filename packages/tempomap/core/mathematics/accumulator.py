"""Compensated summation of many small floating-point terms."""

from __future__ import annotations

import math

from tempomap.core.utils.search import insert_sorted


def _magnitude(value: float) -> tuple[float, float]:
    # Ties on magnitude are ordered by value so the layout never depends
    # on insertion order.
    return (abs(value), value)


class Accumulator:
    """Sum a multiset of floats while bounding cancellation error.

    Terms are kept sorted by magnitude and summed smallest-first with two
    levels of Neumaier compensation. The same multiset always produces a
    bit-identical total, whatever order the terms were added in.

    Non-finite terms never enter the compensated sum; they are totalled
    separately and dominate the result.

    Example:
        >>> acc = Accumulator()
        >>> for v in (0.1, 0.2, 0.3):
        ...     acc.add(v)
        >>> acc.get()
        0.6
    """

    def __init__(self) -> None:
        self._values: list[float] = []
        self._non_finite = 0.0
        self._has_non_finite = False

    def __len__(self) -> int:
        return len(self._values) + (1 if self._has_non_finite else 0)

    def add(self, value: float) -> None:
        """Append a term.

        Args:
            value: Term to add
        """
        if not math.isfinite(value):
            self._non_finite += value
            self._has_non_finite = True
            return
        insert_sorted(self._values, value, key=_magnitude)

    def clear(self) -> None:
        """Drop all terms."""
        self._values.clear()
        self._non_finite = 0.0
        self._has_non_finite = False

    def get(self, offset: float = 0.0) -> float:
        """Get ``offset`` plus the total of all terms.

        An infinite offset is returned as-is rather than being folded into
        the compensated sum, where ``inf - inf`` would produce NaN.

        Args:
            offset: Value to start the sum from

        Returns:
            Compensated total
        """
        if math.isinf(offset):
            return offset
        if self._has_non_finite:
            return offset + self._non_finite

        total = offset
        total_err = 0.0
        total_err2 = 0.0
        for value in self._values:
            next_total = total + value
            if abs(total) >= abs(value):
                # Lost the low bits of value.
                err = value - (next_total - total)
            else:
                # Lost the low bits of total.
                err = total - (next_total - value)
            total = next_total

            next_total_err = total_err + err
            if abs(next_total_err) >= abs(err):
                err2 = err - (next_total_err - total_err)
            else:
                err2 = total_err - (next_total_err - err)
            total_err = next_total_err

            total_err2 += err2

        return total + total_err + total_err2
