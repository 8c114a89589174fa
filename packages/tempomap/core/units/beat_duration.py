"""Exact beat durations.

A BeatDuration is a whole number of beats plus an exact sub-beat
fraction. Arithmetic never rounds, so positions built from many small
subdivisions (triplets inside sixteenths, and so on) land exactly where
they were authored.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, ClassVar

from tempomap.core.mathematics.rational import Rational
from tempomap.core.utils.compare import compare_to

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def _normalize(beat: int, sub_beat: Rational) -> tuple[int, Rational]:
    normalized_beat = beat + sub_beat.integer_part
    normalized_sub_beat = sub_beat.fraction_part
    # Borrow or carry one beat so a non-zero beat and its fraction share a sign.
    if normalized_beat > 0 and normalized_sub_beat < 0:
        normalized_beat -= 1
        normalized_sub_beat += 1
    elif normalized_beat < 0 and normalized_sub_beat > 0:
        normalized_beat += 1
        normalized_sub_beat -= 1
    return normalized_beat, normalized_sub_beat


@dataclass(frozen=True, order=True, slots=True, init=False)
class BeatDuration:
    """A span between two beat positions, held exactly.

    Invariants:
        - ``|sub_beat| < 1``
        - when ``beat`` is non-zero, ``sub_beat`` is zero or has its sign

    Ordering is lexicographic on ``(beat, sub_beat)``.

    Attributes:
        beat: Whole beats.
        sub_beat: Fraction of a beat.

    Example:
        >>> BeatDuration.of(0, 5, -3)
        BeatDuration(beat=-1, sub_beat=Rational(-2, 3))
        >>> BeatDuration.of(1, 1, 2) * 3
        BeatDuration(beat=4, sub_beat=Rational(1, 2))
    """

    ZERO: ClassVar[BeatDuration]
    ONE: ClassVar[BeatDuration]
    MAX: ClassVar[BeatDuration]
    MIN: ClassVar[BeatDuration]

    beat: int
    sub_beat: Rational

    def __init__(self, beat: int, sub_beat: Rational = Rational.ZERO) -> None:
        """Create a normalized duration.

        Args:
            beat: Whole beats
            sub_beat: Additional beats as a fraction (any magnitude or sign)
        """
        normalized_beat, normalized_sub_beat = _normalize(int(beat), sub_beat)
        object.__setattr__(self, "beat", normalized_beat)
        object.__setattr__(self, "sub_beat", normalized_sub_beat)

    @classmethod
    def of(cls, beat: int, numerator: int = 0, denominator: int = 1) -> BeatDuration:
        """Create ``beat + numerator / denominator`` beats.

        This is the form chart ingestion should hand over, since it never
        passes through floating point.

        Args:
            beat: Whole beats
            numerator: Sub-beat numerator
            denominator: Sub-beat resolution (non-zero)

        Raises:
            InvalidOperationError: If denominator is zero
        """
        return cls(beat, Rational(numerator, denominator))

    @classmethod
    def from_float(cls, beats: float, resolution: int) -> BeatDuration:
        """Rationalize a floating beat count to the nearest ``1 / resolution``.

        Halves round away from zero.

        Args:
            beats: Beat count including the fraction
            resolution: Subdivisions per beat

        Raises:
            ValueError: If resolution is not positive or beats is not finite
        """
        if resolution <= 0:
            raise ValueError(f"resolution must be > 0, got {resolution}")
        if not math.isfinite(beats):
            raise ValueError(f"Cannot rationalize a non-finite beat count: {beats}")
        whole = int(beats)
        delta = beats - whole
        steps = int(delta * resolution + (0.5 if delta >= 0 else -0.5))
        return cls(whole, Rational(steps, resolution))

    def to_rational(self) -> Rational:
        """The whole duration as a single fraction."""
        return self.sub_beat + self.beat

    def to_float(self) -> float:
        """Approximate beat count."""
        return self.beat + self.sub_beat.to_float()

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        return f"{self.beat}+({self.sub_beat})"

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __pos__(self) -> BeatDuration:
        return self

    def __neg__(self) -> BeatDuration:
        return BeatDuration(-self.beat, -self.sub_beat)

    def __abs__(self) -> BeatDuration:
        return -self if self < BeatDuration.ZERO else self

    def __add__(self, other: Any) -> BeatDuration:
        if isinstance(other, BeatDuration):
            return BeatDuration(self.beat + other.beat, self.sub_beat + other.sub_beat)
        return NotImplemented

    def __sub__(self, other: Any) -> BeatDuration:
        if isinstance(other, BeatDuration):
            return BeatDuration(self.beat - other.beat, self.sub_beat - other.sub_beat)
        return NotImplemented

    def __mul__(self, other: Any) -> BeatDuration:
        if isinstance(other, Rational):
            whole = other * self.beat
            fraction = self.sub_beat * other
            return BeatDuration(
                whole.integer_part + fraction.integer_part,
                whole.fraction_part + fraction.fraction_part,
            )
        if isinstance(other, int):
            return BeatDuration(self.beat * other, self.sub_beat * other)
        return NotImplemented

    def __rmul__(self, other: Any) -> BeatDuration:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> BeatDuration:
        if isinstance(other, Rational):
            return self * other.reciprocal
        if isinstance(other, int):
            return self * Rational(1, other)
        return NotImplemented

    def compare_to(self, other: Any) -> int:
        """Three-way comparison; see :func:`tempomap.core.utils.compare.compare_to`."""
        return compare_to(self, other, BeatDuration)


BeatDuration.ZERO = BeatDuration(0)
BeatDuration.ONE = BeatDuration(1)
BeatDuration.MAX = BeatDuration(INT32_MAX)
BeatDuration.MIN = BeatDuration(INT32_MIN)
