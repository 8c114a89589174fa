"""Exact beat positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from tempomap.core.mathematics.rational import Rational
from tempomap.core.units.beat_duration import BeatDuration
from tempomap.core.utils.compare import compare_to


@dataclass(frozen=True, order=True, slots=True)
class BeatPoint:
    """A position on the beat axis, held as an exact duration from the origin.

    Positions can be negative. Only ``point +/- duration`` and
    ``point - point`` are defined; adding two points is meaningless.

    Attributes:
        duration_from_zero: Exact distance from the origin.

    Example:
        >>> BeatPoint.at(4) - BeatPoint.at(1, 1, 2)
        BeatDuration(beat=2, sub_beat=Rational(1, 2))
    """

    ZERO: ClassVar[BeatPoint]
    MIN: ClassVar[BeatPoint]
    MAX: ClassVar[BeatPoint]

    duration_from_zero: BeatDuration

    @classmethod
    def at(cls, beat: int, numerator: int = 0, denominator: int = 1) -> BeatPoint:
        """Create the position ``beat + numerator / denominator``."""
        return cls(BeatDuration.of(beat, numerator, denominator))

    @classmethod
    def from_float(cls, beats: float, resolution: int) -> BeatPoint:
        """Rationalize a floating position to the nearest ``1 / resolution``."""
        return cls(BeatDuration.from_float(beats, resolution))

    @property
    def beat(self) -> int:
        """Whole-beat part of the position."""
        return self.duration_from_zero.beat

    @property
    def sub_beat(self) -> Rational:
        """Fractional part of the position."""
        return self.duration_from_zero.sub_beat

    def to_float(self) -> float:
        """Approximate position in beats."""
        return self.duration_from_zero.to_float()

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        return str(self.duration_from_zero)

    def __add__(self, other: Any) -> BeatPoint:
        if isinstance(other, BeatDuration):
            return BeatPoint(self.duration_from_zero + other)
        return NotImplemented

    def __radd__(self, other: Any) -> BeatPoint:
        return self.__add__(other)

    def __sub__(self, other: Any) -> BeatPoint | BeatDuration:
        if isinstance(other, BeatPoint):
            return self.duration_from_zero - other.duration_from_zero
        if isinstance(other, BeatDuration):
            return BeatPoint(self.duration_from_zero - other)
        return NotImplemented

    def compare_to(self, other: Any) -> int:
        """Three-way comparison; see :func:`tempomap.core.utils.compare.compare_to`."""
        return compare_to(self, other, BeatPoint)


BeatPoint.ZERO = BeatPoint(BeatDuration.ZERO)
BeatPoint.MIN = BeatPoint(BeatDuration.MIN)
BeatPoint.MAX = BeatPoint(BeatDuration.MAX)
