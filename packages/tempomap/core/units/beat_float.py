"""Approximate (floating-point) beat values.

These are what integration over a tempo map produces: a beat count
derived from a wall-clock time is not exactly representable anyway.
Conversion to and from the exact family is always explicit.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, ClassVar

from tempomap.core.units.beat_duration import BeatDuration
from tempomap.core.units.beat_point import BeatPoint
from tempomap.core.utils.compare import compare_to


@dataclass(frozen=True, order=True, slots=True)
class BeatDurationFloat:
    """An approximate span in beats.

    Attributes:
        beats: Length in beats.
    """

    ZERO: ClassVar[BeatDurationFloat]
    ONE: ClassVar[BeatDurationFloat]
    POSITIVE_INFINITY: ClassVar[BeatDurationFloat]
    NEGATIVE_INFINITY: ClassVar[BeatDurationFloat]

    beats: float

    @classmethod
    def of(cls, beats: float) -> BeatDurationFloat:
        """Create a duration of ``beats`` beats."""
        return cls(float(beats))

    @classmethod
    def from_duration(cls, duration: BeatDuration) -> BeatDurationFloat:
        """Approximate an exact duration (lossy)."""
        return cls(duration.to_float())

    def to_exact(self, resolution: int) -> BeatDuration:
        """Rationalize to the nearest ``1 / resolution`` beat (lossy)."""
        return BeatDuration.from_float(self.beats, resolution)

    def __float__(self) -> float:
        return self.beats

    def __str__(self) -> str:
        return f"{self.beats:0.3f}beats"

    def __pos__(self) -> BeatDurationFloat:
        return self

    def __neg__(self) -> BeatDurationFloat:
        return BeatDurationFloat(-self.beats)

    def __abs__(self) -> BeatDurationFloat:
        return BeatDurationFloat(abs(self.beats))

    def __add__(self, other: Any) -> BeatDurationFloat:
        if isinstance(other, BeatDurationFloat):
            return BeatDurationFloat(self.beats + other.beats)
        return NotImplemented

    def __sub__(self, other: Any) -> BeatDurationFloat:
        if isinstance(other, BeatDurationFloat):
            return BeatDurationFloat(self.beats - other.beats)
        return NotImplemented

    def __mul__(self, other: Any) -> BeatDurationFloat:
        if isinstance(other, (int, float)):
            return BeatDurationFloat(self.beats * other)
        return NotImplemented

    def __rmul__(self, other: Any) -> BeatDurationFloat:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> BeatDurationFloat:
        if isinstance(other, (int, float)):
            return BeatDurationFloat(self.beats / other)
        return NotImplemented

    def __mod__(self, other: Any) -> float:
        if isinstance(other, BeatDurationFloat):
            return math.fmod(self.beats, other.beats)
        return NotImplemented

    def compare_to(self, other: Any) -> int:
        """Three-way comparison; see :func:`tempomap.core.utils.compare.compare_to`."""
        return compare_to(self, other, BeatDurationFloat)


BeatDurationFloat.ZERO = BeatDurationFloat(0.0)
BeatDurationFloat.ONE = BeatDurationFloat(1.0)
BeatDurationFloat.POSITIVE_INFINITY = BeatDurationFloat(math.inf)
BeatDurationFloat.NEGATIVE_INFINITY = BeatDurationFloat(-math.inf)


@dataclass(frozen=True, order=True, slots=True)
class BeatPointFloat:
    """An approximate position on the beat axis.

    Attributes:
        duration_from_zero: Distance from the origin.
    """

    ZERO: ClassVar[BeatPointFloat]
    POSITIVE_INFINITY: ClassVar[BeatPointFloat]
    NEGATIVE_INFINITY: ClassVar[BeatPointFloat]

    duration_from_zero: BeatDurationFloat

    @classmethod
    def at(cls, beats: float) -> BeatPointFloat:
        """Create the position ``beats`` beats from the origin."""
        return cls(BeatDurationFloat.of(beats))

    @classmethod
    def from_point(cls, point: BeatPoint) -> BeatPointFloat:
        """Approximate an exact position (lossy)."""
        return cls(BeatDurationFloat.from_duration(point.duration_from_zero))

    @property
    def beats(self) -> float:
        """Position in beats."""
        return self.duration_from_zero.beats

    def to_exact(self, resolution: int) -> BeatPoint:
        """Rationalize to the nearest ``1 / resolution`` beat (lossy)."""
        return BeatPoint(self.duration_from_zero.to_exact(resolution))

    def __float__(self) -> float:
        return self.beats

    def __str__(self) -> str:
        return str(self.duration_from_zero)

    def __add__(self, other: Any) -> BeatPointFloat:
        if isinstance(other, BeatDurationFloat):
            return BeatPointFloat(self.duration_from_zero + other)
        return NotImplemented

    def __radd__(self, other: Any) -> BeatPointFloat:
        return self.__add__(other)

    def __sub__(self, other: Any) -> BeatPointFloat | BeatDurationFloat:
        if isinstance(other, BeatPointFloat):
            return self.duration_from_zero - other.duration_from_zero
        if isinstance(other, BeatDurationFloat):
            return BeatPointFloat(self.duration_from_zero - other)
        return NotImplemented

    def compare_to(self, other: Any) -> int:
        """Three-way comparison; see :func:`tempomap.core.utils.compare.compare_to`."""
        return compare_to(self, other, BeatPointFloat)


BeatPointFloat.ZERO = BeatPointFloat(BeatDurationFloat.ZERO)
BeatPointFloat.POSITIVE_INFINITY = BeatPointFloat(BeatDurationFloat.POSITIVE_INFINITY)
BeatPointFloat.NEGATIVE_INFINITY = BeatPointFloat(BeatDurationFloat.NEGATIVE_INFINITY)
