"""Wall-clock time values in seconds."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, ClassVar

from tempomap.core.utils.compare import compare_to


@dataclass(frozen=True, order=True, slots=True)
class TimeDuration:
    """A span of wall-clock time.

    Attributes:
        seconds: Length in seconds (may be negative or infinite).
    """

    ZERO: ClassVar[TimeDuration]
    POSITIVE_INFINITY: ClassVar[TimeDuration]
    NEGATIVE_INFINITY: ClassVar[TimeDuration]
    SECOND: ClassVar[TimeDuration]
    MINUTE: ClassVar[TimeDuration]
    MILLISECOND: ClassVar[TimeDuration]

    seconds: float

    @classmethod
    def of_seconds(cls, seconds: float) -> TimeDuration:
        """Create a duration from seconds."""
        return cls(float(seconds))

    @property
    def milliseconds(self) -> float:
        """Length in milliseconds."""
        return self.seconds * 1000.0

    @property
    def minutes(self) -> float:
        """Length in minutes."""
        return self.seconds / 60.0

    @property
    def minute_part(self) -> int:
        """Whole minutes, for ``mm:ss.fff`` display."""
        return int(self.minutes)

    @property
    def second_part(self) -> int:
        """Whole seconds within the current minute."""
        return int(math.fmod(self.seconds, 60.0))

    @property
    def millisecond_part(self) -> int:
        """Whole milliseconds within the current second."""
        return int(math.fmod(self.seconds, 1.0) * 1000.0)

    def __str__(self) -> str:
        return f"{self.seconds:0.3f}sec"

    def __pos__(self) -> TimeDuration:
        return self

    def __neg__(self) -> TimeDuration:
        return TimeDuration(-self.seconds)

    def __abs__(self) -> TimeDuration:
        return TimeDuration(abs(self.seconds))

    def __add__(self, other: Any) -> TimeDuration:
        if isinstance(other, TimeDuration):
            return TimeDuration(self.seconds + other.seconds)
        return NotImplemented

    def __sub__(self, other: Any) -> TimeDuration:
        if isinstance(other, TimeDuration):
            return TimeDuration(self.seconds - other.seconds)
        return NotImplemented

    def __mul__(self, other: Any) -> TimeDuration:
        if isinstance(other, (int, float)):
            return TimeDuration(self.seconds * other)
        return NotImplemented

    def __rmul__(self, other: Any) -> TimeDuration:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> TimeDuration | float:
        if isinstance(other, TimeDuration):
            return self.seconds / other.seconds
        if isinstance(other, (int, float)):
            return TimeDuration(self.seconds / other)
        return NotImplemented

    def __mod__(self, other: Any) -> float:
        if isinstance(other, TimeDuration):
            return math.fmod(self.seconds, other.seconds)
        return NotImplemented

    def compare_to(self, other: Any) -> int:
        """Three-way comparison; see :func:`tempomap.core.utils.compare.compare_to`."""
        return compare_to(self, other, TimeDuration)


TimeDuration.ZERO = TimeDuration(0.0)
TimeDuration.POSITIVE_INFINITY = TimeDuration(math.inf)
TimeDuration.NEGATIVE_INFINITY = TimeDuration(-math.inf)
TimeDuration.SECOND = TimeDuration(1.0)
TimeDuration.MINUTE = TimeDuration(60.0)
TimeDuration.MILLISECOND = TimeDuration(0.001)


@dataclass(frozen=True, order=True, slots=True)
class TimePoint:
    """A wall-clock instant, measured as a duration from the origin.

    Attributes:
        duration_from_zero: Elapsed time since the origin.
    """

    ZERO: ClassVar[TimePoint]
    POSITIVE_INFINITY: ClassVar[TimePoint]
    NEGATIVE_INFINITY: ClassVar[TimePoint]

    duration_from_zero: TimeDuration

    @classmethod
    def at_seconds(cls, seconds: float) -> TimePoint:
        """Create the instant ``seconds`` after the origin."""
        return cls(TimeDuration.of_seconds(seconds))

    @property
    def seconds(self) -> float:
        """Seconds since the origin."""
        return self.duration_from_zero.seconds

    def __str__(self) -> str:
        return str(self.duration_from_zero)

    def __add__(self, other: Any) -> TimePoint:
        if isinstance(other, TimeDuration):
            return TimePoint(self.duration_from_zero + other)
        return NotImplemented

    def __radd__(self, other: Any) -> TimePoint:
        return self.__add__(other)

    def __sub__(self, other: Any) -> TimePoint | TimeDuration:
        if isinstance(other, TimePoint):
            return self.duration_from_zero - other.duration_from_zero
        if isinstance(other, TimeDuration):
            return TimePoint(self.duration_from_zero - other)
        return NotImplemented

    def compare_to(self, other: Any) -> int:
        """Three-way comparison; see :func:`tempomap.core.utils.compare.compare_to`."""
        return compare_to(self, other, TimePoint)


TimePoint.ZERO = TimePoint(TimeDuration.ZERO)
TimePoint.POSITIVE_INFINITY = TimePoint(TimeDuration.POSITIVE_INFINITY)
TimePoint.NEGATIVE_INFINITY = TimePoint(TimeDuration.NEGATIVE_INFINITY)
