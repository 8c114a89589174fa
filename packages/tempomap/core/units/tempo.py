"""Tempo in beats per minute."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from tempomap.core.units.time import TimeDuration


@dataclass(frozen=True, slots=True)
class Tempo:
    """A tempo.

    A negative tempo plays the sequence in reverse: wall-clock time still
    moves forward while the sequence position moves backward. A zero tempo
    is a full stop, where one beat lasts forever.

    Attributes:
        beats_per_minute: Signed tempo in BPM.

    Example:
        >>> Tempo.from_bpm(120).duration_of_beat.seconds
        0.5
        >>> Tempo.from_bpm(-60).abs_duration_of_beat.seconds
        1.0
    """

    ZERO: ClassVar[Tempo]
    ONE: ClassVar[Tempo]

    beats_per_minute: float

    @classmethod
    def from_bpm(cls, beats_per_minute: float) -> Tempo:
        """Create a tempo from beats per minute."""
        return cls(float(beats_per_minute))

    @property
    def beats_per_second(self) -> float:
        """Signed beats per second."""
        return self.beats_per_minute / 60.0

    @property
    def is_negative(self) -> bool:
        """True for a reverse tempo."""
        return self.beats_per_minute < 0

    @property
    def abs_beats_per_second(self) -> float:
        """Beats per second, never negative."""
        return abs(self.beats_per_second)

    @property
    def duration_of_beat(self) -> TimeDuration:
        """Signed length of one beat; infinite at a zero tempo."""
        if self.beats_per_minute == 0:
            return TimeDuration.POSITIVE_INFINITY
        return TimeDuration.of_seconds(60.0 / self.beats_per_minute)

    @property
    def abs_duration_of_beat(self) -> TimeDuration:
        """Length of one beat, never negative."""
        if self.beats_per_minute == 0:
            return TimeDuration.POSITIVE_INFINITY
        return TimeDuration.of_seconds(60.0 / abs(self.beats_per_minute))

    def span_of(self, beats: float) -> TimeDuration:
        """Wall-clock time taken by ``beats`` beats at this tempo.

        The tempo direction is ignored; the result takes the sign of
        ``beats``. Zero beats always take zero time, even at a zero tempo.

        Args:
            beats: Number of beats

        Returns:
            Duration in wall-clock time
        """
        if beats == 0:
            return TimeDuration.ZERO
        return self.abs_duration_of_beat * beats

    def __str__(self) -> str:
        return f"{self.beats_per_minute:0.2f}bpm"

    def __mul__(self, other: Any) -> Tempo:
        if isinstance(other, (int, float)):
            return Tempo(self.beats_per_minute * other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Tempo:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Tempo:
        if isinstance(other, (int, float)):
            return Tempo(self.beats_per_minute / other)
        return NotImplemented


Tempo.ZERO = Tempo(0.0)
Tempo.ONE = Tempo(1.0)
