"""Tempo map: tempo changes, stops, and beat/time integration over them.

Forward queries (beats to wall-clock time) integrate section spans and stop
spans with an :class:`~tempomap.core.mathematics.accumulator.Accumulator`.
Inverse queries walk the same resolved timeline until the running total
reaches the query time and solve the last partial section directly.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import NamedTuple

from tempomap.core.collections.beat_ordered_list import BeatOrderedList, Entry
from tempomap.core.mathematics.accumulator import Accumulator
from tempomap.core.units.beat_duration import BeatDuration
from tempomap.core.units.beat_float import BeatDurationFloat, BeatPointFloat
from tempomap.core.units.beat_point import BeatPoint
from tempomap.core.units.tempo import Tempo
from tempomap.core.units.time import TimePoint

logger = logging.getLogger(__name__)

DEFAULT_TEMPO = Tempo.from_bpm(130)


# ============================================================================
# Stored values
# ============================================================================


@dataclass(frozen=True, slots=True)
class TempoChange:
    """A tempo change with no stop."""

    tempo: Tempo

    @property
    def stop_duration(self) -> BeatDuration:
        return BeatDuration.ZERO


@dataclass(frozen=True, slots=True)
class StopOnly:
    """A stop that keeps the tempo already in effect."""

    stop_duration: BeatDuration

    @property
    def tempo(self) -> Tempo | None:
        return None


@dataclass(frozen=True, slots=True)
class TempoAndStop:
    """A tempo change followed by a stop at the new tempo."""

    tempo: Tempo
    stop_duration: BeatDuration


TimetableValue = TempoChange | StopOnly | TempoAndStop


def make_value(tempo: Tempo | None, stop_duration: BeatDuration) -> TimetableValue | None:
    """Pick the variant for a tempo/stop combination.

    Args:
        tempo: Tempo change, or None to inherit the preceding tempo
        stop_duration: Stop length in beats (zero for none)

    Returns:
        The matching variant, or None when neither field is set
    """
    has_stop = stop_duration != BeatDuration.ZERO
    if tempo is None:
        return StopOnly(stop_duration) if has_stop else None
    if has_stop:
        return TempoAndStop(tempo, stop_duration)
    return TempoChange(tempo)


@dataclass(frozen=True, slots=True)
class ControlPoint:
    """A control point with its effective tempo resolved.

    Attributes:
        time: Beat position of the point.
        tempo: Tempo in effect from this point on.
        stop_duration: Beats of ``tempo`` spent stopped at this point.
    """

    time: BeatPoint
    tempo: Tempo
    stop_duration: BeatDuration


class BeatPosition(NamedTuple):
    """Result of an inverse (time to beats) query.

    Attributes:
        beats: Beats elapsed, counting reverse sections forward.
        sequence_position: Signed cursor that moves backward under a
            negative tempo.
    """

    beats: BeatPointFloat
    sequence_position: BeatPointFloat


# ============================================================================
# Integration
# ============================================================================


class _InverseIntegration:
    """Running state of a time to beats walk."""

    def __init__(self, target: TimePoint) -> None:
        self._target = target.seconds
        self._elapsed = Accumulator()
        self._beats = BeatPoint.ZERO
        self._position = BeatPoint.ZERO

    def advance(self, point: ControlPoint, section: BeatDuration | None) -> BeatPosition | None:
        """Consume ``point``'s stop and the section that follows it.

        Args:
            point: Control point starting the section
            section: Beats until the next point, or None for the open end

        Returns:
            The position once the target time is reached, else None
        """
        tempo = point.tempo
        self._elapsed.add(tempo.span_of(point.stop_duration.to_float()).seconds)
        elapsed = self._elapsed.get()
        if elapsed >= self._target:
            return self._result(tempo, 0.0)

        if section is None:
            section_seconds = math.inf
        else:
            section_seconds = tempo.span_of(section.to_float()).seconds
        if self._elapsed.get(section_seconds) >= self._target:
            beat_seconds = tempo.abs_duration_of_beat.seconds
            # A frozen section never advances, even at infinite time
            trailing = 0.0 if math.isinf(beat_seconds) else (self._target - elapsed) / beat_seconds
            return self._result(tempo, trailing)

        assert section is not None
        self._elapsed.add(section_seconds)
        self._beats = self._beats + section
        self._position = self._position + (-section if tempo.is_negative else section)
        return None

    def _result(self, tempo: Tempo, trailing: float) -> BeatPosition:
        move = -trailing if tempo.is_negative else trailing
        return BeatPosition(
            beats=BeatPointFloat.from_point(self._beats) + BeatDurationFloat.of(trailing),
            sequence_position=BeatPointFloat.from_point(self._position)
            + BeatDurationFloat.of(move),
        )


# ============================================================================
# Timetable
# ============================================================================


class Timetable:
    """Tempo changes and stops keyed by beat position.

    There is always a control point at the origin carrying the starting
    tempo; it can be retargeted but never deleted. Every other point holds
    a tempo change, a stop, or both. A stop is extra beats of the tempo in
    effect at that point during which wall-clock time passes but the
    sequence does not advance.

    Not thread-safe: queries may run concurrently with each other, never
    with a mutation.

    Example:
        >>> timetable = Timetable(Tempo.from_bpm(120))
        >>> timetable.add_tempo(BeatPoint.at(4), Tempo.from_bpm(60))
        >>> timetable.get_time_at(BeatPoint.at(5)).seconds
        3.0
    """

    def __init__(self, default_tempo: Tempo | None = None) -> None:
        """Create a timetable with a single control point at the origin.

        Args:
            default_tempo: Starting tempo (130 BPM when omitted)

        Raises:
            ValueError: If the starting tempo is zero
        """
        tempo = DEFAULT_TEMPO if default_tempo is None else default_tempo
        if tempo == Tempo.ZERO:
            raise ValueError("The starting tempo must not be zero")
        self._values: BeatOrderedList[TimetableValue] = BeatOrderedList()
        self._values.add(BeatPoint.ZERO, TempoChange(tempo))

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[ControlPoint]:
        """Iterate control points with inherited tempos filled in."""
        tempo = self.default_tempo
        for entry in self._values:
            if entry.value.tempo is not None:
                tempo = entry.value.tempo
            yield ControlPoint(entry.time, tempo, entry.value.stop_duration)

    def __repr__(self) -> str:
        return f"Timetable(default_tempo={self.default_tempo}, points={len(self)})"

    @property
    def default_tempo(self) -> Tempo:
        """Tempo at the origin."""
        tempo = self._values[0].value.tempo
        assert tempo is not None
        return tempo

    def raw_entries(self) -> Iterator[Entry[TimetableValue]]:
        """Iterate the stored values without tempo inheritance applied."""
        return iter(self._values)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(
        self,
        time: BeatPoint,
        tempo: Tempo,
        stop_duration: BeatDuration = BeatDuration.ZERO,
    ) -> None:
        """Set both the tempo and the stop at ``time``, replacing what was there.

        Args:
            time: Beat position (non-negative)
            tempo: Tempo from ``time`` on
            stop_duration: Stop length in beats (non-negative)

        Raises:
            ValueError: If ``time`` or ``stop_duration`` is negative
        """
        _check_time(time)
        _check_stop(stop_duration)
        if self._rejects_origin_tempo(time, tempo):
            return
        self._store(time, make_value(tempo, stop_duration))

    def add_tempo(self, time: BeatPoint, tempo: Tempo) -> None:
        """Set the tempo at ``time``, keeping any stop already there.

        A zero tempo at the origin is ignored with a warning.

        Args:
            time: Beat position (non-negative)
            tempo: Tempo from ``time`` on

        Raises:
            ValueError: If ``time`` is negative
        """
        _check_time(time)
        if self._rejects_origin_tempo(time, tempo):
            return
        current = self._value_at(time)
        stop_duration = current.stop_duration if current is not None else BeatDuration.ZERO
        self._store(time, make_value(tempo, stop_duration))

    def add_stop(self, time: BeatPoint, stop_duration: BeatDuration) -> None:
        """Set the stop at ``time``, keeping any tempo change already there.

        A zero ``stop_duration`` clears the stop.

        Args:
            time: Beat position (non-negative)
            stop_duration: Stop length in beats of the tempo in effect at ``time``

        Raises:
            ValueError: If ``time`` or ``stop_duration`` is negative
        """
        _check_time(time)
        _check_stop(stop_duration)
        current = self._value_at(time)
        tempo = current.tempo if current is not None else None
        self._store(time, make_value(tempo, stop_duration))

    def remove(self, time: BeatPoint) -> bool:
        """Remove the control point at ``time``.

        At the origin only the stop is cleared.

        Returns:
            True if anything was removed
        """
        if time == BeatPoint.ZERO:
            return self.remove_stop_sequence(time)
        removed = self._values.try_remove_at(time)
        if removed:
            logger.debug("Removed control point at %s", time)
        return removed

    def remove_tempo(self, time: BeatPoint) -> bool:
        """Drop the tempo change at ``time``, keeping any stop.

        The origin tempo cannot be removed.

        Returns:
            True if a tempo change was removed
        """
        if time == BeatPoint.ZERO:
            return False
        current = self._value_at(time)
        if current is None or current.tempo is None:
            return False
        self._store(time, make_value(None, current.stop_duration))
        return True

    def remove_stop_sequence(self, time: BeatPoint) -> bool:
        """Drop the stop at ``time``, keeping any tempo change.

        Returns:
            True if a stop was removed
        """
        current = self._value_at(time)
        if current is None or current.stop_duration == BeatDuration.ZERO:
            return False
        self._store(time, make_value(current.tempo, BeatDuration.ZERO))
        return True

    def _rejects_origin_tempo(self, time: BeatPoint, tempo: Tempo) -> bool:
        if time == BeatPoint.ZERO and tempo == Tempo.ZERO:
            logger.warning("Ignoring zero tempo at the origin; keeping %s", self.default_tempo)
            return True
        return False

    def _value_at(self, time: BeatPoint) -> TimetableValue | None:
        found, value, _ = self._values.try_get_value(time)
        return value if found else None

    def _store(self, time: BeatPoint, value: TimetableValue | None) -> None:
        if value is None:
            if self._values.try_remove_at(time):
                logger.debug("Removed empty control point at %s", time)
            return
        self._values.add(time, value)
        logger.debug("Set control point at %s to %s", time, value)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_time_at(self, time: BeatPoint) -> TimePoint:
        """Wall-clock time at which the sequence reaches ``time``.

        Stops recorded strictly before ``time`` are included; a stop at
        ``time`` itself has not started yet.

        Args:
            time: Beat position

        Returns:
            Time since the origin
        """
        elapsed = Accumulator()
        current: ControlPoint | None = None
        for point in self:
            if current is not None:
                if point.time >= time:
                    break
                section = point.time - current.time
                elapsed.add(current.tempo.span_of(section.to_float()).seconds)
            if point.time < time:
                elapsed.add(point.tempo.span_of(point.stop_duration.to_float()).seconds)
            current = point

        assert current is not None
        tail = time - current.time
        elapsed.add(current.tempo.span_of(tail.to_float()).seconds)
        return TimePoint.at_seconds(elapsed.get())

    def get_beats_at(self, time: TimePoint) -> BeatPosition:
        """Beats elapsed and sequence position at wall-clock ``time``.

        Inside a stop both values hold still. When the arrival time at a
        control point equals ``time`` exactly, the walk ends there.
        Times before the origin map to the origin.

        Args:
            time: Time since the origin

        Returns:
            Beats elapsed and signed sequence position
        """
        if math.isnan(time.seconds):
            raise ValueError("Cannot locate beats at a NaN time")
        walk = _InverseIntegration(time)
        points = iter(self)
        current = next(points)
        for following in points:
            position = walk.advance(current, following.time - current.time)
            if position is not None:
                return position
            current = following
        position = walk.advance(current, None)
        assert position is not None
        return position

    def get_beat_time_at(self, time: TimePoint) -> BeatPointFloat:
        """Beats elapsed at ``time``, counting reverse sections forward."""
        return self.get_beats_at(time).beats

    def get_sequence_position_at(self, time: TimePoint) -> BeatPointFloat:
        """Signed sequence position at ``time``."""
        return self.get_beats_at(time).sequence_position


def _check_time(time: BeatPoint) -> None:
    if time < BeatPoint.ZERO:
        raise ValueError(f"Control points must be at or after beat 0, got {time}")


def _check_stop(stop_duration: BeatDuration) -> None:
    if stop_duration < BeatDuration.ZERO:
        raise ValueError(f"Stop duration must not be negative, got {stop_duration}")
