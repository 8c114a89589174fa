"""Tests for TimeDuration and TimePoint."""

from __future__ import annotations

import pytest

from tempomap.core.errors import TypeMismatchError
from tempomap.core.units.time import TimeDuration, TimePoint


class TestTimeDuration:
    """Tests for wall-clock spans."""

    def test_units(self) -> None:
        """Test conversions between seconds, minutes and milliseconds."""
        duration = TimeDuration.of_seconds(90.0)
        assert duration.minutes == 1.5
        assert duration.milliseconds == 90_000.0
        assert TimeDuration.MINUTE == TimeDuration.SECOND * 60
        assert TimeDuration.MILLISECOND.seconds == 0.001

    def test_display_parts(self) -> None:
        """Test the mm:ss.fff parts."""
        duration = TimeDuration.of_seconds(125.25)
        assert duration.minute_part == 2
        assert duration.second_part == 5
        assert duration.millisecond_part == 250

    def test_arithmetic(self) -> None:
        """Test +, -, scaling and ratios."""
        a = TimeDuration.of_seconds(3.0)
        b = TimeDuration.of_seconds(1.5)
        assert a + b == TimeDuration.of_seconds(4.5)
        assert a - b == b
        assert a * 2 == TimeDuration.of_seconds(6.0)
        assert 2 * a == TimeDuration.of_seconds(6.0)
        assert a / 2 == b
        assert a / b == 2.0
        assert a % TimeDuration.of_seconds(2.0) == 1.0
        assert -a == TimeDuration.of_seconds(-3.0)
        assert abs(-a) == a

    def test_str(self) -> None:
        """Test the display form."""
        assert str(TimeDuration.of_seconds(1.5)) == "1.500sec"

    def test_compare_to(self) -> None:
        """Test three-way comparison."""
        assert TimeDuration.ZERO.compare_to(TimeDuration.SECOND) == -1
        with pytest.raises(TypeMismatchError):
            TimeDuration.ZERO.compare_to(0.0)


class TestTimePoint:
    """Tests for wall-clock instants."""

    def test_point_arithmetic(self) -> None:
        """Test point +/- duration and point - point."""
        point = TimePoint.at_seconds(2.0)
        assert point + TimeDuration.SECOND == TimePoint.at_seconds(3.0)
        assert TimeDuration.SECOND + point == TimePoint.at_seconds(3.0)
        assert point - TimeDuration.SECOND == TimePoint.at_seconds(1.0)
        assert point - TimePoint.at_seconds(0.5) == TimeDuration.of_seconds(1.5)

    def test_ordering(self) -> None:
        """Test ordering including the infinities."""
        assert TimePoint.NEGATIVE_INFINITY < TimePoint.ZERO < TimePoint.POSITIVE_INFINITY
        assert TimePoint.at_seconds(1.0).seconds == 1.0
