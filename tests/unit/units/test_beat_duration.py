"""Tests for BeatDuration and BeatPoint."""

from __future__ import annotations

import math

import pytest

from tempomap.core.errors import InvalidOperationError, TypeMismatchError
from tempomap.core.mathematics.rational import Rational
from tempomap.core.units.beat_duration import INT32_MAX, INT32_MIN, BeatDuration
from tempomap.core.units.beat_point import BeatPoint

# ============================================================================
# BeatDuration
# ============================================================================


class TestBeatDurationNormalization:
    """Tests for the shared-sign normal form."""

    @pytest.mark.parametrize(
        ("beat", "numerator", "denominator", "expected_beat", "expected_sub_beat"),
        [
            (0, 2, 4, 0, Rational(1, 2)),
            (6, 3, 2, 7, Rational(1, 2)),
            (0, 3, 2, 1, Rational(1, 2)),
            (0, -2, 3, 0, Rational(-2, 3)),
            (0, 5, -3, -1, Rational(-2, 3)),
            (2, -1, 4, 1, Rational(3, 4)),
            (-2, 1, 4, -1, Rational(-3, 4)),
            (3, 0, 1, 3, Rational.ZERO),
        ],
    )
    def test_of(
        self,
        beat: int,
        numerator: int,
        denominator: int,
        expected_beat: int,
        expected_sub_beat: Rational,
    ) -> None:
        """Test carry and borrow into the whole-beat part."""
        duration = BeatDuration.of(beat, numerator, denominator)
        assert duration.beat == expected_beat
        assert duration.sub_beat == expected_sub_beat

    def test_zero_denominator_raises(self) -> None:
        """Test that an exact value cannot have a zero resolution."""
        with pytest.raises(InvalidOperationError):
            BeatDuration.of(1, 1, 0)

    def test_constants(self) -> None:
        """Test ZERO, ONE, MAX and MIN."""
        assert BeatDuration.ZERO == BeatDuration(0)
        assert BeatDuration.ONE == BeatDuration.of(0, 4, 4)
        assert BeatDuration.MAX.beat == INT32_MAX
        assert BeatDuration.MIN.beat == INT32_MIN


class TestBeatDurationFromFloat:
    """Tests for rationalizing floating beats."""

    @pytest.mark.parametrize(
        ("beats", "resolution", "expected"),
        [
            (1.5, 4, BeatDuration.of(1, 1, 2)),
            (0.26, 4, BeatDuration.of(0, 1, 4)),
            (2.125, 4, BeatDuration.of(2, 1, 4)),
            (-2.125, 4, BeatDuration.of(-2, -1, 4)),
            (0.999, 4, BeatDuration.ONE),
            (3.0, 960, BeatDuration(3)),
        ],
    )
    def test_from_float(self, beats: float, resolution: int, expected: BeatDuration) -> None:
        """Test rounding to the nearest subdivision, halves away from zero."""
        assert BeatDuration.from_float(beats, resolution) == expected

    def test_non_positive_resolution_raises(self) -> None:
        """Test that the resolution must be positive."""
        with pytest.raises(ValueError, match="resolution"):
            BeatDuration.from_float(1.0, 0)

    @pytest.mark.parametrize("beats", [math.inf, -math.inf, math.nan])
    def test_non_finite_beats_raise(self, beats: float) -> None:
        """Test that infinities and NaN are rejected."""
        with pytest.raises(ValueError, match="non-finite"):
            BeatDuration.from_float(beats, 960)


class TestBeatDurationArithmetic:
    """Tests for exact arithmetic."""

    def test_add_and_subtract(self) -> None:
        """Test renormalization after + and -."""
        a = BeatDuration.of(1, 2, 3)
        b = BeatDuration.of(0, 2, 3)
        assert a + b == BeatDuration.of(2, 1, 3)
        assert b - a == BeatDuration(-1)
        assert BeatDuration.of(1, 1, 4) - BeatDuration.of(1, 1, 2) == BeatDuration.of(0, -1, 4)

    def test_multiply(self) -> None:
        """Test multiplication by int and Rational from both sides."""
        duration = BeatDuration.of(1, 1, 2)
        assert duration * 3 == BeatDuration.of(4, 1, 2)
        assert 3 * duration == BeatDuration.of(4, 1, 2)
        assert duration * Rational(2, 3) == BeatDuration.ONE
        assert BeatDuration(3) * Rational(1, 2) == BeatDuration.of(1, 1, 2)

    def test_divide(self) -> None:
        """Test division by int and Rational."""
        assert BeatDuration(3) / 2 == BeatDuration.of(1, 1, 2)
        assert BeatDuration.ONE / Rational(1, 4) == BeatDuration(4)

    def test_divide_by_zero_raises(self) -> None:
        """Test exact division by zero."""
        with pytest.raises(InvalidOperationError):
            BeatDuration.ONE / 0

    def test_unary(self) -> None:
        """Test negation and abs."""
        duration = BeatDuration.of(1, 1, 3)
        assert -duration == BeatDuration.of(-1, -1, 3)
        assert abs(-duration) == duration
        assert +duration == duration

    def test_subdivisions_do_not_drift(self) -> None:
        """Test that adding triplet sixteenths lands exactly on the beat."""
        total = BeatDuration.ZERO
        step = BeatDuration.of(0, 1, 12)
        for _ in range(12 * 64):
            total = total + step
        assert total == BeatDuration(64)

    def test_to_rational_and_float(self) -> None:
        """Test conversion to a single fraction and to float."""
        duration = BeatDuration.of(-1, -1, 4)
        assert duration.to_rational() == Rational(-5, 4)
        assert duration.to_float() == -1.25
        assert float(duration) == -1.25


class TestBeatDurationComparison:
    """Tests for ordering."""

    def test_lexicographic_order(self) -> None:
        """Test ordering on (beat, sub_beat)."""
        assert BeatDuration.of(1, 1, 3) < BeatDuration.of(1, 1, 2)
        assert BeatDuration.of(0, 99, 100) < BeatDuration.ONE
        assert BeatDuration.of(-1, -1, 2) < BeatDuration(-1)
        assert sorted([BeatDuration(2), BeatDuration.of(0, -1, 2), BeatDuration.ONE]) == [
            BeatDuration.of(0, -1, 2),
            BeatDuration.ONE,
            BeatDuration(2),
        ]

    def test_compare_to(self) -> None:
        """Test three-way comparison and its failure mode."""
        assert BeatDuration.ONE.compare_to(BeatDuration.ZERO) == 1
        assert BeatDuration.ONE.compare_to(None) == 1
        with pytest.raises(TypeMismatchError):
            BeatDuration.ONE.compare_to(1)

    def test_str(self) -> None:
        """Test the display form."""
        assert str(BeatDuration.of(1, 1, 2)) == "1+(1/2)"


# ============================================================================
# BeatPoint
# ============================================================================


class TestBeatPoint:
    """Tests for exact positions."""

    def test_at(self) -> None:
        """Test construction from beat and fraction."""
        point = BeatPoint.at(2, 3, 4)
        assert point.beat == 2
        assert point.sub_beat == Rational(3, 4)
        assert point.to_float() == 2.75

    def test_point_arithmetic(self) -> None:
        """Test point +/- duration and point - point."""
        point = BeatPoint.at(4)
        assert point + BeatDuration.of(0, 1, 2) == BeatPoint.at(4, 1, 2)
        assert BeatDuration.ONE + point == BeatPoint.at(5)
        assert point - BeatDuration.of(0, 1, 2) == BeatPoint.at(3, 1, 2)
        assert point - BeatPoint.at(1, 1, 2) == BeatDuration.of(2, 1, 2)

    def test_adding_points_is_undefined(self) -> None:
        """Test that point + point is rejected."""
        with pytest.raises(TypeError):
            _ = BeatPoint.at(1) + BeatPoint.at(2)  # type: ignore[operator]

    def test_negative_positions(self) -> None:
        """Test that positions before the origin are allowed."""
        assert BeatPoint.ZERO - BeatDuration.of(0, 1, 2) < BeatPoint.ZERO

    def test_from_float(self) -> None:
        """Test rationalizing a floating position."""
        assert BeatPoint.from_float(1.5, 960) == BeatPoint.at(1, 1, 2)

    def test_bounds(self) -> None:
        """Test MIN < ZERO < MAX."""
        assert BeatPoint.MIN < BeatPoint.ZERO < BeatPoint.MAX

    def test_compare_to(self) -> None:
        """Test that a point does not compare with a duration."""
        assert BeatPoint.at(1).compare_to(BeatPoint.at(1)) == 0
        with pytest.raises(TypeMismatchError):
            BeatPoint.at(1).compare_to(BeatDuration.ONE)
