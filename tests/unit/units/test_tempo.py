"""Tests for Tempo."""

from __future__ import annotations

import math

import pytest

from tempomap.core.units.tempo import Tempo
from tempomap.core.units.time import TimeDuration


class TestTempo:
    """Tests for tempo conversions."""

    def test_duration_of_beat(self) -> None:
        """Test seconds per beat for common tempos."""
        assert Tempo.from_bpm(120).duration_of_beat == TimeDuration.of_seconds(0.5)
        assert Tempo.from_bpm(60).beats_per_second == 1.0

    def test_negative_tempo(self) -> None:
        """Test signed and absolute variants under reverse tempo."""
        tempo = Tempo.from_bpm(-60)
        assert tempo.is_negative
        assert tempo.duration_of_beat.seconds == -1.0
        assert tempo.abs_duration_of_beat.seconds == 1.0
        assert tempo.beats_per_second == -1.0
        assert tempo.abs_beats_per_second == 1.0

    def test_zero_tempo_is_a_full_stop(self) -> None:
        """Test a zero tempo has infinitely long beats."""
        assert math.isinf(Tempo.ZERO.duration_of_beat.seconds)
        assert math.isinf(Tempo.ZERO.abs_duration_of_beat.seconds)
        assert not Tempo.ZERO.is_negative

    def test_span_of(self) -> None:
        """Test wall-clock time for a number of beats."""
        assert Tempo.from_bpm(120).span_of(4).seconds == 2.0
        assert Tempo.from_bpm(-120).span_of(4).seconds == 2.0
        assert Tempo.from_bpm(120).span_of(-4).seconds == -2.0

    def test_span_of_zero_beats_at_zero_tempo(self) -> None:
        """Test that zero beats take zero time even when a beat lasts forever."""
        assert Tempo.ZERO.span_of(0) == TimeDuration.ZERO
        assert math.isinf(Tempo.ZERO.span_of(1).seconds)

    def test_scaling(self) -> None:
        """Test * and / by numbers."""
        assert Tempo.from_bpm(120) * 0.5 == Tempo.from_bpm(60)
        assert 2 * Tempo.from_bpm(60) == Tempo.from_bpm(120)
        assert Tempo.from_bpm(120) / 4 == Tempo.from_bpm(30)

    def test_str(self) -> None:
        """Test the display form."""
        assert str(Tempo.from_bpm(128)) == "128.00bpm"

    def test_not_ordered(self) -> None:
        """Test that tempos have no ordering."""
        with pytest.raises(TypeError):
            _ = Tempo.ONE < Tempo.ZERO  # type: ignore[operator]
