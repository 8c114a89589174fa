"""Shared pytest fixtures for tempomap tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tempomap.core.collections.timetable import Timetable
from tempomap.core.units.beat_duration import BeatDuration
from tempomap.core.units.beat_point import BeatPoint
from tempomap.core.units.tempo import Tempo

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Timetable Fixtures
# ============================================================================


@pytest.fixture
def constant_timetable() -> Timetable:
    """Timetable at a constant 120 BPM (one beat every 0.5s)."""
    return Timetable(Tempo.from_bpm(120))


@pytest.fixture
def slowing_timetable() -> Timetable:
    """120 BPM, halving at beats 4, 6 and 7 (60, 30 and 15 BPM)."""
    timetable = Timetable(Tempo.from_bpm(120))
    timetable.add_tempo(BeatPoint.at(4), Tempo.from_bpm(60))
    timetable.add_tempo(BeatPoint.at(6), Tempo.from_bpm(30))
    timetable.add_tempo(BeatPoint.at(7), Tempo.from_bpm(15))
    return timetable


@pytest.fixture
def reversing_timetable() -> Timetable:
    """Same speeds as slowing_timetable, but beats 4-6 and 7+ play in reverse."""
    timetable = Timetable(Tempo.from_bpm(120))
    timetable.add_tempo(BeatPoint.at(4), Tempo.from_bpm(-60))
    timetable.add_tempo(BeatPoint.at(6), Tempo.from_bpm(30))
    timetable.add_tempo(BeatPoint.at(7), Tempo.from_bpm(-15))
    return timetable


@pytest.fixture
def stopping_timetable(reversing_timetable: Timetable) -> Timetable:
    """reversing_timetable with a one-beat stop at each tempo change."""
    for beat in (4, 6, 7):
        reversing_timetable.add_stop(BeatPoint.at(beat), BeatDuration.ONE)
    return reversing_timetable
