"""Beat, time and tempo value types.

Two parallel families:
- exact: BeatDuration / BeatPoint (integer beats + Rational sub-beat)
- approximate: BeatDurationFloat / BeatPointFloat, TimeDuration / TimePoint
"""

from tempomap.core.units.beat_duration import BeatDuration
from tempomap.core.units.beat_float import BeatDurationFloat, BeatPointFloat
from tempomap.core.units.beat_point import BeatPoint
from tempomap.core.units.tempo import Tempo
from tempomap.core.units.time import TimeDuration, TimePoint

__all__ = [
    "BeatDuration",
    "BeatDurationFloat",
    "BeatPoint",
    "BeatPointFloat",
    "Tempo",
    "TimeDuration",
    "TimePoint",
]
