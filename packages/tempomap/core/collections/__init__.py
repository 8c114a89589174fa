"""Beat-keyed containers and the tempo map."""

from tempomap.core.collections.beat_ordered_list import BeatOrderedList, Entry, Lookup
from tempomap.core.collections.timetable import (
    DEFAULT_TEMPO,
    BeatPosition,
    ControlPoint,
    StopOnly,
    TempoAndStop,
    TempoChange,
    Timetable,
    TimetableValue,
    make_value,
)

__all__ = [
    "DEFAULT_TEMPO",
    "BeatOrderedList",
    "BeatPosition",
    "ControlPoint",
    "Entry",
    "Lookup",
    "StopOnly",
    "TempoAndStop",
    "TempoChange",
    "Timetable",
    "TimetableValue",
    "make_value",
]
