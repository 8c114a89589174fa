"""A list of values kept sorted by beat position."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from operator import attrgetter
from typing import Generic, NamedTuple, TypeVar

from tempomap.core.units.beat_point import BeatPoint
from tempomap.core.utils.search import equal_range, replace_sorted

T = TypeVar("T")

_entry_time = attrgetter("time")


@dataclass(frozen=True)
class Entry(Generic[T]):
    """A value registered at a beat position.

    Attributes:
        time: Beat position (the sort key).
        value: Stored value.
    """

    time: BeatPoint
    value: T


class Lookup(NamedTuple, Generic[T]):
    """Result of :meth:`BeatOrderedList.try_get_value`.

    Attributes:
        found: True on an exact key match.
        value: Matched value, else the value of the closest earlier entry,
            else None.
        index: Index of that entry, or -1 when nothing precedes the key.
    """

    found: bool
    value: T | None
    index: int


class BeatOrderedList(Generic[T]):
    """Entries with strictly increasing, unique beat positions.

    Adding at an existing position overwrites the stored value. Appending
    past the last entry is O(1); anything else is an O(log n) search plus
    an O(n) shift.

    Not thread-safe: callers serialize mutation against other mutation
    and iteration.

    Example:
        >>> ordered = BeatOrderedList[str]()
        >>> ordered.add(BeatPoint.at(2), "b")
        >>> ordered.add(BeatPoint.at(1), "a")
        >>> [entry.value for entry in ordered]
        ['a', 'b']
    """

    def __init__(self) -> None:
        self._entries: list[Entry[T]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> Entry[T]:
        return self._entries[index]

    def __iter__(self) -> Iterator[Entry[T]]:
        return iter(self._entries)

    def __contains__(self, time: object) -> bool:
        if not isinstance(time, BeatPoint):
            return False
        return equal_range(self._entries, time, key=_entry_time).found

    def __repr__(self) -> str:
        return f"BeatOrderedList({self._entries!r})"

    def keys(self) -> list[BeatPoint]:
        """Beat positions in ascending order."""
        return [entry.time for entry in self._entries]

    def add(self, time: BeatPoint, value: T) -> None:
        """Insert a value, or overwrite the value already at ``time``.

        Args:
            time: Beat position
            value: Value to store
        """
        entry = Entry(time, value)
        if not self._entries or self._entries[-1].time < time:
            self._entries.append(entry)
            return
        replace_sorted(self._entries, entry, key=_entry_time)

    def try_get_value(self, time: BeatPoint) -> Lookup[T]:
        """Look up the value at ``time``, falling back to its predecessor.

        Args:
            time: Beat position

        Returns:
            Lookup with ``found=True`` on an exact match. Otherwise the value
            and index of the greatest position strictly before ``time``, or
            ``(False, None, -1)`` when there is none.
        """
        found, lower, _ = equal_range(self._entries, time, key=_entry_time)
        if found:
            return Lookup(True, self._entries[lower].value, lower)
        if lower > 0:
            return Lookup(False, self._entries[lower - 1].value, lower - 1)
        return Lookup(False, None, -1)

    def try_remove_at(self, time: BeatPoint) -> bool:
        """Remove the entry at exactly ``time``.

        Returns:
            True if an entry was removed
        """
        found, lower, _ = equal_range(self._entries, time, key=_entry_time)
        if found:
            del self._entries[lower]
        return found
