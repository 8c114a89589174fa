"""Tests for equal_range, insert_sorted and replace_sorted."""

from __future__ import annotations

import bisect
import random
from operator import itemgetter

import pytest

from tempomap.core.utils.search import EqualRange, equal_range, insert_sorted, replace_sorted

ITEMS = [1, 3, 3, 3, 5, 5, 7, 7, 7, 9, 9]


class TestEqualRange:
    """Tests for the single-pass equal-range search."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, (False, 0, 0)),
            (1, (True, 0, 1)),
            (2, (False, 1, 1)),
            (3, (True, 1, 4)),
            (4, (False, 4, 4)),
            (5, (True, 4, 6)),
            (6, (False, 6, 6)),
            (7, (True, 6, 9)),
            (8, (False, 9, 9)),
            (9, (True, 9, 11)),
            (10, (False, 11, 11)),
        ],
    )
    def test_known_table(self, value: int, expected: tuple[bool, int, int]) -> None:
        """Test every query around a sorted list with runs of duplicates."""
        assert equal_range(ITEMS, value) == EqualRange(*expected)

    def test_empty(self) -> None:
        """Test that an empty sequence yields (False, 0, 0)."""
        assert equal_range([], 3) == EqualRange(False, 0, 0)

    def test_single_item(self) -> None:
        """Test lists of one item."""
        assert equal_range([4], 4) == EqualRange(True, 0, 1)
        assert equal_range([4], 5) == EqualRange(False, 1, 1)

    def test_agrees_with_bisect(self) -> None:
        """Test bounds against bisect_left / bisect_right on random data."""
        rng = random.Random(99)
        for _ in range(200):
            items = sorted(rng.randint(0, 20) for _ in range(rng.randint(0, 40)))
            for value in range(-1, 23):
                lower = bisect.bisect_left(items, value)
                upper = bisect.bisect_right(items, value)
                assert equal_range(items, value) == EqualRange(upper > lower, lower, upper)

    def test_key(self) -> None:
        """Test searching records by a key function."""
        records = [(1, "a"), (2, "b"), (2, "c"), (4, "d")]
        assert equal_range(records, 2, key=itemgetter(0)) == EqualRange(True, 1, 3)


class TestInsertSorted:
    """Tests for ordered insertion."""

    def test_inserts_after_equal_items(self) -> None:
        """Test stable insertion at the upper bound."""
        records = [(1, "a"), (2, "b"), (3, "c")]
        index = insert_sorted(records, (2, "z"), key=itemgetter(0))
        assert index == 2
        assert records == [(1, "a"), (2, "b"), (2, "z"), (3, "c")]

    def test_keeps_order(self) -> None:
        """Test many inserts produce a sorted list."""
        rng = random.Random(5)
        items: list[int] = []
        for _ in range(100):
            insert_sorted(items, rng.randint(-50, 50))
        assert items == sorted(items)


class TestReplaceSorted:
    """Tests for replace-or-insert."""

    def test_replaces_existing(self) -> None:
        """Test that a match is overwritten in place."""
        records = [(1, "a"), (2, "b"), (3, "c")]
        assert replace_sorted(records, (2, "z"), key=itemgetter(0)) is True
        assert records == [(1, "a"), (2, "z"), (3, "c")]

    def test_inserts_missing(self) -> None:
        """Test that a new key is inserted in order."""
        records = [(1, "a"), (3, "c")]
        assert replace_sorted(records, (2, "b"), key=itemgetter(0)) is False
        assert records == [(1, "a"), (2, "b"), (3, "c")]
