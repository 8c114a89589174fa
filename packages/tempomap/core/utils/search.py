"""Binary search over sorted sequences.

``equal_range`` narrows the lower and upper bounds of the run of items
equal to a query in a single pass, then finishes the upper bound in a
second, already-shortened search. ``insert_sorted`` and ``replace_sorted``
build ordered inserts on top of it.

Like :mod:`bisect`, ``key`` is applied to the items only; the query value
is already in key space.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence, Sequence
from typing import Any, NamedTuple, TypeVar

T = TypeVar("T")


class EqualRange(NamedTuple):
    """Result of an equal-range search.

    Attributes:
        found: True if at least one item compares equal to the query.
        lower: First index whose item is not less than the query.
        upper: First index whose item is greater than the query.
    """

    found: bool
    lower: int
    upper: int


def _compare(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def _identity(item: Any) -> Any:
    return item


def equal_range(
    items: Sequence[T],
    value: Any,
    key: Callable[[T], Any] | None = None,
) -> EqualRange:
    """Find the closed-open interval ``[lower, upper)`` of items equal to value.

    Args:
        items: Sequence sorted ascending by ``key``
        value: Query value (in key space)
        key: Optional key function applied to items

    Returns:
        EqualRange with the found flag and both bounds. When nothing
        matches, ``lower == upper`` is the insertion point.

    Example:
        >>> equal_range([1, 3, 3, 3, 5], 3)
        EqualRange(found=True, lower=1, upper=4)
        >>> equal_range([1, 3, 3, 3, 5], 4)
        EqualRange(found=False, lower=4, upper=4)
    """
    k = key or _identity
    length = len(items)
    if length == 0:
        return EqualRange(False, 0, 0)

    if _compare(value, k(items[0])) < 0:
        return EqualRange(False, 0, 0)
    if _compare(value, k(items[length - 1])) > 0:
        return EqualRange(False, length, length)

    found = False
    lower_left = 0
    lower_length = length
    upper_left = 0
    upper_length = length

    # Find the lower bound and shrink the window the upper bound can be in.
    while lower_length > 0:
        half = lower_length >> 1
        middle = lower_left + half
        comp = _compare(value, k(items[middle]))
        if comp > 0:
            lower_left = middle + 1
            lower_length -= half + 1
            if upper_left < middle + 1:
                upper_length -= middle + 1 - upper_left
                upper_left = middle + 1
        else:
            lower_length = half
            if comp == 0:
                found = True
                if upper_left < middle + 1:
                    upper_length -= middle + 1 - upper_left
                    upper_left = middle + 1
            else:
                candidate_length = middle + 1 - upper_left
                if upper_length > candidate_length:
                    upper_length = candidate_length

    # Finish the upper bound inside the remaining window.
    while upper_length > 0:
        half = upper_length >> 1
        middle = upper_left + half
        comp = _compare(value, k(items[middle]))
        if comp < 0:
            upper_length = half
        else:
            if comp == 0:
                found = True
            upper_left = middle + 1
            upper_length -= half + 1

    return EqualRange(found, lower_left, upper_left)


def insert_sorted(
    items: MutableSequence[T],
    item: T,
    key: Callable[[T], Any] | None = None,
) -> int:
    """Insert item after any equal items, keeping the sequence sorted.

    Args:
        items: Sequence sorted ascending by ``key``
        item: Item to insert
        key: Optional key function

    Returns:
        Index the item was inserted at
    """
    k = key or _identity
    index = equal_range(items, k(item), key).upper
    items.insert(index, item)
    return index


def replace_sorted(
    items: MutableSequence[T],
    item: T,
    key: Callable[[T], Any] | None = None,
) -> bool:
    """Overwrite the last item equal to item, or insert it in order.

    Args:
        items: Sequence sorted ascending by ``key``
        item: Replacement or new item
        key: Optional key function

    Returns:
        True if an existing item was replaced, False if item was inserted
    """
    k = key or _identity
    found, _, upper = equal_range(items, k(item), key)
    if found:
        items[upper - 1] = item
    else:
        items.insert(upper, item)
    return found
