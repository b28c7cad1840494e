"""Binary search over sorted sequences with a three-way comparison."""

from __future__ import annotations

from typing import Any, Callable, Sequence

Compare = Callable[[Any, Any], int]


def _natural(key, item) -> int:
    return (key > item) - (key < item)


def bsearch_index(key, items: Sequence, compare: Compare | None = None) -> int:
    """Find ``key`` in sorted ``items``.

    ``compare(key, item)`` returns a negative, zero or positive number.
    Returns the index of a match, or ``~insertion_point`` when there is none.
    """
    cmp = compare or _natural
    lo, hi = 0, len(items) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        order = cmp(key, items[mid])
        if order == 0:
            return mid
        if order > 0:
            lo = mid + 1
        else:
            hi = mid - 1
    return ~lo


def bsearch(key, items: Sequence, compare: Compare | None = None):
    """Return the item of sorted ``items`` matching ``key``, or None."""
    index = bsearch_index(key, items, compare)
    return items[index] if index >= 0 else None