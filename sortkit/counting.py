"""Counting sorts for integer sequences."""

from __future__ import annotations

from collections.abc import Iterable


def _expand(counts: list[int], offset: int) -> list[int]:
    return [value + offset for value, count in enumerate(counts) for _ in range(count)]


def counting_sort(values: Iterable[int]) -> list[int]:
    """Return the non-negative integers in ``values`` in ascending order.

    Raises ValueError if any value is negative.
    """
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting_sort requires non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return _expand(counts, 0)


def counting_sort_with_negatives(values: Iterable[int]) -> list[int]:
    """Return the integers in ``values`` in ascending order; negatives allowed."""
    items = list(values)
    if not items:
        return []
    low = min(items)
    counts = [0] * (max(items) - low + 1)
    for value in items:
        counts[value - low] += 1
    return _expand(counts, low)