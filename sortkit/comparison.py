"""Comparison-based sorts, bucket sort and inversion counting."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted ascending by straight insertion."""
    result: list[Any] = []
    for item in values:
        position = len(result)
        while position > 0 and result[position - 1] > item:
            position -= 1
        result.insert(position, item)
    return result


def _merge(left: Sequence[Any], right: Sequence[Any]) -> tuple[list[Any], int]:
    """Merge two sorted runs, counting pairs where a right item precedes left items."""
    merged: list[Any] = []
    inversions = 0
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
            inversions += len(left) - li
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged, inversions


def _sort_and_count(items: list[Any]) -> tuple[list[Any], int]:
    if len(items) <= 1:
        return list(items), 0
    middle = (len(items) + 1) // 2
    left, left_count = _sort_and_count(items[:middle])
    right, right_count = _sort_and_count(items[middle:])
    merged, split_count = _merge(left, right)
    return merged, left_count + right_count + split_count


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted ascending by a stable top-down merge sort."""
    return _sort_and_count(list(values))[0]


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Return values in [0, 1) sorted ascending, using one bucket per element.

    Raises ValueError for a value outside [0, 1).
    """
    items = list(values)
    count = len(items)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket_sort requires values in [0, 1), got {value!r}")
        buckets[int(count * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def count_inversions(values: Iterable[Any]) -> tuple[int, list[Any]]:
    """Return the number of inversions in ``values`` and the values sorted."""
    ordered, inversions = _sort_and_count(list(values))
    return inversions, ordered