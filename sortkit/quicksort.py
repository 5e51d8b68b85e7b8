"""Quicksort variants: end pivot, median of three and randomized pivot."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, MutableSequence
from typing import Any, Protocol


class _RandInt(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def _swap(items: MutableSequence[Any], first: int, second: int) -> None:
    items[first], items[second] = items[second], items[first]


def lomuto_partition(values: MutableSequence[Any], left: int, right: int) -> int:
    """Partition ``values[left:right + 1]`` in place around its last element.

    Items not greater than the pivot end up before it and larger items after
    it. Returns the pivot's final index.
    """
    if not 0 <= left <= right < len(values):
        raise IndexError(f"invalid partition range [{left}, {right}]")
    pivot = values[right]
    boundary = left
    for index in range(left, right):
        if values[index] <= pivot:
            _swap(values, boundary, index)
            boundary += 1
    _swap(values, boundary, right)
    return boundary


def _sort_with(
    items: list[Any], partition: Callable[[list[Any], int, int], int]
) -> list[Any]:
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left < right:
            pivot_index = partition(items, left, right)
            pending.append((pivot_index + 1, right))
            pending.append((left, pivot_index - 1))
    return items


def quicksort(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted ascending, pivoting on the last element of each range."""
    return _sort_with(list(values), lomuto_partition)


def randomized_quicksort(values: Iterable[Any], rng: _RandInt | None = None) -> list[Any]:
    """Return the values sorted ascending, pivoting on a randomly chosen element.

    ``rng`` is any object with a ``randint`` method; the ``random`` module is
    used when it is omitted.
    """
    source = rng if rng is not None else random

    def partition(items: list[Any], left: int, right: int) -> int:
        _swap(items, right, source.randint(left, right))
        return lomuto_partition(items, left, right)

    return _sort_with(list(values), partition)


def _median_of_three(items: list[Any], left: int, right: int) -> Any:
    """Order the ends and centre of a range, park the median at ``right - 1``."""
    center = (left + right) // 2
    if items[left] > items[center]:
        _swap(items, left, center)
    if items[left] > items[right]:
        _swap(items, left, right)
    if items[center] > items[right]:
        _swap(items, center, right)
    _swap(items, center, right - 1)
    return items[right - 1]


def _median_partition(items: list[Any], left: int, right: int) -> int:
    pivot = _median_of_three(items, left, right)
    low, high = left + 1, right - 2
    while True:
        while items[low] < pivot:
            low += 1
        while items[high] > pivot:
            high -= 1
        if low >= high:
            break
        _swap(items, low, high)
        if items[low] == items[high]:
            # Both equal the pivot: step past them so the scan makes progress.
            low += 1
            high -= 1
    _swap(items, low, right - 1)
    return low


def median_of_three_quicksort(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted ascending, choosing pivots by median of three."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        if right - left >= 2:
            pivot_index = _median_partition(items, left, right)
            pending.append((pivot_index + 1, right))
            pending.append((left, pivot_index - 1))
        elif items[left] > items[right]:
            _swap(items, left, right)
    return items