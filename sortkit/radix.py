"""Least-significant-digit radix sorts for integer sequences."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate

_BASE = 10


def _digit(value: int, exp: int) -> int:
    return (value // exp) % _BASE


def _require_non_negative(items: list[int]) -> None:
    if items and min(items) < 0:
        raise ValueError("radix sort requires non-negative integers")


def counting_digit_sort(values: Iterable[int], exp: int) -> list[int]:
    """Stably sort non-negative integers by the decimal digit selected by ``exp``."""
    if exp <= 0:
        raise ValueError("exp must be positive")
    items = list(values)
    _require_non_negative(items)
    counts = [0] * _BASE
    for value in items:
        counts[_digit(value, exp)] += 1
    ends = list(accumulate(counts))
    output = [0] * len(items)
    for value in reversed(items):
        digit = _digit(value, exp)
        ends[digit] -= 1
        output[ends[digit]] = value
    return output


def _passes(items: list[int]):
    """Yield the digit weights 1, 10, 100, ... needed to cover the largest value."""
    if not items:
        return
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        yield exp
        exp *= _BASE


def radix_sort(values: Iterable[int]) -> list[int]:
    """Return non-negative integers sorted ascending, one counting pass per digit."""
    items = list(values)
    _require_non_negative(items)
    for exp in _passes(items):
        items = counting_digit_sort(items, exp)
    return items


def _bucket_passes(items: list[int]) -> list[int]:
    for exp in _passes(items):
        buckets: list[list[int]] = [[] for _ in range(_BASE)]
        for value in items:
            buckets[_digit(value, exp)].append(value)
        items = [value for bucket in buckets for value in bucket]
    return items


def radix_sort_with_buckets(values: Iterable[int]) -> list[int]:
    """Return non-negative integers sorted ascending, distributing into digit buckets."""
    items = list(values)
    _require_non_negative(items)
    return _bucket_passes(items)


def radix_sort_with_negatives(values: Iterable[int]) -> list[int]:
    """Return integers sorted ascending; negatives are shifted by the minimum first."""
    items = list(values)
    if not items:
        return []
    offset = max(-min(items), 0)
    shifted = _bucket_passes([value + offset for value in items])
    return [value - offset for value in shifted]