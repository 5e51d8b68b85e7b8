"""Median-of-three quicksort that records every step as text."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def render_array(values: Sequence[Any], left: int, right: int) -> str:
    """Render ``values`` with items outside ``[left, right]`` shown as dots."""
    cells = [str(value) if left <= index <= right else "." for index, value in enumerate(values)]
    return f"[ {' '.join(cells)} ]"


class _Tracer:
    def __init__(self, items: list[Any]) -> None:
        self.items = items
        self.lines: list[str] = []

    def emit(self, line: str) -> None:
        self.lines.append(line)

    def show(self, left: int, right: int) -> None:
        self.emit(render_array(self.items, left, right))

    def swap(self, first: int, second: int) -> None:
        items = self.items
        self.emit(
            f"  Swap arr[{first}]={items[first]} with arr[{second}]={items[second]}"
        )
        items[first], items[second] = items[second], items[first]
        self.show(0, len(items) - 1)

    def median(self, left: int, right: int) -> Any:
        items = self.items
        center = (left + right) // 2
        self.emit(
            f"Finding median of three: arr[{left}]={items[left]}, "
            f"arr[{center}]={items[center]}, arr[{right}]={items[right]}"
        )
        if items[left] > items[center]:
            self.swap(left, center)
        if items[left] > items[right]:
            self.swap(left, right)
        if items[center] > items[right]:
            self.swap(center, right)
        self.emit(
            f"  After sorting three elements: "
            f"{items[left]} <= {items[center]} <= {items[right]}"
        )
        self.swap(center, right - 1)
        self.emit(f"  Pivot value: {items[right - 1]} at index {right - 1}")
        return items[right - 1]

    def partition(self, left: int, right: int, indent: str) -> int:
        items = self.items
        self.emit(f"{indent}Using median-of-three pivot selection")
        pivot = self.median(left, right)
        low, high = left + 1, right - 2
        self.emit(f"{indent}Beginning partitioning with pivot={pivot}")
        self.emit(f"{indent}Initial i={low}, j={high}")
        while True:
            while items[low] < pivot:
                self.emit(f"{indent}  i moves to {low} (arr[{low}]={items[low]})")
                low += 1
            self.emit(f"{indent}  i stops at {low} (arr[{low}]={items[low]} >= {pivot})")
            while items[high] > pivot:
                self.emit(f"{indent}  j moves to {high} (arr[{high}]={items[high]})")
                high -= 1
            self.emit(f"{indent}  j stops at {high} (arr[{high}]={items[high]} <= {pivot})")
            if low >= high:
                self.emit(f"{indent}  i >= j, partitioning complete")
                break
            self.emit(f"{indent}  i < j, so swap elements:")
            self.swap(low, high)
            if items[low] == items[high]:
                # Both equal the pivot: step past them so the scan makes progress.
                low += 1
                high -= 1
        self.emit(f"{indent}Placing pivot in final position:")
        self.swap(low, right - 1)
        self.emit(f"{indent}Result after partitioning:")
        self.show(left, right)
        self.emit(f"{indent}Elements < pivot are in positions [{left}...{low - 1}]")
        self.emit(f"{indent}Pivot {items[low]} is at position {low}")
        self.emit(f"{indent}Elements > pivot are in positions [{low + 1}...{right}]")
        return low

    def sort(self, left: int, right: int, depth: int = 0) -> None:
        indent = " " * (depth * 2)
        self.emit(f"{indent}Quicksort called on subarray [{left}...{right}]:")
        self.show(left, right)
        if left < right:
            if right - left >= 2:
                pivot_index = self.partition(left, right, indent)
                self.emit(
                    f"{indent}Recursively sorting left partition [{left}...{pivot_index - 1}]"
                )
                self.sort(left, pivot_index - 1, depth + 1)
                self.emit(
                    f"{indent}Recursively sorting right partition [{pivot_index + 1}...{right}]"
                )
                self.sort(pivot_index + 1, right, depth + 1)
            else:
                self.emit(f"{indent}Subarray has <= 2 elements, direct comparison:")
                if self.items[left] > self.items[right]:
                    self.swap(left, right)
                else:
                    self.emit(f"{indent}  No swap needed, already in order")
        else:
            self.emit(f"{indent}Subarray has <= 1 element, nothing to do")
        self.emit(f"{indent}Finished sorting subarray [{left}...{right}]")


def trace_quicksort(values: Iterable[Any]) -> tuple[list[Any], list[str]]:
    """Sort with median-of-three quicksort, returning the result and the trace lines."""
    tracer = _Tracer(list(values))
    tracer.sort(0, len(tracer.items) - 1)
    return tracer.items, tracer.lines