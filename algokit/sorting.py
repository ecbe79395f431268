"""Sorting algorithms that return a new sorted list and leave the input untouched."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

BUCKET_COUNT = 10
RADIX = 10


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping the smallest remaining element into place."""
    items = list(values)
    for position in range(len(items) - 1):
        smallest = min(range(position, len(items)), key=items.__getitem__)
        items[position], items[smallest] = items[smallest], items[position]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element behind the last one not greater than it."""
    items: list[Any] = []
    for value in values:
        position = len(items)
        while position > 0 and items[position - 1] > value:
            position -= 1
        items.insert(position, value)
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort; the left half takes the middle element."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quicksort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((pivot_index + 1, high))
            pending.append((low, pivot_index - 1))
    return items


def _sift_down(items: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with a binary max-heap built in place."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _require_non_negative_ints(items: list[Any], algorithm: str) -> None:
    for value in items:
        if not isinstance(value, int) or value < 0:
            raise ValueError(f"{algorithm} needs non-negative integers, got {value!r}")


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences of each value."""
    items = list(values)
    if not items:
        return []
    _require_non_negative_ints(items, "counting sort")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers in base 10."""
    items = list(values)
    if not items:
        return []
    _require_non_negative_ints(items, "radix sort")
    largest = max(items)
    place = 1
    while largest // place > 0:
        digits: list[list[int]] = [[] for _ in range(RADIX)]
        for value in items:
            digits[(value // place) % RADIX].append(value)
        items = [value for bucket in digits for value in bucket]
        place *= RADIX
    return items


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in [0, 1) by spreading them over ten buckets."""
    items = list(values)
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
    buckets: list[list[float]] = [[] for _ in range(BUCKET_COUNT)]
    for value in items:
        buckets[int(value * BUCKET_COUNT)].append(value)
    return [value for bucket in buckets for value in selection_sort(bucket)]