"""Binary search over sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return an index holding ``target`` in sorted ``items``, or None if absent."""
    left, right = 0, len(items) - 1
    while left <= right:
        middle = left + (right - left) // 2
        if items[middle] == target:
            return middle
        if items[middle] < target:
            left = middle + 1
        else:
            right = middle - 1
    return None


def binary_search_recursive(items: Sequence[Any], target: Any) -> int | None:
    """Recursive binary search; same contract as :func:`binary_search`."""

    def search(left: int, right: int) -> int | None:
        if left > right:
            return None
        middle = left + (right - left) // 2
        if items[middle] == target:
            return middle
        if items[middle] > target:
            return search(left, middle - 1)
        return search(middle + 1, right)

    return search(0, len(items) - 1)