"""Greedy fractional knapsack."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from operator import attrgetter


@dataclass(frozen=True)
class Item:
    """An item that may be taken whole or in part."""

    value: float
    weight: float

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("item weight must be positive")

    @property
    def ratio(self) -> float:
        """Value per unit of weight."""
        return self.value / self.weight


def fractional_knapsack(capacity: float, items: Iterable[Item]) -> float:
    """Best value when items may be split, filling by best value per weight first."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    total = 0.0
    room = capacity
    for item in sorted(items, key=attrgetter("ratio"), reverse=True):
        if item.weight <= room:
            room -= item.weight
            total += item.value
        else:
            total += item.value * (room / item.weight)
            break
    return total