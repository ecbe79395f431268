"""Dynamic-programming classics: 0/1 knapsack, longest common subsequence, matrix chains."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum


def knapsack(weights: Iterable[int], values: Iterable[int], capacity: int) -> int:
    """Best total value of items whose weights sum to at most ``capacity``."""
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight <= 0 for weight in weights):
        raise ValueError("weights must be positive")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


class _Step(Enum):
    DIAGONAL = "diagonal"
    UP = "up"
    LEFT = "left"


def _lcs_tables(first: str, second: str) -> tuple[list[list[int]], list[list[_Step | None]]]:
    lengths = [[0] * (len(second) + 1) for _ in range(len(first) + 1)]
    steps: list[list[_Step | None]] = [[None] * (len(second) + 1) for _ in range(len(first) + 1)]
    for i, a in enumerate(first, start=1):
        for j, b in enumerate(second, start=1):
            if a == b:
                lengths[i][j] = lengths[i - 1][j - 1] + 1
                steps[i][j] = _Step.DIAGONAL
            elif lengths[i - 1][j] >= lengths[i][j - 1]:
                lengths[i][j] = lengths[i - 1][j]
                steps[i][j] = _Step.UP
            else:
                lengths[i][j] = lengths[i][j - 1]
                steps[i][j] = _Step.LEFT
    return lengths, steps


def lcs_length(first: str, second: str) -> int:
    """Length of the longest common subsequence of two strings."""
    lengths, _ = _lcs_tables(first, second)
    return lengths[len(first)][len(second)]


def lcs(first: str, second: str) -> str:
    """One longest common subsequence; ties prefer dropping from ``first``."""
    _, steps = _lcs_tables(first, second)
    i, j = len(first), len(second)
    reversed_chars: list[str] = []
    while i and j:
        step = steps[i][j]
        if step is _Step.DIAGONAL:
            reversed_chars.append(first[i - 1])
            i -= 1
            j -= 1
        elif step is _Step.UP:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(reversed_chars))


def matrix_chain_cost(dimensions: Sequence[int]) -> int:
    """Fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``k`` has shape ``dimensions[k] x dimensions[k + 1]``.
    """
    dims = list(dimensions)
    if len(dims) < 2:
        raise ValueError("need at least two dimensions")
    if any(size <= 0 for size in dims):
        raise ValueError("dimensions must be positive")
    count = len(dims) - 1
    cost = [[0] * count for _ in range(count)]
    for span in range(1, count):
        for i in range(count - span):
            j = i + span
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i] * dims[k + 1] * dims[j + 1]
                for k in range(i, j)
            )
    return cost[0][count - 1]