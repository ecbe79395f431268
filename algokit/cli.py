"""Command line front end that reads graphs and knapsack items from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence
from typing import TextIO

from algokit.graphs import bfs, dfs
from algokit.greedy import Item, fractional_knapsack

MAX_VERTICES = 100


class _InputError(ValueError):
    """Input that could not be read as expected."""


class _Reader:
    """Reads whitespace-separated integers, prompting when attached to a terminal."""

    def __init__(self, stream: TextIO) -> None:
        self.interactive = stream.isatty()
        self._tokens = self._split(stream)

    @staticmethod
    def _split(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def say(self, message: str) -> None:
        if self.interactive:
            print(message, end="", flush=True)

    def read_int(self, prompt: str = "") -> int:
        if prompt:
            self.say(prompt)
        try:
            token = next(self._tokens)
        except StopIteration:
            raise _InputError("unexpected end of input") from None
        try:
            return int(token)
        except ValueError:
            raise _InputError(f"expected an integer, got {token!r}") from None


def _read_graph(reader: _Reader) -> tuple[list[list[int]], int]:
    size = reader.read_int("Enter number of vertices: ")
    if not 0 < size <= MAX_VERTICES:
        raise _InputError(f"number of vertices must be between 1 and {MAX_VERTICES}")
    reader.say("Enter adjacency matrix:\n")
    matrix = [[reader.read_int() for _ in range(size)] for _ in range(size)]
    start = reader.read_int(f"Enter starting vertex (0 to {size - 1}): ")
    return matrix, start


def _traversal(label: str, search: Callable[[list[list[int]], int], list[int]]):
    def run(reader: _Reader) -> None:
        matrix, start = _read_graph(reader)
        order = search(matrix, start)
        print(f"{label} traversal: " + " ".join(map(str, order)))

    return run


def _run_knapsack(reader: _Reader) -> None:
    count = reader.read_int("Enter the number of items: ")
    if count < 0:
        raise _InputError("number of items must not be negative")
    capacity = reader.read_int("Enter the capacity of the knapsack: ")
    items = []
    for number in range(1, count + 1):
        value = reader.read_int(f"Enter value and weight for item {number}: ")
        weight = reader.read_int()
        items.append(Item(value, weight))
    best = fractional_knapsack(capacity, items)
    print(f"Maximum value in the knapsack = {best:.2f}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algokit",
        description="Run a classic algorithm on input read from standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser(
        "bfs", help="breadth-first traversal of an adjacency matrix"
    ).set_defaults(handler=_traversal("BFS", bfs))
    commands.add_parser(
        "dfs", help="depth-first traversal of an adjacency matrix"
    ).set_defaults(handler=_traversal("DFS", dfs))
    commands.add_parser(
        "knapsack", help="fractional knapsack over value/weight pairs"
    ).set_defaults(handler=_run_knapsack)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    reader = _Reader(sys.stdin)
    try:
        args.handler(reader)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())