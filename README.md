# algokit

A small collection of well-known algorithms written in plain Python with no
third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module              | Contents                                                                                     |
|---------------------|----------------------------------------------------------------------------------------------|
| `algokit.sorting`   | `selection_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `heap_sort`, `counting_sort`, `radix_sort`, `bucket_sort` |
| `algokit.searching` | `binary_search`, `binary_search_recursive`                                                   |
| `algokit.strings`   | `compute_lps`, `kmp_search`, `rabin_karp_search`                                             |
| `algokit.graphs`    | `Edge`, `bfs`, `dfs`, `dijkstra`, `kruskal`, `prim`                                          |
| `algokit.dynamic`   | `knapsack`, `lcs_length`, `lcs`, `matrix_chain_cost`                                         |
| `algokit.greedy`    | `Item`, `fractional_knapsack`                                                                |
| `algokit.cli`       | `main`, the entry point of the `algokit` command                                             |

## Sorting

Every sort takes any iterable and returns a new list; the input is left
untouched.

```python
from algokit.sorting import merge_sort, counting_sort, bucket_sort

merge_sort([38, 27, 43, 3, 9, 82, 10])        # [3, 9, 10, 27, 38, 43, 82]
counting_sort([4, 2, 2, 8, 3, 3, 1])          # [1, 2, 2, 3, 3, 4, 8]
bucket_sort([0.42, 0.32, 0.23, 0.52])         # [0.23, 0.32, 0.42, 0.52]
```

`counting_sort` and `radix_sort` accept only non-negative integers, and
`bucket_sort` only numbers in the range `[0, 1)`; anything else raises
`ValueError`.

## Searching

Both binary searches expect a sequence sorted in ascending order and return an
index holding the target, or `None` when it is absent.

```python
from algokit.searching import binary_search

binary_search([1, 3, 5, 7, 9], 7)   # 3
binary_search([1, 3, 5, 7, 9], 4)   # None
```

## String matching

`kmp_search` and `rabin_karp_search` return a list of the start indices of
every occurrence of the pattern, overlapping ones included. An empty pattern
raises `ValueError`. `rabin_karp_search` takes an optional positive `modulus`
for its rolling hash (default 101).

```python
from algokit.strings import compute_lps, kmp_search, rabin_karp_search

kmp_search("ABABDABACDABABCABAB", "ABABCABAB")   # [10]
rabin_karp_search("ABCCDDAEFG", "CDD")           # [3]
compute_lps("ABABCABAB")                         # [0, 0, 1, 2, 0, 1, 2, 3, 4]
```

## Graphs

`bfs`, `dfs`, `dijkstra` and `prim` take a square adjacency matrix where
`graph[u][v]` is the weight of the edge from `u` to `v` and 0 means no edge.
The traversals follow only entries equal to 1. `dijkstra` returns the distance
to every vertex, with `math.inf` for those that cannot be reached. `prim`
raises `ValueError` if the graph is not connected.

```python
from algokit.graphs import Edge, dijkstra, kruskal, prim

graph = [
    [0, 10, 0, 0, 5],
    [0, 0, 1, 0, 2],
    [0, 0, 0, 4, 0],
    [7, 0, 6, 0, 0],
    [0, 3, 9, 2, 0],
]
dijkstra(graph, 0)   # [0, 8, 9, 7, 5]

edges = [Edge(0, 1, 10), Edge(0, 2, 6), Edge(0, 3, 5),
         Edge(1, 3, 15), Edge(2, 3, 4), Edge(1, 2, 25), Edge(3, 4, 2)]
kruskal(5, edges)
# [Edge(3, 4, 2), Edge(2, 3, 4), Edge(0, 3, 5), Edge(0, 1, 10)]
```

`kruskal` returns the chosen edges in the order they were taken; `prim`
returns one `Edge(parent, v, weight)` for each vertex `v` other than 0, by
increasing `v`.

## Dynamic programming

```python
from algokit.dynamic import knapsack, lcs, lcs_length, matrix_chain_cost

knapsack([10, 20, 30], [60, 100, 120], 50)   # 220
lcs_length("ABCBDAB", "BDCABA")              # 4
lcs("ABCBDAB", "BDCABA")                     # "BCBA"
matrix_chain_cost([5, 4, 6, 2, 7])           # 158
```

In `matrix_chain_cost`, matrix `k` has shape
`dimensions[k] x dimensions[k + 1]`.

## Greedy

```python
from algokit.greedy import Item, fractional_knapsack

fractional_knapsack(50, [Item(60, 10), Item(100, 20), Item(120, 30)])   # 240.0
```

Items are taken by best value per unit of weight, the last one in part if it
does not fit whole. An item weight that is not positive raises `ValueError`.

## Command line

The `algokit` command reads whitespace-separated integers from standard input
and has three subcommands:

- `algokit bfs` and `algokit dfs`: the number of vertices (1 to 100), the
  adjacency matrix row by row, then the starting vertex. Prints the visiting
  order.
- `algokit knapsack`: the number of items, the capacity, then a value and a
  weight for each item. Prints the best fractional-knapsack value to two
  decimals.

```
$ printf '3\n0 1 0\n1 0 1\n0 1 0\n0\n' | algokit bfs
BFS traversal: 0 1 2
$ printf '3 50\n60 10\n100 20\n120 30\n' | algokit knapsack
Maximum value in the knapsack = 240.00
```

When standard input is a terminal, the command prompts for each value. Input
it cannot read is reported on standard error and the exit status is 1.

## Limits

Only the graph traversals and the fractional knapsack are reachable from the
command line; the sorts, searches, string matchers, shortest paths, spanning
trees and dynamic-programming functions are available only as library calls.