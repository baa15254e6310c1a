# algokit

A small library of classic algorithms in plain Python with no third-party
dependencies: dynamic programming over strings, subsets and knapsacks,
graph representations and traversals, grid searches, disjoint sets,
minimum spanning trees and shortest paths.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.lcs` | `lcs_length`, `lcs_string`, `longest_common_substring`, `longest_palindromic_subsequence`, `shortest_common_supersequence` |
| `algokit.subset_sum` | `subset_sum_exists`, `subset_count_table`, `count_subsets` |
| `algokit.unbounded` | `unbounded_knapsack`, `rod_cutting`, `coin_change_table`, `coin_change_ways`, `min_coins` |
| `algokit.knapsack` | `knapsack`, `frog_min_cost`, `fibonacci`, `can_form_expression` |
| `algokit.sorting` | `merge_sort` |
| `algokit.puzzles` | `split_increasing`, `min_leaf_level` |
| `algokit.heap` | `PairPriorityQueue` |
| `algokit.graph` | `adjacency_list`, `weighted_adjacency_list`, `adjacency_matrix`, `bfs_order`, `bfs_tree`, `dfs_order`, `count_components`, `depths_and_heights`, `shortest_path` |
| `algokit.grid` | `count_rooms`, `labyrinth_path`, `knight_distance` |
| `algokit.problems` | `guards_cover`, `building_roads`, `message_route` |
| `algokit.dsu` | `DisjointSet`, `UnionStrategy`, `find_cycle_edges` |
| `algokit.mst` | `kruskal`, `prim` |
| `algokit.shortest_path` | `bellman_ford`, `dijkstra`, `floyd_warshall` |

## Conventions

- Graph nodes are numbered from 1 to `n`. Edges are tuples `(u, v)` or
  `(u, v, weight)`; a node outside `1..n` raises `ValueError`.
- Adjacency lists are dicts mapping each node to its neighbours, in the
  order the edges were given. Adjacency and distance matrices are lists of
  rows, where row and column `i - 1` stand for node `i`.
- "No answer" is `None`: `min_coins` when the amount cannot be made,
  `shortest_path` and `message_route` when the target is unreachable,
  `labyrinth_path` when `'B'` cannot be reached, `split_increasing` when no
  valid split exists, and unreachable nodes in `bellman_ford`, `dijkstra`
  and `floyd_warshall`.
- Invalid inputs (negative capacities or targets, negative numbers in
  subset sums, non-positive coins or weights in the unbounded family,
  mismatched lengths) raise `ValueError`.

## Examples

```python
from algokit.lcs import lcs_length, shortest_common_supersequence
from algokit.knapsack import knapsack
from algokit.unbounded import coin_change_ways, min_coins
from algokit.graph import adjacency_list, shortest_path
from algokit.grid import knight_distance, labyrinth_path
from algokit.mst import kruskal
from algokit.dsu import DisjointSet, UnionStrategy

lcs_length("abcdgh", "abedfhr")              # 4
shortest_common_supersequence("abac", "cab")  # a shortest string holding both

knapsack([60, 100, 120], [10, 20, 30], 50)    # 220
coin_change_ways([1, 2, 5], 5)                # 4
min_coins([2], 3)                             # None

adj = adjacency_list(5, [(1, 2), (2, 3), (3, 5), (1, 4)])
shortest_path(adj, 1, 5)                      # [1, 2, 3, 5]

labyrinth_path(["A.B"])                       # "RR"
knight_distance("a1", "b3")                   # 1

kruskal(4, [(1, 2, 1), (2, 3, 4), (1, 3, 3), (3, 4, 2)])
# [(1, 2, 1), (3, 4, 2), (1, 3, 3)]

sets = DisjointSet(6, UnionStrategy.BY_RANK)
sets.union(1, 2)                              # True: they were apart
sets.find(2)                                  # 1
```

`DisjointSet` links sets plainly, by size or by rank, as chosen with
`UnionStrategy.PLAIN`, `UnionStrategy.BY_SIZE` or `UnionStrategy.BY_RANK`
(the default). `find_cycle_edges(n, edges)` returns the edges whose ends
were already connected by earlier edges.

Priority queue of pairs ordered by the first value (largest first), with
ties broken by the smaller second value:

```python
from algokit.heap import PairPriorityQueue

pq = PairPriorityQueue()
pq.push(3, 5)
pq.push(3, 1)
pq.peek()       # (3, 1)
pq.pop()        # (3, 1)
len(pq)         # 1
```

`pop` and `peek` on an empty queue raise `IndexError`.

## What it does not do

algokit is a library only. It has no command-line program, reads no input
files or standard input, and prints nothing: every function takes Python
values and returns its result. Turning problem input text into those values,
and formatting the answers, is left to the caller.