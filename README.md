# dsalgo

A collection of classic data structures and algorithms written in plain
Python. Each module also comes with a small interactive menu for trying
it out. The package needs nothing beyond the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `dsalgo.binary_search` | Recursive and iterative binary search, a step-by-step trace (`binary_search_steps`, `render_step`), sorted array generation |
| `dsalgo.max_heap` | A bounded list-backed `MaxHeap` with `verify` and a level-by-level `render` |
| `dsalgo.chaining_hash_table` | `ChainingHashTable`: djb2 hashing, separate chaining, doubling at load factor 0.75, `collision_stats` |
| `dsalgo.open_addressing` | `OpenAddressingHashTable` with linear, quadratic and double-hash probing (`ProbeType`) and tombstones |
| `dsalgo.adjacency_list` | Weighted `AdjacencyListGraph` with directed or undirected edges |
| `dsalgo.graph_dfs` | `UndirectedGraph`, recursive and iterative depth-first search, `connected_components` |
| `dsalgo.graph_bfs` | `bfs` returning a `BfsResult` with visit order, levels and shortest paths |
| `dsalgo.kruskal` | `Edge`, `DisjointSet` and `kruskal_mst` |
| `dsalgo.prim` | `PrimGraph` and `prim_mst` over an adjacency matrix |
| `dsalgo.dijkstra` | `DirectedGraph` and `dijkstra` single-source shortest paths |
| `dsalgo.topological_sort` | `Dag` with `topological_sort_dfs` and `topological_sort_kahn` (raises `CycleError`) |
| `dsalgo.string_search` | `brute_force_search`, the shared `SearchResult` type and `format_matches` |
| `dsalgo.kmp` | `kmp_search` and `failure_function` |
| `dsalgo.boyer_moore` | `boyer_moore_search` with bad-character and good-suffix tables |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from dsalgo.binary_search import binary_search_iterative
from dsalgo.max_heap import MaxHeap
from dsalgo.chaining_hash_table import ChainingHashTable
from dsalgo.kmp import failure_function, kmp_search

binary_search_iterative([1, 3, 5, 7, 9], 7)   # 3
binary_search_iterative([1, 3, 5, 7, 9], 4)   # None

heap = MaxHeap(100)
for value in (5, 12, 3, 8):
    heap.push(value)
heap.pop()                                    # 12

table = ChainingHashTable(7)
table["apple"] = 3
table["apple"]                                # 3
"pear" in table                               # False

failure_function("ABCDABD")                   # [0, 0, 0, 0, 1, 2, 0]
result = kmp_search("abababa", "aba")
result.positions                              # (0, 2, 4)
```

Errors are raised rather than returned: a full heap raises `HeapFullError`,
an empty one `HeapEmptyError`, a missing hash table key `KeyError`, and a
vertex outside a graph `VertexError`.

Graph algorithms take their graph object and a start vertex:

```python
from dsalgo.graph_dfs import UndirectedGraph, connected_components
from dsalgo.graph_bfs import bfs

graph = UndirectedGraph(5)
graph.add_edge(0, 1)
graph.add_edge(1, 2)
graph.add_edge(3, 4)

connected_components(graph)   # [[0, 1, 2], [3, 4]]
bfs(graph, 0).path_to(2)      # [0, 1, 2]
```

Every string search returns a `SearchResult` with the match positions and
the number of character comparisons; passing `verbose=True` also fills its
`steps` with a line-by-line trace of the search.

## Interactive menus

Every module also ships a menu-driven program that reads choices from
standard input:

```
dsalgo-binary-search
dsalgo-max-heap
dsalgo-chaining-hash
dsalgo-open-addressing
dsalgo-adjacency-list
dsalgo-dfs
dsalgo-bfs
dsalgo-kruskal
dsalgo-prim
dsalgo-dijkstra
dsalgo-topological-sort
dsalgo-brute-force
dsalgo-kmp
dsalgo-boyer-moore
```

The string-search programs can print every comparison they make, which
makes it easy to compare how many steps brute force, KMP and Boyer–Moore
need on the same text and pattern.

## What it does not do

The string matching covers brute force, KMP and Boyer–Moore only; there is
no hash-based (rolling hash) search. The menus keep everything in memory
and nothing is saved between runs.