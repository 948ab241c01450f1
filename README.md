# dsakit

Classic data structures and algorithms as plain Python, with no
dependencies beyond the standard library.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.graph` | `Graph` (`add_vertex`, `add_edge`, `neighbours`, `bfs`, `dfs`, `topological_sort`, `format_adjacency`) and `from_edges` |
| `dsakit.scc` | `strongly_connected_components` (Tarjan's algorithm) |
| `dsakit.shortest_path` | `WeightedGraph` (`add_edge`, `dijkstra`, `shortest_distance`), `shortest_route` and its result `Route` |
| `dsakit.spanning` | `kruskal` and `prim` minimum spanning trees |
| `dsakit.search` | `linear_search`, `binary_search`, `ternary_search`, `exponential_search`, `interpolation_search`, `jump_search`, `find_pivot`, `rotated_search` |
| `dsakit.hashing` | `LinearProbingTable`, `DoubleHashingTable`, `find_pair` |
| `dsakit.patterns` | `naive_search` and `rabin_karp_search` |
| `dsakit.sorting` | bucket, counting, heap, iterative heap, merge, shell, bitonic, bubble, cocktail, cycle, radix, insertion and selection sort |
| `dsakit.misc` | `subsequences`, `arrays_equal`, `nearest_valid_point`, `max_meetings` |
| `dsakit.queues` | `Queue` and `EmptyQueueError` |
| `dsakit.stacks` | `Stack`, `TwoStacks`, `EmptyStackError`, `StackOverflowError`, `is_balanced`, `next_greater_elements`, `trapped_water` |
| `dsakit.trees` | `TreeNode`, `inorder`, `preorder`, `postorder`, `level_order`, `left_view`, `right_view`, `top_view`, `tree_diameter` |
| `dsakit.backtracking` | `solve_n_queens`, `count_n_queens`, `knights_tour`, `rat_in_maze`, `solve_sudoku`, `subsets`, `generate_brackets`, `grid_ways`, `permutations`, `permute`, `fill_array` |
| `dsakit.dp` | `coin_change_ways`, `max_subarray_sum`, `fibonacci`, `fibonacci_recursive`, `word_break` |
| `dsakit.vehicle` | `Vehicle` and `Car` dataclasses with `details()` |

Search functions return an index, or -1 when the target is absent. Sorting
functions return a new ascending list and leave their argument unchanged.

## Examples

Breadth-first and depth-first traversal:

```python
from dsakit.graph import from_edges

g = from_edges([(0, 1), (1, 2), (2, 3)], vertices=range(4), undirected=True)
print(g.bfs(1))  # [1, 0, 2, 3]
print(g.dfs(1))  # [1, 0, 2, 3]
print(g.format_adjacency(), end="")
# 0-->1,
# 1-->0,2,
# 2-->1,3,
# 3-->2,
```

Shortest distances with Dijkstra (edges are undirected by default):

```python
from dsakit.shortest_path import WeightedGraph

g = WeightedGraph(3)
g.add_edge(0, 1, 1)
g.add_edge(1, 2, 1)
g.add_edge(0, 2, 4)
print(g.shortest_distance(0, 2))  # 2
print(g.dijkstra(0))              # [0, 1, 2]
```

Searching and sorting:

```python
from dsakit.search import binary_search, rotated_search
from dsakit.sorting import merge_sort

print(binary_search([2, 3, 4, 10, 40], 10))             # 3
print(rotated_search([5, 6, 7, 8, 9, 10, 1, 2, 3], 3))  # 8
print(merge_sort([23, 1, 21, -3, 45]))                  # [-3, 1, 21, 23, 45]
```

Stacks and queues raise instead of returning sentinel values:

```python
from dsakit.stacks import Stack, EmptyStackError

s = Stack()
s.push(1)
s.pop()
try:
    s.pop()
except EmptyStackError:
    print("empty")
```

Backtracking and dynamic programming:

```python
from dsakit.backtracking import count_n_queens, generate_brackets
from dsakit.dp import coin_change_ways

print(count_n_queens(8))               # 92
print(generate_brackets(2))            # ['(())', '()()']
print(coin_change_ways([1, 2, 3], 4))  # 4
```

## What it does not do

dsakit is a library only: it has no command-line program and prints
nothing. Every function returns its result for the caller to use.