# algodrills

Classic algorithm and data-structure routines, each a small function or
class that takes plain Python values (lists, strings, tuples, nested lists)
and returns plain Python values. Standard library only.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `algodrills.tree`

- `Node(val, left=None, right=None)`: a binary tree node.
- `build_tree(values)`: builds a tree from level-order values, `None` marking
  a missing child.
- `postorder`, `level_order`: values in left-right-root or breadth-first order.
- `height` (number of levels), `diameter` (edges on the longest path),
  `count_nodes`.
- `check_height` (height, or `-1` when unbalanced) and `is_balanced`.
- `right_side_view`, `vertical_order_traversal`, `diagonal_traversal`.
- `search_bst(root, val)`: the node holding `val`, or `None`.
- `greater_sum(root)`: adds to each BST value the sum of all greater values,
  in place.

### `algodrills.sorting`

`bubble_sort`, `selection_sort`, `insertion_sort`, `merge_sort`, `quick_sort`,
`counting_sort` (non-negative integers only) and `bucket_sort` (values in
`[0, 1)` only). Each returns a new list; invalid input raises `ValueError`.

### `algodrills.heaps`

- `MinHeap`: `push`, `pop`, `top`, `len()`, and `items()` for the array order.
  `pop` and `top` on an empty heap raise `IndexError`.
- `heapify(values)`: values rearranged into min-heap order.
- `heap_sort`, `kth_smallest(values, k)`, `sort_k_sorted(values, k)`,
  `top_k_frequent(values, k)` (most frequent first, ties to the larger value).

### `algodrills.recursion`

`gcd`, `lcm`, `tokenize`, `alternate_sum`, `is_armstrong`,
`is_palindrome_number`, `count_paths`, `contains`, `find_max`, `frog_jump`,
`multiples`, `keypad_combinations`, `all_subsets`, `increasing_sequence`,
`remove_char`, `subsequences`, `subset_sums`, `sum_of_digits`.

### `algodrills.arrays`

- `max_subarray_sum(values)`: Kadane's algorithm; the empty subarray counts,
  so the result is never negative.
- `spiral_order(matrix)`: clockwise spiral from the top-left.

### `algodrills.backtracking`

`combination_sum`, `combination_sum2`, `knights_tours` (a generator of
completed boards), `solve_n_queens`, `permutations`, `unique_permutations`,
`rat_in_maze` (counts simple paths through a square 0/1 maze) and
`solve_sudoku` (fills a 9 x 9 board of `'.'` and digit strings in place and
returns whether it succeeded).

### `algodrills.graphs`

- `DisjointSet(n)` over `0..n`: `find`, `union` (returns whether two sets were
  merged), `summary` (smallest element, largest element, size).
- `Graph(n)`: `add_edge`, `connected_components`, `topological_order`
  (Kahn's order), `all_paths(start, end)`.
- `WeightedGraph(n)`: `add_edge`, `prims(source)` (spanning tree weight of the
  source's component), `dijkstra(source)` (distances, `math.inf` when
  unreachable; negative weights raise `ValueError`).
- `Edge(source, dest, weight)` and `kruskals(edges, n)`.
- `Trie`: `insert`, `word in trie`, `starts_with(prefix)`.

### `algodrills.dp`

`dice_combinations`, `edit_distance` and `edit_distance_bottom_up`,
`house_robber` and `house_robber_bottom_up`, `coin_heads_probability`,
`knight_probability`, `reduce_number` and `reduce_number_bottom_up`,
`survival_probabilities`, `tourist`, `longest_common_subsequence` and
`longest_common_subsequence_bottom_up`, `max_grouping_score`,
`count_matchings` and `tsp`.

### `algodrills.cses_basics`

`creating_strings`, `distinct_numbers`, `factory_machines`,
`minimizing_coins`, `palindrome_reorder`, `beautiful_permutation`,
`longest_repetition`, `string_reorder`, `two_sets`, `weird_algorithm`,
`min_operations`, `halloumi_boxes`, `is_clean_palindrome`. Functions that
have no answer for an input return `None` (or `-1` for `minimizing_coins`).

### `algodrills.cses_graphs`

`building_roads`, `counting_rooms`, `labyrinth` (a string of `D`, `U`, `R`,
`L` moves, or `None`), `message_route`, `subordinates`, `tree_levels`,
`tree_diameter`. Nodes are numbered from 1.

## Example

```python
from algodrills.arrays import max_subarray_sum
from algodrills.backtracking import solve_n_queens
from algodrills.graphs import Graph

print(max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4]))  # 6
print(len(solve_n_queens(4)))  # 2

graph = Graph(4)
graph.add_edge(0, 1, True)
graph.add_edge(2, 3, True)
print(graph.connected_components())  # 2
```

## What this package does not do

It is a library only. It installs no command-line programs and does not read
problem input from standard input or files or print answers; call the
functions with Python values and use what they return.