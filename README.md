# dsakit

Small, readable implementations of classic data structures and algorithms:
an array with a fixed capacity, linear and binary search, seven sorting
algorithms, a max-heap, graphs with breadth- and depth-first traversal and
transitive closure, stacks and queues. No third-party dependencies.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.arrays`

- `BoundedArray(capacity, values=())`: a sequence that never holds more than
  `capacity` values. `append`, `insert(index, value)`, `delete(index)`
  (returns the removed value) and `update(index, value)`. Growing past the
  capacity raises `CapacityError`; a bad index raises `IndexError`. Supports
  `len()`, iteration and indexing.
- `linear_search(items, target)`: index of the first equal item, or `-1`.
- `binary_search(items, target)`: index of `target` in a sorted sequence,
  or `-1`.

### `dsakit.sorting`

`bubble_sort`, `insertion_sort`, `selection_sort`, `quick_sort`,
`merge_sort`, `heap_sort` and `count_sort`. Each takes an iterable and
returns a new ascending list; the input is left untouched. `count_sort`
accepts only non-negative integers and raises `ValueError` otherwise.

### `dsakit.heap`

`MaxHeap(values=())`: a binary max-heap in a flat list. `push(value)`,
`remove(value)` (removes the first stored occurrence, `ValueError` if
absent), `peek()` (largest value, `IndexError` if empty) and `to_list()`
(values in storage order). Supports `len()` and iteration.

### `dsakit.graph`

- `AdjacencyListGraph(vertex_count, directed=False)`: `add_edge(src, dest)`,
  `neighbors(vertex)` (most recently added first), `bfs(start)` and
  `format()`.
- `AdjacencyMatrixGraph(vertex_count)`: an undirected 0/1 matrix with
  `add_edge(i, j)`, `has_edge(i, j)`, `rows()`, `bfs(start)`, `dfs(start)`
  and `format()`.
- `bfs_matrix(matrix, start)`, `dfs_matrix(matrix, start)`: traversal order
  over a plain square 0/1 matrix.
- `transitive_closure(matrix)`: the reachability matrix (Warshall's
  algorithm).

Vertices out of range raise `IndexError`; a non-square matrix raises
`ValueError`.

### `dsakit.stack`

- `ArrayStack(capacity)`: `push`, `pop`, `peek(position)` (1 is the top),
  `top()`, `bottom()`, `is_empty()`, `is_full()`.
- `LinkedStack(values=())`: an unbounded stack; the last initial value ends
  up on top. `push`, `pop`, `is_empty()`.

Pushing onto a full stack raises `StackOverflow`; taking from an empty one
raises `StackUnderflow`. Iteration yields values from top to bottom.

### `dsakit.queues`

- `ArrayQueue(capacity)`: a bounded linear queue whose slots are used once;
  freed slots come back only after the queue has been emptied completely,
  so it can report full while holding fewer than `capacity` values.
- `CircularQueue(capacity)`: a bounded ring queue that reuses freed slots.
- `LinkedQueue(values=())`: an unbounded queue.

All have `enqueue`, `dequeue`, `is_empty()`, `len()` and front-to-rear
iteration; the bounded ones also have `is_full()`. A full queue raises
`QueueFull`, an empty one `QueueEmpty`.

## Example

```python
from dsakit.sorting import quick_sort
from dsakit.arrays import binary_search
from dsakit.graph import AdjacencyMatrixGraph

values = quick_sort([2, 4, 3, 9, 1, 4, 8, 7, 5, 6])
print(values)                       # [1, 2, 3, 4, 4, 5, 6, 7, 8, 9]
print(binary_search(values, 9))     # 9

graph = AdjacencyMatrixGraph(4)
graph.add_edge(0, 1)
graph.add_edge(0, 2)
graph.add_edge(2, 3)
print(graph.bfs(0))                 # [0, 1, 2, 3]
print(graph.format())
```

## Command line

`dsakit-graph` prints a depth-first traversal of a built-in four-vertex
sample graph. Give the starting vertex (0 to 3) as an argument, or leave it
out to be asked for it:

```
dsakit-graph 0
dsakit-graph --help
```

## What it does not do

The package is a library. Apart from `dsakit-graph`, there are no commands:
the arrays, sorts, heap, stacks and queues are used from Python code only.
Nothing is stored to disk, and graphs cannot be read from files.