"""Graphs stored as adjacency lists or matrices, with BFS, DFS and closure."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterator, Sequence

Matrix = Sequence[Sequence[int]]

_DEMO_GRAPH = (
    (0, 1, 1, 0),
    (1, 0, 1, 0),
    (1, 1, 0, 1),
    (0, 0, 1, 0),
)


def _square_size(matrix: Matrix) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return size


def _check_vertex(vertex: int, size: int) -> None:
    if not 0 <= vertex < size:
        raise IndexError(f"vertex {vertex} out of range for {size} vertices")


def bfs_matrix(matrix: Matrix, start: int) -> list[int]:
    """Return the breadth-first visiting order from ``start``."""
    size = _square_size(matrix)
    _check_vertex(start, size)
    visited = [False] * size
    visited[start] = True
    queue = deque([start])
    order = []
    while queue:
        current = queue.popleft()
        order.append(current)
        for neighbor, edge in enumerate(matrix[current]):
            if edge and not visited[neighbor]:
                visited[neighbor] = True
                queue.append(neighbor)
    return order


def dfs_matrix(matrix: Matrix, start: int) -> list[int]:
    """Return the depth-first visiting order from ``start``."""
    size = _square_size(matrix)
    _check_vertex(start, size)
    visited = [False] * size
    visited[start] = True
    order = [start]
    stack: list[tuple[int, Iterator[int]]] = [(start, iter(range(size)))]
    while stack:
        vertex, candidates = stack[-1]
        for neighbor in candidates:
            if matrix[vertex][neighbor] and not visited[neighbor]:
                visited[neighbor] = True
                order.append(neighbor)
                stack.append((neighbor, iter(range(size))))
                break
        else:
            stack.pop()
    return order


def transitive_closure(matrix: Matrix) -> list[list[int]]:
    """Return the reachability matrix of ``matrix`` (Warshall's algorithm)."""
    size = _square_size(matrix)
    result = [[1 if edge else 0 for edge in row] for row in matrix]
    for k in range(size):
        for row in result:
            if row[k]:
                row[:] = [cell | through for cell, through in zip(row, result[k])]
    return result


class AdjacencyListGraph:
    """A graph whose vertices keep their neighbours, newest edge first."""

    def __init__(self, vertex_count: int, directed: bool = False) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.directed = directed
        self._adjacent: list[list[int]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adjacent)

    def add_edge(self, src: int, dest: int) -> None:
        """Connect ``src`` to ``dest``, and back again if undirected."""
        _check_vertex(src, len(self))
        _check_vertex(dest, len(self))
        self._adjacent[src].insert(0, dest)
        if not self.directed:
            self._adjacent[dest].insert(0, src)

    def neighbors(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex``, most recently added first."""
        _check_vertex(vertex, len(self))
        return list(self._adjacent[vertex])

    def bfs(self, start: int) -> list[int]:
        """Return the breadth-first visiting order from ``start``."""
        _check_vertex(start, len(self))
        visited = {start}
        queue = deque([start])
        order = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbor in self._adjacent[current]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return order

    def format(self) -> str:
        """Render every vertex's adjacency list as text."""
        blocks = []
        for vertex, neighbors in enumerate(self._adjacent):
            links = "".join(f"-> {n}" for n in neighbors)
            blocks.append(f"Adjacency list of vertex {vertex}:\n{links}")
        return "\n".join(blocks)


class AdjacencyMatrixGraph:
    """An undirected graph stored as a 0/1 adjacency matrix."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._matrix = [[0] * vertex_count for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._matrix)

    def add_edge(self, i: int, j: int) -> None:
        """Connect ``i`` and ``j`` in both directions."""
        _check_vertex(i, len(self))
        _check_vertex(j, len(self))
        self._matrix[i][j] = 1
        self._matrix[j][i] = 1

    def has_edge(self, i: int, j: int) -> bool:
        """Tell whether ``i`` and ``j`` are connected."""
        _check_vertex(i, len(self))
        _check_vertex(j, len(self))
        return bool(self._matrix[i][j])

    def rows(self) -> list[list[int]]:
        """Return a copy of the adjacency matrix."""
        return [list(row) for row in self._matrix]

    def bfs(self, start: int) -> list[int]:
        """Return the breadth-first visiting order from ``start``."""
        return bfs_matrix(self._matrix, start)

    def dfs(self, start: int) -> list[int]:
        """Return the depth-first visiting order from ``start``."""
        return dfs_matrix(self._matrix, start)

    def format(self) -> str:
        """Render the matrix one vertex per line."""
        return "\n".join(
            f"{i}: " + " ".join(str(cell) for cell in row)
            for i, row in enumerate(self._matrix)
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Print a depth-first traversal of the built-in four-vertex graph."""
    parser = argparse.ArgumentParser(
        description="Depth-first traversal of a small sample graph."
    )
    parser.add_argument("start", type=int, nargs="?", help="starting vertex")
    args = parser.parse_args(argv)
    start = args.start
    if start is None:
        text = input("Enter the starting vertex: ")
        try:
            start = int(text.strip())
        except ValueError:
            parser.error(f"invalid vertex: {text.strip()!r}")
    if not 0 <= start < len(_DEMO_GRAPH):
        parser.error(f"vertex must be between 0 and {len(_DEMO_GRAPH) - 1}")
    print(" ".join(str(v) for v in dfs_matrix(_DEMO_GRAPH, start)))
    return 0