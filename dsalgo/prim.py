"""Prim's minimum spanning tree algorithm on an adjacency matrix."""

from __future__ import annotations

import argparse
import math
from collections import deque
from dataclasses import dataclass

from dsalgo.adjacency_list import VertexError, _read_int
from dsalgo.kruskal import Edge

MAX_VERTICES = 100


def _new_matrix(num_vertices: int) -> list[list[int | None]]:
    if not 0 <= num_vertices <= MAX_VERTICES:
        raise ValueError(f"number of vertices must be between 0 and {MAX_VERTICES}")
    return [[0 if i == j else None for j in range(num_vertices)] for i in range(num_vertices)]


def _render_matrix(matrix: list[list[int | None]]) -> str:
    lines = ["Graph Adjacency Matrix:", "    " + "".join(f"{i:4d}" for i in range(len(matrix)))]
    for i, row in enumerate(matrix):
        cells = "".join("  ∞ " if w is None else f"{w:4d}" for w in row)
        lines.append(f"{i:2d}: {cells}")
    return "\n".join(lines)


class PrimGraph:
    """Undirected weighted graph; None marks a missing edge, 0 the diagonal."""

    def __init__(self, num_vertices: int) -> None:
        self._matrix = _new_matrix(num_vertices)
        self.num_vertices = num_vertices

    def _check(self, *vertices: int) -> None:
        for vertex in vertices:
            if not 0 <= vertex < self.num_vertices:
                raise VertexError(f"vertex {vertex} is not in the graph")

    def add_edge(self, src: int, dest: int, weight: int) -> None:
        """Set the weight of the undirected edge between ``src`` and ``dest``."""
        self._check(src, dest)
        self._matrix[src][dest] = weight
        self._matrix[dest][src] = weight

    def weight(self, src: int, dest: int) -> int | None:
        """Return the edge weight, 0 on the diagonal, or None for no edge."""
        self._check(src, dest)
        return self._matrix[src][dest]

    def render(self) -> str:
        return _render_matrix(self._matrix)


@dataclass(frozen=True)
class PrimResult:
    """A minimum spanning tree grown from ``start``."""

    start: int
    parents: tuple[int | None, ...]
    edges: tuple[Edge, ...]

    @property
    def total_weight(self) -> int:
        return sum(edge.weight for edge in self.edges)

    def levels(self) -> list[tuple[int, int]]:
        """Return (level, vertex) pairs in breadth-first order over the tree."""
        visited = {self.start}
        depth = {self.start: 0}
        order: list[tuple[int, int]] = []
        queue = deque([self.start])
        while queue:
            current = queue.popleft()
            order.append((depth[current], current))
            for vertex, parent in enumerate(self.parents):
                if parent == current and vertex not in visited:
                    visited.add(vertex)
                    depth[vertex] = depth[current] + 1
                    queue.append(vertex)
        return order


def prim_mst(graph: PrimGraph, start: int) -> PrimResult:
    """Grow a minimum spanning tree from ``start``.

    Edges of weight 0 are treated as absent. Raises ValueError when the
    graph is not connected.
    """
    graph.weight(start, start)
    n = graph.num_vertices
    key: list[float] = [math.inf] * n
    included = [False] * n
    parents: list[int | None] = [None] * n
    key[start] = 0

    for _ in range(n - 1):
        candidates = [v for v in range(n) if not included[v] and key[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=key.__getitem__)
        included[u] = True
        for v in range(n):
            w = graph.weight(u, v)
            if w and not included[v] and w < key[v]:
                parents[v] = u
                key[v] = w

    if any(parents[v] is None for v in range(n) if v != start):
        raise ValueError("graph is not connected")

    edges = tuple(
        Edge(parents[v], v, graph.weight(v, parents[v])) for v in range(n) if v != start
    )
    return PrimResult(start, tuple(parents), edges)


_MENU = """
=== Prim's Algorithm Menu ===
1. Add edge
2. Find MST
3. Print graph
0. Exit"""


def main(argv: list[str] | None = None) -> int:
    """Run the interactive Prim menu."""
    argparse.ArgumentParser(description="Prim's algorithm demo").parse_args(argv)
    try:
        graph = PrimGraph(_read_int("Enter number of vertices: "))
    except (ValueError, EOFError):
        print("Failed to create graph")
        return 1

    choice = -1
    while choice != 0:
        print(_MENU)
        try:
            choice = _read_int("Choice: ")
            if choice == 1:
                src = _read_int("Enter source vertex: ")
                dest = _read_int("Enter destination vertex: ")
                weight = _read_int("Enter weight: ")
                try:
                    graph.add_edge(src, dest, weight)
                except VertexError:
                    print("Failed to add edge")
                else:
                    print("Edge added successfully")
            elif choice == 2:
                start = _read_int("Enter starting vertex: ")
                if not 0 <= start < graph.num_vertices:
                    print("Invalid starting vertex")
                    continue
                try:
                    result = prim_mst(graph, start)
                except ValueError:
                    print("Graph is not connected")
                    continue
                print("\nMinimum Spanning Tree edges:")
                for edge in result.edges:
                    print(edge)
                print(f"Total MST weight: {result.total_weight}")
                print(f"\nMST Level Structure (from vertex {start}):")
                for level, vertex in result.levels():
                    print(f"Level {level}: Vertex {vertex}")
            elif choice == 3:
                print()
                print(graph.render())
            elif choice == 0:
                print("Exiting program")
            else:
                print("Invalid choice")
        except EOFError:
            break
        except ValueError:
            print("Invalid input")
            choice = -1
    return 0