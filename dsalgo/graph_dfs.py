"""Depth-first search, recursive and iterative, over an undirected graph."""

from __future__ import annotations

import argparse
from typing import Callable

from dsalgo.adjacency_list import (
    VertexError,
    _check_vertices,
    _read_edge,
    _read_graph,
    _read_int,
    _report,
    _run_menu,
)

MAX_VERTICES = 100


class UndirectedGraph:
    """Unweighted undirected graph with adjacency lists, newest edge first."""

    def __init__(self, num_vertices: int) -> None:
        if not 0 <= num_vertices <= MAX_VERTICES:
            raise ValueError(f"number of vertices must be between 0 and {MAX_VERTICES}")
        self.num_vertices = num_vertices
        self._adj: list[list[int]] = [[] for _ in range(num_vertices)]

    def _check(self, vertex: int) -> None:
        _check_vertices(self.num_vertices, vertex)

    def add_edge(self, src: int, dest: int) -> None:
        _check_vertices(self.num_vertices, src, dest)
        self._adj[src].insert(0, dest)
        self._adj[dest].insert(0, src)

    def neighbors(self, vertex: int) -> tuple[int, ...]:
        """Return the vertices adjacent to ``vertex``, newest edge first."""
        self._check(vertex)
        return tuple(self._adj[vertex])

    def render(self) -> str:
        lines = ["Graph Adjacency List:"]
        for index, adjacent in enumerate(self._adj):
            lines.append(f"[{index}]" + "".join(f" -> {v}" for v in adjacent))
        return "\n".join(lines)


def _dfs_into(graph: UndirectedGraph, start: int, visited: set[int], order: list[int]) -> None:
    visited.add(start)
    order.append(start)
    for vertex in graph.neighbors(start):
        if vertex not in visited:
            _dfs_into(graph, vertex, visited, order)


def dfs_recursive(graph: UndirectedGraph, start: int) -> list[int]:
    """Return the vertices in the order a recursive DFS from ``start`` visits them."""
    graph.neighbors(start)
    order: list[int] = []
    _dfs_into(graph, start, set(), order)
    return order


def dfs_iterative(graph: UndirectedGraph, start: int) -> list[int]:
    """Return the visit order of a stack-based DFS from ``start``."""
    graph.neighbors(start)
    visited: set[int] = set()
    order: list[int] = []
    stack = [start]
    while stack:
        vertex = stack.pop()
        if vertex in visited:
            continue
        visited.add(vertex)
        order.append(vertex)
        stack.extend(v for v in graph.neighbors(vertex) if v not in visited)
    return order


def connected_components(graph: UndirectedGraph) -> list[list[int]]:
    """Return each connected component as its recursive DFS visit order."""
    visited: set[int] = set()
    components: list[list[int]] = []
    for vertex in range(graph.num_vertices):
        if vertex not in visited:
            order: list[int] = []
            _dfs_into(graph, vertex, visited, order)
            components.append(order)
    return components


def _join(order: list[int]) -> str:
    return "".join(f"{v} " for v in order)


_MENU = """
=== Graph DFS Menu ===
1. Add edge
2. Print graph
3. DFS (recursive)
4. DFS (iterative)
5. Find connected components
0. Exit"""


def main(argv: list[str] | None = None) -> int:
    """Run the interactive DFS menu."""
    argparse.ArgumentParser(description="Graph DFS demo").parse_args(argv)
    graph = _read_graph(UndirectedGraph)
    if graph is None:
        return 1

    def add() -> None:
        src, dest = _read_edge()
        _report(
            lambda: graph.add_edge(src, dest),
            "Edge added successfully",
            "Failed to add edge",
        )

    def traverse(
        search: Callable[[UndirectedGraph, int], list[int]], label: str
    ) -> Callable[[], None]:
        def run() -> None:
            start = _read_int("Enter starting vertex: ")
            try:
                order = search(graph, start)
            except VertexError:
                print("Invalid vertex")
            else:
                print(f"DFS traversal ({label}): {_join(order)}")

        return run

    def components() -> None:
        print("\nFinding connected components...")
        found = connected_components(graph)
        for number, component in enumerate(found, 1):
            print(f"Component {number}: {_join(component)}")
        print(f"Total number of connected components: {len(found)}")

    return _run_menu(
        _MENU,
        {
            1: add,
            2: lambda: print("\n" + graph.render()),
            3: traverse(dfs_recursive, "recursive"),
            4: traverse(dfs_iterative, "iterative"),
            5: components,
        },
    )