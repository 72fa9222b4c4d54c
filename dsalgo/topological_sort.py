"""Topological ordering of a directed acyclic graph by DFS and by in-degree."""

from __future__ import annotations

import argparse
from collections import deque

from dsalgo.adjacency_list import VertexError, _read_int

MAX_VERTICES = 100

COURSES = (
    "Introduction to Programming",
    "Data Structures",
    "Algorithms",
    "Database",
    "Web Development",
)


class CycleError(ValueError):
    """Raised when a graph has a cycle; ``order`` holds the vertices ordered so far."""

    def __init__(self, order: list[int]) -> None:
        super().__init__("graph contains a cycle")
        self.order = order


class Dag:
    """Directed graph stored as an adjacency matrix with in-degree counts."""

    def __init__(self, num_vertices: int) -> None:
        if not 0 <= num_vertices <= MAX_VERTICES:
            raise ValueError(f"number of vertices must be between 0 and {MAX_VERTICES}")
        self.num_vertices = num_vertices
        self._matrix = [[False] * num_vertices for _ in range(num_vertices)]
        self._in_degree = [0] * num_vertices

    def _check(self, *vertices: int) -> None:
        for vertex in vertices:
            if not 0 <= vertex < self.num_vertices:
                raise VertexError(f"vertex {vertex} is not in the graph")

    def add_edge(self, src: int, dest: int) -> None:
        """Add the edge src->dest; adding an existing edge changes nothing."""
        self._check(src, dest)
        if not self._matrix[src][dest]:
            self._matrix[src][dest] = True
            self._in_degree[dest] += 1

    def successors(self, vertex: int) -> tuple[int, ...]:
        """Return the vertices that ``vertex`` points to, in ascending order."""
        self._check(vertex)
        return tuple(v for v, linked in enumerate(self._matrix[vertex]) if linked)

    def in_degree(self, vertex: int) -> int:
        self._check(vertex)
        return self._in_degree[vertex]

    def render(self) -> str:
        lines = ["Adjacency Matrix:"]
        for row in self._matrix:
            lines.append("".join(f"{int(cell)} " for cell in row))
        lines.append("")
        lines.append("In-degrees: " + "".join(f"{d} " for d in self._in_degree))
        return "\n".join(lines)


def topological_sort_dfs(graph: Dag) -> list[int]:
    """Return vertices in reverse DFS finishing order.

    Cycles are not detected; on a cyclic graph the order is still produced.
    """
    visited = [False] * graph.num_vertices
    finished: list[int] = []

    def visit(vertex: int) -> None:
        visited[vertex] = True
        for nxt in graph.successors(vertex):
            if not visited[nxt]:
                visit(nxt)
        finished.append(vertex)

    for vertex in range(graph.num_vertices):
        if not visited[vertex]:
            visit(vertex)
    finished.reverse()
    return finished


def topological_sort_kahn(graph: Dag) -> list[int]:
    """Return a topological order by repeatedly removing zero in-degree vertices.

    Raises CycleError, carrying the partial order, when the graph has a cycle.
    """
    remaining = [graph.in_degree(v) for v in range(graph.num_vertices)]
    queue = deque(v for v, d in enumerate(remaining) if d == 0)
    order: list[int] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for nxt in graph.successors(vertex):
            remaining[nxt] -= 1
            if remaining[nxt] == 0:
                queue.append(nxt)
    if len(order) != graph.num_vertices:
        raise CycleError(order)
    return order


def _join(order: list[int]) -> str:
    return "".join(f"{v} " for v in order)


_MENU = """
=== Topological Sort Menu ===
1. Add edge
2. Topological sort (DFS)
3. Topological sort (In-degree)
4. Print graph
0. Exit"""


def main(argv: list[str] | None = None) -> int:
    """Run the interactive course prerequisite menu."""
    argparse.ArgumentParser(description="Topological sort demo").parse_args(argv)
    print("College Course Prerequisites Example")
    print("Courses: ")
    for number, name in enumerate(COURSES):
        print(f"{number}: {name}")

    graph = Dag(len(COURSES))
    choice = -1
    while choice != 0:
        print(_MENU)
        try:
            choice = _read_int("Choice: ")
            if choice == 1:
                src = _read_int("Enter prerequisite course (0-4): ")
                dest = _read_int("Enter dependent course (0-4): ")
                try:
                    graph.add_edge(src, dest)
                except VertexError:
                    print("Failed to add prerequisite")
                else:
                    print("Prerequisite added successfully")
            elif choice == 2:
                print("Topological Sort (DFS): " + _join(topological_sort_dfs(graph)))
            elif choice == 3:
                try:
                    order = topological_sort_kahn(graph)
                except CycleError as error:
                    print("Topological Sort (In-degree): " + _join(error.order))
                    print("Graph contains a cycle!")
                else:
                    print("Topological Sort (In-degree): " + _join(order))
            elif choice == 4:
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