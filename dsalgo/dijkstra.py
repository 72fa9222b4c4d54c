"""Dijkstra's single-source shortest paths on a directed adjacency matrix."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from dsalgo.adjacency_list import VertexError, _read_int
from dsalgo.prim import _new_matrix, _render_matrix


class DirectedGraph:
    """Directed graph with non-negative weights; None marks a missing edge."""

    def __init__(self, num_vertices: int) -> None:
        self._matrix = _new_matrix(num_vertices)
        self.num_vertices = num_vertices

    def _check(self, *vertices: int) -> None:
        for vertex in vertices:
            if not 0 <= vertex < self.num_vertices:
                raise VertexError(f"vertex {vertex} is not in the graph")

    def add_edge(self, src: int, dest: int, weight: int) -> None:
        """Set the weight of the edge src->dest; negative weights are refused."""
        self._check(src, dest)
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        self._matrix[src][dest] = weight

    def weight(self, src: int, dest: int) -> int | None:
        """Return the edge weight, 0 on the diagonal, or None for no edge."""
        self._check(src, dest)
        return self._matrix[src][dest]

    def render(self) -> str:
        return _render_matrix(self._matrix)


@dataclass(frozen=True)
class DijkstraResult:
    """Distances and parents from ``start``; None means unreachable.

    ``iterations`` holds, per round, the selected vertex and the distances
    after relaxing its edges.
    """

    start: int
    distances: tuple[int | None, ...]
    parents: tuple[int | None, ...]
    iterations: tuple[tuple[int, tuple[int | None, ...]], ...]

    def path_to(self, dest: int) -> list[int] | None:
        """Return the shortest path from the start to ``dest``, or None."""
        if not 0 <= dest < len(self.distances):
            raise VertexError(f"vertex {dest} is not in the graph")
        if self.distances[dest] is None:
            return None
        path = [dest]
        while self.parents[path[-1]] is not None:
            path.append(self.parents[path[-1]])
        path.reverse()
        return path


def dijkstra(graph: DirectedGraph, start: int) -> DijkstraResult:
    """Compute shortest distances from ``start`` to every vertex."""
    graph.weight(start, start)
    n = graph.num_vertices
    dist: list[int | None] = [None] * n
    parents: list[int | None] = [None] * n
    visited = [False] * n
    dist[start] = 0
    iterations = []

    for _ in range(n - 1):
        candidates = [v for v in range(n) if not visited[v] and dist[v] is not None]
        if not candidates:
            break
        u = min(candidates, key=dist.__getitem__)
        visited[u] = True
        for v in range(n):
            w = graph.weight(u, v)
            if visited[v] or w is None:
                continue
            candidate = dist[u] + w
            if dist[v] is None or candidate < dist[v]:
                dist[v] = candidate
                parents[v] = u
        iterations.append((u, tuple(dist)))

    return DijkstraResult(start, tuple(dist), tuple(parents), tuple(iterations))


_MENU = """
=== Dijkstra's Algorithm Menu ===
1. Add edge
2. Find shortest paths
3. Print graph
0. Exit"""


def _print_result(result: DijkstraResult) -> None:
    for number, (vertex, distances) in enumerate(result.iterations, 1):
        print(f"\nIteration {number}:")
        print(f"Selected vertex: {vertex}")
        cells = "".join("INF " if d is None else f"{d:3d} " for d in distances)
        print(f"Current distances: {cells}")
    print(f"\nFinal Shortest Paths from vertex {result.start}:")
    for vertex, distance in enumerate(result.distances):
        if vertex != result.start and distance is not None:
            path = " -> ".join(map(str, result.path_to(vertex)))
            print(f"To {vertex} (distance = {distance}): {path}")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive Dijkstra menu."""
    argparse.ArgumentParser(description="Dijkstra's algorithm demo").parse_args(argv)
    try:
        graph = DirectedGraph(_read_int("Enter number of vertices: "))
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
                weight = _read_int("Enter weight (non-negative): ")
                try:
                    graph.add_edge(src, dest, weight)
                except (VertexError, ValueError):
                    print("Failed to add edge")
                else:
                    print("Edge added successfully")
            elif choice == 2:
                start = _read_int("Enter starting vertex: ")
                if not 0 <= start < graph.num_vertices:
                    print("Invalid starting vertex")
                    continue
                _print_result(dijkstra(graph, start))
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