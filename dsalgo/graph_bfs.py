"""Breadth-first search with levels, parents and shortest paths."""

from __future__ import annotations

import argparse
from collections import deque
from dataclasses import dataclass

from dsalgo.adjacency_list import VertexError, _read_int
from dsalgo.graph_dfs import UndirectedGraph


@dataclass(frozen=True)
class BfsResult:
    """Outcome of a BFS: visit order, distance and parent of every vertex."""

    start: int
    order: tuple[int, ...]
    distances: tuple[int | None, ...]
    parents: tuple[int | None, ...]

    def path_to(self, end: int) -> list[int] | None:
        """Return the shortest path from the start to ``end``, or None if unreachable."""
        if not 0 <= end < len(self.distances):
            raise VertexError(f"vertex {end} is not in the graph")
        if end == self.start:
            return [self.start]
        if self.parents[end] is None:
            return None
        path = [end]
        while path[-1] != self.start:
            path.append(self.parents[path[-1]])
        path.reverse()
        return path

    def levels(self) -> list[tuple[int, int]]:
        """Return (vertex, level) for every reached vertex, by vertex number."""
        return [(v, d) for v, d in enumerate(self.distances) if d is not None]


def bfs(graph: UndirectedGraph, start: int) -> BfsResult:
    """Run a breadth-first search from ``start``."""
    graph.neighbors(start)
    distances: list[int | None] = [None] * graph.num_vertices
    parents: list[int | None] = [None] * graph.num_vertices
    distances[start] = 0
    order: list[int] = []
    queue = deque([start])
    while queue:
        current = queue.popleft()
        order.append(current)
        for vertex in graph.neighbors(current):
            if distances[vertex] is None:
                distances[vertex] = distances[current] + 1
                parents[vertex] = current
                queue.append(vertex)
    return BfsResult(start, tuple(order), tuple(distances), tuple(parents))


_MENU = """
=== Graph BFS Menu ===
1. Add edge
2. Print graph
3. BFS traversal
4. Print shortest path
5. Print vertex levels
0. Exit"""


def _print_traversal(result: BfsResult) -> None:
    print("BFS traversal: " + "".join(f"{v} " for v in result.order))


def main(argv: list[str] | None = None) -> int:
    """Run the interactive BFS menu."""
    argparse.ArgumentParser(description="Graph BFS demo").parse_args(argv)
    try:
        graph = UndirectedGraph(_read_int("Enter number of vertices: "))
    except (ValueError, EOFError):
        print("Failed to create graph")
        return 1

    last: BfsResult | None = None
    choice = -1
    while choice != 0:
        print(_MENU)
        try:
            choice = _read_int("Choice: ")
            if choice == 1:
                src = _read_int("Enter source vertex: ")
                dest = _read_int("Enter destination vertex: ")
                try:
                    graph.add_edge(src, dest)
                except VertexError:
                    print("Failed to add edge")
                else:
                    print("Edge added successfully")
            elif choice == 2:
                print()
                print(graph.render())
            elif choice == 3:
                start = _read_int("Enter starting vertex: ")
                try:
                    last = bfs(graph, start)
                except VertexError:
                    print("Invalid vertex")
                else:
                    _print_traversal(last)
            elif choice == 4:
                start = _read_int("Enter start vertex: ")
                end = _read_int("Enter end vertex: ")
                if not (0 <= start < graph.num_vertices and 0 <= end < graph.num_vertices):
                    print("Invalid vertices")
                    continue
                last = bfs(graph, start)
                _print_traversal(last)
                path = last.path_to(end)
                if path is None:
                    print(f"Shortest path: No path exists from {start} to {end}")
                    print("Distance: unreachable")
                else:
                    print("Shortest path: " + " -> ".join(map(str, path)))
                    print(f"Distance: {last.distances[end]}")
            elif choice == 5:
                print("\nLevels from source:")
                if last is not None:
                    for vertex, level in last.levels():
                        print(f"Vertex {vertex}: Level {level}")
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