"""Kruskal's minimum spanning tree algorithm with a union-find forest."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass

from dsalgo.adjacency_list import VertexError, _read_int


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two vertices."""

    src: int
    dest: int
    weight: int

    def __str__(self) -> str:
        return f"{self.src} -- {self.dest} (weight: {self.weight})"


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is not in the set")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already joined."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False
        rank = self._rank
        if rank[root_x] < rank[root_y]:
            self._parent[root_x] = root_y
        elif rank[root_x] > rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            rank[root_x] += 1
        return True


def kruskal_mst(num_vertices: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the edges Kruskal's algorithm selects, lightest first.

    On a disconnected graph the result is a minimum spanning forest.
    """
    edges = list(edges)
    for edge in edges:
        for vertex in (edge.src, edge.dest):
            if not 0 <= vertex < num_vertices:
                raise VertexError(f"vertex {vertex} is not in the graph")

    forest = DisjointSet(num_vertices)
    selected: list[Edge] = []
    for edge in sorted(edges, key=lambda e: e.weight):
        if len(selected) >= num_vertices - 1:
            break
        if forest.union(edge.src, edge.dest):
            selected.append(edge)
    return selected


_MENU = """
=== Kruskal's Algorithm Menu ===
1. Add edge
2. Find MST
3. Print graph
0. Exit"""


def main(argv: list[str] | None = None) -> int:
    """Run the interactive Kruskal menu."""
    argparse.ArgumentParser(description="Kruskal's algorithm demo").parse_args(argv)
    try:
        vertices = _read_int("Enter number of vertices: ")
    except (ValueError, EOFError):
        print("Failed to create graph")
        return 1
    if vertices < 0:
        print("Failed to create graph")
        return 1

    max_edges = vertices * (vertices - 1) // 2
    edges: list[Edge] = []
    choice = -1
    while choice != 0:
        print(_MENU)
        try:
            choice = _read_int("Choice: ")
            if choice == 1:
                if len(edges) >= max_edges:
                    print("Maximum number of edges reached")
                    continue
                src = _read_int("Enter source vertex: ")
                dest = _read_int("Enter destination vertex: ")
                weight = _read_int("Enter weight: ")
                if 0 <= src < vertices and 0 <= dest < vertices:
                    edges.append(Edge(src, dest, weight))
                    print("Edge added successfully")
                else:
                    print("Invalid vertices")
            elif choice == 2:
                if len(edges) < vertices - 1:
                    print("Not enough edges to form MST")
                    continue
                edges.sort(key=lambda e: e.weight)
                mst = kruskal_mst(vertices, edges)
                for edge in mst:
                    print(f"Selected edge: {edge}")
                total = sum(edge.weight for edge in mst)
                print(f"Total MST weight: {total}")
                print("\nOriginal Graph Edges:")
                for edge in edges:
                    print(edge)
                print("\nMST Edges:")
                for edge in mst:
                    print(edge)
                print(f"Total MST weight: {total}")
            elif choice == 3:
                print("\nCurrent Graph:")
                for edge in edges:
                    print(edge)
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