"""A weighted graph stored as one adjacency list per vertex."""

from __future__ import annotations

import argparse
from typing import Callable, Mapping, TypeVar

G = TypeVar("G")


class VertexError(IndexError):
    """Raised when a vertex number lies outside the graph."""


def _read_int(prompt: str) -> int:
    return int(input(prompt))


def _check_vertices(num_vertices: int, *vertices: int) -> None:
    for vertex in vertices:
        if not 0 <= vertex < num_vertices:
            raise VertexError(f"vertex {vertex} is not in the graph")


def _read_graph(factory: Callable[[int], G]) -> G | None:
    """Ask for a vertex count and build a graph, or report failure."""
    try:
        return factory(_read_int("Enter number of vertices: "))
    except (ValueError, EOFError):
        print("Failed to create graph")
        return None


def _read_edge() -> tuple[int, int]:
    return _read_int("Enter source vertex: "), _read_int("Enter destination vertex: ")


def _report(
    action: Callable[[], object],
    success: str,
    failure: str,
    errors: tuple[type[BaseException], ...] = (VertexError,),
) -> None:
    try:
        action()
    except errors:
        print(failure)
    else:
        print(success)


def _run_menu(menu: str, actions: Mapping[int, Callable[[], None]]) -> int:
    """Show ``menu`` until the user picks 0, dispatching other choices to ``actions``."""
    choice = -1
    while choice != 0:
        print(menu)
        try:
            choice = _read_int("Choice: ")
            if choice == 0:
                print("Exiting program")
            elif choice in actions:
                actions[choice]()
            else:
                print("Invalid choice")
        except EOFError:
            break
        except ValueError:
            print("Invalid input")
            choice = -1
    return 0


class AdjacencyListGraph:
    """Graph whose edges sit in per-vertex lists, newest edge first."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.num_vertices = num_vertices
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(num_vertices)]

    def _check(self, *vertices: int) -> None:
        _check_vertices(self.num_vertices, *vertices)

    def add_edge(self, src: int, dest: int, weight: int = 1, directed: bool = False) -> None:
        """Add an edge; an undirected edge is stored in both lists."""
        self._check(src, dest)
        self._adj[src].insert(0, (dest, weight))
        if not directed:
            self._adj[dest].insert(0, (src, weight))

    def remove_edge(self, src: int, dest: int, directed: bool = False) -> None:
        """Remove the edge src->dest (and dest->src if undirected and present)."""
        self._check(src, dest)
        if not self._remove_first(src, dest):
            raise KeyError((src, dest))
        if not directed:
            self._remove_first(dest, src)

    def _remove_first(self, src: int, dest: int) -> bool:
        edges = self._adj[src]
        for position, (vertex, _) in enumerate(edges):
            if vertex == dest:
                del edges[position]
                return True
        return False

    def has_edge(self, src: int, dest: int) -> bool:
        """Tell whether an edge src->dest exists; out-of-range vertices have none."""
        if not (0 <= src < self.num_vertices and 0 <= dest < self.num_vertices):
            return False
        return any(vertex == dest for vertex, _ in self._adj[src])

    def degree(self, vertex: int) -> int:
        """Return the number of edges leaving ``vertex``."""
        self._check(vertex)
        return len(self._adj[vertex])

    def neighbors(self, vertex: int) -> tuple[tuple[int, int], ...]:
        """Return (vertex, weight) pairs adjacent to ``vertex``, newest first."""
        self._check(vertex)
        return tuple(self._adj[vertex])

    def render(self) -> str:
        lines = ["Adjacency List:"]
        for index, edges in enumerate(self._adj):
            lines.append(f"[{index}]" + "".join(f" -> {v}(w:{w})" for v, w in edges))
        return "\n".join(lines)

    def info(self) -> str:
        lines = ["Graph Information:", f"Number of vertices: {self.num_vertices}"]
        for index, edges in enumerate(self._adj):
            adjacent = "".join(f"{v}(weight:{w}) " for v, w in edges) or "None"
            lines += [
                "",
                f"Vertex {index}:",
                f"  Adjacent vertices: {adjacent}",
                f"  Degree: {len(edges)}",
            ]
        return "\n".join(lines)


_MENU = """
=== Graph Menu ===
1. Add edge
2. Remove edge
3. Check if edge exists
4. Print graph
5. Print graph info
6. Calculate vertex degree
0. Exit"""


def main(argv: list[str] | None = None) -> int:
    """Run the interactive adjacency list menu."""
    argparse.ArgumentParser(description="Adjacency list graph demo").parse_args(argv)
    graph = _read_graph(AdjacencyListGraph)
    if graph is None:
        return 1

    def add() -> None:
        src, dest = _read_edge()
        weight = _read_int("Enter weight: ")
        directed = bool(_read_int("Is it directed? (1/0): "))
        _report(
            lambda: graph.add_edge(src, dest, weight, directed),
            "Edge added successfully",
            "Failed to add edge",
        )

    def remove() -> None:
        src, dest = _read_edge()
        directed = bool(_read_int("Is it directed? (1/0): "))
        _report(
            lambda: graph.remove_edge(src, dest, directed),
            "Edge removed successfully",
            "Failed to remove edge",
            (VertexError, KeyError),
        )

    def check() -> None:
        src, dest = _read_edge()
        print("Edge exists" if graph.has_edge(src, dest) else "Edge does not exist")

    def degree() -> None:
        vertex = _read_int("Enter vertex: ")
        try:
            print(f"Degree of vertex {vertex}: {graph.degree(vertex)}")
        except VertexError:
            print("Invalid vertex")

    return _run_menu(
        _MENU,
        {
            1: add,
            2: remove,
            3: check,
            4: lambda: print("\n" + graph.render()),
            5: lambda: print("\n" + graph.info()),
            6: degree,
        },
    )