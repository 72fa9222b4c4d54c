import random

import pytest

from dsalgo.adjacency_list import VertexError
from dsalgo.dijkstra import DirectedGraph, dijkstra, main


def _feed(monkeypatch, *answers):
    it = iter(answers)

    def fake(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake)


def _random_graph(seed, n):
    rng = random.Random(seed)
    graph = DirectedGraph(n)
    for _ in range(n * 3):
        a, b = rng.randrange(n), rng.randrange(n)
        if a != b:
            graph.add_edge(a, b, rng.randint(0, 25))
    return graph


def test_edges_are_directed():
    graph = DirectedGraph(2)
    graph.add_edge(0, 1, 7)
    assert graph.weight(0, 1) == 7
    assert graph.weight(1, 0) is None


def test_negative_weight_refused():
    with pytest.raises(ValueError):
        DirectedGraph(2).add_edge(0, 1, -1)


def test_bad_vertex_raises():
    graph = DirectedGraph(2)
    with pytest.raises(VertexError):
        graph.add_edge(0, 2, 1)
    with pytest.raises(VertexError):
        dijkstra(graph, -1)


def test_detour_is_shorter():
    graph = DirectedGraph(3)
    graph.add_edge(0, 1, 4)
    graph.add_edge(0, 2, 1)
    graph.add_edge(2, 1, 2)
    result = dijkstra(graph, 0)
    assert result.distances[1] == 3
    assert result.path_to(1) == [0, 2, 1]
    assert result.path_to(0) == [0]


def test_unreachable_vertex():
    graph = DirectedGraph(3)
    graph.add_edge(0, 1, 2)
    result = dijkstra(graph, 0)
    assert result.distances[2] is None
    assert result.path_to(2) is None
    with pytest.raises(VertexError):
        result.path_to(3)


@pytest.mark.parametrize("seed", range(6))
def test_distances_satisfy_edge_relaxation(seed):
    n = 8
    graph = _random_graph(seed, n)
    result = dijkstra(graph, 0)
    dist = result.distances
    assert dist[0] == 0
    for u in range(n):
        for v in range(n):
            w = graph.weight(u, v)
            if w is not None and dist[u] is not None:
                assert dist[v] is not None
                assert dist[v] <= dist[u] + w


@pytest.mark.parametrize("seed", range(6))
def test_paths_add_up_to_distances(seed):
    n = 8
    graph = _random_graph(seed, n)
    result = dijkstra(graph, 1)
    for v in range(n):
        path = result.path_to(v)
        if path is None:
            assert result.distances[v] is None
            continue
        assert path[0] == 1 and path[-1] == v
        total = sum(graph.weight(a, b) for a, b in zip(path, path[1:]))
        assert total == result.distances[v]


def test_iterations_start_with_source():
    graph = _random_graph(3, 6)
    result = dijkstra(graph, 4)
    assert result.iterations[0][0] == 4
    assert len(result.iterations) <= 5
    assert result.iterations[-1][1] == result.distances


def test_main_prints_paths(monkeypatch, capsys):
    _feed(monkeypatch, "3",
          "1", "0", "1", "4",
          "1", "0", "2", "1",
          "1", "2", "1", "2",
          "2", "0", "0")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "To 1 (distance = 3): 0 -> 2 -> 1" in out
    assert "Selected vertex: 0" in out