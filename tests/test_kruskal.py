import random
from collections import deque

import pytest

from dsalgo.adjacency_list import VertexError
from dsalgo.kruskal import DisjointSet, Edge, kruskal_mst, main


def _feed(monkeypatch, *answers):
    it = iter(answers)

    def fake(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake)


def _reachable(num_vertices, edges, start=0):
    adj = {v: [] for v in range(num_vertices)}
    for e in edges:
        adj[e.src].append(e.dest)
        adj[e.dest].append(e.src)
    seen = {start}
    queue = deque([start])
    while queue:
        v = queue.popleft()
        for w in adj[v]:
            if w not in seen:
                seen.add(w)
                queue.append(w)
    return seen


def _random_connected(seed, n):
    rng = random.Random(seed)
    edges = [Edge(i, i + 1, rng.randint(1, 20)) for i in range(n - 1)]
    for _ in range(n * 2):
        a, b = rng.randrange(n), rng.randrange(n)
        if a != b:
            edges.append(Edge(a, b, rng.randint(1, 20)))
    return edges


def test_disjoint_set_starts_as_singletons():
    ds = DisjointSet(5)
    assert [ds.find(i) for i in range(5)] == [0, 1, 2, 3, 4]


def test_disjoint_set_union_joins_and_reports():
    ds = DisjointSet(4)
    assert ds.union(0, 1) is True
    assert ds.union(2, 3) is True
    assert ds.find(0) == ds.find(1)
    assert ds.find(0) != ds.find(2)
    assert ds.union(1, 3) is True
    assert ds.find(0) == ds.find(3)
    assert ds.union(0, 2) is False


def test_disjoint_set_rejects_unknown_element():
    with pytest.raises(IndexError):
        DisjointSet(3).find(3)


def test_triangle_picks_two_lightest_edges():
    edges = [Edge(0, 2, 3), Edge(0, 1, 1), Edge(1, 2, 2)]
    assert kruskal_mst(3, edges) == [Edge(0, 1, 1), Edge(1, 2, 2)]


def test_input_list_is_not_reordered():
    edges = [Edge(0, 2, 3), Edge(0, 1, 1), Edge(1, 2, 2)]
    before = list(edges)
    kruskal_mst(3, edges)
    assert edges == before


@pytest.mark.parametrize("seed", range(5))
def test_result_is_spanning_tree_with_sorted_weights(seed):
    n = 8
    mst = kruskal_mst(n, _random_connected(seed, n))
    assert len(mst) == n - 1
    assert _reachable(n, mst) == set(range(n))
    weights = [e.weight for e in mst]
    assert weights == sorted(weights)


def test_disconnected_graph_gives_forest():
    mst = kruskal_mst(4, [Edge(0, 1, 5), Edge(2, 3, 7)])
    assert sorted(mst, key=lambda e: e.weight) == [Edge(0, 1, 5), Edge(2, 3, 7)]
    assert len(mst) < 3


def test_out_of_range_vertex_raises():
    with pytest.raises(VertexError):
        kruskal_mst(2, [Edge(0, 2, 1)])


def test_main_selects_edges(monkeypatch, capsys):
    _feed(monkeypatch, "3", "1", "0", "1", "1", "1", "1", "2", "2", "2", "0")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Selected edge: 0 -- 1 (weight: 1)" in out
    assert "Selected edge: 1 -- 2 (weight: 2)" in out


def test_main_needs_enough_edges(monkeypatch, capsys):
    _feed(monkeypatch, "3", "2", "0")
    main([])
    assert "Not enough edges to form MST" in capsys.readouterr().out