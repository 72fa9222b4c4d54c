import pytest

from dsalgo.adjacency_list import VertexError
from dsalgo.graph_dfs import (
    UndirectedGraph,
    connected_components,
    dfs_iterative,
    dfs_recursive,
    main,
)


def _graph(n, edges):
    graph = UndirectedGraph(n)
    for src, dest in edges:
        graph.add_edge(src, dest)
    return graph


EDGES = [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (5, 6)]


@pytest.mark.parametrize("search", [dfs_recursive, dfs_iterative])
def test_dfs_visits_component_once(search):
    order = search(_graph(7, EDGES), 0)
    assert order[0] == 0
    assert sorted(order) == [0, 1, 2, 3, 4]
    assert len(order) == len(set(order))


def test_recursive_order_follows_tree_edges():
    graph = _graph(7, EDGES)
    order = dfs_recursive(graph, 0)
    for position in range(1, len(order)):
        assert any(
            earlier in graph.neighbors(order[position]) for earlier in order[:position]
        )


def test_recursive_and_iterative_orders_differ_as_expected():
    graph = _graph(3, [(0, 1), (0, 2)])
    assert graph.neighbors(0) == (2, 1)
    assert dfs_recursive(graph, 0) == [0, 2, 1]
    assert dfs_iterative(graph, 0) == [0, 1, 2]


def test_connected_components_partition_vertices():
    components = connected_components(_graph(7, EDGES))
    assert [sorted(c) for c in components] == [[0, 1, 2, 3, 4], [5, 6]]
    assert sorted(v for c in components for v in c) == list(range(7))


def test_isolated_vertex_is_own_component():
    components = connected_components(_graph(5, [(0, 1), (2, 3)]))
    assert len(components) == 3
    assert components[-1] == [4]


def test_invalid_vertex_and_size():
    graph = UndirectedGraph(2)
    with pytest.raises(VertexError):
        graph.add_edge(0, 2)
    with pytest.raises(VertexError):
        dfs_recursive(graph, 3)
    with pytest.raises(ValueError):
        UndirectedGraph(101)


def test_render_lists_neighbors():
    assert "[0] -> 2 -> 1" in _graph(3, [(0, 1), (0, 2)]).render()


def test_main_components(monkeypatch, capsys):
    answers = iter(["3", "1", "0", "1", "5", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Component 1: 0 1" in out
    assert "Total number of connected components: 2" in out