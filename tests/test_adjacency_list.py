import io

import pytest

from dsalgo.adjacency_list import AdjacencyListGraph, VertexError, main


@pytest.fixture
def graph():
    return AdjacencyListGraph(3)


@pytest.mark.parametrize("directed, reverse", [(False, True), (True, False)])
def test_add_edge_direction(graph, directed, reverse):
    graph.add_edge(0, 1, 4, directed=directed)
    assert graph.has_edge(0, 1)
    assert graph.has_edge(1, 0) is reverse
    assert graph.degree(0) == 1
    assert graph.degree(2) == 0


def test_neighbors_are_newest_first(graph):
    graph.add_edge(0, 1, 5, directed=True)
    graph.add_edge(0, 2, 7, directed=True)
    assert graph.neighbors(0) == ((2, 7), (1, 5))


@pytest.mark.parametrize("directed, reverse_kept", [(False, False), (True, True)])
def test_remove_edge(graph, directed, reverse_kept):
    graph.add_edge(0, 1, 2)
    graph.remove_edge(0, 1, directed=directed)
    assert not graph.has_edge(0, 1)
    assert graph.has_edge(1, 0) is reverse_kept


def test_remove_missing_edge_raises(graph):
    with pytest.raises(KeyError):
        graph.remove_edge(0, 2)


def test_invalid_vertices(graph):
    with pytest.raises(VertexError):
        graph.add_edge(0, 3, 1)
    with pytest.raises(VertexError):
        graph.degree(-1)
    assert graph.has_edge(0, 5) is False


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        AdjacencyListGraph(-1)


def test_render_and_info(graph):
    graph.add_edge(0, 1, 5, directed=True)
    graph.add_edge(0, 2, 7, directed=True)
    assert "[0] -> 2(w:7) -> 1(w:5)" in graph.render()
    info = graph.info()
    assert "Number of vertices: 3" in info
    assert "Adjacent vertices: None" in info


def test_main_adds_edge(monkeypatch, capsys):
    lines = ["3", "1", "0", "1", "4", "0", "3", "0", "1", "0"]
    monkeypatch.setattr("sys.stdin", io.StringIO("\n".join(lines) + "\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Edge added successfully" in out
    assert "Edge exists" in out