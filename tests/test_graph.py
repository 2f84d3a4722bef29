import io

import pytest

from algokit.graph import (
    Graph,
    has_directed_cycle,
    has_undirected_cycle,
    in_degrees,
    main,
    topological_sort_bfs,
)


def _two_components() -> Graph:
    graph = Graph(6)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(1, 3)
    graph.add_edge(4, 5)
    return graph


def test_undirected_edge_goes_both_ways():
    graph = Graph(3)
    graph.add_edge(0, 2)
    assert graph.neighbours(0) == [2]
    assert graph.neighbours(2) == [0]
    assert graph.neighbours(1) == []


def test_directed_edge_goes_one_way():
    graph = Graph(3)
    graph.add_edge(0, 2, directed=True)
    assert graph.neighbours(0) == [2]
    assert graph.neighbours(2) == []


def test_format_lists_every_node():
    graph = Graph(3)
    graph.add_edge(0, 1)
    assert graph.format() == "0->1,\n1->0,\n2->"


def test_add_edge_rejects_unknown_node():
    graph = Graph(2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 2)
    with pytest.raises(IndexError):
        graph.add_edge(-1, 0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Graph(-1)


def test_bfs_stays_in_first_component():
    graph = _two_components()
    order = graph.bfs()
    assert order[0] == 0
    assert sorted(order) == [0, 1, 2, 3]


def test_bfs_on_path_follows_path():
    graph = Graph(4)
    for u, v in [(0, 1), (1, 2), (2, 3)]:
        graph.add_edge(u, v)
    assert graph.bfs() == [0, 1, 2, 3]


def test_bfs_of_empty_graph():
    assert Graph(0).bfs() == []


def test_bfs_all_visits_each_node_once():
    graph = _two_components()
    order = graph.bfs_all()
    assert sorted(order) == list(range(6))
    assert order.index(4) > order.index(3)


def test_bfs_all_visits_by_level():
    graph = _two_components()
    order = graph.bfs_all()
    assert order.index(1) < order.index(3)
    assert order.index(2) < order.index(3)


def test_dfs_all_goes_deep_first():
    graph = _two_components()
    order = graph.dfs_all()
    assert sorted(order) == list(range(6))
    assert order.index(3) < order.index(2)


def test_dfs_and_bfs_cover_isolated_nodes():
    graph = Graph(3)
    assert graph.dfs_all() == [0, 1, 2]
    assert graph.bfs_all() == [0, 1, 2]


def test_in_degrees_counts_incoming_edges():
    assert in_degrees([[1, 2], [2], []]) == [0, 1, 2]


def test_topological_sort_respects_edges():
    adjacency = [[1, 2], [3], [3], [4], []]
    order = topological_sort_bfs(adjacency)
    assert sorted(order) == list(range(5))
    position = {node: index for index, node in enumerate(order)}
    for u, adjacent in enumerate(adjacency):
        for v in adjacent:
            assert position[u] < position[v]


def test_topological_sort_is_partial_with_cycle():
    adjacency = [[1], [2], [1]]
    assert topological_sort_bfs(adjacency) == [0]


@pytest.mark.parametrize(
    "n, edges, expected",
    [
        (3, [(1, 2), (2, 3), (3, 1)], True),
        (3, [(1, 2), (2, 3), (1, 3)], False),
        (2, [(1, 1)], True),
        (4, [], False),
    ],
)
def test_has_directed_cycle(n, edges, expected):
    assert has_directed_cycle(n, edges) is expected


def test_has_directed_cycle_rejects_out_of_range():
    with pytest.raises(IndexError):
        has_directed_cycle(2, [(0, 1)])


@pytest.mark.parametrize(
    "edges, expected",
    [
        ([(1, 2), (2, 3), (3, 1)], True),
        ([(1, 2), (2, 3), (3, 4)], False),
        ([(1, 2), (3, 4), (4, 5), (5, 3)], True),
        ([], False),
    ],
)
def test_has_undirected_cycle(edges, expected):
    assert has_undirected_cycle(edges) is expected


def test_main_prints_graph_and_order(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n0 1\n1 2\n"))
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["0->1,", "1->0,2,", "2->1,", "0 1 2"]


def test_main_reports_missing_edges(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n0 1\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err