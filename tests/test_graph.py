import pytest

from dsdrills.graph import DirectedGraph, UndirectedGraph, format_closure, format_path


def _sample_graph():
    g = DirectedGraph(6)
    for i, j in [(1, 2), (1, 3), (2, 4), (3, 4), (4, 5), (5, 6)]:
        g.add_edge(i, j)
    return g


def _tree_graph(extra=()):
    g = DirectedGraph(15)
    edges = [(1, 2), (1, 3), (2, 4), (2, 5), (3, 6), (5, 7), (5, 8), (4, 9),
             (8, 10), (9, 11), (6, 12), (10, 13), (12, 14), (13, 15)]
    for i, j in list(edges) + list(extra):
        g.add_edge(i, j)
    return g


def _assert_valid_path(g, path, source, destination):
    assert path[0] == source
    assert path[-1] == destination
    for a, b in zip(path, path[1:]):
        assert g.has_edge(a, b)


def test_edges_are_directed():
    g = _sample_graph()
    assert g.has_edge(1, 2)
    assert not g.has_edge(2, 1)
    g.remove_edge(1, 2)
    assert not g.has_edge(1, 2)


def test_out_of_range_edges_ignored_but_queries_raise():
    g = DirectedGraph(3)
    g.add_edge(0, 4)
    assert g.matrix_text() == "0 0 0\n0 0 0\n0 0 0"
    with pytest.raises(IndexError):
        g.has_edge(0, 1)


def test_find_path_sample():
    g = _sample_graph()
    path = g.find_path(1, 6)
    assert path == [1, 2, 4, 5, 6]
    _assert_valid_path(g, path, 1, 6)


def test_find_path_is_shortest_with_shortcuts():
    plain = _tree_graph()
    long_path = plain.find_path(1, 15)
    _assert_valid_path(plain, long_path, 1, 15)
    shortcut = _tree_graph([(6, 9), (11, 15), (14, 15), (7, 15), (15, 1)])
    short_path = shortcut.find_path(1, 15)
    _assert_valid_path(shortcut, short_path, 1, 15)
    assert len(short_path) < len(long_path)


def test_path_to_self_and_missing_path():
    g = _sample_graph()
    assert g.find_path(3, 3) == [3]
    assert g.find_path(6, 1) is None


def test_find_path_out_of_range():
    with pytest.raises(IndexError):
        _sample_graph().find_path(1, 7)


def test_format_path():
    assert format_path(None) == "No path found."
    assert format_path([1, 2]) == "Path length: 1\nPath: 1 2"


def test_undirected_edges_symmetric():
    g = UndirectedGraph(4)
    g.add_edge(1, 2)
    assert g.has_edge(2, 1)
    g.remove_edge(2, 1)
    assert not g.has_edge(1, 2)


def test_closure_two_components():
    g = UndirectedGraph(4)
    g.add_edge(1, 2)
    g.add_edge(3, 4)
    assert format_closure(g.transitive_closure()) == "1 1 0 0\n1 1 0 0\n0 0 1 1\n0 0 1 1"


def test_closure_matches_components():
    g = UndirectedGraph(7)
    for i, j in [(1, 2), (3, 4), (5, 6), (6, 7)]:
        g.add_edge(i, j)
    closure = g.transitive_closure()
    components = [{1, 2}, {3, 4}, {5, 6, 7}]
    for i in range(1, 8):
        for j in range(1, 8):
            same = any(i in c and j in c for c in components)
            assert closure[i - 1][j - 1] == same
            assert closure[i - 1][j - 1] == closure[j - 1][i - 1]


def test_isolated_vertex_not_reachable_from_itself():
    g = UndirectedGraph(3)
    g.add_edge(1, 2)
    closure = g.transitive_closure()
    assert not closure[2][2]
    assert closure[0][0]