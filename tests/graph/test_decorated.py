import pytest

from puzzlegraph.graph import DecoratedGraph


def test_decorated_graph_basics():
    g = DecoratedGraph([3, 1, 2])
    assert len(g) == 3
    assert g.index_of(3) == 0
    g.add_node(4)
    assert len(g) == 4
    g.add_edge(3, 4, "a")
    assert g.labeled_edges_from(3) == [(4, "a")]
    assert g.edges_from(3) == [4]
    assert g.label(3, 4) == "a"


def test_every_label_is_an_edge():
    g = DecoratedGraph.new_with_nodes(["x", "y", "z"])
    g.add_edge("x", "y", 5)
    g.add_edge_by_index(2, 0, 7)
    assert set(g.labels) == set(g.index_edges())
    assert g.labels == {(0, 1): 5, (2, 0): 7}


def test_re_adding_an_edge_replaces_its_label():
    g = DecoratedGraph.new_with_nodes(["x", "y"])
    g.add_edge("x", "y", 5)
    g.add_edge("x", "y", 9)
    assert g.edge_count() == 1
    assert g.label("x", "y") == 9


def test_edge_weight_and_total_weight():
    g = DecoratedGraph.new_with_nodes(["x", "y", "z"])
    g.add_edge("x", "y", 5)
    g.add_edge("y", "z", 2)
    assert g.edge_weight(0, 1) == 5
    assert g.total_weight() == 7


def test_label_missing_edge():
    g = DecoratedGraph.new_with_nodes(["x", "y"])
    with pytest.raises(KeyError, match="No edge"):
        g.label("x", "y")
