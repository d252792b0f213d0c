import pytest

from puzzlegraph.algorithms import distance_between, distances_between
from puzzlegraph.graph import from_maze


def _nodes_with_edges(graph):
    return {v for v in graph if graph.edges_from(v)}


def test_ring_maze():
    graph = from_maze(["...", ".#.", "..."], ".", "#")
    assert len(graph) == 8
    assert (1, 1) not in graph
    # every ring cell has two neighbours
    assert len(_nodes_with_edges(graph)) == 8
    assert all(graph.out_degree(v) == 2 for v in graph)
    assert distance_between(graph, (0, 0), (2, 2)) == 4
    assert distance_between(graph, (0, 0), (0, 2)) == 2
    assert distances_between(
        graph,
        (0, 0),
        [(0, 0), (1, 0), (0, 1), (0, 2), (2, 0), (2, 1), (2, 2)],
    ) == [0, 1, 1, 2, 2, 3, 4]


def test_maze_with_isolated_cell():
    graph = from_maze(["..#.", ".###", "...."], ".", "#")
    assert len(graph) == 8
    assert _nodes_with_edges(graph) == {
        (0, 0),
        (0, 1),
        (1, 0),
        (2, 0),
        (2, 1),
        (2, 2),
        (2, 3),
    }
    assert distances_between(graph, (0, 0), [(0, 0), (1, 0), (2, 3), (0, 3)]) == [
        0,
        1,
        5,
        None,
    ]


def test_nodes_are_row_major_and_edges_left_right_up_down():
    graph = from_maze(["...", "...", "..."])
    assert graph.nodes[:4] == [(0, 0), (0, 1), (0, 2), (1, 0)]
    assert graph.edges_from((1, 1)) == [(1, 0), (1, 2), (0, 1), (2, 1)]
    assert all(isinstance(c, int) for cell in graph for c in cell)


def test_multiple_walkable_characters():
    graph = from_maze(["#.>.#", "#v###", "#.###"], walkable=".<>^v", wall="#")
    assert len(graph) == 5
    assert graph.edges_from((0, 2)) == [(0, 1), (0, 3)]
    assert graph.edges_from((1, 1)) == [(0, 1), (2, 1)]


def test_non_walkable_non_wall_cells_get_no_node_or_edge():
    graph = from_maze([".x."], walkable=".", wall="#")
    assert graph.nodes == [(0, 0), (0, 2)]
    assert graph.edge_count() == 0


def test_unequal_rows_rejected():
    with pytest.raises(ValueError, match="same length"):
        from_maze(["...", ".."])


def test_empty_maze():
    graph = from_maze([])
    assert len(graph) == 0
