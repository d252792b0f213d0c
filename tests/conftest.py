"""Shared graph and maze fixtures."""

from __future__ import annotations

from typing import List

import pytest

from puzzlegraph.graph import Graph

# Hiking-trail maze: '.' paths, '#' forest, slopes '<>^v'.
# Start (0, 1), end (22, 21). Longest hike obeying slopes is 94 steps,
# ignoring slopes 154 steps.
TRAIL_MAZE: List[str] = [
    "#.#####################",
    "#.......#########...###",
    "#######.#########.#.###",
    "###.....#.>.>.###.#.###",
    "###v#####.#v#.###.#.###",
    "###.>...#.#.#.....#...#",
    "###v###.#.#.#########.#",
    "###...#.#.#.......#...#",
    "#####.#.#.#######.#.###",
    "#.....#.#.#.......#...#",
    "#.#####.#.#.#########v#",
    "#.#...#...#...###...>.#",
    "#.#.#v#######v###.###v#",
    "#...#.>.#...>.>.#.###.#",
    "#####v#.#.###v#.#.###.#",
    "#.....#...#...#.#.#...#",
    "#.#########.###.#.#.###",
    "#...###...#...#...#.###",
    "###.###.#.###v#####v###",
    "#...#...#.#.>.>.#.>.###",
    "#.###.###.#.###.#.#v###",
    "#.....###...###...#...#",
    "#####################.#",
]


@pytest.fixture
def trail_maze() -> List[str]:
    return list(TRAIL_MAZE)


@pytest.fixture
def diamond() -> Graph:
    #      ┌──►b──┐
    #   a──┤      ├──►d
    #      └──►c──┘
    g = Graph.new_with_nodes(["a", "b", "c", "d"])
    g.add_edge("a", "b")
    g.add_edge("b", "d")
    g.add_edge("a", "c")
    g.add_edge("c", "d")
    return g


@pytest.fixture
def shortcut_dag() -> Graph:
    #   a──►b──►c──►d──►e
    #   └──────────►┘
    g = Graph.new_with_nodes(["a", "b", "c", "d", "e"])
    g.add_edge("a", "d")
    g.add_edge("a", "b")
    g.add_edge("b", "c")
    g.add_edge("c", "d")
    g.add_edge("d", "e")
    return g


@pytest.fixture
def ring() -> Graph:
    #   a──►b──►c──►d──►a
    g = Graph.new_with_nodes(["a", "b", "c", "d"])
    g.add_edge("a", "b")
    g.add_edge("b", "c")
    g.add_edge("c", "d")
    g.add_edge("d", "a")
    return g


@pytest.fixture
def chain5() -> Graph:
    #   a◄──►b◄──►c◄──►d◄──►e
    g = Graph.new_with_nodes(["a", "b", "c", "d", "e"])
    for u, v in [("a", "b"), ("b", "c"), ("c", "d"), ("d", "e")]:
        g.add_edge(u, v)
        g.add_edge(v, u)
    return g
