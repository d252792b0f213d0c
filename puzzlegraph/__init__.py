"""puzzlegraph: graph search toolkit for grid and graph puzzles.

puzzlegraph provides an indexed directed graph, a maze-to-graph builder, and
shortest-path, path-enumeration, contraction and longest-path algorithms for
puzzle-sized inputs (tens to a few hundred nodes).

Primary API:
    Graph, DecoratedGraph - Graph containers keyed by node value
    from_maze() - Build a Graph from a character grid
    distance_between(), all_distances() - Shortest distances
    bfs_acyclic_paths(), paths_between() - Path enumeration
    contract(), longest_path_length() - Corridor contraction and longest path

Example:
    from puzzlegraph import from_maze, contract, longest_path_length

    graph = from_maze(["#.###", "#...#", "###.#"], walkable=".", wall="#")
    corridors = contract(graph)
    longest_path_length(corridors, (0, 1), (2, 3))
"""

from __future__ import annotations

from puzzlegraph import cli, logging
from puzzlegraph._version import __version__
from puzzlegraph.algorithms import (
    all_distances,
    all_paths,
    all_paths_size,
    bfs_acyclic_paths,
    contract,
    distance_between,
    distances_between,
    longest_path,
    longest_path_length,
    nodes_between,
    paths_between,
    there_is_a_path_between,
    weighted_distance_between,
)
from puzzlegraph.graph import DecoratedGraph, Graph, from_maze
from puzzlegraph.graph.convert import from_networkx, to_networkx

__all__ = [
    # Version
    "__version__",
    # Graphs
    "Graph",
    "DecoratedGraph",
    "from_maze",
    # Shortest distances
    "distance_between",
    "distances_between",
    "there_is_a_path_between",
    "weighted_distance_between",
    "all_distances",
    # Path enumeration
    "all_paths",
    "paths_between",
    "nodes_between",
    "all_paths_size",
    "bfs_acyclic_paths",
    # Contraction and longest path
    "contract",
    "longest_path",
    "longest_path_length",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
