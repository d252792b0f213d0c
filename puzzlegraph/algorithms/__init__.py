"""Pathfinding and analysis algorithms over `Graph` and `DecoratedGraph`."""

from puzzlegraph.algorithms.contract import contract
from puzzlegraph.algorithms.distance import (
    all_distances,
    distance_between,
    distances_between,
    there_is_a_path_between,
    weighted_distance_between,
)
from puzzlegraph.algorithms.longest import longest_path, longest_path_length
from puzzlegraph.algorithms.paths import (
    all_paths,
    all_paths_size,
    bfs_acyclic_paths,
    nodes_between,
    paths_between,
)

__all__ = [
    "all_distances",
    "all_paths",
    "all_paths_size",
    "bfs_acyclic_paths",
    "contract",
    "distance_between",
    "distances_between",
    "longest_path",
    "longest_path_length",
    "nodes_between",
    "paths_between",
    "there_is_a_path_between",
    "weighted_distance_between",
]
