"""Configuration classes for puzzlegraph components."""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Size thresholds above which expensive searches log a warning.

    The thresholds never change results; a search above its threshold still
    runs to completion.
    """

    # Floyd-Warshall, path composition and path counting are O(n^3) or worse
    all_pairs_warn_nodes: int = 300

    # Exhaustive simple-path search is exponential in the node count
    exhaustive_warn_nodes: int = 40

    def exceeds_all_pairs(self, node_count: int) -> bool:
        return node_count > self.all_pairs_warn_nodes

    def exceeds_exhaustive(self, node_count: int) -> bool:
        return node_count > self.exhaustive_warn_nodes


@dataclass
class MazeConfig:
    """Default characters for maze grids."""

    walkable: str = "."
    wall: str = "#"


# Global configuration instances
SEARCH_CONFIG = SearchConfig()
MAZE_CONFIG = MazeConfig()
