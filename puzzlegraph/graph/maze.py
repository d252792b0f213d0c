"""Build a `Graph` from a rectangular character grid."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np

from puzzlegraph.config import MAZE_CONFIG
from puzzlegraph.graph.indexed_digraph import Graph
from puzzlegraph.logging import get_logger

logger = get_logger(__name__)

Cell = Tuple[int, int]

# Neighbour offsets as (d_row, d_col): left, right, up, down
_STEPS: Tuple[Cell, ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


def from_maze(
    lines: Sequence[str],
    walkable: Optional[str] = None,
    wall: Optional[str] = None,
) -> Graph:
    """Convert a character grid into a graph of ``(row, col)`` cells.

    Every cell whose character is in ``walkable`` becomes a node, in
    row-major order. Each node gets an edge to every 4-neighbour that is
    inside the grid, walkable and not the wall character, in the order
    left, right, up, down.

    Args:
        lines: Grid rows; all must have the same length.
        walkable: Characters that form nodes. Defaults to ``MAZE_CONFIG.walkable``.
        wall: Character that never receives an edge. Defaults to ``MAZE_CONFIG.wall``.

    Returns:
        Graph: Nodes are ``(row, col)`` tuples of ints.

    Raises:
        ValueError: If the rows have different lengths.
    """
    walkable = MAZE_CONFIG.walkable if walkable is None else walkable
    wall = MAZE_CONFIG.wall if wall is None else wall

    if not lines:
        return Graph()
    width = len(lines[0])
    for row, line in enumerate(lines):
        if len(line) != width:
            raise ValueError(
                f"All maze rows must have the same length: row 0 has {width} "
                f"characters, row {row} has {len(line)}."
            )

    grid = np.array([list(line) for line in lines], dtype="<U1").reshape(
        len(lines), width
    )
    mask = np.isin(grid, np.array(list(walkable), dtype="<U1")) & (grid != wall)
    height = grid.shape[0]

    graph = Graph((int(r), int(c)) for r, c in np.argwhere(mask))
    for i, (r, c) in enumerate(graph.nodes):
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < height and 0 <= nc < width and mask[nr, nc]:
                graph.add_edge_by_index(i, graph.index_of((nr, nc)))

    logger.debug(
        f"Built maze graph {height}x{width}: {len(graph)} nodes, "
        f"{graph.edge_count()} edges"
    )
    return graph
