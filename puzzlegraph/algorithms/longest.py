"""Longest simple path by exhaustive backtracking.

The search has no memoization and is exponential in the node count. It is
practical on graphs of a few dozen nodes, which is what `contract` produces
from puzzle mazes.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from puzzlegraph.config import SEARCH_CONFIG
from puzzlegraph.graph.indexed_digraph import Graph, NodeIndex, NodeValue
from puzzlegraph.logging import get_logger

logger = get_logger(__name__)


def longest_path(
    graph: Graph, start: NodeValue, end: NodeValue
) -> Optional[Tuple[int, List[NodeValue]]]:
    """Heaviest simple path from ``start`` to ``end``.

    Walks an explicit stack of ``(node, accumulated weight, path)`` states;
    the path tuple doubles as the visited set. Extensions onto a node already
    on the path are pruned and a path stops once it reaches ``end``. Edge
    weights come from ``graph.edge_weight`` (labels on a DecoratedGraph, 1
    per edge otherwise).

    Args:
        graph: Graph to search, typically the output of `contract`.
        start: Start node value.
        end: Target node value.

    Returns:
        ``(weight, path)`` for the heaviest path, the first one found on
        ties, or ``None`` when ``end`` is unreachable. ``start == end``
        yields ``(0, [start])``.
    """
    src = graph.index_of(start)
    dst = graph.index_of(end)
    if src == dst:
        return 0, [start]
    if SEARCH_CONFIG.exceeds_exhaustive(len(graph)):
        logger.warning(
            f"Longest-path search over {len(graph)} nodes is exponential; "
            "contract the graph first if it does not finish"
        )

    best: Optional[Tuple[int, Tuple[NodeIndex, ...]]] = None
    stack: List[Tuple[NodeIndex, int, Tuple[NodeIndex, ...]]] = [(src, 0, (src,))]
    explored = 0
    while stack:
        node, weight, path = stack.pop()
        explored += 1
        for nxt in graph.edges_from_index(node):
            if nxt in path:
                continue
            total = weight + graph.edge_weight(node, nxt)
            if nxt == dst:
                if best is None or total > best[0]:
                    best = (total, path + (nxt,))
            else:
                stack.append((nxt, total, path + (nxt,)))

    logger.debug(f"Longest-path search explored {explored} partial paths")
    if best is None:
        return None
    return best[0], [graph.nodes[i] for i in best[1]]


def longest_path_length(
    graph: Graph, start: NodeValue, end: NodeValue
) -> Optional[int]:
    """Weight of the heaviest simple path, or ``None`` when unreachable."""
    found = longest_path(graph, start, end)
    return None if found is None else found[0]
