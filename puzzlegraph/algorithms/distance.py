"""Shortest-distance algorithms.

Implements unit-weight Dijkstra for one or many targets, a weighted Dijkstra
for decorated graphs, and Floyd-Warshall for all pairs.

Notes:
    In the unit-weight searches every edge costs 1, so a node is finalized the
    first time it is discovered. The min-queue is ordered by
    ``(distance, index)``; equal distances pop in index order, keeping results
    deterministic. An unreachable target yields ``None`` rather than an error.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from puzzlegraph.config import SEARCH_CONFIG
from puzzlegraph.graph.indexed_digraph import Graph, NodeIndex, NodeValue
from puzzlegraph.logging import get_logger

logger = get_logger(__name__)

Distance = int


def distance_between(graph: Graph, a: NodeValue, b: NodeValue) -> Optional[Distance]:
    """Number of edges on a shortest path from ``a`` to ``b``.

    Args:
        graph: Graph to search; edge labels, if any, are ignored.
        a: Start node value.
        b: Target node value.

    Returns:
        The distance, ``0`` when ``a == b``, or ``None`` when ``b`` is
        unreachable from ``a``. A node is always at distance 0 from itself,
        even without a cycle through it, in agreement with
        `distances_between`. This differs from a search that marks the start
        visited and only reports nodes it reaches again, which gives ``None``.

    Raises:
        KeyError: If ``a`` or ``b`` is not a node of ``graph``.
    """
    src = graph.index_of(a)
    dst = graph.index_of(b)
    if src == dst:
        return 0

    visited = [False] * len(graph)
    visited[src] = True
    min_pq: List[Tuple[Distance, NodeIndex]] = [(0, src)]
    while min_pq:
        dist, node = heappop(min_pq)
        next_dist = dist + 1
        for nxt in graph.edges_from_index(node):
            if visited[nxt]:
                continue
            if nxt == dst:
                return next_dist
            visited[nxt] = True
            heappush(min_pq, (next_dist, nxt))
    return None


def distances_between(
    graph: Graph, a: NodeValue, targets: Sequence[NodeValue]
) -> List[Optional[Distance]]:
    """Distances from ``a`` to each of ``targets``.

    Walks the whole reachable part of the graph (no early exit) and records
    the arrival distance of every target; ``a`` itself is at distance 0.

    Args:
        graph: Graph to search.
        a: Start node value.
        targets: Node values to measure; duplicates are allowed.

    Returns:
        A list aligned with ``targets`` holding a distance or ``None``.

    Raises:
        KeyError: If ``a`` or any target is not a node of ``graph``.
    """
    src = graph.index_of(a)
    positions: Dict[NodeIndex, List[int]] = {}
    for pos, value in enumerate(targets):
        positions.setdefault(graph.index_of(value), []).append(pos)

    result: List[Optional[Distance]] = [None] * len(targets)

    def record(idx: NodeIndex, dist: Distance) -> None:
        for pos in positions.get(idx, ()):
            result[pos] = dist

    visited = [False] * len(graph)
    visited[src] = True
    record(src, 0)
    min_pq: List[Tuple[Distance, NodeIndex]] = [(0, src)]
    while min_pq:
        dist, node = heappop(min_pq)
        next_dist = dist + 1
        for nxt in graph.edges_from_index(node):
            if visited[nxt]:
                continue
            visited[nxt] = True
            record(nxt, next_dist)
            heappush(min_pq, (next_dist, nxt))
    return result


def there_is_a_path_between(graph: Graph, a: NodeValue, b: NodeValue) -> bool:
    return distance_between(graph, a, b) is not None


def weighted_distance_between(
    graph: Graph, a: NodeValue, b: NodeValue
) -> Optional[Distance]:
    """Cheapest total edge weight from ``a`` to ``b``.

    Uses ``graph.edge_weight``, so on a DecoratedGraph the edge labels are the
    costs and on a plain Graph the result equals `distance_between`. Labels
    must be non-negative numbers.

    Returns:
        The total weight, ``0`` when ``a == b``, or ``None`` when unreachable.
    """
    src = graph.index_of(a)
    dst = graph.index_of(b)

    costs: Dict[NodeIndex, Distance] = {src: 0}
    min_pq: List[Tuple[Distance, NodeIndex]] = [(0, src)]
    while min_pq:
        cost, node = heappop(min_pq)
        if cost > costs[node]:
            continue
        if node == dst:
            return cost
        for nxt in graph.edges_from_index(node):
            new_cost = cost + graph.edge_weight(node, nxt)
            if nxt not in costs or new_cost < costs[nxt]:
                costs[nxt] = new_cost
                heappush(min_pq, (new_cost, nxt))
    return None


def all_distances(graph: Graph) -> np.ndarray:
    """All-pairs shortest distances by Floyd-Warshall.

    The matrix starts at ``inf`` everywhere except direct edges (1) and is
    relaxed through every intermediate node ``k``; ``inf`` entries stay
    ``inf`` through the relaxation. The diagonal is finite only for nodes on
    a cycle, holding the length of the shortest cycle through them.

    Args:
        graph: Graph to measure; edge labels, if any, are ignored.

    Returns:
        ``n x n`` float array; entry ``[i, j]`` is the distance from index
        ``i`` to index ``j`` or ``inf`` when there is no path.
    """
    n = len(graph)
    if SEARCH_CONFIG.exceeds_all_pairs(n):
        logger.warning(f"Floyd-Warshall on {n} nodes runs O(n^3) relaxations")

    dist = np.full((n, n), np.inf)
    for i, j in graph.index_edges():
        dist[i, j] = 1.0

    for k in range(n):
        # inf + x stays inf, so unreachable legs never win the minimum
        np.minimum(dist, dist[:, k, np.newaxis] + dist[np.newaxis, k, :], out=dist)

    logger.debug(
        f"Computed all-pairs distances for {n} nodes, "
        f"{int(np.isfinite(dist).sum())} reachable pairs"
    )
    return dist
