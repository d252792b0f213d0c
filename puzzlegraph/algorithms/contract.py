"""Collapse corridors of out-degree-2 nodes into weighted edges.

Decision nodes (out-degree other than 2) survive; interior nodes (out-degree
exactly 2) are folded into the edge joining the decision nodes at both ends
of their corridor. The corridor edge is recorded in both directions, which
assumes a symmetric graph such as one built by `from_maze`.
"""

from __future__ import annotations

from typing import List, Optional, Set

from puzzlegraph.graph.decorated import DecoratedGraph
from puzzlegraph.graph.indexed_digraph import Graph, NodeIndex
from puzzlegraph.logging import get_logger

logger = get_logger(__name__)


def _record(
    result: DecoratedGraph, a: NodeIndex, b: NodeIndex, weight: int
) -> Optional[int]:
    """Store ``a -> b``; returns the weight of a shorter parallel edge dropped."""
    current = result.labels.get((a, b))
    if current is None:
        result.add_edge_by_index(a, b, weight)
        return None
    if weight > current:
        result.add_edge_by_index(a, b, weight)
        return current
    return weight if weight < current else None


def contract(graph: Graph) -> DecoratedGraph:
    """Contract ``graph`` to its decision nodes.

    The result holds exactly the decision nodes, in their original order.
    A direct edge between two decision nodes is kept with weight 1. Every
    corridor of ``k`` interior nodes becomes a pair of opposite edges of
    weight ``k + 1`` between the decision nodes it joins. Interior nodes are
    processed lowest index first and each is consumed exactly once.

    When several corridors (or a corridor and a direct edge) join the same
    two decision nodes only the longest is kept, as suits longest-path
    searches, and a warning is logged. Shortest distances measured on such
    a contraction are then upper bounds of the true ones.

    Args:
        graph: Graph to contract, normally symmetric.

    Returns:
        DecoratedGraph whose labels are corridor lengths in edges.

    Raises:
        ValueError: If a ring of interior nodes touches no decision node.
    """
    n = len(graph)
    successors: List[List[NodeIndex]] = [graph.edges_from_index(i) for i in range(n)]
    is_decision = [len(succ) != 2 for succ in successors]

    result = DecoratedGraph(graph.nodes[i] for i in range(n) if is_decision[i])
    new_index = {i: result.index_of(graph.nodes[i]) for i in range(n) if is_decision[i]}

    for i in range(n):
        if is_decision[i]:
            for j in successors[i]:
                if is_decision[j]:
                    _record(result, new_index[i], new_index[j], 1)

    consumed: Set[NodeIndex] = set()
    for v in range(n):
        if is_decision[v] or v in consumed:
            continue

        corridor: Set[NodeIndex] = {v}
        ends: List[NodeIndex] = []
        for w in successors[v]:
            x = w
            while not is_decision[x]:
                corridor.add(x)
                x = next((y for y in successors[x] if y not in corridor), -1)
                if x < 0:
                    raise ValueError(
                        f"Node '{graph.nodes[v]}' lies on a closed corridor "
                        "without decision nodes."
                    )
            ends.append(x)

        weight = len(corridor) + 1
        a, b = new_index[ends[0]], new_index[ends[1]]
        dropped = _record(result, a, b, weight)
        _record(result, b, a, weight)
        if dropped is not None:
            logger.warning(
                f"Parallel corridors join '{result.nodes[a]}' and "
                f"'{result.nodes[b]}'; kept the longest, dropped one of length "
                f"{dropped}. Shortest distances on the contraction are upper bounds."
            )
        consumed |= corridor

    logger.debug(
        f"Contracted {n} nodes to {len(result)} decision nodes "
        f"({len(consumed)} interior nodes folded)"
    )
    return result
