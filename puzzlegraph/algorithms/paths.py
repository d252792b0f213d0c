"""Path enumeration and counting.

`all_paths`, `paths_between`, `nodes_between` and `all_paths_size` compose
paths through every intermediate node in turn. They are meant for acyclic
graphs: on a graph with cycles the composition is not bounded by path length
and the results (paths or counts) are not meaningful. Cycles are not detected.

`bfs_acyclic_paths` is an exhaustive depth-first search that never revisits a
node on the current path, so it terminates on any graph.
"""

from __future__ import annotations

from itertools import product
from typing import Dict, List, Tuple

import numpy as np

from puzzlegraph.config import SEARCH_CONFIG
from puzzlegraph.graph.indexed_digraph import Graph, NodeIndex, NodeValue
from puzzlegraph.logging import get_logger

logger = get_logger(__name__)

IndexPath = List[NodeIndex]
PathSets = Dict[Tuple[NodeIndex, NodeIndex], List[IndexPath]]


def all_paths(graph: Graph) -> PathSets:
    """Paths between every ordered pair of indices.

    A path from ``i`` to ``j`` lists the nodes from ``i`` up to, but not
    including, ``j``. Direct edges seed ``[[i]]``; then, for every middle
    node ``m``, every ``i -> m`` path is joined with every ``m -> j`` path and
    appended to the ``(i, j)`` entry. Entries accumulate across middles.

    Args:
        graph: An acyclic graph.

    Returns:
        Mapping ``(i, j) -> list of index paths`` with an entry for every
        ordered pair (possibly an empty list).
    """
    n = len(graph)
    if SEARCH_CONFIG.exceeds_all_pairs(n):
        logger.warning(f"Composing all paths over {n} nodes may not finish")

    result: PathSets = {(i, j): [] for i in range(n) for j in range(n)}
    for i, j in graph.index_edges():
        result[(i, j)] = [[i]]

    for middle in range(n):
        for src in range(n):
            head = result[(src, middle)]
            if not head:
                continue
            for dst in range(n):
                tail = result[(middle, dst)]
                if not tail:
                    continue
                joined = [fm + mt for fm, mt in product(head, tail)]
                result[(src, dst)].extend(joined)
    return result


def paths_between(
    graph: Graph, start: NodeValue, end: NodeValue
) -> List[List[NodeValue]]:
    """Node-value paths from ``start`` towards ``end`` (``end`` excluded).

    Returns an empty list when ``end`` is unreachable. Acyclic graphs only.
    """
    src = graph.index_of(start)
    dst = graph.index_of(end)
    return [[graph.nodes[i] for i in path] for path in all_paths(graph)[(src, dst)]]


def nodes_between(graph: Graph, start: NodeValue, end: NodeValue) -> List[NodeValue]:
    """Distinct nodes lying on any path from ``start`` to ``end``.

    Includes ``start`` but not ``end`` (matching `paths_between`), ordered by
    index. Acyclic graphs only.
    """
    src = graph.index_of(start)
    dst = graph.index_of(end)
    seen = {i for path in all_paths(graph)[(src, dst)] for i in path}
    return [graph.nodes[i] for i in sorted(seen)]


def all_paths_size(graph: Graph) -> np.ndarray:
    """Number of distinct paths between every ordered pair of indices.

    Dynamic programming over intermediate nodes: direct edges count 1, then
    ``count[i, j] += count[i, m] * count[m, j]`` for every middle ``m``. The
    result is only correct when ``graph`` is acyclic.

    Returns:
        ``n x n`` object array of Python ints (no overflow).
    """
    n = len(graph)
    if SEARCH_CONFIG.exceeds_all_pairs(n):
        logger.warning(f"Counting paths over {n} nodes runs O(n^3) updates")

    counts = np.zeros((n, n), dtype=object)
    for i, j in graph.index_edges():
        counts[i, j] = 1
    for middle in range(n):
        counts += np.outer(counts[:, middle], counts[middle, :])
    return counts


def bfs_acyclic_paths(
    graph: Graph, start: NodeValue, end: NodeValue
) -> List[IndexPath]:
    """Enumerate simple paths from ``start`` by explicit-stack depth-first search.

    A node already on the current path is never visited again. A path is
    recorded when it reaches ``end`` (and is not extended further), or when
    its last node has no successor off the path. Dead-end paths are returned
    too; callers keep the ones whose last element is ``end``.

    Args:
        graph: Any graph, cyclic or not.
        start: Start node value.
        end: Target node value.

    Returns:
        Index paths, each starting at ``start``.
    """
    src = graph.index_of(start)
    dst = graph.index_of(end)
    if SEARCH_CONFIG.exceeds_exhaustive(len(graph)):
        logger.debug(f"Exhaustive path search over {len(graph)} nodes")

    result: List[IndexPath] = []
    stack: List[IndexPath] = [[src]]
    while stack:
        path = stack.pop()
        extended = False
        for nxt in graph.edges_from_index(path[-1]):
            if nxt in path:
                continue
            extended = True
            if nxt == dst:
                result.append(path + [nxt])
            else:
                stack.append(path + [nxt])
        if not extended:
            result.append(path)
    return result
