"""Directed graph over caller-supplied node values with dense integer indices.

`Graph` keeps node values in insertion order, assigns each value the next
free index, and stores unweighted adjacency in a `networkx.DiGraph` whose
nodes are those indices. Algorithms work on indices; the public helpers accept
and return node values.
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, Iterator, List, Optional, Tuple

import networkx as nx

NodeValue = Hashable
NodeIndex = int


class Graph:
    """A directed, unweighted graph with strict node management.

    This class enforces:
      - Node values are unique (adding a duplicate raises ValueError).
      - Indices are contiguous ``0..n-1`` in insertion order and never change.
      - Looking up an unknown value raises KeyError.
      - Adding an edge never creates nodes; both ends must already exist.
      - Adding an existing edge is a no-op, so there are no parallel edges.

    Attributes:
        nodes: Node values, position ``i`` holding the value with index ``i``.
    """

    def __init__(self, nodes: Optional[Iterable[NodeValue]] = None) -> None:
        self.nodes: List[NodeValue] = []
        self._index: Dict[NodeValue, NodeIndex] = {}
        self._adj: nx.DiGraph = nx.DiGraph()
        if nodes is not None:
            for value in nodes:
                self.add_node(value)

    @classmethod
    def new_with_nodes(cls, nodes: Iterable[NodeValue]) -> Graph:
        """Create a graph holding exactly ``nodes`` and no edges."""
        return cls(nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, value: object) -> bool:
        try:
            return value in self._index
        except TypeError:
            return False

    def __iter__(self) -> Iterator[NodeValue]:
        return iter(self.nodes)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={len(self.nodes)}, "
            f"edges={self.edge_count()})"
        )

    #
    # Node management
    #
    def add_node(self, value: NodeValue) -> NodeIndex:
        """Append a node and return its index.

        Args:
            value: Hashable node value.

        Returns:
            NodeIndex: The index assigned to ``value``.

        Raises:
            ValueError: If ``value`` is already a node of this graph.
        """
        if value in self._index:
            raise ValueError(f"Node '{value}' already exists in this graph.")
        idx = len(self.nodes)
        self.nodes.append(value)
        self._index[value] = idx
        self._adj.add_node(idx)
        return idx

    def index_of(self, value: NodeValue) -> NodeIndex:
        """Resolve a node value to its index.

        Raises:
            KeyError: If ``value`` is not a node of this graph.
        """
        try:
            return self._index[value]
        except KeyError:
            raise KeyError(f"Node '{value}' is not in the graph.") from None

    def node(self, idx: NodeIndex) -> NodeValue:
        """Return the node value stored at ``idx``."""
        return self.nodes[idx]

    #
    # Edge management
    #
    def add_edge(self, a: NodeValue, b: NodeValue) -> None:
        """Add the directed edge ``a -> b``; repeated calls change nothing.

        Raises:
            KeyError: If either value is not a node of this graph.
        """
        self.add_edge_by_index(self.index_of(a), self.index_of(b))

    def add_edge_by_index(self, i: NodeIndex, j: NodeIndex) -> None:
        """Add the directed edge ``i -> j`` between existing indices.

        Raises:
            ValueError: If either index is outside ``0..n-1``.
        """
        n = len(self.nodes)
        if not 0 <= i < n:
            raise ValueError(f"Source index {i} does not exist.")
        if not 0 <= j < n:
            raise ValueError(f"Target index {j} does not exist.")
        if not self._adj.has_edge(i, j):
            self._adj.add_edge(i, j)

    def has_edge(self, a: NodeValue, b: NodeValue) -> bool:
        return self._adj.has_edge(self.index_of(a), self.index_of(b))

    def edges_from_index(self, i: NodeIndex) -> List[NodeIndex]:
        """Successor indices of ``i`` in insertion order."""
        return list(self._adj.succ[i])

    def edges_from(self, value: NodeValue) -> List[NodeValue]:
        """Successor values of ``value`` in insertion order."""
        return [self.nodes[j] for j in self._adj.succ[self.index_of(value)]]

    def edges_to(self, value: NodeValue) -> List[NodeValue]:
        """Predecessor values of ``value``, in index order.

        Scans every successor list; intended for occasional use only.
        """
        target = self.index_of(value)
        return [
            self.nodes[i]
            for i in range(len(self.nodes))
            if target in self._adj.succ[i]
        ]

    def out_degree(self, value: NodeValue) -> int:
        return len(self._adj.succ[self.index_of(value)])

    def edge_count(self) -> int:
        return self._adj.number_of_edges()

    def is_symmetric(self) -> bool:
        """True when every edge ``i -> j`` has its reverse ``j -> i``."""
        return all(self._adj.has_edge(j, i) for i, j in self._adj.edges)

    def edge_weight(self, i: NodeIndex, j: NodeIndex) -> int:
        """Weight of edge ``i -> j``; every edge of a plain graph weighs 1."""
        return 1

    def index_edges(self) -> Iterator[Tuple[NodeIndex, NodeIndex]]:
        """Yield ``(i, j)`` index pairs, grouped by source in index order."""
        for i in range(len(self.nodes)):
            for j in self._adj.succ[i]:
                yield i, j
