"""Graph whose edges carry a label, typically an integer corridor length."""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

from puzzlegraph.graph.indexed_digraph import Graph, NodeIndex, NodeValue

EdgeLabel = Any


class DecoratedGraph(Graph):
    """A `Graph` with one label per edge.

    Labels are keyed by ``(from_index, to_index)`` and written only through
    `add_edge` / `add_edge_by_index`, so every labeled pair is an edge of the
    graph. Adding an existing edge again replaces its label. Numeric labels
    serve as edge weights for the weighted and longest-path searches.

    Attributes:
        labels: Maps ``(from_index, to_index)`` to the edge label.
    """

    def __init__(self, nodes=None) -> None:
        super().__init__(nodes)
        self.labels: Dict[Tuple[NodeIndex, NodeIndex], EdgeLabel] = {}

    def add_edge(  # type: ignore[override]
        self, a: NodeValue, b: NodeValue, label: EdgeLabel
    ) -> None:
        """Add the edge ``a -> b`` carrying ``label``."""
        self.add_edge_by_index(self.index_of(a), self.index_of(b), label)

    def add_edge_by_index(  # type: ignore[override]
        self, i: NodeIndex, j: NodeIndex, label: EdgeLabel
    ) -> None:
        super().add_edge_by_index(i, j)
        self.labels[(i, j)] = label

    def label(self, a: NodeValue, b: NodeValue) -> EdgeLabel:
        """Label of the edge ``a -> b``.

        Raises:
            KeyError: If a node is unknown or the edge does not exist.
        """
        key = (self.index_of(a), self.index_of(b))
        if key not in self.labels:
            raise KeyError(f"No edge from '{a}' to '{b}'.")
        return self.labels[key]

    def labeled_edges_from(self, value: NodeValue) -> List[Tuple[NodeValue, EdgeLabel]]:
        """Successors of ``value`` paired with edge labels, in insertion order."""
        i = self.index_of(value)
        return [(self.nodes[j], self.labels[(i, j)]) for j in self.edges_from_index(i)]

    def edge_weight(self, i: NodeIndex, j: NodeIndex) -> int:
        return self.labels[(i, j)]

    def total_weight(self) -> int:
        """Sum of all edge labels."""
        return sum(self.labels.values())
