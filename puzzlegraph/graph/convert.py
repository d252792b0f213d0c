"""Conversion between puzzlegraph graphs and NetworkX directed graphs.

NetworkX graphs are keyed by node value. Conversions preserve node order, so
indices assigned on the way in follow ``nx_graph.nodes`` iteration order.
"""

from typing import Optional, Union

import networkx as nx

from puzzlegraph.graph.decorated import DecoratedGraph
from puzzlegraph.graph.indexed_digraph import Graph


def to_networkx(graph: Graph, weight_attr: str = "weight") -> nx.DiGraph:
    """Convert a graph to a NetworkX DiGraph keyed by node value.

    Each node carries an ``index`` attribute. Each edge carries
    ``weight_attr`` (1 for a plain graph, the label for a decorated one).

    Args:
        graph: Graph or DecoratedGraph to convert.
        weight_attr: Edge attribute name for the edge weight.

    Returns:
        A new NetworkX DiGraph.
    """
    nx_graph = nx.DiGraph()
    for idx, value in enumerate(graph.nodes):
        nx_graph.add_node(value, index=idx)
    for i, j in graph.index_edges():
        nx_graph.add_edge(
            graph.nodes[i], graph.nodes[j], **{weight_attr: graph.edge_weight(i, j)}
        )
    return nx_graph


def from_networkx(
    nx_graph: Union[nx.DiGraph, nx.Graph],
    label_attr: Optional[str] = None,
) -> Graph:
    """Convert a NetworkX graph to a Graph or DecoratedGraph.

    Undirected input yields edges in both directions.

    Args:
        nx_graph: Source NetworkX graph. Multi-edges collapse to one edge.
        label_attr: When given, build a DecoratedGraph labeled with this edge
            attribute. Edges missing the attribute raise KeyError.

    Returns:
        Graph, or DecoratedGraph when ``label_attr`` is set.
    """
    if label_attr is None:
        graph = Graph(nx_graph.nodes)
        for u, v in nx_graph.edges():
            graph.add_edge(u, v)
            if not nx_graph.is_directed():
                graph.add_edge(v, u)
        return graph

    decorated = DecoratedGraph(nx_graph.nodes)
    for u, v, data in nx_graph.edges(data=True):
        if label_attr not in data:
            raise KeyError(f"Edge ({u}, {v}) has no '{label_attr}' attribute.")
        decorated.add_edge(u, v, data[label_attr])
        if not nx_graph.is_directed():
            decorated.add_edge(v, u, data[label_attr])
    return decorated
