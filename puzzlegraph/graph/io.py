"""Loaders for graphs described as YAML edge lists and mazes stored as text.

Edge-list documents look like::

    nodes: [a, b, c, d]      # optional; fixes index order
    edges:
      - [a, b]
      - [b, d]
    bidirectional: false     # optional

Nodes not listed under ``nodes`` are added in order of first appearance in
``edges``. YAML sequences used as node values (``[0, 1]``) become tuples.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from puzzlegraph.graph.indexed_digraph import Graph, NodeValue
from puzzlegraph.logging import get_logger

logger = get_logger(__name__)

_ALLOWED_KEYS = {"nodes", "edges", "bidirectional"}


def parse_node_value(raw: Any) -> NodeValue:
    """Turn a parsed YAML value into a hashable node value."""
    if isinstance(raw, list):
        return tuple(parse_node_value(item) for item in raw)
    if isinstance(raw, dict):
        raise ValueError(f"Node value must be a scalar or a sequence, got {raw!r}")
    return raw


def graph_from_dict(data: Dict[str, Any]) -> Graph:
    """Build a Graph from an already parsed edge-list mapping.

    Raises:
        ValueError: If the mapping does not follow the edge-list layout.
    """
    unknown = set(data) - _ALLOWED_KEYS
    if unknown:
        raise ValueError(f"Unrecognized keys in graph definition: {sorted(unknown)}")

    nodes = data.get("nodes") or []
    edges = data.get("edges") or []
    bidirectional = data.get("bidirectional", False)
    if not isinstance(nodes, list):
        raise ValueError("'nodes' must be a list")
    if not isinstance(edges, list):
        raise ValueError("'edges' must be a list")
    if not isinstance(bidirectional, bool):
        raise ValueError("'bidirectional' must be true or false")

    graph = Graph(parse_node_value(n) for n in nodes)
    for entry in edges:
        if not isinstance(entry, list) or len(entry) != 2:
            raise ValueError(
                f"Each edge must be a two-element list [source, target], got {entry!r}"
            )
        a, b = (parse_node_value(v) for v in entry)
        for value in (a, b):
            if value not in graph:
                graph.add_node(value)
        graph.add_edge(a, b)
        if bidirectional:
            graph.add_edge(b, a)

    logger.debug(f"Loaded graph with {len(graph)} nodes, {graph.edge_count()} edges")
    return graph


def load_graph_yaml(yaml_str: str) -> Graph:
    """Parse a YAML edge-list document into a Graph.

    Raises:
        ValueError: If the document is not a mapping or is malformed.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")
    return graph_from_dict(data)


def load_graph_file(path: Union[str, Path]) -> Graph:
    return load_graph_yaml(Path(path).read_text(encoding="utf-8"))


def read_maze(text: str) -> List[str]:
    """Split maze text into rows, dropping surrounding blank lines."""
    return text.strip("\n").splitlines()


def load_maze_file(path: Union[str, Path]) -> List[str]:
    return read_maze(Path(path).read_text(encoding="utf-8"))
