"""Graph primitives and helpers.

This package provides the indexed directed graph `Graph`, its edge-labeled
variant `DecoratedGraph`, the grid builder `from_maze`, and helper modules for
conversion (`convert`) and loading (`io`).
"""

from puzzlegraph.graph.decorated import DecoratedGraph
from puzzlegraph.graph.indexed_digraph import Graph, NodeIndex, NodeValue
from puzzlegraph.graph.maze import from_maze

__all__ = ["Graph", "DecoratedGraph", "NodeIndex", "NodeValue", "from_maze"]
