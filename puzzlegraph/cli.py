"""Command-line interface for puzzlegraph."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional, Tuple

import yaml

from puzzlegraph.algorithms.contract import contract
from puzzlegraph.algorithms.distance import distance_between
from puzzlegraph.algorithms.longest import longest_path_length
from puzzlegraph.algorithms.paths import bfs_acyclic_paths
from puzzlegraph.config import MAZE_CONFIG
from puzzlegraph.graph.indexed_digraph import Graph, NodeValue
from puzzlegraph.graph.io import load_graph_file, load_maze_file, parse_node_value
from puzzlegraph.graph.maze import from_maze
from puzzlegraph.logging import get_logger, set_global_log_level

logger = get_logger(__name__)


def _format_distance(value: Optional[int]) -> str:
    return "no path" if value is None else str(value)


def _parse_cell(text: str) -> Tuple[int, int]:
    """Parse ``"row,col"`` into a grid cell."""
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected ROW,COL, got '{text}'")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ROW,COL, got '{text}'") from None


def _parse_node(text: str) -> NodeValue:
    """Parse a node given on the command line the way YAML would read it."""
    try:
        return parse_node_value(yaml.safe_load(text))
    except (yaml.YAMLError, ValueError) as exc:
        raise argparse.ArgumentTypeError(
            f"invalid node value '{text}': {exc}"
        ) from None


def _longest(graph: Graph, start: NodeValue, end: NodeValue) -> Optional[int]:
    """Longest simple path, searched on the contracted graph when possible."""
    if not graph.is_symmetric():
        logger.info("Graph is not symmetric; searching it without contraction")
        return longest_path_length(graph, start, end)
    contracted = contract(graph)
    if start in contracted and end in contracted:
        logger.info(
            f"Contracted {len(graph)} nodes to {len(contracted)} decision nodes"
        )
        return longest_path_length(contracted, start, end)
    logger.warning(
        "Start or end is a corridor node; searching the uncontracted graph"
    )
    return longest_path_length(graph, start, end)


def _report(
    graph: Graph, start: NodeValue, end: NodeValue, longest: bool, count_paths: bool
) -> None:
    print(f"nodes: {len(graph)}")
    print(f"edges: {graph.edge_count()}")
    print(f"shortest: {_format_distance(distance_between(graph, start, end))}")
    if count_paths:
        dst = graph.index_of(end)
        reaching = [p for p in bfs_acyclic_paths(graph, start, end) if p[-1] == dst]
        print(f"simple paths: {len(reaching)}")
    if longest:
        print(f"longest: {_format_distance(_longest(graph, start, end))}")


def _run(load, args: argparse.Namespace, count_paths: bool) -> None:
    path: Path = args.file
    started = perf_counter()
    try:
        graph = load(path)
        _report(graph, args.start, args.end, args.longest, count_paths)
    except FileNotFoundError:
        print(f"ERROR: file not found: {path}")
        sys.exit(1)
    except (KeyError, ValueError) as e:
        logger.error(f"Failed to analyze {path}: {e}")
        print(f"ERROR: {type(e).__name__}: {e}")
        sys.exit(1)
    logger.info(f"Analysis of {path} completed in {perf_counter() - started:.3f} s")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``puzzlegraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="puzzlegraph",
        description="Shortest and longest paths over mazes and edge lists.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{maze,graph}",
        help="Available commands",
    )

    maze_parser = subparsers.add_parser("maze", help="Analyze a character-grid maze")
    maze_parser.add_argument("file", type=Path, help="Path to the maze text file")
    maze_parser.add_argument(
        "--start", type=_parse_cell, required=True, help="Start cell as ROW,COL"
    )
    maze_parser.add_argument(
        "--end", type=_parse_cell, required=True, help="End cell as ROW,COL"
    )
    maze_parser.add_argument(
        "--walkable",
        default=MAZE_CONFIG.walkable,
        help=f"Characters that are walkable (default: '{MAZE_CONFIG.walkable}')",
    )
    maze_parser.add_argument(
        "--wall",
        default=MAZE_CONFIG.wall,
        help=f"Wall character (default: '{MAZE_CONFIG.wall}')",
    )

    graph_parser = subparsers.add_parser("graph", help="Analyze a YAML edge list")
    graph_parser.add_argument("file", type=Path, help="Path to the edge-list YAML")
    graph_parser.add_argument(
        "--start", type=_parse_node, required=True, help="Start node value"
    )
    graph_parser.add_argument(
        "--end", type=_parse_node, required=True, help="End node value"
    )

    for p in (maze_parser, graph_parser):
        p.add_argument(
            "--longest",
            action="store_true",
            help="Also search the longest simple path (exponential)",
        )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "maze":
        _run(
            lambda path: from_maze(load_maze_file(path), args.walkable, args.wall),
            args,
            count_paths=False,
        )
    elif args.command == "graph":
        _run(load_graph_file, args, count_paths=True)


if __name__ == "__main__":
    main()
