"""Command-line interface for Pathfinder."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

from pathfinder.algorithms.base import FrontierSelect
from pathfinder.algorithms.spf import solve
from pathfinder.config import SOLVER_CONFIG
from pathfinder.graph import NodeID, PathGraph
from pathfinder.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)

logger = get_logger(__name__)

_FRONTIER_NAMES = {f.name.lower(): f for f in FrontierSelect}


def _format_table(headers: List[str], rows: List[List[str]], min_width: int = 8) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


#
# Reference scenarios for the ``demo`` command
#
def _no_connection(g: PathGraph) -> Tuple[NodeID, NodeID, List[NodeID]]:
    a, b = g.create_node(), g.create_node()
    return a, b, []


def _direct_connection(g: PathGraph) -> Tuple[NodeID, NodeID, List[NodeID]]:
    a, b = g.create_node(), g.create_node()
    g.connect(a, b, 1.0)
    return a, b, [a, b]


def _chain(g: PathGraph) -> Tuple[NodeID, NodeID, List[NodeID]]:
    a, b, c = g.create_node(), g.create_node(), g.create_node()
    g.connect(a, b, 1.0)
    g.connect(b, c, 1.0)
    return a, c, [a, b, c]


def _indirect_cheaper(g: PathGraph) -> Tuple[NodeID, NodeID, List[NodeID]]:
    a, b, c = g.create_node(), g.create_node(), g.create_node()
    g.connect(a, b, 1.0)
    g.connect(b, c, 1.0)
    g.connect(a, c, 8.0)
    return a, c, [a, b, c]


def _direct_cheaper(g: PathGraph) -> Tuple[NodeID, NodeID, List[NodeID]]:
    a, b, c = g.create_node(), g.create_node(), g.create_node()
    g.connect(a, b, 5.0)
    g.connect(b, c, 5.0)
    g.connect(a, c, 2.0)
    return a, c, [a, c]


DEMO_SCENARIOS: Dict[str, Callable[[PathGraph], Tuple[NodeID, NodeID, List[NodeID]]]] = {
    "no connection": _no_connection,
    "direct connection": _direct_connection,
    "chain": _chain,
    "indirect cheaper": _indirect_cheaper,
    "direct cheaper": _direct_cheaper,
}


def _run_demo(frontier: FrontierSelect) -> bool:
    """Run the reference scenarios and print a result table.

    Returns:
        True if every scenario produced its expected path.
    """
    rows: List[List[str]] = []
    all_ok = True
    for name, build in DEMO_SCENARIOS.items():
        graph = PathGraph()
        start, end, expected = build(graph)
        result = solve(graph, start, end, frontier)
        ok = list(result.nodes) == expected
        all_ok = all_ok and ok
        if not ok:
            logger.error(
                "Scenario '%s': expected %s, got %s", name, expected, list(result.nodes)
            )
        rows.append(
            [
                name,
                " -> ".join(map(str, result.nodes)) or "-",
                f"{result.cost:g}",
                "ok" if ok else "FAIL",
            ]
        )

    print(_format_table(["Scenario", "Path", "Cost", "Status"], rows))
    return all_ok


def _run_path(
    edges: List[List[str]], start: str, end: str, frontier: FrontierSelect, as_json: bool
) -> bool:
    """Build a graph from (src, dst, cost) triples and print the cheapest path.

    Returns:
        True if a path was found.

    Raises:
        ValueError: If a cost is not a number or is rejected by the graph.
    """
    graph = PathGraph()
    for src, dst, cost in edges:
        for name in (src, dst):
            if name not in graph:
                graph.add_node(name)
        try:
            value = float(cost)
        except ValueError:
            raise ValueError(f"Invalid cost '{cost}' for edge {src} -> {dst}") from None
        graph.connect(src, dst, value)

    for name in (start, end):
        if name not in graph:
            graph.add_node(name)

    logger.debug("Built graph with %d nodes and %d edges", len(graph), len(edges))
    result = solve(graph, start, end, frontier)

    if as_json:
        payload: Dict[str, Any] = {
            "start": start,
            "end": end,
            "path": list(result.nodes),
            "cost": result.cost if result else None,
        }
        print(json.dumps(payload, indent=2))
    elif result:
        print(" -> ".join(result.nodes))
        print(f"cost: {result.cost:g}")
    else:
        print(f"no path from {start} to {end}")

    return bool(result)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``pathfinder`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="pathfinder",
        description="Find lowest-cost paths in weighted directed graphs.",
    )

    # Global options
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
        metavar="{demo,path}",
        help="Available commands",
    )

    demo_parser = subparsers.add_parser(
        "demo", help="Run the built-in reference scenarios"
    )

    path_parser = subparsers.add_parser(
        "path", help="Find the cheapest path in a graph given on the command line"
    )
    path_parser.add_argument("start", help="Start node name")
    path_parser.add_argument("end", help="End node name")
    path_parser.add_argument(
        "--edge",
        "-e",
        nargs=3,
        action="append",
        metavar=("SRC", "DST", "COST"),
        help="Directed connection; repeat for more edges",
    )
    path_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )

    for p in (demo_parser, path_parser):
        p.add_argument(
            "--frontier",
            choices=sorted(_FRONTIER_NAMES),
            default=None,
            help="Frontier selection strategy (default: configured solver frontier)",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    frontier = SOLVER_CONFIG.resolve_frontier(
        _FRONTIER_NAMES[args.frontier] if args.frontier else None
    )

    if args.command == "demo":
        ok = _run_demo(frontier)
    else:
        try:
            ok = _run_path(args.edge or [], args.start, args.end, frontier, args.json)
        except ValueError as e:
            logger.error("%s", e)
            raise SystemExit(2) from None

    if not ok:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
