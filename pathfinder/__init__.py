"""Pathfinder: lowest-cost paths in weighted directed graphs.

Primary API:
    PathGraph - Graph store; create nodes and connect them with weighted edges
    find_path() - Cheapest path between two nodes as a list of node ids
    solve() - Cheapest path together with its total cost
    spf() - Shortest-path tree from a single source

Example:
    from pathfinder import PathGraph, find_path

    g = PathGraph()
    a, b, c = g.create_node(), g.create_node(), g.create_node()
    g.connect(a, b, 1.0)
    g.connect(b, c, 1.0)
    g.connect(a, c, 8.0)

    find_path(g, a, c)  # [a, b, c]
"""

from __future__ import annotations

from pathfinder import cli, logging
from pathfinder._version import __version__
from pathfinder.algorithms.base import Cost, FrontierSelect, QueryState
from pathfinder.algorithms.spf import find_path, path_cost, solve, spf
from pathfinder.config import SOLVER_CONFIG, SolverConfig
from pathfinder.graph import EdgeID, NodeID, PathGraph
from pathfinder.path import Path

__all__ = [
    # Version
    "__version__",
    # Graph
    "PathGraph",
    "NodeID",
    "EdgeID",
    "Path",
    # Algorithms
    "find_path",
    "solve",
    "spf",
    "path_cost",
    # Types
    "Cost",
    "FrontierSelect",
    "QueryState",
    # Configuration
    "SolverConfig",
    "SOLVER_CONFIG",
    # Utilities
    "cli",
    "logging",
]
