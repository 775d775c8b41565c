"""Shortest-path-first (SPF) search over a ``PathGraph``.

Implements Dijkstra's algorithm with two interchangeable frontier strategies:
a linear scan over all nodes (``FrontierSelect.SCAN``) and a binary heap
(``FrontierSelect.HEAP``). Both finalize nodes in the same order.

Notes:
    Relaxation only replaces a neighbor's tentative cost on strict
    improvement, and frontier ties go to the node inserted into the graph
    first. Among equal-cost paths the first one discovered is kept, so results
    are reproducible for a fixed node-creation order.

    Scratch state lives in a ``QueryState`` created per call; nothing is
    written to the graph.
"""

from heapq import heappop, heappush
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pathfinder.algorithms.base import INF_COST, Cost, FrontierSelect, QueryState
from pathfinder.config import SOLVER_CONFIG
from pathfinder.graph import NodeID, PathGraph
from pathfinder.logging import get_logger
from pathfinder.path import Path

logger = get_logger(__name__)

# Destination marker for full shortest-path-tree runs; never a graph node
_NO_DST = object()


def _init_state(graph: PathGraph, src_node: NodeID) -> QueryState:
    state = QueryState(costs=dict.fromkeys(graph, INF_COST))
    state.costs[src_node] = 0.0
    return state


def _relax(graph: PathGraph, state: QueryState, node_id: NodeID) -> List[NodeID]:
    """Mark node_id visited and relax its outgoing connections.

    Returns:
        Neighbors whose tentative cost improved.
    """
    state.visited.add(node_id)
    costs = state.costs
    base_cost = costs[node_id]
    improved: List[NodeID] = []

    for neighbor_id, edges_map in graph._adj[node_id].items():  # type: ignore[attr-defined]
        if neighbor_id in state.visited:
            continue
        for e_attr in edges_map.values():
            new_cost = base_cost + e_attr["cost"]
            if new_cost < costs[neighbor_id]:
                costs[neighbor_id] = new_cost
                state.pred[neighbor_id] = node_id
                improved.append(neighbor_id)

    return improved


def _dijkstra_scan(graph: PathGraph, src_node: NodeID, dst_node: Any) -> QueryState:
    """Dijkstra with an O(V) scan for the cheapest unvisited node per step."""
    state = _init_state(graph, src_node)
    costs = state.costs
    visited = state.visited
    node_id = src_node

    while True:
        _relax(graph, state, node_id)

        if node_id == dst_node:
            break

        # First strictly cheaper candidate in insertion order wins
        cheapest: Optional[NodeID] = None
        cheapest_cost = INF_COST
        for candidate in graph:
            if candidate not in visited and costs[candidate] < cheapest_cost:
                cheapest = candidate
                cheapest_cost = costs[candidate]

        if cheapest is None:
            break
        node_id = cheapest

    return state


def _dijkstra_heap(graph: PathGraph, src_node: NodeID, dst_node: Any) -> QueryState:
    """Dijkstra with a binary heap frontier keyed by (cost, insertion index)."""
    state = _init_state(graph, src_node)
    costs = state.costs
    visited = state.visited
    order: Dict[NodeID, int] = {node: idx for idx, node in enumerate(graph)}
    min_pq: List[Tuple[Cost, int, NodeID]] = [(0.0, order[src_node], src_node)]

    while min_pq:
        current_cost, _, node_id = heappop(min_pq)
        # Stale entry: node already final or a cheaper entry was pushed later
        if node_id in visited or current_cost > costs[node_id]:
            continue

        for neighbor_id in _relax(graph, state, node_id):
            heappush(min_pq, (costs[neighbor_id], order[neighbor_id], neighbor_id))

        if node_id == dst_node:
            break

    return state


_FRONTIER_ALGOS = {
    FrontierSelect.SCAN: _dijkstra_scan,
    FrontierSelect.HEAP: _dijkstra_heap,
}


def _run(
    graph: PathGraph,
    src_node: NodeID,
    dst_node: Any,
    frontier: Optional[FrontierSelect],
) -> QueryState:
    frontier = SOLVER_CONFIG.resolve_frontier(frontier)
    if src_node not in graph:
        raise KeyError(f"Source node '{src_node}' is not in the graph.")
    if dst_node is not _NO_DST and dst_node not in graph:
        raise KeyError(f"Destination node '{dst_node}' is not in the graph.")
    return _FRONTIER_ALGOS[frontier](graph, src_node, dst_node)


def _resolve_path(
    src_node: NodeID, dst_node: NodeID, pred: Dict[NodeID, NodeID]
) -> List[NodeID]:
    """Walk predecessor links back from dst_node and return the forward path."""
    if dst_node != src_node and dst_node not in pred:
        return []

    path = [dst_node]
    node_id = dst_node
    while node_id != src_node:
        node_id = pred[node_id]
        path.append(node_id)
    path.reverse()
    return path


def find_path(
    graph: PathGraph,
    start: NodeID,
    end: NodeID,
    frontier: Optional[FrontierSelect] = None,
) -> List[NodeID]:
    """Find the cheapest path from start to end.

    Args:
        graph: The graph to search.
        start: First node of the path.
        end: Last node of the path. May equal ``start``.
        frontier: Frontier strategy. Defaults to ``SOLVER_CONFIG.frontier``.

    Returns:
        Nodes from ``start`` to ``end`` inclusive, or an empty list if ``end``
        cannot be reached from ``start``.

    Raises:
        KeyError: If ``start`` or ``end`` is not in the graph.
    """
    return list(solve(graph, start, end, frontier).nodes)


def solve(
    graph: PathGraph,
    start: NodeID,
    end: NodeID,
    frontier: Optional[FrontierSelect] = None,
) -> Path:
    """Find the cheapest path from start to end together with its cost.

    Returns:
        A ``Path``. If ``end`` cannot be reached, the path is empty and its
        cost is infinite.

    Raises:
        KeyError: If ``start`` or ``end`` is not in the graph.
    """
    logger.debug("Searching path %r -> %r", start, end)
    state = _run(graph, start, end, frontier)

    nodes = _resolve_path(start, end, state.pred)
    if not nodes:
        logger.debug(
            "No path %r -> %r (%d of %d nodes visited)",
            start,
            end,
            len(state.visited),
            len(graph),
        )
        return Path(nodes=(), cost=INF_COST)

    logger.debug(
        "Found path %r -> %r: %d nodes, cost %s", start, end, len(nodes), state.costs[end]
    )
    return Path(nodes=tuple(nodes), cost=state.costs[end])


def spf(
    graph: PathGraph,
    src_node: NodeID,
    frontier: Optional[FrontierSelect] = None,
) -> Tuple[Dict[NodeID, Cost], Dict[NodeID, NodeID]]:
    """Compute the shortest-path tree rooted at src_node.

    Args:
        graph: The graph to search.
        src_node: The root of the tree.
        frontier: Frontier strategy. Defaults to ``SOLVER_CONFIG.frontier``.

    Returns:
        A tuple of (costs, pred):
          - costs: Minimal cost from src_node for every reachable node.
          - pred: Predecessor on the cheapest path for every reachable node
            other than src_node.

    Raises:
        KeyError: If src_node is not in the graph.
    """
    state = _run(graph, src_node, _NO_DST, frontier)
    costs = {node: cost for node, cost in state.costs.items() if cost < INF_COST}
    return costs, dict(state.pred)


def path_cost(graph: PathGraph, nodes: Iterable[NodeID]) -> Cost:
    """Total cost of walking the given node sequence.

    Each hop uses the cheapest of its parallel connections.

    Raises:
        ValueError: If two consecutive nodes are not connected.
    """
    total: Cost = 0.0
    nodes = list(nodes)
    for src, dst in zip(nodes, nodes[1:]):
        edge_ids = graph.edges_between(src, dst)
        if not edge_ids:
            raise ValueError(f"No connection from '{src}' to '{dst}'.")
        total += min(graph.get_edge_attr(e_id)["cost"] for e_id in edge_ids)
    return total
