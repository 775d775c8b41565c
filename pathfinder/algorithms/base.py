from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Dict, Set, Union

if TYPE_CHECKING:
    from pathfinder.graph import NodeID

#: Represents numeric traversal cost (e.g. distance, latency, etc.).
Cost = Union[int, float]

#: Tentative cost of a node that has not been reached yet.
INF_COST: float = float("inf")


class FrontierSelect(IntEnum):
    """
    Strategies for picking the next node to finalize during a path query.

    Both strategies pick the unvisited node with the lowest tentative cost and
    break ties by graph insertion order, so they return identical paths.
    """

    #: Linear scan over all nodes on every step, O(V^2) overall.
    SCAN = 1
    #: Binary heap keyed by (cost, insertion index) with lazy deletion.
    HEAP = 2


@dataclass
class QueryState:
    """
    Scratch state of a single path query.

    Created fresh for every query and keyed by node id, so the graph itself
    is never written to while it is being searched.

    Attributes:
        costs: Tentative cost of every node in the graph.
        pred: Predecessor of every node reached so far (the source has none).
        visited: Nodes whose cost is final.
    """

    costs: Dict[NodeID, Cost] = field(default_factory=dict)
    pred: Dict[NodeID, NodeID] = field(default_factory=dict)
    visited: Set[NodeID] = field(default_factory=set)
