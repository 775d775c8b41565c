"""Graph store for path queries.

``PathGraph`` owns every node and every directed, weighted connection used by
the path solver. Nodes are kept in insertion order, which is also the order the
solver scans them in when it breaks ties between equally cheap candidates.
"""

from __future__ import annotations

import math
from pickle import dumps, loads
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Tuple

import networkx as nx

from pathfinder.config import SOLVER_CONFIG

if TYPE_CHECKING:
    from pathfinder.algorithms.base import FrontierSelect

NodeID = Hashable
EdgeID = Hashable
AttrDict = Dict[str, Any]
EdgeTuple = Tuple[NodeID, NodeID, EdgeID, AttrDict]


class PathGraph(nx.MultiDiGraph):
    """
    An append-only multi-directed graph of weighted connections.

    This class enforces:
      - No automatic creation of missing nodes when adding an edge.
      - No duplicate nodes (raising ValueError on duplicates).
      - No duplicate edges by key (raising ValueError on duplicates).
      - Each edge key is unique; by default a sequential integer is assigned.

    Every connection stores its traversal cost under the ``"cost"`` attribute.

    Inherits from:
        networkx.MultiDiGraph
    """

    def __init__(self, *args, **kwargs) -> None:
        """
        Initialize a PathGraph.

        Args:
            *args: Positional arguments forwarded to the MultiDiGraph constructor.
            **kwargs: Keyword arguments forwarded to the MultiDiGraph constructor.

        Attributes:
            _edges (Dict[EdgeID, EdgeTuple]): Maps an edge key to a tuple
                (source_node, target_node, edge_key, attribute_dict).
        """
        self._edges: Dict[EdgeID, EdgeTuple] = {}
        self._node_seq = 0
        self._edge_seq = 0
        super().__init__(*args, **kwargs)

    def new_node_id(self) -> NodeID:
        """
        Return the next unused sequential node id.

        Ids picked by callers through ``add_node`` are skipped over.
        """
        while self._node_seq in self:
            self._node_seq += 1
        node_id = self._node_seq
        self._node_seq += 1
        return node_id

    def new_edge_key(self, src_node: NodeID, dst_node: NodeID) -> EdgeID:
        """
        Generate a unique edge key.

        Args:
            src_node (NodeID): The source node of the new edge.
            dst_node (NodeID): The target node of the new edge.

        Returns:
            EdgeID: The next unused sequential integer key.
        """
        while self._edge_seq in self._edges:
            self._edge_seq += 1
        key = self._edge_seq
        self._edge_seq += 1
        return key

    def copy(self, as_view: bool = False) -> PathGraph:
        """
        Create a copy of this graph.

        Full copies are pickle-based deep copies, which keep edge keys and the
        node and edge id counters.

        Args:
            as_view (bool): If True, returns a read-only view from the parent
                class instead of a full copy. Defaults to False.

        Returns:
            PathGraph: A new instance (or view) of the graph.
        """
        if as_view:
            return super().copy(as_view=True)
        return loads(dumps(self))

    #
    # Node management
    #
    def create_node(self, **attr: Any) -> NodeID:
        """
        Allocate a new node with no connections.

        Args:
            **attr: Arbitrary attributes for this node.

        Returns:
            NodeID: The id of the new node.
        """
        node_id = self.new_node_id()
        super().add_node(node_id, **attr)
        return node_id

    def add_node(self, n: NodeID, **attr: Any) -> None:
        """
        Add a single node under a caller-chosen id, disallowing duplicates.

        Args:
            n (NodeID): The node to add.
            **attr: Arbitrary attributes for this node.

        Raises:
            ValueError: If the node already exists in the graph.
        """
        if n in self:
            raise ValueError(f"Node '{n}' already exists in this graph.")
        super().add_node(n, **attr)

    #
    # Edge management
    #
    def connect(self, src_node: NodeID, dst_node: NodeID, cost: float) -> EdgeID:
        """
        Append a directed connection from src_node to dst_node.

        No reverse connection is created. Parallel connections between the
        same pair of nodes are independent entries.

        Args:
            src_node (NodeID): The source node. Must exist in the graph.
            dst_node (NodeID): The target node. Must exist in the graph.
            cost (float): Traversal cost of the connection.

        Returns:
            EdgeID: The key of the new connection.

        Raises:
            ValueError: If either node does not exist, or if cost checking is
                enabled and the cost is negative or NaN.
        """
        return self.add_edge(src_node, dst_node, cost=cost)

    def add_edge(
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """
        Add a directed edge from u_for_edge to v_for_edge.

        If no key is provided, a new sequential key is generated. This method
        does not create nodes automatically; both u_for_edge and v_for_edge
        must already exist in the graph.

        Every edge must carry a numeric ``cost`` attribute; it is stored as a
        float.

        Args:
            u_for_edge (NodeID): The source node. Must exist in the graph.
            v_for_edge (NodeID): The target node. Must exist in the graph.
            key (Optional[EdgeID]): The unique edge key. If None, a new key
                is generated. Must not already be in use if provided.
            **attr: Edge attributes, including the required ``cost``.

        Returns:
            EdgeID: The key associated with this new edge.

        Raises:
            ValueError: If either node does not exist, if the key is already in
                use, if ``cost`` is missing or not a number, or if cost checking
                is enabled and the cost is negative or NaN.
        """
        if u_for_edge not in self:
            raise ValueError(f"Source node '{u_for_edge}' does not exist.")
        if v_for_edge not in self:
            raise ValueError(f"Target node '{v_for_edge}' does not exist.")

        if key is not None and key in self._edges:
            raise ValueError(f"Edge with id '{key}' already exists.")

        attr["cost"] = self._check_cost(attr.get("cost"))
        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)

        super().add_edge(u_for_edge, v_for_edge, key=key, **attr)
        self._edges[key] = (
            u_for_edge,
            v_for_edge,
            key,
            self[u_for_edge][v_for_edge][key],
        )
        return key

    @staticmethod
    def _check_cost(cost: Any) -> float:
        """
        Validate a connection cost and return it as a float.

        Raises:
            ValueError: If cost is missing or not a number, or if cost checking
                is enabled and the cost is negative or NaN.
        """
        if cost is None:
            raise ValueError("Edge attribute 'cost' is required.")
        try:
            cost = float(cost)
        except (TypeError, ValueError):
            raise ValueError(f"Connection cost must be a number, got {cost!r}.") from None
        if SOLVER_CONFIG.check_costs and (math.isnan(cost) or cost < 0):
            raise ValueError(
                f"Connection cost must be a non-negative number, got {cost!r}."
            )
        return cost

    #
    # Removal is not supported; the graph is append-only
    #
    def remove_node(self, n: NodeID) -> None:
        raise NotImplementedError("PathGraph is append-only; nodes cannot be removed.")

    def remove_nodes_from(self, nodes: Any) -> None:
        raise NotImplementedError("PathGraph is append-only; nodes cannot be removed.")

    def remove_edge(self, u: NodeID, v: NodeID, key: Optional[EdgeID] = None) -> None:
        raise NotImplementedError("PathGraph is append-only; edges cannot be removed.")

    def remove_edges_from(self, ebunch: Any) -> None:
        raise NotImplementedError("PathGraph is append-only; edges cannot be removed.")

    def clear(self) -> None:
        # networkx clears the target graph while populating it from input data
        if len(self):
            raise NotImplementedError("PathGraph is append-only; it cannot be cleared.")
        super().clear()

    def clear_edges(self) -> None:
        raise NotImplementedError("PathGraph is append-only; it cannot be cleared.")

    #
    # Convenience methods
    #
    def get_nodes(self) -> Dict[NodeID, AttrDict]:
        """
        Retrieve all nodes and their attributes as a dictionary.

        Returns:
            Dict[NodeID, AttrDict]: A mapping of node ID to its attributes,
                in insertion order.
        """
        return dict(self.nodes(data=True))

    def get_edges(self) -> Dict[EdgeID, EdgeTuple]:
        """
        Retrieve a dictionary of all edges by their keys.

        Returns:
            Dict[EdgeID, EdgeTuple]: A mapping of edge key to a tuple
                (source_node, target_node, edge_key, edge_attributes).
        """
        return self._edges

    def get_edge_attr(self, key: EdgeID) -> AttrDict:
        """
        Retrieve the attribute dictionary of a specific edge.

        Raises:
            ValueError: If no edge with this key is found.
        """
        if key not in self._edges:
            raise ValueError(f"Edge with id='{key}' not found.")
        return self._edges[key][3]

    def edges_between(self, u: NodeID, v: NodeID) -> List[EdgeID]:
        """
        List all edge keys from node u to node v.

        Returns:
            List[EdgeID]: Edge keys from u to v, or an empty list if none exist.
        """
        if u not in self.succ or v not in self.succ[u]:
            return []
        return list(self.succ[u][v].keys())

    def connections(self, node: NodeID) -> List[Tuple[NodeID, float]]:
        """
        List the outgoing connections of a node as (target, cost) pairs.

        Raises:
            ValueError: If the node does not exist.
        """
        if node not in self:
            raise ValueError(f"Node '{node}' does not exist.")
        return [
            (dst, attr["cost"])
            for src, dst, _key, attr in self._edges.values()
            if src == node
        ]

    def find_path(
        self,
        start: NodeID,
        end: NodeID,
        frontier: Optional[FrontierSelect] = None,
    ) -> List[NodeID]:
        """Return the cheapest path from start to end, or [] if there is none."""
        from pathfinder.algorithms.spf import find_path

        return find_path(self, start, end, frontier)
