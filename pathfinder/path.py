"""Lightweight representation of a single path query result.

The ``Path`` dataclass stores the ordered node sequence of a path and its
total cost. An empty path, with infinite cost, means no path exists.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Tuple

from pathfinder.algorithms.base import Cost

if TYPE_CHECKING:
    from pathfinder.graph import NodeID


@dataclass(frozen=True)
class Path:
    """Represents a single path through a graph.

    Attributes:
        nodes: Node ids from the first to the last node of the path.
        cost: Total traversal cost of the path.
    """

    nodes: Tuple[NodeID, ...]
    cost: Cost

    def __getitem__(self, idx: int) -> NodeID:
        return self.nodes[idx]

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __bool__(self) -> bool:
        """An empty path is falsy."""
        return bool(self.nodes)

    def __lt__(self, other: Path) -> bool:
        """Compare paths by total cost.

        Args:
            other: Another Path to compare.

        Returns:
            True if this path's cost is less than the other's; otherwise False.
        """
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost

    @property
    def src(self) -> NodeID:
        """First node of the path.

        Raises:
            IndexError: If the path is empty.
        """
        return self.nodes[0]

    @property
    def dst(self) -> NodeID:
        """Last node of the path.

        Raises:
            IndexError: If the path is empty.
        """
        return self.nodes[-1]
