"""Configuration classes for Pathfinder components."""

from dataclasses import dataclass
from typing import Optional

from pathfinder.algorithms.base import FrontierSelect


@dataclass
class SolverConfig:
    """Configuration for graph construction and path queries."""

    # Frontier strategy used when a query does not name one
    frontier: FrontierSelect = FrontierSelect.SCAN

    # Reject negative and NaN connection costs
    check_costs: bool = True

    def resolve_frontier(self, frontier: Optional[FrontierSelect] = None) -> FrontierSelect:
        """Return the given frontier strategy, or the configured default."""
        if frontier is None:
            frontier = self.frontier
        try:
            return FrontierSelect(frontier)
        except ValueError:
            raise ValueError(f"Unknown frontier strategy: {frontier!r}") from None


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
