"""Global pytest configuration."""

from __future__ import annotations

from dataclasses import fields

import pytest

from pathfinder.config import SOLVER_CONFIG, SolverConfig


@pytest.fixture(autouse=True)
def _restore_solver_config():
    """Undo changes a test makes to the global solver configuration."""
    saved = {f.name: getattr(SOLVER_CONFIG, f.name) for f in fields(SolverConfig)}
    yield
    for name, value in saved.items():
        setattr(SOLVER_CONFIG, name, value)
