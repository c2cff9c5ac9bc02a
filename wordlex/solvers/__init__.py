from __future__ import annotations
from typing import List
from wordlex.config import RankerConfig
from .base import BaseSolver, REGISTRY, register

from . import random_consistent  # noqa: F401
from . import entropy  # noqa: F401


def create_solver(solver_id: str, config: RankerConfig | None = None) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(config)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
