"""
Solver registry and base class.

A solver sees the harness state dict each turn ({"turn", "session", "rng"}),
where `session` is the current wordlex.session.Session, and returns one guess.
"""

from __future__ import annotations

import random
from typing import Dict, List, Type

from wordlex.config import RankerConfig

REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """Class decorator: add a solver to REGISTRY under its `id`."""
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, config: RankerConfig | None = None):
        self.config = config or RankerConfig()
        self.N = 5
        self.rng = random.Random()

    def reset(self, *, allowed: List[str], answers: List[str], N: int,
              seed: int | None = None) -> None:
        """Start a new game. The word lists arrive again through the session each turn."""
        self.N = int(N)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, version={self.version!r})"
