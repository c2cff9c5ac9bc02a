"""
Random Consistent solver.

Baseline: pick uniformly (seeded) from the words still consistent with the
feedback so far, falling back to the allowed list if none remain.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        session = state["session"]
        pool: List[str] = list(session.candidates or session.allowed)
        if not pool:
            raise ValueError("no words to guess from: allowed and candidate lists are empty")
        return pool[self.rng.randrange(len(pool))]
