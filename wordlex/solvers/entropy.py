"""
Entropy solver (expected information gain).

Each turn the EntropyRanker scores a pool of guesses against the current
candidates and the best one is played.

Pool selection (config.guess_pool == "allowed"; otherwise candidates only):
  - few candidates: rank the candidates themselves (every guess can win)
  - many candidates: rank `allowed` words by how many candidates share each of
    their DISTINCT letters, keep the top POOL_CAP, and merge in the top
    INCLUDE_TOP_CANDIDATES candidate words so an obvious answer is not missed.
Among equal scores a word that can still be the answer is preferred.
"""

from __future__ import annotations

from collections import Counter
from typing import List

from wordlex.engine import EntropyRanker
from .base import BaseSolver, register


def _distinct_score(w: str, counts: Counter) -> int:
    return sum(counts[ch] for ch in set(w))


@register
class EntropySolver(BaseSolver):
    id = "entropy"
    name = "Entropy (Expected Information Gain)"
    version = "2.0.0"

    CANDIDATE_ONLY_LIMIT = 200
    POOL_CAP = 400
    INCLUDE_TOP_CANDIDATES = 100

    def __init__(self, config=None):
        super().__init__(config)
        self.ranker = EntropyRanker(self.config)

    def reset(self, **kwargs) -> None:
        super().reset(**kwargs)
        self.ranker.clear()

    def _select_pool(self, candidates: List[str], allowed: List[str]) -> List[str]:
        if self.config.guess_pool == "candidates" or len(candidates) <= self.CANDIDATE_ONLY_LIMIT:
            return list(candidates)

        # letter coverage w.r.t. the CURRENT candidates
        counts = Counter(ch for w in candidates for ch in set(w))
        by_cover = lambda w: (-_distinct_score(w, counts), w)  # noqa: E731
        top_cands = sorted(candidates, key=by_cover)[: self.INCLUDE_TOP_CANDIDATES]
        top_allowed = sorted(allowed, key=by_cover)[: self.POOL_CAP]
        return top_cands + top_allowed  # ranker drops duplicates

    def next_guess(self, state: dict) -> str:
        session = state["session"]
        candidates = list(session.candidates)
        if len(candidates) == 1:
            return candidates[0]

        pool = self._select_pool(candidates, list(session.allowed))
        ranked = self.ranker.rank(pool, candidates, top_n=None)
        if not ranked:
            raise ValueError("nothing to rank: candidate set is empty")

        best = ranked[0].score
        possible = set(candidates)
        for word, s in ranked:
            if s < best:
                break
            if word in possible:
                return word
        return ranked[0].word
