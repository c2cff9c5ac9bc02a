"""
Entropy ranking (expected information gain).

For a guess g and the CURRENT candidates, partition the candidates by the
pattern g would produce against each of them. With bucket sizes c_i out of n,
the expected information is

    H(g) = -sum_i (c_i / n) * log2(c_i / n)      (bits)

H is 0 when every candidate gives the same pattern (including n <= 1) and
never exceeds log2(n). Guesses are ranked by H descending, ties by word.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from wordlex.config import RankerConfig
from .scoring import _check_pair, _pattern

logger = logging.getLogger(__name__)

PartitionMap = Dict[str, int]


class RankedSuggestion(NamedTuple):
    word: str
    score: float  # expected bits


def partition(guess: str, candidates: Iterable[str]) -> PartitionMap:
    """Map each realizable pattern key to the number of candidates producing it."""
    buckets: PartitionMap = defaultdict(int)
    for ans in candidates:
        g, a = _check_pair(guess, ans)
        buckets[_pattern(g, a)] += 1
    return dict(buckets)


def entropy_from_counts(counts: Iterable[int]) -> float:
    """
    Shannon entropy (bits) of a bucket-count histogram.

    Written as log2(n) - sum(c * log2(c)) / n: the subtracted term is never
    negative, so the result stays within [0, log2(n)] under rounding.
    """
    # sorted so that equal histograms always sum in the same order
    arr = np.sort(np.fromiter(counts, dtype=np.float64))
    arr = arr[arr > 0]
    if arr.size <= 1:
        return 0.0
    n = float(arr.sum())
    h = np.log2(n) - float(np.sum(arr * np.log2(arr))) / n
    return float(min(max(h, 0.0), np.log2(n)))


def entropy(guess: str, candidates: Sequence[str]) -> float:
    if len(candidates) <= 1:
        return 0.0
    return entropy_from_counts(partition(guess, candidates).values())


def partition_sizes(guess: str, candidates: Sequence[str]) -> List[int]:
    """Bucket sizes, largest first."""
    return sorted(partition(guess, candidates).values(), reverse=True)


def _sort_and_cut(scored: Iterable[Tuple[str, float]], top_n: Optional[int]) -> List[RankedSuggestion]:
    ranked = sorted(scored, key=lambda ws: (-ws[1], ws[0]))
    if top_n is not None:
        ranked = ranked[:top_n]
    return [RankedSuggestion(w, s) for w, s in ranked]


def _unique(words: Iterable[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for w in words:
        w = w.lower()
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def rank(guess_pool: Iterable[str], candidates: Sequence[str],
         top_n: Optional[int] = 10) -> List[RankedSuggestion]:
    """
    Score every word in `guess_pool` against `candidates` and return the best
    `top_n` (None = all). Empty pool or empty candidates give an empty list.
    """
    pool = _unique(guess_pool)
    if not pool or not candidates:
        return []
    return _sort_and_cut(((g, entropy(g, candidates)) for g in pool), top_n)


class EntropyRanker:
    """
    Ranker that remembers partition maps for one candidate snapshot.

    The snapshot is the exact tuple of candidates last seen; any other
    candidate list clears the cache. The cache never leaves this object.
    """

    def __init__(self, config: Optional[RankerConfig] = None):
        self.config = config or RankerConfig()
        self._snapshot: Optional[Tuple[str, ...]] = None
        self._partitions: Dict[str, PartitionMap] = {}

    def _sync(self, candidates: Sequence[str]) -> Tuple[str, ...]:
        snap = tuple(candidates)
        if snap != self._snapshot:
            if self._partitions:
                logger.debug("candidate set changed (%d -> %d words); dropping %d cached partitions",
                             len(self._snapshot or ()), len(snap), len(self._partitions))
            self._snapshot = snap
            self._partitions = {}
        return snap

    def clear(self) -> None:
        self._snapshot = None
        self._partitions = {}

    @property
    def cache_size(self) -> int:
        return len(self._partitions)

    def partition(self, guess: str, candidates: Sequence[str]) -> PartitionMap:
        if not self.config.use_cache:
            return partition(guess, candidates)
        guess = guess.lower()
        snap = self._sync(candidates)
        cached = self._partitions.get(guess)
        if cached is None:
            cached = self._partitions[guess] = partition(guess, snap)
        return dict(cached)

    def entropy(self, guess: str, candidates: Sequence[str]) -> float:
        if len(candidates) <= 1:
            return 0.0
        return entropy_from_counts(self.partition(guess, candidates).values())

    def breakdown(self, guess: str, candidates: Sequence[str]) -> List[int]:
        """Bucket sizes for `guess`, largest first."""
        return sorted(self.partition(guess, candidates).values(), reverse=True)

    def _partitions_for(self, pool: List[str], snap: Tuple[str, ...]) -> Dict[str, PartitionMap]:
        cfg = self.config
        known = self._partitions if cfg.use_cache else {}
        missing = [g for g in pool if g not in known]

        if cfg.max_workers > 1 and len(missing) >= cfg.parallel_threshold:
            logger.debug("partitioning %d guesses on %d threads", len(missing), cfg.max_workers)
            with ThreadPoolExecutor(max_workers=cfg.max_workers) as ex:
                fresh = dict(zip(missing, ex.map(lambda g: partition(g, snap), missing)))
        else:
            fresh = {g: partition(g, snap) for g in missing}

        if cfg.use_cache:
            self._partitions.update(fresh)
            return {g: self._partitions[g] for g in pool}
        return fresh

    def rank(self, guess_pool: Iterable[str], candidates: Sequence[str],
             top_n: Optional[int] = None) -> List[RankedSuggestion]:
        """Same contract as `rank`; `top_n` defaults to the configured value."""
        if top_n is None:
            top_n = self.config.top_n
        pool = _unique(guess_pool)
        if not pool or not candidates:
            return []

        snap = self._sync(candidates) if self.config.use_cache else tuple(candidates)
        parts = self._partitions_for(pool, snap)

        if len(snap) <= 1:
            scored = [(g, 0.0) for g in pool]
        else:
            scored = [(g, entropy_from_counts(parts[g].values())) for g in pool]
        logger.debug("ranked %d guesses against %d candidates", len(pool), len(snap))
        return _sort_and_cut(scored, top_n)
