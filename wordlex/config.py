"""
Ranker configuration.

Defaults mirror the interactive assistant: ten suggestions, drawn from the
words that can still be the answer.
"""

from __future__ import annotations

from dataclasses import dataclass

GUESS_POOLS = ("candidates", "allowed")


@dataclass
class RankerConfig:
    top_n: int = 10
    # 1 = evaluate in the calling thread; >1 = thread pool of that size
    max_workers: int = 1
    # keep partition maps for the current candidate snapshot between calls
    use_cache: bool = True
    # where suggestions come from: remaining candidates, or the whole allowed list
    guess_pool: str = "candidates"
    # below this many pool words a thread pool is not worth starting
    parallel_threshold: int = 256

    def __post_init__(self):
        if self.top_n < 0:
            raise ValueError(f"top_n must be >= 0; got {self.top_n}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1; got {self.max_workers}")
        if self.guess_pool not in GUESS_POOLS:
            raise ValueError(f"guess_pool must be one of {GUESS_POOLS}; got {self.guess_pool!r}")
