"""
Assistant session as an immutable value.

A Session holds the vocabulary, the feedback history so far and the
candidates consistent with it. Applying feedback returns a NEW Session;
nothing is mutated, so a caller can keep old sessions for undo.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Tuple

from wordlex.engine import (EntropyRanker, Feedback, InvalidWordError, Outcome,
                            RankedSuggestion, filter_candidates, letter_states)

logger = logging.getLogger(__name__)


def _clean(words: Iterable[str], N: int) -> Tuple[str, ...]:
    """Lowercase, drop blanks and wrong shapes, keep first occurrence order."""
    seen = set()
    out: List[str] = []
    for w in words:
        w = w.strip().lower()
        if len(w) != N or not (w.isascii() and w.isalpha()) or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return tuple(out)


@dataclass(frozen=True)
class Session:
    allowed: Tuple[str, ...]
    answers: Tuple[str, ...]
    N: int = 5
    history: Tuple[Feedback, ...] = ()
    candidates: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        object.__setattr__(self, "history", tuple(self.history))
        if self.candidates is None:
            # built directly with a history: candidates must satisfy all of it
            object.__setattr__(self, "candidates", tuple(filter_candidates(self.answers, self.history)))

    @classmethod
    def start(cls, allowed: Iterable[str], answers: Iterable[str], N: int = 5) -> "Session":
        """
        New session over the given vocabulary. Answers missing from `allowed`
        are added to it so every possible answer can also be guessed.
        """
        answers_t = _clean(answers, N)
        allowed_t = _clean(list(allowed) + list(answers_t), N)
        logger.info("session start: N=%d, %d answers, %d allowed", N, len(answers_t), len(allowed_t))
        return cls(allowed=allowed_t, answers=answers_t, N=N)

    def apply(self, feedback: Feedback) -> "Session":
        """Return a new session with `feedback` appended and candidates narrowed."""
        if len(feedback) != self.N:
            raise InvalidWordError(f"feedback guess {feedback.guess!r} is not {self.N} letters")
        # candidates already satisfy the older entries, so only the new one is checked
        narrowed = tuple(filter_candidates(self.candidates, [feedback]))
        logger.debug("%s %s: %d -> %d candidates", feedback.guess, feedback.pattern,
                     len(self.candidates), len(narrowed))
        return replace(self, history=self.history + (feedback,), candidates=narrowed)

    def record(self, guess: str, pattern: str) -> "Session":
        """Apply caller-entered colours, e.g. record("crane", "YYG-G")."""
        return self.apply(Feedback.from_pattern(guess, pattern))

    @property
    def remaining(self) -> int:
        return len(self.candidates)

    @property
    def is_solved(self) -> bool:
        return bool(self.history) and self.history[-1].is_solved

    @property
    def is_exhausted(self) -> bool:
        """No vocabulary word fits the feedback so far."""
        return not self.candidates

    @property
    def guesses(self) -> List[str]:
        return [fb.guess for fb in self.history]

    @property
    def letter_states(self) -> Dict[str, Outcome]:
        return letter_states(self.history)

    def guess_pool(self, mode: str = "candidates") -> Tuple[str, ...]:
        if mode == "candidates":
            return self.candidates
        if mode == "allowed":
            return self.allowed
        raise ValueError(f"unknown guess pool {mode!r}; expected 'candidates' or 'allowed'")

    def suggestions(self, ranker: Optional[EntropyRanker] = None,
                    top_n: Optional[int] = None) -> List[RankedSuggestion]:
        ranker = ranker or EntropyRanker()
        pool = self.guess_pool(ranker.config.guess_pool)
        return ranker.rank(pool, self.candidates, top_n)
