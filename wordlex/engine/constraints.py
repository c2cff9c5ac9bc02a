"""
Candidate filtering given game history.

Given:
  - a pool of words (usually the possible-answers list, or the current candidates)
  - a history of Feedback records, oldest first

Return:
  - the words that reproduce EVERY recorded feedback when taken as the answer.

The test is a logical AND over the history, so the order of entries does not
change the result; filtering is idempotent and can only shrink the pool.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .scoring import Feedback, matches

# History is an ordered sequence of Feedback records, one per confirmed guess.
History = Sequence[Feedback]


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words consistent with all of `history`.

    Args:
      words   : iterable of candidate words (order is preserved in the output)
      history : Feedback records seen so far

    Returns:
      List[str] of consistent candidates. An empty result is a valid state
      (the answer lies outside the vocabulary, or the feedback was mistyped).

    Raises:
      InvalidWordError if a word's length differs from a recorded guess.
    """
    history = list(history)
    if not history:
        return list(words)

    return [w for w in words if all(matches(w, fb) for fb in history)]
