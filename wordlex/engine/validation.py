"""
Lightweight guess validation for callers that collect words from people.

The scorer rejects malformed words by raising; these helpers let an input
layer ask first and get a plain answer back instead of an exception.
"""

from typing import Iterable, Optional, Set


def word_problem(word: object, N: int) -> Optional[str]:
    """
    Return a short reason why `word` cannot be used as an N-letter word,
    or None when it is fine.
    """
    if not isinstance(word, str):
        return "not a string"
    if not word:
        return "empty"
    if not (word.isascii() and word.isalpha()):
        return "letters a-z only"
    if len(word) != N:
        return f"must be {N} letters, got {len(word)}"
    return None


def validate_guess(word: object, allowed: Iterable[str], N: int) -> bool:
    """
    True iff `word` is a well-formed N-letter word present in `allowed`.

    `allowed` may be large; pass a set when calling in a loop, otherwise a
    local set is built on every call.
    """
    if word_problem(word, N) is not None:
        return False
    allowed_set: Set[str] = allowed if isinstance(allowed, (set, frozenset)) \
        else {a.strip().lower() for a in allowed}
    return word.lower() in allowed_set
