"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Conventions (one character per position in a pattern key):
  - 'G'  : Correct = letter in the correct position
  - 'Y'  : Present = letter elsewhere in the answer, not yet consumed
  - '-'  : Absent  = letter not present (or present fewer times than guessed)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     of the answer.
  2) Second pass walks the guess left to right and marks a yellow only while
     that letter still has an unconsumed instance in the answer.

Counting unconsumed instances gives exactly the same outcomes as scanning for
the leftmost unconsumed answer position: only the multiplicity of each letter
decides whether a later duplicate in the guess turns yellow or gray.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class InvalidWordError(ValueError):
    """A guess or answer is empty, non-alphabetic, or of the wrong length."""


class InvalidFeedbackError(ValueError):
    """A feedback record does not line up with its guess."""


class Outcome(Enum):
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "-"

    @property
    def precedence(self) -> int:
        """Display rank used when folding feedback into keyboard colours."""
        return _PRECEDENCE[self]


_PRECEDENCE = {Outcome.CORRECT: 2, Outcome.PRESENT: 1, Outcome.ABSENT: 0}
_BY_SYMBOL = {o.value: o for o in Outcome}


def _normalize(word: str, label: str) -> str:
    if not isinstance(word, str):
        raise InvalidWordError(f"{label} must be a string, got {type(word).__name__}")
    w = word.lower()
    if not w or not (w.isascii() and w.isalpha()):
        raise InvalidWordError(f"{label} must be non-empty, letters a-z only: {word!r}")
    return w


@dataclass(frozen=True)
class Feedback:
    """Outcome sequence for one confirmed guess. Meaningful only with its guess."""
    guess: str
    outcomes: Tuple[Outcome, ...]

    def __post_init__(self):
        guess = _normalize(self.guess, "guess")
        outcomes = tuple(self.outcomes)
        if len(outcomes) != len(guess):
            raise InvalidFeedbackError(
                f"feedback for {guess!r} needs {len(guess)} outcomes, got {len(outcomes)}")
        if not all(isinstance(o, Outcome) for o in outcomes):
            raise InvalidFeedbackError(f"outcomes must be Outcome members: {outcomes!r}")
        # frozen dataclass: write the normalized values through object.__setattr__
        object.__setattr__(self, "guess", guess)
        object.__setattr__(self, "outcomes", outcomes)

    @classmethod
    def from_pattern(cls, guess: str, pattern: str) -> "Feedback":
        """
        Build feedback from a pattern key such as "GY--G".

        Lowercase 'g'/'y' and '.'/'x'/'b' for gray are accepted as typed by hand.
        """
        outcomes = []
        for ch in pattern:
            sym = ch.upper()
            if sym in (".", "X", "B"):
                sym = "-"
            if sym not in _BY_SYMBOL:
                raise InvalidFeedbackError(f"unknown feedback symbol {ch!r} in {pattern!r}")
            outcomes.append(_BY_SYMBOL[sym])
        return cls(guess, tuple(outcomes))

    @property
    def pattern(self) -> str:
        return canonical_key(self)

    @property
    def is_solved(self) -> bool:
        return all(o is Outcome.CORRECT for o in self.outcomes)

    def __len__(self) -> int:
        return len(self.outcomes)


def _pattern(guess: str, answer: str) -> str:
    """Two-pass scoring on already-normalized, equal-length words."""
    n = len(guess)
    pattern = ["-"] * n

    # Pass 1: greens, and leftover counts of the answer's unmatched letters.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "G"
        else:
            remaining[a] += 1

    # Pass 2: yellows, capped by the answer's true multiplicity.
    for i, g in enumerate(guess):
        if pattern[i] == "G":
            continue
        if remaining[g] > 0:
            pattern[i] = "Y"
            remaining[g] -= 1

    return "".join(pattern)


def _check_pair(guess: str, answer: str) -> Tuple[str, str]:
    guess = _normalize(guess, "guess")
    answer = _normalize(answer, "answer")
    if len(guess) != len(answer):
        raise InvalidWordError(
            f"guess {guess!r} and answer {answer!r} differ in length "
            f"({len(guess)} != {len(answer)})")
    return guess, answer


def score_pattern(guess: str, answer: str) -> str:
    """
    Compute the canonical pattern key for `guess` against `answer`.

    Examples:
      score_pattern("belle", "level") -> "-GYYY"
      score_pattern("speed", "abide") -> "--Y-Y"
    """
    return _pattern(*_check_pair(guess, answer))


def score(guess: str, answer: str) -> Feedback:
    """Compute the full Feedback for `guess` against `answer`."""
    guess, answer = _check_pair(guess, answer)
    return Feedback(guess, tuple(_BY_SYMBOL[c] for c in _pattern(guess, answer)))


def canonical_key(feedback: Feedback) -> str:
    """One symbol per outcome; equal outcome sequences give equal keys and vice versa."""
    return "".join(o.value for o in feedback.outcomes)


def matches(word: str, feedback: Feedback) -> bool:
    """True iff `word`, taken as the answer, reproduces `feedback` exactly."""
    guess, word = _check_pair(feedback.guess, word)
    return _pattern(guess, word) == canonical_key(feedback)
