"""
Keyboard letter states.

Each letter shows the best outcome it has ever received:
Correct > Present > Absent. A letter never regresses once upgraded.
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional

from .scoring import Feedback, Outcome


def merge_letter_state(current: Optional[Outcome], new: Outcome) -> Outcome:
    if current is None or new.precedence > current.precedence:
        return new
    return current


def letter_states(history: Iterable[Feedback],
                  initial: Optional[Mapping[str, Outcome]] = None) -> Dict[str, Outcome]:
    """Fold feedback entries into a letter -> Outcome map (a new dict)."""
    states: Dict[str, Outcome] = dict(initial or {})
    for fb in history:
        for ch, outcome in zip(fb.guess, fb.outcomes):
            states[ch] = merge_letter_state(states.get(ch), outcome)
    return states
