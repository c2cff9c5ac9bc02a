"""
Offline game simulation.

- run_case:  play one puzzle (one hidden answer) with a given solver.
- run_batch: play many puzzles in sequence (optionally a sample prefix).

Feedback is re-derived from the known answer with the scorer and fed through
the same Session the interactive assistant uses. Wordle's 6-turn limit is
enforced here.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List

from wordlex.engine import score
from wordlex.session import Session

logger = logging.getLogger(__name__)

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with a different turn budget."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        solver,
        answer: str,
        *,
        allowed: Iterable[str],
        answers: Iterable[str],
        N: int,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Play one game until the solver wins or the turn budget runs out.

    Returns a dict with keys:
        answer, success, guesses, time_ms,
        history (list of (guess, pattern)), remaining (candidates after each turn)
    """
    _assert_wordle_turns(max_turns)

    session = Session.start(allowed, answers, N)
    solver.reset(allowed=list(session.allowed), answers=list(session.answers), N=N, seed=seed)

    remaining: List[int] = []
    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        guess = solver.next_guess({"turn": turn, "session": session, "rng": solver.rng})
        session = session.apply(score(guess, answer))
        remaining.append(session.remaining)
        if session.is_solved:
            break

    dt = (time.perf_counter() - t0) * 1000.0
    logger.debug("%s: %s in %d (%.1f ms)", answer, "solved" if session.is_solved else "failed",
                 len(session.history), dt)
    return {
        "answer": answer,
        "success": session.is_solved,
        "guesses": len(session.history),
        "time_ms": dt,
        "history": [(fb.guess, fb.pattern) for fb in session.history],
        "remaining": remaining,
    }


def run_batch(
        solver,
        answers: List[str],
        *,
        allowed: List[str],
        N: int,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If `sample` is given, only the first K answers
    (after filtering to length N) are played.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible without every case sharing one RNG stream.
    """
    _assert_wordle_turns(max_turns)

    pool = [w for w in answers if len(w) == N]
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, ans, allowed=allowed, answers=answers, N=N,
                            max_turns=max_turns, seed=case_seed))
    solved = sum(r["success"] for r in out)
    logger.info("batch done: %d/%d solved", solved, len(out))
    return out
