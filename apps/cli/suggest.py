# apps/cli/suggest.py
"""
CLI assistant: enter the colours Wordle showed, get ranked next guesses.

    python -m apps.cli.suggest --answers data/possible_words.txt \
        --allowed data/allowed_words.txt crane:YYG-G

Each positional argument is GUESS:PATTERN with G = green, Y = yellow,
- (or . x b) = gray. With --interactive, lines are read from stdin instead
until the puzzle is solved or an empty line is entered.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from wordlex.config import GUESS_POOLS, RankerConfig
from wordlex.datasets import load_words
from wordlex.engine import EntropyRanker, InvalidFeedbackError, InvalidWordError, word_problem
from wordlex.session import Session

SHOW_CANDIDATES = 20


def _parse_entry(entry: str, N: int):
    guess, sep, pattern = entry.partition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected GUESS:PATTERN, got {entry!r}")
    problem = word_problem(guess, N)
    if problem:
        raise argparse.ArgumentTypeError(f"{guess!r}: {problem}")
    return guess.lower(), pattern


def _report(session: Session, ranker: EntropyRanker) -> None:
    if session.is_solved:
        print(f"Solved: {session.history[-1].guess}")
        return
    if session.is_exhausted:
        print("No remaining candidates: check the entered colours or the word lists.")
        return

    print(f"Remaining words: {session.remaining}")
    for w in session.candidates[:SHOW_CANDIDATES]:
        print(f"  {w}")
    if session.remaining > SHOW_CANDIDATES:
        print(f"  ... and {session.remaining - SHOW_CANDIDATES} more")

    print("Top suggestions:")
    for word, bits in session.suggestions(ranker):
        groups = ranker.breakdown(word, session.candidates)
        print(f"  {word}  {bits:5.2f} bits  groups={groups[:8]}{' ...' if len(groups) > 8 else ''}")


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="wordlex: entropy-ranked Wordle suggestions")
    ap.add_argument("entries", nargs="*", help="feedback so far, as GUESS:PATTERN (e.g. crane:YYG-G)")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--answers", default="data/possible_words.txt",
                    help="possible answers (initial candidate set)")
    ap.add_argument("--allowed", default="data/allowed_words.txt",
                    help="allowed guesses")
    ap.add_argument("--top", type=int, default=10, help="number of suggestions")
    ap.add_argument("--pool", choices=GUESS_POOLS, default="candidates",
                    help="rank remaining candidates only, or every allowed word")
    ap.add_argument("--workers", type=int, default=1, help="threads used for ranking")
    ap.add_argument("--interactive", action="store_true", help="read GUESS:PATTERN lines from stdin")
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = RankerConfig(top_n=args.top, max_workers=args.workers, guess_pool=args.pool)
    except ValueError as e:
        ap.error(str(e))
    ranker = EntropyRanker(config)
    session = Session.start(load_words(args.allowed, args.N), load_words(args.answers, args.N), args.N)

    try:
        for entry in args.entries:
            session = session.record(*_parse_entry(entry, args.N))
    except (argparse.ArgumentTypeError, InvalidWordError, InvalidFeedbackError) as e:
        ap.error(str(e))

    _report(session, ranker)
    if not args.interactive:
        return 0

    while not (session.is_solved or session.is_exhausted):
        line = input("guess:pattern> ").strip()
        if not line:
            break
        try:
            session = session.record(*_parse_entry(line, args.N))
        except (argparse.ArgumentTypeError, InvalidWordError, InvalidFeedbackError) as e:
            print(f"! {e}", file=sys.stderr)
            continue
        _report(session, ranker)
    return 0


if __name__ == "__main__":
    sys.exit(main())
