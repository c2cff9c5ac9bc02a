# apps/cli/run.py
"""
CLI entry point for solver simulations.

This script:
  1) Validates the word lists (counts + SHA, answers ⊆ allowed).
  2) Loads the lists and instantiates the requested solver.
  3) Plays a batch of games with a progress bar and writes:
       - CSV:  per-game results + guess/pattern/remaining columns
       - JSON: manifest with config, word-list report and git commit
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List

from tqdm import tqdm

from wordlex.config import GUESS_POOLS, RankerConfig
from wordlex.datasets import load_words, pretty_summary, validate_wordlists
from wordlex.harness import WORDLE_MAX_TURNS, run_case
from wordlex.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest
from wordlex.solvers import create_solver, get_solver_ids


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="wordlex: run solver simulations")
    ap.add_argument("--solver", default="entropy",
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--answers", default="data/possible_words.txt", help="possible answers list")
    ap.add_argument("--allowed", default="data/allowed_words.txt", help="allowed guesses list")
    ap.add_argument("--pool", choices=GUESS_POOLS, default="candidates",
                    help="guess pool for the entropy solver")
    ap.add_argument("--workers", type=int, default=1, help="threads used for ranking")
    ap.add_argument("--sample", type=int, help="play only this many answers (shuffled by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--strict", action="store_true", help="stop if word-list validation fails")
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    args = ap.parse_args(argv)
    try:
        config = RankerConfig(max_workers=args.workers, guess_pool=args.pool)
    except ValueError as e:
        ap.error(str(e))

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    rep = validate_wordlists(args.N, args.answers, args.allowed)
    print(pretty_summary(rep))
    if args.strict and not rep["passed"]:
        print("Validation failed: " + "; ".join(rep["issues"]), file=sys.stderr)
        return 1

    answers = load_words(args.answers, args.N)
    allowed = load_words(args.allowed, args.N)
    solver = create_solver(args.solver, config)

    cases = list(answers)
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]

    results = []
    for idx, ans in enumerate(tqdm(cases, ncols=80, desc="Playing", unit="game"), 1):
        r = run_case(solver, ans, allowed=allowed, answers=answers, N=args.N,
                     seed=args.seed + idx)
        r["solver_id"] = solver.id
        results.append(r)

    solved = [r for r in results if r["success"]]
    if results:
        avg = sum(r["guesses"] for r in solved) / max(1, len(solved))
        print(f"Solved {len(solved)}/{len(results)} | mean guesses (solved) {avg:.3f}")

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = write_csv(results, str(outdir / f"run_{run_id}.csv"), max_turns=WORDLE_MAX_TURNS, N=args.N)
    manifest_path = write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
    }, str(outdir / f"run_{run_id}_manifest.json"))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
