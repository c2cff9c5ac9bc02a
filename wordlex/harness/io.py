"""
Writers for simulation runs.

- write_csv:      one row per game, guesses and patterns spread over columns.
- write_manifest: JSON dump of the run configuration and word-list report.
- timestamp_id:   compact UTC run id.
- git_commit_or_unknown: short commit hash for reproducibility.

Patterns are prefixed with an apostrophe so spreadsheet apps do not read
strings like "-GYY-" as formulas.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import logging
import subprocess
from pathlib import Path
from typing import Dict, List

logger = logging.getLogger(__name__)


def _excel_safe_pattern(patt: str) -> str:
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_turns: int, N: int) -> str:
    """
    Columns: solver, N, answer, success, guesses, time_ms,
             guess_1, patt_1, left_1, ..., guess_<max_turns>, patt_<max_turns>, left_<max_turns>
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "N", "answer", "success", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}", f"left_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "N": N,
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            left = r.get("remaining", [])
            for i in range(max_turns):
                g, patt = hist[i] if i < len(hist) else ("", "")
                row[f"guess_{i + 1}"] = g
                row[f"patt_{i + 1}"] = _excel_safe_pattern(patt)
                row[f"left_{i + 1}"] = left[i] if i < len(left) else ""
            w.writerow(row)

    logger.info("wrote %d rows to %s", len(results), p)
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """e.g. 20250820T024121Z"""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"],
                                      stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        logger.debug("git commit unavailable")
        return "unknown"
    return out.decode().strip()
