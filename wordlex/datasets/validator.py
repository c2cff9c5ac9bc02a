"""
Word-list validation.

Checks a pair of lists, possible answers and allowed guesses, for length N:
  - each line is one lowercase a-z word of exactly N letters
  - no duplicates
  - answers are a subset of allowed
and reports counts plus the SHA-256 of each raw file, as a plain dict that
can go straight into a run manifest.

    rep = validate_wordlists(5, "data/possible_words.txt", "data/allowed_words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List


@dataclass
class FileReport:
    path: str
    exists: bool
    count: int = 0           # valid words, duplicates included
    unique_count: int = 0
    invalid_lines: int = 0   # blank or malformed lines
    sha256: str = ""


@dataclass
class ValidationReport:
    N: int
    answers: FileReport
    allowed: FileReport
    answers_subset_allowed: bool = False
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan(path: Path, N: int, label: str, issues: List[str]) -> tuple[FileReport, set]:
    rep = FileReport(path=str(path), exists=path.exists())
    if not rep.exists:
        issues.append(f"{label} file not found: {path}")
        return rep, set()

    words: List[str] = []
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            # must already be lowercase; a-z only; exact length
            if w and w == w.lower() and w.isascii() and w.isalpha() and len(w) == N:
                words.append(w)
            else:
                rep.invalid_lines += 1

    uniq = set(words)
    rep.count, rep.unique_count, rep.sha256 = len(words), len(uniq), _sha256_file(path)

    if rep.count == 0:
        issues.append(f"{label} file contains 0 valid words")
    if rep.invalid_lines:
        issues.append(f"{label} has {rep.invalid_lines} invalid line(s)")
    if rep.count != rep.unique_count:
        issues.append(f"{label} contains duplicate lines")
    return rep, uniq


def validate_wordlists(N: int, answers_path: str, allowed_path: str) -> Dict:
    """
    Validate the answers/allowed lists for word length N.

    Returns a JSON-serializable dict (ValidationReport fields). `passed` requires
    both files present and non-empty, no invalid lines, and answers within allowed.
    Duplicates are reported in `issues` but do not fail the check.
    """
    issues: List[str] = []
    ans_rep, ans = _scan(Path(answers_path), N, "answers", issues)
    all_rep, allw = _scan(Path(allowed_path), N, "allowed", issues)

    subset_ok = ans_rep.exists and all_rep.exists and ans.issubset(allw)
    if ans_rep.exists and all_rep.exists and not subset_ok:
        missing = sorted(ans - allw)[:5]
        issues.append(f"answers not subset of allowed (e.g., {missing})")

    passed = (
        subset_ok
        and ans_rep.count > 0 and all_rep.count > 0
        and ans_rep.invalid_lines == 0 and all_rep.invalid_lines == 0
    )
    return asdict(ValidationReport(N, ans_rep, all_rep, subset_ok, passed, issues))


def pretty_summary(report: Dict) -> str:
    """
    One line for the console, e.g.
        N=5 | answers=2315 (uniq=2315, sha=abc123...) | allowed=12972 (...) | answers⊆allowed=True | OK
    """
    a, b = report["answers"], report["allowed"]
    status = "OK" if report["passed"] else "FAIL"
    return (
        f"N={report['N']} | answers={a['count']} (uniq={a['unique_count']}, sha={a['sha256'][:12]}) "
        f"| allowed={b['count']} (uniq={b['unique_count']}, sha={b['sha256'][:12]}) "
        f"| answers⊆allowed={report['answers_subset_allowed']} | {status}"
    )
