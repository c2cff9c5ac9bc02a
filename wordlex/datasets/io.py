from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_words(p: Path | str, N: int) -> List[str]:
    """
    One word per line -> lowercase list of N-letter words, first occurrence order.
    Blank lines are skipped silently; malformed lines are skipped with a warning.
    """
    words: List[str] = []
    seen = set()
    bad = 0
    for raw in read_lines(p):
        w = raw.strip().lower()
        if not w:
            continue
        if len(w) != N or not (w.isascii() and w.isalpha()):
            bad += 1
            continue
        if w not in seen:
            seen.add(w)
            words.append(w)
    if bad:
        logger.warning("%s: skipped %d line(s) that are not %d-letter words", p, bad, N)
    logger.debug("%s: loaded %d words", p, len(words))
    return words
