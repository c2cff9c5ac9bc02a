import logging
from pathlib import Path

from wordlex.datasets import load_words, pretty_summary, validate_wordlists, write_lines


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    ans = tmp_path / "possible_words.txt"
    allw = tmp_path / "allowed_words.txt"
    _write(ans, ["crane", "raise", "stare"])
    _write(allw, ["crane", "raise", "stare", "trace", "cared"])

    rep = validate_wordlists(5, str(ans), str(allw))
    assert rep["passed"] is True
    assert rep["answers_subset_allowed"] is True
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "N=5" in s and "answers⊆allowed=True" in s and s.endswith("OK")


def test_validate_wordlists_flags_errors(tmp_path: Path):
    ans = tmp_path / "answers_6.txt"
    allw = tmp_path / "allowed_6.txt"
    ans.write_text("raiser\ncrane\n???\n", encoding="utf-8")
    allw.write_text("raiser\nplanet\npalate\n", encoding="utf-8")

    rep = validate_wordlists(6, str(ans), str(allw))
    assert rep["passed"] is False
    assert rep["answers"]["invalid_lines"] == 2
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(ans, ["crane", "raise", "stare"])
    _write(allw, ["crane", "stare"])

    rep = validate_wordlists(5, str(ans), str(allw))
    assert rep["passed"] is False
    assert rep["answers_subset_allowed"] is False
    assert any("subset" in msg for msg in rep["issues"])


def test_validate_wordlists_missing_file(tmp_path: Path):
    allw = tmp_path / "allowed_5.txt"
    _write(allw, ["crane"])
    rep = validate_wordlists(5, str(tmp_path / "nope.txt"), str(allw))
    assert rep["passed"] is False
    assert rep["answers"]["exists"] is False
    assert any("not found" in msg for msg in rep["issues"])
    assert "FAIL" in pretty_summary(rep)


def test_load_words_normalizes(tmp_path: Path, caplog):
    p = write_lines(["Crane", "", "slate", "crane", "toolong", "tr4ce", "crané", "  react  "],
                    tmp_path / "words" / "list.txt")
    with caplog.at_level(logging.WARNING, logger="wordlex.datasets.io"):
        words = load_words(p, 5)
    assert words == ["crane", "slate", "react"]
    assert "skipped 3" in caplog.text


def test_validate_wordlists_rejects_non_ascii_letters(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(ans, ["crane", "crané"])
    _write(allw, ["crane", "crané"])

    rep = validate_wordlists(5, str(ans), str(allw))
    assert rep["passed"] is False
    assert rep["answers"]["invalid_lines"] == 1
    assert rep["allowed"]["invalid_lines"] == 1
