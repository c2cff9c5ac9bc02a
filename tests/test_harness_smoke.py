import pytest
from wordlex.harness import run_batch, run_case
from wordlex.solvers import create_solver, get_solver_ids


def test_registry():
    assert get_solver_ids() == ["entropy", "random_consistent"]
    with pytest.raises(ValueError):
        create_solver("nope")


def test_run_case_smoke():
    answers = ["crane", "raise", "stare"]
    allowed = ["crane", "raise", "stare", "trace", "cared"]
    solver = create_solver("random_consistent")
    r = run_case(solver, "crane", allowed=allowed, answers=answers, N=5, max_turns=6, seed=42)
    assert r["success"] is True
    assert r["history"][-1] == ("crane", "GGGGG")
    assert len(r["remaining"]) == r["guesses"]


def test_run_case_enforces_turn_budget():
    with pytest.raises(ValueError):
        run_case(create_solver("random_consistent"), "crane",
                 allowed=["crane"], answers=["crane"], N=5, max_turns=7)


def test_run_batch_sample():
    answers = ["crane", "raise", "stare", "trace", "cared"]
    out = run_batch(create_solver("random_consistent"), answers, allowed=answers, N=5,
                    seed=1, sample=3)
    assert [r["answer"] for r in out] == answers[:3]
    assert all(r["success"] for r in out)


def test_write_csv_and_manifest(tmp_path):
    import csv
    import json
    from wordlex.harness import WORDLE_MAX_TURNS, write_csv, write_manifest

    answers = ["crane", "raise", "stare"]
    r = run_case(create_solver("entropy"), "stare", allowed=answers, answers=answers, N=5, seed=3)
    r["solver_id"] = "entropy"
    path = write_csv([r], str(tmp_path / "out" / "run.csv"), max_turns=WORDLE_MAX_TURNS, N=5)
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1
    assert rows[0]["solver"] == "entropy" and rows[0]["answer"] == "stare"
    assert rows[0]["patt_1"].startswith("'")

    mpath = write_manifest({"num_cases": 1}, str(tmp_path / "out" / "m.json"))
    with open(mpath, encoding="utf-8") as f:
        assert json.load(f) == {"num_cases": 1}
