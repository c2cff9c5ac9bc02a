import pytest
from apps.cli import run, suggest


@pytest.mark.parametrize("argv", [["--top", "-1"], ["--workers", "0"]])
def test_suggest_rejects_bad_config_flags(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        suggest.main(argv)
    assert exc.value.code == 2
    assert "must be" in capsys.readouterr().err


def test_run_rejects_bad_workers(capsys):
    with pytest.raises(SystemExit) as exc:
        run.main(["--workers", "0"])
    assert exc.value.code == 2
    assert "max_workers" in capsys.readouterr().err


def test_suggest_prints_ranked_suggestions(tmp_path, capsys):
    answers = tmp_path / "possible_words.txt"
    allowed = tmp_path / "allowed_words.txt"
    answers.write_text("crane\nslate\ntrace\nreact\n", encoding="utf-8")
    allowed.write_text("crane\nslate\ntrace\nreact\nadieu\n", encoding="utf-8")

    code = suggest.main(["--answers", str(answers), "--allowed", str(allowed), "--top", "3"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Remaining words: 4" in out and "Top suggestions:" in out

    suggest.main(["--answers", str(answers), "--allowed", str(allowed), "crane:YGG-G"])
    assert "Remaining words: 1" in capsys.readouterr().out
