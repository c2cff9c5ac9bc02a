import pytest
from wordlex import RankerConfig, Session
from wordlex.engine import EntropyRanker, Feedback, InvalidWordError, Outcome, matches, score

ANSWERS = ["crane", "slate", "trace", "react"]
ALLOWED = ["crane", "slate", "trace", "adieu", "roate"]


def test_start_normalizes_and_merges_answers_into_allowed():
    s = Session.start(ALLOWED + ["CRANE", "toolong", ""], ANSWERS + ["Crane"], N=5)
    assert s.answers == ("crane", "slate", "trace", "react")
    assert s.candidates == s.answers
    assert "react" in s.allowed and "toolong" not in s.allowed
    assert s.allowed.count("crane") == 1
    assert s.history == () and s.remaining == 4


def test_record_narrows_without_mutating():
    s0 = Session.start(ALLOWED, ANSWERS)
    s1 = s0.record("crane", "YGG-G")
    assert s1.candidates == ("trace",)
    assert s0.candidates == tuple(ANSWERS) and s0.history == ()
    assert s1.guesses == ["crane"]
    assert not s1.is_solved and not s1.is_exhausted

    s2 = s1.apply(score("trace", "trace"))
    assert s2.is_solved
    assert s2.letter_states["t"] is Outcome.CORRECT
    assert s2.letter_states["n"] is Outcome.ABSENT


def test_apply_matches_full_history_filter():
    s = Session.start(ALLOWED, ANSWERS)
    for fb in (score("slate", "react"), score("roate", "react")):
        s = s.apply(fb)
    assert s.candidates == ("react",)


def test_inconsistent_feedback_exhausts():
    s = Session.start(ALLOWED, ANSWERS).record("adieu", "GGGGG")
    assert s.is_exhausted
    assert s.suggestions() == []


def test_apply_rejects_wrong_length():
    s = Session.start(ALLOWED, ANSWERS)
    with pytest.raises(InvalidWordError):
        s.apply(Feedback.from_pattern("cranes", "------"))


def test_guess_pool_modes():
    s = Session.start(ALLOWED, ANSWERS)
    assert s.guess_pool("candidates") == s.candidates
    assert s.guess_pool("allowed") == s.allowed
    with pytest.raises(ValueError):
        s.guess_pool("everything")


def test_suggestions_use_configured_pool():
    s = Session.start(ALLOWED, ANSWERS)
    from_candidates = s.suggestions(EntropyRanker(RankerConfig(top_n=10)))
    assert {w for w, _ in from_candidates} == set(ANSWERS)

    from_allowed = s.suggestions(EntropyRanker(RankerConfig(guess_pool="allowed")), top_n=3)
    assert len(from_allowed) == 3
    assert all(w in s.allowed for w, _ in from_allowed)
    scores = [sc for _, sc in from_allowed]
    assert scores == sorted(scores, reverse=True)


def test_start_drops_non_ascii_words():
    s = Session.start(ALLOWED + ["crané"], ANSWERS + ["slaté"])
    assert "crané" not in s.allowed and "slaté" not in s.answers


def test_direct_construction_filters_by_history():
    fb = score("crane", "trace")
    s = Session(allowed=tuple(ALLOWED), answers=tuple(ANSWERS), history=(fb,))
    assert s.candidates == ("trace",)
    assert all(matches(w, fb) for w in s.candidates)
    assert Session(allowed=tuple(ALLOWED), answers=tuple(ANSWERS), history=[fb]).history == (fb,)
