"""Tests for the heuristic roast scorer."""
from backend.roaster.scorer import MAX_SCORE, MIN_SCORE, score, score_breakdown


def test_scenario_score():
    text = "This plan is TREMENDOUS and VERY bold!!!!!".ljust(120, ".")
    assert score(text) == 71
    parts = score_breakdown(text)
    assert parts["emphasis"] == 5
    assert parts["caps"] == 4
    assert parts["exclamation"] == 10
    assert parts["length"] == 2


def test_empty_text_scores_base():
    assert score("") == 50


def test_saturated_text_clamps_to_max():
    text = (
        "TREMENDOUS HUGE SAD FAKE believe me DISASTER the best bigly LOSER "
        "nobody total failure FIRED!!!!!!!!!!!! " * 10
    )
    parts = score_breakdown(text)
    assert parts["emphasis"] == 25
    assert parts["caps"] == 20
    assert parts["exclamation"] == 10
    assert parts["length"] == 5
    assert score(text) == MAX_SCORE


def test_scores_stay_in_bounds():
    for text in ["", "a", "!!!", "quiet words only", "SAD! " * 500, "x" * 5000]:
        assert MIN_SCORE <= score(text) <= MAX_SCORE


def test_adding_emphasis_never_lowers_score():
    plain = "This pitch is fine and the plan is fine."
    punchy = "This pitch is huge and the plan is fine."
    assert len(plain) == len(punchy)
    assert score(punchy) >= score(plain)
    assert score(punchy) == score(plain) + 5


def test_emphasis_counts_distinct_phrases():
    assert score_breakdown("sad sad sad")["emphasis"] == 5


def test_caps_runs_need_two_letters():
    assert score_breakdown("I A B C")["caps"] == 0
    assert score_breakdown("OK NO")["caps"] == 4


def test_score_is_deterministic():
    text = "Believe me, this is a DISASTER!"
    assert score(text) == score(text)
