import pytest

from agents.fallbacks import (
    fallback_evaluation,
    fallback_question,
    fallback_summary,
    has_domain_keyword,
    heuristic_score,
)


def test_fallback_question_is_deterministic_and_lowercases_domain():
    first = fallback_question("technical", "Cloud Computing", 1)
    assert first == fallback_question("technical", "Cloud Computing", 1)
    assert "cloud computing technologies" in first


@pytest.mark.parametrize("number", [0, 6, -3, 99])
def test_fallback_question_clamps_out_of_range(number):
    assert fallback_question("behavioral", "Finance", number) == fallback_question("behavioral", "Finance", 1)


def test_unknown_mode_uses_technical_set():
    assert fallback_question("culture-fit", "IoT", 3) == fallback_question("technical", "IoT", 3)


def test_keyword_match_is_case_insensitive():
    assert has_domain_keyword("We exposed a REST API", "technical")
    assert has_domain_keyword("My TEAM shipped it", "behavioral")
    assert not has_domain_keyword("nothing relevant", "technical")


@pytest.mark.parametrize(
    "answer",
    ["", "x", "database " * 200, "a" * 10_000, "team challenge " * 3],
)
@pytest.mark.parametrize("mode", ["technical", "behavioral", "other"])
def test_heuristic_score_stays_in_range(answer, mode):
    assert 1 <= heuristic_score(answer, mode) <= 10


def test_heuristic_score_formula():
    assert heuristic_score("a" * 120, "technical") == 2
    assert heuristic_score("a" * 120 + " code", "technical") == 5


def test_fallback_evaluation_branches_on_length():
    short = fallback_evaluation("short", "technical")
    assert short.strengths == ["Answer provided"]
    assert short.weaknesses == ["Answer could be more detailed"]
    long = fallback_evaluation("y" * 150, "technical")
    assert long.strengths == ["Detailed response provided"]
    assert long.weaknesses == ["Evaluation method was limited"]
    assert "fallback method" in long.overall_feedback


@pytest.mark.parametrize(
    "average, closing, has_weaknesses",
    [(8.0, "Great job!", False), (5.0, "Good effort, keep practicing!", True), (3.0, "Keep working", True)],
)
def test_fallback_summary_thresholds(average, closing, has_weaknesses):
    summary = fallback_summary(average)
    assert summary.overall_score == average
    assert closing in summary.final_feedback
    assert f"{average:.1f}/10" in summary.final_feedback
    assert bool(summary.weaknesses) is has_weaknesses
    assert len(summary.recommendations) == 3
