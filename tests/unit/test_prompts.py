from agents.prompts import build_evaluation_prompt, build_question_prompt, build_summary_prompt
from agents.types import EvalResult


def test_question_prompt_is_deterministic():
    first = build_question_prompt("Software Engineer", "Technology", "technical", 2)
    second = build_question_prompt("Software Engineer", "Technology", "technical", 2)
    assert first == second
    assert "question 2 of 5" in first
    assert "technical and problem-solving focused" in first
    assert first.startswith("You are an expert interviewer")


def test_question_prompt_behavioral_focus():
    prompt = build_question_prompt("Product Manager", "Finance", "behavioral", 1)
    assert "behavioral and experience-based" in prompt
    assert "Product Manager position in Finance" in prompt


def test_evaluation_prompt_embeds_inputs_verbatim():
    answer = "Line one\n    indented {braces} stay"
    prompt = build_evaluation_prompt("Why queues?", answer, "technical")
    assert "Question: Why queues?" in prompt
    assert f"Answer: {answer}" in prompt
    assert "Interview Type: technical" in prompt
    assert '"overall_feedback"' in prompt


def test_summary_prompt_lists_transcript():
    evaluations = [EvalResult(score=6), EvalResult(score=8)]
    prompt = build_summary_prompt(
        ["Q one", "Q two"], ["A one", "A two"], evaluations, "Data Scientist", "Healthcare", "technical", 7.0
    )
    assert "Average Score: 7.0/10" in prompt
    assert "Questions Asked: 2" in prompt
    assert "Q2: Q two" in prompt
    assert "A1: A one" in prompt
    assert "Score 2: 8/10" in prompt
    assert '"key_insights"' in prompt
