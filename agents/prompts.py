"""Prompt templates for question generation, answer evaluation and session summary."""
from __future__ import annotations

from textwrap import dedent
from typing import Sequence

from agents.types import EvalResult

QUESTION_TEMPLATE = dedent(
    """
    You are an expert interviewer conducting a {mode} interview for a {role} position in {domain}.

    Generate a single, well-structured interview question that:
    1. Is appropriate for question {question_number} of {total_questions}
    2. Tests relevant skills for the {role} position
    3. Is specific to the {domain} domain
    4. Is {focus}
    5. Is clear and concise

    Return only the question text, no additional formatting.
    """
).strip()

EVALUATION_TEMPLATE = dedent(
    """
    You are an expert interviewer evaluating a candidate's answer.

    Question: {question}
    Answer: {answer}
    Interview Type: {mode}

    Evaluate the answer on a scale of 1-10 based on:
    - Clarity and communication
    - Technical accuracy (for technical questions) or relevant experience (for behavioral)
    - Completeness of response
    - Problem-solving approach
    - Professional presentation

    Return your evaluation as a JSON object with this structure:
    {{
      "score": <number 1-10>,
      "strengths": [<array of positive aspects>],
      "weaknesses": [<array of areas for improvement>],
      "suggestions": [<array of specific recommendations>],
      "overall_feedback": "<brief summary of the evaluation>"
    }}
    """
).strip()

SUMMARY_TEMPLATE = dedent(
    """
    You are an expert career coach providing a comprehensive interview summary.

    Interview Details:
    - Role: {role}
    - Domain: {domain}
    - Type: {mode}
    - Average Score: {average_score}/10

    Questions Asked: {question_count}
    {transcript}

    Generate a comprehensive summary as a JSON object:
    {{
      "overall_score": <average score>,
      "strengths": [<array of key strengths demonstrated>],
      "weaknesses": [<array of areas needing improvement>],
      "recommendations": [<array of specific next steps>],
      "final_feedback": "<encouraging summary message>",
      "key_insights": [<array of important observations>]
    }}
    """
).strip()


def _mode_focus(mode: str) -> str:
    if mode == "technical":
        return "technical and problem-solving focused"
    return "behavioral and experience-based"


def build_question_prompt(role: str, domain: str, mode: str, question_number: int, total_questions: int = 5) -> str:
    return QUESTION_TEMPLATE.format(
        role=role,
        domain=domain,
        mode=mode,
        question_number=question_number,
        total_questions=total_questions,
        focus=_mode_focus(mode),
    )


def build_evaluation_prompt(question: str, answer: str, mode: str) -> str:
    return EVALUATION_TEMPLATE.format(question=question, answer=answer, mode=mode)


def _transcript(questions: Sequence[str], answers: Sequence[str], evaluations: Sequence[EvalResult]) -> str:
    lines = []
    for index, question in enumerate(questions):
        lines.append(f"Q{index + 1}: {question}")
        if index < len(answers):
            lines.append(f"A{index + 1}: {answers[index]}")
        if index < len(evaluations):
            lines.append(f"Score {index + 1}: {evaluations[index].score}/10")
    return "\n".join(lines)


def build_summary_prompt(
    questions: Sequence[str],
    answers: Sequence[str],
    evaluations: Sequence[EvalResult],
    role: str,
    domain: str,
    mode: str,
    average_score: float,
) -> str:
    return SUMMARY_TEMPLATE.format(
        role=role,
        domain=domain,
        mode=mode,
        average_score=average_score,
        question_count=len(questions),
        transcript=_transcript(questions, answers, evaluations),
    )


__all__ = ["build_evaluation_prompt", "build_question_prompt", "build_summary_prompt"]
