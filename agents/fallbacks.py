"""Deterministic offline substitutes used when the model cannot be reached."""
from __future__ import annotations

import math
from typing import Dict, List, Tuple

from agents.types import EvalResult, SummaryResult

TECHNICAL_KEYWORDS: Tuple[str, ...] = (
    "technology",
    "system",
    "design",
    "algorithm",
    "database",
    "api",
    "framework",
    "code",
    "development",
    "implementation",
)

BEHAVIORAL_KEYWORDS: Tuple[str, ...] = (
    "experience",
    "project",
    "team",
    "challenge",
    "learned",
    "situation",
    "problem",
    "solution",
    "collaboration",
    "leadership",
)

STRONG_THRESHOLD = 7.0
ADEQUATE_THRESHOLD = 5.0


def _question_bank(domain: str) -> Dict[str, List[str]]:
    area = domain.lower()
    return {
        "technical": [
            f"Describe your experience with {area} technologies and how you would approach solving a complex problem in this domain.",
            "Explain a challenging technical project you worked on and the technologies you used.",
            f"How would you design a scalable system for handling large amounts of data in {area}?",
            f"What are the key considerations when building secure applications in {area}?",
            "Describe your experience with version control and collaborative development practices.",
        ],
        "behavioral": [
            "Tell me about a time when you had to work with a difficult team member. How did you handle the situation?",
            "Describe a project where you had to learn a new technology quickly. How did you approach it?",
            "Give me an example of a time when you had to meet a tight deadline. How did you manage your time?",
            "Tell me about a mistake you made in a project and how you learned from it.",
            "Describe a time when you had to explain a complex technical concept to a non-technical person.",
        ],
    }


def fallback_question(mode: str, domain: str, question_number: int) -> str:
    """Canned question for ``question_number`` (1-based); unknown modes use the technical set."""

    bank = _question_bank(domain)
    questions = bank.get(mode, bank["technical"])
    index = question_number - 1
    if index < 0 or index >= len(questions):
        index = 0
    return questions[index]


def has_domain_keyword(answer: str, mode: str) -> bool:
    keywords = TECHNICAL_KEYWORDS if mode == "technical" else BEHAVIORAL_KEYWORDS
    lowered = answer.lower()
    return any(keyword in lowered for keyword in keywords)


def heuristic_score(answer: str, mode: str) -> int:
    bonus = 3 if has_domain_keyword(answer, mode) else 0
    return min(10, max(1, math.floor(len(answer) / 50) + bonus))


def fallback_evaluation(answer: str, mode: str) -> EvalResult:
    length = len(answer)
    return EvalResult(
        score=heuristic_score(answer, mode),
        strengths=["Detailed response provided"] if length > 100 else ["Answer provided"],
        weaknesses=["Answer could be more detailed"] if length < 50 else ["Evaluation method was limited"],
        suggestions=["Consider providing more specific examples in your next answer."],
        overall_feedback="Answer evaluated using a fallback method due to API issues.",
    )


def fallback_summary(average_score: float) -> SummaryResult:
    if average_score >= STRONG_THRESHOLD:
        strengths = [
            "Strong performance overall",
            "Good communication skills",
            "Relevant experience demonstrated",
        ]
        weaknesses: List[str] = []
        closing = "Great job!"
    elif average_score >= ADEQUATE_THRESHOLD:
        strengths = ["Adequate performance", "Some good points made"]
        weaknesses = [
            "Could provide more detailed answers",
            "Consider more specific examples",
        ]
        closing = "Good effort, keep practicing!"
    else:
        strengths = []
        weaknesses = [
            "Answers need more detail",
            "Consider practicing more interview questions",
            "Try to be more specific with examples",
        ]
        closing = "Keep working on your interview skills!"

    return SummaryResult(
        overall_score=average_score,
        strengths=strengths,
        weaknesses=weaknesses,
        recommendations=[
            "Continue practicing interview questions",
            "Focus on providing specific examples",
            "Prepare stories that demonstrate your skills",
        ],
        final_feedback=f"Interview completed with an average score of {average_score:.1f}/10. {closing}",
    )


__all__ = [
    "BEHAVIORAL_KEYWORDS",
    "TECHNICAL_KEYWORDS",
    "fallback_evaluation",
    "fallback_question",
    "fallback_summary",
    "has_domain_keyword",
    "heuristic_score",
]
