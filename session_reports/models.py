from __future__ import annotations  # Results projection of a completed interview

from typing import List, Optional

from pydantic import BaseModel, Field

from agents.types import EvalResult, SummaryResult
from interview_session.models import InterviewSession


class InterviewResults(BaseModel):  # Full record returned to clients and rendered to PDF
    id: str
    role: str
    domain: str
    mode: str
    createdAt: str
    completedAt: Optional[str] = None
    questions: List[str]
    answers: List[str]
    evaluations: List[EvalResult]
    scores: List[int]
    feedbacks: List[str]
    summary: Optional[SummaryResult] = None
    totalScore: int
    averageScore: float
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


def build_results(session: InterviewSession) -> InterviewResults:  # Project session state into the results shape
    summary = session.summary
    return InterviewResults(
        id=session.id,
        role=session.role,
        domain=session.domain,
        mode=session.mode,
        createdAt=session.created_at,
        completedAt=session.completed_at,
        questions=list(session.questions),
        answers=list(session.answers),
        evaluations=list(session.evaluations),
        scores=session.scores,
        feedbacks=[evaluation.overall_feedback for evaluation in session.evaluations],
        summary=summary,
        totalScore=session.total_score,
        averageScore=session.average_score,
        strengths=list(summary.strengths) if summary else [],
        weaknesses=list(summary.weaknesses) if summary else [],
        recommendations=list(summary.recommendations) if summary else [],
    )


__all__ = ["InterviewResults", "build_results"]
