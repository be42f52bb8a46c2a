from __future__ import annotations  # Interview session records

from datetime import datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from agents.types import EvalResult, SummaryResult

TOTAL_QUESTIONS = 5


def utc_now() -> str:  # ISO-8601 timestamp with millisecond precision
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class InterviewSession(BaseModel):  # One interview attempt with full history
    id: str
    role: str
    domain: str
    mode: str
    total_questions: int = Field(default=TOTAL_QUESTIONS, ge=1)
    current_question_number: int = Field(default=1, ge=1)
    current_question: str
    questions: List[str] = Field(default_factory=list)
    answers: List[str] = Field(default_factory=list)
    evaluations: List[EvalResult] = Field(default_factory=list)
    total_score: int = 0
    is_complete: bool = False
    created_at: str = Field(default_factory=utc_now)
    completed_at: Optional[str] = None
    summary: Optional[SummaryResult] = None

    @property
    def scores(self) -> List[int]:
        return [evaluation.score for evaluation in self.evaluations]

    @property
    def answered(self) -> int:
        return len(self.evaluations)

    @property
    def average_score(self) -> float:
        if not self.evaluations:
            return 0.0
        return self.total_score / len(self.evaluations)


class ChatTurn(BaseModel):  # Single line of the conversational transcript
    role: Literal["user", "bot"]
    content: str


class ChatSession(BaseModel):  # Lightweight state behind the conversational endpoint
    id: str
    role: str = "Software Engineer"
    domain: str = "General"
    mode: str = "technical"
    total_questions: int = Field(default=TOTAL_QUESTIONS, ge=1)
    question_number: int = Field(default=1, ge=1)
    last_question: Optional[str] = None
    is_complete: bool = False
    history: List[ChatTurn] = Field(default_factory=list)


__all__ = ["ChatSession", "ChatTurn", "InterviewSession", "TOTAL_QUESTIONS", "utc_now"]
