"""Pydantic schemas for the interview HTTP API."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from agents.types import EvalResult, SummaryResult


class StartReq(BaseModel):
    role: Optional[str] = None
    domain: Optional[str] = None
    mode: Optional[str] = None


class AnswerReq(BaseModel):
    answer: Optional[str] = None


class ChatReq(BaseModel):
    message: Optional[str] = None


class StartResp(BaseModel):
    interviewId: str
    currentQuestion: str
    questionNumber: int
    totalQuestions: int
    mode: str
    role: str
    domain: str


class AnswerResp(BaseModel):
    questionNumber: int
    totalQuestions: int
    isComplete: bool
    currentQuestion: str
    lastAnswer: str
    lastEvaluation: EvalResult
    lastFeedback: EvalResult
    lastScore: int
    # Present only once the interview is complete
    summary: Optional[SummaryResult] = None
    totalScore: Optional[int] = None
    averageScore: Optional[float] = None
    strengths: Optional[List[str]] = None
    weaknesses: Optional[List[str]] = None
    recommendations: Optional[List[str]] = None


class StatusResp(BaseModel):
    id: str
    role: str
    domain: str
    mode: str
    questionNumber: int
    totalQuestions: int
    isComplete: bool
    currentQuestion: str
    createdAt: str


class ChatResp(BaseModel):
    reply: str


class RolesResp(BaseModel):
    roles: List[str]


class DomainsResp(BaseModel):
    domains: List[str]


class HealthResp(BaseModel):
    status: str
    message: str
