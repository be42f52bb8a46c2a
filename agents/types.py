"""Shared type definitions for interview agents."""
import math
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

InterviewMode = Literal["technical", "behavioral"]
Task = Literal["question", "evaluation", "summary"]

SCORE_MIN = 1
SCORE_MAX = 10


def _as_str_list(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return value


class EvalResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int  # 1..10
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    overall_feedback: str = ""

    @field_validator("score", mode="before")
    @classmethod
    def _bound_score(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("score must be numeric")
        if isinstance(value, str):
            value = float(value.strip())
        if isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError("score must be finite")
            value = int(round(value))
        if isinstance(value, int):
            return max(SCORE_MIN, min(SCORE_MAX, value))
        return value

    @field_validator("strengths", "weaknesses", "suggestions", mode="before")
    @classmethod
    def _listify(cls, value: Any) -> Any:
        return _as_str_list(value)

    @field_validator("overall_feedback", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Any:
        return "" if value is None else value


class SummaryResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_score: float
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    final_feedback: str = ""
    key_insights: Optional[List[str]] = None

    @field_validator("strengths", "weaknesses", "recommendations", mode="before")
    @classmethod
    def _listify(cls, value: Any) -> Any:
        return _as_str_list(value)

    @field_validator("key_insights", mode="before")
    @classmethod
    def _insights(cls, value: Any) -> Any:
        return [value] if isinstance(value, str) else value  # None stays absent

    @field_validator("final_feedback", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Any:
        return "" if value is None else value
