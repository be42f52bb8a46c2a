"""Turn raw model text into questions, evaluations and summaries.

Model output is untrusted. Decoding is best effort and every entry point
returns a structurally valid value; unreadable evaluations and summaries
degrade to placeholder records that still carry the raw text so the
candidate sees whatever the model said.
"""
from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from agents.types import EvalResult, SummaryResult

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

DEGRADED_SCORE = 5

_FENCE = re.compile(r"```[A-Za-z0-9_-]*")
_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


def strip_code_fences(content: str) -> str:
    """Remove markdown fence markers anywhere in ``content``."""

    return _FENCE.sub("", content).strip()


def _decode_object(content: str) -> Any:
    cleaned = strip_code_fences(content)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError:
        match = _OBJECT.search(cleaned)
        if match is None:
            raise
        return json.loads(match.group(0))


def _decode(schema: Type[T], content: str, defaults: Optional[Dict[str, Any]] = None) -> Optional[T]:
    try:
        data = _decode_object(content)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        for key, value in (defaults or {}).items():
            if data.get(key) is None:
                data[key] = value
        return schema.model_validate(data)
    except (json.JSONDecodeError, ValidationError, ValueError) as exc:
        logger.warning("Unable to decode %s from model output: %s", schema.__name__, exc)
        return None


def parse_question(raw_text: str) -> str:
    return (raw_text or "").strip()


def degraded_evaluation(raw_text: str) -> EvalResult:
    return EvalResult(
        score=DEGRADED_SCORE,
        strengths=["Response was processed"],
        weaknesses=["Could not parse detailed evaluation from AI"],
        suggestions=["Ensure your answer is clear and directly addresses the question"],
        overall_feedback=raw_text,
    )


def degraded_summary(raw_text: str, average_score: float) -> SummaryResult:
    return SummaryResult(
        overall_score=average_score,
        strengths=["Interview completed successfully"],
        weaknesses=["Summary generation had issues"],
        recommendations=["Continue practicing interview skills"],
        final_feedback=raw_text,
    )


def try_parse_evaluation(raw_text: str) -> Optional[EvalResult]:
    """Structured decode only; ``None`` when the text is not a usable evaluation."""

    return _decode(EvalResult, raw_text or "")


def parse_evaluation(raw_text: str) -> EvalResult:
    parsed = try_parse_evaluation(raw_text)
    if parsed is None:
        return degraded_evaluation(raw_text)
    return parsed


def try_parse_summary(raw_text: str, average_score: float) -> Optional[SummaryResult]:
    return _decode(SummaryResult, raw_text or "", {"overall_score": average_score})


def parse_summary(raw_text: str, average_score: float) -> SummaryResult:
    parsed = try_parse_summary(raw_text, average_score)
    if parsed is None:
        return degraded_summary(raw_text, average_score)
    return parsed


__all__ = [
    "DEGRADED_SCORE",
    "degraded_evaluation",
    "degraded_summary",
    "parse_evaluation",
    "parse_question",
    "parse_summary",
    "strip_code_fences",
    "try_parse_evaluation",
    "try_parse_summary",
]
