"""Resilient generation pipeline: prompt, model call, parse, fallback."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from agents import fallbacks, prompts, response_parser
from agents.types import EvalResult, SummaryResult, Task
from llm_gateway import UpstreamError
from observability import log_event, span

logger = logging.getLogger(__name__)

Generate = Callable[[str], str]


class InterviewPipeline:
    """Produce questions, evaluations and summaries, never failing on model errors.

    Gateway failures switch to the deterministic fallbacks. Text that
    arrives but cannot be decoded is handled by the parser's degraded
    records instead, so model output is never thrown away.
    """

    def __init__(self, generate: Generate, *, total_questions: int = 5) -> None:
        self._generate = generate
        self.total_questions = total_questions

    def _call(self, task: Task, prompt: str, session_id: str) -> Optional[str]:
        events: List[Dict[str, Any]] = []
        try:
            with span(events, task):
                raw = self._generate(prompt)
        except UpstreamError as exc:
            logger.warning("Model call failed task=%s session=%s: %s", task, session_id, exc)
            log_event(
                "fallback_used",
                session_id,
                level=logging.WARNING,
                task=task,
                reason=str(exc),
                ms=events[-1]["ms"] if events else None,
            )
            return None
        log_event("model_called", session_id, task=task, ms=events[-1]["ms"])
        return raw

    def question(self, role: str, domain: str, mode: str, question_number: int, *, session_id: str = "-") -> str:
        prompt = prompts.build_question_prompt(role, domain, mode, question_number, self.total_questions)
        raw = self._call("question", prompt, session_id)
        text = response_parser.parse_question(raw) if raw is not None else ""
        if not text:
            if raw is not None:
                log_event("fallback_used", session_id, task="question", reason="blank model output")
            text = fallbacks.fallback_question(mode, domain, question_number)
        log_event("question_generated", session_id, question_number=question_number, mode=mode)
        return text

    def evaluate(self, question: str, answer: str, mode: str, *, session_id: str = "-") -> EvalResult:
        prompt = prompts.build_evaluation_prompt(question, answer, mode)
        raw = self._call("evaluation", prompt, session_id)
        if raw is None:
            return fallbacks.fallback_evaluation(answer, mode)
        parsed = response_parser.try_parse_evaluation(raw)
        if parsed is None:
            log_event("parse_degraded", session_id, level=logging.WARNING, task="evaluation")
            return response_parser.degraded_evaluation(raw)
        return parsed

    def summarize(
        self,
        questions: Sequence[str],
        answers: Sequence[str],
        evaluations: Sequence[EvalResult],
        role: str,
        domain: str,
        mode: str,
        average_score: float,
        *,
        session_id: str = "-",
    ) -> SummaryResult:
        prompt = prompts.build_summary_prompt(questions, answers, evaluations, role, domain, mode, average_score)
        raw = self._call("summary", prompt, session_id)
        if raw is None:
            return fallbacks.fallback_summary(average_score)
        parsed = response_parser.try_parse_summary(raw, average_score)
        if parsed is None:
            log_event("parse_degraded", session_id, level=logging.WARNING, task="summary")
            return response_parser.degraded_summary(raw, average_score)
        return parsed


__all__ = ["Generate", "InterviewPipeline"]
