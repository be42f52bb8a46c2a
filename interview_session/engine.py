"""Interview session state machine.

A session moves from awaiting its first question, through one
in-progress state per question slot, to complete. Exactly one question
is pending while the session is in progress; every submitted answer is
evaluated once and the last answer also produces the summary.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Callable, Optional

from agents.pipeline import InterviewPipeline
from agents.types import EvalResult, SummaryResult
from observability import log_event
from services.sessions import SessionLocks, SessionStore

from .errors import ConfigurationError, InvalidStateError, NotFoundError, ValidationError
from .models import TOTAL_QUESTIONS, InterviewSession, utc_now

logger = logging.getLogger(__name__)

KNOWN_MODES = ("technical", "behavioral")


@dataclass(frozen=True)
class AnswerOutcome:
    session: InterviewSession
    answer: str
    evaluation: EvalResult
    next_question: Optional[str] = None
    summary: Optional[SummaryResult] = None

    @property
    def is_complete(self) -> bool:
        return self.session.is_complete


def _required(value: Optional[str]) -> bool:
    return bool(value and value.strip())


class InterviewEngine:
    """Drive the question -> answer -> (next question | summary) cycle."""

    def __init__(
        self,
        store: SessionStore[InterviewSession],
        pipeline: InterviewPipeline,
        *,
        locks: Optional[SessionLocks] = None,
        credentials_ok: Callable[[], bool] = lambda: True,
        total_questions: int = TOTAL_QUESTIONS,
    ) -> None:
        self._store = store
        self._pipeline = pipeline
        self._locks = locks or SessionLocks()
        self._credentials_ok = credentials_ok
        self.total_questions = total_questions

    def start(self, role: Optional[str], domain: Optional[str], mode: Optional[str]) -> InterviewSession:
        if not (_required(role) and _required(domain) and _required(mode)):
            raise ValidationError("Missing required fields: role, domain, mode")
        if not self._credentials_ok():
            raise ConfigurationError("Google API key not configured")
        role, domain, mode = role.strip(), domain.strip(), mode.strip()
        if mode not in KNOWN_MODES:
            logger.warning("Unrecognized interview mode %r; technical fallbacks apply", mode)

        session_id = str(uuid.uuid4())
        first = self._pipeline.question(role, domain, mode, 1, session_id=session_id)
        session = InterviewSession(
            id=session_id,
            role=role,
            domain=domain,
            mode=mode,
            total_questions=self.total_questions,
            current_question=first,
            questions=[first],
        )
        self._store.set(session_id, session)
        log_event("session_started", session_id, mode=mode)
        return session

    def _load(self, session_id: str) -> InterviewSession:
        session = self._store.get(session_id)
        if session is None:
            raise NotFoundError("Interview not found")
        return session

    def submit_answer(self, session_id: str, answer: Optional[str]) -> AnswerOutcome:
        if not _required(answer):
            raise ValidationError("Answer is required")
        self._load(session_id)
        with self._locks.hold(session_id):
            stored = self._load(session_id)
            if stored.is_complete:
                raise InvalidStateError("Interview is already complete")
            session = stored.model_copy(deep=True)

            evaluation = self._pipeline.evaluate(session.current_question, answer, session.mode, session_id=session_id)
            session.answers.append(answer)
            session.evaluations.append(evaluation)
            session.total_score += evaluation.score
            log_event(
                "answer_evaluated",
                session_id,
                question_number=session.current_question_number,
                score=evaluation.score,
            )

            if session.current_question_number < session.total_questions:
                next_number = session.current_question_number + 1
                next_question = self._pipeline.question(
                    session.role, session.domain, session.mode, next_number, session_id=session_id
                )
                session.questions.append(next_question)
                session.current_question = next_question
                session.current_question_number = next_number
                self._store.set(session_id, session)
                return AnswerOutcome(session=session, answer=answer, evaluation=evaluation, next_question=next_question)

            summary = self._pipeline.summarize(
                session.questions,
                session.answers,
                session.evaluations,
                session.role,
                session.domain,
                session.mode,
                session.average_score,
                session_id=session_id,
            )
            session.summary = summary
            session.is_complete = True
            session.completed_at = utc_now()
            self._store.set(session_id, session)
            log_event("session_completed", session_id, score=round(session.average_score, 2), outcome="complete")
            return AnswerOutcome(session=session, answer=answer, evaluation=evaluation, summary=summary)

    def get_status(self, session_id: str) -> InterviewSession:
        return self._load(session_id)

    def get_results(self, session_id: str) -> InterviewSession:
        session = self._load(session_id)
        if not session.is_complete:
            raise InvalidStateError("Interview is not complete yet")
        return session


__all__ = ["AnswerOutcome", "InterviewEngine", "KNOWN_MODES"]
