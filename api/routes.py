"""FastAPI routes for interview session control."""
from __future__ import annotations

import logging
from typing import NoReturn

from fastapi import APIRouter, HTTPException, Response

from agents.pipeline import InterviewPipeline
from api.schemas import AnswerReq, AnswerResp, ChatReq, ChatResp, StartReq, StartResp, StatusResp
from config import GENERATE_KEY, get_model, route_from_settings
from config.settings import settings
from interview_session import (
    ChatInterviewer,
    ChatSession,
    InterviewEngine,
    InterviewError,
    InterviewSession,
)
from llm_gateway import has_credentials
from services.sessions import InMemorySessionStore, SessionLocks
from session_reports import InterviewResults, build_results, generate_results_pdf, pdf_filename


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/interview")

_SESSIONS: InMemorySessionStore[InterviewSession] = InMemorySessionStore()
_SESSION_LOCKS = SessionLocks()
_CHATS: InMemorySessionStore[ChatSession] = InMemorySessionStore()
_CHAT_LOCKS = SessionLocks()


def reset_sessions() -> None:
    """Drop every in-memory interview and chat session."""

    _SESSIONS.clear()
    _CHATS.clear()


def _credentials_ok() -> bool:
    if not settings.REQUIRE_API_KEY:
        return True
    return has_credentials(route_from_settings(settings))


def _pipeline() -> InterviewPipeline:
    return InterviewPipeline(get_model(GENERATE_KEY), total_questions=settings.TOTAL_QUESTIONS)


def _engine() -> InterviewEngine:
    return InterviewEngine(
        _SESSIONS,
        _pipeline(),
        locks=_SESSION_LOCKS,
        credentials_ok=_credentials_ok,
        total_questions=settings.TOTAL_QUESTIONS,
    )


def _chat() -> ChatInterviewer:
    return ChatInterviewer(_CHATS, _pipeline(), locks=_CHAT_LOCKS)


def _http_error(exc: InterviewError) -> NoReturn:
    if exc.status_code >= 500:
        logger.error("Interview request failed: %s", exc.message)
    raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc


def _status(session: InterviewSession) -> StatusResp:
    return StatusResp(
        id=session.id,
        role=session.role,
        domain=session.domain,
        mode=session.mode,
        questionNumber=session.current_question_number,
        totalQuestions=session.total_questions,
        isComplete=session.is_complete,
        currentQuestion=session.current_question,
        createdAt=session.created_at,
    )


@router.post("/start", response_model=StartResp)
def start_interview(payload: StartReq) -> StartResp:
    try:
        session = _engine().start(payload.role, payload.domain, payload.mode)
    except InterviewError as exc:
        _http_error(exc)
    return StartResp(
        interviewId=session.id,
        currentQuestion=session.current_question,
        questionNumber=session.current_question_number,
        totalQuestions=session.total_questions,
        mode=session.mode,
        role=session.role,
        domain=session.domain,
    )


@router.post("/{interview_id}/answer", response_model=AnswerResp, response_model_exclude_none=True)
def submit_answer(interview_id: str, payload: AnswerReq) -> AnswerResp:
    try:
        outcome = _engine().submit_answer(interview_id, payload.answer)
    except InterviewError as exc:
        _http_error(exc)
    session = outcome.session
    response = AnswerResp(
        questionNumber=session.current_question_number,
        totalQuestions=session.total_questions,
        isComplete=session.is_complete,
        currentQuestion=session.current_question,
        lastAnswer=outcome.answer,
        lastEvaluation=outcome.evaluation,
        lastFeedback=outcome.evaluation,
        lastScore=outcome.evaluation.score,
    )
    if outcome.is_complete and outcome.summary is not None:
        response.summary = outcome.summary
        response.totalScore = session.total_score
        response.averageScore = session.average_score
        response.strengths = list(outcome.summary.strengths)
        response.weaknesses = list(outcome.summary.weaknesses)
        response.recommendations = list(outcome.summary.recommendations)
    return response


@router.get("/{interview_id}/status", response_model=StatusResp)
def interview_status(interview_id: str) -> StatusResp:
    try:
        session = _engine().get_status(interview_id)
    except InterviewError as exc:
        _http_error(exc)
    return _status(session)


@router.get("/{interview_id}/results", response_model=InterviewResults)
def interview_results(interview_id: str) -> InterviewResults:
    try:
        session = _engine().get_results(interview_id)
    except InterviewError as exc:
        _http_error(exc)
    return build_results(session)


@router.get("/{interview_id}/export/pdf")
def export_results_pdf(interview_id: str) -> Response:
    try:
        session = _engine().get_results(interview_id)
    except InterviewError as exc:
        _http_error(exc)
    results = build_results(session)
    payload = generate_results_pdf(results)
    headers = {"Content-Disposition": f"attachment; filename=\"{pdf_filename(results)}\""}
    return Response(content=payload, media_type="application/pdf", headers=headers)


@router.post("/{interview_id}/chat", response_model=ChatResp)
def chat_turn(interview_id: str, payload: ChatReq) -> ChatResp:
    try:
        reply = _chat().reply(interview_id, payload.message)
    except InterviewError as exc:
        _http_error(exc)
    return ChatResp(reply=reply)
