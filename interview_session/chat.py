from __future__ import annotations  # Conversational front end over the question cycle

from typing import Optional

from agents.pipeline import InterviewPipeline
from observability import log_event
from services.sessions import SessionLocks, SessionStore

from .errors import ValidationError
from .models import ChatSession, ChatTurn

START_COMMAND = "start"
COMPLETE_REPLY = "Interview complete! Thank you for participating."
PROMPT_REPLY = "Please type 'start' to begin the interview."
MAX_HISTORY = 100  # turns kept per chat session


class ChatInterviewer:  # Free-text sessions keyed by a client-chosen id, kept for the process lifetime
    def __init__(
        self,
        store: SessionStore[ChatSession],
        pipeline: InterviewPipeline,
        *,
        locks: Optional[SessionLocks] = None,
    ) -> None:
        self._store = store
        self._pipeline = pipeline
        self._locks = locks or SessionLocks()

    def reply(self, session_id: str, message: Optional[str]) -> str:
        if not message or not message.strip():
            raise ValidationError("Message is required")
        with self._locks.hold(session_id):
            stored = self._store.get(session_id)
            session = stored.model_copy(deep=True) if stored else ChatSession(id=session_id)
            session.history.append(ChatTurn(role="user", content=message))
            text = self._advance(session, message)
            session.history.append(ChatTurn(role="bot", content=text))
            del session.history[:-MAX_HISTORY]
            self._store.set(session_id, session)
        log_event("chat_turn", session_id, question_number=session.question_number, outcome="complete" if session.is_complete else "open")
        return text

    def _advance(self, session: ChatSession, message: str) -> str:  # Mutates session; returns bot reply
        if session.is_complete:
            return COMPLETE_REPLY
        if message.strip().lower() == START_COMMAND and session.last_question is None:
            return self._ask(session)
        if session.last_question is not None:
            if session.question_number >= session.total_questions:
                session.is_complete = True
                return COMPLETE_REPLY
            session.question_number += 1
            return self._ask(session)
        return PROMPT_REPLY

    def _ask(self, session: ChatSession) -> str:
        question = self._pipeline.question(
            session.role, session.domain, session.mode, session.question_number, session_id=session.id
        )
        session.last_question = question
        return question


__all__ = ["COMPLETE_REPLY", "ChatInterviewer", "MAX_HISTORY", "PROMPT_REPLY", "START_COMMAND"]
