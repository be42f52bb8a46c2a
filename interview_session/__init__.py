from __future__ import annotations  # Interview session package exports

from .chat import ChatInterviewer
from .engine import AnswerOutcome, InterviewEngine
from .errors import ConfigurationError, InterviewError, InvalidStateError, NotFoundError, ValidationError
from .models import TOTAL_QUESTIONS, ChatSession, ChatTurn, InterviewSession

__all__ = [
    "AnswerOutcome",
    "ChatInterviewer",
    "ChatSession",
    "ChatTurn",
    "ConfigurationError",
    "InterviewEngine",
    "InterviewError",
    "InterviewSession",
    "InvalidStateError",
    "NotFoundError",
    "TOTAL_QUESTIONS",
    "ValidationError",
]
