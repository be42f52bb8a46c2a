import threading

import pytest

from agents.pipeline import InterviewPipeline
from interview_session import (
    ConfigurationError,
    InterviewEngine,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from llm_gateway import UpstreamError
from services.sessions import InMemorySessionStore, SessionLocks


def _engine(model, **kwargs):
    return InterviewEngine(InMemorySessionStore(), InterviewPipeline(model), **kwargs)


def test_start_creates_session_with_first_question(fake_model):
    engine = _engine(fake_model)
    session = engine.start("Software Engineer", "Technology", "technical")
    assert session.current_question_number == 1
    assert session.questions == ["Model question 1?"]
    assert session.answers == [] and session.evaluations == []
    assert engine.get_status(session.id).id == session.id


@pytest.mark.parametrize("fields", [("", "Tech", "technical"), ("SWE", None, "technical"), ("SWE", "Tech", "  ")])
def test_start_requires_fields(fake_model, fields):
    with pytest.raises(ValidationError):
        _engine(fake_model).start(*fields)


def test_start_without_credentials_fails(fake_model):
    with pytest.raises(ConfigurationError):
        _engine(fake_model, credentials_ok=lambda: False).start("SWE", "Tech", "technical")


def test_full_cycle_keeps_invariants(fake_model):
    engine = _engine(fake_model)
    session = engine.start("SWE", "Tech", "technical")
    for number in range(1, 6):
        outcome = engine.submit_answer(session.id, f"answer {number}")
        state = outcome.session
        assert len(state.answers) == len(state.evaluations) == number
        if number < 5:
            assert not outcome.is_complete
            assert len(state.questions) == len(state.answers) + 1
            assert state.current_question_number == number + 1
            assert outcome.next_question == f"Model question {number + 1}?"
        else:
            assert outcome.is_complete
            assert outcome.summary is not None
            assert len(state.questions) == len(state.answers)
    results = engine.get_results(session.id)
    assert results.total_score == 35
    assert results.average_score == results.total_score / len(results.evaluations) == 7.0
    assert results.completed_at is not None


def test_answering_complete_session_fails(fake_model):
    engine = _engine(fake_model)
    session = engine.start("SWE", "Tech", "technical")
    for _ in range(5):
        engine.submit_answer(session.id, "an answer")
    with pytest.raises(InvalidStateError):
        engine.submit_answer(session.id, "one more")


def test_results_before_completion_fail(fake_model):
    engine = _engine(fake_model)
    session = engine.start("SWE", "Tech", "technical")
    with pytest.raises(InvalidStateError):
        engine.get_results(session.id)


def test_unknown_session(fake_model):
    engine = _engine(fake_model)
    with pytest.raises(NotFoundError):
        engine.submit_answer("missing", "hello")
    with pytest.raises(NotFoundError):
        engine.get_status("missing")


def test_blank_answer_rejected(fake_model):
    engine = _engine(fake_model)
    session = engine.start("SWE", "Tech", "technical")
    with pytest.raises(ValidationError):
        engine.submit_answer(session.id, "   ")


def test_interview_completes_with_model_down():
    def down(prompt):
        raise UpstreamError("offline")

    engine = _engine(down)
    session = engine.start("SWE", "Finance", "behavioral")
    assert session.current_question.startswith("Tell me about a time")
    outcome = None
    for _ in range(5):
        outcome = engine.submit_answer(session.id, "Our team faced a challenge and I learned a lot.")
    assert outcome.is_complete
    assert outcome.summary.overall_score == outcome.session.average_score
    assert all(1 <= score <= 10 for score in outcome.session.scores)


def test_stored_session_untouched_when_pipeline_raises(fake_model):
    store = InMemorySessionStore()
    engine = InterviewEngine(store, InterviewPipeline(fake_model))
    session = engine.start("SWE", "Tech", "technical")

    def broken(prompt):
        raise RuntimeError("bug")

    failing = InterviewEngine(store, InterviewPipeline(broken))
    with pytest.raises(RuntimeError):
        failing.submit_answer(session.id, "answer")
    assert store.get(session.id).answers == []


def test_concurrent_answers_are_serialized(fake_model):
    engine = _engine(fake_model)
    session = engine.start("SWE", "Tech", "technical")
    errors = []

    def answer():
        try:
            engine.submit_answer(session.id, "parallel answer")
        except InvalidStateError as exc:
            errors.append(exc)

    threads = [threading.Thread(target=answer) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    final = engine.get_status(session.id)
    assert final.is_complete
    assert len(final.answers) == len(final.evaluations) == 5
    assert len(errors) == 3


def test_unknown_session_takes_no_lock(fake_model):
    locks = SessionLocks()
    engine = InterviewEngine(InMemorySessionStore(), InterviewPipeline(fake_model), locks=locks)
    for index in range(10):
        with pytest.raises(NotFoundError):
            engine.submit_answer(f"missing-{index}", "hello")
    assert len(locks) == 0
