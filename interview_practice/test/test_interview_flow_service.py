"""
Test Interview Flow Service Module

This module tests the interview flow from setup to results: background question
loading, answering, skipping, exiting, the elapsed timer, background analysis and
the history.

Dependencies:
- pytest: For testing framework
- pytest-asyncio: For coroutine tests
- interview_practice.services.interview_flow: The module being tested
"""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from interview_practice.constants.analysis_messages import FALLBACK_FEEDBACK, FALLBACK_SCORE
from interview_practice.errors.exceptions import InvalidSessionTransition, SessionNotFound
from interview_practice.schemas.interview_config import InterviewConfig
from interview_practice.schemas.interview_session import SessionStatus
from interview_practice.services.interview_flow.interview_flow_service import InterviewFlowService
from interview_practice.services.question_generation.question_selector import candidate_pool, fallback_questions
from interview_practice.test.fakes import CancelledAnalysisProvider, FailingProvider, SlowProvider


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self):
        self.now = datetime(2026, 5, 4, 10, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, minutes: float) -> None:
        self.now += timedelta(minutes=minutes)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def service(mock_ai, clock):
    return InterviewFlowService(provider=mock_ai, question_timeout=2, analysis_timeout=2, timer_interval=0.01, clock=clock)


async def run_to_completion(service, session_id, answer="x" * 120):
    session = service.get_session(session_id)
    while session.is_active:
        service.submit_answer(session_id, answer)
    return await service.wait_for_results(session_id)


@pytest.mark.asyncio
async def test_full_technical_interview(service, clock):
    """Test a senior technical interview answered with long answers."""
    config = InterviewConfig(type="technical", position="Senior Software Engineer", experience="senior", duration=15)

    session = service.start_interview(config)
    assert session.status == SessionStatus.LOADING

    session = await service.wait_until_ready(session.id)
    assert session.status == SessionStatus.ACTIVE
    assert len(session.questions) == 6
    assert set(session.questions) <= set(candidate_pool("technical", "Senior Software Engineer", "senior"))

    for _ in range(6):
        service.submit_answer(session.id, "y" * 120)
    session = await service.wait_for_results(session.id)

    assert session.status == SessionStatus.COMPLETED
    assert session.answers == ["y" * 120] * 6
    assert 65 <= session.score <= 85
    assert len(session.analysis.suggestions) == 5
    assert len(session.analysis.feedback) == 6
    assert all("Well-structured" in entry for entry in session.analysis.feedback)
    assert service.active_session is None
    assert [s.id for s in service.list_history()] == [session.id]


@pytest.mark.asyncio
async def test_exit_discards_the_session(service):
    """Test that an exited session never reaches the history."""
    session = service.start_interview(InterviewConfig(type="general", position="Designer", duration=10))
    await service.wait_until_ready(session.id)
    service.submit_answer(session.id, "A short answer that is long enough.")

    service.exit_interview(session.id)

    assert session.status == SessionStatus.ABANDONED
    assert service.active_session is None
    assert service.list_history() == []
    with pytest.raises(SessionNotFound):
        service.get_session(session.id)


@pytest.mark.asyncio
async def test_late_questions_are_discarded_after_exit(clock):
    """Test that questions arriving for an exited session are ignored."""
    provider = SlowProvider()
    service = InterviewFlowService(provider=provider, question_timeout=2, clock=clock)
    session = service.start_interview(InterviewConfig(type="behavioral", position="Nurse", duration=10))
    generation = service._generation_tasks[session.id]
    await asyncio.sleep(0)

    service.exit_interview(session.id)
    provider.release()
    await generation

    assert session.status == SessionStatus.ABANDONED
    assert session.questions == []
    assert service.active_session is None
    assert len(service.history) == 0


@pytest.mark.asyncio
async def test_new_interview_abandons_unfinished_one(service):
    """Test that only one session is active at a time."""
    first = service.start_interview(InterviewConfig(type="general", position="Designer", duration=10))
    await service.wait_until_ready(first.id)

    second = service.start_interview(InterviewConfig(type="leadership", position="Director", duration=10))
    await service.wait_until_ready(second.id)

    assert first.status == SessionStatus.ABANDONED
    assert service.active_session is second
    with pytest.raises(SessionNotFound):
        service.get_session(first.id)


@pytest.mark.asyncio
async def test_skip_records_empty_answers(service):
    """Test that skipping every question completes the interview with empty answers."""
    session = service.start_interview(InterviewConfig(type="behavioral", position="Nurse", duration=10))
    await service.wait_until_ready(session.id)

    for _ in range(len(session.questions)):
        service.skip_question(session.id)
    session = await service.wait_for_results(session.id)

    assert session.answers == [""] * 4
    assert 0 <= session.score <= 10
    assert all("No substantial answer" in entry for entry in session.analysis.feedback)


@pytest.mark.asyncio
async def test_timer_runs_only_while_active(service):
    """Test that elapsed time counts while active and stops at completion."""
    session = service.start_interview(InterviewConfig(type="general", position="Designer", duration=10))
    await service.wait_until_ready(session.id)

    await asyncio.sleep(0.1)
    assert session.elapsed_seconds > 0

    await run_to_completion(service, session.id)
    elapsed = session.elapsed_seconds
    await asyncio.sleep(0.05)

    assert session.elapsed_seconds == elapsed
    assert service._timer is None


@pytest.mark.asyncio
async def test_actions_on_unknown_or_finished_sessions(service):
    """Test the errors raised for invalid actions."""
    with pytest.raises(SessionNotFound):
        service.submit_answer("missing", "answer")

    session = service.start_interview(InterviewConfig(type="general", position="Designer", duration=10))
    await service.wait_until_ready(session.id)
    with pytest.raises(InvalidSessionTransition):
        await service.wait_for_results(session.id)

    await run_to_completion(service, session.id)
    with pytest.raises(InvalidSessionTransition):
        service.submit_answer(session.id, "too late")
    with pytest.raises(InvalidSessionTransition):
        service.exit_interview(session.id)


@pytest.mark.asyncio
async def test_provider_failures_use_fallbacks(clock):
    """Test that fallback questions and the fallback analysis are used when the provider fails."""
    service = InterviewFlowService(provider=FailingProvider(), clock=clock)
    session = service.start_interview(InterviewConfig(type="leadership", position="Director", duration=10))

    session = await service.wait_until_ready(session.id)
    assert session.questions == fallback_questions("leadership", "Director", 10)

    session = await run_to_completion(service, session.id)
    assert session.score == FALLBACK_SCORE
    assert session.analysis.feedback == FALLBACK_FEEDBACK


@pytest.mark.asyncio
async def test_history_summary(service, clock):
    """Test the statistics over several completed sessions."""
    scores = []
    for minutes in (10, 12.5):
        session = service.start_interview(InterviewConfig(type="general", position="Designer", duration=10))
        await service.wait_until_ready(session.id)
        clock.advance(minutes)
        session = await run_to_completion(service, session.id)
        scores.append(session.score)

    summary = service.history_summary()

    assert summary.total_sessions == 2
    assert summary.best_score == max(scores)
    assert summary.total_duration_minutes == 22
    assert [s.score for s in service.list_history()] == list(reversed(scores))


@pytest.mark.asyncio
async def test_shutdown_cancels_background_work(clock):
    """Test that pending generation is cancelled on shutdown."""
    service = InterviewFlowService(provider=SlowProvider(), question_timeout=5, clock=clock)
    session = service.start_interview(InterviewConfig(type="general", position="Designer", duration=10))
    await asyncio.sleep(0)

    await service.shutdown()

    assert session.status == SessionStatus.LOADING
    assert session.id not in service._generation_tasks
    assert all(task.done() for task in service._background_tasks)


@pytest.mark.asyncio
async def test_cancelled_analysis_leaves_session_unscored(clock):
    """Test that waiting for results survives an analysis that was cancelled."""
    service = InterviewFlowService(provider=CancelledAnalysisProvider(), clock=clock)
    session = service.start_interview(InterviewConfig(type="general", position="Designer", duration=10))
    await service.wait_until_ready(session.id)

    session = await run_to_completion(service, session.id)

    assert session.is_completed
    assert session.analysis is None
    assert session.score is None
    assert session.id in service.history
