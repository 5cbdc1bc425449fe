"""
Interview Flow Service Module

This module implements the service that drives a mock interview from setup to
results. It handles the entire lifecycle of an interview session, including:
- Session creation from a validated configuration
- Background question generation, with fallback questions on failure
- Answering, skipping and exiting
- The elapsed time timer while a session is active
- Handing completed sessions over to the history
- Background answer analysis, with a fallback analysis on failure

Only one session is active at a time. Starting a new interview abandons any
unfinished one. Results of background work for an abandoned session are
discarded when they arrive.

The service is constructed explicitly with its AI provider and history, and is
shared through the FastAPI application state.

Dependencies:
- asyncio: For background generation and analysis tasks.
- loguru: For logging information and errors.
- interview_practice.core.ai_provider: For the question and analysis source.
- interview_practice.services.history: For the completed session store.
"""

import asyncio
from datetime import datetime
from typing import Callable, Dict, List, Optional, Set
from loguru import logger
from interview_practice.core.ai_provider import InterviewAIProvider
from interview_practice.errors.exceptions import InvalidSessionTransition, SessionNotFound
from interview_practice.schemas.history_summary import HistorySummary
from interview_practice.schemas.interview_config import InterviewConfig
from interview_practice.schemas.interview_session import InterviewSession, SessionStatus, utc_now
from interview_practice.services.answer_analysis.answer_analysis_service import analyze_interview
from interview_practice.services.history.interview_history import InterviewHistory
from interview_practice.services.question_generation.question_generation_service import generate_interview_questions
from .elapsed_timer import ElapsedTimer


class InterviewFlowService:
    """
    Coordinates the active interview session and the session history.

    Attributes:
        provider: Source of questions and analyses.
        history: Append-only store of completed sessions.
        question_timeout: Seconds to wait for questions before falling back.
        analysis_timeout: Seconds to wait for an analysis before falling back.
        timer_interval: Seconds between elapsed time ticks.

    Example Usage:
        service = InterviewFlowService(provider=MockInterviewAI())
        session = service.start_interview(InterviewConfig(type="behavioral", position="Designer"))
        await service.wait_until_ready(session.id)
        service.submit_answer(session.id, "In my last role I ...")
        service.skip_question(session.id)
        ...
        session = await service.wait_for_results(session.id)
    """

    def __init__(
        self,
        provider: InterviewAIProvider,
        history: Optional[InterviewHistory] = None,
        question_timeout: float = 10.0,
        analysis_timeout: float = 10.0,
        timer_interval: float = 1.0,
        clock: Callable[[], datetime] = utc_now
    ):
        self.provider = provider
        self.history = history if history is not None else InterviewHistory()
        self.question_timeout = question_timeout
        self.analysis_timeout = analysis_timeout
        self.timer_interval = timer_interval
        self._clock = clock
        self._active: Optional[InterviewSession] = None
        self._timer: Optional[ElapsedTimer] = None
        self._generation_tasks: Dict[str, asyncio.Task] = {}
        self._analysis_tasks: Dict[str, asyncio.Task] = {}
        self._background_tasks: Set[asyncio.Task] = set()

    @property
    def active_session(self) -> Optional[InterviewSession]:
        return self._active

    def start_interview(self, config: InterviewConfig) -> InterviewSession:
        """
        Create a session for the configuration and start loading its questions.

        Must be called from within a running event loop.

        Args:
            config (InterviewConfig): Validated interview configuration.

        Returns:
            InterviewSession: The new session, still loading its questions.
        """
        if self._active is not None:
            logger.warning(f"Abandoning unfinished session {self._active.id} to start a new interview")
            self.exit_interview(self._active.id)

        session = InterviewSession(config=config, start_time=self._clock())
        self._active = session
        logger.info(f"Started {config.type} interview {session.id} for {config.position} ({config.duration} min)")

        task = self._spawn(self._load_questions(session), name=f"question_generation_{session.id}")
        self._generation_tasks[session.id] = task
        return session

    async def wait_until_ready(self, session_id: str) -> InterviewSession:
        """Wait for the questions of a session to load and return the session."""
        task = self._generation_tasks.get(session_id)
        if task is not None:
            await task
        return self.get_session(session_id)

    def get_session(self, session_id: str) -> InterviewSession:
        """
        Look up the active session or a completed one.

        Raises:
            SessionNotFound: If the session does not exist or was abandoned.
        """
        if self._active is not None and self._active.id == session_id:
            return self._active
        session = self.history.get(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        return session

    def submit_answer(self, session_id: str, answer: str) -> InterviewSession:
        """Record an answer for the current question and advance."""
        session = self.get_session(session_id)
        completed = session.advance(answer, now=self._clock())
        logger.debug(f"Recorded answer for session {session_id} ({len(answer.strip())} chars)")
        if completed:
            self._complete(session)
        return session

    def skip_question(self, session_id: str) -> InterviewSession:
        """Skip the current question, recording an empty answer, and advance."""
        session = self.get_session(session_id)
        skipped_index = session.current_question
        completed = session.skip(now=self._clock())
        logger.debug(f"Skipped question {skipped_index + 1} of session {session_id}")
        if completed:
            self._complete(session)
        return session

    def exit_interview(self, session_id: str) -> None:
        """
        Abandon an unfinished session. It is discarded and never reaches the history.

        Raises:
            SessionNotFound: If the session does not exist.
            InvalidSessionTransition: If the session is already completed.
        """
        session = self.get_session(session_id)
        session.abandon()
        self._stop_timer()
        self._active = None
        self._generation_tasks.pop(session_id, None)
        logger.info(f"Session {session_id} abandoned")

    async def wait_for_results(self, session_id: str) -> InterviewSession:
        """
        Wait for the analysis of a completed session.

        Raises:
            InvalidSessionTransition: If the session has not been completed.
        """
        session = self.get_session(session_id)
        if not session.is_completed:
            raise InvalidSessionTransition("view the results of", session.status.value)
        task = self._analysis_tasks.get(session_id)
        if task is not None:
            # Cancellation of the analysis leaves the session unscored.
            await asyncio.wait({task})
        return session

    def list_history(self) -> List[InterviewSession]:
        return self.history.list_recent_first()

    def history_summary(self) -> HistorySummary:
        return self.history.summary()

    async def shutdown(self) -> None:
        """Stop the timer and cancel outstanding background work."""
        self._stop_timer()
        tasks = list(self._background_tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.info("Interview flow service shut down")

    async def _load_questions(self, session: InterviewSession) -> None:
        try:
            questions = await generate_interview_questions(session.config, self.provider, timeout=self.question_timeout)

            if session.status != SessionStatus.LOADING:
                logger.warning(f"Discarding {len(questions)} questions for session {session.id} ({session.status.value})")
                return

            session.load_questions(questions)
            self._start_timer(session)
            logger.info(f"Session {session.id} is active with {len(questions)} questions")
        finally:
            self._generation_tasks.pop(session.id, None)

    def _complete(self, session: InterviewSession) -> None:
        self._stop_timer()
        self._active = None
        self._generation_tasks.pop(session.id, None)
        self.history.append(session)
        logger.info(f"Session {session.id} completed after {session.elapsed_seconds}s, analyzing answers")

        task = self._spawn(self._analyze(session), name=f"answer_analysis_{session.id}")
        self._analysis_tasks[session.id] = task

    async def _analyze(self, session: InterviewSession) -> None:
        try:
            result = await analyze_interview(
                session.questions,
                session.answers,
                session.config.position,
                session.config.type,
                self.provider,
                timeout=self.analysis_timeout,
            )
            session.record_analysis(result)
            logger.info(f"Session {session.id} scored {result.score}")
        finally:
            self._analysis_tasks.pop(session.id, None)

    def _start_timer(self, session: InterviewSession) -> None:
        self._stop_timer()
        self._timer = ElapsedTimer(session.tick, interval=self.timer_interval, name=f"elapsed_timer_{session.id}")
        self._timer.start()

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _spawn(self, coro, name: str) -> asyncio.Task:
        task = asyncio.create_task(coro, name=name)
        self._background_tasks.add(task)
        task.add_done_callback(self._background_tasks.discard)
        return task
