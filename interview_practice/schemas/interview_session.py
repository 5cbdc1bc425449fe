"""
Interview Session Schema

This module defines the interview session model together with the transitions
that drive it from loading, through answering questions, to completion.

A session is created while its questions are still loading. Once the questions
arrive it becomes active and the candidate either answers or skips the current
question. Answering or skipping the last question completes the session and
stamps its end time. Analysis later attaches a score, exactly once. A session
that is exited before completion is abandoned and never reaches the history.

    loading --load_questions--> active --advance/skip (last)--> completed
       |                          |
       +---------abandon----------+-----------------------------> abandoned

Dependencies:
- pydantic: For data validation and serialization
- typing: For type hints
"""
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field
from interview_practice.errors.exceptions import InvalidSessionTransition
from interview_practice.schemas.analysis_result import AnalysisResult
from interview_practice.schemas.interview_config import InterviewConfig


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionStatus(str, Enum):
    """Lifecycle status of an interview session."""
    LOADING = "loading"
    ACTIVE = "active"
    COMPLETED = "completed"
    ABANDONED = "abandoned"


class InterviewSession(BaseModel):
    """A single mock interview and its answers."""
    id: str = Field(default_factory=lambda: uuid.uuid4().hex, description="Unique session identifier")
    config: InterviewConfig = Field(..., description="Configuration the session was started with")
    questions: List[str] = Field(default_factory=list, description="Questions in the order they are asked")
    answers: List[str] = Field(default_factory=list, description="Answers indexed like questions")
    current_question: int = Field(default=0, ge=0, description="Index of the question being answered")
    start_time: datetime = Field(default_factory=utc_now)
    end_time: Optional[datetime] = Field(default=None)
    score: Optional[int] = Field(default=None, ge=0, le=100)
    status: SessionStatus = Field(default=SessionStatus.LOADING)
    elapsed_seconds: int = Field(default=0, ge=0, description="Seconds spent while the session was active")
    analysis: Optional[AnalysisResult] = Field(default=None)

    @property
    def is_active(self) -> bool:
        return self.status == SessionStatus.ACTIVE

    @property
    def is_completed(self) -> bool:
        return self.status == SessionStatus.COMPLETED

    @property
    def is_scored(self) -> bool:
        return self.score is not None

    @property
    def current_question_text(self) -> Optional[str]:
        """Text of the question being answered, or None outside the active state."""
        if not self.is_active:
            return None
        return self.questions[self.current_question]

    @property
    def progress_percent(self) -> float:
        """Share of the interview reached so far, counting the current question."""
        if not self.questions:
            return 0.0
        return (self.current_question + 1) / len(self.questions) * 100

    @property
    def duration_minutes(self) -> Optional[int]:
        """Whole minutes between start and end, or None while unfinished."""
        if self.end_time is None:
            return None
        return int((self.end_time - self.start_time).total_seconds() // 60)

    def _require(self, status: SessionStatus, action: str) -> None:
        if self.status != status:
            raise InvalidSessionTransition(action, self.status.value)

    def load_questions(self, questions: List[str]) -> None:
        """Populate the questions exactly once and start the interview."""
        self._require(SessionStatus.LOADING, "load questions into")
        if not questions:
            raise ValueError("An interview needs at least one question")
        self.questions = list(questions)
        self.current_question = 0
        self.status = SessionStatus.ACTIVE

    def advance(self, answer: str, now: Optional[datetime] = None) -> bool:
        """
        Record the answer for the current question and move on.

        Args:
            answer: Free-text answer for the current question.
            now: Completion timestamp, defaults to the current UTC time.

        Returns:
            bool: True if this answer completed the interview.

        Raises:
            InvalidSessionTransition: If the session is not active.
        """
        self._require(SessionStatus.ACTIVE, "answer a question in")
        self._assign_answer(self.current_question, answer)

        if self.current_question < len(self.questions) - 1:
            self.current_question += 1
            return False

        end_time = now or utc_now()
        self.end_time = max(end_time, self.start_time)
        self.status = SessionStatus.COMPLETED
        return True

    def skip(self, now: Optional[datetime] = None) -> bool:
        """Skip the current question, recording an empty answer."""
        self._require(SessionStatus.ACTIVE, "skip a question in")
        return self.advance("", now=now)

    def abandon(self) -> None:
        """Exit the interview before completion."""
        if self.status not in (SessionStatus.LOADING, SessionStatus.ACTIVE):
            raise InvalidSessionTransition("exit", self.status.value)
        self.status = SessionStatus.ABANDONED

    def record_analysis(self, analysis: AnalysisResult) -> None:
        """Attach the analysis of a completed session. The score is set exactly once."""
        self._require(SessionStatus.COMPLETED, "score")
        if self.score is not None:
            raise InvalidSessionTransition("re-score", "already scored")
        self.analysis = analysis
        self.score = analysis.score

    def tick(self) -> None:
        """Count one second of active time."""
        if self.is_active:
            self.elapsed_seconds += 1

    def _assign_answer(self, index: int, answer: str) -> None:
        # Answers are assigned by index, skipped indices stay empty.
        if index >= len(self.answers):
            self.answers.extend([""] * (index + 1 - len(self.answers)))
        self.answers[index] = answer


def format_elapsed(seconds: int) -> str:
    """Format a number of seconds as m:ss."""
    minutes, secs = divmod(max(int(seconds), 0), 60)
    return f"{minutes}:{secs:02d}"
