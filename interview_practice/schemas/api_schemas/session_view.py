"""
Description:
Schema describing an interview session as seen by the client.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For type annotations.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field
from interview_practice.schemas.interview_config import InterviewConfig
from interview_practice.schemas.interview_session import InterviewSession, SessionStatus, format_elapsed


class SessionView(BaseModel):
    id: str
    config: InterviewConfig
    status: SessionStatus
    questions: List[str] = Field(default_factory=list)
    answers: List[str] = Field(default_factory=list)
    current_question: int
    current_question_text: Optional[str] = None
    progress_percent: float = 0.0
    elapsed_seconds: int = 0
    elapsed: str = "0:00"
    start_time: datetime
    end_time: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    score: Optional[int] = None

    @classmethod
    def from_session(cls, session: InterviewSession) -> "SessionView":
        return cls(
            id=session.id,
            config=session.config,
            status=session.status,
            questions=session.questions,
            answers=session.answers,
            current_question=session.current_question,
            current_question_text=session.current_question_text,
            progress_percent=round(session.progress_percent, 2),
            elapsed_seconds=session.elapsed_seconds,
            elapsed=format_elapsed(session.elapsed_seconds),
            start_time=session.start_time,
            end_time=session.end_time,
            duration_minutes=session.duration_minutes,
            score=session.score,
        )
