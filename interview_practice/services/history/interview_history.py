"""
Interview History Store

In-memory, append-only collection of completed interview sessions. It lives for
the lifetime of the process.

Dependencies:
- loguru: For logging operations.
"""

from typing import Dict, List, Optional
from loguru import logger
from interview_practice.schemas.history_summary import HistorySummary
from interview_practice.schemas.interview_session import InterviewSession
from .history_aggregator import summarize_history


class InterviewHistory:
    """Completed sessions in completion order."""

    def __init__(self):
        self._sessions: List[InterviewSession] = []
        self._by_id: Dict[str, InterviewSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._by_id

    def append(self, session: InterviewSession) -> None:
        """
        Add a completed session.

        Raises:
            ValueError: If the session is not completed or was already added.
        """
        if not session.is_completed:
            raise ValueError(f"Only completed sessions can be added to the history, got {session.status.value}")
        if session.id in self._by_id:
            raise ValueError(f"Session {session.id} is already in the history")
        self._sessions.append(session)
        self._by_id[session.id] = session
        logger.info(f"Added session {session.id} to history ({len(self._sessions)} total)")

    def get(self, session_id: str) -> Optional[InterviewSession]:
        return self._by_id.get(session_id)

    def list_recent_first(self) -> List[InterviewSession]:
        return list(reversed(self._sessions))

    def summary(self) -> HistorySummary:
        return summarize_history(self._sessions)
