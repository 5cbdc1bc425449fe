"""
History Aggregation Utility Module

This module derives the summary statistics shown on the history screen from a
collection of completed sessions. The computation is read-only and does not
depend on the order of the sessions.
"""

import math
from typing import Iterable
from interview_practice.schemas.history_summary import HistorySummary
from interview_practice.schemas.interview_session import InterviewSession


def summarize_history(sessions: Iterable[InterviewSession]) -> HistorySummary:
    """
    Summarize completed sessions.

    Args:
        sessions (Iterable[InterviewSession]): Completed sessions, in any order.

    Returns:
        HistorySummary: Counts and scores, all zero for an empty collection.

    Example:
        >>> summarize_history([])
        HistorySummary(total_sessions=0, average_score=0, total_duration_minutes=0, best_score=0)
    """
    sessions = list(sessions)
    if not sessions:
        return HistorySummary()

    scores = [session.score or 0 for session in sessions]
    total_duration = sum(
        session.duration_minutes for session in sessions if session.duration_minutes is not None
    )

    return HistorySummary(
        total_sessions=len(sessions),
        average_score=int(math.floor(sum(scores) / len(scores) + 0.5)),
        total_duration_minutes=total_duration,
        best_score=max(scores),
    )
