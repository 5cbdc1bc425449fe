"""
History Module

This module provides the append-only store of completed sessions and the
aggregation of their statistics.
"""

from .history_aggregator import summarize_history
from .interview_history import InterviewHistory

__all__ = ["summarize_history", "InterviewHistory"]
