"""
Interview Flow Module

This module contains the service that drives interview sessions and the timer
that measures their active time.
"""

from .elapsed_timer import ElapsedTimer
from .interview_flow_service import InterviewFlowService

__all__ = ["ElapsedTimer", "InterviewFlowService"]
