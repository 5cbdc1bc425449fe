"""
Answer Analysis Module

This module provides the rule-based answer scorer and the provider-backed
analysis with fallback.
"""

from .answer_scorer import analyze_answers, score_band, score_message
from .answer_analysis_service import analyze_interview, fallback_analysis

__all__ = [
    "analyze_answers",
    "score_band",
    "score_message",
    "analyze_interview",
    "fallback_analysis"
]
