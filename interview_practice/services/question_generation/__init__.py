"""
Question Generation Module

This module provides the static question selection and the provider-backed
question generation with fallback.
"""

from .question_selector import candidate_pool, fallback_questions, question_count, select_questions
from .question_generation_service import generate_interview_questions

__all__ = [
    "candidate_pool",
    "fallback_questions",
    "question_count",
    "select_questions",
    "generate_interview_questions"
]
