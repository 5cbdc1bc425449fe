"""
Question Selection Utility Module

This module builds the candidate pool of interview questions for a given interview
type, position and experience level, and selects a random subset of it.

For technical interviews the position is matched (case-insensitively) against the
known role names and falls back to the software engineer set. Other interview types
use a flat question set, falling back to the general set for unknown types. Senior
and lead candidates get two extra questions in their pool.

Dependencies:
- random: For shuffling the candidate pool.
- interview_practice.constants.question_bank: For the question sets.
"""

import math
import random
from typing import List, Optional
from interview_practice.constants.question_bank import (
    DEFAULT_TECHNICAL_ROLE,
    EXPERIENCE_QUESTIONS,
    FALLBACK_QUESTIONS,
    MAX_QUESTIONS,
    MINUTES_PER_QUESTION,
    QUESTIONS_BY_TYPE,
    SENIOR_EXPERIENCE_LEVELS,
    TECHNICAL_QUESTIONS,
)


def question_count(duration_minutes: int) -> int:
    """
    Number of questions that fit into an interview of the given length.

    Args:
        duration_minutes (int): Planned interview length.

    Returns:
        int: floor(duration / 2.5) capped at 12, and at least 1.

    Example:
        >>> question_count(15)
        6
    """
    return max(1, min(math.floor(duration_minutes / MINUTES_PER_QUESTION), MAX_QUESTIONS))


def match_technical_role(position: str) -> str:
    """Return the technical role key contained in the position, or the default role."""
    normalized = position.lower()
    for role in TECHNICAL_QUESTIONS:
        if role in normalized:
            return role
    return DEFAULT_TECHNICAL_ROLE


def candidate_pool(interview_type: str, position: str, experience: str = "") -> List[str]:
    """
    Build the list of questions a selection may be drawn from.

    Args:
        interview_type (str): One of technical, behavioral, leadership or general.
        position (str): Target position, used for role matching and inside question texts.
        experience (str): Candidate experience level.

    Returns:
        List[str]: A new list, safe to mutate.
    """
    if interview_type == "technical":
        templates = TECHNICAL_QUESTIONS[match_technical_role(position)]
    else:
        templates = QUESTIONS_BY_TYPE.get(interview_type, QUESTIONS_BY_TYPE["general"])

    templates = list(templates)
    if experience in SENIOR_EXPERIENCE_LEVELS:
        templates.extend(EXPERIENCE_QUESTIONS)

    lowered = position.lower()
    return [template.format(position=lowered) for template in templates]


def select_questions(
    interview_type: str,
    position: str,
    experience: str,
    count: int,
    rng: Optional[random.Random] = None
) -> List[str]:
    """
    Select a random subset of the candidate pool.

    Args:
        interview_type (str): Kind of interview.
        position (str): Target position.
        experience (str): Candidate experience level.
        count (int): Number of questions wanted.
        rng (random.Random, optional): Random source, a fresh unseeded one if omitted.

    Returns:
        List[str]: min(count, pool size) distinct questions in random order.
    """
    pool = candidate_pool(interview_type, position, experience)
    (rng or random.Random()).shuffle(pool)
    return pool[:max(count, 0)]


def fallback_questions(interview_type: str, position: str, duration_minutes: int) -> List[str]:
    """Generic questions served when the question source fails."""
    templates = FALLBACK_QUESTIONS.get(interview_type, FALLBACK_QUESTIONS["general"])
    count = min(question_count(duration_minutes), len(templates))
    return [template.format(position=position) for template in templates[:count]]
