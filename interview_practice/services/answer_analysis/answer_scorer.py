"""
Answer Scoring Module

This module implements the rule-based analysis of a completed interview. Each
answer is placed in a quality bucket by its trimmed length, the buckets are
averaged and jittered into an overall score, and per-question feedback and a
ranked suggestion list are derived from the buckets and the score.

The score is computed as: average bucket, plus a draw from [-10, 10), clamped to
[0, 100], then rounded half-up.

Dependencies:
- random: For the score jitter.
- interview_practice.constants.analysis_messages: For feedback and suggestion texts.
"""

import math
import random
from typing import List, Optional
from interview_practice.constants.analysis_messages import (
    BASE_SUGGESTIONS,
    FEEDBACK_NEEDS_STRUCTURE,
    FEEDBACK_NO_ANSWER,
    FEEDBACK_TOO_BRIEF,
    FEEDBACK_WELL_STRUCTURED,
    MAX_SUGGESTIONS,
    PRACTICE_SUGGESTIONS,
    PREPARATION_SUGGESTIONS,
    QUALITY_BUCKETS,
    SCORE_JITTER,
    TOP_QUALITY,
    TYPE_SUGGESTIONS,
)
from interview_practice.schemas.analysis_result import AnalysisResult


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def answer_quality(answer: Optional[str]) -> int:
    """
    Map an answer to its quality bucket.

    Args:
        answer (str, optional): The candidate's answer; None counts as missing.

    Returns:
        int: 0, 40, 60, 75 or 85.

    Example:
        >>> answer_quality("I led the migration of our billing system.")
        40
    """
    length = len((answer or "").strip())
    for upper_bound, quality in QUALITY_BUCKETS:
        if length < upper_bound:
            return quality
    return TOP_QUALITY


def answer_qualities(questions: List[str], answers: List[str]) -> List[int]:
    """Quality bucket per question; questions without an answer score 0."""
    return [
        answer_quality(answers[index] if index < len(answers) else None)
        for index in range(len(questions))
    ]


def feedback_for(number: int, quality: int) -> str:
    if quality == 0:
        return FEEDBACK_NO_ANSWER.format(number=number)
    if quality < 50:
        return FEEDBACK_TOO_BRIEF.format(number=number)
    if quality < 70:
        return FEEDBACK_NEEDS_STRUCTURE.format(number=number)
    return FEEDBACK_WELL_STRUCTURED.format(number=number)


def raw_score(qualities: List[int], rng: random.Random) -> float:
    """Average the buckets, add jitter and clamp to [0, 100], without rounding."""
    average = sum(qualities) / len(qualities) if qualities else 0.0
    jittered = average + rng.random() * (2 * SCORE_JITTER) - SCORE_JITTER
    return min(100.0, max(0.0, jittered))


def compute_score(qualities: List[int], rng: random.Random) -> int:
    return round_half_up(raw_score(qualities, rng))


def build_suggestions(score: float, interview_type: str) -> List[str]:
    """
    Build the ranked suggestion list for a score.

    Universal suggestions come first, then the score-gated ones, then the
    suggestions for the interview type. Only the first five are kept. The gates
    compare the unrounded score, so 69.8 still earns the practice suggestions.
    """
    suggestions = list(BASE_SUGGESTIONS)

    if score < 70:
        suggestions.extend(PRACTICE_SUGGESTIONS)

    if score < 50:
        suggestions.extend(PREPARATION_SUGGESTIONS)

    suggestions.extend(TYPE_SUGGESTIONS.get(interview_type, TYPE_SUGGESTIONS["general"]))

    return suggestions[:MAX_SUGGESTIONS]


def analyze_answers(
    questions: List[str],
    answers: List[str],
    position: str,
    interview_type: str,
    rng: Optional[random.Random] = None
) -> AnalysisResult:
    """
    Analyze a completed interview.

    Args:
        questions (List[str]): The questions that were asked.
        answers (List[str]): Answers indexed like questions, possibly shorter.
        position (str): Target position. Not used by the rules, kept for parity with AI backends.
        interview_type (str): Kind of interview, selects the type-specific suggestions.
        rng (random.Random, optional): Random source for the score jitter.

    Returns:
        AnalysisResult: Score, one feedback entry per question, and up to five suggestions.
    """
    qualities = answer_qualities(questions, answers)
    unrounded = raw_score(qualities, rng or random.Random())
    feedback = [feedback_for(index + 1, quality) for index, quality in enumerate(qualities)]

    return AnalysisResult(
        score=round_half_up(unrounded),
        feedback=feedback,
        suggestions=build_suggestions(unrounded, interview_type),
    )


def score_message(score: int) -> str:
    """Encouraging message for the results screen."""
    if score >= 90:
        return "Outstanding performance! You're interview-ready."
    elif score >= 80:
        return "Excellent work! Minor improvements will make you shine."
    elif score >= 70:
        return "Good foundation! Focus on the suggestions below."
    elif score >= 60:
        return "Solid effort! Practice will boost your confidence."
    else:
        return "Keep practicing! Every interview makes you stronger."


def score_band(score: int) -> str:
    if score >= 85:
        return "strong"
    if score >= 70:
        return "fair"
    return "weak"
