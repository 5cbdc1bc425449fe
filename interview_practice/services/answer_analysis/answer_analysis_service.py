"""
Answer Analysis Service

This service obtains the analysis of a completed interview from the interview AI
provider. A failed or timed out analysis is replaced by a fixed fallback result,
so a completed session is always scored.

Dependencies:
- asyncio: For bounding the provider call.
- loguru: For logging operations.
- interview_practice.core.ai_provider: For the provider capability.
"""

import asyncio
from typing import List
from loguru import logger
from interview_practice.constants.analysis_messages import FALLBACK_FEEDBACK, FALLBACK_SCORE, FALLBACK_SUGGESTIONS
from interview_practice.core.ai_provider import InterviewAIProvider
from interview_practice.errors.exceptions import AnalysisFailure
from interview_practice.schemas.analysis_result import AnalysisResult


def fallback_analysis() -> AnalysisResult:
    return AnalysisResult(
        score=FALLBACK_SCORE,
        feedback=list(FALLBACK_FEEDBACK),
        suggestions=list(FALLBACK_SUGGESTIONS),
    )


async def analyze_interview(
    questions: List[str],
    answers: List[str],
    position: str,
    interview_type: str,
    provider: InterviewAIProvider,
    timeout: float = 10.0
) -> AnalysisResult:
    """
    Analyze an interview with graceful fallback.

    Args:
        questions: The questions that were asked.
        answers: Answers indexed like questions.
        position: Target position.
        interview_type: Kind of interview.
        provider: Analysis source.
        timeout: Seconds to wait for the provider before falling back.

    Returns:
        AnalysisResult: The provider's analysis, or the fallback analysis on failure.
    """
    try:
        result = await asyncio.wait_for(
            provider.analyze_answers(questions, answers, position, interview_type),
            timeout=timeout,
        )
        if result is None:
            raise AnalysisFailure("Empty analysis received from provider")
        return result

    except asyncio.TimeoutError:
        logger.error(f"Answer analysis timed out after {timeout}s, using fallback analysis")
    except Exception as e:
        logger.error(f"Error analyzing answers: {e}")

    return fallback_analysis()
