"""
Question Generation Service Module

This module asks the interview AI provider for the questions of a new session.
The number of questions is derived from the planned duration. If the provider
fails, times out or returns nothing, a generic fallback list for the interview
type is returned instead, so a session can always start.

Dependencies:
- asyncio: For bounding the provider call.
- loguru: For logging operations.
- interview_practice.core.ai_provider: For the provider capability.
- interview_practice.services.question_generation.question_selector: For counts and fallbacks.
"""

import asyncio
from typing import List
from loguru import logger
from interview_practice.core.ai_provider import InterviewAIProvider
from interview_practice.errors.exceptions import GenerationFailure
from interview_practice.schemas.interview_config import InterviewConfig
from .question_selector import fallback_questions, question_count


async def generate_interview_questions(
    config: InterviewConfig,
    provider: InterviewAIProvider,
    timeout: float = 10.0
) -> List[str]:
    """
    Generate the questions for an interview.

    Args:
        config (InterviewConfig): Interview configuration.
        provider (InterviewAIProvider): Question source.
        timeout (float): Seconds to wait for the provider before falling back.

    Returns:
        List[str]: At least one question.

    Example:
        >>> config = InterviewConfig(type="behavioral", position="Designer", duration=10)
        >>> questions = await generate_interview_questions(config, provider)
        >>> len(questions)
        4
    """
    count = question_count(config.duration)
    try:
        questions = await asyncio.wait_for(
            provider.generate_questions(config.type, config.position, config.experience, count),
            timeout=timeout,
        )
        if not questions:
            raise GenerationFailure(f"No questions generated for {config.type} {config.position}")
        return list(questions)[:count]

    except asyncio.TimeoutError:
        logger.error(f"Question generation timed out after {timeout}s, using fallback questions")
    except Exception as e:
        logger.error(f"Error generating questions: {e}")

    return fallback_questions(config.type, config.position, config.duration)
