"""
Interview AI Provider

This module defines the capability the interview flow depends on for generating
questions and analyzing answers. Any backend that implements the two coroutines
of InterviewAIProvider can be plugged into the flow service; the default is the
rule-based MockInterviewAI.

The provider is built once per application and passed down explicitly, so tests
can substitute their own implementation.

Dependencies:
- typing: For the provider protocol.
- loguru: For logging.
"""

import random
from typing import List, Protocol
from loguru import logger
from interview_practice.core.settings import Settings
from interview_practice.schemas.analysis_result import AnalysisResult


class InterviewAIProvider(Protocol):
    """Source of interview questions and answer analyses."""

    async def generate_questions(
        self,
        interview_type: str,
        position: str,
        experience: str,
        count: int
    ) -> List[str]:
        ...

    async def analyze_answers(
        self,
        questions: List[str],
        answers: List[str],
        position: str,
        interview_type: str
    ) -> AnalysisResult:
        ...


def build_rng(seed=None) -> random.Random:
    """Random source for shuffling and jitter, reproducible when a seed is given."""
    return random.Random(seed)


def build_ai_provider(settings: Settings) -> InterviewAIProvider:
    """
    Build the provider configured for this process.

    Args:
        settings (Settings): Runtime configuration with latencies and random seed.

    Returns:
        InterviewAIProvider: The rule-based mock provider.
    """
    from interview_practice.services.interview_ai.mock_interview_ai import MockInterviewAI

    provider = MockInterviewAI(
        rng=build_rng(settings.random_seed),
        question_latency=settings.question_latency_seconds,
        analysis_latency=settings.analysis_latency_seconds,
    )
    logger.info(
        f"Initialized mock interview AI (question latency {settings.question_latency_seconds}s, "
        f"analysis latency {settings.analysis_latency_seconds}s, seeded={settings.random_seed is not None})"
    )
    return provider
