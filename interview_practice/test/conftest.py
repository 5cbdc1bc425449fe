"""
Shared fixtures for the interview practice tests.
"""

import random

import pytest

from interview_practice.core.settings import Settings
from interview_practice.services.interview_ai.mock_interview_ai import MockInterviewAI


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def mock_ai():
    return MockInterviewAI(rng=random.Random(42), question_latency=0, analysis_latency=0)


@pytest.fixture
def test_settings():
    return Settings(
        question_latency_seconds=0,
        analysis_latency_seconds=0,
        question_timeout_seconds=2,
        analysis_timeout_seconds=2,
        random_seed=42,
        timer_tick_seconds=1,
        rate_limit_enabled=False,
        log_level="WARNING",
    )
