"""
Test Settings Module
"""

import pytest

from interview_practice.core.settings import DEFAULT_CORS_ORIGINS, get_settings

ENV_VARS = [
    "QUESTION_LATENCY_SECONDS",
    "ANALYSIS_LATENCY_SECONDS",
    "QUESTION_TIMEOUT_SECONDS",
    "ANALYSIS_TIMEOUT_SECONDS",
    "RANDOM_SEED",
    "TIMER_TICK_SECONDS",
    "CORS_ORIGINS",
    "RATE_LIMIT_ENABLED",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = get_settings()

    assert settings.question_latency_seconds == 2.0
    assert settings.analysis_latency_seconds == 1.5
    assert settings.question_timeout_seconds == 10.0
    assert settings.random_seed is None
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.rate_limit_enabled is True
    assert settings.log_level == "INFO"


def test_values_from_environment(clean_env):
    clean_env.setenv("QUESTION_LATENCY_SECONDS", "0")
    clean_env.setenv("RANDOM_SEED", "42")
    clean_env.setenv("CORS_ORIGINS", "http://a.example, http://b.example,")
    clean_env.setenv("RATE_LIMIT_ENABLED", "false")
    clean_env.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.question_latency_seconds == 0
    assert settings.random_seed == 42
    assert settings.cors_origins == ["http://a.example", "http://b.example"]
    assert settings.rate_limit_enabled is False
    assert settings.log_level == "DEBUG"


def test_blank_seed_means_unseeded(clean_env):
    clean_env.setenv("RANDOM_SEED", "  ")
    assert get_settings().random_seed is None


def test_invalid_number(clean_env):
    clean_env.setenv("ANALYSIS_TIMEOUT_SECONDS", "soon")
    with pytest.raises(ValueError):
        get_settings()
