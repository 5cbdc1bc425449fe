"""
Application Settings Module

This module loads runtime configuration for the interview practice service from
environment variables (optionally via a .env file). All values have defaults so
the service starts without any configuration.

Dependencies:
- pydantic: For typed settings.
- dotenv: For loading environment variables from a .env file.
- os: For environment variable access.
"""
import os
from typing import List, Optional
from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

DEFAULT_CORS_ORIGINS = ["http://localhost:5173"]


class Settings(BaseModel):
    """Runtime configuration for the service."""
    question_latency_seconds: float = Field(default=2.0, ge=0, description="Simulated latency of the question generator")
    analysis_latency_seconds: float = Field(default=1.5, ge=0, description="Simulated latency of the answer analyzer")
    question_timeout_seconds: float = Field(default=10.0, gt=0, description="Upper bound for a question generation call")
    analysis_timeout_seconds: float = Field(default=10.0, gt=0, description="Upper bound for an answer analysis call")
    random_seed: Optional[int] = Field(default=None, description="Seed for question shuffling and score jitter")
    timer_tick_seconds: float = Field(default=1.0, gt=0, description="Period of the elapsed time timer")
    cors_origins: List[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    rate_limit_enabled: bool = Field(default=True)
    log_level: str = Field(default="INFO")


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _get_optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return int(value)


def get_settings() -> Settings:
    """
    Build settings from the current environment.

    Returns:
        Settings: Settings populated from environment variables, falling back to defaults.

    Raises:
        ValueError: If a numeric variable cannot be parsed.
    """
    origins = os.getenv("CORS_ORIGINS")
    return Settings(
        question_latency_seconds=float(os.getenv("QUESTION_LATENCY_SECONDS", "2.0")),
        analysis_latency_seconds=float(os.getenv("ANALYSIS_LATENCY_SECONDS", "1.5")),
        question_timeout_seconds=float(os.getenv("QUESTION_TIMEOUT_SECONDS", "10.0")),
        analysis_timeout_seconds=float(os.getenv("ANALYSIS_TIMEOUT_SECONDS", "10.0")),
        random_seed=_get_optional_int("RANDOM_SEED"),
        timer_tick_seconds=float(os.getenv("TIMER_TICK_SECONDS", "1.0")),
        cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()] if origins else list(DEFAULT_CORS_ORIGINS),
        rate_limit_enabled=_get_bool("RATE_LIMIT_ENABLED", True),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
