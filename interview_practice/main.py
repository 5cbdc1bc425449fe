from typing import Optional
from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from contextlib import asynccontextmanager
from slowapi import _rate_limit_exceeded_handler
# Settings
from interview_practice.core.settings import Settings, get_settings
from interview_practice.core.logging_config import configure_logging
# Rate Limiter
from interview_practice.core.route_limiters import limiter
# Routers
from interview_practice.routes.health import router as health_router
from interview_practice.routes.interviews import router as interviews_router
from interview_practice.routes.history import router as history_router
# CORS Middleware
from interview_practice.core.cors_middleware import add_cors_middleware
# Logger
from loguru import logger
# Interview services
from interview_practice.core.ai_provider import InterviewAIProvider, build_ai_provider
from interview_practice.services.history.interview_history import InterviewHistory
from interview_practice.services.interview_flow.interview_flow_service import InterviewFlowService
# Error Handling
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException

from interview_practice.errors.handlers import http_exception_handler, generic_exception_handler, validation_exception_handler


def create_app(settings: Optional[Settings] = None, provider: Optional[InterviewAIProvider] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Runtime configuration, read from the environment if omitted.
        provider: Interview AI provider, the mock provider from settings if omitted.

    Returns:
        FastAPI: The configured application.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifespan events."""
        # Startup
        try:
            app.state.interview_service = InterviewFlowService(
                provider=provider or build_ai_provider(settings),
                history=InterviewHistory(),
                question_timeout=settings.question_timeout_seconds,
                analysis_timeout=settings.analysis_timeout_seconds,
                timer_interval=settings.timer_tick_seconds,
            )
            logger.info("Application startup completed successfully")
        except Exception as e:
            logger.error(f"Error during application startup: {e}")
            raise

        yield

        # Shutdown
        await app.state.interview_service.shutdown()
        logger.info("Application shutdown")

    app = FastAPI(
        title="Interview Practice API",
        description="API for practicing mock interviews",
        version="0.1.0",
        lifespan=lifespan
    )
    # Add CORS middleware
    add_cors_middleware(app, settings.cors_origins)

    # Centralized error handlers
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Add rate limiter to the app
    limiter.enabled = settings.rate_limit_enabled
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Include routers
    app.include_router(health_router)
    app.include_router(interviews_router)
    app.include_router(history_router)

    return app


app = create_app()
