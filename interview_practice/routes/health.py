"""
Health check endpoint for the interview practice API.

Description:
Reports that the service is up, whether an interview is currently running and how
many completed interviews are in the history.

Arguments:
- request: An instance of Request, required for rate limiting.

Returns:
- HealthResponse, e.g. {"status": "ok", "active_interview": false, "completed_interviews": 0}.

Dependencies:
- fastapi: For API routing and dependency injection.
- interview_practice.core.route_limiters: For rate limiting functionality.
- loguru: For logging information about the health check endpoint.
"""
from fastapi import APIRouter, Depends, Request
from interview_practice.core.dependencies import get_interview_service
from interview_practice.core.route_limiters import limiter
from interview_practice.schemas.health_response import HealthResponse
from interview_practice.services.interview_flow.interview_flow_service import InterviewFlowService
from loguru import logger

router = APIRouter(
    prefix="/api",
    tags=["health"],
    responses={404: {"description": "Not found"}}
)

@router.get("/health", response_model=HealthResponse)
@limiter.limit("10/minute")
async def health(request: Request, service: InterviewFlowService = Depends(get_interview_service)):
    """
    Request parameter is required for rate limiting.
    """
    logger.debug("Health check endpoint called")
    return HealthResponse(
        status="ok",
        active_interview=service.active_session is not None,
        completed_interviews=len(service.history),
    )
