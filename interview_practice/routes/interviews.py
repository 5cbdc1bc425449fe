"""
Interview Routes Module

Description:
This module defines FastAPI routes for running a mock interview: starting a session,
answering or skipping questions, exiting, and reading the results once the answers
have been analyzed.

Dependencies:
- fastapi: For API routing and dependency injection.
- loguru: For logging operations.
- interview_practice.core.route_limiters: For rate limiting.
- interview_practice.services.interview_flow: For the session lifecycle.
- interview_practice.errors.exceptions: For custom exception handling.
"""
from fastapi import APIRouter, Depends, Request, Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT
from loguru import logger
from interview_practice.constants.question_bank import DURATION_CHOICES
from interview_practice.core.dependencies import get_interview_service
from interview_practice.core.route_limiters import limiter
from interview_practice.errors.exceptions import InternalServerError
from interview_practice.schemas.api_schemas import AnswerSubmission, InterviewOptions, InterviewResults, SessionView
from interview_practice.schemas.interview_config import ExperienceLevel, InterviewConfig, InterviewType
from interview_practice.services.answer_analysis.answer_scorer import score_band, score_message
from interview_practice.services.interview_flow.interview_flow_service import InterviewFlowService

router = APIRouter(
    prefix="/api/interviews",
    tags=["interviews"],
    responses={404: {"description": "Not found"}}
)


@router.get("/options", response_model=InterviewOptions)
async def get_interview_options():
    """Choices offered by the interview setup form."""
    return InterviewOptions(
        types=[interview_type.value for interview_type in InterviewType],
        experience_levels=[level.value for level in ExperienceLevel],
        durations=list(DURATION_CHOICES),
    )


@router.post("", response_model=SessionView, status_code=HTTP_201_CREATED)
@limiter.limit("30/minute")
async def start_interview(
    request: Request,
    config: InterviewConfig,
    service: InterviewFlowService = Depends(get_interview_service)
):
    """Start a new interview and return it once its questions are ready.

    Args:
        request (Request): FastAPI request object for rate limiting
        config (InterviewConfig): Interview configuration from the setup form
        service (InterviewFlowService): Flow service dependency

    Returns:
        SessionView: The active session with its first question

    Rate Limit:
        30 requests per minute per client
    """
    session = service.start_interview(config)
    session = await service.wait_until_ready(session.id)
    return SessionView.from_session(session)


@router.get("/{session_id}", response_model=SessionView)
async def get_interview(session_id: str, service: InterviewFlowService = Depends(get_interview_service)):
    return SessionView.from_session(service.get_session(session_id))


@router.post("/{session_id}/answer", response_model=SessionView)
async def answer_question(
    session_id: str,
    submission: AnswerSubmission,
    service: InterviewFlowService = Depends(get_interview_service)
):
    """Record the answer for the current question and move to the next one."""
    session = service.submit_answer(session_id, submission.answer)
    return SessionView.from_session(session)


@router.post("/{session_id}/skip", response_model=SessionView)
async def skip_question(session_id: str, service: InterviewFlowService = Depends(get_interview_service)):
    """Skip the current question. An empty answer is recorded."""
    session = service.skip_question(session_id)
    return SessionView.from_session(session)


@router.post("/{session_id}/exit", status_code=HTTP_204_NO_CONTENT)
async def exit_interview(session_id: str, service: InterviewFlowService = Depends(get_interview_service)):
    """Leave an unfinished interview. The session is discarded."""
    service.exit_interview(session_id)
    logger.info(f"Interview {session_id} exited by the user")
    return Response(status_code=HTTP_204_NO_CONTENT)


@router.get("/{session_id}/results", response_model=InterviewResults)
async def get_results(session_id: str, service: InterviewFlowService = Depends(get_interview_service)):
    """
    Get the analysis of a completed interview, waiting for it if it is still running.
    """
    session = await service.wait_for_results(session_id)
    analysis = session.analysis
    if analysis is None:
        logger.error(f"Interview {session_id} completed without an analysis")
        raise InternalServerError("The analysis for this interview is not available.")
    return InterviewResults(
        session_id=session.id,
        analysis=analysis,
        score_message=score_message(analysis.score),
        score_band=score_band(analysis.score),
        duration_minutes=session.duration_minutes,
        questions_answered=sum(1 for answer in session.answers if answer.strip()),
        total_questions=len(session.questions),
    )
