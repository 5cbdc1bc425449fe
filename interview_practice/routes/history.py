"""
Interview History Route

Description:
This module defines a FastAPI route listing the completed interviews of this process,
most recent first, together with their summary statistics.

Dependencies:
- fastapi: For API routing and dependency injection.
- interview_practice.services.interview_flow: For access to the session history.
"""
from fastapi import APIRouter, Depends
from interview_practice.core.dependencies import get_interview_service
from interview_practice.schemas.api_schemas import HistoryResponse, SessionView
from interview_practice.services.interview_flow.interview_flow_service import InterviewFlowService

router = APIRouter(
    prefix="/api",
    tags=["history"],
    responses={404: {"description": "Not found"}}
)


@router.get("/history", response_model=HistoryResponse)
async def get_history(service: InterviewFlowService = Depends(get_interview_service)):
    return HistoryResponse(
        summary=service.history_summary(),
        sessions=[SessionView.from_session(session) for session in service.list_history()],
    )
