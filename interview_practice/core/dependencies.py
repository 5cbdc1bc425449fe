from fastapi import Request
from interview_practice.services.interview_flow.interview_flow_service import InterviewFlowService


def get_interview_service(request: Request) -> InterviewFlowService:
    """FastAPI dependency returning the flow service created in the app lifespan."""
    return request.app.state.interview_service
