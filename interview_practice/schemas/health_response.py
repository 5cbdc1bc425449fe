"""
Description:
Schema for the health check of the interview practice API.

Dependencies:
- pydantic: For data validation and settings management.
"""
from pydantic import BaseModel, Field

class HealthResponse(BaseModel):
    status: str = Field(..., description="'ok' while the service is able to run interviews")
    active_interview: bool = Field(default=False, description="Whether an interview is in progress")
    completed_interviews: int = Field(default=0, ge=0, description="Number of sessions in the history")
