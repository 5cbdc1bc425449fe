from typing import List
from pydantic import BaseModel, Field
from interview_practice.schemas.history_summary import HistorySummary
from interview_practice.schemas.api_schemas.session_view import SessionView


class HistoryResponse(BaseModel):
    summary: HistorySummary
    sessions: List[SessionView] = Field(default_factory=list, description="Completed sessions, most recent first")
