"""
Description:
Schema for the results screen of a completed interview.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For type annotations.
"""
from typing import Optional
from pydantic import BaseModel, Field
from interview_practice.schemas.analysis_result import AnalysisResult


class InterviewResults(BaseModel):
    session_id: str
    analysis: AnalysisResult
    score_message: str = Field(..., description="Encouraging message matching the score")
    score_band: str = Field(..., description="One of 'strong', 'fair' or 'weak'")
    duration_minutes: Optional[int] = None
    questions_answered: int = Field(default=0, ge=0)
    total_questions: int = Field(default=0, ge=0)
