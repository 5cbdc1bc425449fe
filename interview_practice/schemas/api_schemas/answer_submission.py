"""
Description:
Schema for an answer submitted for the current interview question.

Dependencies:
- pydantic: For data validation and settings management.
"""
from pydantic import BaseModel, Field

class AnswerSubmission(BaseModel):
    answer: str = Field(default="", max_length=10000, description="Free-text answer for the current question")
