"""
Description:
This module defines the schema for the post-interview analysis.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For type annotations.
"""
from pydantic import BaseModel, Field
from typing import List


class AnalysisResult(BaseModel):
    score: int = Field(ge=0, le=100, description="Overall interview score between 0 and 100")
    feedback: List[str] = Field(default_factory=list, description="One feedback entry per question, in question order")
    suggestions: List[str] = Field(default_factory=list, max_length=5, description="Improvement suggestions, most important first")
