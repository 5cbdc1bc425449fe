from pydantic import BaseModel, Field


class HistorySummary(BaseModel):
    total_sessions: int = Field(default=0, ge=0)
    average_score: int = Field(default=0, ge=0, le=100)
    total_duration_minutes: int = Field(default=0, ge=0)
    best_score: int = Field(default=0, ge=0, le=100)
