"""
Description:
Schema for the configuration of a mock interview, as submitted from the setup form.
A config is frozen once a session has been created from it.

Dependencies:
- pydantic: For data validation and settings management.
"""
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator


class InterviewType(str, Enum):
    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"
    LEADERSHIP = "leadership"
    GENERAL = "general"


class ExperienceLevel(str, Enum):
    UNSPECIFIED = ""
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"


class InterviewConfig(BaseModel):
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    type: InterviewType = Field(default=InterviewType.GENERAL, description="Kind of interview to practice")
    position: str = Field(..., description="Target position, e.g. 'Senior Software Engineer'")
    experience: ExperienceLevel = Field(default=ExperienceLevel.UNSPECIFIED, description="Candidate experience level")
    duration: int = Field(default=15, gt=0, description="Planned interview length in minutes")

    @field_validator("position")
    @classmethod
    def position_must_not_be_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("position must not be empty")
        return value

    @field_validator("experience", mode="before")
    @classmethod
    def normalize_experience(cls, value):
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip().lower()
        return value
