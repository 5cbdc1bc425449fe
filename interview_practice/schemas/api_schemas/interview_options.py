from typing import List
from pydantic import BaseModel


class InterviewOptions(BaseModel):
    types: List[str]
    experience_levels: List[str]
    durations: List[int]
