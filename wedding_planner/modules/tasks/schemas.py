from pydantic import BaseModel, Field, field_validator
from typing import List
from datetime import datetime

from wedding_planner.config.checklist_config import PHASES


class TaskCreate(BaseModel):
    task_name: str = Field(min_length=1)
    phase: str

    @field_validator("phase")
    @classmethod
    def phase_must_be_known(cls, value: str) -> str:
        if value not in PHASES:
            raise ValueError(f"phase must be one of: {', '.join(PHASES)}")
        return value


class TaskUpdate(BaseModel):
    completed: bool


class TaskResponse(BaseModel):
    id: str
    user_id: str
    task_name: str
    phase: str
    completed: bool = False
    created_at: datetime

    class Config:
        from_attributes = True


class TaskProgressResponse(BaseModel):
    total: int
    completed: int
    percentage: int
    tier: str


class PhaseGroupResponse(BaseModel):
    phase: str
    tasks: List[TaskResponse]
    completed: int
    total: int
