from pydantic import BaseModel

from wedding_planner.modules.profiles.schemas import ProfileResponse
from wedding_planner.modules.tasks.schemas import TaskProgressResponse


class ClientProgressResponse(BaseModel):
    profile: ProfileResponse
    progress: TaskProgressResponse
    status: str  # completed, in_progress, not_started


class OverallStatsResponse(BaseModel):
    total_clients: int
    active_clients: int
    average_progress: int
    completed_clients: int
