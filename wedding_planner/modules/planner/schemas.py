from pydantic import BaseModel
from typing import List

from wedding_planner.modules.profiles.schemas import ProfileResponse
from wedding_planner.modules.tasks.schemas import TaskResponse, TaskProgressResponse, PhaseGroupResponse
from wedding_planner.modules.vendors.schemas import VendorResponse
from wedding_planner.modules.guests.schemas import GuestResponse, RsvpSummaryResponse


class PlannerOverviewResponse(BaseModel):
    profile: ProfileResponse
    tasks: List[TaskResponse]
    vendors: List[VendorResponse]
    guests: List[GuestResponse]
    progress: TaskProgressResponse
    phases: List[PhaseGroupResponse]
    rsvp: RsvpSummaryResponse
