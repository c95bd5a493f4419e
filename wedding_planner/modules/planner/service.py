import asyncio
import logging
from fastapi import HTTPException
from fastapi.concurrency import run_in_threadpool
from supabase import Client

from wedding_planner.modules.planner.schemas import PlannerOverviewResponse
from wedding_planner.modules.profiles.service import ProfileService
from wedding_planner.modules.tasks.schemas import TaskProgressResponse
from wedding_planner.modules.tasks.service import TaskService, build_phase_groups
from wedding_planner.modules.tasks.progress import compute_progress, progress_tier
from wedding_planner.modules.vendors.service import VendorService
from wedding_planner.modules.guests.service import GuestService, summarize_rsvps

logger = logging.getLogger(__name__)


class PlannerService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.profiles = ProfileService(supabase)
        self.tasks = TaskService(supabase)
        self.vendors = VendorService(supabase)
        self.guests = GuestService(supabase)

    async def get_overview(self, user_id: str) -> PlannerOverviewResponse:
        """Fetch profile, tasks, vendors and guests concurrently; all four must succeed."""
        try:
            profile, tasks, vendors, guests = await asyncio.gather(
                run_in_threadpool(self.profiles.get_profile, user_id),
                run_in_threadpool(self.tasks.list_tasks, user_id),
                run_in_threadpool(self.vendors.list_vendors, user_id),
                run_in_threadpool(self.guests.list_guests, user_id),
            )
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error loading planner for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))

        progress = compute_progress(tasks)
        return PlannerOverviewResponse(
            profile=profile,
            tasks=tasks,
            vendors=vendors,
            guests=guests,
            progress=TaskProgressResponse(
                total=progress.total,
                completed=progress.completed,
                percentage=progress.percentage,
                tier=progress_tier(progress.percentage).value
            ),
            phases=build_phase_groups(tasks),
            rsvp=summarize_rsvps(guests),
        )
