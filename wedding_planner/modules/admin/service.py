import asyncio
import logging
from fastapi import HTTPException
from fastapi.concurrency import run_in_threadpool
from supabase import Client
from typing import Iterable, List

from wedding_planner.modules.admin.schemas import ClientProgressResponse, OverallStatsResponse
from wedding_planner.modules.profiles.service import ProfileService
from wedding_planner.modules.tasks.schemas import TaskResponse
from wedding_planner.modules.tasks.service import TaskService
from wedding_planner.modules.tasks.progress import client_status, round_half_up
from wedding_planner.modules.vendors.schemas import VendorResponse
from wedding_planner.modules.vendors.service import VendorService
from wedding_planner.modules.guests.schemas import GuestResponse
from wedding_planner.modules.guests.service import GuestService

logger = logging.getLogger(__name__)


def compute_overall_stats(percentages: Iterable[int]) -> OverallStatsResponse:
    """Dashboard header numbers from each client's progress percentage"""
    values = list(percentages)
    return OverallStatsResponse(
        total_clients=len(values),
        active_clients=sum(1 for p in values if p > 0),
        average_progress=round_half_up(sum(values), len(values)),
        completed_clients=sum(1 for p in values if p == 100),
    )


class AdminService:
    """Read-only views over every client's data. Callers must pass require_admin first."""

    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.profiles = ProfileService(supabase)
        self.tasks = TaskService(supabase)
        self.vendors = VendorService(supabase)
        self.guests = GuestService(supabase)

    async def list_clients(self) -> List[ClientProgressResponse]:
        """All profiles, newest first, each with its checklist progress"""
        profiles = await run_in_threadpool(self.profiles.list_profiles)
        try:
            progresses = await asyncio.gather(*[
                run_in_threadpool(self.tasks.get_progress, profile.id) for profile in profiles
            ])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error loading client progress: {e}")
            raise HTTPException(status_code=500, detail=str(e))

        return [
            ClientProgressResponse(
                profile=profile,
                progress=progress,
                status=client_status(progress.percentage).value
            )
            for profile, progress in zip(profiles, progresses)
        ]

    async def get_stats(self) -> OverallStatsResponse:
        clients = await self.list_clients()
        return compute_overall_stats(c.progress.percentage for c in clients)

    def get_client_progress(self, user_id: str) -> ClientProgressResponse:
        profile = self.profiles.get_profile(user_id)
        progress = self.tasks.get_progress(user_id)
        return ClientProgressResponse(
            profile=profile,
            progress=progress,
            status=client_status(progress.percentage).value
        )

    def list_client_tasks(self, user_id: str) -> List[TaskResponse]:
        self.profiles.get_profile(user_id)
        return self.tasks.list_tasks(user_id)

    def list_client_vendors(self, user_id: str) -> List[VendorResponse]:
        self.profiles.get_profile(user_id)
        return self.vendors.list_vendors(user_id)

    def list_client_guests(self, user_id: str) -> List[GuestResponse]:
        self.profiles.get_profile(user_id)
        return self.guests.list_guests(user_id)
