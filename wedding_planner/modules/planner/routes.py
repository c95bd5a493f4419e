from fastapi import APIRouter, Depends
from wedding_planner.database.supabase_client import get_service_supabase
from wedding_planner.modules.planner.schemas import PlannerOverviewResponse
from wedding_planner.modules.planner.service import PlannerService
from wedding_planner.core.dependencies import get_current_user_id
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/planner", tags=["planner"])


def get_planner_service(supabase: Client = Depends(get_service_supabase)) -> PlannerService:
    return PlannerService(supabase)


@router.get("/overview", response_model=PlannerOverviewResponse)
async def get_overview(
    user_data: Dict = Depends(get_current_user_id),
    service: PlannerService = Depends(get_planner_service)
):
    """Everything the planner screen renders, loaded in one round trip"""
    return await service.get_overview(user_data["id"])
