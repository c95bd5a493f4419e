from fastapi import APIRouter, Depends
from wedding_planner.database.supabase_client import get_service_supabase
from wedding_planner.modules.profiles.schemas import ProfileUpdate, ProfileResponse
from wedding_planner.modules.profiles.service import ProfileService
from wedding_planner.core.dependencies import get_current_user_id
from wedding_planner.core.notifications import ChangeNotifier, get_notifier
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/profiles", tags=["profiles"])


def get_profile_service(
    supabase: Client = Depends(get_service_supabase),
    notifier: ChangeNotifier = Depends(get_notifier)
) -> ProfileService:
    return ProfileService(supabase, notifier)


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    user_data: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Get the caller's profile"""
    return service.get_profile(user_data["id"])


@router.put("/me", response_model=ProfileResponse)
async def update_my_profile(
    profile_data: ProfileUpdate,
    user_data: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Update couple names or wedding date"""
    return service.update_profile(user_data["id"], profile_data)
