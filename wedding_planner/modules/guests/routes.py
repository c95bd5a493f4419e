from fastapi import APIRouter, Depends
from wedding_planner.database.supabase_client import get_service_supabase
from wedding_planner.modules.guests.schemas import (
    GuestCreate, GuestUpdate, GuestResponse, RsvpSummaryResponse
)
from wedding_planner.modules.guests.service import GuestService
from wedding_planner.core.dependencies import get_current_user_id, is_admin
from wedding_planner.core.notifications import ChangeNotifier, get_notifier
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/guests", tags=["guests"])


def get_guest_service(
    supabase: Client = Depends(get_service_supabase),
    notifier: ChangeNotifier = Depends(get_notifier)
) -> GuestService:
    return GuestService(supabase, notifier)


@router.get("", response_model=List[GuestResponse])
async def list_guests(
    user_data: Dict = Depends(get_current_user_id),
    service: GuestService = Depends(get_guest_service)
):
    """List the caller's guests"""
    return service.list_guests(user_data["id"])


@router.post("", response_model=GuestResponse, status_code=201)
async def create_guest(
    guest_data: GuestCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: GuestService = Depends(get_guest_service)
):
    """Add a guest (first and last name are required)"""
    return service.create_guest(guest_data, user_data["id"])


@router.get("/rsvp-summary", response_model=RsvpSummaryResponse)
async def get_rsvp_summary(
    user_data: Dict = Depends(get_current_user_id),
    service: GuestService = Depends(get_guest_service)
):
    """Attending / declined / pending counts"""
    return service.get_rsvp_summary(user_data["id"])


@router.get("/{guest_id}", response_model=GuestResponse)
async def get_guest(
    guest_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: GuestService = Depends(get_guest_service),
    supabase: Client = Depends(get_service_supabase)
):
    """Owner or admin may read a single guest"""
    return service.get_guest(guest_id, user_data, admin=is_admin(user_data, supabase))


@router.put("/{guest_id}", response_model=GuestResponse)
async def update_guest(
    guest_id: str,
    guest_data: GuestUpdate,
    user_data: Dict = Depends(get_current_user_id),
    service: GuestService = Depends(get_guest_service)
):
    return service.update_guest(guest_id, guest_data, user_data)


@router.delete("/{guest_id}", status_code=204)
async def delete_guest(
    guest_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: GuestService = Depends(get_guest_service)
):
    service.delete_guest(guest_id, user_data)
    return None
