from fastapi import APIRouter, Depends
from wedding_planner.database.supabase_client import get_service_supabase
from wedding_planner.modules.vendors.schemas import VendorCreate, VendorUpdate, VendorResponse
from wedding_planner.modules.vendors.service import VendorService
from wedding_planner.core.dependencies import get_current_user_id, is_admin
from wedding_planner.core.notifications import ChangeNotifier, get_notifier
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/vendors", tags=["vendors"])


def get_vendor_service(
    supabase: Client = Depends(get_service_supabase),
    notifier: ChangeNotifier = Depends(get_notifier)
) -> VendorService:
    return VendorService(supabase, notifier)


@router.get("", response_model=List[VendorResponse])
async def list_vendors(
    user_data: Dict = Depends(get_current_user_id),
    service: VendorService = Depends(get_vendor_service)
):
    """List the caller's vendors"""
    return service.list_vendors(user_data["id"])


@router.post("", response_model=VendorResponse, status_code=201)
async def create_vendor(
    vendor_data: VendorCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: VendorService = Depends(get_vendor_service)
):
    """Add a vendor (name and type are required)"""
    return service.create_vendor(vendor_data, user_data["id"])


@router.get("/{vendor_id}", response_model=VendorResponse)
async def get_vendor(
    vendor_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: VendorService = Depends(get_vendor_service),
    supabase: Client = Depends(get_service_supabase)
):
    """Owner or admin may read a single vendor"""
    return service.get_vendor(vendor_id, user_data, admin=is_admin(user_data, supabase))


@router.put("/{vendor_id}", response_model=VendorResponse)
async def update_vendor(
    vendor_id: str,
    vendor_data: VendorUpdate,
    user_data: Dict = Depends(get_current_user_id),
    service: VendorService = Depends(get_vendor_service)
):
    return service.update_vendor(vendor_id, vendor_data, user_data)


@router.delete("/{vendor_id}", status_code=204)
async def delete_vendor(
    vendor_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: VendorService = Depends(get_vendor_service)
):
    service.delete_vendor(vendor_id, user_data)
    return None
