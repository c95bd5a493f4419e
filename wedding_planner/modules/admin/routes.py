from fastapi import APIRouter, Depends
from wedding_planner.database.supabase_client import get_service_supabase
from wedding_planner.modules.admin.schemas import ClientProgressResponse, OverallStatsResponse
from wedding_planner.modules.admin.service import AdminService
from wedding_planner.modules.tasks.schemas import TaskResponse
from wedding_planner.modules.vendors.schemas import VendorResponse
from wedding_planner.modules.guests.schemas import GuestResponse
from wedding_planner.core.dependencies import require_admin
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/admin", tags=["admin"])


def get_admin_service(supabase: Client = Depends(get_service_supabase)) -> AdminService:
    return AdminService(supabase)


@router.get("/clients", response_model=List[ClientProgressResponse])
async def list_clients(
    user_data: Dict = Depends(require_admin),
    service: AdminService = Depends(get_admin_service)
):
    """All client profiles (newest first) with checklist progress"""
    return await service.list_clients()


@router.get("/stats", response_model=OverallStatsResponse)
async def get_stats(
    user_data: Dict = Depends(require_admin),
    service: AdminService = Depends(get_admin_service)
):
    """Total, active and completed clients plus average progress"""
    return await service.get_stats()


@router.get("/clients/{user_id}/progress", response_model=ClientProgressResponse)
async def get_client_progress(
    user_id: str,
    user_data: Dict = Depends(require_admin),
    service: AdminService = Depends(get_admin_service)
):
    return service.get_client_progress(user_id)


@router.get("/clients/{user_id}/tasks", response_model=List[TaskResponse])
async def list_client_tasks(
    user_id: str,
    user_data: Dict = Depends(require_admin),
    service: AdminService = Depends(get_admin_service)
):
    return service.list_client_tasks(user_id)


@router.get("/clients/{user_id}/vendors", response_model=List[VendorResponse])
async def list_client_vendors(
    user_id: str,
    user_data: Dict = Depends(require_admin),
    service: AdminService = Depends(get_admin_service)
):
    return service.list_client_vendors(user_id)


@router.get("/clients/{user_id}/guests", response_model=List[GuestResponse])
async def list_client_guests(
    user_id: str,
    user_data: Dict = Depends(require_admin),
    service: AdminService = Depends(get_admin_service)
):
    return service.list_client_guests(user_id)
