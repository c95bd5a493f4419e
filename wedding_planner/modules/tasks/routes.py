from fastapi import APIRouter, Depends
from wedding_planner.database.supabase_client import get_service_supabase
from wedding_planner.modules.tasks.schemas import (
    TaskCreate, TaskUpdate, TaskResponse, TaskProgressResponse, PhaseGroupResponse
)
from wedding_planner.modules.tasks.service import TaskService
from wedding_planner.core.dependencies import get_current_user_id, is_admin
from wedding_planner.core.notifications import ChangeNotifier, get_notifier
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_task_service(
    supabase: Client = Depends(get_service_supabase),
    notifier: ChangeNotifier = Depends(get_notifier)
) -> TaskService:
    return TaskService(supabase, notifier)


@router.get("", response_model=List[TaskResponse])
async def list_tasks(
    user_data: Dict = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service)
):
    """List the caller's checklist in creation order"""
    return service.list_tasks(user_data["id"])


@router.post("", response_model=TaskResponse, status_code=201)
async def create_task(
    task_data: TaskCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service)
):
    """Add a custom task to one of the checklist phases"""
    return service.create_task(task_data, user_data["id"])


@router.get("/progress", response_model=TaskProgressResponse)
async def get_progress(
    user_data: Dict = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service)
):
    """Completion percentage of the caller's checklist"""
    return service.get_progress(user_data["id"])


@router.get("/phases", response_model=List[PhaseGroupResponse])
async def get_phases(
    user_data: Dict = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service)
):
    """Checklist grouped into the six fixed phases"""
    return service.get_phases(user_data["id"])


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
    supabase: Client = Depends(get_service_supabase)
):
    """Owner or admin may read a single task"""
    return service.get_task(task_id, user_data, admin=is_admin(user_data, supabase))


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    task_data: TaskUpdate,
    user_data: Dict = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service)
):
    """Mark a task completed or not completed (owner only)"""
    return service.update_task(task_id, task_data, user_data)


@router.delete("/{task_id}", status_code=204)
async def delete_task(
    task_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service)
):
    """Delete a task (owner only)"""
    service.delete_task(task_id, user_data)
    return None
