from supabase import Client
from wedding_planner.modules.tasks.schemas import (
    TaskCreate, TaskUpdate, TaskResponse, TaskProgressResponse, PhaseGroupResponse
)
from wedding_planner.modules.tasks.progress import compute_progress, progress_tier, group_tasks_by_phase
from wedding_planner.config.checklist_config import build_default_task_rows
from wedding_planner.core.authorization import check_row_access
from wedding_planner.core.notifications import ChangeNotifier
from typing import List, Optional
from fastapi import HTTPException
import logging
from datetime import datetime, timezone

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, supabase: Client, notifier: Optional[ChangeNotifier] = None):
        self.supabase = supabase
        self.notifier = notifier

    def _notify(self, event: str, owner_id: str) -> None:
        if self.notifier:
            self.notifier.publish("tasks", event, owner_id)

    def _get_row(self, task_id: str) -> Optional[dict]:
        result = self.supabase.table("tasks")\
            .select("*")\
            .eq("id", task_id)\
            .maybe_single()\
            .execute()
        return result.data if result and result.data else None

    def list_tasks(self, user_id: str) -> List[TaskResponse]:
        """All tasks owned by user_id in creation order"""
        try:
            result = self.supabase.table("tasks")\
                .select("*")\
                .eq("user_id", user_id)\
                .order("created_at")\
                .execute()
            return [TaskResponse(**task) for task in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_task(self, task_id: str, user_data: dict, admin: bool = False) -> TaskResponse:
        try:
            row = check_row_access(self._get_row(task_id), user_data, admin=admin, resource="Task")
            return TaskResponse(**row)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def create_task(self, task_data: TaskCreate, user_id: str) -> TaskResponse:
        """Add a custom task to the caller's checklist"""
        try:
            result = self.supabase.table("tasks").insert({
                "user_id": user_id,
                "task_name": task_data.task_name,
                "phase": task_data.phase,
                "completed": False,
                # Same clock as build_default_task_rows
                "created_at": datetime.now(timezone.utc).isoformat(),
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create task")

            self._notify("INSERT", user_id)
            return TaskResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def update_task(self, task_id: str, task_data: TaskUpdate, user_data: dict) -> TaskResponse:
        """Toggle the completed flag; only the owner may write"""
        try:
            check_row_access(self._get_row(task_id), user_data, write=True, resource="Task")

            result = self.supabase.table("tasks")\
                .update({"completed": task_data.completed})\
                .eq("id", task_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Task not found")

            self._notify("UPDATE", user_data["id"])
            return TaskResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def delete_task(self, task_id: str, user_data: dict) -> bool:
        try:
            check_row_access(self._get_row(task_id), user_data, write=True, resource="Task")

            result = self.supabase.table("tasks")\
                .delete()\
                .eq("id", task_id)\
                .execute()

            self._notify("DELETE", user_data["id"])
            return len(result.data or []) > 0
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def seed_default_tasks(self, user_id: str) -> List[TaskResponse]:
        """Insert the default checklist for a new profile in one bulk insert"""
        rows = build_default_task_rows(user_id)
        try:
            result = self.supabase.table("tasks").insert(rows).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to seed default tasks")
            logger.info(f"Seeded {len(result.data)} default tasks for profile {user_id}")
            self._notify("INSERT", user_id)
            return [TaskResponse(**task) for task in result.data]
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error seeding default tasks for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def has_tasks(self, user_id: str) -> bool:
        try:
            result = self.supabase.table("tasks")\
                .select("id")\
                .eq("user_id", user_id)\
                .limit(1)\
                .execute()
            return bool(result.data)
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_progress(self, user_id: str) -> TaskProgressResponse:
        """Progress summary for one profile (total / completed / percentage)"""
        try:
            result = self.supabase.table("tasks")\
                .select("completed")\
                .eq("user_id", user_id)\
                .execute()
            progress = compute_progress(result.data or [])
            return TaskProgressResponse(
                total=progress.total,
                completed=progress.completed,
                percentage=progress.percentage,
                tier=progress_tier(progress.percentage).value
            )
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_phases(self, user_id: str) -> List[PhaseGroupResponse]:
        return build_phase_groups(self.list_tasks(user_id))


def build_phase_groups(tasks: List[TaskResponse]) -> List[PhaseGroupResponse]:
    return [
        PhaseGroupResponse(phase=g.phase, tasks=g.tasks, completed=g.completed, total=g.total)
        for g in group_tasks_by_phase(tasks)
    ]
