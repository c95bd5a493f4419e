from supabase import Client
from wedding_planner.modules.guests.schemas import (
    GuestCreate, GuestUpdate, GuestResponse, RsvpStatus, RsvpSummaryResponse
)
from wedding_planner.core.authorization import check_row_access
from wedding_planner.core.notifications import ChangeNotifier
from typing import Any, Iterable, List, Optional
from fastapi import HTTPException

# Columns that accept NULL; an explicit null on any other column is ignored
NULLABLE_FIELDS = {"table_number"}


def summarize_rsvps(guests: Iterable[Any]) -> RsvpSummaryResponse:
    """Count guests per RSVP status. Accepts raw rows or GuestResponse objects."""
    counts = {status.value: 0 for status in RsvpStatus}
    total = 0
    for guest in guests:
        status = guest.get("rsvp_status") if isinstance(guest, dict) else guest.rsvp_status
        total += 1
        if isinstance(status, RsvpStatus):
            status = status.value
        if status in counts:
            counts[status] += 1
    return RsvpSummaryResponse(
        total=total,
        attending=counts["attending"],
        declined=counts["declined"],
        pending=counts["pending"]
    )


class GuestService:
    def __init__(self, supabase: Client, notifier: Optional[ChangeNotifier] = None):
        self.supabase = supabase
        self.notifier = notifier

    def _notify(self, event: str, owner_id: str) -> None:
        if self.notifier:
            self.notifier.publish("guests", event, owner_id)

    def _get_row(self, guest_id: str) -> Optional[dict]:
        result = self.supabase.table("guests")\
            .select("*")\
            .eq("id", guest_id)\
            .maybe_single()\
            .execute()
        return result.data if result and result.data else None

    def list_guests(self, user_id: str) -> List[GuestResponse]:
        """All guests owned by user_id in creation order"""
        try:
            result = self.supabase.table("guests")\
                .select("*")\
                .eq("user_id", user_id)\
                .order("created_at")\
                .execute()
            return [GuestResponse(**guest) for guest in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_guest(self, guest_id: str, user_data: dict, admin: bool = False) -> GuestResponse:
        try:
            row = check_row_access(self._get_row(guest_id), user_data, admin=admin, resource="Guest")
            return GuestResponse(**row)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def create_guest(self, guest_data: GuestCreate, user_id: str) -> GuestResponse:
        """Create a guest owned by user_id"""
        try:
            result = self.supabase.table("guests").insert({
                "user_id": user_id,
                **guest_data.model_dump(mode="json")
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create guest")

            self._notify("INSERT", user_id)
            return GuestResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def update_guest(self, guest_id: str, guest_data: GuestUpdate, user_data: dict) -> GuestResponse:
        """Update guest fields, e.g. RSVP status or table number (owner only)"""
        try:
            row = check_row_access(self._get_row(guest_id), user_data, write=True, resource="Guest")

            update_data = {
                key: value
                for key, value in guest_data.model_dump(mode="json", exclude_unset=True).items()
                if value is not None or key in NULLABLE_FIELDS
            }
            if not update_data:
                return GuestResponse(**row)

            result = self.supabase.table("guests")\
                .update(update_data)\
                .eq("id", guest_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Guest not found")

            self._notify("UPDATE", user_data["id"])
            return GuestResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def delete_guest(self, guest_id: str, user_data: dict) -> bool:
        """Delete guest (owner only)"""
        try:
            check_row_access(self._get_row(guest_id), user_data, write=True, resource="Guest")

            result = self.supabase.table("guests")\
                .delete()\
                .eq("id", guest_id)\
                .execute()

            self._notify("DELETE", user_data["id"])
            return len(result.data or []) > 0
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_rsvp_summary(self, user_id: str) -> RsvpSummaryResponse:
        try:
            result = self.supabase.table("guests")\
                .select("rsvp_status")\
                .eq("user_id", user_id)\
                .execute()
            return summarize_rsvps(result.data or [])
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
