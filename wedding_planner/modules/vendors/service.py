from supabase import Client
from wedding_planner.modules.vendors.schemas import VendorCreate, VendorUpdate, VendorResponse
from wedding_planner.core.authorization import check_row_access
from wedding_planner.core.notifications import ChangeNotifier
from typing import List, Optional
from fastapi import HTTPException


class VendorService:
    def __init__(self, supabase: Client, notifier: Optional[ChangeNotifier] = None):
        self.supabase = supabase
        self.notifier = notifier

    def _notify(self, event: str, owner_id: str) -> None:
        if self.notifier:
            self.notifier.publish("vendors", event, owner_id)

    def _get_row(self, vendor_id: str) -> Optional[dict]:
        result = self.supabase.table("vendors")\
            .select("*")\
            .eq("id", vendor_id)\
            .maybe_single()\
            .execute()
        return result.data if result and result.data else None

    def list_vendors(self, user_id: str) -> List[VendorResponse]:
        """All vendors owned by user_id in creation order"""
        try:
            result = self.supabase.table("vendors")\
                .select("*")\
                .eq("user_id", user_id)\
                .order("created_at")\
                .execute()
            return [VendorResponse(**vendor) for vendor in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_vendor(self, vendor_id: str, user_data: dict, admin: bool = False) -> VendorResponse:
        try:
            row = check_row_access(self._get_row(vendor_id), user_data, admin=admin, resource="Vendor")
            return VendorResponse(**row)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def create_vendor(self, vendor_data: VendorCreate, user_id: str) -> VendorResponse:
        """Create a vendor owned by user_id"""
        try:
            result = self.supabase.table("vendors").insert({
                "user_id": user_id,
                **vendor_data.model_dump()
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create vendor")

            self._notify("INSERT", user_id)
            return VendorResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def update_vendor(self, vendor_id: str, vendor_data: VendorUpdate, user_data: dict) -> VendorResponse:
        """Update vendor fields (owner only)"""
        try:
            row = check_row_access(self._get_row(vendor_id), user_data, write=True, resource="Vendor")

            update_data = vendor_data.model_dump(exclude_unset=True, exclude_none=True)
            if not update_data:
                return VendorResponse(**row)

            result = self.supabase.table("vendors")\
                .update(update_data)\
                .eq("id", vendor_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Vendor not found")

            self._notify("UPDATE", user_data["id"])
            return VendorResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def delete_vendor(self, vendor_id: str, user_data: dict) -> bool:
        """Delete vendor (owner only)"""
        try:
            check_row_access(self._get_row(vendor_id), user_data, write=True, resource="Vendor")

            result = self.supabase.table("vendors")\
                .delete()\
                .eq("id", vendor_id)\
                .execute()

            self._notify("DELETE", user_data["id"])
            return len(result.data or []) > 0
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
