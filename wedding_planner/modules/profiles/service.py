from supabase import Client
from wedding_planner.modules.profiles.schemas import ProfileUpdate, ProfileResponse
from wedding_planner.modules.tasks.service import TaskService
from wedding_planner.core.notifications import ChangeNotifier
from wedding_planner.config.settings import settings
from typing import List, Optional
from datetime import date
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, supabase: Client, notifier: Optional[ChangeNotifier] = None):
        self.supabase = supabase
        self.notifier = notifier

    def create_profile(
        self,
        user_id: str,
        email: str,
        couple_names: str,
        wedding_date: Optional[date] = None
    ) -> ProfileResponse:
        """Insert the profile for a freshly registered identity, then run the profile-created hook"""
        try:
            result = self.supabase.table("profiles").insert({
                "id": user_id,
                "couple_names": couple_names,
                "wedding_date": wedding_date.isoformat() if wedding_date else None,
                "email": email,
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create profile")

            profile = ProfileResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

        self.on_profile_created(profile)
        return profile

    def on_profile_created(self, profile: ProfileResponse) -> None:
        """Seed the default checklist. Runs once per profile, right after insertion."""
        if not settings.seed_default_tasks:
            logger.info(f"Default task seeding disabled; skipping profile {profile.id}")
            return
        try:
            TaskService(self.supabase, self.notifier).seed_default_tasks(profile.id)
        except HTTPException as e:
            # Undo the profile insert
            logger.error(f"Seeding failed for profile {profile.id}, removing profile: {e.detail}")
            self.supabase.table("profiles").delete().eq("id", profile.id).execute()
            raise
        if self.notifier:
            self.notifier.publish("profiles", "INSERT", profile.id)

    def ensure_profile(self, user_data: dict) -> ProfileResponse:
        """Return the caller's profile, recreating it (and its checklist) from the
        signup metadata when an identity has been left without one"""
        try:
            return self.get_profile(user_data["id"])
        except HTTPException as e:
            if e.status_code != 404:
                raise

        metadata = user_data.get("user_metadata") or {}
        wedding_date = metadata.get("wedding_date")
        logger.warning(f"Identity {user_data['id']} has no profile; recreating it")
        return self.create_profile(
            user_id=user_data["id"],
            email=user_data["email"],
            couple_names=metadata.get("couple_names") or user_data["email"],
            wedding_date=date.fromisoformat(wedding_date) if wedding_date else None
        )

    def get_profile(self, user_id: str) -> ProfileResponse:
        """Get profile by identity id"""
        try:
            result = self.supabase.table("profiles")\
                .select("*")\
                .eq("id", user_id)\
                .maybe_single()\
                .execute()

            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Profile not found")

            return ProfileResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def update_profile(self, user_id: str, profile_data: ProfileUpdate) -> ProfileResponse:
        """Update couple names / wedding date. is_admin is never written from here."""
        try:
            update_data = {}
            if profile_data.couple_names is not None:
                update_data["couple_names"] = profile_data.couple_names
            if "wedding_date" in profile_data.model_fields_set:
                update_data["wedding_date"] = profile_data.wedding_date.isoformat() if profile_data.wedding_date else None

            if not update_data:
                return self.get_profile(user_id)

            result = self.supabase.table("profiles")\
                .update(update_data)\
                .eq("id", user_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Profile not found")

            if self.notifier:
                self.notifier.publish("profiles", "UPDATE", user_id)
            return ProfileResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def list_profiles(self) -> List[ProfileResponse]:
        """All profiles, newest first (admin dashboard)"""
        try:
            result = self.supabase.table("profiles")\
                .select("*")\
                .order("created_at", desc=True)\
                .execute()
            return [ProfileResponse(**profile) for profile in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
