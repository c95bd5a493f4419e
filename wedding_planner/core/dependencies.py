"""
Core dependencies for route protection and admin gating
"""

from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from wedding_planner.database.supabase_client import get_supabase, get_service_supabase
from wedding_planner.modules.auth.service import AuthService
from supabase import Client
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer()
optional_security = HTTPBearer(auto_error=False)


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials = Security(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> dict:
    """Extract current user info from JWT token"""
    token = credentials.credentials
    user_data = auth_service.get_current_user(token)
    return user_data


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(optional_security),
    auth_service: AuthService = Depends(get_auth_service)
) -> Optional[dict]:
    """Like get_current_user_id, but returns None for a missing or rejected token"""
    if credentials is None:
        return None
    try:
        return auth_service.get_current_user(credentials.credentials)
    except HTTPException:
        return None


def _get_request_cache(request: Request) -> Dict[str, Any]:
    """Return request-scoped cache for the caller's profile."""
    if not hasattr(request.state, "access_cache"):
        request.state.access_cache = {}
    return request.state.access_cache


def get_profile_row(user_id: str, supabase: Client, cache: Optional[Dict[str, Any]] = None) -> Optional[dict]:
    """Return the profiles row for user_id, or None. Uses request-scoped cache when provided."""
    if cache is not None and "profile" in cache:
        return cache["profile"]
    try:
        result = supabase.table("profiles")\
            .select("*")\
            .eq("id", user_id)\
            .maybe_single()\
            .execute()
        profile = result.data if result and result.data else None
    except Exception as e:
        logger.error(f"Error loading profile {user_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    if cache is not None:
        cache["profile"] = profile
    return profile


def is_admin(user_data: dict, supabase: Client, cache: Optional[Dict[str, Any]] = None) -> bool:
    """Check the is_admin flag on the caller's profile. The flag is only set by backend operators."""
    profile = get_profile_row(user_data["id"], supabase, cache)
    return bool(profile and profile.get("is_admin"))


def require_admin(
    request: Request,
    user_data: dict = Depends(get_current_user_id),
    supabase: Client = Depends(get_service_supabase)
) -> dict:
    """Dependency that only lets admin-flagged identities through"""
    if not is_admin(user_data, supabase, _get_request_cache(request)):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required"
        )
    return user_data
