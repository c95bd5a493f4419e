import hashlib
import time
import logging
from supabase import Client
from wedding_planner.modules.auth.schemas import LoginRequest, SignupRequest, TokenResponse
from wedding_planner.config.settings import settings
from fastapi import HTTPException
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

# In-memory cache for get_current_user to reduce Supabase auth calls (e.g. the planner's parallel requests with one token)
_AUTH_USER_CACHE: Dict[str, tuple] = {}
_AUTH_CACHE_TTL_SEC = 60
_AUTH_CACHE_MAX_SIZE = 500


def clear_auth_cache() -> None:
    _AUTH_USER_CACHE.clear()


def resolve_view(profile: Optional[dict], authenticated: bool = True) -> str:
    """Pick the screen for a caller: auth form, admin dashboard or planner.
    An identity without a profile is sent back to the auth form."""
    if not authenticated or not profile:
        return "auth"
    if profile.get("is_admin"):
        return "admin"
    return "planner"


class AuthService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def register(self, signup_data: SignupRequest) -> Dict[str, Any]:
        """Create the Supabase Auth identity. The profile row is inserted by ProfileService."""
        try:
            auth_response = self.supabase.auth.sign_up({
                "email": signup_data.email,
                "password": signup_data.password,
                "options": {
                    "data": {
                        "couple_names": signup_data.couple_names,
                        "wedding_date": signup_data.wedding_date.isoformat() if signup_data.wedding_date else None,
                    }
                }
            })

            if not auth_response.user:
                raise HTTPException(status_code=400, detail="Failed to register user")

            logger.info(f"Registered identity {auth_response.user.id}")
            return {
                "id": auth_response.user.id,
                "email": auth_response.user.email or signup_data.email,
            }
        except HTTPException:
            raise
        except Exception as e:
            error_message = str(e)
            if "already registered" in error_message.lower() or "already exists" in error_message.lower():
                raise HTTPException(status_code=400, detail="User already exists")
            raise HTTPException(status_code=500, detail=f"Registration failed: {error_message}")

    def delete_identity(self, user_id: str) -> bool:
        """Remove a Supabase Auth identity. Needs a service-role client.
        Returns False when the delete fails so callers can keep their original error."""
        try:
            self.supabase.auth.admin.delete_user(user_id)
            logger.info(f"Deleted identity {user_id}")
            return True
        except Exception as e:
            logger.error(f"Failed to delete identity {user_id}: {e}")
            return False

    def login(self, login_data: LoginRequest) -> TokenResponse:
        """Authenticate user using Supabase Auth"""
        try:
            auth_response = self.supabase.auth.sign_in_with_password({
                "email": login_data.email,
                "password": login_data.password
            })

            if not auth_response.user or not auth_response.session:
                raise HTTPException(status_code=401, detail="Invalid credentials")

            return TokenResponse(
                access_token=auth_response.session.access_token,
                token_type="bearer",
                user_id=auth_response.user.id,
                email=auth_response.user.email or login_data.email
            )
        except HTTPException:
            raise
        except Exception as e:
            error_message = str(e)
            if "invalid" in error_message.lower() or "credentials" in error_message.lower():
                raise HTTPException(status_code=401, detail="Invalid email or password")
            raise HTTPException(status_code=500, detail=f"Login failed: {error_message}")

    def get_current_user(self, token: str) -> Dict[str, Any]:
        """Get current user details from Supabase Auth token. Uses short TTL cache to reduce auth API calls."""
        try:
            cache_key = hashlib.sha256(token.encode()).hexdigest()
            now = time.monotonic()
            if cache_key in _AUTH_USER_CACHE:
                user_data, expiry = _AUTH_USER_CACHE[cache_key]
                if now < expiry:
                    return user_data
                del _AUTH_USER_CACHE[cache_key]
            user_response = self.supabase.auth.get_user(jwt=token)
            if not user_response or not user_response.user:
                raise HTTPException(status_code=401, detail="Invalid or expired token")
            user = user_response.user
            user_data = {
                "id": user.id,
                "email": user.email,
                "user_metadata": user.user_metadata or {},
                "created_at": user.created_at,
            }
            if len(_AUTH_USER_CACHE) < _AUTH_CACHE_MAX_SIZE:
                _AUTH_USER_CACHE[cache_key] = (user_data, now + _AUTH_CACHE_TTL_SEC)
            return user_data
        except HTTPException:
            raise
        except Exception as e:
            error_msg = str(e)
            if "JWT" in error_msg or "expired" in error_msg.lower() or "invalid" in error_msg.lower():
                raise HTTPException(status_code=401, detail="Invalid or expired token")
            raise HTTPException(status_code=401, detail="Authentication failed")

    def logout(self, token: str) -> bool:
        """Logout user using Supabase Auth and drop the cached identity for the token"""
        _AUTH_USER_CACHE.pop(hashlib.sha256(token.encode()).hexdigest(), None)
        try:
            self.supabase.auth.sign_out()
            return True
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"Logout failed: {str(e)}")

    def reset_password(self, email: str) -> bool:
        """Ask Supabase Auth to email a password reset link"""
        try:
            options = {}
            if settings.password_reset_redirect_url:
                options["redirect_to"] = settings.password_reset_redirect_url
            self.supabase.auth.reset_password_for_email(email, options)
            logger.info("Password reset requested")
            return True
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"Password reset failed: {str(e)}")
