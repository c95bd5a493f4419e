from fastapi import APIRouter, Depends, HTTPException, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from wedding_planner.database.supabase_client import get_service_supabase
from wedding_planner.modules.auth.schemas import (
    LoginRequest, SignupRequest, TokenResponse, SignupResponse,
    PasswordResetRequest, SessionResponse
)
from wedding_planner.modules.auth.service import AuthService, resolve_view
from wedding_planner.modules.profiles.service import ProfileService
from wedding_planner.core.dependencies import (
    get_auth_service, get_current_user_id, get_optional_user, get_profile_row
)
from wedding_planner.core.notifications import ChangeNotifier, get_notifier
from supabase import Client
from typing import Dict, Optional

router = APIRouter(prefix="/auth", tags=["auth"])

# Security scheme for JWT Bearer token
security = HTTPBearer()


def get_profile_service(
    supabase: Client = Depends(get_service_supabase),
    notifier: ChangeNotifier = Depends(get_notifier)
) -> ProfileService:
    return ProfileService(supabase, notifier)


def get_current_token(
    credentials: HTTPAuthorizationCredentials = Security(security)
) -> str:
    """Extract JWT token from Authorization header"""
    return credentials.credentials


@router.post("/signup", response_model=SignupResponse, status_code=201)
async def signup(
    signup_data: SignupRequest,
    service: AuthService = Depends(get_auth_service),
    profile_service: ProfileService = Depends(get_profile_service),
    supabase: Client = Depends(get_service_supabase)
):
    """Register a couple: creates the identity, the profile and the default checklist.
    If the profile or its checklist cannot be created the identity is deleted again."""
    user = service.register(signup_data)
    try:
        profile = profile_service.create_profile(
            user_id=user["id"],
            email=user["email"],
            couple_names=signup_data.couple_names,
            wedding_date=signup_data.wedding_date
        )
    except HTTPException:
        AuthService(supabase).delete_identity(user["id"])
        raise
    return SignupResponse(
        user_id=user["id"],
        email=user["email"],
        message="User registered successfully",
        profile=profile
    )


@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
    profile_service: ProfileService = Depends(get_profile_service)
):
    """Login and get access token. Recreates the profile if the identity has none."""
    token = service.login(login_data)
    profile_service.ensure_profile(service.get_current_user(token.access_token))
    return token


@router.post("/logout", status_code=200)
async def logout(
    token: str = Depends(get_current_token),
    service: AuthService = Depends(get_auth_service)
):
    """Logout and invalidate token"""
    service.logout(token)
    return {"message": "Logged out successfully"}


@router.post("/password-reset", status_code=200)
async def password_reset(
    reset_data: PasswordResetRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Send a password reset email"""
    service.reset_password(reset_data.email)
    return {"message": "Password reset email sent"}


@router.get("/me")
async def get_current_user(
    current_user: Dict = Depends(get_current_user_id)
):
    """Get current authenticated identity"""
    return current_user


@router.get("/session", response_model=SessionResponse)
async def get_session(
    current_user: Optional[Dict] = Depends(get_optional_user),
    supabase: Client = Depends(get_service_supabase)
):
    """Which screen the client should show: auth form, admin dashboard or planner"""
    if current_user is None:
        return SessionResponse(view=resolve_view(None, authenticated=False))
    profile = get_profile_row(current_user["id"], supabase)
    return SessionResponse(view=resolve_view(profile), profile=profile)
