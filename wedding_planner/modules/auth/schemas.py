from pydantic import BaseModel, EmailStr, Field
from typing import Optional, Literal
from datetime import date

from wedding_planner.modules.profiles.schemas import ProfileResponse


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str
    email: str


class SignupRequest(BaseModel):
    email: EmailStr
    password: str
    couple_names: str = Field(min_length=1)
    wedding_date: Optional[date] = None


class SignupResponse(BaseModel):
    user_id: str
    email: str
    message: str
    profile: ProfileResponse


class PasswordResetRequest(BaseModel):
    email: EmailStr


class SessionResponse(BaseModel):
    view: Literal["auth", "admin", "planner"]
    profile: Optional[ProfileResponse] = None
