from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime


class ProfileUpdate(BaseModel):
    couple_names: Optional[str] = Field(default=None, min_length=1)
    wedding_date: Optional[date] = None


class ProfileResponse(BaseModel):
    id: str
    couple_names: str
    wedding_date: Optional[date] = None
    email: str
    is_admin: bool = False
    created_at: datetime

    class Config:
        from_attributes = True
