from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum


class RsvpStatus(str, Enum):
    PENDING = "pending"
    ATTENDING = "attending"
    DECLINED = "declined"


class GuestCreate(BaseModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str = ""
    phone: str = ""
    group_name: str = ""
    rsvp_status: RsvpStatus = RsvpStatus.PENDING
    plus_one: str = ""
    table_number: Optional[int] = None
    dietary_restrictions: str = ""


class GuestUpdate(BaseModel):
    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    group_name: Optional[str] = None
    rsvp_status: Optional[RsvpStatus] = None
    plus_one: Optional[str] = None
    table_number: Optional[int] = None
    dietary_restrictions: Optional[str] = None


class GuestResponse(BaseModel):
    id: str
    user_id: str
    first_name: str
    last_name: str
    email: str = ""
    phone: str = ""
    group_name: str = ""
    rsvp_status: RsvpStatus = RsvpStatus.PENDING
    plus_one: str = ""
    table_number: Optional[int] = None
    dietary_restrictions: str = ""
    created_at: datetime

    class Config:
        from_attributes = True


class RsvpSummaryResponse(BaseModel):
    total: int
    attending: int
    declined: int
    pending: int
