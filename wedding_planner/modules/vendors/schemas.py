from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class VendorCreate(BaseModel):
    name: str = Field(min_length=1)
    type: str = Field(min_length=1)
    email: str = ""
    phone: str = ""
    cost: str = ""
    notes: str = ""


class VendorUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    type: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    cost: Optional[str] = None
    notes: Optional[str] = None


class VendorResponse(BaseModel):
    id: str
    user_id: str
    name: str
    type: str
    email: str = ""
    phone: str = ""
    cost: str = ""
    notes: str = ""
    created_at: datetime

    class Config:
        from_attributes = True
