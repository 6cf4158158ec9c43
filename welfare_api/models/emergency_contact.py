"""
Pydantic models for emergency contacts
"""
from datetime import datetime
from typing import Optional
from pydantic import Field

from .common import CamelModel, MongoDocument, get_current_utc_time


class EmergencyContactCreate(CamelModel):
    user_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    relationship: str = Field(..., min_length=1)


class EmergencyContactUpdate(CamelModel):
    """Partial update; omitted fields keep their stored value"""
    name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = Field(None, min_length=1)
    relationship: Optional[str] = Field(None, min_length=1)


class EmergencyContact(MongoDocument):
    user_id: str
    name: str
    phone: str
    relationship: str
    created_at: datetime = Field(default_factory=get_current_utc_time)


class EmergencyContactResponse(CamelModel):
    message: str
    contact: EmergencyContact
