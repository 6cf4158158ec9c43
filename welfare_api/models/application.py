"""
Pydantic models for benefit applications
"""
from datetime import datetime
from typing import Literal, Optional
from pydantic import Field

from .common import CamelModel, MongoDocument, get_current_utc_time

ApplicationStatus = Literal["Pending", "Approved", "Rejected"]


class ApplicationCreate(CamelModel):
    """Application for a scheme; status is always assigned by the server"""
    user_id: str = Field(..., min_length=1)
    scheme_id: str = Field(..., min_length=1)
    scheme_name: str = Field(..., min_length=1)
    notes: Optional[str] = None


class Application(MongoDocument):
    user_id: str
    scheme_id: str
    scheme_name: str
    notes: Optional[str] = None
    status: ApplicationStatus = "Pending"
    applied_at: datetime = Field(default_factory=get_current_utc_time)


class ApplicationResponse(CamelModel):
    message: str
    application: Application
