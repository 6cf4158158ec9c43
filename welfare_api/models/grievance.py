"""
Pydantic models for grievances
"""
from datetime import datetime
from typing import Any, Literal, Optional
from pydantic import Field

from .common import CamelModel, MongoDocument, get_current_utc_time

GrievancePriority = Literal["low", "medium", "high", "critical"]
GrievanceStatus = Literal["Open", "In Progress", "Resolved", "Rejected"]


class GrievanceCreate(CamelModel):
    """A newly filed grievance always starts Open"""
    user_id: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1)
    details: str = Field(..., min_length=1)
    priority: GrievancePriority = "low"


class GrievanceStatusUpdate(CamelModel):
    # Checked against the accepted targets in the service, not here,
    # so a bad value maps to "Invalid status provided".
    status: Optional[Any] = None


class Grievance(MongoDocument):
    user_id: str
    subject: str
    details: str
    priority: GrievancePriority = "low"
    status: GrievanceStatus = "Open"
    filed_at: datetime = Field(default_factory=get_current_utc_time)
    resolved_at: Optional[datetime] = None


class GrievanceResponse(CamelModel):
    message: str
    grievance: Grievance
