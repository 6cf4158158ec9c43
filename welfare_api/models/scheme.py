"""
Pydantic models for welfare schemes
"""
from datetime import datetime
from pydantic import ConfigDict, Field

from .common import CamelModel, MongoDocument, get_current_utc_time


class SchemeCreate(CamelModel):
    """Request to add a welfare scheme"""
    name: str = Field(..., min_length=1, description="Name of the scheme")
    description: str = Field(..., min_length=1, description="What the scheme provides")
    eligibility: str = Field(..., min_length=1, description="Who may apply")
    category: str = Field(..., min_length=1, description="Education, Health, Housing, ...")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Educational Grant",
                "description": "Financial assistance for children's education.",
                "eligibility": "All ranks, minimum 2 years service",
                "category": "Education"
            }
        }
    )


class Scheme(MongoDocument):
    """Scheme stored in MongoDB"""
    name: str
    description: str
    eligibility: str
    category: str
    created_at: datetime = Field(default_factory=get_current_utc_time)


class SchemeResponse(CamelModel):
    message: str
    scheme: Scheme
