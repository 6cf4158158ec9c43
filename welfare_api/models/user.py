"""
Pydantic models for user accounts and authentication
"""
from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

from .common import get_current_utc_time

UserRole = Literal["family", "officer", "admin"]


class RegisterRequest(BaseModel):
    """Registration payload"""
    email: str = Field(..., min_length=1, description="Login email, unique per user")
    password: str = Field(..., min_length=1, description="Plaintext password, hashed before storage")
    role: Optional[UserRole] = Field(None, description="Defaults to 'family'")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "family@example.com",
                "password": "password",
                "role": "family"
            }
        }
    )


class LoginRequest(BaseModel):
    """Login payload"""
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserRecord(BaseModel):
    """User document as written to the users collection"""
    email: str
    password: str
    role: UserRole = "family"
    created_at: datetime = Field(default_factory=get_current_utc_time, serialization_alias="createdAt")


class UserPublic(BaseModel):
    """Identity returned to clients; never carries the password hash"""
    id: str
    email: str
    role: UserRole


class AuthResponse(BaseModel):
    message: str
    user: UserPublic
