"""
Models package for the Military Welfare Portal API
"""

from .common import (
    CamelModel,
    MongoDocument,
    MessageResponse,
    get_current_utc_time
)

from .user import (
    RegisterRequest,
    LoginRequest,
    UserRecord,
    UserPublic,
    AuthResponse
)

from .scheme import Scheme, SchemeCreate, SchemeResponse
from .application import Application, ApplicationCreate, ApplicationResponse
from .emergency_contact import (
    EmergencyContact,
    EmergencyContactCreate,
    EmergencyContactUpdate,
    EmergencyContactResponse
)
from .marketplace import (
    MarketplaceListing,
    MarketplaceListingCreate,
    MarketplaceListingUpdate,
    MarketplaceListingResponse
)
from .grievance import (
    Grievance,
    GrievanceCreate,
    GrievanceStatusUpdate,
    GrievanceResponse
)

__all__ = [
    # Shared
    "CamelModel",
    "MongoDocument",
    "MessageResponse",
    "get_current_utc_time",

    # User models
    "RegisterRequest",
    "LoginRequest",
    "UserRecord",
    "UserPublic",
    "AuthResponse",

    # Record models
    "Scheme",
    "SchemeCreate",
    "SchemeResponse",
    "Application",
    "ApplicationCreate",
    "ApplicationResponse",
    "EmergencyContact",
    "EmergencyContactCreate",
    "EmergencyContactUpdate",
    "EmergencyContactResponse",
    "MarketplaceListing",
    "MarketplaceListingCreate",
    "MarketplaceListingUpdate",
    "MarketplaceListingResponse",
    "Grievance",
    "GrievanceCreate",
    "GrievanceStatusUpdate",
    "GrievanceResponse"
]
