"""
Services package for the Military Welfare Portal API
"""

from .mongo_service import MongoService
from .auth_service import AuthService
from .grievance_service import GrievanceService
from .seed_service import populate_initial_data

__all__ = [
    "MongoService",
    "AuthService",
    "GrievanceService",
    "populate_initial_data"
]
