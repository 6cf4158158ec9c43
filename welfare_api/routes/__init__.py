"""
API routes for the Military Welfare Portal API
"""

from .auth import router as auth_router
from .schemes import router as schemes_router
from .grievances import router as grievances_router
from .marketplace import router as marketplace_router
from .applications import router as applications_router
from .emergency_contacts import router as emergency_contacts_router

__all__ = [
    "auth_router",
    "schemes_router",
    "grievances_router",
    "marketplace_router",
    "applications_router",
    "emergency_contacts_router"
]
