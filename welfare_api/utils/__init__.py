"""
Utility functions for the Military Welfare Portal API
"""

from .security import (
    hash_password,
    verify_password,
    hash_password_async,
    verify_password_async
)

__all__ = [
    "hash_password",
    "verify_password",
    "hash_password_async",
    "verify_password_async"
]
