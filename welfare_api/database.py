import logging
from typing import Optional

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING

logger = logging.getLogger(__name__)

USERS = "users"
SCHEMES = "schemes"
APPLICATIONS = "applications"
EMERGENCY_CONTACTS = "emergencycontacts"
MARKETPLACE_LISTINGS = "marketplacelistings"
GRIEVANCES = "grievances"


class MongoDB:
    """Owns the motor client for the lifetime of the application"""

    def __init__(self, url: str, db_name: str):
        self.url = url
        self.db_name = db_name
        self.client: Optional[AsyncIOMotorClient] = None
        self.database: Optional[AsyncIOMotorDatabase] = None

    async def connect(self):
        """Create database connection and verify it with a ping"""
        self.client = AsyncIOMotorClient(self.url, tz_aware=True)
        self.database = self.client[self.db_name]
        await self.client.admin.command('ping')

    async def ensure_indexes(self):
        """Create the indexes the API relies on"""
        await self.database[USERS].create_index([("email", ASCENDING)], unique=True)

    async def close(self):
        """Close database connection"""
        if self.client:
            self.client.close()
            self.client = None


def get_database(request: Request) -> Optional[AsyncIOMotorDatabase]:
    """Database of the MongoDB instance owned by the running app"""
    mongo = getattr(request.app.state, "mongo", None)
    if mongo is None:
        return None
    return mongo.database
