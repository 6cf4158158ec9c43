"""
FastAPI dependencies that hand each request its services
"""
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from .database import get_database
from .services.auth_service import AuthService
from .services.grievance_service import GrievanceService
from .services.mongo_service import MongoService


def get_mongo_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> MongoService:
    return MongoService(db)


def get_auth_service(mongo: MongoService = Depends(get_mongo_service)) -> AuthService:
    return AuthService(mongo)


def get_grievance_service(mongo: MongoService = Depends(get_mongo_service)) -> GrievanceService:
    return GrievanceService(mongo)
