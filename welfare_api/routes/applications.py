"""
API routes for scheme applications
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..database import APPLICATIONS
from ..dependencies import get_mongo_service
from ..models.application import Application, ApplicationCreate, ApplicationResponse
from ..models.common import get_current_utc_time
from ..services.mongo_service import MongoService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/applications", tags=["applications"])


@router.get("", response_model=List[Application])
async def get_applications(
    user_id: Optional[str] = Query(None, alias="userId", description="Only applications by this user"),
    mongo: MongoService = Depends(get_mongo_service)
):
    """
    Get all applications, optionally for a single user
    """
    try:
        filter_query = {}
        if user_id:
            filter_query["userId"] = user_id
        return await mongo.list_documents(APPLICATIONS, filter_query)

    except Exception as e:
        logger.error(f"Error fetching applications: {e}")
        raise HTTPException(status_code=500, detail="Server error fetching applications.")


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def create_application(request: ApplicationCreate, mongo: MongoService = Depends(get_mongo_service)):
    """
    Submit an application. New applications are always Pending.
    """
    try:
        document = request.model_dump(by_alias=True, exclude_none=True)
        document["status"] = "Pending"
        document["appliedAt"] = get_current_utc_time()
        application = await mongo.insert_document(APPLICATIONS, document)
        return {"message": "Application submitted successfully", "application": application}

    except Exception as e:
        logger.error(f"Error submitting application: {e}")
        raise HTTPException(status_code=500, detail="Server error submitting application.")
