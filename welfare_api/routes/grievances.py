"""
API routes for grievances
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..database import GRIEVANCES
from ..dependencies import get_grievance_service, get_mongo_service
from ..exceptions import InvalidStatusError, RecordNotFoundError
from ..models.common import get_current_utc_time
from ..models.grievance import Grievance, GrievanceCreate, GrievanceResponse, GrievanceStatusUpdate
from ..services.grievance_service import GrievanceService
from ..services.mongo_service import MongoService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/grievances", tags=["grievances"])


@router.get("", response_model=List[Grievance], response_model_exclude_none=True)
async def get_grievances(
    user_id: Optional[str] = Query(None, alias="userId", description="Only grievances filed by this user"),
    mongo: MongoService = Depends(get_mongo_service)
):
    """
    Get all grievances, optionally for a single user
    """
    try:
        filter_query = {}
        if user_id:
            filter_query["userId"] = user_id
        return await mongo.list_documents(GRIEVANCES, filter_query)

    except Exception as e:
        logger.error(f"Error fetching grievances: {e}")
        raise HTTPException(status_code=500, detail="Server error fetching grievances.")


@router.post("", response_model=GrievanceResponse, response_model_exclude_none=True,
             status_code=status.HTTP_201_CREATED)
async def create_grievance(request: GrievanceCreate, mongo: MongoService = Depends(get_mongo_service)):
    """
    File a grievance. It starts in the Open status.
    """
    try:
        document = request.model_dump(by_alias=True)
        document["status"] = "Open"
        document["filedAt"] = get_current_utc_time()
        grievance = await mongo.insert_document(GRIEVANCES, document)
        return {"message": "Grievance filed successfully", "grievance": grievance}

    except Exception as e:
        logger.error(f"Error filing grievance: {e}")
        raise HTTPException(status_code=500, detail="Server error filing grievance.")


@router.patch("/{grievance_id}/status", response_model=GrievanceResponse, response_model_exclude_none=True)
async def update_grievance_status(
    grievance_id: str,
    request: GrievanceStatusUpdate,
    grievances: GrievanceService = Depends(get_grievance_service)
):
    """
    Move a grievance to In Progress, Resolved or Rejected
    """
    try:
        grievance = await grievances.update_status(grievance_id, request.status)
        return {"message": "Grievance status updated successfully", "grievance": grievance}

    except InvalidStatusError:
        raise HTTPException(status_code=400, detail="Invalid status provided")
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Grievance not found")
    except Exception as e:
        logger.error(f"Error updating grievance status: {e}")
        raise HTTPException(status_code=500, detail="Server error updating grievance status.")
