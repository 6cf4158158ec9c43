"""
API routes for welfare scheme management
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status

from ..database import SCHEMES
from ..dependencies import get_mongo_service
from ..exceptions import RecordNotFoundError
from ..models.common import MessageResponse, get_current_utc_time
from ..models.scheme import Scheme, SchemeCreate, SchemeResponse
from ..services.mongo_service import MongoService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/schemes", tags=["schemes"])


@router.get("", response_model=List[Scheme])
async def get_schemes(mongo: MongoService = Depends(get_mongo_service)):
    """
    Get all schemes
    """
    try:
        return await mongo.list_documents(SCHEMES)

    except Exception as e:
        logger.error(f"Error fetching schemes: {e}")
        raise HTTPException(status_code=500, detail="Server error fetching schemes.")


@router.post("", response_model=SchemeResponse, status_code=status.HTTP_201_CREATED)
async def create_scheme(request: SchemeCreate, mongo: MongoService = Depends(get_mongo_service)):
    """
    Add a new scheme
    """
    try:
        document = request.model_dump(by_alias=True)
        document["createdAt"] = get_current_utc_time()
        scheme = await mongo.insert_document(SCHEMES, document)
        return {"message": "Scheme added successfully", "scheme": scheme}

    except Exception as e:
        logger.error(f"Error adding scheme: {e}")
        raise HTTPException(status_code=500, detail="Server error adding scheme.")


@router.delete("/{scheme_id}", response_model=MessageResponse)
async def delete_scheme(scheme_id: str, mongo: MongoService = Depends(get_mongo_service)):
    """
    Delete a scheme
    """
    try:
        await mongo.delete_document(SCHEMES, scheme_id)
        return MessageResponse(message="Scheme deleted successfully")

    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Scheme not found")
    except Exception as e:
        logger.error(f"Error deleting scheme: {e}")
        raise HTTPException(status_code=500, detail="Server error deleting scheme.")
