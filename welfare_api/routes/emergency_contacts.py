"""
API routes for emergency contacts
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status

from ..database import EMERGENCY_CONTACTS
from ..dependencies import get_mongo_service
from ..exceptions import RecordNotFoundError
from ..models.common import MessageResponse, get_current_utc_time
from ..models.emergency_contact import (
    EmergencyContact,
    EmergencyContactCreate,
    EmergencyContactResponse,
    EmergencyContactUpdate
)
from ..services.mongo_service import MongoService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["emergency-contacts"])


@router.get("/users/{user_id}/emergency-contacts", response_model=List[EmergencyContact])
async def get_user_contacts(user_id: str, mongo: MongoService = Depends(get_mongo_service)):
    """
    Get the emergency contacts of one user
    """
    try:
        return await mongo.list_documents(EMERGENCY_CONTACTS, {"userId": user_id})

    except Exception as e:
        logger.error(f"Error fetching emergency contacts: {e}")
        raise HTTPException(status_code=500, detail="Server error fetching emergency contacts.")


@router.post("/emergency-contacts", response_model=EmergencyContactResponse, status_code=status.HTTP_201_CREATED)
async def create_contact(request: EmergencyContactCreate, mongo: MongoService = Depends(get_mongo_service)):
    try:
        document = request.model_dump(by_alias=True)
        document["createdAt"] = get_current_utc_time()
        contact = await mongo.insert_document(EMERGENCY_CONTACTS, document)
        return {"message": "Contact added successfully", "contact": contact}

    except Exception as e:
        logger.error(f"Error adding contact: {e}")
        raise HTTPException(status_code=500, detail="Server error adding contact.")


@router.patch("/emergency-contacts/{contact_id}", response_model=EmergencyContactResponse)
async def update_contact(
    contact_id: str,
    request: EmergencyContactUpdate,
    mongo: MongoService = Depends(get_mongo_service)
):
    try:
        changes = request.model_dump(by_alias=True, exclude_none=True)
        update = {"$set": changes} if changes else {}
        contact = await mongo.update_document(EMERGENCY_CONTACTS, contact_id, update)
        return {"message": "Contact updated successfully", "contact": contact}

    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Contact not found")
    except Exception as e:
        logger.error(f"Error updating contact: {e}")
        raise HTTPException(status_code=500, detail="Server error updating contact.")


@router.delete("/emergency-contacts/{contact_id}", response_model=MessageResponse)
async def delete_contact(contact_id: str, mongo: MongoService = Depends(get_mongo_service)):
    try:
        await mongo.delete_document(EMERGENCY_CONTACTS, contact_id)
        return MessageResponse(message="Contact deleted successfully")

    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Contact not found")
    except Exception as e:
        logger.error(f"Error deleting contact: {e}")
        raise HTTPException(status_code=500, detail="Server error deleting contact.")
