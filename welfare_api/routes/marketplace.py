"""
API routes for marketplace listings
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status

from ..database import MARKETPLACE_LISTINGS
from ..dependencies import get_mongo_service
from ..exceptions import RecordNotFoundError
from ..models.common import MessageResponse, get_current_utc_time
from ..models.marketplace import (
    MarketplaceListing,
    MarketplaceListingCreate,
    MarketplaceListingResponse,
    MarketplaceListingUpdate
)
from ..services.mongo_service import MongoService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/marketplace", tags=["marketplace"])


@router.get("", response_model=List[MarketplaceListing])
async def get_listings(mongo: MongoService = Depends(get_mongo_service)):
    """
    Get all marketplace listings
    """
    try:
        return await mongo.list_documents(MARKETPLACE_LISTINGS)

    except Exception as e:
        logger.error(f"Error fetching marketplace listings: {e}")
        raise HTTPException(status_code=500, detail="Server error fetching marketplace listings.")


@router.post("", response_model=MarketplaceListingResponse, status_code=status.HTTP_201_CREATED)
async def create_listing(request: MarketplaceListingCreate, mongo: MongoService = Depends(get_mongo_service)):
    """
    Post a book, equipment or housing listing
    """
    try:
        document = request.model_dump(by_alias=True)
        document["postedAt"] = get_current_utc_time()
        listing = await mongo.insert_document(MARKETPLACE_LISTINGS, document)
        return {"message": "Marketplace listing added successfully", "listing": listing}

    except Exception as e:
        logger.error(f"Error adding marketplace listing: {e}")
        raise HTTPException(status_code=500, detail="Server error adding marketplace listing.")


@router.patch("/{listing_id}", response_model=MarketplaceListingResponse)
async def update_listing(
    listing_id: str,
    request: MarketplaceListingUpdate,
    mongo: MongoService = Depends(get_mongo_service)
):
    """
    Update the given fields of a listing
    """
    try:
        changes = request.model_dump(by_alias=True, exclude_none=True)
        update = {"$set": changes} if changes else {}
        listing = await mongo.update_document(MARKETPLACE_LISTINGS, listing_id, update)
        return {"message": "Marketplace listing updated successfully", "listing": listing}

    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Marketplace listing not found")
    except Exception as e:
        logger.error(f"Error updating marketplace listing: {e}")
        raise HTTPException(status_code=500, detail="Server error updating marketplace listing.")


@router.delete("/{listing_id}", response_model=MessageResponse)
async def delete_listing(listing_id: str, mongo: MongoService = Depends(get_mongo_service)):
    """
    Remove a listing (sold or withdrawn)
    """
    try:
        await mongo.delete_document(MARKETPLACE_LISTINGS, listing_id)
        return MessageResponse(message="Marketplace listing deleted successfully")

    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Marketplace listing not found")
    except Exception as e:
        logger.error(f"Error deleting marketplace listing: {e}")
        raise HTTPException(status_code=500, detail="Server error deleting marketplace listing.")
