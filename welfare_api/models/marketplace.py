"""
Pydantic models for marketplace listings
"""
from datetime import datetime
from typing import Literal, Optional
from pydantic import Field

from .common import CamelModel, MongoDocument, get_current_utc_time

ListingType = Literal["book", "equipment", "housing"]


class MarketplaceListingCreate(CamelModel):
    user_id: str = Field(..., min_length=1)
    listing_type: ListingType = Field(..., alias="type")
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    contact_info: str = Field(..., min_length=1)


class MarketplaceListingUpdate(CamelModel):
    """Partial update; omitted fields keep their stored value"""
    listing_type: Optional[ListingType] = Field(None, alias="type")
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    contact_info: Optional[str] = Field(None, min_length=1)


class MarketplaceListing(MongoDocument):
    user_id: str
    listing_type: ListingType = Field(..., alias="type")
    title: str
    description: str
    contact_info: str
    posted_at: datetime = Field(default_factory=get_current_utc_time)


class MarketplaceListingResponse(CamelModel):
    message: str
    listing: MarketplaceListing
