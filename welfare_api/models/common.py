"""
Shared pydantic building blocks for documents stored in MongoDB
"""
from datetime import datetime, timezone
from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def get_current_utc_time():
    """Get current UTC time for default values"""
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """Model whose JSON and stored keys are camelCase (userId, createdAt, ...)"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True
    )


class MongoDocument(CamelModel):
    """A document read back from a collection, identified by its ObjectId"""
    id: str = Field(..., alias="_id", description="Store-assigned document id")

    @field_validator('id', mode='before')
    @classmethod
    def validate_object_id(cls, v):
        if isinstance(v, ObjectId):
            return str(v)
        return v


class MessageResponse(BaseModel):
    """Plain acknowledgement"""
    message: str
