"""
MongoDB service for database operations
"""
from typing import List, Optional, Dict, Any
from motor.motor_asyncio import AsyncIOMotorDatabase
from bson import ObjectId
from pymongo import ReturnDocument
import logging

from ..exceptions import RecordNotFoundError

logger = logging.getLogger(__name__)


def to_object_id(record_id: str) -> Optional[ObjectId]:
    """Parse a client-supplied id; None when it cannot be a stored id"""
    if isinstance(record_id, ObjectId):
        return record_id
    if not ObjectId.is_valid(record_id):
        return None
    return ObjectId(record_id)


class MongoService:
    """Single-document operations on the collections of one database"""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def ping(self) -> bool:
        """Check MongoDB connection health"""
        try:
            await self.db.command('ping')
            return True
        except Exception:
            return False

    async def list_documents(self, collection: str, filter_query: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Get all documents matching a filter, in natural order"""
        cursor = self.db[collection].find(filter_query or {})
        documents = []
        async for doc in cursor:
            documents.append(doc)
        return documents

    async def find_document(self, collection: str, filter_query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return await self.db[collection].find_one(filter_query)

    async def count_documents(self, collection: str) -> int:
        return await self.db[collection].count_documents({})

    async def insert_document(self, collection: str, document: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a document and return it with its assigned _id"""
        document = dict(document)
        result = await self.db[collection].insert_one(document)
        document["_id"] = result.inserted_id
        logger.debug(f"Inserted into {collection}: {result.inserted_id}")
        return document

    async def insert_documents(self, collection: str, documents: List[Dict[str, Any]]) -> int:
        result = await self.db[collection].insert_many(documents)
        return len(result.inserted_ids)

    async def update_document(self, collection: str, record_id: str, update: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply an update document ($set / $unset) to one record

        Returns:
            The record as it is after the update

        Raises:
            RecordNotFoundError: no record has that id
        """
        object_id = to_object_id(record_id)
        if object_id is None:
            raise RecordNotFoundError(collection, record_id)

        if not update:
            doc = await self.db[collection].find_one({"_id": object_id})
        else:
            doc = await self.db[collection].find_one_and_update(
                {"_id": object_id},
                update,
                return_document=ReturnDocument.AFTER
            )
        if doc is None:
            raise RecordNotFoundError(collection, record_id)
        return doc

    async def delete_document(self, collection: str, record_id: str) -> Dict[str, Any]:
        """
        Delete one record by id

        Raises:
            RecordNotFoundError: no record has that id
        """
        object_id = to_object_id(record_id)
        if object_id is None:
            raise RecordNotFoundError(collection, record_id)

        doc = await self.db[collection].find_one_and_delete({"_id": object_id})
        if doc is None:
            raise RecordNotFoundError(collection, record_id)
        logger.info(f"Deleted from {collection}: {record_id}")
        return doc
