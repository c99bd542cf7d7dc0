"""
Thin async wrappers around the Motor collections.

Every document gets ``createdAt``/``updatedAt`` timestamps on insert, and
references between collections are stored as ObjectIds.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.exceptions import ValidationError


def to_object_id(value: Union[str, ObjectId, None], field: str = "id") -> ObjectId:
    """Convert a client supplied id into an ObjectId, or raise ValidationError."""
    if isinstance(value, ObjectId):
        return value
    if not value or not ObjectId.is_valid(value):
        raise ValidationError(f"Invalid {field}")
    return ObjectId(value)


class MongoRepository:
    collection_name: str = ""

    def __init__(self, database: AsyncIOMotorDatabase):
        self.collection = database[self.collection_name]

    async def insert(self, document: Dict[str, Any]) -> Dict[str, Any]:
        now = datetime.utcnow()
        document = {**document, "createdAt": now, "updatedAt": now}
        result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    async def insert_many(self, documents: List[Dict[str, Any]]) -> List[ObjectId]:
        if not documents:
            return []
        now = datetime.utcnow()
        stamped = [{**doc, "createdAt": now, "updatedAt": now} for doc in documents]
        # ordered=True keeps inserted_ids aligned with the input list
        result = await self.collection.insert_many(stamped, ordered=True)
        return list(result.inserted_ids)

    async def find_by_id(self, object_id: ObjectId, projection: Optional[Dict[str, int]] = None) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one({"_id": object_id}, projection)

    async def delete(self, object_id: ObjectId) -> int:
        result = await self.collection.delete_one({"_id": object_id})
        return result.deleted_count

    async def delete_all(self) -> int:
        result = await self.collection.delete_many({})
        return result.deleted_count


class SetReferenceMixin:
    """Queries shared by the collections holding a ``set`` reference."""

    async def find_by_set(self, set_id: ObjectId, projection: Optional[Dict[str, int]] = None) -> List[Dict[str, Any]]:
        cursor = self.collection.find({"set": set_id}, projection)
        return await cursor.to_list(length=None)

    async def count_by_set(self, set_id: ObjectId) -> int:
        return await self.collection.count_documents({"set": set_id})

    async def delete_by_set(self, set_id: ObjectId) -> int:
        result = await self.collection.delete_many({"set": set_id})
        return result.deleted_count


class UserReferenceMixin:
    """Queries shared by the per-user collections."""

    async def find_by_user(self, user: str) -> List[Dict[str, Any]]:
        cursor = self.collection.find({"user": user})
        return await cursor.to_list(length=None)
