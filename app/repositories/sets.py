from datetime import datetime
from typing import Any, Dict, Iterable, List

from bson import ObjectId

from app.core.database import SETS
from app.repositories.base import MongoRepository

# Fields returned by the public set listing
PUBLIC_SET_PROJECTION = {"title": 1, "description": 1, "image": 1, "cards": 1}


class SetRepository(MongoRepository):
    collection_name = SETS

    async def find_public(self) -> List[Dict[str, Any]]:
        cursor = self.collection.find({"private": False}, PUBLIC_SET_PROJECTION)
        return await cursor.to_list(length=None)

    async def find_by_ids(self, set_ids: Iterable[ObjectId]) -> Dict[ObjectId, Dict[str, Any]]:
        """Resolve many set references in one query, keyed by ObjectId."""
        unique_ids = list(set(set_ids))
        if not unique_ids:
            return {}
        cursor = self.collection.find({"_id": {"$in": unique_ids}})
        docs = await cursor.to_list(length=None)
        return {doc["_id"]: doc for doc in docs}

    async def increment_cards(self, set_id: ObjectId, amount: int = 1) -> bool:
        result = await self.collection.update_one(
            {"_id": set_id},
            {"$inc": {"cards": amount}, "$set": {"updatedAt": datetime.utcnow()}},
        )
        return result.matched_count == 1

    async def set_card_count(self, set_id: ObjectId, count: int) -> bool:
        result = await self.collection.update_one(
            {"_id": set_id},
            {"$set": {"cards": count, "updatedAt": datetime.utcnow()}},
        )
        return result.matched_count == 1
