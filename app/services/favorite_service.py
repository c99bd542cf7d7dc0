import logging
from typing import Any, Dict, List

from app.core.exceptions import NotFoundError
from app.models.flashcard import UserSetCreate
from app.repositories.base import to_object_id
from app.repositories.sets import SetRepository
from app.repositories.user_sets import UserSetRepository
from app.services.rendering import render_set_inline
from app.utils.serialization import serialize_doc
from app.utils.validation import require_text

logger = logging.getLogger(__name__)


class FavoriteService:
    def __init__(self, sets: SetRepository, user_sets: UserSetRepository):
        self.sets = sets
        self.user_sets = user_sets

    async def add_favorite(self, payload: UserSetCreate) -> Dict[str, Any]:
        """Favorite a set for a user. Raises ConflictError on a repeat."""
        user = require_text(payload.user, "user")
        set_id = to_object_id(payload.set, "set id")

        if not await self.sets.find_by_id(set_id, {"_id": 1}):
            raise NotFoundError("Set not found")

        record = await self.user_sets.insert({"user": user, "set": set_id})
        logger.info(f"User {user} favorited set {set_id}")
        return serialize_doc(record)

    async def list_favorites(self, user: str) -> List[Dict[str, Any]]:
        user = require_text(user, "user")
        records = await self.user_sets.find_by_user(user)
        sets_by_id = await self.sets.find_by_ids(record["set"] for record in records)

        return [
            {
                "id": str(record["_id"]),
                "set": render_set_inline(sets_by_id.get(record["set"])),
            }
            for record in records
        ]
