import logging
from typing import Any, Dict, List, Optional

from app.core.exceptions import NotFoundError
from app.models.flashcard import ImageUpload, SetCreate
from app.repositories.base import to_object_id
from app.repositories.cards import CardRepository
from app.repositories.learnings import LearningRepository
from app.repositories.sets import SetRepository
from app.repositories.user_sets import UserSetRepository
from app.services.rendering import render_set
from app.utils.validation import require_text

logger = logging.getLogger(__name__)


class SetService:
    def __init__(
        self,
        sets: SetRepository,
        cards: CardRepository,
        user_sets: UserSetRepository,
        learnings: LearningRepository,
    ):
        self.sets = sets
        self.cards = cards
        self.user_sets = user_sets
        self.learnings = learnings

    async def create_set(self, payload: SetCreate, image: Optional[ImageUpload] = None) -> Dict[str, Any]:
        """Create a set. ``cards`` starts at 0 and is maintained by card creation."""
        document = {
            "title": require_text(payload.title, "title"),
            "description": require_text(payload.description, "description"),
            "private": payload.private,
            "creator": (payload.creator or "").strip() or "anonymous",
            "cards": 0,
        }
        if image is not None:
            document["image"] = {
                "data": image.data,
                "contentType": image.contentType,
                "filename": image.filename,
            }

        created = await self.sets.insert(document)
        logger.info(f"Created set {created['_id']} '{created['title']}' (private={created['private']})")
        return render_set(created)

    async def list_public_sets(self) -> List[Dict[str, Any]]:
        docs = await self.sets.find_public()
        return [render_set(doc) for doc in docs]

    async def get_set(self, set_id: str) -> Dict[str, Any]:
        doc = await self.sets.find_by_id(to_object_id(set_id, "set id"))
        if not doc:
            raise NotFoundError("Set not found")
        return render_set(doc)

    async def delete_set(self, set_id: str) -> Dict[str, Any]:
        """Delete a set together with its favorites, cards and learnings.

        Dependents go first, so a run that fails midway leaves the set in
        place and can simply be repeated.
        """
        oid = to_object_id(set_id, "set id")
        if not await self.sets.find_by_id(oid, {"_id": 1}):
            raise NotFoundError("Set not found")

        removed_user_sets = await self.user_sets.delete_by_set(oid)
        removed_cards = await self.cards.delete_by_set(oid)
        removed_learnings = await self.learnings.delete_by_set(oid)
        await self.sets.delete(oid)

        logger.info(
            f"Deleted set {oid} with {removed_cards} cards, "
            f"{removed_user_sets} favorites and {removed_learnings} learnings"
        )
        return {"success": True}

    async def recount_cards(self, set_id: str) -> int:
        """Rewrite the denormalized card count from the cards actually stored."""
        oid = to_object_id(set_id, "set id")
        count = await self.cards.count_by_set(oid)
        if not await self.sets.set_card_count(oid, count):
            raise NotFoundError("Set not found")
        logger.info(f"Recounted set {oid}: {count} cards")
        return count
