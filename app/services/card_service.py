import logging
import random
import time
from typing import Any, Dict, List, Optional

from app.core.config import DEFAULT_CARD_IMAGE_TYPE
from app.core.exceptions import NotFoundError, ValidationError
from app.models.flashcard import CardCreate, ImageUpload
from app.repositories.base import to_object_id
from app.repositories.cards import LEARN_CARD_PROJECTION, CardRepository
from app.repositories.sets import SetRepository
from app.services.rendering import render_card, render_set_inline
from app.utils.media import parse_data_uri
from app.utils.validation import require_text

logger = logging.getLogger(__name__)


class CardService:
    def __init__(self, sets: SetRepository, cards: CardRepository, rng: Optional[random.Random] = None):
        self.sets = sets
        self.cards = cards
        self.rng = rng or random.Random()

    async def create_card(self, payload: CardCreate, upload: Optional[ImageUpload] = None) -> Dict[str, Any]:
        """Create a card and bump its set's card count by one.

        A base64 ``image`` in the payload wins over an uploaded file.
        """
        set_id = to_object_id(payload.set, "set id")
        document = {
            "set": set_id,
            "question": require_text(payload.question, "question"),
            "answer": require_text(payload.answer, "answer"),
        }
        image = self._build_image(payload.image, upload)
        if image:
            document["image"] = image

        if not await self.sets.find_by_id(set_id, {"_id": 1}):
            raise NotFoundError("Set not found")

        card = await self.cards.insert(document)

        # Card insert and counter update are two writes; undo the insert if the second one fails
        try:
            incremented = await self.sets.increment_cards(set_id)
        except Exception:
            logger.error(f"Card count update failed for set {set_id}, removing card {card['_id']}", exc_info=True)
            await self.cards.delete(card["_id"])
            raise
        if not incremented:
            await self.cards.delete(card["_id"])
            raise NotFoundError("Set not found")

        logger.info(f"Created card {card['_id']} in set {set_id}")
        return render_card(card)

    def _build_image(self, image_text: Optional[str], upload: Optional[ImageUpload]) -> Optional[Dict[str, Any]]:
        if image_text and image_text.strip():
            data, content_type = parse_data_uri(image_text)
            if not data:
                return None
            return {
                "data": data,
                "contentType": content_type or DEFAULT_CARD_IMAGE_TYPE,
                "filename": f"{int(time.time() * 1000)}-card-image.png",
            }
        if upload is not None and upload.data:
            return {
                "data": upload.data,
                "contentType": upload.contentType,
                "filename": upload.filename,
            }
        return None

    async def list_cards_for_set(self, set_id: str) -> List[Dict[str, Any]]:
        oid = to_object_id(set_id, "set id")
        cards = await self.cards.find_by_set(oid)
        owner = render_set_inline(await self.sets.find_by_id(oid))

        result = []
        for card in cards:
            rendered = render_card(card)
            rendered["set"] = owner
            result.append(rendered)
        return result

    async def sample_cards_for_learning(self, set_id: str, limit: int) -> List[Dict[str, Any]]:
        """Pick ``limit`` cards of a set uniformly at random, without replacement.

        Every card gets a random sort key and the lowest keys win. There is no
        weighting by past answers. Asking for more cards than the set holds
        returns all of them in random order.
        """
        if limit is None or limit < 0:
            raise ValidationError("limit must be a non-negative integer")

        oid = to_object_id(set_id, "set id")
        cards = await self.cards.find_by_set(oid, LEARN_CARD_PROJECTION)

        keyed = [(self.rng.random(), card) for card in cards]
        keyed.sort(key=lambda item: item[0])
        return [render_card(card) for _, card in keyed[:limit]]
