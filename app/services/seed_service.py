import logging
from collections import Counter
from typing import Any, Dict, List, Optional

from app.data import seed_catalog
from app.repositories.cards import CardRepository
from app.repositories.learnings import LearningRepository
from app.repositories.sets import SetRepository
from app.repositories.user_sets import UserSetRepository

logger = logging.getLogger(__name__)


class SeedService:
    """Wipe every collection and reload the fixed catalog.

    Destructive and not transactional: if it fails partway the database is
    left half loaded and the seed has to be run again in full.
    """

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

    async def seed_database(
        self,
        catalog_sets: Optional[List[Dict[str, Any]]] = None,
        catalog_cards: Optional[List[Dict[str, Any]]] = None,
    ) -> Dict[str, Any]:
        if catalog_sets is None:
            catalog_sets = seed_catalog.sets
        if catalog_cards is None:
            catalog_cards = seed_catalog.cards_capitals + seed_catalog.cards_programming

        await self.cards.delete_all()
        await self.sets.delete_all()
        await self.user_sets.delete_all()
        await self.learnings.delete_all()
        logger.warning("Cleared sets, cards, usersets and learnings")

        # Catalog ids are dropped, MongoDB assigns fresh ones
        sets_to_create = []
        for catalog_set in catalog_sets:
            set_data = {key: value for key, value in catalog_set.items() if key != "id"}
            set_data.setdefault("private", True)
            set_data["creator"] = "system"
            set_data["cards"] = 0
            sets_to_create.append(set_data)
        created_ids = await self.sets.insert_many(sets_to_create)

        id_mapping = {
            catalog_set["id"]: new_id
            for catalog_set, new_id in zip(catalog_sets, created_ids)
        }

        cards_to_create = [
            {
                "question": card["question"],
                "answer": card["answer"],
                "set": id_mapping[card["set"]],
            }
            for card in catalog_cards
        ]
        await self.cards.insert_many(cards_to_create)

        # Counts are derived here, not incremented: this is a full reset
        counts = Counter(card["set"] for card in cards_to_create)
        for set_id in created_ids:
            await self.sets.set_card_count(set_id, counts.get(set_id, 0))

        logger.info(f"Database seeded: {len(created_ids)} sets and {len(cards_to_create)} cards")
        return {
            "success": True,
            "sets": len(created_ids),
            "cards": len(cards_to_create),
        }
