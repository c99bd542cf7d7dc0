import logging
from typing import Any, Dict, List, Union

from app.core.exceptions import NotFoundError, ValidationError
from app.models.flashcard import LearningCreate
from app.repositories.base import to_object_id
from app.repositories.learnings import LearningRepository
from app.repositories.sets import SetRepository
from app.services.rendering import render_set_inline
from app.utils.serialization import serialize_doc
from app.utils.validation import require_text

logger = logging.getLogger(__name__)


def compute_score(cards_total: int, correct: int) -> Union[int, float]:
    """Percentage of correct answers. ``cards_total`` must be positive.

    Whole percentages come back as int, so 7 of 10 is stored as 70, not 70.0.
    """
    if cards_total <= 0:
        raise ValidationError("cardsTotal must be greater than zero")
    score = correct * 100 / cards_total
    return int(score) if score.is_integer() else score


class LearningService:
    def __init__(self, sets: SetRepository, learnings: LearningRepository):
        self.sets = sets
        self.learnings = learnings

    async def record_learning(self, payload: LearningCreate) -> Dict[str, Any]:
        user = require_text(payload.user, "user")
        set_id = to_object_id(payload.set, "set id")
        if payload.correct < 0 or payload.wrong < 0:
            raise ValidationError("correct and wrong must not be negative")
        score = compute_score(payload.cardsTotal, payload.correct)

        if not await self.sets.find_by_id(set_id, {"_id": 1}):
            raise NotFoundError("Set not found")

        learning = await self.learnings.insert({
            "user": user,
            "set": set_id,
            "cards_total": payload.cardsTotal,
            "cards_correct": payload.correct,
            "cards_wrong": payload.wrong,
            "score": score,
        })
        logger.info(f"Recorded learning for user {user} on set {set_id}: score {score:.1f}")
        return serialize_doc(learning)

    async def list_learnings(self, user: str) -> List[Dict[str, Any]]:
        user = require_text(user, "user")
        records = await self.learnings.find_by_user(user)
        sets_by_id = await self.sets.find_by_ids(record["set"] for record in records)

        result = []
        for record in records:
            rendered = serialize_doc(record)
            rendered["set"] = render_set_inline(sets_by_id.get(record["set"]))
            result.append(rendered)
        return result
