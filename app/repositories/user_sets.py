from typing import Any, Dict

from pymongo.errors import DuplicateKeyError

from app.core.database import USER_SETS
from app.core.exceptions import ConflictError
from app.repositories.base import MongoRepository, SetReferenceMixin, UserReferenceMixin


class UserSetRepository(SetReferenceMixin, UserReferenceMixin, MongoRepository):
    collection_name = USER_SETS

    async def insert(self, document: Dict[str, Any]) -> Dict[str, Any]:
        # Uniqueness of (user, set) comes from the user_set_unique index
        try:
            return await super().insert(document)
        except DuplicateKeyError as e:
            raise ConflictError("Set already in user favorites") from e
