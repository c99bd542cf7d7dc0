from app.core.database import LEARNINGS
from app.repositories.base import MongoRepository, SetReferenceMixin, UserReferenceMixin


class LearningRepository(SetReferenceMixin, UserReferenceMixin, MongoRepository):
    collection_name = LEARNINGS
