from app.core.database import CARDS
from app.repositories.base import MongoRepository, SetReferenceMixin

# Fields a study session needs
LEARN_CARD_PROJECTION = {"question": 1, "answer": 1, "image": 1}


class CardRepository(SetReferenceMixin, MongoRepository):
    collection_name = CARDS
