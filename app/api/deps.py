from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.database import get_database
from app.repositories.cards import CardRepository
from app.repositories.learnings import LearningRepository
from app.repositories.sets import SetRepository
from app.repositories.user_sets import UserSetRepository
from app.services.card_service import CardService
from app.services.favorite_service import FavoriteService
from app.services.learning_service import LearningService
from app.services.seed_service import SeedService
from app.services.set_service import SetService


def get_set_service(database: AsyncIOMotorDatabase = Depends(get_database)) -> SetService:
    return SetService(
        SetRepository(database),
        CardRepository(database),
        UserSetRepository(database),
        LearningRepository(database),
    )


def get_card_service(database: AsyncIOMotorDatabase = Depends(get_database)) -> CardService:
    return CardService(SetRepository(database), CardRepository(database))


def get_favorite_service(database: AsyncIOMotorDatabase = Depends(get_database)) -> FavoriteService:
    return FavoriteService(SetRepository(database), UserSetRepository(database))


def get_learning_service(database: AsyncIOMotorDatabase = Depends(get_database)) -> LearningService:
    return LearningService(SetRepository(database), LearningRepository(database))


def get_seed_service(database: AsyncIOMotorDatabase = Depends(get_database)) -> SeedService:
    return SeedService(
        SetRepository(database),
        CardRepository(database),
        UserSetRepository(database),
        LearningRepository(database),
    )
