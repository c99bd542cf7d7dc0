import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING

from app.core.config import MONGODB_URL, MONGODB_DB_NAME

logger = logging.getLogger(__name__)

# MongoDB client and database
client = AsyncIOMotorClient(MONGODB_URL)
db = client[MONGODB_DB_NAME]

# Collection names
SETS = "sets"
CARDS = "cards"
USER_SETS = "usersets"
LEARNINGS = "learnings"

ALL_COLLECTIONS = (SETS, CARDS, USER_SETS, LEARNINGS)


def get_database() -> AsyncIOMotorDatabase:
    """FastAPI dependency returning the application database.

    Tests override this with an in-memory database.
    """
    return db


async def remove_duplicate_favorites(database: AsyncIOMotorDatabase) -> int:
    """Keep the oldest record of each (user, set) pair and delete the rest.

    Data written before the unique index existed may hold duplicates, which
    would make building that index fail.
    """
    pipeline = [
        {"$sort": {"_id": ASCENDING}},
        {"$group": {
            "_id": {"user": "$user", "set": "$set"},
            "ids": {"$push": "$_id"},
            "count": {"$sum": 1},
        }},
        {"$match": {"count": {"$gt": 1}}},
    ]
    groups = await database[USER_SETS].aggregate(pipeline).to_list(length=None)

    extra_ids = [record_id for group in groups for record_id in group["ids"][1:]]
    if not extra_ids:
        return 0

    result = await database[USER_SETS].delete_many({"_id": {"$in": extra_ids}})
    logger.warning(f"Removed {result.deleted_count} duplicate favorites across {len(groups)} (user, set) pairs")
    return result.deleted_count


async def ensure_indexes(database: AsyncIOMotorDatabase):
    """Create the indexes the services rely on. Safe to call repeatedly."""
    await remove_duplicate_favorites(database)

    # A user may favorite a set only once
    await database[USER_SETS].create_index(
        [("user", ASCENDING), ("set", ASCENDING)],
        unique=True,
        name="user_set_unique",
    )
    await database[USER_SETS].create_index("user")
    await database[CARDS].create_index("set")
    await database[LEARNINGS].create_index("user")
    await database[LEARNINGS].create_index("set")
    await database[SETS].create_index("private")
    logger.info("MongoDB indexes ensured")
